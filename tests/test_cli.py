import io
from argparse import Namespace

import pytest

import term_ai.cli as cli_mod
from term_ai.errors import EmptyInputError, MaxIterationsExceededError, TransportError
from term_ai.search.brave_client import BraveClient
from term_ai.search.ddgs_client import DuckDuckGoClient
from term_ai.utils.config import Config


# --- Tests for parse_arguments --- #

def test_parse_arguments_defaults(config):
    args = cli_mod.parse_arguments(config, [])

    assert args.prompt is None
    assert args.model == "llama3.2"
    assert args.endpoint == "http://localhost:11434"
    assert args.websearch is False
    assert args.search_provider is None
    assert args.brave_api_key is None
    assert args.max_results == 5
    assert args.verbose is False
    assert args.debug is False


def test_parse_arguments_all_flags(config):
    args = cli_mod.parse_arguments(config, [
        "install rust", "-m", "qwen2.5", "-e", "http://gpu:11434",
        "--ws", "--search-provider", "brave", "--brave-api-key", "k", "--max-results", "3",
    ])

    assert args.prompt == "install rust"
    assert args.model == "qwen2.5"
    assert args.endpoint == "http://gpu:11434"
    assert args.websearch is True
    assert args.search_provider == "brave"
    assert args.brave_api_key == "k"
    assert args.max_results == 3


@pytest.mark.parametrize("flag", ["-w", "--websearch", "--ws"])
def test_websearch_aliases(config, flag):
    assert cli_mod.parse_arguments(config, [flag, "x"]).websearch is True


def test_parse_arguments_env_defaults(monkeypatch):
    monkeypatch.setenv("TERM_AI_MODEL", "mistral")
    monkeypatch.setenv("BRAVE_API_KEY", "env-key")
    config = Config(_env_file=None)

    args = cli_mod.parse_arguments(config, [])

    assert args.model == "mistral"
    assert args.brave_api_key == "env-key"


# --- Tests for get_user_prompt --- #

def test_get_user_prompt_prefers_argument():
    assert cli_mod.get_user_prompt("  install rust ", io.StringIO("ignored")) == "  install rust "


def test_get_user_prompt_reads_stdin():
    assert cli_mod.get_user_prompt(None, io.StringIO("\n  set up zsh\n\n")) == "set up zsh"


@pytest.mark.parametrize("stdin_text", ["", "   \n\t"])
def test_get_user_prompt_empty_stdin(stdin_text):
    with pytest.raises(EmptyInputError, match="No prompt provided"):
        cli_mod.get_user_prompt(None, io.StringIO(stdin_text))


# --- Tests for run_app --- #

class FakeOllamaClient:
    instances = []

    def __init__(self, model, config):
        self.model = model
        self.config = config
        self.base_url = config.ENDPOINT
        self.prompts = []
        FakeOllamaClient.instances.append(self)

    def generate(self, prompt):
        self.prompts.append(prompt)
        return "brew install rust"


@pytest.fixture
def fake_ollama(monkeypatch):
    FakeOllamaClient.instances = []
    monkeypatch.setattr(cli_mod, "OllamaClient", FakeOllamaClient)
    return FakeOllamaClient


def make_args(**overrides):
    values = dict(prompt="install rust", websearch=False, verbose=False, debug=False)
    values.update(overrides)
    return Namespace(**values)


def test_run_app_legacy_mode(config, fake_ollama):
    result = cli_mod.run_app(make_args(), config)

    assert result == "brew install rust"
    client = fake_ollama.instances[0]
    assert client.model == "llama3.2"
    assert client.prompts[0].endswith("User request:\ninstall rust")


def test_run_app_websearch_mode(config, fake_ollama, monkeypatch):
    captured = {}

    def fake_chat_with_tools(user_prompt, client, search_client, max_results, max_iterations):
        captured.update(prompt=user_prompt, client=client, search=search_client,
                        max_results=max_results, max_iterations=max_iterations)
        return "brew install node"

    monkeypatch.setattr(cli_mod, "chat_with_tools", fake_chat_with_tools)
    config.MAX_RESULTS = 3

    result = cli_mod.run_app(make_args(websearch=True), config)

    assert result == "brew install node"
    assert captured["prompt"] == "install rust"
    assert isinstance(captured["search"], DuckDuckGoClient)
    assert captured["max_results"] == 3
    assert captured["max_iterations"] == 10


def test_run_app_websearch_auto_selects_brave(config, fake_ollama, monkeypatch):
    captured = {}
    monkeypatch.setattr(cli_mod, "chat_with_tools", lambda *a, **kw: captured.update(kw) or "ok")
    config.BRAVE_API_KEY = "k"

    cli_mod.run_app(make_args(websearch=True), config)

    assert isinstance(captured["search_client"], BraveClient)


def test_run_app_reads_stdin(config, fake_ollama):
    cli_mod.run_app(make_args(prompt=None), config, stdin=io.StringIO("update brew\n"))
    assert fake_ollama.instances[0].prompts[0].endswith("update brew")


# --- Tests for main --- #

@pytest.fixture
def isolated_main(monkeypatch, fake_ollama):
    monkeypatch.setattr(cli_mod, "Config", lambda: Config(_env_file=None))
    monkeypatch.setattr(cli_mod, "setup_logging", lambda verbose=False, debug=False: None)


def test_main_success_prints_to_stdout(isolated_main, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli_mod.main(["install rust"])

    assert excinfo.value.code == 0
    out, err = capsys.readouterr()
    assert out == "brew install rust\n"
    assert err == ""


def test_main_applies_cli_overrides(isolated_main, fake_ollama):
    with pytest.raises(SystemExit):
        cli_mod.main(["install rust", "-m", "qwen2.5", "-e", "http://gpu:11434"])

    client = fake_ollama.instances[0]
    assert client.model == "qwen2.5"
    assert client.config.ENDPOINT == "http://gpu:11434"


@pytest.mark.parametrize("error", [
    TransportError("Ollama returned status 500: boom"),
    MaxIterationsExceededError(10),
])
def test_main_error_exits_one(isolated_main, monkeypatch, capsys, error):
    def failing_run_app(args, config_obj):
        raise error

    monkeypatch.setattr(cli_mod, "run_app", failing_run_app)

    with pytest.raises(SystemExit) as excinfo:
        cli_mod.main(["install rust", "-w"])

    assert excinfo.value.code == 1
    out, err = capsys.readouterr()
    assert out == ""
    assert err.startswith("Error:")
    assert str(error).split(":")[0] in err


def test_main_unknown_provider(isolated_main, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli_mod.main(["install rust", "-w", "--search-provider", "bing"])

    assert excinfo.value.code == 1
    assert "Unknown search provider" in capsys.readouterr().err


def test_main_brave_without_key(isolated_main, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli_mod.main(["install rust", "-w", "--search-provider", "brave"])

    assert excinfo.value.code == 1
    assert "requires an API key" in capsys.readouterr().err


def test_main_empty_stdin(isolated_main, monkeypatch, capsys):
    monkeypatch.setattr(cli_mod.sys, "stdin", io.StringIO("   "))

    with pytest.raises(SystemExit) as excinfo:
        cli_mod.main([])

    assert excinfo.value.code == 1
    assert "No prompt provided" in capsys.readouterr().err


def test_main_config_error(monkeypatch, capsys):
    def bad_config():
        raise ValueError("MAX_RESULTS must be an integer")

    monkeypatch.setattr(cli_mod, "Config", bad_config)

    with pytest.raises(SystemExit) as excinfo:
        cli_mod.main(["x"])

    assert excinfo.value.code == 1
    assert "Error initializing configuration" in capsys.readouterr().err
