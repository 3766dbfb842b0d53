import pytest

from term_ai.errors import TransportError
from term_ai.models.message import FunctionCall, Message, ToolCall
from term_ai.search.base import SearchResult
from term_ai.utils.config import Config

ENV_VARS = [
    "BRAVE_API_KEY",
    "TERM_AI_BRAVE_API_KEY",
    "TERM_AI_MODEL",
    "TERM_AI_ENDPOINT",
    "TERM_AI_SEARCH_PROVIDER",
    "TERM_AI_MAX_RESULTS",
    "TERM_AI_MAX_ITERATIONS",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment from leaking into Config."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config():
    return Config(_env_file=None)


def make_tool_call(name="web_search", arguments=None, call_id="call_1"):
    if arguments is None:
        arguments = {"query": "latest node version"}
    return ToolCall(id=call_id, type="function", function=FunctionCall(name=name, arguments=arguments))


def assistant(content="", tool_calls=None):
    return Message(role="assistant", content=content, tool_calls=tool_calls)


class DummyModelClient:
    """Returns canned assistant messages and records each conversation it was sent."""

    def __init__(self, replies):
        self._replies = iter(replies)
        self.calls = []
        self.tools_seen = []

    def chat(self, messages, tools=None):
        self.calls.append(list(messages))
        self.tools_seen.append(tools)
        reply = next(self._replies)
        if isinstance(reply, Exception):
            raise reply
        return reply

    def generate(self, prompt):
        self.calls.append(prompt)
        return next(self._replies)


class LoopingModelClient(DummyModelClient):
    """Asks for a web search on every turn, forever."""

    def __init__(self):
        super().__init__([])

    def chat(self, messages, tools=None):
        self.calls.append(list(messages))
        self.tools_seen.append(tools)
        return assistant(tool_calls=[make_tool_call(call_id=f"call_{len(self.calls)}")])


class DummySearchClient:
    def __init__(self, results=None, error=None, provider_name="duckduckgo"):
        self.results = results if results is not None else [
            SearchResult(title="Node.js 22", url="https://nodejs.org", snippet="Download Node.js"),
        ]
        self.error = error
        self.provider_name = provider_name
        self.queries = []

    def name(self):
        return self.provider_name

    def search(self, query, max_results):
        self.queries.append((query, max_results))
        if self.error is not None:
            raise self.error
        return self.results[:max_results]


@pytest.fixture
def search_client():
    return DummySearchClient()


@pytest.fixture
def failing_search_client():
    return DummySearchClient(error=TransportError("DuckDuckGo returned status: 503"))
