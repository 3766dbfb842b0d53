import argparse
import logging
import sys
from typing import IO, Optional, Sequence

from term_ai.clients.ollama_client import OllamaClient
from term_ai.errors import EmptyInputError, TermAIError
from term_ai.search.factory import get_search_client
from term_ai.tools.loop import chat_with_tools
from term_ai.utils.config import Config
from term_ai.utils.logging import get_console, print_error, setup_logging
from term_ai.utils.prompts import build_prompt

logger = logging.getLogger(__name__)


def parse_arguments(config_obj: Config, argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="term-ai", description="Query a local Ollama server for shell commands")
    parser.add_argument("prompt", nargs="?", default=None, metavar="PROMPT", help="The natural language request for commands (read from stdin when omitted)")
    parser.add_argument("-m", "--model", type=str, default=config_obj.MODEL, help=f"Model name to use (default: {config_obj.MODEL}, or use TERM_AI_MODEL env var)")
    parser.add_argument("-e", "--endpoint", type=str, default=config_obj.ENDPOINT, help=f"Ollama endpoint URL (default: {config_obj.ENDPOINT})")
    parser.add_argument("-w", "--websearch", "--ws", action="store_true", help="Enable websearch capabilities using tool calling")
    parser.add_argument("--search-provider", type=str, default=config_obj.SEARCH_PROVIDER, metavar="PROVIDER", help="Search provider to use (duckduckgo or brave). Auto-detects brave if BRAVE_API_KEY is set.")
    parser.add_argument("--brave-api-key", type=str, default=config_obj.brave_api_key, metavar="KEY", help="Brave API key (or use BRAVE_API_KEY environment variable)")
    parser.add_argument("--max-results", type=int, default=config_obj.MAX_RESULTS, help=f"Maximum number of search results to return (default: {config_obj.MAX_RESULTS})")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output on stderr")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging output.")
    return parser.parse_args(argv)


def get_user_prompt(cli_prompt: Optional[str], stdin: Optional[IO[str]] = None) -> str:
    """Return the prompt argument, or all of stdin (trimmed) when it is absent.

    Raises:
        EmptyInputError: stdin was empty or whitespace only.
    """
    if cli_prompt is not None:
        return cli_prompt

    stream = stdin if stdin is not None else sys.stdin
    trimmed = stream.read().strip()
    if not trimmed:
        raise EmptyInputError("No prompt provided via argument or stdin")
    return trimmed


def apply_args_to_config(args: argparse.Namespace, config_obj: Config) -> None:
    """Let command-line flags override environment/.env values for this run."""
    config_obj.MODEL = args.model
    config_obj.ENDPOINT = args.endpoint
    config_obj.SEARCH_PROVIDER = args.search_provider
    config_obj.BRAVE_API_KEY = args.brave_api_key
    config_obj.MAX_RESULTS = args.max_results
    config_obj.VERBOSE = args.verbose


def run_app(args: argparse.Namespace, config_obj: Config, stdin: Optional[IO[str]] = None) -> str:
    """Resolve the prompt and run it in websearch or legacy mode.

    Returns:
        The model's final answer.
    """
    user_prompt = get_user_prompt(args.prompt, stdin)
    client = OllamaClient(model=config_obj.MODEL, config=config_obj)

    if not args.websearch:
        logger.info(f"Querying {config_obj.MODEL} at {client.base_url} (legacy mode)")
        return client.generate(build_prompt(user_prompt))

    search_client = get_search_client(
        provider=config_obj.SEARCH_PROVIDER,
        brave_api_key=config_obj.BRAVE_API_KEY,
        config=config_obj,
    )
    logger.info(f"Querying {config_obj.MODEL} at {client.base_url} with {search_client.name()} web search")
    return chat_with_tools(
        user_prompt,
        client=client,
        search_client=search_client,
        max_results=config_obj.MAX_RESULTS,
        max_iterations=config_obj.MAX_ITERATIONS,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    try:
        config_obj = Config()
    except Exception as e:
        # Catch pydantic validation errors from bad environment or .env values
        print_error(f"Error initializing configuration: {e}")
        sys.exit(1)

    args = parse_arguments(config_obj, argv)
    apply_args_to_config(args, config_obj)
    setup_logging(verbose=args.verbose, debug=args.debug)

    try:
        response = run_app(args, config_obj)
    except TermAIError as e:
        print_error(str(e))
        if config_obj.VERBOSE:
            get_console().print_exception()
        sys.exit(1)

    print(response)
    sys.exit(0)
