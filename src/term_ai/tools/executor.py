"""Tool executor for model-issued tool calls.

Routes each tool call to its handler and serializes the result back into
text for a tool-role message.
"""

import json
import logging
from typing import Any, Callable, TYPE_CHECKING

from ..errors import MissingParameterError, UnknownToolError
from .definitions import WEB_SEARCH

if TYPE_CHECKING:
    from ..models.message import ToolCall
    from ..search.base import SearchClient, SearchResult

logger = logging.getLogger(__name__)

TOOL_ERROR_PREFIX = "Error executing tool:"


def format_search_results(results: list["SearchResult"]) -> str:
    """Serialize search results as indented JSON (title, url, snippet per entry)."""
    return json.dumps([r.to_dict() for r in results], indent=2, ensure_ascii=False)


def format_tool_error(error: Exception) -> str:
    """Format a failed tool call as the text delivered back to the model."""
    return f"{TOOL_ERROR_PREFIX} {error}"


def _require_string(arguments: Any, name: str) -> str:
    if not isinstance(arguments, dict):
        raise MissingParameterError(f"Missing '{name}' parameter in tool call")
    value = arguments.get(name)
    if not isinstance(value, str):
        raise MissingParameterError(f"Missing '{name}' parameter in tool call")
    return value


class ToolExecutor:
    """Executes tool calls against the selected search client."""

    def __init__(self, search_client: "SearchClient", max_results: int = 5):
        """
        Args:
            search_client: Provider used by the web_search tool.
            max_results: Result cap passed to every search.
        """
        self.search_client = search_client
        self.max_results = max_results

        # Tool dispatch table - maps tool names to handler methods
        self._handlers: dict[str, Callable[["ToolCall"], str]] = {
            WEB_SEARCH: self._execute_web_search,
        }

    @property
    def tool_names(self) -> list[str]:
        return list(self._handlers)

    def execute(self, tool_call: "ToolCall") -> str:
        """Execute a tool call and return its serialized result.

        Raises:
            UnknownToolError: No handler is registered for the name.
            MissingParameterError: A required argument is absent.
            TermAIError: The backing provider failed.
        """
        name = tool_call.function.name
        handler = self._handlers.get(name)
        if handler is None:
            raise UnknownToolError(f"Unknown tool: {name}")

        logger.info(f"Executing tool: {name} with args: {tool_call.function.arguments}")
        return handler(tool_call)

    def execute_safely(self, tool_call: "ToolCall") -> str:
        """Execute a tool call, turning any failure into an error result for the model."""
        try:
            return self.execute(tool_call)
        except Exception as e:
            logger.warning(f"Tool execution failed: {tool_call.function.name}: {e}")
            return format_tool_error(e)

    def _execute_web_search(self, tool_call: "ToolCall") -> str:
        """Execute web_search tool."""
        query = _require_string(tool_call.function.arguments, "query")
        results = self.search_client.search(query, self.max_results)
        logger.info(f"Web search '{query}' via {self.search_client.name()} returned {len(results)} results")
        return format_search_results(results)


def execute_tool(tool_call: "ToolCall", search_client: "SearchClient", max_results: int) -> str:
    """Execute a single tool call without an explicit executor instance."""
    return ToolExecutor(search_client, max_results).execute(tool_call)
