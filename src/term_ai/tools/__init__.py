"""Tool calling support.

Declares the tools offered to the model, executes the calls it makes and
drives the multi-turn loop until a final answer.
"""

from .definitions import ALL_TOOLS, WEB_SEARCH, WEB_SEARCH_TOOL, ToolSpec, build_tool_definitions
from .executor import ToolExecutor, execute_tool, format_search_results
from .loop import LoopState, ToolLoop, chat_with_tools

__all__ = [
    "ALL_TOOLS",
    "WEB_SEARCH",
    "WEB_SEARCH_TOOL",
    "ToolSpec",
    "build_tool_definitions",
    "ToolExecutor",
    "execute_tool",
    "format_search_results",
    "LoopState",
    "ToolLoop",
    "chat_with_tools",
]
