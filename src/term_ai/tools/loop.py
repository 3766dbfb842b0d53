"""Tool calling loop for model conversations.

Drives the exchange between the model and the tool executor:
1. Query the model with the full conversation and tool declarations
2. If the reply carries tool calls, execute each one in order
3. Append one tool message per call and query the model again
4. Stop on a reply without tool calls, or fail once the iteration cap is hit

The conversation is an append-only list: each turn adds the assistant
message followed by its tool messages, nothing is edited or removed.
"""

import logging
from enum import Enum
from typing import TYPE_CHECKING, Callable

from ..errors import MaxIterationsExceededError
from ..models.message import Message
from ..utils.config import DEFAULT_MAX_ITERATIONS
from ..utils.prompts import build_initial_messages
from .definitions import build_tool_definitions
from .executor import ToolExecutor

if TYPE_CHECKING:
    from ..clients.base import ModelClient
    from ..models.message import Tool
    from ..search.base import SearchClient

logger = logging.getLogger(__name__)


class LoopState(str, Enum):
    AWAITING_MODEL = "awaiting_model"
    EXECUTING_TOOLS = "executing_tools"
    DONE = "done"
    FAILED = "failed"


class ToolLoop:
    """Counted state machine for one tool-enabled conversation."""

    def __init__(
        self,
        client: "ModelClient",
        executor: ToolExecutor,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
    ):
        """
        Args:
            client: Model client used for every chat turn.
            executor: Executes tool calls issued by the model.
            max_iterations: Maximum number of model calls before giving up.
        """
        self.client = client
        self.executor = executor
        self.max_iterations = max_iterations

        self.messages: list[Message] = []
        self.tools: list["Tool"] | None = None
        self.state = LoopState.AWAITING_MODEL
        self.iterations = 0
        self.final_content: str | None = None
        self.error: Exception | None = None
        self._pending: Message | None = None

        self._transitions: dict[LoopState, Callable[[], LoopState]] = {
            LoopState.AWAITING_MODEL: self._await_model,
            LoopState.EXECUTING_TOOLS: self._execute_tools,
        }

    def run(self, messages: list[Message], tools: list["Tool"] | None = None) -> str:
        """Run the loop to completion.

        Args:
            messages: Initial conversation ([system, user]).
            tools: Tool declarations sent on every model call.

        Returns:
            Content of the final assistant message.

        Raises:
            MaxIterationsExceededError: No final answer within max_iterations.
            TermAIError: The model call failed; propagated unchanged.
        """
        self.messages = list(messages)
        self.tools = tools
        self.state = LoopState.AWAITING_MODEL
        self.iterations = 0
        self.final_content = None
        self.error = None
        self._pending = None

        while self.state not in (LoopState.DONE, LoopState.FAILED):
            try:
                self.state = self._transitions[self.state]()
            except Exception as e:
                self.state = LoopState.FAILED
                self.error = e

        if self.state == LoopState.FAILED:
            raise self.error

        return self.final_content

    def _await_model(self) -> LoopState:
        if self.iterations >= self.max_iterations:
            logger.warning(f"Tool loop: max iterations ({self.max_iterations}) reached")
            raise MaxIterationsExceededError(self.max_iterations)

        self.iterations += 1
        if self.iterations > 1:
            logger.debug(f"Tool loop iteration {self.iterations}/{self.max_iterations}")

        reply = self.client.chat(self.messages, self.tools)
        self.messages.append(reply)

        if reply.tool_calls:
            self._pending = reply
            return LoopState.EXECUTING_TOOLS

        logger.debug("No tool calls found - returning final response")
        self.final_content = reply.content
        return LoopState.DONE

    def _execute_tools(self) -> LoopState:
        tool_calls = self._pending.tool_calls
        logger.info("Tool calls: %s", ", ".join(tc.function.name for tc in tool_calls))

        for tool_call in tool_calls:
            result = self.executor.execute_safely(tool_call)
            self.messages.append(Message(role="tool", content=result))

        self._pending = None
        return LoopState.AWAITING_MODEL


def chat_with_tools(
    user_request: str,
    client: "ModelClient",
    search_client: "SearchClient",
    max_results: int = 5,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> str:
    """Run a complete tool-enabled conversation for one request.

    Args:
        user_request: The raw natural-language request.
        client: Model client.
        search_client: Provider backing the web_search tool.
        max_results: Result cap for each search.
        max_iterations: Maximum model calls.

    Returns:
        The model's final answer.
    """
    loop = ToolLoop(
        client=client,
        executor=ToolExecutor(search_client, max_results=max_results),
        max_iterations=max_iterations,
    )
    return loop.run(build_initial_messages(user_request), build_tool_definitions())
