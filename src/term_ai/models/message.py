"""
Pydantic models for the Ollama chat and generate APIs.

Message is the unit of a conversation. It is frozen: the tool loop only ever
appends new messages, it never edits one in place.
"""

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# Conversation Models
# =============================================================================

class FunctionCall(BaseModel):
    """Function name and arguments requested by the model."""
    model_config = ConfigDict(frozen=True)

    index: int | None = None
    name: str
    arguments: Any = Field(default_factory=dict)

    @field_validator("arguments", mode="before")
    @classmethod
    def _decode_string_arguments(cls, value: Any) -> Any:
        # Some OpenAI-style servers send arguments as a JSON string
        if isinstance(value, str):
            try:
                decoded = json.loads(value)
            except json.JSONDecodeError:
                return value
            if isinstance(decoded, dict):
                return decoded
        return value


class ToolCall(BaseModel):
    """A tool invocation issued inside an assistant message."""
    model_config = ConfigDict(frozen=True)

    id: str = ""
    type: str | None = None
    function: FunctionCall

    def __str__(self) -> str:
        return f"ToolCall({self.function.name}, {self.function.arguments})"


class Message(BaseModel):
    """A role-tagged chat message."""
    model_config = ConfigDict(frozen=True)

    role: Literal["system", "user", "assistant", "tool"]
    content: str = ""
    tool_calls: list[ToolCall] | None = None

    @field_validator("content", mode="before")
    @classmethod
    def _none_content_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def has_tool_calls(self) -> bool:
        return bool(self.tool_calls)

    def to_api_format(self) -> dict:
        """Convert to the payload shape expected by /api/chat."""
        return self.model_dump(mode="json", exclude_none=True)


# =============================================================================
# Tool Declaration Models
# =============================================================================

class Function(BaseModel):
    """Schema of a callable function advertised to the model."""
    name: str
    description: str
    parameters: dict[str, Any]


class Tool(BaseModel):
    """A tool declaration in the OpenAI/Ollama function-calling format."""

    type: Literal["function"] = "function"
    function: Function


# =============================================================================
# Request / Response Models
# =============================================================================

class GenerateRequest(BaseModel):
    """Body of POST /api/generate."""
    model: str
    prompt: str
    stream: bool = False


class GenerateResponse(BaseModel):
    """Body returned by /api/generate (extra fields ignored)."""
    response: str


class ChatRequest(BaseModel):
    """Body of POST /api/chat."""
    model: str
    messages: list[Message]
    tools: list[Tool] | None = None
    stream: bool = False

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)


class ChatResponse(BaseModel):
    """Body returned by /api/chat (extra fields ignored)."""
    message: Message
