"""Tool definitions for native (Ollama) tool calling.

Tools are declared once per run and passed unchanged on every chat call.
"""

from dataclasses import dataclass, field
from typing import Any

from ..models.message import Function, Tool

WEB_SEARCH = "web_search"


@dataclass
class ToolParameter:
    """A parameter for a tool."""
    name: str
    type: str
    description: str
    required: bool = True


@dataclass
class ToolSpec:
    """Definition of a tool that the model can call."""
    name: str
    description: str
    parameters: list[ToolParameter] = field(default_factory=list)

    def to_json_schema(self) -> dict[str, Any]:
        """Build the JSON-schema object describing the parameters."""
        return {
            "type": "object",
            "properties": {
                p.name: {"type": p.type, "description": p.description}
                for p in self.parameters
            },
            "required": [p.name for p in self.parameters if p.required],
        }

    def to_declaration(self) -> Tool:
        return Tool(function=Function(
            name=self.name,
            description=self.description,
            parameters=self.to_json_schema(),
        ))


WEB_SEARCH_TOOL = ToolSpec(
    name=WEB_SEARCH,
    description="Search the web for current information, latest versions, recent documentation, or up-to-date facts. Use this when you need information that may have changed recently or when the user asks about 'latest' or 'current' versions.",
    parameters=[
        ToolParameter(
            name="query",
            type="string",
            description="The search query to execute",
        ),
    ],
)

ALL_TOOLS = [WEB_SEARCH_TOOL]


def build_tool_definitions(tools: list[ToolSpec] | None = None) -> list[Tool]:
    """Build the tool declarations advertised to the model."""
    if tools is None:
        tools = ALL_TOOLS
    return [tool.to_declaration() for tool in tools]


def get_tool_by_name(name: str, tools: list[ToolSpec] | None = None) -> ToolSpec | None:
    """Get a tool definition by name."""
    if tools is None:
        tools = ALL_TOOLS
    for tool in tools:
        if tool.name == name:
            return tool
    return None
