from .message import FunctionCall, Message, Tool, ToolCall

__all__ = ["FunctionCall", "Message", "Tool", "ToolCall"]
