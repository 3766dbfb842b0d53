from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.message import Message, Tool
from ..utils.config import Config


class ModelClient(ABC):
    """Abstract base class for model-serving clients."""

    def __init__(self, model: str, config: Config):
        self.model = model
        self.config = config

    @abstractmethod
    def chat(self, messages: List[Message], tools: Optional[List[Tool]] = None) -> Message:
        """Send the full conversation and return the model's next message.

        Args:
            messages: Conversation history, oldest first.
            tools: Tool declarations to advertise, or None for a plain chat.

        Returns:
            The assistant message, possibly carrying tool calls.
        """
        pass

    @abstractmethod
    def generate(self, prompt: str) -> str:
        """Single-shot completion of one prompt, no conversation state."""
        pass
