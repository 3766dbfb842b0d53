import json
import logging
from typing import List, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from term_ai.clients.base import ModelClient
from term_ai.errors import MalformedResponseError, TransportError
from term_ai.models.message import (
    ChatRequest,
    ChatResponse,
    GenerateRequest,
    GenerateResponse,
    Message,
    Tool,
)
from term_ai.utils.config import Config

logger = logging.getLogger(__name__)

ResponseModel = TypeVar("ResponseModel", bound=BaseModel)


class OllamaClient(ModelClient):
    def __init__(self, model: str, config: Config, session: Optional[requests.Session] = None):
        super().__init__(model, config)
        self.base_url = config.ENDPOINT.rstrip("/")
        self.session = session or requests.Session()

    def chat(self, messages: List[Message], tools: Optional[List[Tool]] = None) -> Message:
        """Query /api/chat with the full message history (non-streaming).

        Args:
            messages: Conversation so far.
            tools: Tool declarations; omitted from the payload when None.

        Returns:
            The assistant message from the response body.

        Raises:
            TransportError: Connection failure, timeout or non-2xx status.
            MalformedResponseError: Body is not the expected JSON shape.
        """
        payload = ChatRequest(model=self.model, messages=messages, tools=tools).to_payload()
        data = self._post("/api/chat", payload, ChatResponse, timeout=self.config.CHAT_TIMEOUT)
        return data.message

    def generate(self, prompt: str) -> str:
        """Query /api/generate with a single prompt and return the response text."""
        payload = GenerateRequest(model=self.model, prompt=prompt).model_dump()
        data = self._post("/api/generate", payload, GenerateResponse, timeout=self.config.GENERATE_TIMEOUT)
        return data.response

    def _post(self, path: str, payload: dict, response_model: Type[ResponseModel], timeout: Optional[float]) -> ResponseModel:
        url = f"{self.base_url}{path}"
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Ollama Request Payload ({path}): {json.dumps(payload)}")

        try:
            response = self.session.post(url, json=payload, timeout=timeout)
        except requests.exceptions.ConnectionError as e:
            raise TransportError(f"Could not connect to Ollama server at {self.base_url}. Ensure it is running. ({e})") from e
        except requests.exceptions.Timeout as e:
            raise TransportError(f"Ollama request to {url} timed out after {timeout}s") from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Ollama request failed: {e}") from e

        if not response.ok:
            try:
                error_text = response.text
            except Exception:
                error_text = "Unknown error"
            raise TransportError(f"Ollama returned status {response.status_code}: {error_text or 'Unknown error'}")

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"Ollama returned a non-JSON body from {path}: {e}") from e

        try:
            return response_model.model_validate(data)
        except ValidationError as e:
            raise MalformedResponseError(f"Unexpected response shape from {path}: {e}") from e
