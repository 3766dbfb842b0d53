from .base import ModelClient
from .ollama_client import OllamaClient

__all__ = ['ModelClient', 'OllamaClient']
