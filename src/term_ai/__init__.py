# Re-export the public API
from .clients.ollama_client import OllamaClient
from .search import BraveClient, DuckDuckGoClient, SearchResult, get_search_client
from .tools.loop import ToolLoop, chat_with_tools

__version__ = "0.2.0"
