"""Search client abstraction for web search capabilities.

Provides a pluggable search client system supporting two providers:
- DuckDuckGo (free, no API key required, HTML scraping)
- Brave (Brave Search API, requires a subscription token)
"""

from .base import SearchClient, SearchResult, SearchProvider
from .brave_client import BraveClient
from .ddgs_client import DuckDuckGoClient
from .factory import get_search_client, resolve_provider

__all__ = [
    "SearchClient",
    "SearchResult",
    "SearchProvider",
    "BraveClient",
    "DuckDuckGoClient",
    "get_search_client",
    "resolve_provider",
]
