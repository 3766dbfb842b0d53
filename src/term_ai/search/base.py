"""Search capability shared by all web search providers."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

# Browser-like agent; html.duckduckgo.com serves an empty page to bare clients
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
)


class SearchProvider(str, Enum):
    """Recognized search backends."""
    DUCKDUCKGO = "duckduckgo"
    BRAVE = "brave"


@dataclass
class SearchResult:
    """A single web search result."""
    title: str
    url: str
    snippet: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


@runtime_checkable
class SearchClient(Protocol):
    """Capability implemented by every search provider."""

    def name(self) -> str:
        """Provider identifier, e.g. 'duckduckgo'."""
        ...

    def search(self, query: str, max_results: int) -> list[SearchResult]:
        """Return at most max_results results for query, most relevant first."""
        ...
