"""DuckDuckGo search client.

Scrapes the JavaScript-free HTML endpoint, so no API key is needed.
"""

import logging
from typing import Optional

import requests
from bs4 import BeautifulSoup
from bs4.element import Tag

from ..errors import TransportError
from .base import DEFAULT_USER_AGENT, SearchProvider, SearchResult

logger = logging.getLogger(__name__)

DUCKDUCKGO_HTML_URL = "https://html.duckduckgo.com/html/"

RESULT_SELECTOR = ".result"
TITLE_SELECTOR = ".result__title"
URL_SELECTOR = ".result__url"
SNIPPET_SELECTOR = ".result__snippet"


def _select_text(block: Tag, selector: str) -> str:
    element = block.select_one(selector)
    if element is None:
        return ""
    return element.get_text().strip()


def parse_results(html: str, max_results: int) -> list[SearchResult]:
    """Extract search results from a DuckDuckGo HTML results page.

    Blocks missing a title or url are skipped and do not count toward
    max_results. Document order is preserved.
    """
    results: list[SearchResult] = []
    if max_results <= 0:
        return results

    soup = BeautifulSoup(html, "lxml")
    for block in soup.select(RESULT_SELECTOR):
        title = _select_text(block, TITLE_SELECTOR)
        url = _select_text(block, URL_SELECTOR)
        if not title or not url:
            continue

        results.append(SearchResult(
            title=title,
            url=url,
            snippet=_select_text(block, SNIPPET_SELECTOR),
        ))
        if len(results) >= max_results:
            break

    return results


class DuckDuckGoClient:
    """Search client backed by html.duckduckgo.com."""

    def __init__(self, timeout: float = 10, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self.session = session or requests.Session()

    def name(self) -> str:
        return SearchProvider.DUCKDUCKGO.value

    def search(self, query: str, max_results: int) -> list[SearchResult]:
        """Search DuckDuckGo.

        Args:
            query: Search query.
            max_results: Maximum number of results to return.

        Returns:
            Results in page order.

        Raises:
            TransportError: Connection failure, timeout or non-2xx status.
        """
        if max_results <= 0:
            return []

        try:
            response = self.session.get(
                DUCKDUCKGO_HTML_URL,
                params={"q": query},
                headers={"User-Agent": DEFAULT_USER_AGENT},
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(f"DuckDuckGo request failed: {e}") from e

        if not response.ok:
            raise TransportError(f"DuckDuckGo returned status: {response.status_code}")

        results = parse_results(response.text, max_results)
        logger.info(f"DuckDuckGo search '{query}' returned {len(results)} results")
        return results
