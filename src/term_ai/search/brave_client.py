"""Brave Search API client."""

import logging
from typing import Any, Optional

import requests

from ..errors import MalformedResponseError, TransportError
from .base import SearchProvider, SearchResult

logger = logging.getLogger(__name__)

BRAVE_SEARCH_URL = "https://api.search.brave.com/res/v1/web/search"


def parse_results(data: Any, max_results: int) -> list[SearchResult]:
    """Walk web.results[] of a Brave response body.

    Entries without a title or url are skipped and do not count toward
    max_results.
    """
    results: list[SearchResult] = []
    if max_results <= 0 or not isinstance(data, dict):
        return results

    web = data.get("web") or {}
    items = web.get("results") if isinstance(web, dict) else None
    if not isinstance(items, list):
        return results

    for item in items:
        if not isinstance(item, dict):
            continue
        title = item.get("title")
        url = item.get("url")
        if not isinstance(title, str) or not isinstance(url, str) or not title or not url:
            continue

        snippet = item.get("description")
        results.append(SearchResult(
            title=title,
            url=url,
            snippet=snippet if isinstance(snippet, str) else "",
        ))
        if len(results) >= max_results:
            break

    return results


class BraveClient:
    """Search client backed by the Brave Search API (requires a subscription token)."""

    def __init__(self, api_key: str, timeout: float = 10, session: Optional[requests.Session] = None):
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    def name(self) -> str:
        return SearchProvider.BRAVE.value

    def search(self, query: str, max_results: int) -> list[SearchResult]:
        if max_results <= 0:
            return []

        try:
            response = self.session.get(
                BRAVE_SEARCH_URL,
                params={"q": query, "count": max_results},
                headers={
                    "Accept": "application/json",
                    "X-Subscription-Token": self.api_key,
                },
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Brave API request failed: {e}") from e

        if not response.ok:
            raise TransportError(f"Brave API returned status: {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponseError(f"Brave API returned a non-JSON body: {e}") from e

        results = parse_results(data, max_results)
        logger.info(f"Brave search '{query}' returned {len(results)} results")
        return results
