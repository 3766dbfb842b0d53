"""Factory for creating search clients.

Handles provider selection and credential checks.
"""

import logging
from typing import TYPE_CHECKING

from ..errors import MissingCredentialError, UnknownProviderError
from .base import SearchClient, SearchProvider
from .brave_client import BraveClient
from .ddgs_client import DuckDuckGoClient

if TYPE_CHECKING:
    from ..utils.config import Config

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_TIMEOUT = 10


def resolve_provider(
    provider: SearchProvider | str | None,
    brave_api_key: str | None,
) -> SearchProvider:
    """Decide which provider to use.

    Provider selection priority:
    1. Explicit provider argument
    2. Brave (if an API key is present)
    3. DuckDuckGo (free fallback)

    Raises:
        UnknownProviderError: provider is not a recognized name.
    """
    if provider is None or provider == "":
        if brave_api_key:
            logger.debug("Auto-selected Brave (API key configured)")
            return SearchProvider.BRAVE
        logger.debug("Auto-selected DuckDuckGo (free fallback)")
        return SearchProvider.DUCKDUCKGO

    if isinstance(provider, SearchProvider):
        return provider

    try:
        return SearchProvider(provider.strip().lower())
    except ValueError:
        valid = ", ".join(p.value for p in SearchProvider)
        raise UnknownProviderError(
            f"Unknown search provider: '{provider}'. Valid options: {valid}"
        ) from None


def get_search_client(
    provider: SearchProvider | str | None = None,
    brave_api_key: str | None = None,
    config: "Config | None" = None,
) -> SearchClient:
    """Create a search client.

    Args:
        provider: Explicit provider name, or None to auto-select.
        brave_api_key: Brave subscription token, if any. Blank counts as missing.
        config: Application config; supplies the search timeout.

    Returns:
        Configured SearchClient.

    Raises:
        UnknownProviderError: provider is not a recognized name.
        MissingCredentialError: Brave was requested without an API key.
    """
    if brave_api_key is not None and not brave_api_key.strip():
        brave_api_key = None

    selected = resolve_provider(provider, brave_api_key)
    timeout = config.SEARCH_TIMEOUT if config is not None else DEFAULT_SEARCH_TIMEOUT

    if selected == SearchProvider.BRAVE:
        if not brave_api_key:
            raise MissingCredentialError(
                "Brave search provider requires an API key. "
                "Provide via --brave-api-key or BRAVE_API_KEY environment variable."
            )
        return BraveClient(api_key=brave_api_key.strip(), timeout=timeout)

    return DuckDuckGoClient(timeout=timeout)
