"""Search service for aggregating results from providers."""

import asyncio
import logging
from typing import Collection, List, Optional

from seekarr.core.config import get_settings
from seekarr.models.results import CatalogView, RawResult
from seekarr.providers import ProviderRegistry
from seekarr.providers.base import ProviderInterface
from seekarr.services.catalog import build_catalog

logger = logging.getLogger(__name__)


async def _fetch_from_provider(
    provider: ProviderInterface, query: str, timeout: int
) -> List[RawResult]:
    """Query one provider, degrading any failure to an empty list."""
    try:
        return await asyncio.wait_for(provider.search(query), timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning(f"Timeout searching {provider.name} after {timeout}s")
        return []
    except Exception as e:
        logger.error(f"Error searching {provider.name}: {e}", exc_info=e)
        return []


async def fetch_results(query: str) -> List[RawResult]:
    """Get listings from all providers for a query.

    Providers are queried concurrently; results are merged in registry
    order.
    """
    settings = get_settings()
    timeout = settings.provider_timeout
    providers = ProviderRegistry.all()

    provider_results = await asyncio.gather(
        *[_fetch_from_provider(p, query, timeout) for p in providers]
    )

    results: List[RawResult] = []
    for result_list in provider_results:
        results.extend(result_list)

    return results


async def fetch_single_provider(query: str, provider_name: str) -> List[RawResult]:
    """Get listings from a single provider, empty if it is not registered."""
    settings = get_settings()
    provider = ProviderRegistry.get(provider_name)
    if provider is None:
        logger.warning(f"Unknown provider '{provider_name}'")
        return []
    return await _fetch_from_provider(provider, query, settings.provider_timeout)


async def search(query: str, sources: Optional[Collection[str]] = None) -> CatalogView:
    """Search every provider and build the catalog views for the query."""
    results = await fetch_results(query)
    return build_catalog(results, query, sources=sources)


async def close_providers() -> None:
    """Close every registered provider, logging failures."""
    for provider in ProviderRegistry.all():
        try:
            await provider.aclose()
        except Exception as e:
            logger.error(f"Error closing provider {provider.name}: {e}")
