"""Provider base classes and interfaces."""

from abc import ABC, abstractmethod
from typing import List

from seekarr.models.results import RawResult


class ProviderInterface(ABC):
    """Abstract base class for search providers.

    Providers turn a free-text query into a list of RawResult listings.
    They own their transport; the catalog pipeline only sees the merged
    results.
    """

    async def aclose(self) -> None:
        """Release any resources held by the provider."""
        return None

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the unique name of this provider."""
        pass

    @abstractmethod
    async def search(self, query: str) -> List[RawResult]:
        """Search the provider for listings matching a query.

        Args:
            query: The user's search text.

        Returns:
            A list of RawResult objects, with ``source`` set to this provider.
        """
        pass
