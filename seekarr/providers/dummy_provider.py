"""Dummy provider for offline runs and tests."""

from typing import List

from seekarr.providers.base import ProviderInterface
from seekarr.models.results import RawResult


class DummyProvider(ProviderInterface):
    """A dummy provider that returns fake listings built from the query.

    Covers every movie tier, a dual-audio copy and a few series episodes,
    which is enough to exercise the whole catalog pipeline without a
    network.
    """

    def __init__(self, name: str = "DummyProvider"):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def _result(self, index: int, title: str, size: str) -> RawResult:
        slug = title.replace(" ", ".")
        return RawResult(
            id=f"{self.name}-{index}",
            name=title,
            size=size,
            source=self.name,
            locator=f"magnet:?xt=urn:btih:{index:040d}&dn={slug}",
        )

    async def search(self, query: str) -> List[RawResult]:
        """Return dummy listings for a query."""
        dotted = query.replace(" ", ".")
        titles = [
            (f"{query} 2160p UHD BluRay", "15.00 GB"),
            (f"{query} 1080p BluRay Dual Audio", "8.00 GB"),
            (f"{query} 1080p WEB-DL English", "4.50 GB"),
            (f"{query} 720p WEB-DL", "2.50 GB"),
            (f"{query} 480p DVDRip", "700.00 MB"),
            (f"{dotted}.S01E01.1080p.WEB-DL", "1.20 GB"),
            (f"{dotted}.S01E01.720p.HDTV", "450.00 MB"),
            (f"{dotted}.S01E02.1080p.WEB-DL", "1.25 GB"),
        ]
        return [
            self._result(index, title, size)
            for index, (title, size) in enumerate(titles, start=1)
        ]
