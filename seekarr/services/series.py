"""Series aggregation: group episode results into season/episode/quality maps."""

import logging
from typing import Dict, Iterable, List, Union

from seekarr.models.results import (
    ClassifiedResult,
    RawResult,
    SeriesEpisode,
    SeriesInfo,
)
from seekarr.services.content_type import classify_content, series_name
from seekarr.services.quality import classify_quality

logger = logging.getLogger(__name__)


class SeriesAggregator:
    """Builds SeriesInfo aggregates incrementally from episode results.

    Series are keyed by canonical name and returned in order of first
    appearance. A later result for the same (season, episode, quality)
    replaces the earlier variant.
    """

    def __init__(self) -> None:
        self._series: Dict[str, SeriesInfo] = {}

    def add(self, item: Union[RawResult, ClassifiedResult]) -> bool:
        """Add one result, returning False if it is not a complete episode."""
        if isinstance(item, ClassifiedResult):
            raw, content, quality = item.result, item.content, item.quality
        else:
            raw, content, quality = item, classify_content(item.name), None

        if not content.is_aggregatable:
            logger.debug(f"Skipping '{raw.name}': no complete season/episode marker")
            return False

        if quality is None:
            quality = classify_quality(raw.name)

        name = series_name(raw.name)
        series = self._series.get(name)
        if series is None:
            series = SeriesInfo(name=name)
            self._series[name] = series

        episodes = series.seasons.setdefault(content.season, {})
        variants = episodes.setdefault(content.episode, {})
        variants[quality.tier] = SeriesEpisode(
            season=content.season,
            episode=content.episode,
            quality=quality.tier,
            locator=raw.locator,
            size=raw.size,
            source=raw.source,
        )
        series.qualities.add(quality.tier)
        return True

    def add_all(self, items: Iterable[Union[RawResult, ClassifiedResult]]) -> int:
        """Add many results, returning how many were aggregated."""
        return sum(1 for item in items if self.add(item))

    def results(self) -> List[SeriesInfo]:
        return list(self._series.values())


def aggregate_series(
    items: Iterable[Union[RawResult, ClassifiedResult]],
) -> List[SeriesInfo]:
    """Aggregate an ordered sequence of episode results into series."""
    aggregator = SeriesAggregator()
    aggregator.add_all(items)
    return aggregator.results()
