"""Catalog pipeline: turn merged provider results into movie and series views."""

import logging
from typing import Collection, List, Optional, Sequence

from seekarr.core.config import get_settings
from seekarr.models.results import (
    CatalogView,
    ClassifiedResult,
    ContentKind,
    RawResult,
)
from seekarr.services.content_type import classify_content
from seekarr.services.languages import extract_languages
from seekarr.services.quality import classify_quality
from seekarr.services.ranking import filter_sources, filter_tiers, rank_results
from seekarr.services.series import aggregate_series

logger = logging.getLogger(__name__)


def classify_result(result: RawResult) -> ClassifiedResult:
    """Annotate a raw result with quality, content type and audio languages."""
    return ClassifiedResult(
        result=result,
        quality=classify_quality(result.name),
        content=classify_content(result.name),
        languages=extract_languages(result.name),
    )


def build_catalog(
    results: Sequence[RawResult],
    query: str,
    sources: Optional[Collection[str]] = None,
) -> CatalogView:
    """Build the tiered movie list and series catalog for one search.

    Results may come from any number of providers and may be short when
    some providers failed.
    """
    if sources is None:
        sources = get_settings().source_filter

    classified = rank_results([classify_result(r) for r in results], query)

    movies: List[ClassifiedResult] = []
    episodes: List[ClassifiedResult] = []
    excluded = 0
    for item in classified:
        if item.content.is_movie:
            movies.append(item)
        elif item.content.is_aggregatable:
            episodes.append(item)
        else:
            excluded += 1
            logger.debug(
                f"Excluding '{item.name}' from {item.source}: "
                f"season={item.content.season} episode={item.content.episode}"
            )

    preferred_view = classified[0].content.kind if classified else ContentKind.MOVIE
    tiered = filter_sources(filter_tiers(movies), sources)
    series = aggregate_series(episodes)

    logger.debug(
        f"Catalog for '{query}': {len(results)} results, {len(tiered)} movies, "
        f"{len(series)} series, {excluded} excluded"
    )

    return CatalogView(
        query=query,
        movies=tiered,
        series=series,
        preferred_view=preferred_view,
        excluded=excluded,
    )
