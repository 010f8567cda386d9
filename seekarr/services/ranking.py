"""Ranking and tier filtering for movie results."""

from typing import Collection, Dict, List, Optional, Sequence, Tuple, TypeVar, Union

from seekarr.models.results import ClassifiedResult, QualityTier, RawResult
from seekarr.services.quality import classify_quality

# Tiers kept in the movie view, in output order
MOVIE_TIERS: Tuple[QualityTier, ...] = (
    QualityTier.UHD_4K,
    QualityTier.FHD_1080P,
    QualityTier.HD_720P,
)

ResultT = TypeVar("ResultT", RawResult, ClassifiedResult)


def _quality_rank(item: Union[RawResult, ClassifiedResult]) -> int:
    if isinstance(item, ClassifiedResult):
        return item.quality.rank
    return classify_quality(item.name).rank


def rank_results(results: Sequence[ResultT], query: str) -> List[ResultT]:
    """Sort results best first.

    Priority:
    1. Quality rank, highest first
    2. Exact (case-insensitive) title match with the query
    3. Title, in plain code point order
    """
    query_lower = (query or "").lower()

    def sort_key(item: ResultT) -> Tuple[int, int, str]:
        """Return (-quality_rank, not_exact, name) for an ascending sort."""
        is_exact = item.name.lower() == query_lower
        return (-_quality_rank(item), 0 if is_exact else 1, item.name)

    return sorted(results, key=sort_key)


def filter_tiers(ranked: Sequence[ClassifiedResult]) -> List[ClassifiedResult]:
    """Keep the first (best ranked) result of each movie tier.

    Output order is 4K, 1080p, 720p. Every other tier is dropped and
    tiers without results contribute nothing.
    """
    best: Dict[QualityTier, ClassifiedResult] = {}
    for item in ranked:
        if item.tier in MOVIE_TIERS and item.tier not in best:
            best[item.tier] = item
    return [best[tier] for tier in MOVIE_TIERS if tier in best]


def filter_sources(
    results: Sequence[ResultT], sources: Optional[Collection[str]] = None
) -> List[ResultT]:
    """Keep only results from the given provider sources (all if empty)."""
    if not sources:
        return list(results)
    allowed = set(sources)
    return [r for r in results if r.source in allowed]
