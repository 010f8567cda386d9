"""Quality tier classification from free-text titles."""

from typing import NamedTuple, Tuple

from seekarr.models.results import QualityInfo, QualityTier


class QualityRule(NamedTuple):
    tokens: Tuple[str, ...]
    tier: QualityTier
    rank: int


# Checked top to bottom, first match wins. Resolution tokens come before
# source tokens so "1080p BluRay" resolves to 1080p.
QUALITY_RULES: Tuple[QualityRule, ...] = (
    QualityRule(("2160p", "4k", "uhd"), QualityTier.UHD_4K, 5),
    QualityRule(("1080p", "fhd"), QualityTier.FHD_1080P, 4),
    QualityRule(("720p", "hd"), QualityTier.HD_720P, 3),
    QualityRule(("480p", "sd"), QualityTier.SD_480P, 2),
    QualityRule(("bluray", "blu-ray"), QualityTier.BLURAY, 4),
    QualityRule(("web-dl", "webdl"), QualityTier.WEB_DL, 3),
)

UNKNOWN_QUALITY = QualityInfo(tier=QualityTier.UNKNOWN, rank=0)


def classify_quality(name: str) -> QualityInfo:
    """Map a title to its quality tier and rank.

    Matching is a case-insensitive substring test, so "HDTV" counts as
    720p and "UHD" as 4K. Titles without any signal map to Unknown.
    """
    lowered = (name or "").lower()
    for rule in QUALITY_RULES:
        if any(token in lowered for token in rule.tokens):
            return QualityInfo(tier=rule.tier, rank=rule.rank)
    return UNKNOWN_QUALITY


def quality_rank(name: str) -> int:
    """Return only the numeric rank of a title's quality tier."""
    return classify_quality(name).rank
