"""Result models shared by the classifiers, aggregators and providers."""

from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Set

from pydantic import BaseModel, ConfigDict, computed_field


class QualityTier(str, Enum):
    """Coarse resolution/source class inferred from a title."""

    UHD_4K = "4K"
    FHD_1080P = "1080p"
    HD_720P = "720p"
    SD_480P = "480p"
    BLURAY = "BluRay"
    WEB_DL = "WEB-DL"
    UNKNOWN = "Unknown"


class Language(str, Enum):
    """Audio language tag detected in a title."""

    MULTI = "Multi"
    ENGLISH = "English"
    HINDI = "Hindi"
    SPANISH = "Spanish"
    FRENCH = "French"
    GERMAN = "German"
    JAPANESE = "Japanese"
    KOREAN = "Korean"
    CHINESE = "Chinese"
    TAMIL = "Tamil"
    TELUGU = "Telugu"
    UNKNOWN = "Unknown"


class ContentKind(str, Enum):
    """Whether a title describes a single movie or a series episode."""

    MOVIE = "movie"
    EPISODE = "episode"


class RawResult(BaseModel):
    """A single listing returned by a provider."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    size: str = "Unknown"
    source: str
    locator: str = ""


class QualityInfo(BaseModel):
    """Quality tier of a title together with its numeric rank."""

    model_config = ConfigDict(frozen=True)

    tier: QualityTier
    rank: int


class ContentType(BaseModel):
    """Content classification of a title.

    Episode-like titles carry whatever season/episode numbers could be
    extracted; either may be missing.
    """

    model_config = ConfigDict(frozen=True)

    kind: ContentKind
    season: Optional[int] = None
    episode: Optional[int] = None

    @property
    def is_movie(self) -> bool:
        return self.kind == ContentKind.MOVIE

    @property
    def is_aggregatable(self) -> bool:
        """True when both season and episode numbers were extracted."""
        return (
            self.kind == ContentKind.EPISODE
            and bool(self.season)
            and bool(self.episode)
        )


class ClassifiedResult(BaseModel):
    """A raw result annotated with everything inferred from its title."""

    model_config = ConfigDict(frozen=True)

    result: RawResult
    quality: QualityInfo
    content: ContentType
    languages: FrozenSet[Language] = frozenset({Language.UNKNOWN})

    @property
    def name(self) -> str:
        return self.result.name

    @property
    def source(self) -> str:
        return self.result.source

    @property
    def tier(self) -> QualityTier:
        return self.quality.tier


class SeriesEpisode(BaseModel):
    """One quality variant of one (season, episode) pair of a series."""

    season: int
    episode: int
    quality: QualityTier
    locator: str
    size: str
    source: str = ""


class SeriesInfo(BaseModel):
    """Aggregate of every episode variant found for one series name."""

    name: str
    seasons: Dict[int, Dict[int, Dict[QualityTier, SeriesEpisode]]] = {}
    qualities: Set[QualityTier] = set()

    @computed_field
    @property
    def total_episodes(self) -> int:
        """Number of distinct (season, episode) pairs with at least one variant."""
        return sum(len(episodes) for episodes in self.seasons.values())

    def season_numbers(self) -> List[int]:
        return sorted(self.seasons)

    def episode_numbers(self, season: int) -> List[int]:
        return sorted(self.seasons.get(season, {}))

    def episode_count(self, season: int) -> int:
        return len(self.seasons.get(season, {}))

    def variants(self, season: int, episode: int) -> Dict[QualityTier, SeriesEpisode]:
        """Return the quality variants of an episode, empty if unknown."""
        return self.seasons.get(season, {}).get(episode, {})


class CatalogView(BaseModel):
    """Final output of one pipeline run."""

    query: str
    movies: List[ClassifiedResult] = []
    series: List[SeriesInfo] = []
    preferred_view: ContentKind = ContentKind.MOVIE
    excluded: int = 0  # Episode-like results dropped for a missing season/episode
