"""Movie/episode classification and series name derivation."""

import re
from typing import Optional

from seekarr.models.results import ContentKind, ContentType

EPISODE_MARKER = re.compile(
    r"(S\d{1,2}|Season\s*\d{1,2}|E\d{1,2}|Episode\s*\d{1,2})", re.IGNORECASE
)
SEASON_NUMBER = re.compile(r"S(\d{1,2})", re.IGNORECASE)
EPISODE_NUMBER = re.compile(r"E(\d{1,2})", re.IGNORECASE)
SERIES_SUFFIX = re.compile(r"S\d{1,2}E\d{1,2}.*$", re.IGNORECASE)

# Left behind by dotted release names such as "Show.Name.S01E01"
NAME_SEPARATORS = " \t._-"


def _first_number(pattern: re.Pattern, name: str) -> Optional[int]:
    match = pattern.search(name)
    return int(match.group(1)) if match else None


def is_episode_like(name: str) -> bool:
    """True if the title carries any season or episode marker."""
    return EPISODE_MARKER.search(name or "") is not None


def classify_content(name: str) -> ContentType:
    """Decide whether a title is a movie or an episode of a series.

    Season and episode numbers are extracted independently, so an
    episode-like title may come back with only one of them.
    """
    name = name or ""
    if not is_episode_like(name):
        return ContentType(kind=ContentKind.MOVIE)
    return ContentType(
        kind=ContentKind.EPISODE,
        season=_first_number(SEASON_NUMBER, name),
        episode=_first_number(EPISODE_NUMBER, name),
    )


def series_name(name: str) -> str:
    """Strip the SxxEyy marker and everything after it from a title."""
    return SERIES_SUFFIX.sub("", name or "", count=1).strip().rstrip(NAME_SEPARATORS)
