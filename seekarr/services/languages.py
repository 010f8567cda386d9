"""Audio language detection from free-text titles."""

import re
from typing import FrozenSet, Iterable, NamedTuple, Tuple

from seekarr.models.results import Language


class LanguageRule(NamedTuple):
    pattern: re.Pattern
    language: Language


def _rule(alternatives: Iterable[str], language: Language) -> LanguageRule:
    joined = "|".join(
        r"\s+".join(re.escape(word) for word in alt.split()) for alt in alternatives
    )
    return LanguageRule(re.compile(rf"\b(?:{joined})\b", re.IGNORECASE), language)


LANGUAGE_RULES: Tuple[LanguageRule, ...] = (
    _rule(
        (
            "multi audio",
            "multi-audio",
            "dual audio",
            "dual-audio",
            "multi-lang",
            "multi language",
            "multi",
        ),
        Language.MULTI,
    ),
    _rule(("english", "eng"), Language.ENGLISH),
    _rule(("hindi", "hin"), Language.HINDI),
    _rule(("spanish", "spa"), Language.SPANISH),
    _rule(("french", "fre", "fra"), Language.FRENCH),
    _rule(("german", "ger", "deu"), Language.GERMAN),
    _rule(("japanese", "jpn"), Language.JAPANESE),
    _rule(("korean", "kor"), Language.KOREAN),
    _rule(("chinese", "chi", "zho"), Language.CHINESE),
    _rule(("tamil", "tam"), Language.TAMIL),
    _rule(("telugu", "tel"), Language.TELUGU),
)

MULTI_ONLY: FrozenSet[Language] = frozenset({Language.MULTI})
UNKNOWN_ONLY: FrozenSet[Language] = frozenset({Language.UNKNOWN})


def extract_languages(name: str) -> FrozenSet[Language]:
    """Collect every audio language mentioned in a title.

    A multi-audio marker overrides everything else and yields {Multi}.
    Titles without any language yield {Unknown}.
    """
    name = name or ""
    detected = {rule.language for rule in LANGUAGE_RULES if rule.pattern.search(name)}
    if Language.MULTI in detected:
        return MULTI_ONLY
    if not detected:
        return UNKNOWN_ONLY
    return frozenset(detected)


def language_label(languages: Iterable[Language]) -> str:
    """Single display label for a language set."""
    tags = sorted(set(languages), key=lambda lang: lang.value)
    if not tags:
        return Language.UNKNOWN.value
    if len(tags) > 1:
        return Language.MULTI.value
    return tags[0].value
