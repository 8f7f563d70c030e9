"""
Keyword and regex helpers shared by the VAT rules and the orchestrator.

Most keyword families are plain substring checks. A few short words are
only meaningful as whole words and go through ``contains_word``.
"""

import re
from functools import lru_cache
from typing import List, Optional, Sequence


@lru_cache(maxsize=256)
def _word_regex(word: str) -> "re.Pattern":
    return re.compile(rf"\b{re.escape(word)}\b")


def first_keyword(text: str, keywords: Sequence[str]) -> Optional[str]:
    """
    Return the first keyword found as a substring of ``text``.

    Args:
        text: Normalised (lowercase) text
        keywords: Lowercase keywords in priority order

    Returns:
        The matching keyword or None
    """
    for keyword in keywords:
        if keyword in text:
            return keyword
    return None


def contains_any(text: str, keywords: Sequence[str]) -> bool:
    return first_keyword(text, keywords) is not None


def contains_word(text: str, word: str) -> bool:
    """True when ``word`` appears in ``text`` on word boundaries."""
    return _word_regex(word).search(text) is not None


def contains_any_word(text: str, words: Sequence[str]) -> bool:
    return any(contains_word(text, word) for word in words)


def matches_keyword_family(text: str, family: dict) -> bool:
    """
    Check text against a keyword-family dict.

    A family has ``keywords`` (substring) and optionally
    ``word_boundary_keywords`` (whole word) and ``exclusions`` (substrings
    that cancel a match).
    """
    hit = contains_any(text, family.get("keywords", [])) or contains_any_word(
        text, family.get("word_boundary_keywords", [])
    )
    if hit and family.get("exclusions"):
        return not contains_any(text, family["exclusions"])
    return hit


def match_regex_list(text: str, patterns: List[str]) -> Optional[str]:
    """Return the first regex pattern that matches ``text``."""
    for pattern in patterns:
        if re.search(pattern, text):
            return pattern
    return None
