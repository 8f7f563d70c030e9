"""
Preprocessing utilities for transaction categorisation.
Handles text normalisation, haystack building and token n-grams.
"""

import re
from typing import Iterator, List, Optional


_WHITESPACE_RE = re.compile(r"\s+")
_NON_ALNUM_RE = re.compile(r"[^a-z0-9\s]")


def normalise(text: Optional[str]) -> str:
    """
    Normalise text for matching.

    Args:
        text: Raw text (None is treated as empty)

    Returns:
        Lowercased text with whitespace collapsed and trimmed
    """
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", text.lower()).strip()


def combine_description_merchant(description: Optional[str], merchant_name: Optional[str]) -> str:
    """
    Build the single haystack searched by the vendor matcher.

    Args:
        description: Raw bank description
        merchant_name: Optional merchant name from the bank feed

    Returns:
        Normalised "description merchant" string
    """
    return normalise(f"{description or ''} {merchant_name or ''}")


def tokenise(text: str, min_length: int = 1) -> List[str]:
    """Split normalised text on whitespace, keeping tokens of at least ``min_length`` characters."""
    return [token for token in text.split(" ") if len(token) >= min_length]


def iter_ngrams(tokens: List[str], size: int) -> Iterator[str]:
    """Yield consecutive ``size``-token windows joined by single spaces."""
    for start in range(len(tokens) - size + 1):
        yield " ".join(tokens[start:start + size])


def iter_ngrams_longest_first(tokens: List[str]) -> Iterator[str]:
    """Yield every n-gram, longest first and left to right within a length."""
    for size in range(len(tokens), 0, -1):
        yield from iter_ngrams(tokens, size)


def extract_vendor_pattern(description: Optional[str]) -> str:
    """
    Reduce a description to a stable vendor key.

    Takes the first three alphanumeric tokens of two or more characters.

    Example:
        >>> extract_vendor_pattern("ACME Software Inc")
        'acme software inc'
    """
    cleaned = _NON_ALNUM_RE.sub("", (description or "").lower())
    tokens = [token for token in _WHITESPACE_RE.split(cleaned) if len(token) >= 2]
    return " ".join(tokens[:3]).strip()
