"""
Vendor Matching Engine.

Matches a transaction description against the vendor rule table with a
three-phase cascade: exact substring, fuzzy token similarity, then the
merchant category code (MCC) table.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from rapidfuzz.distance import Levenshtein

from ..config.categorisation_config import CATEGORISATION_CONFIG
from ..rules.mcc_codes import MCCMapping, lookup_mcc_with_fallback
from ..rules.vendor_database import VENDOR_DATABASE, VendorEntry
from .preprocess import combine_description_merchant, iter_ngrams, tokenise

logger = logging.getLogger(__name__)

_MATCHING = CATEGORISATION_CONFIG["matching"]

EXACT_CONFIDENCE = _MATCHING["exact_confidence"]
FUZZY_CONFIDENCE = _MATCHING["fuzzy_confidence"]
MCC_CONFIDENCE = _MATCHING["mcc_confidence"]
FUZZY_THRESHOLD = _MATCHING["fuzzy_threshold"]


@dataclass
class VendorMatchResult:
    """Result of vendor matching."""
    vendor: VendorEntry
    match_type: str  # 'exact', 'fuzzy', 'mcc'
    confidence: int
    matched_pattern: Optional[str] = None
    similarity: Optional[float] = None  # fuzzy matches only, 0-1
    # Amount-based overrides, reported next to the base match
    adjusted_category: Optional[str] = None
    adjusted_confidence: Optional[int] = None
    adjusted_purpose: Optional[str] = None
    adjusted_vat_deductible: Optional[bool] = None

    @property
    def has_adjustment(self) -> bool:
        return any(
            value is not None
            for value in (
                self.adjusted_category,
                self.adjusted_confidence,
                self.adjusted_purpose,
                self.adjusted_vat_deductible,
            )
        )


def levenshtein_distance(a: str, b: str) -> int:
    """Edit distance between two strings."""
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """
    Normalised similarity: ``1 - distance / max(len(a), len(b))``.

    Two empty strings are identical (1.0).
    """
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return 1.0 - levenshtein_distance(a, b) / max_len


def vendor_from_mcc(code: int, mapping: MCCMapping) -> VendorEntry:
    """Build a synthetic, pattern-less vendor from an MCC mapping."""
    return VendorEntry(
        name=mapping.description,
        patterns=[],
        category=mapping.category,
        vat_type=mapping.vat_type,
        vat_deductible=mapping.vat_deductible,
        purpose=f"MCC {code}: {mapping.description}. Category assigned by merchant category code.",
        needs_receipt=mapping.needs_receipt,
        is_trade_supplier=mapping.is_trade_supplier,
        relief_type=mapping.relief_type,
    )


class VendorMatcher:
    """Matches descriptions against an ordered vendor table."""

    MIN_TOKEN_LENGTH = _MATCHING["min_token_length"]
    MIN_FUZZY_PATTERN_LENGTH = _MATCHING["min_fuzzy_pattern_length"]

    def __init__(
        self,
        vendors: Optional[Sequence[VendorEntry]] = None,
        mcc_lookup: Callable[[int], Optional[MCCMapping]] = lookup_mcc_with_fallback,
        fuzzy_threshold: float = FUZZY_THRESHOLD,
    ):
        """
        Initialize the matcher.

        Args:
            vendors: Ordered vendor table (defaults to VENDOR_DATABASE)
            mcc_lookup: Function resolving an MCC code to a mapping
            fuzzy_threshold: Minimum similarity (0-1) for a fuzzy match
        """
        self.vendors = list(VENDOR_DATABASE if vendors is None else vendors)
        self.mcc_lookup = mcc_lookup
        self.fuzzy_threshold = fuzzy_threshold

    def match(
        self,
        description: Optional[str],
        merchant_name: Optional[str] = None,
        amount: float = 0.0,
        mcc_code: Optional[int] = None,
    ) -> Optional[VendorMatchResult]:
        """
        Match a transaction against the vendor table.

        Pipeline: exact substring → fuzzy (token Levenshtein) → MCC fallback.

        Args:
            description: Raw transaction description
            merchant_name: Optional merchant name field
            amount: Transaction amount, used by amount adjustments
            mcc_code: Optional merchant category code from the bank feed

        Returns:
            VendorMatchResult, or None when nothing matched
        """
        haystack = combine_description_merchant(description, merchant_name)
        if not haystack:
            return None

        result = self._match_exact(haystack)
        if result is None:
            result = self._match_fuzzy(haystack)
        if result is not None:
            self._apply_amount_adjustment(result, amount)
            logger.debug(
                f"Vendor {result.vendor.name!r} matched ({result.match_type}) on {result.matched_pattern!r}"
            )
            return result

        if mcc_code is not None:
            result = self._match_mcc(mcc_code)
            if result is not None:
                logger.debug(f"MCC {mcc_code} matched {result.vendor.name!r}")
            return result

        return None

    def _match_exact(self, haystack: str) -> Optional[VendorMatchResult]:
        # First pattern in table order wins
        for vendor in self.vendors:
            for pattern in vendor.patterns:
                if pattern in haystack:
                    return VendorMatchResult(
                        vendor=vendor,
                        match_type="exact",
                        confidence=EXACT_CONFIDENCE,
                        matched_pattern=pattern,
                    )
        return None

    def _match_fuzzy(self, haystack: str) -> Optional[VendorMatchResult]:
        tokens = tokenise(haystack, self.MIN_TOKEN_LENGTH)
        if not tokens:
            return None

        best: Optional[VendorMatchResult] = None
        best_similarity = 0.0

        for vendor in self.vendors:
            for pattern in vendor.patterns:
                if len(pattern) < self.MIN_FUZZY_PATTERN_LENGTH:
                    continue
                word_count = len(pattern.split(" "))
                candidates: List[str] = tokens if word_count == 1 else list(iter_ngrams(tokens, word_count))
                for candidate in candidates:
                    score = similarity(candidate, pattern)
                    # Strictly better only, so ties keep the earlier table entry
                    if score >= self.fuzzy_threshold and score > best_similarity:
                        best_similarity = score
                        best = VendorMatchResult(
                            vendor=vendor,
                            match_type="fuzzy",
                            confidence=FUZZY_CONFIDENCE,
                            matched_pattern=pattern,
                            similarity=score,
                        )
        return best

    def _match_mcc(self, mcc_code: int) -> Optional[VendorMatchResult]:
        mapping = self.mcc_lookup(mcc_code)
        if mapping is None:
            return None
        return VendorMatchResult(
            vendor=vendor_from_mcc(mcc_code, mapping),
            match_type="mcc",
            confidence=MCC_CONFIDENCE,
        )

    @staticmethod
    def _apply_amount_adjustment(result: VendorMatchResult, amount: float) -> None:
        adjustment = result.vendor.adjustment_for(amount)
        if adjustment is None:
            return
        result.adjusted_category = adjustment.category
        result.adjusted_confidence = adjustment.confidence
        result.adjusted_purpose = adjustment.purpose
        result.adjusted_vat_deductible = adjustment.vat_deductible


_default_matcher = VendorMatcher()


def match_vendor(
    description: Optional[str],
    merchant_name: Optional[str] = None,
    amount: float = 0.0,
    mcc_code: Optional[int] = None,
) -> Optional[VendorMatchResult]:
    """Match against the built-in vendor and MCC tables."""
    return _default_matcher.match(description, merchant_name, amount, mcc_code)

