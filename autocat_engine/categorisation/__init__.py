"""
Categorisation Module for the Irish auto-categorisation engine.

Orchestrates transaction classification through:
- Preprocessing (normalisation, tokens, n-grams)
- Pattern matching (keyword, word-boundary and regex)
- Vendor matching (exact, fuzzy, MCC) and the vendor cache
- User corrections and category name resolution
"""

from .engine import AutoCategoriser, determine_business_expense, finalise_result, refine_with_receipt
from .models import AutoCatResult, BusinessExpense, TransactionInput
from .preprocess import (
    normalise,
    combine_description_merchant,
    tokenise,
    iter_ngrams,
    extract_vendor_pattern,
)
from .pattern_matching import (
    contains_any,
    contains_word,
    matches_keyword_family,
    match_regex_list,
)
from .vendor_matcher import (
    VendorMatcher,
    VendorMatchResult,
    match_vendor,
    levenshtein_distance,
    similarity,
)
from .vendor_cache import VendorCacheEntry, load_vendor_cache_csv, find_cache_entry
from .corrections import (
    UserCorrection,
    get_correction_confidence,
    index_corrections,
    find_correction,
)
from .category_map import CATEGORY_NAME_MAP, find_matching_category

__all__ = [
    # Orchestrator
    "AutoCategoriser",
    "determine_business_expense",
    "finalise_result",
    "refine_with_receipt",
    # Models
    "AutoCatResult",
    "BusinessExpense",
    "TransactionInput",
    # Preprocessing utilities
    "normalise",
    "combine_description_merchant",
    "tokenise",
    "iter_ngrams",
    "extract_vendor_pattern",
    # Pattern matching utilities
    "contains_any",
    "contains_word",
    "matches_keyword_family",
    "match_regex_list",
    # Vendor matching
    "VendorMatcher",
    "VendorMatchResult",
    "match_vendor",
    "levenshtein_distance",
    "similarity",
    # Vendor cache
    "VendorCacheEntry",
    "load_vendor_cache_csv",
    "find_cache_entry",
    # Corrections
    "UserCorrection",
    "get_correction_confidence",
    "index_corrections",
    "find_correction",
    # Category names
    "CATEGORY_NAME_MAP",
    "find_matching_category",
]
