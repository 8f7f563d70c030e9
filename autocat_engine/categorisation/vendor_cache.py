"""
Vendor cache: previously confirmed vendor patterns consulted before the
static vendor table.

The cache itself is owned by the caller; this module only reads it.
"""

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional

from ..config.categorisation_config import CATEGORISATION_CONFIG
from ..rules.vendor_database import VendorEntry
from .preprocess import iter_ngrams_longest_first, normalise, tokenise

_TRUE_VALUES = {"true", "t", "1", "yes", "y"}


@dataclass(frozen=True)
class VendorCacheEntry:
    """A learned vendor pattern with its confirmed classification."""
    vendor_pattern: str
    normalized_name: str
    category: str
    vat_type: str
    vat_deductible: bool
    confidence: int
    business_purpose: Optional[str] = None
    sector: Optional[str] = None

    def to_vendor(self) -> VendorEntry:
        """View the cache entry as a vendor table row."""
        return VendorEntry(
            name=self.normalized_name,
            patterns=[self.vendor_pattern],
            category=self.category,
            vat_type=self.vat_type,
            vat_deductible=self.vat_deductible,
            purpose=self.business_purpose or "",
            sector=self.sector,
        )


def load_vendor_cache_csv(csv_path: str) -> Dict[str, VendorCacheEntry]:
    """
    Load a vendor cache snapshot from CSV.

    Args:
        csv_path: Path to the CSV file

    Returns:
        Dictionary mapping the normalised vendor pattern to its entry

    Example CSV format:
        vendor_pattern,normalized_name,category,vat_type,vat_deductible,business_purpose,confidence,sector
        murphy plant hire,Murphy Plant Hire,Equipment,Standard 23%,true,Plant hire,90,construction
    """
    cache = {}

    csv_file = Path(csv_path)
    if not csv_file.exists():
        raise FileNotFoundError(f"Vendor cache file not found: {csv_path}")

    with open(csv_file, 'r', encoding='utf-8') as f:
        reader = csv.DictReader(f)
        for row in reader:
            pattern = normalise(row.get('vendor_pattern', ''))
            if not pattern:
                continue
            confidence = (row.get('confidence') or '').strip()
            cache[pattern] = VendorCacheEntry(
                vendor_pattern=pattern,
                normalized_name=(row.get('normalized_name') or '').strip() or pattern,
                category=(row.get('category') or '').strip(),
                vat_type=(row.get('vat_type') or '').strip(),
                vat_deductible=(row.get('vat_deductible') or '').strip().lower() in _TRUE_VALUES,
                confidence=int(float(confidence)) if confidence else CATEGORISATION_CONFIG["matching"]["exact_confidence"],
                business_purpose=(row.get('business_purpose') or '').strip() or None,
                sector=(row.get('sector') or '').strip() or None,
            )

    return cache


def find_cache_entry(
    description: Optional[str],
    cache: Optional[Mapping[str, VendorCacheEntry]],
) -> Optional[VendorCacheEntry]:
    """
    Look up a description in the vendor cache.

    Every token n-gram of the normalised description is tried, longest
    first, so the whole description is the first key tried and the most
    specific cached pattern wins.

    Args:
        description: Raw transaction description
        cache: Mapping of normalised pattern to entry (may be empty or None)

    Returns:
        The matching entry or None
    """
    if not cache:
        return None
    tokens = tokenise(normalise(description))
    for ngram in iter_ngrams_longest_first(tokens):
        entry = cache.get(ngram)
        if entry is not None:
            return entry
    return None
