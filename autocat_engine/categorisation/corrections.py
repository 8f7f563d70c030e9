"""
User corrections.

A correction records that a user re-categorised transactions from one
vendor. It is only trusted once it has been confirmed on at least two
transactions.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional

from ..config.categorisation_config import CATEGORISATION_CONFIG
from .preprocess import extract_vendor_pattern

_CORRECTIONS = CATEGORISATION_CONFIG["corrections"]

# Correction VAT rate (percent) -> VAT-type label
_RATE_LABELS = {
    23: "Standard 23%",
    13.5: "Reduced 13.5%",
    9: "Second Reduced 9%",
    0: "Zero",
}


@dataclass(frozen=True)
class UserCorrection:
    """A user's category correction for one vendor pattern."""
    vendor_pattern: str
    corrected_category: str
    transaction_count: int
    corrected_vat_rate: Optional[float] = None
    original_category: Optional[str] = None
    corrected_category_id: Optional[str] = None
    id: Optional[str] = None
    user_id: Optional[str] = None
    promoted_to_cache: bool = False


def get_correction_confidence(correction: UserCorrection) -> int:
    """
    Confidence earned by a correction.

    Returns:
        90 from three confirmations, 80 for two, 0 (not used) for one
    """
    if correction.transaction_count >= _CORRECTIONS["promotion_threshold"]:
        return _CORRECTIONS["confidence_promoted"]
    if correction.transaction_count >= _CORRECTIONS["min_confirmations"]:
        return _CORRECTIONS["confidence_confirmed"]
    return 0


def correction_vat_type(rate: Optional[float]) -> str:
    """VAT-type label for a corrected VAT rate; "N/A" when no rate was given."""
    if rate is None:
        return "N/A"
    return _RATE_LABELS.get(rate, "Standard 23%")


def index_corrections(corrections: Iterable[Any]) -> Dict[str, UserCorrection]:
    """
    Key corrections by vendor pattern.

    Accepts UserCorrection objects or dicts with the same fields.
    """
    indexed = {}
    for item in corrections:
        correction = item if isinstance(item, UserCorrection) else UserCorrection(
            vendor_pattern=item["vendor_pattern"],
            corrected_category=item["corrected_category"],
            transaction_count=int(item.get("transaction_count", 0)),
            corrected_vat_rate=item.get("corrected_vat_rate"),
            original_category=item.get("original_category"),
            corrected_category_id=item.get("corrected_category_id"),
            id=item.get("id"),
            user_id=item.get("user_id"),
            promoted_to_cache=bool(item.get("promoted_to_cache", False)),
        )
        indexed[correction.vendor_pattern] = correction
    return indexed


def find_correction(
    description: Optional[str],
    corrections: Optional[Mapping[str, UserCorrection]],
) -> Optional[UserCorrection]:
    """Return the confirmed correction for this description's vendor pattern, if any."""
    if not corrections:
        return None
    pattern = extract_vendor_pattern(description)
    if not pattern:
        return None
    correction = corrections.get(pattern)
    if correction is None or get_correction_confidence(correction) == 0:
        return None
    return correction
