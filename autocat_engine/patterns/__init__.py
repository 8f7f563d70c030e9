"""
Transaction keyword patterns used by the categorisation engine.
"""

from .transaction_patterns import (
    INCOME_PATTERNS,
    DIRECTOR_PATTERNS,
    STAFF_ENTERTAINMENT_KEYWORDS,
    ACCOMMODATION_KEYWORDS,
    EXPENSE_FALLBACK_PATTERNS,
    RECEIPT_PATTERNS,
)

__all__ = [
    "INCOME_PATTERNS",
    "DIRECTOR_PATTERNS",
    "STAFF_ENTERTAINMENT_KEYWORDS",
    "ACCOMMODATION_KEYWORDS",
    "EXPENSE_FALLBACK_PATTERNS",
    "RECEIPT_PATTERNS",
]
