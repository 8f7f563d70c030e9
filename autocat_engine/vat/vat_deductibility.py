"""
VAT deductibility checks.
Applies Irish VAT Section 59/60 rules to decide whether input VAT is recoverable,
and splits gross amounts into net and VAT.
"""

import re
from dataclasses import dataclass
from typing import Optional, Union

from ..categorisation.pattern_matching import contains_any
from ..config.vat_config import (
    DEFAULT_VAT_RATE_KEY,
    DISALLOWED_VAT_CREDITS,
    MIXED_RETAILERS_DEDUCTIBILITY,
    VAT_RATES,
)
from .irish_vat_rules import has_diesel, has_petrol, is_entertainment, is_food_drink_accommodation

FINES_RE = re.compile(r"\bfines?\b")
PENALTIES_RE = re.compile(r"\bpenalt(y|ies)\b")


@dataclass
class VatDeductibilityResult:
    """Whether input VAT is recoverable, and why."""
    is_deductible: bool
    reason: str
    section: Optional[str] = None


@dataclass
class GrossSplit:
    """Net and VAT parts of a gross amount."""
    net_amount: float
    vat_amount: float


def is_vat_deductible(
    description: Optional[str],
    category: Optional[str] = None,
    account: Optional[str] = None,
) -> VatDeductibilityResult:
    """
    Decide whether VAT on an expense is deductible.

    Rules are evaluated in statutory precedence against the description,
    category and account names combined; the first rule that applies wins.

    Args:
        description: Transaction description
        category: Optional category name
        account: Optional account name

    Returns:
        VatDeductibilityResult
    """
    desc = (description or "").lower()
    cat = (category or "").lower()
    combined = f"{desc} {cat} {(account or '').lower()}"

    if is_food_drink_accommodation(combined):
        return VatDeductibilityResult(
            False,
            "Food, drink or accommodation - VAT NOT recoverable",
            DISALLOWED_VAT_CREDITS["food_drink_accommodation"]["section"],
        )

    if is_entertainment(combined):
        return VatDeductibilityResult(
            False,
            "Entertainment expense - VAT NOT recoverable",
            DISALLOWED_VAT_CREDITS["entertainment"]["section"],
        )

    if contains_any(combined, DISALLOWED_VAT_CREDITS["passenger_vehicles"]["keywords"]):
        return VatDeductibilityResult(
            False,
            "Passenger vehicle purchase/hire - VAT NOT recoverable",
            DISALLOWED_VAT_CREDITS["passenger_vehicles"]["section"],
        )

    diesel = has_diesel(combined)
    if has_petrol(combined) and not diesel:
        return VatDeductibilityResult(
            False,
            "Petrol - VAT NOT recoverable (diesel IS deductible)",
            DISALLOWED_VAT_CREDITS["petrol"]["section"],
        )

    if diesel:
        return VatDeductibilityResult(True, "Diesel fuel - VAT IS recoverable")

    if contains_any(combined, MIXED_RETAILERS_DEDUCTIBILITY):
        if "diesel" in combined or ("fuel" in combined and "petrol" not in combined):
            return VatDeductibilityResult(True, "Fuel purchase - VAT recoverable")
        return VatDeductibilityResult(
            False,
            "Mixed retailer - cannot claim VAT without receipt proving diesel",
            "Section 60",
        )

    if contains_any(combined, DISALLOWED_VAT_CREDITS["non_business"]["keywords"]):
        return VatDeductibilityResult(
            False,
            "Non-business expense - VAT NOT recoverable",
            DISALLOWED_VAT_CREDITS["non_business"]["section"],
        )

    if "bank" in combined and ("fee" in combined or "charge" in combined):
        return VatDeductibilityResult(False, "Bank charges - VAT exempt supply, VAT not recoverable")

    if "insurance" in combined and "motor tax" not in combined:
        return VatDeductibilityResult(False, "Insurance - VAT exempt supply, VAT not recoverable")

    if "meals" in cat or cat == "entertainment":
        return VatDeductibilityResult(
            False,
            "Meals & Entertainment - not an allowable tax deduction",
            "Section 60(2)(a)(i)/(iii)",
        )

    # Category names match on substring, descriptions on word boundaries
    if "fine" in cat or "penalt" in cat or FINES_RE.search(desc) or PENALTIES_RE.search(desc):
        return VatDeductibilityResult(False, "Fines & penalties are not allowable tax deductions")

    if "drawing" in cat or "director's draw" in cat or "director's loan" in cat or "directors loan" in cat:
        return VatDeductibilityResult(
            False,
            "Director's Drawings/Loan - capital movement, not a business expense",
        )

    return VatDeductibilityResult(True, "Business expense - VAT recoverable")


def calculate_vat_from_gross(gross_amount: float, rate: Union[str, float, int]) -> GrossSplit:
    """
    Extract VAT from a VAT-inclusive amount.

    Each step is rounded to 2 decimal places: VAT first, then net as
    gross minus the rounded VAT.

    Args:
        gross_amount: VAT-inclusive amount
        rate: Rate key such as "standard_23" (unknown keys use the standard
            rate), or a numeric percentage such as 23 or 13.5

    Returns:
        GrossSplit with net and VAT amounts

    Raises:
        ValueError: If a numeric rate is negative
    """
    if isinstance(rate, str):
        fraction = VAT_RATES.get(rate, VAT_RATES[DEFAULT_VAT_RATE_KEY])["rate"]
    else:
        if rate < 0:
            raise ValueError(f"VAT rate cannot be negative, got {rate}")
        fraction = rate / 100

    if fraction == 0:
        return GrossSplit(net_amount=gross_amount, vat_amount=0.0)

    vat_amount = round(gross_amount * fraction / (1 + fraction), 2)
    net_amount = round(gross_amount - vat_amount, 2)
    return GrossSplit(net_amount=net_amount, vat_amount=vat_amount)
