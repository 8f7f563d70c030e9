"""
Irish VAT Rules Engine.

Applies the statutory input-credit restrictions of Section 60(2) of the
VAT Consolidation Act 2010 to a free-text description, selects output
rates by industry and implements the two-thirds rule for repairs.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..categorisation.pattern_matching import contains_any, matches_keyword_family
from ..config.vat_config import (
    ALLOWED_VAT_CREDITS,
    DEFAULT_VAT_RATE_KEY,
    DISALLOWED_VAT_CREDITS,
    INDUSTRY_VAT_RULES,
    MIXED_FUEL_RETAILERS,
    TWO_THIRDS_THRESHOLD,
    VAT_RATES,
)

logger = logging.getLogger(__name__)


@dataclass
class VatTreatment:
    """VAT treatment suggested for one transaction."""
    suggested_rate: str
    is_vat_recoverable: bool
    needs_receipt: bool
    explanation: str
    warnings: List[str] = field(default_factory=list)


@dataclass
class TwoThirdsResult:
    """Outcome of the two-thirds rule for a mixed parts/labour supply."""
    applicable_rate: str
    is_service_supply: bool
    explanation: str


def get_vat_rate_label(rate_key: str) -> str:
    """Short VAT-type label ("Standard 23%") for a rate key, defaulting to standard rate."""
    return VAT_RATES.get(rate_key, VAT_RATES[DEFAULT_VAT_RATE_KEY])["vat_type"]


def get_industry_output_rate(industry: Optional[str]) -> str:
    """
    Default output VAT rate key for an industry.

    Args:
        industry: Industry code such as "construction" or "hospitality"

    Returns:
        Rate key, standard rate for an unknown industry
    """
    rules = INDUSTRY_VAT_RULES.get((industry or "").strip().lower())
    if rules is None:
        return DEFAULT_VAT_RATE_KEY
    return rules["default_output_rate"]


def has_diesel(text: str) -> bool:
    return contains_any(text, ALLOWED_VAT_CREDITS["diesel"]["keywords"])


def has_petrol(text: str) -> bool:
    return contains_any(text, DISALLOWED_VAT_CREDITS["petrol"]["keywords"])


def is_food_drink_accommodation(text: str) -> bool:
    return matches_keyword_family(text, DISALLOWED_VAT_CREDITS["food_drink_accommodation"])


def is_entertainment(text: str) -> bool:
    return matches_keyword_family(text, DISALLOWED_VAT_CREDITS["entertainment"])


def apply_two_thirds_rule(parts_value: float, total_value: float) -> TwoThirdsResult:
    """
    Apply the two-thirds rule to a repair or installation.

    Parts below two thirds of the VAT-exclusive total make the whole supply a
    service at 13.5%; two thirds or more make it a supply of goods at 23%.

    Args:
        parts_value: VAT-exclusive cost of parts to the supplier
        total_value: VAT-exclusive total charge

    Returns:
        TwoThirdsResult with the applicable rate key

    Raises:
        ValueError: If total_value is not positive
    """
    if total_value <= 0:
        raise ValueError(f"Total value must be positive, got {total_value}")

    ratio = parts_value / total_value
    share = f"Parts cost (€{parts_value:.2f}) is {ratio * 100:.1f}% of total"

    if ratio < TWO_THIRDS_THRESHOLD:
        return TwoThirdsResult(
            applicable_rate="reduced_13_5",
            is_service_supply=True,
            explanation=f"{share} - less than 2/3, so 13.5% service rate applies",
        )
    return TwoThirdsResult(
        applicable_rate="standard_23",
        is_service_supply=False,
        explanation=f"{share} - 2/3 or more, so 23% goods rate applies",
    )


def determine_vat_treatment(
    description: Optional[str],
    amount: float,
    industry: Optional[str],
    direction: str,
) -> VatTreatment:
    """
    Suggest a VAT treatment from the description alone.

    Expenses are checked against Section 60 in order: food/drink/accommodation,
    entertainment, petrol (unless diesel is also present), diesel, mixed fuel
    retailers. Income gets the industry's default output rate.

    Args:
        description: Raw transaction description
        amount: Transaction amount (absolute value)
        industry: User industry code
        direction: "income" or "expense"

    Returns:
        VatTreatment
    """
    text = (description or "").lower()

    if direction == "expense":
        if is_food_drink_accommodation(text):
            return VatTreatment(
                suggested_rate="standard_23",
                is_vat_recoverable=False,
                needs_receipt=False,
                explanation="Food, drink or accommodation - VAT NOT recoverable under Section 60(2)(a)(i)",
                warnings=["VAT on food/drink/accommodation is never deductible"],
            )

        if is_entertainment(text):
            return VatTreatment(
                suggested_rate="standard_23",
                is_vat_recoverable=False,
                needs_receipt=False,
                explanation="Entertainment expense - VAT NOT recoverable under Section 60(2)(a)(iii)",
                warnings=["VAT on entertainment is never deductible"],
            )

        diesel = has_diesel(text)
        if has_petrol(text) and not diesel:
            return VatTreatment(
                suggested_rate="standard_23",
                is_vat_recoverable=False,
                needs_receipt=True,
                explanation=(
                    "Petrol purchase - VAT NOT recoverable under Section 60(2)(a)(v). "
                    "Note: Diesel IS deductible."
                ),
                warnings=["Only petrol VAT is blocked - diesel VAT is recoverable"],
            )

        if diesel:
            return VatTreatment(
                suggested_rate="standard_23",
                is_vat_recoverable=True,
                needs_receipt=True,
                explanation="Diesel fuel - VAT IS recoverable (unlike petrol)",
            )

        if contains_any(text, MIXED_FUEL_RETAILERS):
            return VatTreatment(
                suggested_rate="standard_23",
                is_vat_recoverable=False,
                needs_receipt=True,
                explanation=(
                    "Fuel station - need receipt to determine if diesel (VAT recoverable) "
                    "or petrol/food (not recoverable)"
                ),
                warnings=["Mixed retailer - cannot claim VAT without receipt proving diesel purchase"],
            )

    if direction == "income":
        rate_key = get_industry_output_rate(industry)
        return VatTreatment(
            suggested_rate=rate_key,
            is_vat_recoverable=False,
            needs_receipt=False,
            explanation=f"Output VAT at {VAT_RATES[rate_key]['label']} for {industry or 'general'}",
        )

    return VatTreatment(
        suggested_rate="standard_23",
        is_vat_recoverable=True,
        needs_receipt=True,
        explanation="Standard rate assumed - verify with receipt",
        warnings=["Verify business purpose and correct VAT rate with receipt"],
    )
