"""
Irish VAT rules: Section 59/60 deductibility, rate selection and VAT arithmetic.
"""

from .irish_vat_rules import (
    VatTreatment,
    TwoThirdsResult,
    determine_vat_treatment,
    apply_two_thirds_rule,
    get_industry_output_rate,
    get_vat_rate_label,
)
from .vat_deductibility import (
    VatDeductibilityResult,
    GrossSplit,
    is_vat_deductible,
    calculate_vat_from_gross,
)

__all__ = [
    "VatTreatment",
    "TwoThirdsResult",
    "determine_vat_treatment",
    "apply_two_thirds_rule",
    "get_industry_output_rate",
    "get_vat_rate_label",
    "VatDeductibilityResult",
    "GrossSplit",
    "is_vat_deductible",
    "calculate_vat_from_gross",
]
