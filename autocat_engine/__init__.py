"""
AutoCat Engine - Irish bank-transaction auto-categorisation.

Classifies bank-transaction descriptions into accounting categories,
assigns an Irish VAT treatment and decides whether VAT is reclaimable and
whether an expense is a business expense, for Irish sole traders,
contractors and limited companies.

Main Components:
    - rules: Vendor and merchant category code (MCC) rule tables
    - config: Irish VAT law and categorisation thresholds
    - patterns: Keyword families used by the orchestrator
    - categorisation: Vendor matching and the categorisation orchestrator
    - income: Income-side classification (RCT, sales, refunds)
    - vat: Section 59/60 deductibility, rates and the two-thirds rule
"""

from typing import Mapping, Optional

# Core categorisation components
from .categorisation.engine import (
    AutoCategoriser,
    determine_business_expense,
    refine_with_receipt,
)
from .categorisation.models import (
    AutoCatResult,
    BusinessExpense,
    TransactionInput,
)
from .categorisation.vendor_matcher import (
    VendorMatcher,
    VendorMatchResult,
    match_vendor,
    levenshtein_distance,
    similarity,
)
from .categorisation.vendor_cache import (
    VendorCacheEntry,
    load_vendor_cache_csv,
)
from .categorisation.corrections import (
    UserCorrection,
    get_correction_confidence,
)
from .categorisation.category_map import (
    CATEGORY_NAME_MAP,
    find_matching_category,
)

# Income classification
from .income.income_detector import IncomeClassifier

# VAT rules
from .vat.irish_vat_rules import (
    VatTreatment,
    TwoThirdsResult,
    determine_vat_treatment,
    apply_two_thirds_rule,
    get_industry_output_rate,
)
from .vat.vat_deductibility import (
    VatDeductibilityResult,
    GrossSplit,
    is_vat_deductible,
    calculate_vat_from_gross,
)

# Rule tables
from .rules.vendor_database import (
    VendorEntry,
    RuleTableError,
    VENDOR_DATABASE,
)
from .rules.mcc_codes import (
    MCCMapping,
    MCC_MAPPINGS,
    lookup_mcc,
)

# Configuration
from .config.vat_config import (
    VAT_RATES,
    INDUSTRY_VAT_RULES,
)
from .config.categorisation_config import CATEGORISATION_CONFIG


__version__ = "1.0.0"
__all__ = [
    # Categorisation
    "AutoCategoriser",
    "AutoCatResult",
    "BusinessExpense",
    "TransactionInput",
    "determine_business_expense",
    "refine_with_receipt",
    # Vendor matching
    "VendorMatcher",
    "VendorMatchResult",
    "match_vendor",
    "levenshtein_distance",
    "similarity",
    "VendorCacheEntry",
    "load_vendor_cache_csv",
    "UserCorrection",
    "get_correction_confidence",
    # Category names
    "CATEGORY_NAME_MAP",
    "find_matching_category",
    # Income
    "IncomeClassifier",
    # VAT
    "VatTreatment",
    "TwoThirdsResult",
    "determine_vat_treatment",
    "apply_two_thirds_rule",
    "get_industry_output_rate",
    "VatDeductibilityResult",
    "GrossSplit",
    "is_vat_deductible",
    "calculate_vat_from_gross",
    # Rule tables
    "VendorEntry",
    "RuleTableError",
    "VENDOR_DATABASE",
    "MCCMapping",
    "MCC_MAPPINGS",
    "lookup_mcc",
    # Configuration
    "VAT_RATES",
    "INDUSTRY_VAT_RULES",
    "CATEGORISATION_CONFIG",
    # Main function
    "auto_categorise",
]


_default_categoriser: Optional[AutoCategoriser] = None


def auto_categorise(
    tx: TransactionInput,
    vendor_cache: Optional[Mapping[str, VendorCacheEntry]] = None,
    user_corrections: Optional[Mapping[str, UserCorrection]] = None,
) -> AutoCatResult:
    """
    Main entry point: classify one transaction.

    The result depends only on the arguments and the static rule tables, so
    calls are safe to run concurrently.

    Args:
        tx: Transaction to classify
        vendor_cache: Optional snapshot mapping normalised vendor pattern to
            VendorCacheEntry, consulted before the vendor table
        user_corrections: Optional corrections keyed by vendor pattern

    Returns:
        AutoCatResult

    Example:
        >>> tx = TransactionInput(
        ...     amount=-84.50,
        ...     description="POS SCREWFIX IRELAND",
        ...     direction="expense",
        ...     user_industry="carpentry_joinery",
        ... )
        >>> result = auto_categorise(tx)
        >>> result.category, result.confidence_score
        ('Materials', 95)
    """
    global _default_categoriser
    if _default_categoriser is None:
        _default_categoriser = AutoCategoriser()
    return _default_categoriser.categorise(tx, vendor_cache, user_corrections)
