"""
Static rule tables: vendor patterns and merchant category codes.
"""

from .vendor_database import (
    VendorEntry,
    AmountAdjustment,
    RuleTableError,
    RELIEF_TYPES,
    VENDOR_DATABASE,
    get_total_pattern_count,
    get_used_categories,
    get_vendors_by_sector,
    check_vendor_database,
    validate_vendor_database,
)
from .mcc_codes import (
    MCCMapping,
    MCC_MAPPINGS,
    MCC_FALLBACK_RANGES,
    lookup_mcc,
    lookup_mcc_with_fallback,
    check_mcc_mappings,
    validate_mcc_mappings,
)

__all__ = [
    # Vendor table
    "VendorEntry",
    "AmountAdjustment",
    "RuleTableError",
    "RELIEF_TYPES",
    "VENDOR_DATABASE",
    "get_total_pattern_count",
    "get_used_categories",
    "get_vendors_by_sector",
    "check_vendor_database",
    "validate_vendor_database",
    # MCC table
    "MCCMapping",
    "MCC_MAPPINGS",
    "MCC_FALLBACK_RANGES",
    "lookup_mcc",
    "lookup_mcc_with_fallback",
    "check_mcc_mappings",
    "validate_mcc_mappings",
]
