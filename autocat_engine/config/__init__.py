"""
Configuration module for the auto-categorisation engine.

Plain dictionaries for Irish VAT law and categorisation thresholds.
"""

from .vat_config import (
    VAT_RATES,
    DEFAULT_VAT_RATE_KEY,
    VAT_THRESHOLDS,
    DISALLOWED_VAT_CREDITS,
    ALLOWED_VAT_CREDITS,
    MIXED_FUEL_RETAILERS,
    MIXED_RETAILERS_DEDUCTIBILITY,
    EXEMPT_SUPPLIES,
    TWO_THIRDS_THRESHOLD,
    RCT_RULES,
    VAT_FILING,
    INDUSTRY_VAT_RULES,
    BAD_DEBT_RELIEF,
    GIFTS_RULES,
)
from .categorisation_config import (
    CATEGORISATION_CONFIG,
    TRADE_INDUSTRIES,
    TECH_INDUSTRIES,
    BUSINESS_CATEGORIES,
    PERSONAL_CATEGORIES,
    BUSINESS_INDICATOR_CATEGORIES,
    RELIEF_ENTITLEMENTS,
    ACCOUNT_TYPE_LIMITED_COMPANY,
    ACCOUNT_TYPE_DIRECTORS_PERSONAL,
)

__all__ = [
    "VAT_RATES",
    "DEFAULT_VAT_RATE_KEY",
    "VAT_THRESHOLDS",
    "DISALLOWED_VAT_CREDITS",
    "ALLOWED_VAT_CREDITS",
    "MIXED_FUEL_RETAILERS",
    "MIXED_RETAILERS_DEDUCTIBILITY",
    "EXEMPT_SUPPLIES",
    "TWO_THIRDS_THRESHOLD",
    "RCT_RULES",
    "VAT_FILING",
    "INDUSTRY_VAT_RULES",
    "BAD_DEBT_RELIEF",
    "GIFTS_RULES",
    "CATEGORISATION_CONFIG",
    "TRADE_INDUSTRIES",
    "TECH_INDUSTRIES",
    "BUSINESS_CATEGORIES",
    "PERSONAL_CATEGORIES",
    "BUSINESS_INDICATOR_CATEGORIES",
    "RELIEF_ENTITLEMENTS",
    "ACCOUNT_TYPE_LIMITED_COMPANY",
    "ACCOUNT_TYPE_DIRECTORS_PERSONAL",
]
