"""
Categorisation configuration.
Confidence levels, matching thresholds and the category/industry groups
the orchestrator uses to decide business vs personal.
"""

CATEGORISATION_CONFIG = {
    # Vendor matching
    "matching": {
        "exact_confidence": 85,
        "fuzzy_confidence": 75,
        "mcc_confidence": 65,
        "fuzzy_threshold": 0.85,
        "min_token_length": 3,
        "min_fuzzy_pattern_length": 4,
    },

    # Industry-aware vendor branch
    "vendor_branch": {
        "aligned_supplier_confidence": 95,
        "tech_mismatch_confidence": 75,
        "trade_mismatch_confidence": 65,
    },

    # Review banding: anything below this is always sent for review
    "review_threshold": 70,
    "min_confidence": 0,
    "max_confidence": 100,

    # Receipt refinement boosts
    "receipt_boosts": {
        "diesel": 15,
        "petrol": 10,
        "materials": 10,
        "tools": 10,
    },

    # User corrections: confirmations needed before a correction is trusted
    "corrections": {
        "min_confirmations": 2,
        "promotion_threshold": 3,
        "confidence_confirmed": 80,
        "confidence_promoted": 90,
    },
}

# Industries whose users buy from builders merchants for work
TRADE_INDUSTRIES = [
    "construction",
    "carpentry_joinery",
    "carpentry",
    "joinery",
    "electrical",
    "plumbing_heating",
    "plumbing",
    "heating",
    "landscaping_groundworks",
    "painting_decorating",
    "manufacturing",
    "maintenance_facilities",
    "trades",
]

TECH_INDUSTRIES = ["technology_it", "technology", "software", "saas", "professional_services"]

# Categories that are a business expense whatever the merchant (substring, case-insensitive)
BUSINESS_CATEGORIES = [
    "Materials",
    "Tools",
    "Software",
    "Phone",
    "Insurance",
    "Bank fees",
    "Consulting & Accounting",
    "Motor/travel",
    "Tolls & Parking",
    "Repairs and Maintenance",
    "Workwear",
    "Training",
    "Office",
    "Equipment",
    "Advertising",
    "Marketing",
    "Fuel",
    "Rent",
    "Cleaning",
    "Labour costs",
    "Sub Con",
    "Wages",
    "Director's Salary",
    "Motor Vehicle Expenses",
]

# Form 11 relief categories and balance-sheet movements: never a business expense
PERSONAL_CATEGORIES = [
    "Medical",
    "Pension",
    "Health Insurance",
    "Charitable",
    "Tuition",
    "Director's Loan Account",
    "Drawings",
    "Dividends",
]

# Categories that suggest a business expense when seen on a director's personal account
BUSINESS_INDICATOR_CATEGORIES = [
    "materials",
    "tools",
    "subcontractor",
    "vehicle expenses",
    "fuel",
    "office",
    "telephone",
    "training",
    "advertising",
    "travel",
    "subsistence",
    "repairs",
    "protective clothing",
    "ppe",
    "workwear",
    "software",
    "subscriptions",
    "equipment",
    "motor",
    "consulting",
]

# Relief tag -> onboarding entitlement that must be present to honour it
RELIEF_ENTITLEMENTS = {
    "medical": "medical_expenses",
    "pension": "pension_contributions",
    "health_insurance": "health_insurance",
    "tuition": "tuition_fees",
    "rent": "rent_mortgage_interest",
    "charitable": "charitable_donations",
}

ACCOUNT_TYPE_LIMITED_COMPANY = "limited_company"
ACCOUNT_TYPE_DIRECTORS_PERSONAL = "directors_personal_tax"
