"""
Irish VAT configuration.
Rates, thresholds and the Section 59/60 keyword tables of the VAT
Consolidation Act 2010, as used by the VAT rules engine and the orchestrator.
"""

# VAT rates keyed by rate key
# "label" is the long form used in explanations, "vat_type" the short form
# carried on vendor rows and results
VAT_RATES = {
    "standard_23": {
        "rate": 0.23,
        "label": "Standard Rate (23%)",
        "vat_type": "Standard 23%",
        "description": "All other taxable goods and services not listed under other rates",
    },
    "reduced_13_5": {
        "rate": 0.135,
        "label": "Reduced Rate (13.5%)",
        "vat_type": "Reduced 13.5%",
        "description": "Construction labour, renovation, repairs, energy, cleaning, tourism, photography, hairdressing",
    },
    "second_reduced_9": {
        "rate": 0.09,
        "label": "Second Reduced Rate (9%)",
        "vat_type": "Second Reduced 9%",
        "description": "Newspapers, periodicals, e-books, admission to cultural/sports events, hospitality",
    },
    "livestock_4_8": {
        "rate": 0.048,
        "label": "Livestock Rate (4.8%)",
        "vat_type": "Livestock 4.8%",
        "description": "Livestock for food production, certain agricultural supplies",
    },
    "zero_rated": {
        "rate": 0.0,
        "label": "Zero Rated (0%)",
        "vat_type": "Zero",
        "description": "Exports, intra-EU B2B, children's clothing, most food, books, medicines",
    },
    "exempt": {
        "rate": 0.0,
        "label": "Exempt",
        "vat_type": "Exempt",
        "description": "Financial services, insurance, medical/dental/optical, education, childcare",
    },
}

DEFAULT_VAT_RATE_KEY = "standard_23"

# Registration thresholds (EUR)
VAT_THRESHOLDS = {
    "goods": 85000,
    "services": 42500,
    "intra_eu_distance_sales": 10000,
    "intra_eu_acquisitions": 41000,
    "cash_receipts_basis": 1000000,
}

# Section 60(2) - input credits that are never recoverable
DISALLOWED_VAT_CREDITS = {
    # Section 60(2)(a)(i)
    "food_drink_accommodation": {
        "section": "Section 60(2)(a)(i)",
        "description": "Food, drink, or accommodation supplied to taxable person, agents or employees",
        "exception": "Accommodation for qualifying conferences is allowed",
        "vat_recoverable": False,
        "keywords": [
            "restaurant", "cafe", "coffee", "pub", "hotel", "accommodation",
            "food", "meal", "lunch", "dinner", "breakfast", "catering", "takeaway",
            "mcdonalds", "burger king", "kfc", "subway", "supermacs", "starbucks",
            "costa", "deliveroo", "just eat", "uber eats", "airbnb", "b&b",
        ],
        # Short words matched on word boundaries only ("bar" must not hit "barna" or "barrier")
        "word_boundary_keywords": ["bar"],
    },
    # Section 60(2)(a)(iii)
    "entertainment": {
        "section": "Section 60(2)(a)(iii)",
        "description": "Entertainment expenses incurred by the taxable person, agents or employees",
        "vat_recoverable": False,
        "keywords": [
            "entertainment", "cinema", "theatre", "concert", "event tickets",
            "netflix", "disney", "spotify", "amazon prime", "playstation", "xbox",
            "smyths", "toys", "games", "amusement",
        ],
    },
    # Section 60(2)(a)(iv)
    "passenger_vehicles": {
        "section": "Section 60(2)(a)(iv)",
        "description": "Purchase, hire or lease of passenger motor vehicles",
        "exception": "Allowed for car hire/rental businesses as trade stock",
        "vat_recoverable": False,
        "keywords": [
            "car purchase", "car lease", "car hire", "car rental",
            "motor finance", "pcp", "hp car",
        ],
    },
    # Section 60(2)(a)(v) - petrol only, diesel stays recoverable
    "petrol": {
        "section": "Section 60(2)(a)(v)",
        "description": "Purchase of petrol otherwise than as stock-in-trade",
        "vat_recoverable": False,
        "keywords": ["petrol", "unleaded", "gasoline"],
    },
    # Section 59 - non-business use
    "non_business": {
        "section": "Section 59",
        "description": "Goods or services used for non-business purposes",
        "vat_recoverable": False,
        "keywords": ["personal", "private", "non-business"],
    },
}

ALLOWED_VAT_CREDITS = {
    "trade_materials": {
        "description": "Materials and supplies used exclusively for taxable business",
        "vat_rate": "standard_23",
        "vat_recoverable": True,
    },
    "diesel": {
        "description": "Diesel fuel for business vehicles",
        "vat_rate": "standard_23",
        "vat_recoverable": True,
        "keywords": ["diesel", "derv", "adblue"],
    },
    "vehicle_repairs": {
        "description": "Repairs and maintenance of commercial vehicles",
        "vat_rate": "standard_23",
        "vat_recoverable": True,
        "keywords": ["repair", "service", "maintenance", "tyres", "nct", "cvrt"],
    },
    "software": {
        "description": "Business software and subscriptions",
        "vat_rate": "standard_23",
        "vat_recoverable": True,
    },
    "professional_services": {
        "description": "Accounting, legal, consulting services",
        "vat_rate": "standard_23",
        "vat_recoverable": True,
    },
    "telecommunications": {
        "description": "Phone, internet, communications",
        "vat_rate": "standard_23",
        "vat_recoverable": True,
    },
}

# Forecourts that also sell petrol, food and shop goods
MIXED_FUEL_RETAILERS = ["maxol", "circle k", "applegreen", "texaco", "esso", "shell", "topaz"]

# The deductibility check also treats forecourt convenience brands as mixed retailers
MIXED_RETAILERS_DEDUCTIBILITY = MIXED_FUEL_RETAILERS + ["spar", "centra"]

# No VAT charged, no input credit allowed
EXEMPT_SUPPLIES = [
    "Financial services (banking, lending, insurance)",
    "Medical, dental, optical services",
    "Education and training (certain exempt)",
    "Childcare services",
    "Undertaking/funeral services",
    "Certain passenger transport",
    "Letting of immovable goods",
]

# Two-thirds rule: parts share of a repair at or above this fraction makes it a supply of goods
TWO_THIRDS_THRESHOLD = 2 / 3

RCT_RULES = {
    "description": "Subcontractors providing construction services to principal contractors",
    "reverse_charge_vat": True,
    "note": (
        "Subcontractors do not charge VAT on construction services to principals. "
        "The principal accounts for the VAT as if it supplied the service."
    ),
    "rates": {
        "compliant": 0,
        "standard": 20,
        "non_compliant": 35,
    },
    "applicable_industries": [
        "construction",
        "carpentry_joinery",
        "electrical",
        "plumbing_heating",
        "painting_decorating",
        "landscaping_groundworks",
    ],
}

VAT_FILING = {
    "periods": "Bi-monthly (Jan-Feb, Mar-Apr, May-Jun, Jul-Aug, Sep-Oct, Nov-Dec)",
    "payment_due": "19th of month following VAT period",
    "payment_due_ros": "23rd of month following VAT period (if filing via ROS)",
    "late_interest_rate": 0.0219,  # percent per day
    "record_retention": "6 years",
}

# Output VAT defaults per industry (income side only)
INDUSTRY_VAT_RULES = {
    "construction": {
        "default_output_rate": "reduced_13_5",
        "common_input_rates": ["standard_23", "reduced_13_5"],
        "special_rules": [
            "Construction services to private dwellings at 13.5%",
            "Materials at 23%",
            "RCT reverse charge for subcontractor payments",
            "Two-thirds rule applies to repair work",
        ],
    },
    "carpentry_joinery": {
        "default_output_rate": "reduced_13_5",
        "common_input_rates": ["standard_23", "reduced_13_5"],
        "special_rules": [
            "Labour/installation at 13.5%",
            "Materials (timber, hardware) at 23%",
            "RCT applies if working as subcontractor",
        ],
    },
    "electrical": {
        "default_output_rate": "reduced_13_5",
        "common_input_rates": ["standard_23", "reduced_13_5"],
        "special_rules": [
            "Electrical services at 13.5%",
            "Electrical supplies/materials at 23%",
            "RCT applies to subcontract work",
        ],
    },
    "plumbing_heating": {
        "default_output_rate": "reduced_13_5",
        "common_input_rates": ["standard_23", "reduced_13_5"],
        "special_rules": [
            "Plumbing/heating services at 13.5%",
            "Plumbing supplies at 23%",
        ],
    },
    "hospitality": {
        "default_output_rate": "second_reduced_9",
        "common_input_rates": ["standard_23", "second_reduced_9", "zero_rated"],
        "special_rules": [
            "Restaurant/catering at 9%",
            "Hotel accommodation at 9%",
            "Alcoholic beverages at 23%",
            "Food purchases may be zero-rated",
        ],
    },
    "retail_ecommerce": {
        "default_output_rate": "standard_23",
        "common_input_rates": ["standard_23", "zero_rated"],
        "special_rules": [
            "Most retail goods at 23%",
            "Children's clothing/shoes at 0%",
            "Books at 0%",
            "Most food at 0%",
        ],
    },
    "professional_services": {
        "default_output_rate": "standard_23",
        "common_input_rates": ["standard_23", "exempt"],
        "special_rules": [
            "Professional services at 23%",
            "Some financial services exempt",
        ],
    },
}

BAD_DEBT_RELIEF = {
    "description": "VAT input credit allowed when debt is written off as irrecoverable",
    "requirement": "Debt must be actually written off in the books",
    "timing": "Credit taken in VAT period when debt is written off",
}

GIFTS_RULES = {
    "threshold": 20,  # EUR, excluding VAT
    "under_threshold": "No VAT liability on gifts costing EUR 20 or less (excl VAT)",
    "over_threshold": "VAT due on cost of gift as output tax if over EUR 20",
    "advertising_goods": "Tax-free if branded for business use (beer mats, display stands, etc.)",
}
