"""
Keyword families for Irish business-account transaction categorisation.
All keywords are lowercase and matched against normalised descriptions.
"""

# Income-side patterns (money in)
INCOME_PATTERNS = {
    "revenue_refund": {
        "keywords": [
            "revenue", "collector general", "collector-general", "rev comm", "ros refund",
            "tax refund", "vat refund", "paye refund", "ct refund", "rct refund",
        ],
        "description": "Refund from the Revenue Commissioners",
    },
    "commercial_refund": {
        "keywords": ["refund", "reversal", "cashback", "rebate"],
        "description": "Supplier refund, reversal or rebate",
    },
    "company_payer": {
        "keywords": [
            "limited", "ltd", "from", "caracon", "contractors", "holdings",
            "developments", "builders", "plc", "group",
        ],
        "description": "Payment that looks like it comes from a company",
    },
    "client_payment": {
        "keywords": [
            "transfer", "payment", "invoice", "lodgement", "credit", "money added",
            "received", "deposit", "eft", "bacs", "faster payment", "sepa credit",
        ],
        "description": "Typical client-payment wording on Irish bank statements",
    },
    "construction_context": {
        "regex_patterns": [
            r"construct|carpentry|trades|electrical|plumbing|building|joinery|kitchen|wardrobe|fitting|renovation",
        ],
        "description": "Industry/business description wording for construction users",
    },
}

# Director's Loan Account and individual payments (money out)
DIRECTOR_PATTERNS = {
    "explicit_dla": {
        "keywords": ["dla ", "directors loan", "director loan"],
    },
    "ambiguous_dla": {
        "keywords": ["personal transfer", "transfer to self", "own account", "drawings"],
    },
    # Only ambiguous on a company account
    "cash_withdrawal": {
        "keywords": [
            "atm", "cash withdrawal", "cash machine", "counter withdrawal", "self service withdrawal",
        ],
    },
    "payment_to_individual": {
        "prefix": "to ",
        "corporate_markers": ["limited", "ltd", "group", "company"],
    },
}

# Staff entertainment: CT deductible (s.840 TCA) but VAT blocked (s.60 VATCA)
STAFF_ENTERTAINMENT_KEYWORDS = [
    "staff night",
    "staff party",
    "staff event",
    "staff outing",
    "team night",
    "team event",
    "team building",
    "christmas party",
    "xmas party",
    "employee event",
]

# Accommodation is a travel expense even though its VAT is blocked
ACCOMMODATION_KEYWORDS = [
    "hotel",
    "accommodation",
    "airbnb",
    "b&b",
    "guesthouse",
    "guest house",
    "hostel",
    "lodge",
    "booking.com",
]

# Keyword fallback when no vendor matched, checked in this order
EXPENSE_FALLBACK_PATTERNS = {
    "bank_fees": {
        "keywords": ["fee", "charge", "commission"],
        "category": "Bank fees",
        "vat_type": "Exempt",
        "vat_deductible": False,
        "purpose": "Bank fees/charges. Financial services exempt from VAT.",
        "confidence": 75,
        "notes": "Description suggests bank fees.",
        "is_business": True,
    },
    "software": {
        "keywords": ["subscription", "subscr", "saas"],
        "category": "Software",
        "vat_type": "Standard 23%",
        "vat_deductible": True,
        "purpose": "Software/SaaS subscription. VAT deductible under Section 59.",
        "confidence": 70,
        "notes": "Description suggests subscription.",
        "is_business": True,
    },
    "medical": {
        "keywords": ["physio", "dental", "medical", "pharmacy", "chemist"],
        "category": "Medical",
        "vat_type": "Exempt",
        "vat_deductible": False,
        "purpose": "Medical expense. May qualify for 20% tax relief under Section 469 TCA 1997.",
        "confidence": 70,
        "notes": "Description suggests medical expense.",
        "is_business": False,
        "relief_type": "medical",
    },
    "pension": {
        "keywords": ["pension"],
        "category": "Insurance",
        "vat_type": "Exempt",
        "vat_deductible": False,
        "purpose": "Pension contribution. Tax relief at marginal rate.",
        "confidence": 70,
        "notes": "Description suggests pension contribution.",
        "is_business": False,
        "relief_type": "pension",
    },
    "charitable": {
        "keywords": ["charity", "donation"],
        "category": "other",
        "vat_type": "Exempt",
        "vat_deductible": False,
        "purpose": "Charitable donation. Tax relief under Section 848A TCA 1997.",
        "confidence": 70,
        "notes": "Description suggests charitable donation.",
        "is_business": False,
        "relief_type": "charitable",
    },
    "tuition": {
        "keywords": ["tuition", "college fee", "university fee"],
        "category": "other",
        "vat_type": "Exempt",
        "vat_deductible": False,
        "purpose": "Tuition fees. 20% tax relief on qualifying fees over EUR 3,000. Section 473A TCA 1997.",
        "confidence": 70,
        "notes": "Description suggests tuition fees.",
        "is_business": False,
        "relief_type": "tuition",
    },
    "rent": {
        "keywords": ["rent"],
        "exclusions": ["car rent", "tool rent", "equipment rent"],
        "category": "Rent",
        "vat_type": "Exempt",
        "vat_deductible": False,
        "purpose": "Rent payment. May qualify for rent tax credit. Section 473B TCA 1997.",
        "confidence": 60,
        "notes": "Description mentions rent. Review if personal (relief) or business (expense).",
        "is_business": None,
        "relief_type": "rent",
    },
    "insurance": {
        "keywords": ["insurance"],
        "category": "Insurance",
        "vat_type": "Exempt",
        "vat_deductible": False,
        "purpose": "Insurance premium. VAT exempt.",
        "confidence": 75,
        "notes": "Description mentions insurance.",
        "is_business": True,
    },
    "refund": {
        "keywords": ["refund"],
        "category": "other",
        "vat_type": "Standard 23%",
        "vat_deductible": False,
        "purpose": "Refund received. May need to reverse previously claimed VAT.",
        "confidence": 70,
        "notes": "Refund transaction - review VAT implications.",
        "is_business": None,
        "needs_review": True,
    },
}

# Receipt OCR refinement, checked in this order
RECEIPT_PATTERNS = {
    "diesel": r"diesel|derv",
    "petrol": r"petrol|unleaded|gasoline",
    "materials": r"timber|plywood|mdf|cement|screws|adhesive|plaster|sand|gravel",
    "tools": r"tool|drill|saw|hammer|screwdriver|blade|sander",
}
