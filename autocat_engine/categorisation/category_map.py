"""
Category name resolution.

Bridges the engine's internal category labels to the category names a
tenant actually has (which vary by industry template). Lookup is exact or
via the mapped candidate names only; partial matching is not attempted so
that e.g. "General Expenses" never resolves to "Medical Expenses".
"""

from typing import Any, Dict, List, Optional, Sequence

from ..config.categorisation_config import ACCOUNT_TYPE_DIRECTORS_PERSONAL, ACCOUNT_TYPE_LIMITED_COMPANY


# Internal label -> candidate category names, in priority order
CATEGORY_NAME_MAP: Dict[str, List[str]] = {
    # Expense categories
    "Motor Vehicle Expenses": ["Vehicle Expenses", "Fuel", "Vehicle Maintenance & Repairs", "Travel & Accommodation"],
    "Motor/travel": [
        "Van Costs",
        "Vehicle Expenses",
        "Vehicle Maintenance & Repairs",
        "Travel & Accommodation",
        "Fuel",
        "Tolls & Parking",
    ],
    "Tools": ["Power Tools", "Tools & Equipment", "Hardware & Equipment"],
    "Purchases": ["Materials & Supplies", "Cost of Goods Sold", "Raw Materials"],
    "Materials": ["Timber & Sheet Materials", "Fixings & Consumables", "Materials & Supplies", "Raw Materials"],
    "Cost of Goods Sold": ["Cost of Goods Sold", "Materials & Supplies", "Raw Materials"],
    "Software": ["Subscriptions & Software", "Software & Licenses", "Office Expenses"],
    "Cloud Hosting": [
        "Cloud Hosting & Infrastructure",
        "Subscriptions & Software",
        "Software & Licenses",
        "API & Third-Party Services",
    ],
    "Payment Processing": ["Payment Processing Fees", "Bank Charges"],
    "Phone": ["Telephone & Internet", "Subscriptions & Software"],
    "Insurance": ["Insurance", "Vehicle Insurance"],
    "Bank fees": ["Bank Charges"],
    "Bank Fees": ["Bank Charges"],
    "Medical": ["Medical Expenses"],
    "Drawings": ["Director's Loan Account"],
    "Director's Loan Account": ["Director's Loan Account"],
    "Director's Salary": ["Director's Salary", "Staff Wages"],
    "Dividends": ["Dividends"],
    "Meals & Entertainment": ["Meals & Entertainment"],
    "Consulting & Accounting": ["Professional Fees"],
    "Wages": ["Subcontractor Payments", "Staff Wages", "Contractor Payments", "Driver Wages"],
    "Labour costs": ["Subcontractor Payments", "Staff Wages", "Contractor Payments"],
    "Sub Con": ["Subcontractor Payments", "Contractor Payments"],
    "Repairs and Maintenance": ["Repairs & Maintenance", "Vehicle Maintenance & Repairs"],
    "Cleaning": ["Cleaning & Hygiene"],
    "General Expenses": [],
    "Uncategorised": [],
    "Advertising": ["Advertising & Marketing"],
    "Marketing": ["Advertising & Marketing"],
    "Subsistence": ["Subsistence", "Travel & Accommodation", "Meals & Entertainment"],
    "Workwear": ["Protective Clothing & PPE"],
    "Tolls & Parking": ["Tolls & Parking", "Vehicle Expenses", "Travel & Accommodation"],
    "Training": ["Training & Certifications", "Training & Conferences", "Training & CPD"],
    "Rent": ["Rent & Rates", "Rent & Co-working"],
    "Equipment": [
        "Tools & Equipment",
        "Hardware & Equipment",
        "Equipment & Furniture",
        "Machinery & Equipment",
        "Kitchen Equipment",
        "Shop Fittings & Equipment",
        "Audio/Visual Equipment",
    ],
    "Office": ["Office Expenses", "Subscriptions & Software"],
    "other": [],
    "Waste": [],
    "Internal Transfer": ["Internal Transfers"],
    "Travel & Subsistence": ["Travel & Accommodation", "Vehicle Expenses"],

    # Income categories
    "Sales": [
        "Contract Work",
        "Labour Income",
        "Other Income",
        "Consultation Fees",
        "Materials Charged",
        "SaaS Subscription Revenue",
        "Consulting & Services",
        "Product Sales",
        "Food Sales",
        "Delivery Services",
        "Haulage Income",
        "Rental Income",
        "Services",
        "Project Fees",
        "Retainer Income",
        "Online Sales",
        "Wholesale Revenue",
        "Contract Manufacturing",
        "Catering Income",
        "Beverage Sales",
        "Management Fees",
        "Plant Hire Income",
        "Membership & Subscriptions",
        "Implementation & Onboarding Fees",
        "Software Sales & Licensing",
        "Development Services",
        "Maintenance & Support",
        "Event Tickets & Admissions",
        "Sponsorship Income",
        "Venue Hire Income",
        "Catering & Bar Revenue",
    ],
    "RCT": ["Contract Work", "Labour Income"],
    "Interest Income": ["Other Income"],
    "Subscription Income": ["Other Income", "SaaS Subscription Revenue", "Membership & Subscriptions"],
    "Tax Refund": ["Other Income"],
}

# Category row account_type values visible to each bank-account type
_VISIBLE_ACCOUNT_TYPES = {
    ACCOUNT_TYPE_LIMITED_COMPANY: ("business", "both"),
    ACCOUNT_TYPE_DIRECTORS_PERSONAL: ("personal", "both"),
}


def _field(row: Any, name: str) -> Optional[str]:
    # Rows may be plain dicts or objects with attributes
    if isinstance(row, dict):
        return row.get(name)
    return getattr(row, name, None)


def _visible_to(row: Any, account_type: str) -> bool:
    row_account_type = _field(row, "account_type")
    if not row_account_type:
        return True
    allowed = _VISIBLE_ACCOUNT_TYPES.get(account_type)
    if allowed is None:
        return True
    return row_account_type in allowed


def _find_by_name(rows: Sequence[Any], name: str, direction: Optional[str]) -> Optional[Any]:
    wanted = name.strip().lower()
    for row in rows:
        row_name = (_field(row, "name") or "").lower()
        if row_name == wanted and (not direction or _field(row, "type") == direction):
            return row
    return None


def _find_in(rows: Sequence[Any], label: str, direction: Optional[str]) -> Optional[Any]:
    exact = _find_by_name(rows, label, direction)
    if exact is not None:
        return exact
    for candidate in CATEGORY_NAME_MAP.get(label, []):
        mapped = _find_by_name(rows, candidate, direction)
        if mapped is not None:
            return mapped
    return None


def find_matching_category(
    label: str,
    categories: Sequence[Any],
    direction: Optional[str] = None,
    account_type: Optional[str] = None,
) -> Optional[Any]:
    """
    Resolve an internal category label to one of the caller's category rows.

    Args:
        label: Internal category label, e.g. "Motor/travel"
        categories: Category rows with ``name``, ``type`` and optional ``account_type``
        direction: Optional "income"/"expense" filter on the row type
        account_type: Optional bank-account type used to pre-filter rows

    Returns:
        The matching row, or None
    """
    visible = (
        [row for row in categories if _visible_to(row, account_type)] if account_type else list(categories)
    )

    match = _find_in(visible, label, direction)
    if match is not None:
        return match

    # Retry against every row when the account-type filter hid the only match
    if account_type:
        return _find_in(categories, label, direction)
    return None
