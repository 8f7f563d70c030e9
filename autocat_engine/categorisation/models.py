"""
Data models for auto-categorisation: the transaction input, the
business-expense tri-state and the classification result.
"""

from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from typing import Any, Dict, List, Optional


class BusinessExpense(Enum):
    """Whether an expense is a business expense. UNDETERMINED needs a human decision."""
    BUSINESS = "business"
    PERSONAL = "personal"
    UNDETERMINED = "undetermined"

    @classmethod
    def from_bool(cls, value: Optional[bool]) -> "BusinessExpense":
        if value is None:
            return cls.UNDETERMINED
        return cls.BUSINESS if value else cls.PERSONAL

    def to_bool(self) -> Optional[bool]:
        if self is BusinessExpense.UNDETERMINED:
            return None
        return self is BusinessExpense.BUSINESS


@dataclass(frozen=True)
class TransactionInput:
    """One bank transaction plus the user context needed to classify it."""
    amount: float
    description: str
    direction: str  # 'income' or 'expense'
    date: str = ""
    currency: str = "EUR"
    user_industry: str = ""
    user_business_type: str = ""
    merchant_name: Optional[str] = None
    transaction_type: Optional[str] = None  # card, sepa, cash, ...
    receipt_text: Optional[str] = None
    account_type: Optional[str] = None  # 'limited_company', 'directors_personal_tax'
    user_business_description: Optional[str] = None
    mcc_code: Optional[int] = None
    director_names: Optional[List[str]] = None
    # None means "not asked", which honours every relief tag
    director_reliefs: Optional[List[str]] = None
    director_income_sources: Optional[List[str]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TransactionInput":
        """
        Build an input from a transaction dict, ignoring unknown keys.

        Raises:
            KeyError: If amount, description or direction is missing
            ValueError: If amount or mcc_code is not numeric
        """
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}
        for required in ("amount", "description", "direction"):
            if required not in values:
                raise KeyError(required)
        values["amount"] = float(values["amount"])
        if values.get("mcc_code") not in (None, ""):
            values["mcc_code"] = int(values["mcc_code"])
        else:
            values["mcc_code"] = None
        return cls(**values)


@dataclass
class AutoCatResult:
    """Classification of one transaction."""
    category: str
    vat_type: str
    vat_deductible: bool
    business_purpose: str
    confidence_score: int  # 0-100
    notes: str = ""
    needs_review: bool = False
    needs_receipt: bool = False
    business_expense: BusinessExpense = BusinessExpense.UNDETERMINED
    relief_type: Optional[str] = None
    # Only set on directors' personal accounts
    looks_like_business_expense: Optional[bool] = None

    @property
    def is_business_expense(self) -> Optional[bool]:
        """True (business), False (personal) or None (undetermined)."""
        return self.business_expense.to_bool()

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["business_expense"] = self.business_expense.value
        data["is_business_expense"] = self.is_business_expense
        return data
