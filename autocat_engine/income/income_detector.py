"""
Income Classification Module.

Classifies money received on an Irish business account: Revenue refunds,
commercial refunds, RCT income from principal contractors and ordinary
client payments.
"""

import logging
from typing import Optional

from ..categorisation.models import AutoCatResult, BusinessExpense, TransactionInput
from ..categorisation.pattern_matching import contains_any, match_regex_list
from ..categorisation.preprocess import normalise
from ..patterns.transaction_patterns import INCOME_PATTERNS

logger = logging.getLogger(__name__)


class IncomeClassifier:
    """Classifies income: Revenue refund → commercial refund → RCT → sales."""

    BASE_CONFIDENCE = 70
    RCT_BOOST = 25
    # Generic inflows with no client-payment wording score higher than worded ones
    GENERIC_INCOME_BOOST = 10

    def is_revenue_refund(self, description: str) -> bool:
        return contains_any(description, INCOME_PATTERNS["revenue_refund"]["keywords"])

    def is_commercial_refund(self, description: str) -> bool:
        return contains_any(description, INCOME_PATTERNS["commercial_refund"]["keywords"])

    def looks_like_company_payment(self, description: str) -> bool:
        return contains_any(description, INCOME_PATTERNS["company_payer"]["keywords"])

    def looks_like_client_payment(self, description: str) -> bool:
        return contains_any(description, INCOME_PATTERNS["client_payment"]["keywords"])

    def is_construction_user(self, industry: Optional[str], business_description: Optional[str]) -> bool:
        """Construction context from the user's industry code and free-text business description."""
        context = f"{normalise(industry)} {normalise(business_description)}"
        return match_regex_list(context, INCOME_PATTERNS["construction_context"]["regex_patterns"]) is not None

    def classify(self, tx: TransactionInput) -> AutoCatResult:
        """
        Classify an income transaction.

        Income VAT is never deductible and income is always business.

        Args:
            tx: Transaction with direction "income"

        Returns:
            AutoCatResult before receipt refinement and review banding
        """
        desc = normalise(tx.description)

        if self.is_revenue_refund(desc):
            logger.debug(f"Revenue refund: {desc!r}")
            return AutoCatResult(
                category="Tax Refund",
                vat_type="Exempt",
                vat_deductible=False,
                business_purpose="Tax refund from Revenue Commissioners. Not taxable income - return of overpaid tax.",
                confidence_score=95,
                notes="Revenue refund - excluded from taxable income. Not subject to CT or income tax.",
                business_expense=BusinessExpense.BUSINESS,
            )

        if self.is_commercial_refund(desc):
            logger.debug(f"Commercial refund: {desc!r}")
            return AutoCatResult(
                category="Interest Income",  # resolves to "Other Income"
                vat_type="Exempt",
                vat_deductible=False,
                business_purpose="Refund received. Classified as other income.",
                confidence_score=85,
                notes="Refund/reversal detected - categorised as Other Income.",
                business_expense=BusinessExpense.BUSINESS,
            )

        in_construction = self.is_construction_user(tx.user_industry, tx.user_business_description)

        if in_construction and self.looks_like_company_payment(desc):
            logger.debug(f"RCT income: {desc!r}")
            return AutoCatResult(
                category="RCT",
                vat_type="Reverse Charge",
                vat_deductible=False,
                business_purpose="Income from principal contractor. Subject to RCT reverse charge - you do not charge VAT.",
                confidence_score=self.BASE_CONFIDENCE + self.RCT_BOOST,
                notes="RCT income - reverse charge applies.",
                business_expense=BusinessExpense.BUSINESS,
            )

        client_payment = self.looks_like_client_payment(desc)
        industry = normalise(tx.user_industry)

        if not client_payment:
            purpose = "Income received."
        elif in_construction:
            purpose = "Client payment for construction/trades work."
        elif "professional" in industry or "consult" in industry:
            purpose = "Client payment for professional services."
        elif "retail" in industry:
            purpose = "Customer payment for product sales."
        else:
            purpose = "Client payment received."

        confidence = self.BASE_CONFIDENCE if client_payment else self.BASE_CONFIDENCE + self.GENERIC_INCOME_BOOST

        return AutoCatResult(
            category="Sales",
            vat_type="Standard 23%",
            vat_deductible=False,
            business_purpose=purpose,
            confidence_score=confidence,
            notes="Recognised as client payment.",
            business_expense=BusinessExpense.BUSINESS,
        )
