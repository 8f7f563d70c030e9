"""
Auto-Categorisation Orchestrator for Irish business bank transactions.

Combines director/DLA checks, user corrections, the vendor cache, vendor
matching and the Irish VAT rules into one confidence-scored, explainable
classification per transaction.
"""

import logging
import re
from dataclasses import replace
from typing import List, Mapping, Optional

from ..config.categorisation_config import (
    ACCOUNT_TYPE_DIRECTORS_PERSONAL,
    ACCOUNT_TYPE_LIMITED_COMPANY,
    BUSINESS_CATEGORIES,
    BUSINESS_INDICATOR_CATEGORIES,
    CATEGORISATION_CONFIG,
    PERSONAL_CATEGORIES,
    RELIEF_ENTITLEMENTS,
    TECH_INDUSTRIES,
    TRADE_INDUSTRIES,
)
from ..income.income_detector import IncomeClassifier
from ..patterns.transaction_patterns import (
    ACCOMMODATION_KEYWORDS,
    DIRECTOR_PATTERNS,
    EXPENSE_FALLBACK_PATTERNS,
    RECEIPT_PATTERNS,
    STAFF_ENTERTAINMENT_KEYWORDS,
)
from ..vat.irish_vat_rules import (
    VatTreatment,
    determine_vat_treatment,
    get_vat_rate_label,
    has_diesel,
    has_petrol,
    is_entertainment,
    is_food_drink_accommodation,
)
from .corrections import UserCorrection, correction_vat_type, find_correction, get_correction_confidence
from .models import AutoCatResult, BusinessExpense, TransactionInput
from .pattern_matching import contains_any, matches_keyword_family
from .preprocess import normalise
from .vendor_cache import VendorCacheEntry, find_cache_entry
from .vendor_matcher import VendorMatcher, VendorMatchResult

logger = logging.getLogger(__name__)

_BRANCH = CATEGORISATION_CONFIG["vendor_branch"]
_BOOSTS = CATEGORISATION_CONFIG["receipt_boosts"]
REVIEW_THRESHOLD = CATEGORISATION_CONFIG["review_threshold"]
MIN_CONFIDENCE = CATEGORISATION_CONFIG["min_confidence"]
MAX_CONFIDENCE = CATEGORISATION_CONFIG["max_confidence"]


def determine_business_expense(category: str, vat_deductible: bool, needs_receipt: bool) -> Optional[bool]:
    """
    Decide business vs personal from the resolved category.

    Args:
        category: Resolved category label
        vat_deductible: Whether VAT is deductible
        needs_receipt: Whether a receipt is needed to decide

    Returns:
        True (business), False (personal) or None (undetermined)
    """
    lowered = category.lower()

    if any(business.lower() in lowered for business in BUSINESS_CATEGORIES):
        return True

    # Form 11 reliefs and balance-sheet movements
    if any(personal.lower() in lowered for personal in PERSONAL_CATEGORIES):
        return False

    if category == "other" and not vat_deductible and not needs_receipt:
        return False

    # Transfers are neither business nor personal
    if category == "Internal Transfer":
        return None

    # Multi-purpose merchants need a receipt to decide
    if needs_receipt or category == "other":
        return None

    return True if vat_deductible else None


def refine_with_receipt(result: AutoCatResult, receipt_text: Optional[str]) -> AutoCatResult:
    """
    Refine a classification with receipt OCR text.

    Diesel (without petrol) makes fuel deductible and removes the receipt
    requirement; petrol keeps it blocked. Materials and tools keywords
    confirm those categories. Anything else leaves the result unchanged.

    Args:
        result: Classification so far
        receipt_text: Raw OCR text, may be None

    Returns:
        A refined copy, or ``result`` itself when the receipt adds nothing
    """
    receipt = normalise(receipt_text)
    if not receipt:
        return result

    is_petrol = re.search(RECEIPT_PATTERNS["petrol"], receipt) is not None

    if re.search(RECEIPT_PATTERNS["diesel"], receipt) and not is_petrol:
        return replace(
            result,
            category="Motor Vehicle Expenses",
            vat_type="Standard 23%",
            vat_deductible=True,
            confidence_score=min(MAX_CONFIDENCE, result.confidence_score + _BOOSTS["diesel"]),
            notes=result.notes + " Receipt confirms DIESEL purchase - VAT deductible.",
            needs_receipt=False,
        )

    # Section 60(2)(a)(v)
    if is_petrol:
        return replace(
            result,
            category="Motor Vehicle Expenses",
            vat_type="Standard 23%",
            vat_deductible=False,
            confidence_score=min(MAX_CONFIDENCE, result.confidence_score + _BOOSTS["petrol"]),
            notes=result.notes + " Receipt shows PETROL - VAT NOT deductible (Section 60(2)(a)(v)).",
            needs_receipt=False,
        )

    if re.search(RECEIPT_PATTERNS["materials"], receipt):
        return replace(
            result,
            category="Materials",
            vat_type="Standard 23%",
            vat_deductible=True,
            confidence_score=min(MAX_CONFIDENCE, result.confidence_score + _BOOSTS["materials"]),
            notes=result.notes + " Receipt confirms construction materials.",
        )

    if re.search(RECEIPT_PATTERNS["tools"], receipt):
        return replace(
            result,
            category="Tools",
            vat_type="Standard 23%",
            vat_deductible=True,
            confidence_score=min(MAX_CONFIDENCE, result.confidence_score + _BOOSTS["tools"]),
            notes=result.notes + " Receipt confirms tools purchase.",
        )

    return result


def finalise_result(result: AutoCatResult, tx: TransactionInput) -> AutoCatResult:
    """Receipt refinement, confidence clamping and review banding."""
    refined = refine_with_receipt(result, tx.receipt_text)

    confidence = int(max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, refined.confidence_score)))
    needs_review = refined.needs_review or confidence < REVIEW_THRESHOLD

    looks_like_business = None
    if tx.account_type == ACCOUNT_TYPE_DIRECTORS_PERSONAL:
        category = refined.category.lower()
        if refined.is_business_expense is True or any(
            indicator in category for indicator in BUSINESS_INDICATOR_CATEGORIES
        ):
            looks_like_business = True

    return replace(
        refined,
        confidence_score=confidence,
        notes=refined.notes.strip(),
        needs_review=needs_review,
        looks_like_business_expense=looks_like_business,
    )


class AutoCategoriser:
    """Classifies transactions for Irish sole traders, contractors and limited companies."""

    def __init__(
        self,
        matcher: Optional[VendorMatcher] = None,
        income_classifier: Optional[IncomeClassifier] = None,
    ):
        """
        Initialize the categoriser.

        Args:
            matcher: Vendor matcher (defaults to the built-in vendor and MCC tables)
            income_classifier: Income-side classifier
        """
        self.matcher = matcher or VendorMatcher()
        self.income_classifier = income_classifier or IncomeClassifier()

    def categorise(
        self,
        tx: TransactionInput,
        vendor_cache: Optional[Mapping[str, VendorCacheEntry]] = None,
        user_corrections: Optional[Mapping[str, UserCorrection]] = None,
    ) -> AutoCatResult:
        """
        Classify one transaction.

        Args:
            tx: Transaction to classify
            vendor_cache: Optional snapshot of confirmed vendor patterns (read only)
            user_corrections: Optional user corrections keyed by vendor pattern

        Returns:
            Final AutoCatResult
        """
        if tx.direction == "income":
            result = self.income_classifier.classify(tx)
        else:
            result = self._categorise_expense(tx, vendor_cache, user_corrections)
        return finalise_result(result, tx)

    def categorise_many(
        self,
        transactions: List[TransactionInput],
        vendor_cache: Optional[Mapping[str, VendorCacheEntry]] = None,
        user_corrections: Optional[Mapping[str, UserCorrection]] = None,
    ) -> List[AutoCatResult]:
        return [self.categorise(tx, vendor_cache, user_corrections) for tx in transactions]

    # ------------------------------------------------------------------ #
    # Expense pipeline
    # ------------------------------------------------------------------ #

    def _categorise_expense(
        self,
        tx: TransactionInput,
        vendor_cache: Optional[Mapping[str, VendorCacheEntry]],
        user_corrections: Optional[Mapping[str, UserCorrection]],
    ) -> AutoCatResult:
        desc = normalise(tx.description)

        director_result = self._check_director_patterns(tx, desc)
        if director_result is not None:
            return director_result

        correction = find_correction(tx.description, user_corrections)
        if correction is not None:
            logger.debug(f"User correction applied for {correction.vendor_pattern!r}")
            return self._correction_result(correction)

        if contains_any(desc, STAFF_ENTERTAINMENT_KEYWORDS):
            logger.debug(f"Staff entertainment: {desc!r}")
            return AutoCatResult(
                category="Meals & Entertainment",
                vat_type="Standard 23%",
                vat_deductible=False,
                business_purpose=(
                    "Staff entertainment. CT deductible under s.840 TCA exception (bona fide staff "
                    "entertainment). VAT NOT recoverable (s.60 VATCA - food/drink/entertainment). Must be "
                    "open to all staff, reasonable cost, not incidental to client entertainment."
                ),
                confidence_score=75,
                notes=(
                    "Staff entertainment - review conditions: open to all staff, reasonable cost, "
                    "max 3-4 events/year, no clients attending."
                ),
                needs_review=True,
                needs_receipt=True,
                business_expense=BusinessExpense.BUSINESS,
            )

        match = self._lookup_vendor(tx, vendor_cache)

        vat_treatment = determine_vat_treatment(
            tx.description,
            abs(tx.amount),
            normalise(tx.user_industry) or normalise(tx.user_business_type) or "general",
            "expense",
        )

        # Section 60 is statute: it applies whatever the vendor or cache says
        statutory = self._statutory_result(desc, vat_treatment)
        if statutory is not None:
            return statutory

        if match is not None:
            result = self._vendor_result(tx, match, vat_treatment)
        else:
            result = self._fallback_result(tx, desc, vat_treatment)

        return self._gate_relief(tx, result)

    def _check_director_patterns(self, tx: TransactionInput, desc: str) -> Optional[AutoCatResult]:
        if contains_any(desc, DIRECTOR_PATTERNS["explicit_dla"]["keywords"]):
            logger.debug(f"Explicit DLA: {desc!r}")
            return AutoCatResult(
                category="Director's Loan Account",
                vat_type="N/A",
                vat_deductible=False,
                business_purpose=(
                    "Director's Loan Account - personal withdrawal. Not a P&L expense. "
                    "Debits the DLA on the balance sheet."
                ),
                confidence_score=90,
                notes=(
                    "Director's Loan Account debit. Not deductible for Corporation Tax. "
                    "If DLA is overdrawn, S.239 TCA benefit-in-kind may apply."
                ),
                business_expense=BusinessExpense.PERSONAL,
            )

        if self._is_ambiguous_dla(tx, desc):
            logger.debug(f"Ambiguous DLA: {desc!r}")
            return AutoCatResult(
                category="Uncategorised",
                vat_type="N/A",
                vat_deductible=False,
                business_purpose="Could be personal (DLA debit) or business (petty cash). Review required.",
                confidence_score=50,
                notes=(
                    "Ambiguous transaction - could be Director's Loan Account or business use. "
                    "Please review and categorise."
                ),
                needs_review=True,
                business_expense=BusinessExpense.UNDETERMINED,
            )

        if self._is_payment_to_individual(desc):
            return self._payment_to_individual_result(tx, desc)

        return None

    @staticmethod
    def _is_ambiguous_dla(tx: TransactionInput, desc: str) -> bool:
        if contains_any(desc, DIRECTOR_PATTERNS["ambiguous_dla"]["keywords"]):
            return True
        # Cash on a company account could be petty cash or a DLA debit
        return tx.account_type == ACCOUNT_TYPE_LIMITED_COMPANY and contains_any(
            desc, DIRECTOR_PATTERNS["cash_withdrawal"]["keywords"]
        )

    @staticmethod
    def _is_payment_to_individual(desc: str) -> bool:
        pattern = DIRECTOR_PATTERNS["payment_to_individual"]
        return desc.startswith(pattern["prefix"]) and not contains_any(desc, pattern["corporate_markers"])

    @staticmethod
    def _is_director(target: str, director_names: List[str]) -> bool:
        for name in director_names:
            full_name = normalise(name)
            if not full_name:
                continue
            surname = full_name.split(" ")[-1]
            if full_name in target or (len(surname) > 2 and surname in target):
                return True
        return False

    def _payment_to_individual_result(self, tx: TransactionInput, desc: str) -> AutoCatResult:
        target = re.sub(r"^to\s+", "", desc)

        if tx.director_names and self._is_director(target, tx.director_names):
            logger.debug(f"Payment to director: {desc!r}")
            return AutoCatResult(
                category="Director's Salary",
                vat_type="N/A",
                vat_deductible=False,
                business_purpose="Director's salary payment. Subject to PAYE, PRSI, and USC through payroll.",
                confidence_score=90,
                notes="Payment to director - classified as salary. Deductible for Corporation Tax.",
                business_expense=BusinessExpense.BUSINESS,
            )

        if tx.account_type == ACCOUNT_TYPE_LIMITED_COMPANY and not tx.director_names:
            return AutoCatResult(
                category="Uncategorised",
                vat_type="N/A",
                vat_deductible=False,
                business_purpose=(
                    "Payment to individual from company account. No director names on file - cannot "
                    "determine if this is director salary or subcontractor payment."
                ),
                confidence_score=50,
                notes="No director names on file. Add director names in onboarding to enable auto-detection.",
                needs_review=True,
                business_expense=BusinessExpense.UNDETERMINED,
            )

        return AutoCatResult(
            category="Labour costs",
            vat_type="N/A",
            vat_deductible=False,
            business_purpose="Payment to individual. Cannot claim VAT without valid VAT invoice.",
            confidence_score=75,
            notes="Transfer to individual - no VAT deduction possible without invoice.",
            needs_review=True,
            needs_receipt=True,
            business_expense=BusinessExpense.UNDETERMINED,
        )

    @staticmethod
    def _correction_result(correction: UserCorrection) -> AutoCatResult:
        rate = correction.corrected_vat_rate
        return AutoCatResult(
            category=correction.corrected_category,
            vat_type=correction_vat_type(rate),
            vat_deductible=rate is not None and rate > 0,
            business_purpose=f"User-corrected category ({correction.transaction_count} corrections).",
            confidence_score=get_correction_confidence(correction),
            notes=f'Applied user correction for "{correction.vendor_pattern}".',
            business_expense=BusinessExpense.BUSINESS,
        )

    def _lookup_vendor(
        self,
        tx: TransactionInput,
        vendor_cache: Optional[Mapping[str, VendorCacheEntry]],
    ) -> Optional[VendorMatchResult]:
        cached = find_cache_entry(tx.description, vendor_cache)
        if cached is not None:
            logger.debug(f"Vendor cache hit: {cached.vendor_pattern!r}")
            return VendorMatchResult(
                vendor=cached.to_vendor(),
                match_type="exact",
                confidence=cached.confidence,
                matched_pattern=cached.vendor_pattern,
            )
        return self.matcher.match(tx.description, tx.merchant_name, tx.amount, tx.mcc_code)

    @staticmethod
    def _statutory_result(desc: str, vat_treatment: VatTreatment) -> Optional[AutoCatResult]:
        if has_diesel(desc):
            logger.debug(f"Section 60 diesel: {desc!r}")
            return AutoCatResult(
                category="Motor Vehicle Expenses",
                vat_type="Standard 23%",
                vat_deductible=True,
                business_purpose="Diesel fuel - VAT IS recoverable (unlike petrol). Section 59.",
                confidence_score=90,
                notes="Diesel purchase - VAT deductible.",
                needs_receipt=True,
                business_expense=BusinessExpense.BUSINESS,
            )

        # Accommodation is a travel expense even though its VAT is blocked
        is_accommodation = contains_any(desc, ACCOMMODATION_KEYWORDS)
        if is_accommodation:
            logger.debug(f"Section 60 accommodation: {desc!r}")
            return AutoCatResult(
                category="Travel & Subsistence",
                vat_type="Second Reduced 9%",
                vat_deductible=False,
                business_purpose="Business accommodation - 9% VAT rate, not recoverable under Section 60(2)(a)(i).",
                confidence_score=90,
                notes=(
                    "Section 60(2)(a)(i) - Accommodation VAT not recoverable. "
                    "Expense is deductible for Corporation Tax / Income Tax."
                ),
                needs_receipt=True,
                business_expense=BusinessExpense.BUSINESS,
            )

        if is_food_drink_accommodation(desc):
            logger.debug(f"Section 60 food/drink: {desc!r}")
            return AutoCatResult(
                category="other",
                vat_type="Standard 23%",
                vat_deductible=False,
                business_purpose=vat_treatment.explanation,
                confidence_score=90,
                notes="Section 60(2)(a)(i) - Food/drink VAT not recoverable.",
                business_expense=BusinessExpense.PERSONAL,
            )

        if is_entertainment(desc):
            logger.debug(f"Section 60 entertainment: {desc!r}")
            return AutoCatResult(
                category="other",
                vat_type="Standard 23%",
                vat_deductible=False,
                business_purpose=vat_treatment.explanation,
                confidence_score=90,
                notes="Section 60(2)(a)(iii) - Entertainment VAT not recoverable.",
                business_expense=BusinessExpense.PERSONAL,
            )

        if has_petrol(desc):
            logger.debug(f"Section 60 petrol: {desc!r}")
            return AutoCatResult(
                category="Motor Vehicle Expenses",
                vat_type="Standard 23%",
                vat_deductible=False,
                business_purpose=vat_treatment.explanation,
                confidence_score=85,
                notes="Section 60(2)(a)(v) - Petrol VAT not recoverable (diesel IS recoverable).",
                needs_receipt=True,
                business_expense=BusinessExpense.BUSINESS,
            )

        return None

    @staticmethod
    def _user_in(tx: TransactionInput, industries: List[str]) -> bool:
        context = (
            normalise(tx.user_industry),
            normalise(tx.user_business_type),
            normalise(tx.user_business_description),
        )
        return any(industry in field for industry in industries for field in context)

    def _vendor_result(
        self,
        tx: TransactionInput,
        match: VendorMatchResult,
        vat_treatment: VatTreatment,
    ) -> AutoCatResult:
        vendor = match.vendor

        if match.matched_pattern:
            notes = f"Matched vendor: {match.matched_pattern}"
            if match.match_type == "fuzzy":
                notes += f" (fuzzy ~{round((match.similarity or 0) * 100)}%)"
            notes += "."
        else:
            notes = "Matched via MCC code."

        result = AutoCatResult(
            category=match.adjusted_category or vendor.category,
            vat_type=vendor.vat_type,
            vat_deductible=(
                vendor.vat_deductible if match.adjusted_vat_deductible is None else match.adjusted_vat_deductible
            ),
            business_purpose=match.adjusted_purpose or vendor.purpose,
            confidence_score=match.adjusted_confidence or match.confidence,
            notes=notes,
            needs_receipt=vendor.needs_receipt,
            relief_type=vendor.relief_type,
        )

        is_trade_user = self._user_in(tx, TRADE_INDUSTRIES)
        is_tech_user = self._user_in(tx, TECH_INDUSTRIES)
        industry_label = tx.user_industry or tx.user_business_type
        industry_suffix = f" ({tx.user_business_description})" if tx.user_business_description else ""
        unspecified = tx.user_industry or "unspecified"

        if vendor.is_trade_supplier and is_trade_user:
            result.confidence_score = _BRANCH["aligned_supplier_confidence"]
            result.business_expense = BusinessExpense.BUSINESS
            result.vat_deductible = True
            result.notes = f"Trade supplier for {industry_label} business. Auto-approved."
            result.business_purpose = f"{vendor.purpose} Industry: {industry_label}{industry_suffix}."
        elif vendor.is_tech_supplier and is_tech_user:
            # Deductibility stays with the vendor (payment processors are exempt)
            result.confidence_score = _BRANCH["aligned_supplier_confidence"]
            result.business_expense = BusinessExpense.BUSINESS
            result.notes = f"Tech/SaaS supplier for {industry_label} business. Auto-approved."
            result.business_purpose = f"{vendor.purpose} Industry: {industry_label}{industry_suffix}."
        elif vendor.is_tech_supplier:
            result.confidence_score = _BRANCH["tech_mismatch_confidence"]
            result.business_expense = BusinessExpense.BUSINESS
            result.notes = f"Tech/SaaS supplier. User industry ({unspecified}) is not tech - verify business use."
        elif vendor.is_trade_supplier:
            result.confidence_score = _BRANCH["trade_mismatch_confidence"]
            result.business_expense = BusinessExpense.UNDETERMINED
            result.needs_review = True
            result.notes = (
                f"Trade supplier but user industry ({unspecified}) is not trades. Review if business expense."
            )
        else:
            if not vat_treatment.is_vat_recoverable and result.vat_deductible:
                result.vat_deductible = False
                result.notes += f" {'. '.join(vat_treatment.warnings)}"
            result.business_expense = BusinessExpense.from_bool(
                determine_business_expense(result.category, result.vat_deductible, result.needs_receipt)
            )

        # Drawings is a sole-trader concept; on a company account it needs a receipt
        if result.category == "Drawings" and tx.account_type == ACCOUNT_TYPE_LIMITED_COMPANY:
            result.category = "Uncategorised"
            result.business_expense = BusinessExpense.UNDETERMINED
            result.needs_review = True
            result.needs_receipt = True
            result.confidence_score = 50
            result.business_purpose = (
                "Purchase from personal-use retailer on company account. Upload receipt to determine "
                "if business expense or Director's Loan Account debit."
            )
            result.notes = "Receipt required - cannot distinguish business vs personal without proof of purchase."

        if not result.vat_deductible and result.category == "other":
            result.needs_review = True

        return result

    def _fallback_result(self, tx: TransactionInput, desc: str, vat_treatment: VatTreatment) -> AutoCatResult:
        for name, rule in EXPENSE_FALLBACK_PATTERNS.items():
            if not matches_keyword_family(desc, rule):
                continue
            relief_type = rule.get("relief_type")
            if relief_type and not self._relief_allowed(tx, relief_type):
                continue
            logger.debug(f"Keyword fallback {name!r}: {desc!r}")
            return AutoCatResult(
                category=rule["category"],
                vat_type=rule["vat_type"],
                vat_deductible=rule["vat_deductible"],
                business_purpose=rule["purpose"],
                confidence_score=rule["confidence"],
                notes=rule["notes"],
                needs_review=rule.get("needs_review", False),
                business_expense=BusinessExpense.from_bool(rule["is_business"]),
                relief_type=relief_type,
            )

        logger.debug(f"No vendor or keyword match: {desc!r}")
        warnings = ". ".join(vat_treatment.warnings)
        return AutoCatResult(
            category="other",
            vat_type=get_vat_rate_label(vat_treatment.suggested_rate),
            vat_deductible=vat_treatment.is_vat_recoverable,
            business_purpose=vat_treatment.explanation,
            confidence_score=40,
            notes=f"{warnings} Review required." if warnings else "Review required.",
            needs_review=True,
            needs_receipt=vat_treatment.needs_receipt,
            business_expense=BusinessExpense.UNDETERMINED,
        )

    @staticmethod
    def _relief_allowed(tx: TransactionInput, relief_type: str) -> bool:
        # Reliefs were not asked about during onboarding
        if tx.director_reliefs is None:
            return True
        required = RELIEF_ENTITLEMENTS.get(relief_type)
        return required is None or required in tx.director_reliefs

    def _gate_relief(self, tx: TransactionInput, result: AutoCatResult) -> AutoCatResult:
        if not result.relief_type or self._relief_allowed(tx, result.relief_type):
            return result
        logger.debug(f"Relief {result.relief_type!r} not selected in onboarding")
        return replace(
            result,
            category="other",
            relief_type=None,
            business_expense=BusinessExpense.UNDETERMINED,
            confidence_score=40,
            needs_review=True,
            notes="Director did not select this relief in onboarding. Review required.",
            business_purpose="Possible personal expense - relief not selected during onboarding.",
        )
