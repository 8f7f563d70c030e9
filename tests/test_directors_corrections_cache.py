"""
Tests for director and DLA detection, user corrections and the vendor cache.
"""

import os
import shutil
import tempfile
import unittest

from autocat_engine.categorisation.corrections import (
    UserCorrection,
    correction_vat_type,
    find_correction,
    get_correction_confidence,
    index_corrections,
)
from autocat_engine.categorisation.engine import AutoCategoriser
from autocat_engine.categorisation.models import BusinessExpense, TransactionInput
from autocat_engine.categorisation.vendor_cache import VendorCacheEntry, find_cache_entry, load_vendor_cache_csv


def make_expense(description, amount=-100.0, **kwargs):
    """Build an expense TransactionInput."""
    return TransactionInput(amount=amount, description=description, direction="expense", **kwargs)


class TestDirectorPatterns(unittest.TestCase):
    """Test Director's Loan Account and payment-to-individual rules."""

    def setUp(self):
        """Set up test fixtures."""
        self.categoriser = AutoCategoriser()

    def test_explicit_dla(self):
        """Test explicit DLA wording is a personal DLA debit."""
        result = self.categoriser.categorise(make_expense("DLA REPAYMENT"))

        self.assertEqual(result.category, "Director's Loan Account")
        self.assertEqual(result.vat_type, "N/A")
        self.assertEqual(result.confidence_score, 90)
        self.assertIs(result.business_expense, BusinessExpense.PERSONAL)

    def test_ambiguous_transfer(self):
        """Test a personal transfer is ambiguous."""
        result = self.categoriser.categorise(make_expense("PERSONAL TRANSFER 0042"))

        self.assertEqual(result.category, "Uncategorised")
        self.assertEqual(result.confidence_score, 50)
        self.assertTrue(result.needs_review)

    def test_atm_on_company_account(self):
        """Test cash withdrawals on a company account are ambiguous."""
        result = self.categoriser.categorise(make_expense("ATM WITHDRAWAL", account_type="limited_company"))

        self.assertEqual(result.category, "Uncategorised")
        self.assertIsNone(result.is_business_expense)

    def test_payment_to_individual(self):
        """Test a payment to a person is labour awaiting an invoice."""
        result = self.categoriser.categorise(make_expense("To John Smith"))

        self.assertEqual(result.category, "Labour costs")
        self.assertEqual(result.confidence_score, 75)
        self.assertTrue(result.needs_review)
        self.assertTrue(result.needs_receipt)
        self.assertIsNone(result.is_business_expense)

    def test_payment_to_director(self):
        """Test a payment to a named director is salary."""
        result = self.categoriser.categorise(make_expense("To John Smith", director_names=["John Smith"]))

        self.assertEqual(result.category, "Director's Salary")
        self.assertEqual(result.confidence_score, 90)
        self.assertIs(result.business_expense, BusinessExpense.BUSINESS)

    def test_payment_to_director_by_surname(self):
        """Test the director's surname alone is enough."""
        result = self.categoriser.categorise(make_expense("To J Smith", director_names=["John Smith"]))

        self.assertEqual(result.category, "Director's Salary")

    def test_short_surname_ignored(self):
        """Test surnames of two letters or fewer are not matched alone."""
        result = self.categoriser.categorise(make_expense("To Mary Ng", director_names=["Tom Ng"]))

        self.assertEqual(result.category, "Labour costs")

    def test_company_account_without_directors(self):
        """Test a company account with no directors on file cannot decide."""
        result = self.categoriser.categorise(make_expense("To John Smith", account_type="limited_company"))

        self.assertEqual(result.category, "Uncategorised")
        self.assertEqual(result.confidence_score, 50)
        self.assertIn("No director names on file", result.notes)

    def test_payment_to_company(self):
        """Test a payment to a company is not a payment to an individual."""
        result = self.categoriser.categorise(make_expense("To ABC Limited"))

        self.assertNotIn(result.category, ("Labour costs", "Director's Salary"))

    def test_staff_entertainment(self):
        """Test staff parties are business with VAT blocked."""
        result = self.categoriser.categorise(make_expense("STAFF CHRISTMAS PARTY"))

        self.assertEqual(result.category, "Meals & Entertainment")
        self.assertEqual(result.confidence_score, 75)
        self.assertFalse(result.vat_deductible)
        self.assertTrue(result.needs_review)
        self.assertTrue(result.needs_receipt)
        self.assertIs(result.business_expense, BusinessExpense.BUSINESS)


class TestUserCorrections(unittest.TestCase):
    """Test confirmed user corrections."""

    def setUp(self):
        """Set up test fixtures."""
        self.categoriser = AutoCategoriser()

    def _corrections(self, count, rate=23):
        return index_corrections([{
            "vendor_pattern": "acme widgets ltd",
            "corrected_category": "Equipment",
            "transaction_count": count,
            "corrected_vat_rate": rate,
        }])

    def test_confirmed_correction(self):
        """Test two confirmations apply the correction at 80."""
        result = self.categoriser.categorise(
            make_expense("ACME WIDGETS LTD 1234"), user_corrections=self._corrections(2)
        )

        self.assertEqual(result.category, "Equipment")
        self.assertEqual(result.confidence_score, 80)
        self.assertEqual(result.vat_type, "Standard 23%")
        self.assertTrue(result.vat_deductible)
        self.assertIs(result.business_expense, BusinessExpense.BUSINESS)
        self.assertEqual(result.notes, 'Applied user correction for "acme widgets ltd".')

    def test_promoted_correction(self):
        """Test three confirmations give 90."""
        result = self.categoriser.categorise(
            make_expense("ACME WIDGETS LTD 1234"), user_corrections=self._corrections(3)
        )

        self.assertEqual(result.confidence_score, 90)

    def test_single_correction_ignored(self):
        """Test a single correction is not trusted."""
        result = self.categoriser.categorise(
            make_expense("ACME WIDGETS LTD 1234"), user_corrections=self._corrections(1)
        )

        self.assertNotEqual(result.category, "Equipment")

    def test_correction_without_rate(self):
        """Test a correction without a VAT rate is not deductible."""
        result = self.categoriser.categorise(
            make_expense("ACME WIDGETS LTD 1234"), user_corrections=self._corrections(2, rate=None)
        )

        self.assertEqual(result.vat_type, "N/A")
        self.assertFalse(result.vat_deductible)

    def test_correction_beats_vendor_table(self):
        """Test a correction overrides a known vendor."""
        corrections = index_corrections([
            UserCorrection("pos screwfix ireland", "Office", 2, corrected_vat_rate=23)
        ])

        result = self.categoriser.categorise(make_expense("POS SCREWFIX IRELAND"), user_corrections=corrections)

        self.assertEqual(result.category, "Office")

    def test_confidence_levels(self):
        """Test correction confidence by confirmation count."""
        self.assertEqual(get_correction_confidence(UserCorrection("x", "Office", 1)), 0)
        self.assertEqual(get_correction_confidence(UserCorrection("x", "Office", 2)), 80)
        self.assertEqual(get_correction_confidence(UserCorrection("x", "Office", 7)), 90)

    def test_vat_labels(self):
        """Test corrected VAT rates map to labels."""
        self.assertEqual(correction_vat_type(13.5), "Reduced 13.5%")
        self.assertEqual(correction_vat_type(0), "Zero")
        self.assertEqual(correction_vat_type(15), "Standard 23%")
        self.assertEqual(correction_vat_type(None), "N/A")

    def test_find_correction_without_corrections(self):
        """Test lookups with no corrections return None."""
        self.assertIsNone(find_correction("ACME WIDGETS LTD", None))
        self.assertIsNone(find_correction("ACME WIDGETS LTD", {}))


class TestVendorCache(unittest.TestCase):
    """Test the learned vendor cache."""

    def setUp(self):
        """Set up test fixtures."""
        self.categoriser = AutoCategoriser()
        self.cache = {
            "murphy plant hire": VendorCacheEntry(
                vendor_pattern="murphy plant hire",
                normalized_name="Murphy Plant Hire",
                category="Equipment",
                vat_type="Standard 23%",
                vat_deductible=True,
                confidence=90,
            ),
            "murphy": VendorCacheEntry(
                vendor_pattern="murphy",
                normalized_name="Murphy",
                category="Sub Con",
                vat_type="Standard 23%",
                vat_deductible=True,
                confidence=80,
            ),
        }

    def test_cache_hit(self):
        """Test a cached vendor is used with its stored confidence."""
        result = self.categoriser.categorise(make_expense("MURPHY PLANT HIRE DUBLIN"), vendor_cache=self.cache)

        self.assertEqual(result.category, "Equipment")
        self.assertEqual(result.confidence_score, 90)
        self.assertEqual(result.notes, "Matched vendor: murphy plant hire.")
        self.assertIs(result.business_expense, BusinessExpense.BUSINESS)

    def test_longest_pattern_wins(self):
        """Test the most specific cached pattern is chosen."""
        entry = find_cache_entry("MURPHY PLANT HIRE DUBLIN", self.cache)

        self.assertEqual(entry.vendor_pattern, "murphy plant hire")
        self.assertEqual(find_cache_entry("MURPHY BROS", self.cache).vendor_pattern, "murphy")

    def test_cache_miss(self):
        """Test no entry is returned for an unknown vendor or empty cache."""
        self.assertIsNone(find_cache_entry("SOMEONE ELSE", self.cache))
        self.assertIsNone(find_cache_entry("MURPHY", None))

    def test_cache_beats_vendor_table(self):
        """Test a cached pattern overrides the static table."""
        cache = {
            "screwfix": VendorCacheEntry("screwfix", "Screwfix", "Office", "Standard 23%", True, 88),
        }

        result = self.categoriser.categorise(make_expense("POS SCREWFIX IRELAND"), vendor_cache=cache)

        self.assertEqual(result.category, "Office")
        self.assertEqual(result.confidence_score, 88)

    def test_section_60_still_applies(self):
        """Test statutory rules override a cached vendor."""
        cache = {
            "dooleys": VendorCacheEntry("dooleys", "Dooleys", "Office", "Standard 23%", True, 90),
        }

        result = self.categoriser.categorise(make_expense("DOOLEYS HOTEL"), vendor_cache=cache)

        self.assertEqual(result.category, "Travel & Subsistence")


class TestLoadVendorCacheCSV(unittest.TestCase):
    """Test loading a cache snapshot from CSV."""

    def setUp(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.csv_path = os.path.join(self.temp_dir, "vendor_cache.csv")
        with open(self.csv_path, "w", encoding="utf-8", newline="") as f:
            f.write("vendor_pattern,normalized_name,category,vat_type,vat_deductible,business_purpose,confidence,sector\n")
            f.write("  Murphy  Plant Hire ,Murphy Plant Hire,Equipment,Standard 23%,Yes,Plant hire,90,construction\n")
            f.write("kelly bank,,Bank fees,Exempt,false,,,\n")
            f.write(",Blank,Office,Standard 23%,true,,80,\n")

    def tearDown(self):
        """Clean up temporary files."""
        shutil.rmtree(self.temp_dir)

    def test_load(self):
        """Test rows are keyed by normalised pattern and blank rows skipped."""
        cache = load_vendor_cache_csv(self.csv_path)

        self.assertEqual(sorted(cache), ["kelly bank", "murphy plant hire"])

        murphy = cache["murphy plant hire"]
        self.assertEqual(murphy.category, "Equipment")
        self.assertTrue(murphy.vat_deductible)
        self.assertEqual(murphy.confidence, 90)
        self.assertEqual(murphy.sector, "construction")

    def test_defaults(self):
        """Test blank optional columns fall back to defaults."""
        kelly = load_vendor_cache_csv(self.csv_path)["kelly bank"]

        self.assertEqual(kelly.normalized_name, "kelly bank")
        self.assertFalse(kelly.vat_deductible)
        self.assertEqual(kelly.confidence, 85)
        self.assertIsNone(kelly.business_purpose)
        self.assertIsNone(kelly.sector)

    def test_missing_file(self):
        """Test a missing file raises FileNotFoundError."""
        with self.assertRaises(FileNotFoundError):
            load_vendor_cache_csv(os.path.join(self.temp_dir, "missing.csv"))


if __name__ == '__main__':
    unittest.main()
