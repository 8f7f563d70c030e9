"""
Tests for the vendor matching cascade: exact substring, fuzzy token
similarity and the merchant category code fallback.
"""

import unittest

from autocat_engine.categorisation.vendor_matcher import (
    VendorMatcher,
    levenshtein_distance,
    match_vendor,
    similarity,
)
from autocat_engine.categorisation.preprocess import normalise
from autocat_engine.rules.vendor_database import AmountAdjustment, VendorEntry


class TestStringSimilarity(unittest.TestCase):
    """Test the Levenshtein helpers."""

    def test_levenshtein_classic_example(self):
        """Test kitten -> sitting needs three edits."""
        self.assertEqual(levenshtein_distance("kitten", "sitting"), 3)

    def test_identical_strings(self):
        """Test identical strings have distance 0 and similarity 1."""
        self.assertEqual(levenshtein_distance("screwfix", "screwfix"), 0)
        self.assertEqual(similarity("screwfix", "screwfix"), 1.0)

    def test_two_empty_strings_are_identical(self):
        """Test similarity of two empty strings is 1.0."""
        self.assertEqual(similarity("", ""), 1.0)

    def test_one_typo_is_similar(self):
        """Test a dropped letter keeps similarity above 0.8."""
        self.assertGreater(similarity("screwfix", "screwfx"), 0.8)

    def test_normalise_none(self):
        """Test normalising None gives an empty string."""
        self.assertEqual(normalise(None), "")
        self.assertEqual(normalise("  POS   Screwfix  "), "pos screwfix")


class TestExactMatching(unittest.TestCase):
    """Test phase 1: substring match in table order."""

    def setUp(self):
        """Set up test fixtures."""
        self.matcher = VendorMatcher()

    def test_exact_match_trade_supplier(self):
        """Test Screwfix is found by substring with confidence 85."""
        result = self.matcher.match("POS SCREWFIX IRELAND")

        self.assertIsNotNone(result)
        self.assertEqual(result.vendor.name, "Screwfix")
        self.assertEqual(result.match_type, "exact")
        self.assertEqual(result.confidence, 85)
        self.assertEqual(result.matched_pattern, "screwfix")
        self.assertTrue(result.vendor.is_trade_supplier)

    def test_exact_match_software(self):
        """Test OpenAI is matched as a tech supplier."""
        result = self.matcher.match("OPENAI *CHATGPT SUBSCRIPTION")

        self.assertEqual(result.vendor.category, "Software")
        self.assertEqual(result.vendor.vat_type, "Standard 23%")
        self.assertTrue(result.vendor.vat_deductible)
        self.assertTrue(result.vendor.is_tech_supplier)

    def test_merchant_name_is_searched(self):
        """Test the merchant name is part of the haystack."""
        result = self.matcher.match("CARD PAYMENT 1234", merchant_name="Chadwicks")

        self.assertIsNotNone(result)
        self.assertEqual(result.vendor.name, "Chadwicks")

    def test_table_order_wins(self):
        """Test the first table entry wins when two patterns match."""
        vendors = [
            VendorEntry("Specific", ["maxol"], "General Expenses", "Standard 23%", False, "Fuel station."),
            VendorEntry("Generic", ["station"], "Motor/travel", "Standard 23%", True, "Generic."),
        ]
        result = VendorMatcher(vendors=vendors).match("MAXOL STATION")

        self.assertEqual(result.vendor.name, "Specific")

    def test_empty_description(self):
        """Test empty and whitespace descriptions do not match."""
        self.assertIsNone(self.matcher.match(""))
        self.assertIsNone(self.matcher.match("   "))
        self.assertIsNone(self.matcher.match(None))

    def test_deterministic(self):
        """Test identical inputs always give identical results."""
        first = self.matcher.match("POS SCREWFX DUBLIN")
        second = self.matcher.match("POS SCREWFX DUBLIN")

        self.assertEqual(first, second)


class TestFuzzyMatching(unittest.TestCase):
    """Test phase 2: token similarity."""

    def setUp(self):
        """Set up test fixtures."""
        self.matcher = VendorMatcher()

    def test_typo_matches_fuzzily(self):
        """Test a misspelt vendor is matched with confidence 75."""
        result = self.matcher.match("POS SCREWFX DUBLIN")

        self.assertIsNotNone(result)
        self.assertEqual(result.vendor.name, "Screwfix")
        self.assertEqual(result.match_type, "fuzzy")
        self.assertEqual(result.confidence, 75)
        self.assertGreaterEqual(result.similarity, 0.85)

    def test_multi_word_pattern_uses_ngrams(self):
        """Test a two-word pattern is compared against two-token windows."""
        vendors = [VendorEntry("Barna", ["barna recycling"], "Waste", "Standard 23%", True, "Waste.")]
        result = VendorMatcher(vendors=vendors).match("DD BARNA RECYCLNG 0042")

        self.assertIsNotNone(result)
        self.assertEqual(result.match_type, "fuzzy")

    def test_inserted_word_does_not_match(self):
        """Test an extra word inside a multi-word pattern gives no match."""
        vendors = [VendorEntry("Barna", ["barna recycling"], "Waste", "Standard 23%", True, "Waste.")]
        result = VendorMatcher(vendors=vendors).match("BARNA SKIP RECYCLING")

        self.assertIsNone(result)

    def test_short_tokens_only(self):
        """Test descriptions with no token of 3+ characters never match fuzzily."""
        vendors = [VendorEntry("Abcd", ["abcd"], "Software", "Standard 23%", True, "Test.")]
        result = VendorMatcher(vendors=vendors).match("ab cd")

        self.assertIsNone(result)

    def test_short_patterns_are_not_fuzzy_matched(self):
        """Test patterns under 4 characters are excluded from fuzzy matching."""
        vendors = [VendorEntry("Esb", ["esb"], "Light, power, heating", "Reduced 13.5%", True, "Test.")]
        result = VendorMatcher(vendors=vendors).match("PAYMENT ESX")

        self.assertIsNone(result)

    def test_unknown_vendor(self):
        """Test random text gives no match."""
        self.assertIsNone(self.matcher.match("RANDOM UNKNOWN VENDOR XYZ123"))


class TestMCCFallback(unittest.TestCase):
    """Test phase 3: merchant category code fallback."""

    def setUp(self):
        """Set up test fixtures."""
        self.matcher = VendorMatcher()

    def test_exact_mcc(self):
        """Test a known MCC yields a synthetic vendor at confidence 65."""
        result = self.matcher.match("XJQZ 0001", mcc_code=5541)

        self.assertIsNotNone(result)
        self.assertEqual(result.match_type, "mcc")
        self.assertEqual(result.confidence, 65)
        self.assertEqual(result.vendor.patterns, [])
        self.assertEqual(result.vendor.category, "General Expenses")
        self.assertTrue(result.vendor.needs_receipt)
        self.assertIn("MCC 5541", result.vendor.purpose)
        self.assertIsNone(result.matched_pattern)

    def test_mcc_range_fallback(self):
        """Test an unlisted hotel code falls back to the hotel range."""
        result = self.matcher.match("XJQZ 0001", mcc_code=3777)

        self.assertIsNotNone(result)
        self.assertEqual(result.vendor.name, "Hotels (general)")

    def test_unknown_mcc(self):
        """Test an unknown code outside the ranges gives no match."""
        self.assertIsNone(self.matcher.match("XJQZ 0001", mcc_code=1))

    def test_name_match_beats_mcc(self):
        """Test the MCC is ignored when the name matches."""
        result = self.matcher.match("POS SCREWFIX IRELAND", mcc_code=5541)

        self.assertEqual(result.match_type, "exact")


class TestAmountAdjustments(unittest.TestCase):
    """Test amount-conditioned overrides are reported alongside the base match."""

    def setUp(self):
        """Set up test fixtures."""
        self.vendor = VendorEntry(
            "Plant Shop",
            ["plant shop"],
            "Tools",
            "Standard 23%",
            True,
            "Small tools.",
            amount_adjustments=(
                AmountAdjustment(threshold=1000, category="Equipment", confidence=80, purpose="Capital item."),
            ),
        )
        self.matcher = VendorMatcher(vendors=[self.vendor])

    def test_large_amount_is_adjusted(self):
        """Test an amount over the threshold carries adjustments."""
        result = self.matcher.match("PLANT SHOP NAAS", amount=-1500.0)

        self.assertTrue(result.has_adjustment)
        self.assertEqual(result.adjusted_category, "Equipment")
        self.assertEqual(result.adjusted_confidence, 80)
        self.assertEqual(result.vendor.category, "Tools")

    def test_small_amount_is_not_adjusted(self):
        """Test an amount under the threshold has no adjustments."""
        result = self.matcher.match("PLANT SHOP NAAS", amount=-50.0)

        self.assertFalse(result.has_adjustment)
        self.assertIsNone(result.adjusted_category)


class TestModuleLevelMatch(unittest.TestCase):
    """Test the module-level convenience function."""

    def test_match_vendor(self):
        """Test match_vendor uses the built-in tables."""
        result = match_vendor("XERO UK LTD")

        self.assertEqual(result.vendor.category, "Software")


if __name__ == '__main__':
    unittest.main()
