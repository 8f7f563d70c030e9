"""
Tests for the static rule tables (vendors and merchant category codes)
and their load-time integrity checks.
"""

import unittest

from autocat_engine.rules.mcc_codes import (
    MCC_MAPPINGS,
    MCCMapping,
    check_mcc_mappings,
    lookup_mcc,
    lookup_mcc_with_fallback,
    validate_mcc_mappings,
)
from autocat_engine.rules.vendor_database import (
    RELIEF_TYPES,
    VENDOR_DATABASE,
    RuleTableError,
    VendorEntry,
    check_vendor_database,
    get_total_pattern_count,
    get_used_categories,
    get_vendors_by_sector,
    validate_vendor_database,
)


class TestVendorDatabase(unittest.TestCase):
    """Test the built-in vendor table."""

    def test_builtin_table_is_valid(self):
        """Test the shipped table passes every integrity check."""
        self.assertEqual(check_vendor_database(VENDOR_DATABASE), [])
        validate_vendor_database()

    def test_patterns_are_lowercase(self):
        """Test every pattern is already lowercase."""
        for entry in VENDOR_DATABASE:
            for pattern in entry.patterns:
                self.assertEqual(pattern, pattern.lower(), entry.name)

    def test_relief_types_are_known(self):
        """Test every relief tag is one of the six relief kinds."""
        for entry in VENDOR_DATABASE:
            if entry.relief_type is not None:
                self.assertIn(entry.relief_type, RELIEF_TYPES)

    def test_pattern_count(self):
        """Test the pattern count is at least the number of vendors."""
        self.assertGreaterEqual(get_total_pattern_count(), len(VENDOR_DATABASE))

    def test_used_categories_are_distinct(self):
        """Test the category listing has no duplicates."""
        categories = get_used_categories()

        self.assertEqual(len(categories), len(set(categories)))
        self.assertIn("Materials", categories)
        self.assertIn("Software", categories)

    def test_vendors_by_sector(self):
        """Test sector filtering returns only matching rows."""
        trade = get_vendors_by_sector("trade")

        self.assertTrue(trade)
        self.assertTrue(all(entry.sector == "trade" for entry in trade))
        self.assertIn("Screwfix", [entry.name for entry in trade])


class TestVendorValidation(unittest.TestCase):
    """Test malformed vendor tables are rejected."""

    def test_no_patterns(self):
        """Test a vendor without patterns is reported."""
        entries = [VendorEntry("Empty", [], "Software", "Standard 23%", True, "Test.")]

        self.assertIn("Empty: no patterns", check_vendor_database(entries))

    def test_uppercase_pattern(self):
        """Test uppercase patterns are reported."""
        entries = [VendorEntry("Loud", ["LOUD"], "Software", "Standard 23%", True, "Test.")]

        self.assertIn('Loud: pattern "LOUD" is not lowercase', check_vendor_database(entries))

    def test_exempt_cannot_be_deductible(self):
        """Test an exempt vendor flagged deductible is reported."""
        entries = [VendorEntry("Bank", ["bank"], "Bank fees", "Exempt", True, "Test.")]

        self.assertIn("Bank: exempt VAT type cannot be deductible", check_vendor_database(entries))

    def test_validate_raises(self):
        """Test validation raises RuleTableError listing the problems."""
        entries = [VendorEntry("Bad", [], "", "Standard 23%", True, "Test.", relief_type="lottery")]

        with self.assertRaises(RuleTableError) as ctx:
            validate_vendor_database(entries)

        self.assertEqual(ctx.exception.table, "vendor database")
        self.assertEqual(len(ctx.exception.errors), 3)
        self.assertIsInstance(ctx.exception, ValueError)


class TestMCCTable(unittest.TestCase):
    """Test the merchant category code table."""

    def test_builtin_table_is_valid(self):
        """Test the shipped MCC table passes its checks."""
        self.assertEqual(check_mcc_mappings(MCC_MAPPINGS), [])
        validate_mcc_mappings()

    def test_fuel_station(self):
        """Test fuel stations need a receipt and are not deductible."""
        mapping = lookup_mcc(5541)

        self.assertEqual(mapping.category, "General Expenses")
        self.assertFalse(mapping.vat_deductible)
        self.assertTrue(mapping.needs_receipt)

    def test_building_materials(self):
        """Test lumber and building materials are trade supplies."""
        mapping = lookup_mcc(5211)

        self.assertEqual(mapping.category, "Materials")
        self.assertTrue(mapping.is_trade_supplier)

    def test_repeated_code_last_wins(self):
        """Test a code listed twice resolves to its later row."""
        self.assertEqual(lookup_mcc(7011).description, "Lodging (Hotels/Motels)")

    def test_range_fallback(self):
        """Test codes inside a scheme range use the range's generic entry."""
        self.assertIsNone(lookup_mcc(3777))
        self.assertEqual(lookup_mcc_with_fallback(3777).code, 3501)

    def test_unknown_code(self):
        """Test unknown codes and None give no mapping."""
        self.assertIsNone(lookup_mcc_with_fallback(1))
        self.assertIsNone(lookup_mcc_with_fallback(None))

    def test_validate_raises(self):
        """Test a malformed MCC table is rejected."""
        mappings = [MCCMapping(1234, "", "other", "Exempt", True)]

        with self.assertRaises(RuleTableError) as ctx:
            validate_mcc_mappings(mappings)

        self.assertEqual(ctx.exception.table, "MCC table")
        # missing description, exempt deductible and the three range fallbacks
        self.assertEqual(len(ctx.exception.errors), 5)


if __name__ == '__main__':
    unittest.main()
