"""
Tests for the Irish VAT rules engine: Section 60 restrictions, industry
output rates and the two-thirds rule.
"""

import unittest

from autocat_engine.config.vat_config import GIFTS_RULES, INDUSTRY_VAT_RULES, RCT_RULES, VAT_RATES, VAT_THRESHOLDS
from autocat_engine.vat.irish_vat_rules import (
    apply_two_thirds_rule,
    determine_vat_treatment,
    get_industry_output_rate,
    get_vat_rate_label,
    is_food_drink_accommodation,
)


class TestDetermineVatTreatmentExpenses(unittest.TestCase):
    """Test the expense side of determine_vat_treatment."""

    def test_food_blocked(self):
        """Test food and drink VAT is never recoverable."""
        treatment = determine_vat_treatment("SUPERMACS GALWAY", 12.50, "construction", "expense")

        self.assertEqual(treatment.suggested_rate, "standard_23")
        self.assertFalse(treatment.is_vat_recoverable)
        self.assertFalse(treatment.needs_receipt)
        self.assertIn("Section 60(2)(a)(i)", treatment.explanation)
        self.assertTrue(treatment.warnings)

    def test_entertainment_blocked(self):
        """Test entertainment VAT is never recoverable."""
        treatment = determine_vat_treatment("CINEMA TICKETS", 30.0, None, "expense")

        self.assertFalse(treatment.is_vat_recoverable)
        self.assertIn("Section 60(2)(a)(iii)", treatment.explanation)

    def test_petrol_blocked(self):
        """Test petrol VAT is blocked and a receipt is requested."""
        treatment = determine_vat_treatment("UNLEADED 95", 60.0, None, "expense")

        self.assertFalse(treatment.is_vat_recoverable)
        self.assertTrue(treatment.needs_receipt)
        self.assertIn("Section 60(2)(a)(v)", treatment.explanation)

    def test_diesel_recoverable(self):
        """Test diesel VAT is recoverable."""
        treatment = determine_vat_treatment("DIESEL PUMP 3", 80.0, None, "expense")

        self.assertTrue(treatment.is_vat_recoverable)
        self.assertTrue(treatment.needs_receipt)
        self.assertEqual(treatment.warnings, [])

    def test_diesel_wins_over_petrol(self):
        """Test a description mentioning both fuels is treated as diesel."""
        treatment = determine_vat_treatment("DIESEL AND PETROL", 80.0, None, "expense")

        self.assertTrue(treatment.is_vat_recoverable)

    def test_mixed_fuel_retailer(self):
        """Test forecourt brands need a receipt before VAT is claimed."""
        treatment = determine_vat_treatment("MAXOL BALLYMUN", 45.0, None, "expense")

        self.assertFalse(treatment.is_vat_recoverable)
        self.assertTrue(treatment.needs_receipt)
        self.assertIn("Mixed retailer", treatment.warnings[0])

    def test_default_expense(self):
        """Test an unremarkable expense defaults to recoverable standard rate."""
        treatment = determine_vat_treatment("OFFICE CHAIR", 150.0, None, "expense")

        self.assertEqual(treatment.suggested_rate, "standard_23")
        self.assertTrue(treatment.is_vat_recoverable)
        self.assertTrue(treatment.needs_receipt)
        self.assertEqual(treatment.explanation, "Standard rate assumed - verify with receipt")

    def test_none_description(self):
        """Test a missing description falls through to the default."""
        treatment = determine_vat_treatment(None, 0.0, None, "expense")

        self.assertTrue(treatment.is_vat_recoverable)

    def test_bar_needs_word_boundary(self):
        """Test 'bar' only counts as a whole word."""
        self.assertTrue(is_food_drink_accommodation("the bar tab"))
        self.assertFalse(is_food_drink_accommodation("barna recycling"))


class TestDetermineVatTreatmentIncome(unittest.TestCase):
    """Test the income side of determine_vat_treatment."""

    def test_construction_output_rate(self):
        """Test construction income gets the 13.5% rate."""
        treatment = determine_vat_treatment("PAYMENT FROM CLIENT", 5000.0, "construction", "income")

        self.assertEqual(treatment.suggested_rate, "reduced_13_5")
        self.assertFalse(treatment.is_vat_recoverable)
        self.assertFalse(treatment.needs_receipt)
        self.assertEqual(treatment.explanation, "Output VAT at Reduced Rate (13.5%) for construction")

    def test_unknown_industry(self):
        """Test an unknown or missing industry uses the standard rate."""
        treatment = determine_vat_treatment("PAYMENT", 100.0, None, "income")

        self.assertEqual(treatment.suggested_rate, "standard_23")
        self.assertEqual(treatment.explanation, "Output VAT at Standard Rate (23%) for general")

    def test_income_ignores_section_60(self):
        """Test food words do not block output VAT on income."""
        treatment = determine_vat_treatment("RESTAURANT TAKINGS", 900.0, "hospitality", "income")

        self.assertEqual(treatment.suggested_rate, "second_reduced_9")


class TestRateHelpers(unittest.TestCase):
    """Test rate label and industry helpers."""

    def test_labels(self):
        """Test rate keys map to their short labels."""
        self.assertEqual(get_vat_rate_label("standard_23"), "Standard 23%")
        self.assertEqual(get_vat_rate_label("reduced_13_5"), "Reduced 13.5%")
        self.assertEqual(get_vat_rate_label("zero_rated"), "Zero")
        self.assertEqual(get_vat_rate_label("exempt"), "Exempt")

    def test_unknown_label(self):
        """Test an unknown key falls back to the standard label."""
        self.assertEqual(get_vat_rate_label("nonsense"), "Standard 23%")

    def test_industry_rates(self):
        """Test industry codes are case and whitespace insensitive."""
        self.assertEqual(get_industry_output_rate("Hospitality "), "second_reduced_9")
        self.assertEqual(get_industry_output_rate("electrical"), "reduced_13_5")
        self.assertEqual(get_industry_output_rate("professional_services"), "standard_23")
        self.assertEqual(get_industry_output_rate(""), "standard_23")


class TestTwoThirdsRule(unittest.TestCase):
    """Test the two-thirds rule for repairs."""

    def test_labour_heavy_job(self):
        """Test parts under two thirds make a 13.5% service."""
        result = apply_two_thirds_rule(100.0, 200.0)

        self.assertEqual(result.applicable_rate, "reduced_13_5")
        self.assertTrue(result.is_service_supply)
        self.assertIn("50.0%", result.explanation)

    def test_parts_heavy_job(self):
        """Test parts over two thirds make a 23% supply of goods."""
        result = apply_two_thirds_rule(150.0, 200.0)

        self.assertEqual(result.applicable_rate, "standard_23")
        self.assertFalse(result.is_service_supply)

    def test_exactly_two_thirds(self):
        """Test exactly two thirds counts as goods."""
        result = apply_two_thirds_rule(200.0, 300.0)

        self.assertEqual(result.applicable_rate, "standard_23")

    def test_boundary_around_two_thirds(self):
        """Test amounts either side of two thirds of a €1000 job."""
        self.assertEqual(apply_two_thirds_rule(666.67, 1000.0).applicable_rate, "standard_23")
        self.assertEqual(apply_two_thirds_rule(666.0, 1000.0).applicable_rate, "reduced_13_5")

    def test_non_positive_total(self):
        """Test a zero or negative total is rejected."""
        with self.assertRaises(ValueError):
            apply_two_thirds_rule(10.0, 0.0)
        with self.assertRaises(ValueError):
            apply_two_thirds_rule(10.0, -5.0)


class TestVatConfig(unittest.TestCase):
    """Test the VAT constants are internally consistent."""

    def test_rates(self):
        """Test rates are fractions and every key has both labels."""
        for key, rate in VAT_RATES.items():
            self.assertGreaterEqual(rate["rate"], 0.0, key)
            self.assertLess(rate["rate"], 1.0, key)
            self.assertIn("label", rate)
            self.assertIn("vat_type", rate)
        self.assertEqual(VAT_RATES["standard_23"]["rate"], 0.23)
        self.assertEqual(VAT_RATES["exempt"]["rate"], 0.0)

    def test_industry_rates_are_known_keys(self):
        """Test every industry default output rate is a known rate key."""
        for industry, rules in INDUSTRY_VAT_RULES.items():
            self.assertIn(rules["default_output_rate"], VAT_RATES, industry)

    def test_rct_rates(self):
        """Test the RCT deduction rates."""
        self.assertEqual(RCT_RULES["rates"], {"compliant": 0, "standard": 20, "non_compliant": 35})
        self.assertIn("construction", RCT_RULES["applicable_industries"])

    def test_thresholds(self):
        """Test registration and gift thresholds."""
        self.assertEqual(VAT_THRESHOLDS["goods"], 85000)
        self.assertEqual(VAT_THRESHOLDS["services"], 42500)
        self.assertEqual(GIFTS_RULES["threshold"], 20)


if __name__ == '__main__':
    unittest.main()
