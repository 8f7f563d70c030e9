"""
Tests for VAT deductibility decisions and gross-to-net VAT extraction.
"""

import unittest

from autocat_engine.vat.vat_deductibility import calculate_vat_from_gross, is_vat_deductible


class TestIsVatDeductible(unittest.TestCase):
    """Test is_vat_deductible in statutory precedence order."""

    def test_restaurant(self):
        """Test restaurant meals are blocked under Section 60(2)(a)(i)."""
        result = is_vat_deductible("Nandos restaurant")

        self.assertFalse(result.is_deductible)
        self.assertEqual(result.section, "Section 60(2)(a)(i)")

    def test_hotel(self):
        """Test hotel stays are blocked."""
        self.assertFalse(is_vat_deductible("Maldron Hotel").is_deductible)

    def test_streaming(self):
        """Test streaming subscriptions are entertainment."""
        result = is_vat_deductible("Netflix subscription")

        self.assertFalse(result.is_deductible)
        self.assertEqual(result.section, "Section 60(2)(a)(iii)")

    def test_passenger_vehicle(self):
        """Test car purchases are blocked under Section 60(2)(a)(iv)."""
        result = is_vat_deductible("Car purchase")

        self.assertFalse(result.is_deductible)
        self.assertEqual(result.section, "Section 60(2)(a)(iv)")

    def test_petrol(self):
        """Test petrol is blocked even at a forecourt."""
        result = is_vat_deductible("Petrol at Maxol")

        self.assertFalse(result.is_deductible)
        self.assertEqual(result.section, "Section 60(2)(a)(v)")

    def test_diesel(self):
        """Test diesel is deductible."""
        result = is_vat_deductible("Diesel purchase")

        self.assertTrue(result.is_deductible)
        self.assertIsNone(result.section)

    def test_diesel_and_petrol(self):
        """Test diesel wins when both fuels are mentioned."""
        self.assertTrue(is_vat_deductible("Diesel and petrol").is_deductible)

    def test_forecourt_fuel(self):
        """Test fuel at a mixed retailer is deductible when petrol is not mentioned."""
        result = is_vat_deductible("Applegreen fuel")

        self.assertTrue(result.is_deductible)
        self.assertEqual(result.reason, "Fuel purchase - VAT recoverable")

    def test_forecourt_without_fuel(self):
        """Test a bare forecourt purchase needs a receipt."""
        result = is_vat_deductible("Circle K")

        self.assertFalse(result.is_deductible)
        self.assertEqual(result.section, "Section 60")

    def test_meals_category(self):
        """Test the category alone can block deductibility."""
        result = is_vat_deductible("Invoice 42", category="Meals & Entertainment")

        self.assertFalse(result.is_deductible)
        self.assertIn("60", result.section)

    def test_fines_category(self):
        """Test fines and penalties are never deductible."""
        result = is_vat_deductible("Parking ticket", category="Fines & Penalties")

        self.assertFalse(result.is_deductible)
        self.assertEqual(result.reason, "Fines & penalties are not allowable tax deductions")

    def test_penalty_in_description(self):
        """Test a penalty mentioned in the description is caught."""
        self.assertFalse(is_vat_deductible("penalty charge notice").is_deductible)

    def test_drawings_category(self):
        """Test director's drawings are a capital movement."""
        result = is_vat_deductible("Transfer", category="Director's Drawings")

        self.assertFalse(result.is_deductible)
        self.assertIn("capital movement", result.reason)

    def test_bank_fee(self):
        """Test bank fees are exempt."""
        self.assertFalse(is_vat_deductible("AIB bank fee").is_deductible)

    def test_insurance(self):
        """Test insurance is exempt."""
        self.assertFalse(is_vat_deductible("Motor insurance").is_deductible)

    def test_private_use(self):
        """Test private use is blocked under Section 59."""
        result = is_vat_deductible("Private health")

        self.assertFalse(result.is_deductible)
        self.assertEqual(result.section, "Section 59")

    def test_ordinary_business_expense(self):
        """Test an ordinary purchase is deductible."""
        result = is_vat_deductible("Office supplies")

        self.assertTrue(result.is_deductible)
        self.assertEqual(result.reason, "Business expense - VAT recoverable")

    def test_bar_word_boundary(self):
        """Test 'bar' as a word blocks but as a prefix does not."""
        self.assertFalse(is_vat_deductible("The bar tab").is_deductible)
        self.assertTrue(is_vat_deductible("Barna Recycling").is_deductible)

    def test_account_is_considered(self):
        """Test the account name feeds the combined text."""
        self.assertFalse(is_vat_deductible("Invoice 7", account="Staff canteen food").is_deductible)

    def test_empty_description(self):
        """Test a missing description is treated as a generic expense."""
        self.assertTrue(is_vat_deductible(None).is_deductible)


class TestCalculateVatFromGross(unittest.TestCase):
    """Test VAT extraction from gross amounts."""

    def test_standard_rate_key(self):
        """Test 123 gross at 23% splits into 100 net and 23 VAT."""
        split = calculate_vat_from_gross(123.0, "standard_23")

        self.assertAlmostEqual(split.vat_amount, 23.0)
        self.assertAlmostEqual(split.net_amount, 100.0)

    def test_numeric_rate(self):
        """Test numeric percentages are accepted."""
        split = calculate_vat_from_gross(113.5, 13.5)

        self.assertAlmostEqual(split.vat_amount, 13.5)
        self.assertAlmostEqual(split.net_amount, 100.0)

    def test_rounding(self):
        """Test both parts are rounded to cents and add up to gross."""
        split = calculate_vat_from_gross(10.0, "standard_23")

        self.assertAlmostEqual(split.vat_amount, 1.87)
        self.assertAlmostEqual(split.net_amount, 8.13)

    def test_exempt_and_zero(self):
        """Test zero-rate keys leave the whole amount as net."""
        for rate in ("exempt", "zero_rated", 0):
            split = calculate_vat_from_gross(50.0, rate)
            self.assertEqual(split.vat_amount, 0.0)
            self.assertEqual(split.net_amount, 50.0)

    def test_unknown_key_uses_standard(self):
        """Test an unknown key falls back to the standard rate."""
        split = calculate_vat_from_gross(123.0, "bogus")

        self.assertAlmostEqual(split.vat_amount, 23.0)

    def test_negative_rate(self):
        """Test a negative numeric rate is rejected."""
        with self.assertRaises(ValueError):
            calculate_vat_from_gross(100.0, -5)


if __name__ == '__main__':
    unittest.main()
