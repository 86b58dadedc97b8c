import unittest

from src.number_parser import normalize_number


class NormalizeNumberTests(unittest.TestCase):
    def test_decimal_comma_with_unit(self):
        self.assertEqual(normalize_number("82,5 KG"), 82.5)

    def test_plain_integer_with_unit(self):
        self.assertEqual(normalize_number("100kg"), 100.0)

    def test_decimal_point_is_kept(self):
        self.assertEqual(normalize_number(" 7.5 "), 7.5)

    def test_negative_value(self):
        self.assertEqual(normalize_number("-2"), -2.0)

    def test_missing_inputs(self):
        self.assertIsNone(normalize_number(None))
        self.assertIsNone(normalize_number(""))
        self.assertIsNone(normalize_number("   "))

    def test_text_without_digits_is_missing(self):
        self.assertIsNone(normalize_number("KG"))
        self.assertIsNone(normalize_number("-"))

    def test_numbers_pass_through(self):
        self.assertEqual(normalize_number(5), 5.0)
        self.assertEqual(normalize_number(62.5), 62.5)

    def test_non_finite_numbers_are_missing(self):
        self.assertIsNone(normalize_number(float("nan")))
        self.assertIsNone(normalize_number(float("inf")))

    def test_bool_is_missing(self):
        self.assertIsNone(normalize_number(True))

    def test_grouped_thousands_is_best_effort(self):
        # "1.234,5" becomes "1.234.5" after the single substitution
        self.assertEqual(normalize_number("1.234,5"), 1.234)
        self.assertEqual(normalize_number("1,234"), 1.234)

    def test_ranges_read_the_leading_number(self):
        self.assertEqual(normalize_number("8-10"), 8.0)
        self.assertEqual(normalize_number("1-2"), 1.0)
        self.assertEqual(normalize_number("2,5-3 RIR"), 2.5)

    def test_malformed_sign_is_missing(self):
        self.assertIsNone(normalize_number("--2"))


if __name__ == "__main__":
    unittest.main()
