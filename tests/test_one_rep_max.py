import unittest

from src.one_rep_max import estimate_one_rep_max


class EstimateOneRepMaxTests(unittest.TestCase):
    def test_zero_reps_is_zero(self):
        for weight in (20, 100, 250.5):
            for rir in (0, 1, 4):
                self.assertEqual(estimate_one_rep_max(weight, 0, rir), 0)

    def test_single_effective_rep_returns_weight(self):
        self.assertEqual(estimate_one_rep_max(140, 1), 140)
        self.assertEqual(estimate_one_rep_max(140, 1, 0), 140)
        self.assertEqual(estimate_one_rep_max(140, 0.5, 0.5), 140)

    def test_epley_with_reps_in_reserve(self):
        self.assertAlmostEqual(estimate_one_rep_max(100, 5, 2), 100 * (1 + 7 / 30))
        self.assertAlmostEqual(round(estimate_one_rep_max(100, 5, 2), 2), 123.33)

    def test_rir_defaults_to_zero(self):
        self.assertAlmostEqual(estimate_one_rep_max(100, 5), 100 * (1 + 5 / 30))

    def test_monotonic_in_reps_and_rir(self):
        weight = 80
        previous = 0
        for reps in range(0, 15):
            value = estimate_one_rep_max(weight, reps, 2)
            self.assertGreaterEqual(value, previous)
            previous = value

        previous = 0
        for rir in range(0, 6):
            value = estimate_one_rep_max(weight, 3, rir)
            self.assertGreaterEqual(value, previous)
            previous = value


if __name__ == "__main__":
    unittest.main()
