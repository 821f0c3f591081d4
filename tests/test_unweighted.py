"""
Unit tests for the Unweighted sample set.
"""

import unittest

import numpy as np

from core.errors import InvalidArgumentError, OutOfRangeError, UnsupportedOperationError
from samples.unweighted import Unweighted
from samples.weighted import Weighted


class TestAccessors(unittest.TestCase):

    def test_empty_then_append(self):
        s = Unweighted()
        self.assertEqual(s.size, 0)
        for _ in range(100):
            s.append(5)
        self.assertEqual(len(s), 100)
        self.assertEqual(s.get(99), 5.0)

    def test_get_and_set(self):
        s = Unweighted([1.0, 2.0, 3.0])
        s.set(1, 9.0)
        self.assertEqual(s.get_data(), [1.0, 9.0, 3.0])

    def test_out_of_range(self):
        s = Unweighted([1.0, 2.0])
        for k in (2, -1):
            with self.assertRaises(OutOfRangeError):
                s.get(k)
            with self.assertRaises(OutOfRangeError):
                s.set(k, 0.0)
        self.assertEqual(s.get_data(), [1.0, 2.0])

    def test_get_data_is_a_copy(self):
        s = Unweighted([1.0])
        s.get_data().append(2.0)
        self.assertEqual(s.size, 1)

    def test_from_pairs_expands(self):
        s = Unweighted.from_pairs([(1.0, 2), (4.0, 3)])
        self.assertEqual(s.get_data(), [1.0, 1.0, 4.0, 4.0, 4.0])

    def test_from_pairs_rejects_bad_frequency(self):
        with self.assertRaises(InvalidArgumentError):
            Unweighted.from_pairs([(1.0, 0)])


class TestCalculations(unittest.TestCase):

    def test_mean(self):
        self.assertAlmostEqual(Unweighted([1, 2, 3, 4]).mean(), 2.5)

    def test_median_odd(self):
        self.assertEqual(Unweighted([9, 1, 5]).median(), 5.0)

    def test_median_even_uses_sorted_middle_pair(self):
        self.assertEqual(Unweighted([4, 1, 3, 2]).median(), 2.5)

    def test_std_uses_n_minus_one(self):
        data = [2.0, 4.0, 4.0, 4.0, 5.0, 5.0, 7.0, 9.0]
        self.assertAlmostEqual(Unweighted(data).std(), float(np.std(data, ddof=1)))

    def test_variance_is_std_squared(self):
        s = Unweighted([1.0, 2.0, 6.0])
        self.assertAlmostEqual(s.variance(), s.std() ** 2)

    def test_std_needs_two_values(self):
        with self.assertRaises(InvalidArgumentError):
            Unweighted([1.0]).std()

    def test_empty_statistics_raise(self):
        for method in ("mean", "median", "mode", "mean_height"):
            with self.assertRaises(InvalidArgumentError):
                getattr(Unweighted(), method)()

    def test_mode(self):
        self.assertEqual(Unweighted([5, 5, 5, 1, 1, 2]).mode(), 5.0)

    def test_mode_tie_breaks_on_sorted_order(self):
        self.assertEqual(Unweighted([3, 3, 1, 1, 2]).mode(), 1.0)

    def test_mode_all_distinct(self):
        self.assertEqual(Unweighted([4, 2, 8]).mode(), 2.0)

    def test_mode_later_longer_run(self):
        self.assertEqual(Unweighted([1, 2, 2, 3, 3, 3]).mode(), 3.0)

    def test_mean_height(self):
        self.assertEqual(Unweighted([1, 1, 3, 4, 5, 5]).mean_height(), 1.5)
        self.assertEqual(Unweighted([1, 2, 3, 4, 5, 6]).mean_height(), 1.0)

    def test_stats(self):
        stats = Unweighted([-1.0, 0.0, 1.0]).stats()
        self.assertAlmostEqual(stats.mean, 0.0)
        self.assertAlmostEqual(stats.std, 1.0)
        self.assertEqual(stats.mode, -1.0)


class TestSampling(unittest.TestCase):

    def test_round_robin(self):
        s = Unweighted([1.0, 2.0, 3.0])
        self.assertEqual(s.sample_single(), 1.0)
        np.testing.assert_array_equal(s.sample(4), [2.0, 3.0, 1.0, 2.0])
        self.assertEqual(s.sample_single(), 3.0)

    def test_cursor_is_per_instance(self):
        a = Unweighted([1.0, 2.0])
        b = Unweighted([1.0, 2.0])
        a.sample_single()
        self.assertEqual(b.sample_single(), 1.0)

    def test_cursor_follows_growth(self):
        s = Unweighted([1.0])
        s.sample_single()
        s.append(2.0)
        self.assertEqual(s.sample_single(), 2.0)

    def test_reset_cursor(self):
        s = Unweighted([1.0, 2.0, 3.0])
        s.sample(2)
        s.reset_cursor()
        self.assertEqual(s.sample_single(), 1.0)

    def test_empty_sampling_raises(self):
        with self.assertRaises(InvalidArgumentError):
            Unweighted().sample_single()

    def test_icdf_unsupported(self):
        s = Unweighted([1.0, 2.0])
        with self.assertRaises(UnsupportedOperationError):
            s.sample_single_icdf(0.5)
        with self.assertRaises(UnsupportedOperationError):
            s.sample_icdf(1, [0.5])


class TestConversion(unittest.TestCase):

    def test_to_weighted(self):
        w = Unweighted([5, 1, 1, 3]).to_weighted()
        self.assertIsInstance(w, Weighted)
        self.assertEqual(w.get_wdata(), [(1.0, 2), (3.0, 1), (5.0, 1)])

    def test_round_trip_preserves_multiset(self):
        data = [2.5, -1.0, 2.5, 7.0, 0.0, -1.0, 2.5]
        back = Unweighted(data).to_weighted().to_unweighted()
        self.assertEqual(sorted(back.get_data()), sorted(data))

    def test_frequency_table_sorted(self):
        table = Unweighted([3, 1, 3, 2]).frequency_table()
        self.assertEqual(table, [(1.0, 1), (2.0, 1), (3.0, 2)])


if __name__ == "__main__":
    unittest.main()
