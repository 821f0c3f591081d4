"""
Unit tests for representation translation and multi-variable sampling.
"""

import unittest

import numpy as np

from core.errors import (
    InvalidArgumentError,
    InvalidParameterError,
    SizeMismatchError,
    UninitializedError,
    UnsupportedOperationError,
)
from distributions.lognormal import Lognormal
from distributions.normal import Normal
from engine.container import RandomVariableContainer
from engine.translation import fit, latin_hypercube, sample, sample_lh, sample_mc
from samples.unweighted import Unweighted
from samples.weighted import Weighted


class TestSampleAndFit(unittest.TestCase):

    def test_sample_into_unweighted(self):
        result = sample(Normal(10.0, 1.0, seed=1), 500)
        self.assertIsInstance(result, Unweighted)
        self.assertEqual(result.size, 500)
        self.assertAlmostEqual(result.mean(), 10.0, delta=0.2)

    def test_sample_into_weighted(self):
        result = sample(Normal(0.0, 1.0, seed=2), 200, target=Weighted)
        self.assertIsInstance(result, Weighted)
        self.assertEqual(result.size, 200)

    def test_sample_invalid_count(self):
        with self.assertRaises(InvalidArgumentError):
            sample(Normal(), 0)

    def test_fit_normal(self):
        fitted = fit(Unweighted([-1.0, 0.0, 1.0]))
        self.assertIsInstance(fitted, Normal)
        self.assertAlmostEqual(fitted.mu, 0.0)
        self.assertAlmostEqual(fitted.sigma, 1.0)

    def test_fit_weighted_uses_population_std(self):
        fitted = fit(Weighted([1.0, 3.0]))
        self.assertAlmostEqual(fitted.mu, 2.0)
        self.assertAlmostEqual(fitted.sigma, 1.0)

    def test_fit_lognormal(self):
        source = Lognormal(0.5, 0.3, seed=4)
        fitted = fit(sample(source, 20000), family=Lognormal)
        self.assertIsInstance(fitted, Lognormal)
        self.assertAlmostEqual(fitted.mu, 0.5, delta=0.02)
        self.assertAlmostEqual(fitted.sigma, 0.3, delta=0.02)

    def test_fit_constant_data_fails(self):
        with self.assertRaises(InvalidParameterError):
            fit(Unweighted([2.0, 2.0, 2.0]))


class TestMonteCarlo(unittest.TestCase):

    def test_sum_of_three_normals(self):
        rvc = RandomVariableContainer(lambda v: v[0] + v[1] + v[2], arity=3)
        for i in range(3):
            rvc.add(Normal(0.0, 0.01, seed=i))
        result = sample_mc(rvc, 1000)
        self.assertEqual(result.size, 1000)
        self.assertLess(abs(result.mean()), 0.003)
        self.assertAlmostEqual(result.std(), 0.01 * np.sqrt(3), delta=0.002)

    def test_members_drawn_in_stored_order(self):
        rvc = RandomVariableContainer(lambda v: v[0] - v[1])
        rvc.add(Unweighted([10.0, 20.0]))
        rvc.add(Unweighted([1.0, 2.0]))
        result = sample_mc(rvc, 4)
        self.assertEqual(result.get_data(), [9.0, 18.0, 9.0, 18.0])

    def test_weighted_target(self):
        rvc = RandomVariableContainer(lambda v: v[0], [Unweighted([1.0, 1.0, 2.0])])
        result = sample_mc(rvc, 3, target=Weighted)
        self.assertEqual(result.get_wdata(), [(1.0, 2), (2.0, 1)])

    def test_requires_equation(self):
        rvc = RandomVariableContainer(members=[Normal()])
        with self.assertRaises(UninitializedError):
            sample_mc(rvc, 10)

    def test_requires_members(self):
        with self.assertRaises(InvalidArgumentError):
            sample_mc(RandomVariableContainer(lambda v: 0.0), 10)

    def test_member_count_must_match_arity(self):
        rvc = RandomVariableContainer(lambda v: v[0] + v[1], [Normal()], arity=2)
        with self.assertRaises(SizeMismatchError):
            sample_mc(rvc, 10)


class TestLatinHypercube(unittest.TestCase):

    def test_design_shape_and_strata(self):
        strata, probabilities = latin_hypercube(3, 100, rng=0)
        self.assertEqual(strata.shape, (3, 100))
        self.assertEqual(probabilities.shape, (3, 100))
        for row in strata:
            np.testing.assert_array_equal(np.sort(row), np.arange(100))
        self.assertTrue(np.all(probabilities >= 0.0))
        self.assertTrue(np.all(probabilities < 1.0))
        offsets = probabilities * 100 - strata
        self.assertTrue(np.all((offsets > -1e-9) & (offsets < 1.0 + 1e-9)))

    def test_design_is_reproducible(self):
        a = latin_hypercube(2, 50, rng=7)[1]
        b = latin_hypercube(2, 50, rng=7)[1]
        np.testing.assert_array_equal(a, b)

    def test_every_stratum_hit_once(self):
        n = 100
        dist = Normal(0.0, 1.0)
        rvc = RandomVariableContainer(lambda v: v[0], [dist])
        result = sample_lh(rvc, n, rng=0)
        probabilities = np.sort([dist.cdf(x) for x in result.get_data()])
        lower = np.arange(n) / n
        self.assertTrue(np.all(probabilities >= lower - 1e-9))
        self.assertTrue(np.all(probabilities < lower + 1.0 / n + 1e-9))

    def test_lh_mean_of_sum(self):
        rvc = RandomVariableContainer(lambda v: v[0] + v[1], arity=2)
        rvc.add(Normal(1.0, 0.1))
        rvc.add(Normal(2.0, 0.1))
        result = sample_lh(rvc, 1000, rng=3)
        self.assertAlmostEqual(result.mean(), 3.0, delta=0.005)

    def test_lh_with_weighted_member(self):
        rvc = RandomVariableContainer(lambda v: v[0] * v[1])
        rvc.add(Weighted([1.0, 2.0, 3.0, 4.0]))
        rvc.add(Normal(1.0, 0.01))
        result = sample_lh(rvc, 400, rng=1)
        self.assertEqual(result.size, 400)
        self.assertAlmostEqual(result.mean(), 2.5, delta=0.1)

    def test_lh_rejects_unweighted_member(self):
        rvc = RandomVariableContainer(lambda v: v[0], [Unweighted([1.0, 2.0])])
        with self.assertRaises(UnsupportedOperationError):
            sample_lh(rvc, 10)


if __name__ == "__main__":
    unittest.main()
