"""
Tests for the binomial measure.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import binom

from pysatl_measure.errors import EmptySupportError
from pysatl_measure.families import binomial, binomial_pmf
from pysatl_measure.measures import expectation, moment_generating_function, total_mass, variance

from .base import BaseDistributionTest


class TestBinomial(BaseDistributionTest):
    """Test suite for the binomial family."""

    @pytest.mark.parametrize("n, p", [(10, 0.3), (10, 0.5), (25, 0.9), (60, 0.45)])
    def test_pmf_matches_reference(self, n, p):
        ks = np.arange(n + 1)
        actual = self.evaluate(lambda k: binomial_pmf(n, p, int(k)), ks)
        self.assert_arrays_almost_equal(actual, binom.pmf(ks, n, p))

    @pytest.mark.parametrize("k", [-1, 11, 20])
    def test_pmf_outside_support(self, k):
        assert binomial_pmf(10, 0.5, k) == 0.0

    @pytest.mark.parametrize("n, p", [(10, 0.5), (7, 0.2), (60, 0.45)])
    def test_moments(self, n, p):
        nu = binomial(n, p)
        assert total_mass(nu) == pytest.approx(1.0, rel=self.CALCULATION_PRECISION)
        assert expectation(nu) == pytest.approx(n * p, rel=self.CALCULATION_PRECISION)
        assert variance(nu) == pytest.approx(n * p * (1 - p), rel=1e-9)

    @pytest.mark.parametrize("n, p", [(2000, 0.5), (5000, 0.3), (1200, 0.999)])
    def test_many_trials(self, n, p):
        nu = binomial(n, p)
        assert total_mass(nu) == pytest.approx(1.0, rel=self.CALCULATION_PRECISION)
        assert expectation(nu) == pytest.approx(n * p, rel=1e-10)
        assert variance(nu) == pytest.approx(n * p * (1 - p), rel=1e-6)

    def test_many_trials_pmf_matches_reference(self):
        n, p = 2000, 0.5
        ks = np.arange(900, 1101)
        actual = self.evaluate(lambda k: binomial_pmf(n, p, int(k)), ks)
        np.testing.assert_allclose(actual, binom.pmf(ks, n, p), rtol=1e-10)

    @pytest.mark.parametrize("p", [0.0, 1.0])
    def test_degenerate_probability_with_many_trials(self, p):
        nu = binomial(3000, p)
        assert total_mass(nu) == 1.0
        assert expectation(nu) == 3000 * p

    @pytest.mark.parametrize("p", [-0.1, 1.5, math.nan])
    def test_probability_outside_unit_interval(self, p):
        assert binomial_pmf(10, p, 3) == 0.0

    def test_fair_coins(self):
        nu = binomial(10, 0.5)
        assert expectation(nu) == pytest.approx(5.0, abs=1e-12)
        assert variance(nu) == pytest.approx(2.5, abs=1e-12)

    @pytest.mark.parametrize("p", [0.0, 1.0])
    def test_degenerate_probability(self, p):
        nu = binomial(4, p)
        assert expectation(nu) == 4 * p
        assert variance(nu) == pytest.approx(0.0, abs=1e-12)

    def test_zero_trials(self):
        assert expectation(binomial(0, 0.3)) == 0.0
        assert total_mass(binomial(0, 0.3)) == 1.0

    def test_negative_trials(self):
        with pytest.raises(EmptySupportError):
            binomial(-1, 0.5)

    def test_moment_generating_function(self):
        n, p, t = 8, 0.3, 0.4
        expected = (1 - p + p * math.exp(t)) ** n
        assert moment_generating_function(t)(binomial(n, p)) == pytest.approx(expected, rel=1e-12)
