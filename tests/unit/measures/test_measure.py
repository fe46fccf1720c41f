from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest

from pysatl_measure.config import configure
from pysatl_measure.errors import CompositionDepthError, EmptySupportError, MeasureError
from pysatl_measure.measures import (
    Measure,
    expectation,
    from_density_function,
    from_mass_function,
    from_sample,
    identity,
    moment_generating_function,
    of,
    pure,
    total_mass,
    variance,
)
from pysatl_measure.support import ContinuousSupport

from .base import BaseMeasureTest, coin_flips, fair_die


class TestConstructors(BaseMeasureTest):
    def test_dirac(self):
        nu = of(3)
        assert nu(identity) == 3.0
        assert nu(lambda x: x * x) == 9.0
        assert total_mass(nu) == 1.0

    def test_pure_is_of(self):
        assert pure is of

    def test_dirac_over_arbitrary_values(self):
        assert of("measure")(len) == 7.0

    def test_mass_function(self):
        nu = coin_flips()
        assert total_mass(nu) == 1.0
        assert expectation(nu) == 1.0
        assert variance(nu) == pytest.approx(0.5, abs=self.CALCULATION_PRECISION)

    def test_mass_function_is_not_normalized(self):
        nu = from_mass_function(lambda x: 1.0, [1, 2])
        assert total_mass(nu) == 2.0

    def test_mass_function_materializes_support_once(self):
        nu = from_mass_function(lambda x: 0.5, iter([0, 1]))
        assert total_mass(nu) == 1.0
        assert total_mass(nu) == 1.0

    def test_sample(self):
        nu = fair_die()
        assert total_mass(nu) == 1.0
        assert expectation(nu) == 3.5
        assert variance(nu) == pytest.approx(35 / 12, abs=self.CALCULATION_PRECISION)

    def test_sample_with_repeated_points(self):
        nu = from_sample([0, 0, 0, 1])
        assert nu(lambda x: 1.0 if x == 0 else 0.0) == 0.75

    def test_density_on_bounded_support(self):
        nu = from_density_function(lambda x: 2 * x, ContinuousSupport(0.0, 1.0))
        assert total_mass(nu) == pytest.approx(1.0, rel=1e-10)
        assert expectation(nu) == pytest.approx(2 / 3, rel=1e-10)

    def test_density_on_ray(self):
        nu = from_density_function(lambda x: math.exp(-x), ContinuousSupport(left=0.0))
        assert expectation(nu) == pytest.approx(1.0, rel=1e-10)
        assert variance(nu) == pytest.approx(1.0, rel=1e-9)

    def test_density_on_real_line_by_default(self):
        nu = from_density_function(lambda x: math.exp(-0.5 * x * x) / math.sqrt(2 * math.pi))
        assert total_mass(nu) == pytest.approx(1.0, rel=1e-10)
        assert expectation(nu) == pytest.approx(0.0, abs=1e-12)

    def test_density_skips_test_function_where_density_vanishes(self):
        points: list[float] = []

        def record(x: float) -> float:
            points.append(x)
            return x

        nu = from_density_function(lambda x: math.exp(-x) if x > 0 else 0.0)
        nu(record)
        assert points
        assert all(x > 0 for x in points)

    def test_density_tails_do_not_overflow(self):
        nu = from_density_function(lambda x: math.exp(-0.5 * x * x) / math.sqrt(2 * math.pi))
        assert moment_generating_function(1.0)(nu) == pytest.approx(math.exp(0.5), rel=1e-9)


class TestEmptySupport:
    @pytest.mark.parametrize(
        "build",
        [lambda: from_mass_function(lambda x: 1.0, []), lambda: from_sample([])],
        ids=["mass_function", "sample"],
    )
    def test_raises(self, build):
        with pytest.raises(EmptySupportError):
            build()

    def test_error_hierarchy(self):
        assert issubclass(EmptySupportError, MeasureError)
        assert issubclass(EmptySupportError, ValueError)


class TestLaziness:
    def test_nothing_is_evaluated_before_a_query(self):
        calls = 0

        def mass(x: int) -> float:
            nonlocal calls
            calls += 1
            return 0.5

        nu = from_mass_function(mass, [0, 1]).map(lambda x: x + 1).chain(lambda x: of(x * 2))
        assert calls == 0
        assert expectation(nu) == 3.0
        assert calls == 2

    def test_repeated_queries_agree(self):
        nu = coin_flips().chain(lambda k: fair_die().map(lambda d: d + k))
        assert expectation(nu) == expectation(nu)


class TestCompositionDepth:
    def test_depths(self):
        nu = coin_flips()
        assert nu.depth == 0
        assert nu.map(lambda x: x + 1).depth == 0
        assert nu.chain(of).depth == 1
        assert nu.chain(of).chain(of).depth == 2
        fns = of(lambda x: x).chain(of)
        assert fns.ap(nu).depth == 2
        assert nu.combine(nu.chain(of), max).depth == 2

    def test_limit_is_enforced_at_construction(self):
        configure(max_composition_depth=3)
        nu: Measure[int] = of(0)
        for _ in range(3):
            nu = nu.chain(lambda x: of(x + 1))
        assert nu(identity) == 3.0

        with pytest.raises(CompositionDepthError) as exc_info:
            nu.chain(lambda x: of(x + 1))
        assert exc_info.value.depth == 4
        assert exc_info.value.limit == 3
        assert isinstance(exc_info.value, RecursionError)

    def test_deepest_default_chain_evaluates(self):
        nu: Measure[int] = of(0)
        for _ in range(100):
            nu = nu.chain(lambda x: of(x + 1))
        assert nu(identity) == 100.0

    @staticmethod
    def _walk(n: int) -> Measure[int]:
        return of(n).chain(lambda x: of(0) if x == 0 else TestCompositionDepth._walk(x - 1))

    def test_nesting_built_during_evaluation_is_limited(self):
        assert self._walk(50)(identity) == 0.0

        configure(max_composition_depth=20)
        with pytest.raises(CompositionDepthError) as exc_info:
            self._walk(50)(identity)
        assert exc_info.value.depth == 21
        assert exc_info.value.limit == 20

    def test_unbounded_evaluation_nesting_never_exhausts_the_stack(self):
        with pytest.raises(CompositionDepthError):
            self._walk(2000)(identity)

    def test_evaluation_nesting_is_released_after_a_query(self):
        configure(max_composition_depth=5)
        with pytest.raises(CompositionDepthError):
            self._walk(10)(identity)
        for _ in range(3):
            assert self._walk(4)(identity) == 0.0

    def test_long_map_pipelines_are_fused(self):
        nu: Measure[int] = of(0)
        for _ in range(5000):
            nu = nu.map(lambda x: x + 1)
        assert nu.depth == 0
        assert nu(identity) == 5000.0

    def test_repr(self):
        assert repr(of(1).chain(of)) == "Measure(depth=1)"


class TestArithmetic(BaseMeasureTest):
    @pytest.mark.parametrize(
        "build, expected",
        [
            (lambda: of(2) + of(3), 5.0),
            (lambda: of(2) - of(3), -1.0),
            (lambda: of(2) * of(3), 6.0),
            (lambda: of(6) / of(3), 2.0),
            (lambda: of(2) + 1, 3.0),
            (lambda: 1 + of(2), 3.0),
            (lambda: 1 - of(2), -1.0),
            (lambda: of(2) - 1, 1.0),
            (lambda: 3 * of(2), 6.0),
            (lambda: 1 / of(4), 0.25),
            (lambda: of(4) / 8, 0.5),
            (lambda: -of(2), -2.0),
        ],
        ids=[
            "add",
            "sub",
            "mul",
            "div",
            "add_scalar",
            "radd",
            "rsub",
            "sub_scalar",
            "rmul",
            "rtruediv",
            "div_scalar",
            "neg",
        ],
    )
    def test_dirac_arithmetic(self, build, expected):
        assert expectation(build()) == expected

    def test_division_by_zero_follows_ieee(self):
        assert expectation(of(1) / of(0)) == math.inf
        assert expectation(of(-1) / 0) == -math.inf
        assert math.isnan(expectation(of(0) / of(0)))

    def test_independent_sum(self):
        nu = coin_flips() + coin_flips()
        assert expectation(nu) == pytest.approx(2.0, abs=self.CALCULATION_PRECISION)
        assert variance(nu) == pytest.approx(1.0, abs=self.CALCULATION_PRECISION)

    def test_sum_is_not_scaling(self):
        # X + X' for independent copies differs from 2X
        doubled = 2 * coin_flips()
        summed = coin_flips() + coin_flips()
        assert variance(doubled) == pytest.approx(2.0, abs=self.CALCULATION_PRECISION)
        assert variance(summed) == pytest.approx(1.0, abs=self.CALCULATION_PRECISION)

    def test_independent_product(self):
        nu = fair_die() * coin_flips()
        assert expectation(nu) == pytest.approx(3.5, abs=self.CALCULATION_PRECISION)
