from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

from pysatl_measure.measures import (
    ap_s,
    bind,
    bind_to,
    do,
    expectation,
    map,
    of,
    pipe,
    total_mass,
)

from .base import BaseMeasureTest, coin_flips, fair_die


class TestDoNotation(BaseMeasureTest):
    def test_empty_block(self):
        start = do()
        assert total_mass(start) == 1.0
        assert start(len) == 0.0

    def test_dependent_bindings(self):
        result = pipe(
            do(),
            bind("x", lambda _: coin_flips()),
            bind("y", lambda r: of(r["x"] * 2)),
            map(lambda r: r["x"] + r["y"]),
            expectation,
        )
        assert result == pytest.approx(3.0, abs=self.CALCULATION_PRECISION)

    def test_bind_to_and_independent_binding(self):
        result = pipe(
            coin_flips(),
            bind_to("x"),
            ap_s("y", fair_die()),
            map(lambda r: r["x"] + r["y"]),
            expectation,
        )
        assert result == pytest.approx(4.5, abs=self.CALCULATION_PRECISION)

    def test_records_hold_every_binding(self):
        nu = pipe(do(), bind("a", lambda _: of(1)), ap_s("b", of(2)), bind("c", lambda r: of(3)))
        assert nu(lambda r: float(sorted(r) == ["a", "b", "c"])) == 1.0

    def test_later_bindings_see_earlier_ones(self):
        nu = pipe(
            do(),
            bind("n", lambda _: fair_die()),
            bind("m", lambda r: of(r["n"] ** 2)),
        )
        assert nu(lambda r: float(r["m"] == r["n"] ** 2)) == pytest.approx(1.0)

    @pytest.mark.parametrize(
        "second",
        [bind("x", lambda _: of(2)), ap_s("x", of(2))],
        ids=["bind", "ap_s"],
    )
    def test_rebinding_a_name_fails(self, second):
        nu = pipe(do(), bind("x", lambda _: of(1)), second)
        with pytest.raises(ValueError, match="already bound"):
            total_mass(nu)
