"""
Common measures and helpers for measure tests.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any

from pysatl_measure.measures import Measure, from_mass_function, from_sample, of


def coin_flips() -> Measure[int]:
    """Number of heads in two fair coin flips."""
    return from_mass_function(lambda k: (0.25, 0.5, 0.25)[k], range(3))


def fair_die() -> Measure[int]:
    """Empirical measure of one throw of every face of a die."""
    return from_sample([1, 2, 3, 4, 5, 6])


def spread(x: Any) -> Measure[int]:
    """Measure depending on an outcome, used as the continuation of ``chain``."""
    return from_sample([x, x + 1, 2 * x])


TEST_FUNCTIONS = [
    lambda x: 1.0,
    lambda x: float(x),
    lambda x: x * x + 1.0,
    lambda x: 1.0 if x > 1 else 0.0,
]
TEST_FUNCTION_IDS = ["constant", "identity", "square", "indicator"]


class BaseMeasureTest:
    """Base class for measure tests"""

    # Precision for floating point comparisons
    CALCULATION_PRECISION = 1e-12

    MEASURES = [of(2), coin_flips(), fair_die()]
    MEASURE_IDS = ["dirac", "coin_flips", "fair_die"]
