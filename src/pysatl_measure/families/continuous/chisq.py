"""
Chi-squared distribution.

Built, without a closed-form density, as the independent sum of ``k``
squared standard normal variables:

    X = Z_1² + ... + Z_k²,  Z_i ~ N(0, 1) independent.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from itertools import repeat

from pysatl_measure.families.continuous.gaussian import gaussian
from pysatl_measure.measures import Measure, MonoidSum, concat_all


def chisq(k: int) -> Measure[float]:
    """
    Chi-squared measure with ``k`` degrees of freedom.

    Parameters
    ----------
    k : int
        Degrees of freedom, ``k >= 1``.

    Returns
    -------
    Measure[float]
        ``k``-fold independent sum (through :data:`MonoidSum`) of the
        standard normal measure pushed through ``x ↦ x²``.

    Raises
    ------
    ValueError
        If ``k < 1``.

    Notes
    -----
    Every summand nests one more quadrature into each query, so the cost
    grows geometrically with ``k``.
    """
    if k < 1:
        raise ValueError("chisq requires at least one degree of freedom.")
    squared = gaussian(0.0, 1.0).map(lambda x: x * x)
    return concat_all(MonoidSum)(repeat(squared, k))
