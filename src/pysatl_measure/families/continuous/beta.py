"""
Beta distribution.

Probability density function on [0, 1]:
    f(p) = p^(a-1) (1-p)^(b-1) / B(a, b)

The normalizing constant comes from :func:`pysatl_measure.special.log_beta`.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from pysatl_measure.measures import Measure, from_density_function
from pysatl_measure.special import log_beta
from pysatl_measure.support import UNIT_INTERVAL


def _xlog(c: float, x: float) -> float:
    # c * log(x) with 0 * log(0) = 0
    if c == 0:
        return 0.0
    if x == 0:
        return -math.inf if c > 0 else math.inf
    return c * math.log(x)


def _log_kernel(a: float, b: float, p: float) -> float:
    return _xlog(a - 1, p) + _xlog(b - 1, 1 - p)


def _density(a: float, b: float, log_norm: float, p: float) -> float:
    if p < 0 or p > 1:
        return 0.0
    try:
        return math.exp(_log_kernel(a, b, p) - log_norm)
    except OverflowError:
        # shapes below one at subnormal distances from an endpoint
        return math.inf


def beta_pdf(a: float, b: float, p: float) -> float:
    """
    Probability density function of the Beta distribution.

    Parameters
    ----------
    a, b : float
        Shape parameters.
    p : float
        Evaluation point.

    Returns
    -------
    float
        Density at ``p``; ``0`` outside ``[0, 1]`` and ``inf`` where it exceeds
        the float range.
    """
    return _density(a, b, log_beta(a, b), p)


def beta(a: float, b: float) -> Measure[float]:
    """
    Beta measure with shapes ``a`` and ``b``.

    Returns
    -------
    Measure[float]
        Continuous measure on ``[0, 1]``. It is integrated with the finite
        tanh-sinh rule, which copes with the endpoint singularities of
        ``a < 1`` or ``b < 1``.
    """
    log_norm = log_beta(a, b)
    return from_density_function(lambda p: _density(a, b, log_norm, p), UNIT_INTERVAL)
