"""
Binomial distribution.

Number of successes in ``n`` independent Bernoulli trials with success
probability ``p``:

    P(X = k) = C(n, k) p^k (1 - p)^(n - k),  k = 0, ..., n

Masses are computed in log space, so they stay finite for any number of
trials even where ``C(n, k)`` itself overflows.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from pysatl_measure.measures import Measure, from_mass_function
from pysatl_measure.special import choose, log_choose_fast


def binomial_pmf(n: int, p: float, k: float) -> float:
    """
    Probability mass function of the binomial distribution.

    Parameters
    ----------
    n : int
        Number of trials.
    p : float
        Success probability.
    k : float
        Number of successes.

    Returns
    -------
    float
        ``P(X = k)``; ``0`` for ``k < 0``, ``k > n`` or ``p`` outside ``[0, 1]``.
    """
    if k < 0 or k > n or not 0 <= p <= 1:
        return 0.0
    if p == 0:
        return 1.0 if k == 0 else 0.0
    if p == 1:
        return 1.0 if k == n else 0.0
    coefficient = choose(n, k)
    if math.isinf(coefficient):
        log_coefficient = log_choose_fast(n, min(k, n - k))
    else:
        log_coefficient = math.log(coefficient)
    return math.exp(log_coefficient + k * math.log(p) + (n - k) * math.log1p(-p))


def binomial(n: int, p: float) -> Measure[int]:
    """
    Binomial measure over ``{0, ..., n}``.

    Parameters
    ----------
    n : int
        Number of trials, ``n >= 0``.
    p : float
        Success probability.

    Returns
    -------
    Measure[int]
        Discrete measure with mass :func:`binomial_pmf`.

    Raises
    ------
    EmptySupportError
        If ``n < 0``.
    """
    return from_mass_function(lambda k: binomial_pmf(n, p, k), range(n + 1))
