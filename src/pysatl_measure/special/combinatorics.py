"""
Binomial coefficients in floating point.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from pysatl_measure.special.beta import log_beta

_EXACT_LIMIT = 50
_MAX_INT64 = float(2**63 - 1)


def choose_exact(n: float, k: int) -> float:
    """
    Binomial coefficient as the running product ``∏_{i=1}^{k} (n - k + i) / i``.

    Every partial product is itself a binomial coefficient, so the result is
    exact while it fits the float mantissa.
    """
    nk = n - k
    acc = 1.0
    for i in range(1, int(k) + 1):
        acc = acc * (nk + i) / i
    return acc


def log_choose_fast(n: float, k: float) -> float:
    """``log C(n, k)`` through ``log B(n - k + 1, k + 1)``."""
    return -math.log(n + 1) - log_beta(n - k + 1, k + 1)


def choose(n: float, k: float) -> float:
    """
    Binomial coefficient ``C(n, k)``.

    Parameters
    ----------
    n : float
        Number of elements.
    k : float
        Number of chosen elements.

    Returns
    -------
    float
        ``0.0`` outside ``0 <= k <= n``. The exact product is used when
        ``min(k, n - k) < 50``; larger coefficients come from the log-domain
        identity and are rounded to integers while they stay below the
        signed 64-bit maximum. Coefficients beyond the float range are
        ``inf``.

    Examples
    --------
    >>> choose(10, 5)
    252.0
    """
    if k > n or k < 0:
        return 0.0
    kp = min(k, n - k)
    if kp < _EXACT_LIMIT:
        return choose_exact(n, int(kp))
    try:
        approx = math.exp(log_choose_fast(n, kp))
    except OverflowError:
        return math.inf
    if approx < _MAX_INT64:
        return float(round(approx))
    return approx


__all__ = [
    "choose",
    "choose_exact",
    "log_choose_fast",
]
