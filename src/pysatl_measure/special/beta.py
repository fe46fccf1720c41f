"""
Log-Beta Function
=================

``log B(a, b)`` evaluated in one of three regimes chosen by the size of
``p = min(a, b)`` and ``q = max(a, b)``:

- ``p >= 10``: Stirling expansion with correction terms for ``p``, ``q`` and ``p + q``;
- ``q >= 10`` only: exact :func:`log_gamma` for ``p``, Stirling corrections for ``q``;
- otherwise: ``log Γ(p) + log Γ(q) - log Γ(p + q)``.

Splitting the regimes avoids the cancellation of large log-gamma values.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from pysatl_measure.special.gamma import LN_SQRT_2_PI, log_gamma, log_gamma_correction


def log_beta(a: float, b: float) -> float:
    """
    Natural logarithm of the Beta function.

    Parameters
    ----------
    a, b : float
        Shape parameters.

    Returns
    -------
    float
        ``log B(a, b)``; NaN if ``min(a, b) < 0``, ``+inf`` if ``min(a, b) == 0``.
    """
    p = min(a, b)
    q = max(a, b)
    if p < 0:
        return math.nan
    if p == 0:
        return math.inf

    pq = p + q
    ppq = p / pq
    if p >= 10:
        return (
            math.log(q) * -0.5
            + LN_SQRT_2_PI
            + log_gamma_correction(p)
            + (log_gamma_correction(q) - log_gamma_correction(pq))
            + (p - 0.5) * math.log(ppq)
            + q * math.log1p(-ppq)
        )
    if q >= 10:
        return (
            log_gamma(p)
            + (log_gamma_correction(q) - log_gamma_correction(pq))
            + p
            - p * math.log(pq)
            + (q - 0.5) * math.log1p(-ppq)
        )
    return log_gamma(p) + (log_gamma(q) - log_gamma(pq))


__all__ = ["log_beta"]
