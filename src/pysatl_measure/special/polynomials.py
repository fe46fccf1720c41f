"""
Polynomial, rational and Chebyshev series evaluation used by the special
function approximations.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


def evaluate_polynomial(x: float, coeffs: Sequence[float]) -> float:
    """
    Evaluate ``sum(coeffs[i] * x**i)`` with Horner's scheme.

    Parameters
    ----------
    x : float
        Evaluation point.
    coeffs : Sequence[float]
        Coefficients in increasing order of power.

    Returns
    -------
    float
        Polynomial value (``0.0`` for empty coefficients).
    """
    acc = 0.0
    for coeff in reversed(coeffs):
        acc = acc * x + coeff
    return acc


def evaluate_ratio(coeffs: Sequence[tuple[float, float]], x: float) -> float:
    """
    Evaluate the rational function ``N(x) / D(x)`` from paired coefficients.

    Parameters
    ----------
    coeffs : Sequence[tuple[float, float]]
        ``(numerator, denominator)`` coefficient pairs in increasing order of power.
    x : float
        Evaluation point.

    Returns
    -------
    float
        Value of the ratio.

    Notes
    -----
    For ``x > 1`` both polynomials are evaluated in ``1/x`` from the lowest
    power upwards, which keeps the partial sums bounded for large ``x``
    (the common factor ``x**degree`` cancels in the ratio).
    """
    num = 0.0
    den = 0.0
    if x > 1:
        rx = 1.0 / x
        for a, b in coeffs:
            num = num * rx + a
            den = den * rx + b
    else:
        for a, b in reversed(coeffs):
            num = num * x + a
            den = den * x + b
    return num / den


def chebyshev_broucke(x: float, coeffs: Sequence[float]) -> float:
    """
    Evaluate a Chebyshev series with Broucke's ECHEB algorithm.

    Parameters
    ----------
    x : float
        Point in ``[-1, 1]``.
    coeffs : Sequence[float]
        Series coefficients; the first one is doubled relative to the
        classical Clenshaw convention.

    Returns
    -------
    float
        Series value.
    """
    x2 = x * 2
    b0 = b1 = b2 = 0.0
    for k in reversed(coeffs):
        b0, b1, b2 = k + x2 * b0 - b1, b0, b1
    return (b0 - b2) * 0.5


__all__ = [
    "chebyshev_broucke",
    "evaluate_polynomial",
    "evaluate_ratio",
]
