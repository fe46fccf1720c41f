"""
Integration Ranges
==================

Range transforms that reduce integrals over unbounded domains to a finite
rule on ``[-1, 1]`` or ``[0, 1]``:

- :func:`everywhere`: the whole real line, ``x = t / (1 - t²)``;
- :func:`non_negative`: the half line ``[0, ∞)``, ``x = t / (1 - t)``;
- :func:`interval`: any ``[a, b]`` with infinite endpoints allowed;
- :func:`quadrature`: integrate over a :class:`ContinuousSupport` and
  return the most refined value.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from pysatl_measure.quadrature.results import (
    QuadratureResult,
    constant_sequence,
    last,
)
from pysatl_measure.quadrature.tanh_sinh import trap
from pysatl_measure.support import REAL_LINE
from pysatl_measure.types import ContinuousSupportShape1D

if TYPE_CHECKING:
    from pysatl_measure.quadrature.results import QuadratureRule, QuadratureSequence
    from pysatl_measure.support import ContinuousSupport
    from pysatl_measure.types import ScalarFunc


def everywhere(rule: QuadratureRule, f: ScalarFunc) -> QuadratureSequence:
    """
    Integrate ``f`` over the real line.

    Parameters
    ----------
    rule : QuadratureRule
        Finite-interval rule, e.g. :func:`~pysatl_measure.quadrature.trap`.
    f : Callable[[float], float]
        Integrand.

    Returns
    -------
    QuadratureSequence
        Refined estimates of ``∫ f(x) dx`` over ``(-∞, ∞)``.
    """

    def transformed(t: float) -> float:
        u = (1.0 - t) * (1.0 + t)
        return f(t / u) * (1.0 + t * t) / (u * u)

    return rule(transformed, -1.0, 1.0)


def non_negative(rule: QuadratureRule, f: ScalarFunc) -> QuadratureSequence:
    """Integrate ``f`` over ``[0, ∞)``."""

    def transformed(t: float) -> float:
        u = 1.0 - t
        return f(t / u) / (u * u)

    return rule(transformed, 0.0, 1.0)


def interval(rule: QuadratureRule, f: ScalarFunc, a: float, b: float) -> QuadratureSequence:
    """
    Integrate ``f`` from ``a`` to ``b``.

    Parameters
    ----------
    rule : QuadratureRule
        Finite-interval rule.
    f : Callable[[float], float]
        Integrand.
    a, b : float
        Limits, possibly infinite. ``a > b`` integrates in the reverse
        direction (the estimates change sign).

    Returns
    -------
    QuadratureSequence
        Refined estimates.
    """
    if math.isnan(a) or math.isnan(b):
        raise ValueError("Integration limits must not be NaN.")
    if a == b:
        return constant_sequence(0.0)
    if a > b:
        return interval(rule, f, b, a).map(
            lambda r: QuadratureResult(-r.result, r.error_estimate, r.evaluations)
        )

    if math.isinf(a) and math.isinf(b):
        return everywhere(rule, f)
    if math.isinf(b):
        return non_negative(rule, lambda x: f(a + x))
    if math.isinf(a):
        return non_negative(rule, lambda x: f(b - x))
    return rule(f, a, b)


def quadrature(
    f: ScalarFunc,
    support: ContinuousSupport | None = None,
    rule: QuadratureRule = trap,
) -> float:
    """
    Integrate ``f`` over a continuous support.

    Parameters
    ----------
    f : Callable[[float], float]
        Integrand.
    support : ContinuousSupport, optional
        Integration domain; the real line by default. Empty and single-point
        supports integrate to ``0``.
    rule : QuadratureRule, default trap
        Finite-interval rule.

    Returns
    -------
    float
        The most refined estimate.
    """
    support = REAL_LINE if support is None else support
    if support.shape in (ContinuousSupportShape1D.EMPTY, ContinuousSupportShape1D.SINGLE_POINT):
        return 0.0
    return last(interval(rule, f, support.left, support.right)).result


__all__ = [
    "everywhere",
    "interval",
    "non_negative",
    "quadrature",
]
