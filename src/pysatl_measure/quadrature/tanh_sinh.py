"""
Tanh-Sinh Quadrature
====================

Double-exponential quadrature on a finite interval ``[a, b]``. The
substitution ``x = tanh(π/2 · sinh t)`` makes the integrand decay doubly
exponentially in ``t``, so the plain trapezoid rule in ``t`` converges
quickly even for integrands with endpoint singularities.

- :func:`trap`: trapezoid refinement, level ``k`` has step ``h = 2**-k``
  and only evaluates the nodes that are new at that level.
- :func:`simpson`: Richardson extrapolation of consecutive trapezoid levels.

Notes
-----
- Nodes are placed from the distance to the nearer endpoint,
  ``1 - |x| = 2 / (exp(π sinh |t|) + 1)``, so no digits are lost near the
  endpoints. A node that still rounds onto an endpoint is skipped and the
  integrand is never evaluated there.
- Refinement stops at ``max_level`` or, after ``min_level``, as soon as two
  consecutive levels differ by less than ``tolerance`` times the estimate of
  ``∫ |f|`` (see :func:`pysatl_measure.config.numerical_configuration`).
  Measuring against ``∫ |f|`` keeps integrals that cancel to zero from
  always refining up to ``max_level``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from functools import lru_cache
from typing import TYPE_CHECKING

import numpy as np

from pysatl_measure.config import numerical_configuration
from pysatl_measure.quadrature.results import QuadratureResult, QuadratureSequence

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pysatl_measure.types import ScalarFunc

logger = logging.getLogger(__name__)

_HALF_PI = 0.5 * math.pi


@lru_cache(maxsize=64)
def _abscissas(level: int, t_max: float) -> tuple[tuple[float, ...], tuple[float, ...]]:
    """
    Nodes introduced at ``level`` for ``0 < t <= t_max``.

    Returns
    -------
    tuple
        ``(complements, weights)``: the distance ``1 - x`` of each node to
        the endpoint ``1`` and its weight ``dx/dt``. Mirrored nodes share both.
    """
    h = 2.0**-level
    # odd multiples of h are the nodes a level adds to the previous ones
    stride = 2 if level > 0 else 1
    t = np.arange(1, int(t_max / h) + 1, stride, dtype=float) * h
    s = _HALF_PI * np.sinh(t)
    e = np.exp(-2.0 * s)
    complements = 2.0 * e / (1.0 + e)
    weights = _HALF_PI * np.cosh(t) * 4.0 * e / (1.0 + e) ** 2
    return tuple(complements.tolist()), tuple(weights.tolist())


def _trapezoid_levels(f: ScalarFunc, a: float, b: float) -> Iterator[QuadratureResult]:
    config = numerical_configuration()
    half = 0.5 * (b - a)
    center = a + half

    acc = 0.0
    acc_abs = 0.0
    evaluations = 0
    previous: float | None = None
    estimate = QuadratureResult(0.0, math.inf, 0)
    level = 0
    for level in range(config.max_level + 1):
        terms: list[float] = []
        if level == 0:
            terms.append(_HALF_PI * f(center))
            evaluations += 1
        complements, weights = _abscissas(level, config.t_max)
        for dk, wk in zip(complements, weights, strict=True):
            offset = half * dk
            left = a + offset
            if left != a:
                terms.append(wk * f(left))
                evaluations += 1
            right = b - offset
            if right != b:
                terms.append(wk * f(right))
                evaluations += 1
        acc += math.fsum(terms)
        acc_abs += math.fsum(abs(term) for term in terms)

        step = half * 2.0**-level
        value = step * acc
        magnitude = abs(step) * acc_abs
        error = math.inf if previous is None else abs(value - previous)
        estimate = QuadratureResult(value, error, evaluations)
        yield estimate

        if (
            level >= config.min_level
            and config.tolerance > 0.0
            and magnitude > 0.0
            and error <= config.tolerance * magnitude
        ):
            break
        previous = value
    else:
        logger.debug(
            "tanh-sinh on [%g, %g] stopped at max_level=%d without meeting tolerance %g "
            "(error estimate %.3g)",
            a,
            b,
            config.max_level,
            config.tolerance,
            estimate.error_estimate,
        )
        return

    logger.debug(
        "tanh-sinh on [%g, %g] converged at level %d: %d evaluations, error estimate %.3g",
        a,
        b,
        level,
        estimate.evaluations,
        estimate.error_estimate,
    )


def _simpson_levels(f: ScalarFunc, a: float, b: float) -> Iterator[QuadratureResult]:
    coarse: QuadratureResult | None = None
    previous: float | None = None
    for fine in _trapezoid_levels(f, a, b):
        if coarse is None:
            coarse = fine
            continue
        value = (4.0 * fine.result - coarse.result) / 3.0
        error = fine.error_estimate if previous is None else abs(value - previous)
        yield QuadratureResult(value, error, fine.evaluations)
        coarse = fine
        previous = value
    if previous is None and coarse is not None:
        yield coarse


def trap(f: ScalarFunc, a: float, b: float) -> QuadratureSequence:
    """
    Tanh-sinh trapezoid refinement of ``∫_a^b f(x) dx``.

    Parameters
    ----------
    f : Callable[[float], float]
        Integrand; it is never evaluated at ``a`` or ``b``.
    a, b : float
        Finite interval endpoints.

    Returns
    -------
    QuadratureSequence
        Refined estimates, one per level.
    """
    return QuadratureSequence(lambda: _trapezoid_levels(f, a, b))


def simpson(f: ScalarFunc, a: float, b: float) -> QuadratureSequence:
    """
    Simpson-style refinement of ``∫_a^b f(x) dx``.

    Each estimate is ``(4 T_k - T_{k-1}) / 3`` for consecutive tanh-sinh
    trapezoid levels ``T``.
    """
    return QuadratureSequence(lambda: _simpson_levels(f, a, b))


__all__ = [
    "simpson",
    "trap",
]
