"""
Refinement Sequences
====================

A quadrature rule does not return a number: it returns a lazy, finite and
restartable sequence of progressively refined :class:`QuadratureResult`
estimates. Selectors pick the estimate a caller trusts:

- :func:`last`: the most refined estimate (what density-defined measures use);
- :func:`absolute`: first estimate within an absolute error bound;
- :func:`relative`: first estimate within a relative error bound.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections import deque
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from pysatl_measure.types import ScalarFunc


@dataclass(frozen=True, slots=True)
class QuadratureResult:
    """
    One estimate of a refinement sequence.

    Parameters
    ----------
    result : float
        Current estimate of the integral.
    error_estimate : float
        Difference to the previous estimate (``inf`` for the first one).
    evaluations : int
        Integrand evaluations spent so far.
    """

    result: float
    error_estimate: float
    evaluations: int


class QuadratureSequence(Iterable[QuadratureResult]):
    """
    Restartable sequence of refined estimates.

    Parameters
    ----------
    factory : Callable[[], Iterator[QuadratureResult]]
        Builds a fresh refinement generator; called on every iteration.
    """

    __slots__ = ("_factory",)

    def __init__(self, factory: Callable[[], Iterator[QuadratureResult]]) -> None:
        self._factory = factory

    def __iter__(self) -> Iterator[QuadratureResult]:
        return self._factory()

    def map(self, fn: Callable[[QuadratureResult], QuadratureResult]) -> QuadratureSequence:
        """Transform every estimate of the sequence."""
        return QuadratureSequence(lambda: (fn(r) for r in self._factory()))


type QuadratureRule = Callable[[ScalarFunc, float, float], QuadratureSequence]
"""Rule integrating a scalar function over a finite interval ``[a, b]``."""


def constant_sequence(value: float) -> QuadratureSequence:
    """Sequence holding a single exact estimate."""
    return QuadratureSequence(lambda: iter((QuadratureResult(value, 0.0, 0),)))


def last(results: Iterable[QuadratureResult]) -> QuadratureResult:
    """
    Most refined estimate of a sequence.

    Raises
    ------
    ValueError
        If the sequence is empty.
    """
    tail = deque(results, maxlen=1)
    if not tail:
        raise ValueError("Quadrature sequence produced no estimates.")
    return tail[0]


def absolute(tolerance: float, results: Iterable[QuadratureResult]) -> QuadratureResult:
    """
    First estimate whose error estimate is at most ``tolerance``.

    Falls back to the last estimate when none qualifies.
    """
    final: QuadratureResult | None = None
    for final in results:
        if final.error_estimate <= tolerance:
            return final
    if final is None:
        raise ValueError("Quadrature sequence produced no estimates.")
    return final


def relative(tolerance: float, results: Iterable[QuadratureResult]) -> QuadratureResult:
    """
    First estimate whose error estimate is at most ``tolerance * |result|``.

    Falls back to the last estimate when none qualifies.
    """
    final: QuadratureResult | None = None
    for final in results:
        if final.error_estimate <= tolerance * abs(final.result):
            return final
    if final is None:
        raise ValueError("Quadrature sequence produced no estimates.")
    return final


__all__ = [
    "QuadratureResult",
    "QuadratureRule",
    "QuadratureSequence",
    "absolute",
    "constant_sequence",
    "last",
    "relative",
]
