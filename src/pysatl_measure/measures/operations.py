"""
Pipeable Measure Operations
===========================

Curried counterparts of the :class:`~pysatl_measure.measures.measure.Measure`
methods, designed to be composed with :func:`pipe`:

>>> from pysatl_measure import beta, binomial
>>> beta_binomial = pipe(beta(1, 8), chain(lambda p: binomial(10, p)))

Elimination
-----------
:func:`integrate` is the only way to get a number out of a measure; every
statistic below is a particular test function integrated against it.

Do notation
-----------
:func:`do`, :func:`bind_to`, :func:`bind` and :func:`ap_s` build measures
over records (``dict[str, Any]``) one named variable at a time.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from functools import reduce
from typing import TYPE_CHECKING, Any

from pysatl_measure.measures.algebra import divide
from pysatl_measure.measures.measure import of

if TYPE_CHECKING:
    from collections.abc import Callable

    from pysatl_measure.measures.measure import Measure
    from pysatl_measure.types import TestFunction

type Record = dict[str, Any]


def pipe(value: Any, *fns: Callable[[Any], Any]) -> Any:
    """Thread ``value`` through ``fns`` from left to right."""
    return reduce(lambda acc, fn: fn(acc), fns, value)


def identity[A](a: A) -> A:
    return a


def _safe_exp(x: float) -> float:
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


# Elimination


def integrate[A](test_fn: TestFunction[A]) -> Callable[[Measure[A]], float]:
    """
    Integrate ``test_fn`` against a measure.

    Parameters
    ----------
    test_fn : Callable[[A], float]
        Function to integrate.

    Returns
    -------
    Callable[[Measure[A]], float]
        ``nu ↦ nu(test_fn)``.
    """

    def integrated(nu: Measure[A]) -> float:
        return nu(test_fn)

    return integrated


def expectation(nu: Measure[float]) -> float:
    """Mean ``E[X]``."""
    return nu(identity)


def variance(nu: Measure[float]) -> float:
    """
    Variance ``E[X²] - E[X]²``.

    Notes
    -----
    The raw second moment is used directly, so the result loses relative
    accuracy when the mean is large compared with the spread.
    """
    return nu(lambda x: x * x) - expectation(nu) ** 2


def moment_generating_function(t: float) -> Callable[[Measure[float]], float]:
    """
    Moment generating function ``E[exp(tX)]`` at ``t``.

    Overflowing terms count as ``inf``.
    """
    return integrate(lambda x: _safe_exp(t * x))


def total_mass(nu: Measure[Any]) -> float:
    """``nu(1)``; equals one for normalized measures."""
    return nu(lambda _: 1.0)


def moment(n: int) -> Callable[[Measure[float]], float]:
    """Raw moment ``E[X**n]``."""
    return integrate(lambda x: x**n)


def central_moment(n: int) -> Callable[[Measure[float]], float]:
    """Central moment ``E[(X - E[X])**n]``."""

    def central(nu: Measure[float]) -> float:
        mean = expectation(nu)
        return nu(lambda x: (x - mean) ** n)

    return central


def standard_deviation(nu: Measure[float]) -> float:
    """Square root of :func:`variance`, clipped at zero against cancellation."""
    return math.sqrt(max(variance(nu), 0.0))


def skewness(nu: Measure[float]) -> float:
    """Standardized third central moment; NaN for degenerate measures."""
    return divide(central_moment(3)(nu), standard_deviation(nu) ** 3)


def kurtosis(nu: Measure[float], excess: bool = False) -> float:
    """
    Standardized fourth central moment.

    Parameters
    ----------
    nu : Measure[float]
        Measure to query.
    excess : bool, default False
        Subtract ``3`` (the Gaussian kurtosis).

    Returns
    -------
    float
        Raw or excess kurtosis; NaN for degenerate measures.
    """
    raw = divide(central_moment(4)(nu), variance(nu) ** 2)
    return raw - 3.0 if excess else raw


# Functor / Applicative / Monad


def map[A, B](fn: Callable[[A], B]) -> Callable[[Measure[A]], Measure[B]]:  # noqa: A001
    """Pushforward through ``fn``: ``nu ↦ (g ↦ nu(g ∘ fn))``."""
    return lambda nu: nu.map(fn)


def chain[A, B](fn: Callable[[A], Measure[B]]) -> Callable[[Measure[A]], Measure[B]]:
    """Monadic bind: ``nu ↦ (g ↦ nu(x ↦ fn(x)(g)))``."""
    return lambda nu: nu.chain(fn)


def flatten[A](nu: Measure[Measure[A]]) -> Measure[A]:
    """Collapse a measure over measures into their mixture."""
    return nu.chain(identity)


def ap[A, B](param: Measure[A]) -> Callable[[Measure[Callable[[A], B]]], Measure[B]]:
    """Apply a measure of functions to the independent measure ``param``."""
    return lambda fns: fns.ap(param)


def lift_a2[A, B, C](
    fn: Callable[[A, B], C],
) -> Callable[[Measure[A], Measure[B]], Measure[C]]:
    """
    Lift a binary function to independent measures.

    ``lift_a2(fn)(x, y)`` is the distribution of ``fn(X, Y)`` for
    independent ``X ~ x`` and ``Y ~ y``.
    """
    return lambda x, y: x.combine(y, fn)


def ap_first[A](second: Measure[Any]) -> Callable[[Measure[A]], Measure[A]]:
    """Combine with ``second`` and keep the first value."""
    return lambda first: first.combine(second, lambda a, _: a)


def ap_second[B](second: Measure[B]) -> Callable[[Measure[Any]], Measure[B]]:
    """Combine with ``second`` and keep the second value."""
    return lambda first: first.combine(second, lambda _, b: b)


# Do notation


def do() -> Measure[Record]:
    """Dirac measure at the empty record, the start of a do block."""
    return of({})


def bind_to[A](name: str) -> Callable[[Measure[A]], Measure[Record]]:
    """Wrap each outcome ``a`` into the record ``{name: a}``."""
    return lambda nu: nu.map(lambda a: {name: a})


def bind(
    name: str, fn: Callable[[Record], Measure[Any]]
) -> Callable[[Measure[Record]], Measure[Record]]:
    """
    Extend each record with a variable whose measure depends on the record.

    Raises
    ------
    ValueError
        If ``name`` is already bound (when the block is evaluated).
    """

    def extend(record: Record) -> Measure[Record]:
        _check_unbound(record, name)
        return fn(record).map(lambda b: {**record, name: b})

    return lambda nu: nu.chain(extend)


def ap_s(name: str, param: Measure[Any]) -> Callable[[Measure[Record]], Measure[Record]]:
    """Extend each record with an independent variable drawn from ``param``."""

    def extend(record: Record, b: Any) -> Record:
        _check_unbound(record, name)
        return {**record, name: b}

    return lambda nu: nu.combine(param, extend)


def _check_unbound(record: Record, name: str) -> None:
    if name in record:
        raise ValueError(f"Variable '{name}' is already bound in this do block.")


__all__ = [
    "Record",
    "ap",
    "ap_first",
    "ap_s",
    "ap_second",
    "bind",
    "bind_to",
    "central_moment",
    "chain",
    "do",
    "expectation",
    "flatten",
    "identity",
    "integrate",
    "kurtosis",
    "lift_a2",
    "map",
    "moment",
    "moment_generating_function",
    "pipe",
    "skewness",
    "standard_deviation",
    "total_mass",
    "variance",
]
