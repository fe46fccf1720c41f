"""
Measures as Integration Functionals
===================================

A :class:`Measure` over ``A`` is not a table of probabilities: it is a
callable that integrates a test function ``g: A -> float`` against the
distribution it denotes,

    ``nu(g) ≈ ∫ g dν``.

Applying a measure to the identity yields its expectation; every other
operation is defined by how it transforms this functional.

Constructors
------------
- :func:`of`: Dirac point mass.
- :func:`from_mass_function`: finite discrete measure.
- :func:`from_density_function`: continuous measure integrated by quadrature.
- :func:`from_sample`: empirical measure.

Notes
-----
- Measures are immutable; every combinator closes over its inputs and
  returns a new measure. Nothing is computed until the measure is queried.
- Consecutive :meth:`Measure.map` calls are fused into one pushforward that
  is evaluated with a loop, so long pipelines of maps do not nest calls.
- ``chain``, ``ap`` and the algebraic combinators nest evaluation. Each
  measure records its composition depth, and building a measure deeper than
  ``max_composition_depth`` raises
  :class:`~pysatl_measure.errors.CompositionDepthError` up front.
- Continuations of ``chain`` may build new measures while a query runs, so
  the nesting of composed evaluations is also counted per query and the same
  error is raised once it passes ``max_composition_depth``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import operator
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any

from pysatl_measure.config import numerical_configuration
from pysatl_measure.errors import CompositionDepthError, EmptySupportError
from pysatl_measure.measures.algebra import divide
from pysatl_measure.quadrature import quadrature

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from pysatl_measure.support import ContinuousSupport
    from pysatl_measure.types import Functional, ScalarFunc, TestFunction


# composed measures currently being evaluated in this context
_evaluation_depth: ContextVar[int] = ContextVar("evaluation_depth", default=0)


def _composed[A](functional: Functional[A]) -> Functional[A]:
    def evaluate(g: TestFunction[A]) -> float:
        depth = _evaluation_depth.get() + 1
        limit = numerical_configuration().max_composition_depth
        if depth > limit:
            raise CompositionDepthError(depth, limit)
        token = _evaluation_depth.set(depth)
        try:
            return functional(g)
        finally:
            _evaluation_depth.reset(token)

    return evaluate


class Measure[A]:
    """
    Probability measure represented by its integration functional.

    Parameters
    ----------
    functional : Callable[[Callable[[A], float]], float]
        Maps a test function to its integral against the measure.
    depth : int, default 0
        Composition depth (``0`` for measures built from data).

    Raises
    ------
    CompositionDepthError
        If ``depth`` exceeds the configured ``max_composition_depth``.
    """

    __slots__ = ("_depth", "_functional")

    def __init__(self, functional: Functional[A], *, depth: int = 0) -> None:
        limit = numerical_configuration().max_composition_depth
        if depth > limit:
            raise CompositionDepthError(depth, limit)
        self._functional = functional
        self._depth = depth

    @property
    def depth(self) -> int:
        """Nesting depth of ``chain``/``ap`` compositions behind this measure."""
        return self._depth

    def __call__(self, test_fn: TestFunction[A]) -> float:
        return float(self._functional(test_fn))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(depth={self._depth})"

    def integrate(self, test_fn: TestFunction[A]) -> float:
        """
        Integrate ``test_fn`` against the measure.

        Parameters
        ----------
        test_fn : Callable[[A], float]
            Function to integrate.

        Returns
        -------
        float
            ``∫ test_fn dν``.
        """
        return self(test_fn)

    def _pushforward_parts(self) -> tuple[Measure[Any], tuple[Callable[[Any], Any], ...]]:
        return self, ()

    def map[B](self, fn: Callable[[A], B]) -> Measure[B]:
        """
        Pushforward of the measure through ``fn``.

        The result integrates ``g`` as ``nu(g ∘ fn)``.
        """
        base, steps = self._pushforward_parts()
        return _Pushforward(base, (*steps, fn))

    def chain[B](self, fn: Callable[[A], Measure[B]]) -> Measure[B]:
        """
        Monadic bind: mix the measures ``fn(x)`` over outcomes ``x``.

        The result integrates ``g`` as ``nu(x ↦ fn(x)(g))``. Each outer
        integration step evaluates one inner measure, so chaining continuous
        measures multiplies the quadrature cost.
        """
        outer = self

        def functional(g: TestFunction[B]) -> float:
            return outer(lambda x: fn(x)(g))

        return Measure(_composed(functional), depth=self._depth + 1)

    def ap[B](self: Measure[Callable[[Any], B]], param: Measure[Any]) -> Measure[B]:
        """
        Apply a measure of functions to a measure of arguments.

        The result integrates ``g`` as ``self(k ↦ param(g ∘ k))``; the two
        measures are evaluated independently.
        """
        fns = self

        def functional(g: TestFunction[B]) -> float:
            return fns(lambda k: param(lambda a: g(k(a))))

        return Measure(_composed(functional), depth=max(self._depth, param.depth) + 1)

    def combine[B, C](self, other: Measure[B], fn: Callable[[A, B], C]) -> Measure[C]:
        """
        Distribution of ``fn(X, Y)`` for independent ``X ~ self`` and ``Y ~ other``.
        """
        return self.map(lambda a: lambda b: fn(a, b)).ap(other)

    def _arithmetic(self, other: Any, op: Callable[[Any, Any], Any]) -> Measure[Any]:
        if isinstance(other, Measure):
            return self.combine(other, op)
        return self.map(lambda a: op(a, other))

    def _reflected(self, other: Any, op: Callable[[Any, Any], Any]) -> Measure[Any]:
        return self.map(lambda a: op(other, a))

    def __add__(self, other: Any) -> Measure[Any]:
        return self._arithmetic(other, operator.add)

    def __radd__(self, other: Any) -> Measure[Any]:
        return self._reflected(other, operator.add)

    def __sub__(self, other: Any) -> Measure[Any]:
        return self._arithmetic(other, operator.sub)

    def __rsub__(self, other: Any) -> Measure[Any]:
        return self._reflected(other, operator.sub)

    def __mul__(self, other: Any) -> Measure[Any]:
        return self._arithmetic(other, operator.mul)

    def __rmul__(self, other: Any) -> Measure[Any]:
        return self._reflected(other, operator.mul)

    def __truediv__(self, other: Any) -> Measure[Any]:
        return self._arithmetic(other, divide)

    def __rtruediv__(self, other: Any) -> Measure[Any]:
        return self._reflected(other, divide)

    def __neg__(self) -> Measure[Any]:
        return self.map(operator.neg)


class _Pushforward[A](Measure[A]):
    """Measure ``base`` pushed through a fused sequence of maps."""

    __slots__ = ("_base", "_steps")

    def __init__(self, base: Measure[Any], steps: tuple[Callable[[Any], Any], ...]) -> None:
        self._base = base
        self._steps = steps
        super().__init__(self._pull_back, depth=base.depth)

    def _pull_back(self, g: TestFunction[A]) -> float:
        steps = self._steps

        def composed(x: Any) -> float:
            for step in steps:
                x = step(x)
            return g(x)

        return self._base(composed)

    def _pushforward_parts(self) -> tuple[Measure[Any], tuple[Callable[[Any], Any], ...]]:
        return self._base, self._steps


def of[A](a: A) -> Measure[A]:
    """Dirac measure at ``a``: integrates ``g`` as ``g(a)``."""
    return Measure(lambda g: g(a))


pure = of


def from_mass_function[A](f: Callable[[A], float], support: Iterable[A]) -> Measure[A]:
    """
    Finite discrete measure.

    Parameters
    ----------
    f : Callable[[A], float]
        Mass function. It is not checked to sum to one; unnormalized mass
        functions give measures with total mass other than one.
    support : Iterable[A]
        Points carrying mass; materialized once.

    Returns
    -------
    Measure[A]
        Measure integrating ``g`` as ``Σ f(x) g(x)`` over the support.

    Raises
    ------
    EmptySupportError
        If the support has no points.
    """
    points = tuple(support)
    if not points:
        raise EmptySupportError("Discrete measure support must be non-empty.")

    def functional(g: TestFunction[A]) -> float:
        return math.fsum(f(x) * g(x) for x in points)

    return Measure(functional)


def from_density_function(
    d: ScalarFunc, support: ContinuousSupport | None = None
) -> Measure[float]:
    """
    Continuous measure defined by a density.

    Parameters
    ----------
    d : Callable[[float], float]
        Density. Restrict the domain by returning ``0``; the test function is
        not evaluated where the density vanishes.
    support : ContinuousSupport, optional
        Region integrated by quadrature; the real line by default. Bounded
        supports integrate with the finite tanh-sinh rule, which tolerates
        density singularities at the endpoints.

    Returns
    -------
    Measure[float]
        Measure integrating ``g`` as ``∫ g(x) d(x) dx``.
    """

    def functional(g: TestFunction[float]) -> float:
        def integrand(x: float) -> float:
            density = d(x)
            if density == 0:
                return 0.0
            return g(x) * density

        return quadrature(integrand, support)

    return Measure(functional)


def from_sample[A](samples: Iterable[A]) -> Measure[A]:
    """
    Empirical measure: every sample point carries weight ``1/n``.

    Raises
    ------
    EmptySupportError
        If there are no samples.
    """
    points = tuple(samples)
    if not points:
        raise EmptySupportError("Empirical measure needs at least one sample.")
    n = len(points)

    def functional(g: TestFunction[A]) -> float:
        return math.fsum(g(x) for x in points) / n

    return Measure(functional)


__all__ = [
    "Measure",
    "from_density_function",
    "from_mass_function",
    "from_sample",
    "of",
    "pure",
]
