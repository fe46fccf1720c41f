"""
Algebraic Liftings
==================

Lift value-level algebras (:mod:`pysatl_measure.measures.algebra`) to
measures. The lifted operators combine two *independent* measures through
:meth:`~pysatl_measure.measures.measure.Measure.combine`, so

    ``FieldNumber.add(x, y)``

is the distribution of ``X + Y`` for independent ``X ~ x``, ``Y ~ y``. No
per-distribution convolution formula is involved: the result is only as
accurate as the quadrature and summation behind the two inputs.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import reduce
from typing import TYPE_CHECKING

from pysatl_measure.measures.algebra import (
    Field,
    Monoid,
    NumberField,
    NumberMonoidProduct,
    NumberMonoidSum,
    NumberSemigroupSum,
    Semigroup,
)
from pysatl_measure.measures.measure import Measure, of

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


def _lift[A](op: Callable[[A, A], A]) -> Callable[[Measure[A], Measure[A]], Measure[A]]:
    return lambda x, y: x.combine(y, op)


def get_semigroup[A](semigroup: Semigroup[A]) -> Semigroup[Measure[A]]:
    """Semigroup of measures combining independent outcomes with ``semigroup.concat``."""
    return Semigroup(_lift(semigroup.concat))


def get_monoid[A](monoid: Monoid[A]) -> Monoid[Measure[A]]:
    """
    Monoid of measures.

    ``concat`` combines independent outcomes, ``empty`` is the Dirac
    measure at ``monoid.empty``.
    """
    return Monoid(_lift(monoid.concat), of(monoid.empty))


def get_field[A](field: Field[A]) -> Field[Measure[A]]:
    """
    Field operations on measures.

    Binary operations combine independent outcomes; ``zero`` and ``one`` are
    Dirac measures; ``degree`` maps a measure to the measure of degrees.
    """
    return Field(
        add=_lift(field.add),
        zero=of(field.zero),
        mul=_lift(field.mul),
        one=of(field.one),
        sub=_lift(field.sub),
        div=_lift(field.div),
        mod=_lift(field.mod),
        degree=lambda nu: nu.map(field.degree),
    )


def concat_all[A](monoid: Monoid[A]) -> Callable[[Iterable[A]], A]:
    """Fold ``monoid.concat`` over a sequence, starting from ``monoid.empty``."""
    return lambda values: reduce(monoid.concat, values, monoid.empty)


SemigroupSum: Semigroup[Measure[float]] = get_semigroup(NumberSemigroupSum)
"""Independent sum of measures."""

MonoidSum: Monoid[Measure[float]] = get_monoid(NumberMonoidSum)
"""Independent sum of measures; identity is the Dirac measure at ``0``."""

MonoidProduct: Monoid[Measure[float]] = get_monoid(NumberMonoidProduct)
"""Independent product of measures; identity is the Dirac measure at ``1``."""

FieldNumber: Field[Measure[float]] = get_field(NumberField)
"""Field operations on real-valued measures."""


__all__ = [
    "FieldNumber",
    "MonoidProduct",
    "MonoidSum",
    "SemigroupSum",
    "concat_all",
    "get_field",
    "get_monoid",
    "get_semigroup",
]
