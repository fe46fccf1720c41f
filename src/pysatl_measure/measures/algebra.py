"""
Value-Level Algebras
====================

Records of operators and identities that the measure combinators lift to
measures (:mod:`pysatl_measure.measures.instances`):

- :class:`Semigroup`: associative ``concat``;
- :class:`Monoid`: ``concat`` with identity ``empty``;
- :class:`Field`: ring operations plus ``div``, ``mod`` and ``degree``.

Number instances follow IEEE semantics: division by zero degrades to
infinities or NaN instead of raising.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
import operator
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Semigroup[A]:
    """Associative binary operation."""

    concat: Callable[[A, A], A]


@dataclass(frozen=True, slots=True)
class Monoid[A]:
    """
    Associative binary operation with an identity element.

    Parameters
    ----------
    concat : Callable[[A, A], A]
        Associative operation.
    empty : A
        Identity of ``concat``.
    """

    concat: Callable[[A, A], A]
    empty: A


@dataclass(frozen=True, slots=True)
class Field[A]:
    """
    Field operations.

    Parameters
    ----------
    add, sub, mul, div, mod : Callable[[A, A], A]
        Binary operations.
    zero, one : A
        Additive and multiplicative identities.
    degree : Callable[[A], Any]
        Euclidean degree.
    """

    add: Callable[[A, A], A]
    zero: A
    mul: Callable[[A, A], A]
    one: A
    sub: Callable[[A, A], A]
    div: Callable[[A, A], A]
    mod: Callable[[A, A], A]
    degree: Callable[[A], Any]


def divide(a: float, b: float) -> float:
    """IEEE division: ``x / 0`` is a signed infinity, ``0 / 0`` is NaN."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def remainder(a: float, b: float) -> float:
    """Truncated remainder (sign of the dividend); NaN for ``b == 0``."""
    if b == 0:
        return math.nan
    return math.fmod(a, b)


NumberSemigroupSum: Semigroup[float] = Semigroup(operator.add)
"""Addition of numbers."""

NumberMonoidSum: Monoid[float] = Monoid(operator.add, 0.0)
"""Addition of numbers with identity ``0``."""

NumberMonoidProduct: Monoid[float] = Monoid(operator.mul, 1.0)
"""Multiplication of numbers with identity ``1``."""

NumberField: Field[float] = Field(
    add=operator.add,
    zero=0.0,
    mul=operator.mul,
    one=1.0,
    sub=operator.sub,
    div=divide,
    mod=remainder,
    degree=lambda _: 1,
)
"""The field of real numbers."""


__all__ = [
    "Field",
    "Monoid",
    "NumberField",
    "NumberMonoidProduct",
    "NumberMonoidSum",
    "NumberSemigroupSum",
    "Semigroup",
    "divide",
    "remainder",
]
