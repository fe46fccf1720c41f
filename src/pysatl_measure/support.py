"""
Continuous Supports
===================

Closure-aware intervals describing where a density-defined measure lives.
The shape of the support selects the quadrature range transform used to
integrate against the density.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from math import inf, isnan
from typing import TYPE_CHECKING, cast, overload

import numpy as np

from pysatl_measure.types import ContinuousSupportShape1D

if TYPE_CHECKING:
    from pysatl_measure.types import BoolArray, Number, NumericArray


@dataclass(frozen=True, slots=True)
class ContinuousSupport:
    """
    1D interval with configurable closure.

    Parameters
    ----------
    left : float, default=-inf
        Left endpoint of the interval.
    right : float, default=inf
        Right endpoint of the interval.
    left_closed : bool, default=True
        Whether left endpoint is included (ignored if left = -inf).
    right_closed : bool, default=True
        Whether right endpoint is included (ignored if right = inf).

    Raises
    ------
    ValueError
        If an endpoint is NaN.
    """

    left: float = -inf
    right: float = inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        if isnan(self.left) or isnan(self.right):
            raise ValueError("Support endpoints must not be NaN.")
        if self.left == -inf and self.left_closed:
            object.__setattr__(self, "left_closed", False)
        if self.right == inf and self.right_closed:
            object.__setattr__(self, "right_closed", False)

    @overload
    def contains(self, x: Number) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> BoolArray: ...

    def contains(self, x: Number | NumericArray) -> bool | BoolArray:
        """
        Check if point(s) are contained in the interval.

        Parameters
        ----------
        x : Number or NumericArray
            Point(s) to check.

        Returns
        -------
        bool or BoolArray
            True for points within the interval, False otherwise.
        """
        arr = np.asarray(x)

        left_ok = (arr > self.left) | (self.left_closed & (arr >= self.left))
        right_ok = (arr < self.right) | (self.right_closed & (arr <= self.right))
        result = left_ok & right_ok

        if np.ndim(arr) == 0:
            return bool(result)

        return cast("BoolArray", result)

    def __contains__(self, x: object) -> bool:
        return bool(self.contains(cast("Number", x)))

    @property
    def is_empty(self) -> bool:
        """Check if the interval is empty."""
        if self.left > self.right:
            return True

        return bool(self.left == self.right and not (self.left_closed and self.right_closed))

    @property
    def shape(self) -> ContinuousSupportShape1D:
        """Topological shape of the interval."""
        if self.is_empty:
            return ContinuousSupportShape1D.EMPTY

        if self.left == self.right:
            return ContinuousSupportShape1D.SINGLE_POINT

        if self.left == -inf and self.right == inf:
            return ContinuousSupportShape1D.REAL_LINE
        if self.left == -inf:
            return ContinuousSupportShape1D.RAY_LEFT
        if self.right == inf:
            return ContinuousSupportShape1D.RAY_RIGHT
        return ContinuousSupportShape1D.BOUNDED_INTERVAL


REAL_LINE = ContinuousSupport()
"""The whole real line, default support of density-defined measures."""

UNIT_INTERVAL = ContinuousSupport(0.0, 1.0)
"""The closed interval [0, 1]."""

__all__ = [
    "ContinuousSupport",
    "REAL_LINE",
    "UNIT_INTERVAL",
]
