"""
Error types raised by the measure core.

Numeric domain violations never raise: densities and mass functions degrade
to zero contributions and special functions return NaN or infinities.
Only structural misuse is reported with the exceptions below.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class MeasureError(Exception):
    """Base class for structural errors of the measure core."""


class EmptySupportError(MeasureError, ValueError):
    """A discrete support or an empirical sample has no points."""


class CompositionDepthError(MeasureError, RecursionError):
    """
    A composed measure is nested deeper than the configured limit.

    Parameters
    ----------
    depth : int
        Depth of the measure that was about to be built, or the nesting
        reached while a query was running.
    limit : int
        Configured ``max_composition_depth``.
    """

    def __init__(self, depth: int, limit: int) -> None:
        super().__init__(
            f"Measure composition depth {depth} exceeds the limit of {limit}. "
            "Raise max_composition_depth via configure() if the model really needs it."
        )
        self.depth = depth
        self.limit = limit


__all__ = [
    "CompositionDepthError",
    "EmptySupportError",
    "MeasureError",
]
