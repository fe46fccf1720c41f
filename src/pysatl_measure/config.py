"""
Numerical Configuration
=======================

Process-wide numerical options for quadrature refinement and measure
composition, exposed through a cached accessor:

- :func:`numerical_configuration`: current :class:`NumericalConfiguration`.
- :func:`configure`: replace selected options (validated).
- :func:`reset_numerical_configuration`: drop overrides and return to defaults.

Notes
-----
Quadrature options are read when a measure is *queried*; the composition
depth limit is read both when a measure is *built* and while queries nest.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NumericalConfiguration:
    """
    Numerical options of the measure core.

    Parameters
    ----------
    min_level : int, default 3
        Refinement levels always computed before convergence is tested.
    max_level : int, default 7
        Last refinement level (step ``2**-max_level`` in the tanh-sinh variable).
    tolerance : float, default 1e-10
        Relative agreement between consecutive levels that ends refinement early.
        ``0`` disables early termination.
    t_max : float, default 4.0
        Half-width of the truncated tanh-sinh abscissa range.
    max_composition_depth : int, default 100
        Deepest allowed nesting of ``chain``/``ap``/algebraic combinations.

    Raises
    ------
    ValueError
        If any option is out of range.
    """

    min_level: int = 3
    max_level: int = 7
    tolerance: float = 1e-10
    t_max: float = 4.0
    max_composition_depth: int = 100

    def __post_init__(self) -> None:
        if self.min_level < 0:
            raise ValueError("min_level must be non-negative.")
        if self.max_level < self.min_level:
            raise ValueError("max_level must be greater than or equal to min_level.")
        if not self.tolerance >= 0.0:
            raise ValueError("tolerance must be non-negative.")
        if not self.t_max > 0.0:
            raise ValueError("t_max must be positive.")
        if self.max_composition_depth < 1:
            raise ValueError("max_composition_depth must be at least 1.")


_overrides: dict[str, Any] = {}


@lru_cache(maxsize=1)
def numerical_configuration() -> NumericalConfiguration:
    """
    Get the active numerical configuration.

    Returns
    -------
    NumericalConfiguration
        Defaults updated with every override passed to :func:`configure`.
    """
    return NumericalConfiguration(**_overrides)


def configure(**overrides: Any) -> NumericalConfiguration:
    """
    Override numerical options.

    Parameters
    ----------
    **overrides
        Field values of :class:`NumericalConfiguration`.

    Returns
    -------
    NumericalConfiguration
        The new active configuration.

    Raises
    ------
    ValueError
        If a value is invalid. The previous configuration stays active.
    TypeError
        If an unknown option is given.
    """
    candidate = replace(numerical_configuration(), **overrides)
    _overrides.update(overrides)
    numerical_configuration.cache_clear()
    logger.debug("Numerical configuration updated: %s", candidate)
    return numerical_configuration()


def reset_numerical_configuration() -> None:
    """Drop all overrides and restore the default configuration."""
    _overrides.clear()
    numerical_configuration.cache_clear()


__all__ = [
    "NumericalConfiguration",
    "configure",
    "numerical_configuration",
    "reset_numerical_configuration",
]
