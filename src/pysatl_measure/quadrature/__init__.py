"""
Quadrature subpackage

Adaptive double-exponential quadrature used to realize density-defined
measures as integration functionals:

- refinement sequences and selectors (:mod:`.results`);
- tanh-sinh trapezoid and Simpson rules (:mod:`.tanh_sinh`);
- infinite and semi-infinite range transforms (:mod:`.ranges`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .ranges import everywhere, interval, non_negative, quadrature
from .results import (
    QuadratureResult,
    QuadratureRule,
    QuadratureSequence,
    absolute,
    constant_sequence,
    last,
    relative,
)
from .tanh_sinh import simpson, trap

__all__ = [
    # results
    "QuadratureResult",
    "QuadratureRule",
    "QuadratureSequence",
    "constant_sequence",
    "absolute",
    "last",
    "relative",
    # rules
    "simpson",
    "trap",
    # ranges
    "everywhere",
    "interval",
    "non_negative",
    "quadrature",
]
