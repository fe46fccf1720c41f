"""
Special functions subpackage

Numerically robust special functions used to parametrize standard
distributions:

- log-gamma and the Stirling correction (:mod:`.gamma`);
- log-beta (:mod:`.beta`);
- binomial coefficients (:mod:`.combinatorics`);
- polynomial and series evaluation helpers (:mod:`.polynomials`).

All functions are pure and signal domain violations with NaN or infinities.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .beta import log_beta
from .combinatorics import choose, choose_exact, log_choose_fast
from .gamma import (
    LN_SQRT_2_PI,
    M_EULER_MASCHERONI,
    M_SQRT_EPS,
    log_gamma,
    log_gamma_correction,
)
from .polynomials import chebyshev_broucke, evaluate_polynomial, evaluate_ratio

__all__ = [
    # gamma
    "log_gamma",
    "log_gamma_correction",
    "LN_SQRT_2_PI",
    "M_EULER_MASCHERONI",
    "M_SQRT_EPS",
    # beta
    "log_beta",
    # combinatorics
    "choose",
    "choose_exact",
    "log_choose_fast",
    # series
    "chebyshev_broucke",
    "evaluate_polynomial",
    "evaluate_ratio",
]
