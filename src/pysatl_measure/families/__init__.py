"""
Standard distribution families.

Constructors of commonly used measures, built from the measure
constructors and the special function library:

- discrete: :func:`binomial`;
- continuous: :func:`beta`, :func:`gaussian`, :func:`chisq`.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .continuous import beta, beta_pdf, chisq, gaussian, gaussian_pdf
from .discrete import binomial, binomial_pmf

__all__ = [
    "beta",
    "beta_pdf",
    "binomial",
    "binomial_pmf",
    "chisq",
    "gaussian",
    "gaussian_pdf",
]
