"""
Built-in continuous distributions.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_measure.families.continuous.beta import beta, beta_pdf
from pysatl_measure.families.continuous.chisq import chisq
from pysatl_measure.families.continuous.gaussian import gaussian, gaussian_pdf

__all__ = [
    "beta",
    "beta_pdf",
    "chisq",
    "gaussian",
    "gaussian_pdf",
]
