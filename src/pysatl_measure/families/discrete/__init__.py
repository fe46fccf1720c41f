"""
Built-in discrete distributions.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_measure.families.discrete.binomial import binomial, binomial_pmf

__all__ = [
    "binomial",
    "binomial_pmf",
]
