"""
PySATL Measure
==============

Unit tests for measures, quadrature, special functions and distribution
families.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
