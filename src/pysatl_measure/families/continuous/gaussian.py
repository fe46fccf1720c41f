"""
Gaussian (normal) distribution.

Probability density function:
    f(x) = 1/(σ√(2π)) * exp(-(x-μ)²/(2σ²))

A non-positive scale gives the zero density instead of an error.

The measure is the pushforward of the standard normal through
``z ↦ μ + σz``, so quadrature nodes always sit where the mass is, whatever
the location and scale.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from pysatl_measure.measures import Measure, from_density_function
from pysatl_measure.support import REAL_LINE

_SQRT_2_PI = math.sqrt(2 * math.pi)


def _standard_pdf(z: float) -> float:
    return math.exp(-0.5 * z * z) / _SQRT_2_PI


def gaussian_pdf(mu: float, sigma: float, x: float) -> float:
    """
    Probability density function of the normal distribution.

    Parameters
    ----------
    mu : float
        Mean.
    sigma : float
        Standard deviation.
    x : float
        Evaluation point.

    Returns
    -------
    float
        Density at ``x``; ``0`` when ``sigma <= 0``.
    """
    if sigma <= 0:
        return 0.0
    z = (x - mu) / sigma
    return math.exp(-0.5 * z * z) / (sigma * _SQRT_2_PI)


def gaussian(mu: float, sigma: float) -> Measure[float]:
    """
    Normal measure with mean ``mu`` and standard deviation ``sigma``.

    Returns
    -------
    Measure[float]
        Continuous measure over the real line; the zero measure when
        ``sigma <= 0``.
    """
    if sigma <= 0:
        return from_density_function(lambda _: 0.0, REAL_LINE)
    standard = from_density_function(_standard_pdf, REAL_LINE)
    return standard.map(lambda z: mu + sigma * z)
