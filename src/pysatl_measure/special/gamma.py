"""
Log-Gamma Function
==================

Piecewise evaluation of ``log Γ(z)`` for positive real ``z``:

- Laurent shortcut for ``z`` below ``sqrt(eps)``;
- minimax rational approximations on ``[1, 1.5]``, ``[1.5, 2)`` and ``[2, 3)``,
  reached for ``z < 1`` through ``Γ(z + 1) = z Γ(z)``;
- downward reduction of ``3 <= z < 15`` into ``[2, 3)``;
- Lanczos approximation (13 terms) for ``z >= 15``.

The coefficient tables are those of the Boost.Math ``lgamma_small`` and
``lanczos13m53`` implementations and give about 1e-15 relative accuracy.

Also provides :func:`log_gamma_correction`, the Stirling remainder used by
:func:`pysatl_measure.special.beta.log_beta`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

from pysatl_measure.special.polynomials import (
    chebyshev_broucke,
    evaluate_polynomial,
    evaluate_ratio,
)

M_SQRT_EPS = 1.4901161193847656e-8
"""Square root of the double precision machine epsilon."""

M_EULER_MASCHERONI = 0.5772156649015328606065121
"""Euler–Mascheroni constant γ."""

LN_SQRT_2_PI = 0.9189385332046727417803297364056176398613974736377834128171
"""``log(sqrt(2π))``."""

_LGAMMA_1_15_Y = 0.52815341949462890625
_LGAMMA_1_15_P = (
    0.490622454069039543534e-1,
    -0.969117530159521214579e-1,
    -0.414983358359495381969,
    -0.406567124211938417342,
    -0.158413586390692192217,
    -0.240149820648571559892e-1,
    -0.100346687696279557415e-2,
)
_LGAMMA_1_15_Q = (
    1.0,
    0.302349829846463038743e1,
    0.348739585360723852576e1,
    0.191415588274426679201e1,
    0.507137738614363510846,
    0.577039722690451849648e-1,
    0.195768102601107189171e-2,
)

_LGAMMA_15_2_Y = 0.452017307281494140625
_LGAMMA_15_2_P = (
    -0.292329721830270012337e-1,
    0.144216267757192309184,
    -0.142440390738631274135,
    0.542809694055053558157e-1,
    -0.850535976868336437746e-2,
    0.431171342679297331241e-3,
)
_LGAMMA_15_2_Q = (
    1.0,
    -0.150169356054485044494e1,
    0.846973248876495016101,
    -0.220095151814995745555,
    0.25582797155975869989e-1,
    -0.100666795539143372762e-2,
    -0.827193521891290553639e-6,
)

_LGAMMA_2_3_Y = 0.158963680267333984375
_LGAMMA_2_3_P = (
    -0.180355685678449379109e-1,
    0.25126649619989678683e-1,
    0.494103151567532234274e-1,
    0.172491608709613993966e-1,
    -0.259453563205438108893e-3,
    -0.541009869215204396339e-3,
    -0.324588649825948492091e-4,
)
_LGAMMA_2_3_Q = (
    1.0,
    0.196202987197795200688e1,
    0.148019669424231326694e1,
    0.541391432071720958364,
    0.988504251128010129477e-1,
    0.82130967464889339326e-2,
    0.224936291922115757597e-3,
    -0.223352763208617092964e-6,
)

_LANCZOS_G = 6.024680040776729583740234375
# (numerator, denominator) of the exp(g)-scaled Lanczos sum
_LANCZOS_13 = (
    (56906521.91347156388090791033559122686859, 0.0),
    (103794043.1163445451906271053616070238554, 39916800.0),
    (86363131.28813859145546927288977868422342, 120543840.0),
    (43338889.32467613834773723740590533316085, 150917976.0),
    (14605578.08768506808414169982791359218571, 105258076.0),
    (3481712.15498064590882071018964774556468, 45995730.0),
    (601859.6171681098786670226533699352302507, 13339535.0),
    (75999.29304014542649875303443598909137092, 2637558.0),
    (6955.999602515376140356310115515198987526, 357423.0),
    (449.9445569063168119446858607650988409623, 32670.0),
    (19.51992788247617482847860966235652136208, 1925.0),
    (0.5098416655656676188125178644804694509993, 66.0),
    (0.006061842346248906525783753964555936883222, 1.0),
)

_CORRECTION_BIG = 94906265.62425156
_CORRECTION_COEFFS = (
    0.1666389480451863247205729650822e0,
    -0.1384948176067563840732986059135e-4,
    0.9810825646924729426157171547487e-8,
    -0.1809129475572494194263306266719e-10,
    0.6221098041892605227126015543416e-13,
    -0.3399615005417721944303330599666e-15,
    0.2683181998482698748957538846666e-17,
)


def _lgamma_1_15(zm1: float, zm2: float) -> float:
    # log Γ(z) on [1, 1.5] given z - 1 and z - 2 computed by the caller
    r = zm1 * zm2
    ratio = evaluate_polynomial(zm1, _LGAMMA_1_15_P) / evaluate_polynomial(zm1, _LGAMMA_1_15_Q)
    return r * _LGAMMA_1_15_Y + r * ratio


def _lgamma_15_2(zm1: float, zm2: float) -> float:
    r = zm1 * zm2
    ratio = evaluate_polynomial(-zm2, _LGAMMA_15_2_P) / evaluate_polynomial(-zm2, _LGAMMA_15_2_Q)
    return r * _LGAMMA_15_2_Y + r * ratio


def _lgamma_2_3(z: float) -> float:
    zm2 = z - 2
    r = zm2 * (z + 1)
    ratio = evaluate_polynomial(zm2, _LGAMMA_2_3_P) / evaluate_polynomial(zm2, _LGAMMA_2_3_Q)
    return r * _LGAMMA_2_3_Y + r * ratio


def _lgamma_reduced(z: float) -> float:
    acc = 0.0
    while z >= 3:
        z -= 1
        acc += math.log(z)
    return acc + _lgamma_2_3(z)


def _lanczos(z: float) -> float:
    return (math.log(z + _LANCZOS_G - 0.5) - 1) * (z - 0.5) + math.log(
        evaluate_ratio(_LANCZOS_13, z)
    )


def log_gamma(z: float) -> float:
    """
    Natural logarithm of the Gamma function.

    Parameters
    ----------
    z : float
        Argument.

    Returns
    -------
    float
        ``log Γ(z)``; ``+inf`` for ``z <= 0`` and NaN for NaN input.

    Examples
    --------
    >>> round(log_gamma(3.5), 6)
    1.200974
    """
    if math.isnan(z):
        return math.nan
    if z <= 0:
        return math.inf
    if z < M_SQRT_EPS:
        return math.log(1 / z - M_EULER_MASCHERONI)
    # Below 1 the argument is shifted by one; z and z - 1 are passed
    # separately because (z + 1) - 1 loses digits near z = 0.
    if z < 0.5:
        return _lgamma_1_15(z, z - 1) - math.log(z)
    if z < 1:
        return _lgamma_15_2(z, z - 1) - math.log(z)
    if z <= 1.5:
        return _lgamma_1_15(z - 1, z - 2)
    if z < 2:
        return _lgamma_15_2(z - 1, z - 2)
    if z < 15:
        return _lgamma_reduced(z)
    return _lanczos(z)


def log_gamma_correction(x: float) -> float:
    """
    Stirling remainder ``log Γ(x) - ((x - 0.5) log x - x + log sqrt(2π))``.

    Parameters
    ----------
    x : float
        Argument, must be at least 10.

    Returns
    -------
    float
        Correction term; NaN for ``x < 10``.
    """
    if x < 10:
        return math.nan
    if x < _CORRECTION_BIG:
        t = 10 / x
        return chebyshev_broucke(t * t * 2 - 1, _CORRECTION_COEFFS) / x
    return 1 / (x * 12)


__all__ = [
    "LN_SQRT_2_PI",
    "M_EULER_MASCHERONI",
    "M_SQRT_EPS",
    "log_gamma",
    "log_gamma_correction",
]
