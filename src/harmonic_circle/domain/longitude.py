# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Longitude normalization for the circle evaluator.

Reduces a longitude in degrees to [-180, 180) and returns its cosine and
sine. The axis-aligned longitudes that matter downstream come out as
exact zeros:

    |lon| == 90   ->  cos is 0.0
    lon == -180   ->  sin is 0.0

Reduction uses fmod, which is exact, followed by at most one exact
shift of 360. So lon and lon + 360k give bit-identical results whenever
both are representable.
"""
import math

import numpy as np


def reduce_longitude(lon_deg: float) -> float:
    """Reduce a longitude in degrees to [-180, 180). Non-finite gives NaN."""
    if not math.isfinite(lon_deg):
        return math.nan
    x = math.fmod(lon_deg, 360.0)
    if x >= 180.0:
        x -= 360.0
    elif x < -180.0:
        x += 360.0
    return x


def cossin(lon_deg: float) -> tuple[float, float]:
    """
    Cosine and sine of a longitude given in degrees.

    Args:
        lon_deg: Longitude (degrees), any finite value.

    Returns:
        (cos, sin) with exact zeros at +/-90 (cos) and -180 (sin).
    """
    x = reduce_longitude(lon_deg)
    xi = math.radians(x)
    cos_x = 0.0 if abs(x) == 90.0 else math.cos(xi)
    sin_x = 0.0 if x == -180.0 else math.sin(xi)
    return cos_x, sin_x


def cossin_array(lons_deg) -> tuple[np.ndarray, np.ndarray]:
    """Vectorised cossin over an array of longitudes (degrees).

    Reduction and the exact zeros match the scalar form; other elements
    agree with it to within an ulp of numpy's cos/sin.
    """
    lons = np.asarray(lons_deg, dtype=float)
    with np.errstate(invalid="ignore"):
        x = np.fmod(lons, 360.0)
    x = np.where(x >= 180.0, x - 360.0, np.where(x < -180.0, x + 360.0, x))
    xi = np.radians(x)
    cos_x = np.where(np.abs(x) == 90.0, 0.0, np.cos(xi))
    sin_x = np.where(x == -180.0, 0.0, np.sin(xi))
    return cos_x, sin_x
