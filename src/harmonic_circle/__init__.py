# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Harmonic Circle

Fast evaluation of spherical harmonic sums, and their gradients, at many
longitudes on one circle of constant latitude and radius. The inner sum
over degree is precomputed once per circle; each longitude then costs a
Clenshaw sum over order.
"""

from harmonic_circle.domain.longitude import (
    cossin,
    cossin_array,
    reduce_longitude,
)
from harmonic_circle.domain.circle_geometry import (
    CircleGeometry,
    Normalization,
)
from harmonic_circle.domain.circular_summation import CircleSummation
from harmonic_circle.domain.circle_builder import CircleBuilder
from harmonic_circle.ports.evaluation import CircleEvaluator

__all__ = [
    "CircleBuilder",
    "CircleEvaluator",
    "CircleGeometry",
    "CircleSummation",
    "Normalization",
    "cossin",
    "cossin_array",
    "reduce_longitude",
]
