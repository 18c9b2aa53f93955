# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Port interface for evaluating a harmonic sum along a circle of latitude.

Client code depends on this protocol rather than on CircleSummation, so
other evaluators (a full degree/order sum, a cached grid) can stand in.
"""
from typing import Protocol, runtime_checkable


@runtime_checkable
class CircleEvaluator(Protocol):
    """Port for evaluating a sum and its gradient at a longitude."""

    def value(self, lon_deg: float) -> float:
        """Sum at a longitude in degrees."""
        ...

    def value_cossin(self, cos_lon: float, sin_lon: float) -> float:
        """Sum at a longitude given by its cosine and sine."""
        ...

    def value_and_gradient(
        self,
        lon_deg: float,
    ) -> tuple[float, tuple[float, float, float]]:
        """Sum and Cartesian gradient at a longitude in degrees."""
        ...

    def value_and_gradient_cossin(
        self,
        cos_lon: float,
        sin_lon: float,
    ) -> tuple[float, tuple[float, float, float]]:
        """Sum and Cartesian gradient from the cosine and sine of longitude."""
        ...
