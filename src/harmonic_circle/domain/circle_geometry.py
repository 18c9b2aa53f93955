# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Geometry of a circle of constant latitude and radius.

The circle has radius sin_colat * point_radius and lies at height
cos_colat * point_radius above the equatorial plane. Derived scalars are
computed once, with IEEE semantics: a zero point radius gives q = inf
rather than raising.
"""
from dataclasses import dataclass, field
from enum import Enum

import numpy as np


class Normalization(Enum):
    """Associated Legendre normalization used by the coefficient engine.

    Carried through for consistency only; the order sum does not depend
    on it.
    """
    FULL = "full"
    SCHMIDT = "schmidt"


def as_normalization(value: "Normalization | str") -> Normalization:
    """Accept a Normalization or its string value ("full", "schmidt")."""
    if isinstance(value, Normalization):
        return value
    try:
        return Normalization(str(value).lower())
    except ValueError:
        raise ValueError(
            f"normalization must be 'full' or 'schmidt', got {value!r}"
        ) from None


@dataclass(frozen=True)
class CircleGeometry:
    """Reference radius, point radius and colatitude of one circle.

    q = ref_radius / point_radius, uq = sin_colat * q, uq2 = uq**2.
    inv_radius and inv_circle_radius are 1/point_radius and
    1/(sin_colat * point_radius) for the gradient transform.
    """
    ref_radius: float
    point_radius: float
    sin_colat: float
    cos_colat: float
    q: float = field(init=False)
    uq: float = field(init=False)
    uq2: float = field(init=False)
    inv_radius: float = field(init=False)
    inv_circle_radius: float = field(init=False)

    def __post_init__(self) -> None:
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            a = np.float64(self.ref_radius)
            r = np.float64(self.point_radius)
            u = np.float64(self.sin_colat)
            q = a / r
            uq = u * q
            uq2 = uq * uq
            inv_r = np.float64(1.0) / r
            inv_ur = np.float64(1.0) / (u * r)
        object.__setattr__(self, "q", float(q))
        object.__setattr__(self, "uq", float(uq))
        object.__setattr__(self, "uq2", float(uq2))
        object.__setattr__(self, "inv_radius", float(inv_r))
        object.__setattr__(self, "inv_circle_radius", float(inv_ur))

    @property
    def circle_radius(self) -> float:
        """Distance of the circle from the polar axis."""
        return self.sin_colat * self.point_radius

    @property
    def height(self) -> float:
        """Height of the circle above the equatorial plane."""
        return self.cos_colat * self.point_radius
