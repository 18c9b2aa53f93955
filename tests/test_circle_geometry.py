# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for circle geometry and normalization tags (circle_geometry.py)."""

import math

import pytest

from harmonic_circle.domain.circle_geometry import (
    CircleGeometry,
    Normalization,
    as_normalization,
)


class TestCircleGeometry:

    def test_derived_scalars(self):
        colat = math.radians(40.0)
        geo = CircleGeometry(
            ref_radius=6378137.0,
            point_radius=7000000.0,
            sin_colat=math.sin(colat),
            cos_colat=math.cos(colat),
        )
        q = 6378137.0 / 7000000.0
        assert geo.q == pytest.approx(q, rel=1e-15)
        assert geo.uq == pytest.approx(math.sin(colat) * q, rel=1e-15)
        assert geo.uq2 == pytest.approx((math.sin(colat) * q) ** 2, rel=1e-15)
        assert geo.inv_radius == pytest.approx(1.0 / 7000000.0, rel=1e-15)

    def test_circle_radius_and_height(self):
        geo = CircleGeometry(1.0, 2.0, 0.6, 0.8)
        assert geo.circle_radius == pytest.approx(1.2)
        assert geo.height == pytest.approx(1.6)

    def test_zero_point_radius_is_silent(self):
        """A zero point radius gives non-finite q instead of raising."""
        geo = CircleGeometry(1.0, 0.0, 0.5, math.sqrt(0.75))
        assert math.isinf(geo.q)
        assert not math.isfinite(geo.inv_radius)

    def test_pole_gives_infinite_inverse_circle_radius(self):
        geo = CircleGeometry(1.0, 1.0, 0.0, 1.0)
        assert geo.uq == 0.0
        assert math.isinf(geo.inv_circle_radius)

    def test_geometry_is_frozen(self):
        geo = CircleGeometry(1.0, 1.0, 1.0, 0.0)
        with pytest.raises(AttributeError):
            geo.q = 2.0  # type: ignore[misc]


class TestNormalization:

    @pytest.mark.parametrize("value,expected", [
        ("full", Normalization.FULL),
        ("SCHMIDT", Normalization.SCHMIDT),
        (Normalization.FULL, Normalization.FULL),
    ])
    def test_accepts_enum_and_strings(self, value, expected):
        assert as_normalization(value) is expected

    def test_unknown_raises(self):
        with pytest.raises(ValueError, match="normalization"):
            as_normalization("unnormalized")
