# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Spherical harmonic sums on a circle of constant latitude and radius.

A spherical harmonic sum factors into an inner sum over degree, which
depends only on radius and colatitude, and an outer sum over order:

    V(lam) = sum_{m=0}^{M} wc[m] cos(m lam) + ws[m] sin(m lam)

An upstream engine computes wc, ws (and the derivative coefficients)
once per circle through CircleBuilder. CircleSummation then evaluates
the outer sum for any number of longitudes at O(M) cost each, roughly
N/2 times faster than a full degree/order recomputation.

The outer sum uses the Clenshaw recurrence for the three-term relation

    phi_{m+1} = 2 cos(lam) phi_m - phi_{m-1}

so no trigonometric function is called per order.

Gradient coefficient conventions:
    wrc, wrs   d/dq of the order-m coefficients, q = ref_radius / r
    wtc, wts   d/dtheta of the order-m coefficients (theta = colatitude)
The longitude derivative is formed internally from m*ws[m], -m*wc[m].

Spherical components (dq/dr = -q/r):
    g_r      = -(q/r) * R
    g_theta  = Theta / r
    g_lambda = L / (r sin(theta))
rotated into Cartesian (x, y, z) about the polar axis.

Reference: Clenshaw (1955), "A note on the summation of Chebyshev
series".
"""
from dataclasses import dataclass

import numpy as np

from harmonic_circle.domain.circle_geometry import (
    CircleGeometry,
    Normalization,
)
from harmonic_circle.domain.longitude import cossin, cossin_array

Gradient = tuple[float, float, float]


@dataclass(frozen=True)
class CircleSummation:
    """Frozen outer-sum evaluator for one circle.

    Coefficient tuples are indexed by order 0..max_order. The four
    derivative tuples are empty when include_gradient is False.
    Build instances with CircleBuilder.
    """

    max_order: int
    include_gradient: bool
    normalization: Normalization
    scale: float
    geometry: CircleGeometry
    wc: tuple[float, ...]
    ws: tuple[float, ...]
    wrc: tuple[float, ...] = ()
    wrs: tuple[float, ...] = ()
    wtc: tuple[float, ...] = ()
    wts: tuple[float, ...] = ()

    def __post_init__(self) -> None:
        if self.max_order < 0:
            raise ValueError(f"max_order must be >= 0, got {self.max_order}")
        n = self.max_order + 1
        if len(self.wc) != n or len(self.ws) != n:
            raise ValueError(
                f"value coefficients must have length {n}, "
                f"got {len(self.wc)} and {len(self.ws)}"
            )
        n_grad = n if self.include_gradient else 0
        for name in ("wrc", "wrs", "wtc", "wts"):
            size = len(getattr(self, name))
            if size != n_grad:
                raise ValueError(
                    f"{name} must have length {n_grad}, got {size}"
                )

    # ── Geometry ────────────────────────────────────────────────────

    @property
    def ref_radius(self) -> float:
        return self.geometry.ref_radius

    @property
    def point_radius(self) -> float:
        return self.geometry.point_radius

    @property
    def sin_colat(self) -> float:
        return self.geometry.sin_colat

    @property
    def cos_colat(self) -> float:
        return self.geometry.cos_colat

    @property
    def q(self) -> float:
        return self.geometry.q

    @property
    def uq(self) -> float:
        return self.geometry.uq

    @property
    def uq2(self) -> float:
        return self.geometry.uq2

    # ── Evaluation ──────────────────────────────────────────────────

    def value(self, lon_deg: float) -> float:
        """Sum at a longitude given in degrees."""
        cos_lon, sin_lon = cossin(lon_deg)
        return self.value_cossin(cos_lon, sin_lon)

    __call__ = value

    def value_cossin(self, cos_lon: float, sin_lon: float) -> float:
        """Sum at a longitude given by its cosine and sine."""
        v, _ = self._evaluate(False, cos_lon, sin_lon)
        return v

    def value_and_gradient(self, lon_deg: float) -> tuple[float, Gradient]:
        """Sum and Cartesian gradient at a longitude given in degrees."""
        cos_lon, sin_lon = cossin(lon_deg)
        return self.value_and_gradient_cossin(cos_lon, sin_lon)

    def value_and_gradient_cossin(
        self,
        cos_lon: float,
        sin_lon: float,
    ) -> tuple[float, Gradient]:
        """Sum and Cartesian gradient (gx, gy, gz) from cos/sin of longitude.

        Without gradient storage the gradient is (0.0, 0.0, 0.0).
        """
        v, grad = self._evaluate(True, cos_lon, sin_lon)
        if grad is None:
            return v, (0.0, 0.0, 0.0)
        return v, grad

    def values(self, lons_deg) -> np.ndarray:
        """Sum at each longitude (degrees) of an array."""
        cos_lon, sin_lon = cossin_array(lons_deg)
        v, _ = self._evaluate(False, cos_lon, sin_lon)
        return np.broadcast_to(v, cos_lon.shape).astype(float)

    def values_and_gradients(self, lons_deg) -> tuple[np.ndarray, np.ndarray]:
        """Sums and gradients at each longitude (degrees) of an array.

        Returns:
            (values, gradients) with gradients of shape (..., 3).
        """
        cos_lon, sin_lon = cossin_array(lons_deg)
        v, grad = self._evaluate(True, cos_lon, sin_lon)
        v = np.broadcast_to(v, cos_lon.shape).astype(float)
        if grad is None:
            return v, np.zeros(cos_lon.shape + (3,))
        return v, np.stack(
            [np.broadcast_to(g, cos_lon.shape) for g in grad], axis=-1
        )

    def _evaluate(self, want_gradient, cos_lon, sin_lon):
        """Clenshaw summation over order. Works on floats or numpy arrays."""
        gradp = want_gradient and self.include_gradient
        wc, ws = self.wc, self.ws
        wrc, wrs, wtc, wts = self.wrc, self.wrs, self.wtc, self.wts
        two_c = 2.0 * cos_lon

        # b_{m+1}, b_{m+2} for value (v), radial (r), colatitude (t)
        # and longitude (l) series, cosine and sine parts.
        vc = vc2 = vs = vs2 = 0.0
        vrc = vrc2 = vrs = vrs2 = 0.0
        vtc = vtc2 = vts = vts2 = 0.0
        vlc = vlc2 = vls = vls2 = 0.0
        for m in range(self.max_order, 0, -1):
            vc, vc2 = two_c * vc - vc2 + wc[m], vc
            vs, vs2 = two_c * vs - vs2 + ws[m], vs
            if gradp:
                vrc, vrc2 = two_c * vrc - vrc2 + wrc[m], vrc
                vrs, vrs2 = two_c * vrs - vrs2 + wrs[m], vrs
                vtc, vtc2 = two_c * vtc - vtc2 + wtc[m], vtc
                vts, vts2 = two_c * vts - vts2 + wts[m], vts
                vlc, vlc2 = two_c * vlc - vlc2 + m * ws[m], vlc
                vls, vls2 = two_c * vls - vls2 - m * wc[m], vls

        value = wc[0] + cos_lon * vc - vc2 + sin_lon * vs
        if not gradp:
            return value, None

        radial = wrc[0] + cos_lon * vrc - vrc2 + sin_lon * vrs
        colat = wtc[0] + cos_lon * vtc - vtc2 + sin_lon * vts
        dlon = cos_lon * vlc - vlc2 + sin_lon * vls

        geo = self.geometry
        u = geo.sin_colat
        t = geo.cos_colat
        g_r = -geo.q * geo.inv_radius * radial
        g_t = geo.inv_radius * colat
        g_l = geo.inv_circle_radius * dlon

        # Rotate (r, theta, lambda) into Cartesian
        horiz = u * g_r + t * g_t
        gradx = cos_lon * horiz - sin_lon * g_l
        grady = sin_lon * horiz + cos_lon * g_l
        gradz = t * g_r - u * g_t
        return value, (gradx, grady, gradz)
