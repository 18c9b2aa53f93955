# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Order-by-order accumulator for CircleSummation.

The upstream degree engine creates a CircleBuilder for one circle, sets
the coefficients of every order 0..M, then calls freeze() to obtain the
immutable evaluator. A frozen builder rejects further writes.

Gradient coefficients passed to a builder created without gradient
storage are discarded, not rejected, so engines may always pass the
full set.
"""
import logging

from harmonic_circle.domain.circle_geometry import (
    CircleGeometry,
    Normalization,
    as_normalization,
)
from harmonic_circle.domain.circular_summation import CircleSummation

logger = logging.getLogger(__name__)


class CircleBuilder:
    """Mutable coefficient store for one circle of latitude.

    Args:
        max_order: Maximum order M (>= 0).
        include_gradient: Allocate derivative coefficients.
        normalization: Legendre normalization of the engine ("full" or
            "schmidt"). Carried through only.
        scale: Scale the engine applied to the coefficients. Stored, not
            applied.
        ref_radius: Reference radius a of the harmonic sum.
        point_radius: Spherical radius r of the circle's points.
        sin_colat: Sine of the spherical colatitude.
        cos_colat: Cosine of the spherical colatitude.

    Raises:
        ValueError: If max_order < 0 or normalization is unknown.
    """

    def __init__(
        self,
        max_order: int,
        include_gradient: bool,
        normalization: Normalization | str,
        scale: float,
        ref_radius: float,
        point_radius: float,
        sin_colat: float,
        cos_colat: float,
    ) -> None:
        if max_order < 0:
            raise ValueError(f"max_order must be >= 0, got {max_order}")
        self._max_order = max_order
        self._include_gradient = bool(include_gradient)
        self._normalization = as_normalization(normalization)
        self._scale = scale
        self._geometry = CircleGeometry(
            ref_radius=ref_radius,
            point_radius=point_radius,
            sin_colat=sin_colat,
            cos_colat=cos_colat,
        )

        n = max_order + 1
        n_grad = n if self._include_gradient else 0
        self._wc = [0.0] * n
        self._ws = [0.0] * n
        self._wrc = [0.0] * n_grad
        self._wrs = [0.0] * n_grad
        self._wtc = [0.0] * n_grad
        self._wts = [0.0] * n_grad
        self._is_set = [False] * n
        self._frozen = False
        self._discard_logged = False

    @property
    def max_order(self) -> int:
        return self._max_order

    @property
    def include_gradient(self) -> bool:
        return self._include_gradient

    @property
    def geometry(self) -> CircleGeometry:
        return self._geometry

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _check_order(self, m: int) -> None:
        if self._frozen:
            raise RuntimeError("CircleBuilder is frozen; coefficients are read-only")
        if not 0 <= m <= self._max_order:
            raise ValueError(
                f"order m must lie in [0, {self._max_order}], got {m}"
            )

    def set_coefficients(self, m: int, wc: float, ws: float) -> None:
        """Store the cos(m lam) and sin(m lam) coefficients of order m."""
        self._check_order(m)
        self._wc[m] = float(wc)
        self._ws[m] = float(ws)
        self._is_set[m] = True

    def set_coefficients_with_gradient(
        self,
        m: int,
        wc: float,
        ws: float,
        wrc: float,
        wrs: float,
        wtc: float,
        wts: float,
    ) -> None:
        """Store value and derivative coefficients of order m.

        wrc/wrs are derivatives with respect to the radius ratio q,
        wtc/wts with respect to colatitude. They are dropped when the
        builder has no gradient storage.
        """
        self.set_coefficients(m, wc, ws)
        if self._include_gradient:
            self._wrc[m] = float(wrc)
            self._wrs[m] = float(wrs)
            self._wtc[m] = float(wtc)
            self._wts[m] = float(wts)
        elif not self._discard_logged:
            logger.debug(
                "Discarding gradient coefficients: circle built without "
                "gradient storage (M=%d)", self._max_order,
            )
            self._discard_logged = True

    def missing_orders(self) -> list[int]:
        """Orders whose coefficients have not been set yet."""
        return [m for m, done in enumerate(self._is_set) if not done]

    def freeze(self) -> CircleSummation:
        """Return the immutable evaluator and lock the builder.

        Raises:
            ValueError: If any order 0..M was never set.
        """
        missing = self.missing_orders()
        if missing:
            raise ValueError(
                f"cannot freeze circle: {len(missing)} order(s) not set, "
                f"first missing m={missing[0]}"
            )
        self._frozen = True
        logger.debug(
            "Frozen circle summation: M=%d gradient=%s normalization=%s",
            self._max_order, self._include_gradient, self._normalization.value,
        )
        return CircleSummation(
            max_order=self._max_order,
            include_gradient=self._include_gradient,
            normalization=self._normalization,
            scale=self._scale,
            geometry=self._geometry,
            wc=tuple(self._wc),
            ws=tuple(self._ws),
            wrc=tuple(self._wrc),
            wrs=tuple(self._wrs),
            wtc=tuple(self._wtc),
            wts=tuple(self._wts),
        )
