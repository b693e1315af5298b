from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Final

import numpy as np

from .parameters import (Annulus, Applied, Circle, DrivingPressure, DuctGeometry,
                         Ellipse, FluidProperties, Gravity, Rectangle)
from .utils import mm_to_m, to_kg_per_hr

__all__ = [
    "FlowResult",
    "RECT_CORRECTION",
    "circle_flow",
    "rectangle_flow",
    "ellipse_flow",
    "annulus_flow",
    "solve_flow",
]

logger = logging.getLogger(__name__)

# First-order aspect-ratio correction to parallel-plate flow (series truncation)
RECT_CORRECTION: Final[float] = 0.630


@dataclass(frozen=True)
class FlowResult:
    mass_flow_kg_per_hr: float   # kg hr⁻¹
    velocity_m_per_s: float      # m s⁻¹ (mean over the cross-section)
    volume_flow_m3_per_s: float = 0.0

    @classmethod
    def zero(cls) -> "FlowResult":
        return cls(0.0, 0.0, 0.0)


# ------------------------------
# Closed-form volumetric flow, SI units throughout
# ------------------------------
def circle_flow(r: float, dp: float, mu: float, L: float) -> float:
    """Hagen–Poiseuille: Q = π r⁴ ΔP / (8 μ L)."""
    return np.pi * r ** 4 * dp / (8.0 * mu * L)


def rectangle_flow(a: float, b: float, dp: float, mu: float, L: float) -> float:
    """Q = a b³ ΔP / (12 μ L) · (1 − 0.630 b/a), a = long side, b = short side."""
    return a * b ** 3 * dp / (12.0 * mu * L) * (1.0 - RECT_CORRECTION * (b / a))


def ellipse_flow(a: float, b: float, dp: float, mu: float, L: float) -> float:
    """Q = π a³ b³ ΔP / (4 μ L (a² + b²)), a, b = semi-axes."""
    return np.pi * a ** 3 * b ** 3 * dp / (4.0 * mu * L * (a ** 2 + b ** 2))


def annulus_flow(R: float, r: float, dp: float, mu: float, L: float) -> float:
    """Concentric annulus, K = r/R:
    Q = π ΔP R⁴/(8 μ L) · [(1 − K⁴) − (1 − K²)² / ln(1/K)].
    """
    K = r / R
    # ln(1/K) → ∞ as K → 0, so the bracket reduces to the circular pipe
    log_term = (1.0 - K ** 2) ** 2 / np.log(1.0 / K) if K > 0.0 else 0.0
    return np.pi * dp * R ** 4 / (8.0 * mu * L) * ((1.0 - K ** 4) - log_term)


def _volume_flow(geometry: DuctGeometry, dp: float, mu: float, L: float) -> float:
    if isinstance(geometry, Circle):
        return circle_flow(geometry.radius_m, dp, mu, L)
    if isinstance(geometry, Rectangle):
        return rectangle_flow(*geometry.sides_m, dp, mu, L)
    if isinstance(geometry, Ellipse):
        return ellipse_flow(*geometry.semi_axes_m, dp, mu, L)
    if isinstance(geometry, Annulus):
        return annulus_flow(*geometry.radii_m, dp, mu, L)
    raise TypeError(f"unsupported duct geometry: {type(geometry).__name__}")


def solve_flow(
    fluid: FluidProperties,
    geometry: DuctGeometry,
    pressure: DrivingPressure,
    length_mm: float,
) -> FlowResult:
    """Steady laminar flow through a straight duct.

    Parameters
    ----------
    fluid
        Density (kg m⁻³) and dynamic viscosity (Pa s).
    geometry
        One of :class:`Circle`, :class:`Rectangle`, :class:`Ellipse`,
        :class:`Annulus`; dimensions in mm.
    pressure
        :class:`Gravity` head (mm) or :class:`Applied` pressure (bar).
    length_mm
        Duct length in mm.

    Incomplete or non-physical input gives ``FlowResult.zero()`` rather than
    an exception.
    """
    if not isinstance(geometry, (Circle, Rectangle, Ellipse, Annulus)):
        raise TypeError(f"unsupported duct geometry: {type(geometry).__name__}")
    if not isinstance(pressure, (Gravity, Applied)):
        raise TypeError(f"unsupported pressure source: {type(pressure).__name__}")

    if not fluid.is_valid or not (np.isfinite(length_mm) and length_mm > 0.0):
        logger.debug("zero flow: fluid=%s length_mm=%s", fluid, length_mm)
        return FlowResult.zero()

    dp = pressure.delta_p(fluid.density)
    if not (np.isfinite(dp) and dp > 0.0):
        logger.debug("zero flow: driving pressure %s Pa", dp)
        return FlowResult.zero()

    if not geometry.is_valid:
        logger.debug("zero flow: invalid geometry %s", geometry)
        return FlowResult.zero()

    L = mm_to_m(length_mm)
    Q = float(_volume_flow(geometry, dp, fluid.viscosity, L))
    area = geometry.area_m2
    v = Q / area if area > 0.0 else 0.0

    return FlowResult(
        mass_flow_kg_per_hr=to_kg_per_hr(Q, fluid.density),
        velocity_m_per_s=v,
        volume_flow_m3_per_s=Q,
    )
