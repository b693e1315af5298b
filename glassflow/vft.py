"""
Vogel–Fulcher–Tammann curve: ``log10 η = A + B / (T − T0)``.

The three-point fit is closed-form; every division it performs is guarded
first, and anything that would come out non-finite is reported as ``None``.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Final, Optional, Sequence, Tuple

import numpy as np
from scipy.optimize import curve_fit

__all__ = [
    "VFTParameters",
    "fit_vft",
    "fit_vft_least_squares",
    "eval_viscosity_at_temp",
    "eval_temp_at_viscosity",
    "glass_transition_temp",
    "strain_point_temp",
    "sample_curve",
]

logger = logging.getLogger(__name__)

# Reference levels, log10(η / Pa s)
LOG_VISC_WORKING: Final[float] = 1.5
LOG_VISC_SOFTENING: Final[float] = 6.6
LOG_VISC_ANNEALING: Final[float] = 12.0
LOG_VISC_TG: Final[float] = 11.3
LOG_VISC_STRAIN: Final[float] = 14.5

FIT_TOL: Final[float] = 1e-5        # minimum separation of the log η values
POLE_TOL: Final[float] = 0.1        # °C around T0
ASYMPTOTE_TOL: Final[float] = 0.001 # log η around A

Point = Tuple[float, float]  # (T °C, log10 η)


@dataclass(frozen=True)
class VFTParameters:
    A: float
    B: float   # °C
    T0: float  # °C

    def as_tuple(self) -> Tuple[float, float, float]:
        return self.A, self.B, self.T0


def _finite(*values: float) -> bool:
    return bool(np.all(np.isfinite(values)))


def fit_vft(p1: Point, p2: Point, p3: Point) -> Optional[VFTParameters]:
    """Solve ``y = A + B/(T − T0)`` through three ``(T, y)`` points.

    Returns ``None`` when two log-viscosities coincide within ``FIT_TOL`` or
    when the points admit no finite solution.
    """
    (T1, y1), (T2, y2), (T3, y3) = p1, p2, p3

    if abs(y1 - y2) < FIT_TOL or abs(y2 - y3) < FIT_TOL:
        logger.debug("no VFT fit: log-viscosities not separated (%g, %g, %g)", y1, y2, y3)
        return None
    if T2 == T1:
        logger.debug("no VFT fit: T1 == T2 == %g", T1)
        return None

    R = (y1 - y2) / (y2 - y3)
    K = R * (T3 - T2) / (T2 - T1)
    if K == 1.0:
        logger.debug("no VFT fit: points are collinear in 1/(T-T0)")
        return None

    T0 = (T3 - K * T1) / (1.0 - K)
    if not _finite(T0) or T1 == T0:
        logger.debug("no VFT fit: T0=%g", T0)
        return None

    B = (y1 - y2) * (T1 - T0) * (T2 - T0) / (T2 - T1)
    A = y1 - B / (T1 - T0)
    if not _finite(A, B, T0):
        logger.debug("no VFT fit: non-finite parameters A=%g B=%g T0=%g", A, B, T0)
        return None
    return VFTParameters(A=float(A), B=float(B), T0=float(T0))


def _vft(T, A, B, T0):
    return A + B / (T - T0)


def fit_vft_least_squares(
    temperatures: Sequence[float],
    log_viscosities: Sequence[float],
) -> Optional[VFTParameters]:
    """Least-squares VFT through N ≥ 3 measured points.

    The three-point solution through the lowest, middle and highest
    temperature seeds the optimizer.
    """
    T = np.asarray(temperatures, dtype=float)
    y = np.asarray(log_viscosities, dtype=float)
    if T.shape != y.shape or T.ndim != 1:
        raise ValueError("temperatures and log_viscosities must be 1-D and the same length")
    if T.size < 3:
        raise ValueError("at least three points are needed for a VFT fit")

    order = np.argsort(T)
    T, y = T[order], y[order]
    mid = T.size // 2
    seed = fit_vft((T[0], y[0]), (T[mid], y[mid]), (T[-1], y[-1]))
    if seed is None:
        return None
    if T.size == 3:
        return seed

    try:
        popt, _ = curve_fit(_vft, T, y, p0=seed.as_tuple(), maxfev=10000)
    except RuntimeError as e:
        logger.warning("VFT least-squares did not converge: %s", e)
        return None
    if not _finite(*popt):
        return None
    return VFTParameters(*(float(p) for p in popt))


def eval_viscosity_at_temp(params: VFTParameters, T: float) -> Optional[float]:
    """log10 η at ``T`` (°C); ``None`` at the pole or below ``T0``."""
    if not _finite(T):
        return None
    if abs(T - params.T0) < POLE_TOL or T < params.T0:
        return None
    return params.A + params.B / (T - params.T0)


def eval_temp_at_viscosity(params: VFTParameters, log_visc: float) -> Optional[float]:
    """Temperature (°C) at ``log10 η = log_visc``; ``None`` near the asymptote ``A``."""
    if not _finite(log_visc):
        return None
    if abs(log_visc - params.A) < ASYMPTOTE_TOL:
        return None
    return params.T0 + params.B / (log_visc - params.A)


def glass_transition_temp(params: VFTParameters) -> Optional[float]:
    return eval_temp_at_viscosity(params, LOG_VISC_TG)


def strain_point_temp(params: VFTParameters) -> Optional[float]:
    return eval_temp_at_viscosity(params, LOG_VISC_STRAIN)


def sample_curve(
    params: VFTParameters,
    t_min: float = 800.0,
    t_max: float = 1700.0,
    step: float = 10.0,
    window: Tuple[float, float] = (-2.0, 15.0),
) -> Tuple[np.ndarray, np.ndarray]:
    """Temperatures and log η along a sweep, for plotting.

    Points at or below ``T0`` and points with log η outside the open
    ``window`` are dropped.
    """
    if step <= 0.0:
        raise ValueError("step must be positive")
    T = np.arange(t_min, t_max + 0.5 * step, step, dtype=float)
    T = T[T > params.T0]
    y = params.A + params.B / (T - params.T0)
    keep = (y > window[0]) & (y < window[1])
    return T[keep], y[keep]
