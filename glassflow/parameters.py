"""
Dataclass containers for the duct-flow inputs.

Nothing here raises on non-physical numbers: a zero or negative dimension is
a legitimate "not yet computable" state and the flow solver maps it to the
zero result.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union

import numpy as np

from .utils import bar_to_pa, head_to_pa, mm_to_m


def _positive(*values: float) -> bool:
    return all(np.isfinite(v) and v > 0.0 for v in values)


# ---------------------------------------------------------------
# Fluid
# ---------------------------------------------------------------
@dataclass(frozen=True)
class FluidProperties:
    density:   float = 2500.0   # kg m⁻³
    viscosity: float = 1000.0   # Pa s

    @property
    def is_valid(self) -> bool:
        return _positive(self.density, self.viscosity)


# ---------------------------------------------------------------
# Duct cross-sections (all lengths in mm at the boundary)
# ---------------------------------------------------------------
@dataclass(frozen=True)
class Circle:
    diameter_mm: float

    @property
    def is_valid(self) -> bool:
        return _positive(self.diameter_mm)

    @property
    def radius_m(self) -> float:
        return mm_to_m(self.diameter_mm / 2.0)

    @property
    def area_m2(self) -> float:
        return float(np.pi * self.radius_m ** 2) if self.is_valid else 0.0


@dataclass(frozen=True)
class Rectangle:
    width_mm:  float
    height_mm: float

    @property
    def is_valid(self) -> bool:
        return _positive(self.width_mm, self.height_mm)

    @property
    def sides_m(self) -> tuple[float, float]:
        """(long, short) side in metres, independent of argument order."""
        w, h = mm_to_m(self.width_mm), mm_to_m(self.height_mm)
        return max(w, h), min(w, h)

    @property
    def area_m2(self) -> float:
        if not self.is_valid:
            return 0.0
        a, b = self.sides_m
        return a * b


@dataclass(frozen=True)
class Ellipse:
    major_mm: float   # full axis
    minor_mm: float   # full axis

    @property
    def is_valid(self) -> bool:
        return _positive(self.major_mm, self.minor_mm)

    @property
    def semi_axes_m(self) -> tuple[float, float]:
        return mm_to_m(self.major_mm / 2.0), mm_to_m(self.minor_mm / 2.0)

    @property
    def area_m2(self) -> float:
        if not self.is_valid:
            return 0.0
        a, b = self.semi_axes_m
        return float(np.pi * a * b)


@dataclass(frozen=True)
class Annulus:
    outer_mm: float   # outer diameter
    inner_mm: float   # inner diameter, 0 allowed

    @property
    def is_valid(self) -> bool:
        return (_positive(self.outer_mm)
                and np.isfinite(self.inner_mm)
                and 0.0 <= self.inner_mm < self.outer_mm)

    @property
    def radii_m(self) -> tuple[float, float]:
        return mm_to_m(self.outer_mm / 2.0), mm_to_m(self.inner_mm / 2.0)

    @property
    def area_m2(self) -> float:
        if not self.is_valid:
            return 0.0
        R, r = self.radii_m
        return float(np.pi * (R ** 2 - r ** 2))


DuctGeometry = Union[Circle, Rectangle, Ellipse, Annulus]


# ---------------------------------------------------------------
# Driving pressure
# ---------------------------------------------------------------
@dataclass(frozen=True)
class Gravity:
    head_mm: float   # height of the fluid column above the outlet

    def delta_p(self, density: float) -> float:
        return head_to_pa(self.head_mm, density)


@dataclass(frozen=True)
class Applied:
    bar: float       # gauge pressure over the duct

    def delta_p(self, density: float) -> float:
        return bar_to_pa(self.bar)


DrivingPressure = Union[Gravity, Applied]
