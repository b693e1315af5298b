from __future__ import annotations
from typing import Final

GRAVITY: Final[float] = 9.81          # m s⁻²
PA_PER_BAR: Final[float] = 1.0e5      # Pa
MM_PER_M: Final[float] = 1000.0
SECONDS_PER_HOUR: Final[float] = 3600.0


def mm_to_m(length_mm: float) -> float:
    return length_mm / MM_PER_M


def head_to_pa(head_mm: float, density: float) -> float:
    """Hydrostatic pressure of a fluid column: ΔP = ρ g h (Pa)."""
    return density * GRAVITY * mm_to_m(head_mm)


def bar_to_pa(bar: float) -> float:
    return bar * PA_PER_BAR


def to_kg_per_hr(volume_flow: float, density: float) -> float:
    """m³ s⁻¹ → kg hr⁻¹."""
    return volume_flow * density * SECONDS_PER_HOUR
