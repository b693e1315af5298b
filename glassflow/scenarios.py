from __future__ import annotations
from .parameters import Applied, Circle, FluidProperties, Gravity, Rectangle

# Stock glasses of the flow calculator (viscosity at the working temperature)
FLUID_PRESETS = {
    "soda": FluidProperties(density=2500.0, viscosity=1000.0),
    "boro": FluidProperties(density=2230.0, viscosity=1000.0),
    "lead": FluidProperties(density=3000.0, viscosity=1000.0),
}


def glass_fluid(name: str) -> FluidProperties:
    try:
        return FLUID_PRESETS[name]
    except KeyError:
        raise ValueError(f"unknown glass preset {name!r}; choose from {sorted(FLUID_PRESETS)}") from None


def soda_lime():
    """Float-glass-like soda-lime silicate, mol %."""
    return {"SiO2": 70.0, "Na2O": 15.0, "CaO": 10.0, "Al2O3": 5.0}


def borosilicate():
    """Pyrex-like borosilicate, wt %."""
    return {"SiO2": 80.6, "B2O3": 13.0, "Na2O": 4.0, "Al2O3": 2.4}


def lead_crystal():
    """Lead crystal, wt %."""
    return {"SiO2": 56.0, "PbO": 29.0, "K2O": 13.0, "Na2O": 2.0}


def orifice_drain():
    """Gravity drain through a 10 mm bushing tip, 100 mm long, 500 mm head."""
    return glass_fluid("soda"), Circle(diameter_mm=10.0), Gravity(head_mm=500.0), 100.0


def slot_feeder():
    """Pressure-fed 20 × 4 mm slot, 50 mm long, 0.5 bar."""
    return glass_fluid("boro"), Rectangle(width_mm=20.0, height_mm=4.0), Applied(bar=0.5), 50.0
