"""Laminar duct flow and glass-viscosity (VFT) calculation package."""
from .parameters import FluidProperties, Circle, Rectangle, Ellipse, Annulus, Gravity, Applied
from .flow import FlowResult, solve_flow
from .oxides import Composition, normalize_composition
from .regression import predict_iso_temp
from .vft import VFTParameters, fit_vft, eval_viscosity_at_temp, eval_temp_at_viscosity
from .model import ViscosityModel, ViscosityProfile

__all__ = [
    "FluidProperties",
    "Circle",
    "Rectangle",
    "Ellipse",
    "Annulus",
    "Gravity",
    "Applied",
    "FlowResult",
    "solve_flow",
    "Composition",
    "normalize_composition",
    "predict_iso_temp",
    "VFTParameters",
    "fit_vft",
    "eval_viscosity_at_temp",
    "eval_temp_at_viscosity",
    "ViscosityModel",
    "ViscosityProfile",
]
__version__ = "0.1.0"
