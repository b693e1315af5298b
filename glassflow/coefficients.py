"""
Regression coefficients for iso-viscosity temperatures (°C) of oxide melts.

Keys are the iso-viscosity levels as log10(η / Pa s); each maps a term to its
coefficient. Term syntax: ``Constant``, an oxide symbol, ``oxide^n`` or a
product ``oxide1*oxide2[*oxide3]``. Oxide amounts are in mole-percent.

The numbers are an illustrative table with the right term structure and
plausible magnitudes, not a calibrated fit to measured melts. Pass a fitted
table to ``ViscosityModel(table)`` or ``load_model(table)`` for real work.
"""
from __future__ import annotations
from typing import Dict, Final

VISCOSITY_MODEL: Final[Dict[str, Dict[str, float]]] = {
    # working point
    "1.5": {
        "Constant": 180.0,
        "SiO2": 17.2,
        "B2O3": 8.4,
        "Al2O3": 21.5,
        "Na2O": -6.4,
        "K2O": -2.9,
        "Li2O": -11.8,
        "MgO": 6.2,
        "CaO": 3.9,
        "BaO": 2.1,
        "SrO": 3.0,
        "ZnO": 4.4,
        "PbO": -4.7,
        "ZrO2": 24.6,
        "TiO2": 9.3,
        "Fe2O3": 5.5,
        "P2O5": 19.0,
        "B2O3^2": -0.062,
        "Na2O^2": -0.11,
        "K2O^2": -0.07,
        "B2O3*Na2O": 0.31,
        "B2O3*K2O": 0.24,
        "B2O3*Li2O": 0.38,
        "Al2O3*Na2O": 0.35,
        "Al2O3*MgO": -0.28,
        "Al2O3*CaO": -0.42,
        "Al2O3*Li2O": 0.19,
        "Al2O3*Na2O*CaO": 0.0008,
    },
    # softening point
    "6.6": {
        "Constant": 95.0,
        "SiO2": 8.9,
        "B2O3": 3.1,
        "Al2O3": 12.4,
        "Na2O": -4.1,
        "K2O": -1.6,
        "Li2O": -7.9,
        "MgO": 4.8,
        "CaO": 3.6,
        "BaO": 1.2,
        "SrO": 2.0,
        "ZnO": 2.2,
        "PbO": -3.3,
        "ZrO2": 14.2,
        "TiO2": 4.1,
        "Fe2O3": 2.6,
        "P2O5": 7.4,
        "B2O3^2": -0.021,
        "Na2O^2": -0.035,
        "K2O^2": -0.022,
        "B2O3*Na2O": 0.17,
        "B2O3*K2O": 0.12,
        "B2O3*Li2O": 0.21,
        "Al2O3*Na2O": 0.21,
        "Al2O3*MgO": -0.12,
        "Al2O3*CaO": -0.18,
        "Al2O3*Li2O": 0.09,
        "Al2O3*Na2O*CaO": 0.0005,
    },
    # annealing point
    "12": {
        "Constant": 120.0,
        "SiO2": 6.1,
        "B2O3": 2.3,
        "Al2O3": 9.8,
        "Na2O": -3.2,
        "K2O": -1.1,
        "Li2O": -5.6,
        "MgO": 4.1,
        "CaO": 3.4,
        "BaO": 1.0,
        "SrO": 1.7,
        "ZnO": 1.8,
        "PbO": -2.6,
        "ZrO2": 10.9,
        "TiO2": 2.9,
        "Fe2O3": 1.9,
        "P2O5": 4.8,
        "B2O3^2": -0.014,
        "Na2O^2": -0.02,
        "K2O^2": -0.015,
        "B2O3*Na2O": 0.13,
        "B2O3*K2O": 0.09,
        "B2O3*Li2O": 0.15,
        "Al2O3*Na2O": 0.14,
        "Al2O3*MgO": -0.08,
        "Al2O3*CaO": -0.12,
        "Al2O3*Li2O": 0.06,
        "Al2O3*Na2O*CaO": 0.0003,
    },
}
