from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, Final, Mapping, Optional, Tuple

from .oxides import Composition, normalize_composition
from .regression import RegressionModel, default_model, load_model
from .vft import (LOG_VISC_ANNEALING, LOG_VISC_SOFTENING, LOG_VISC_WORKING,
                  VFTParameters, eval_temp_at_viscosity, eval_viscosity_at_temp,
                  fit_vft, glass_transition_temp, strain_point_temp)

__all__ = ["ViscosityProfile", "ViscosityModel", "FIT_SCALES"]

logger = logging.getLogger(__name__)

# (scale id, log10 η) pairs the curve is fitted through
FIT_SCALES: Final[Tuple[Tuple[str, float], ...]] = (
    ("1.5", LOG_VISC_WORKING),
    ("6.6", LOG_VISC_SOFTENING),
    ("12", LOG_VISC_ANNEALING),
)


@dataclass(frozen=True)
class ViscosityProfile:
    composition: Composition              # mol %
    iso_temps: Dict[str, float]           # scale id -> °C
    vft: Optional[VFTParameters]
    tg: Optional[float] = None            # °C at log η = 11.3
    tstrain: Optional[float] = None       # °C at log η = 14.5
    unit: str = "mol"

    @property
    def working_point(self) -> float:
        return self.iso_temps["1.5"]

    @property
    def softening_point(self) -> float:
        return self.iso_temps["6.6"]

    def viscosity_at(self, T: float) -> Optional[float]:
        """log10 η at ``T``; ``None`` if no curve could be fitted."""
        if self.vft is None:
            return None
        return eval_viscosity_at_temp(self.vft, T)

    def temperature_at(self, log_visc: float) -> Optional[float]:
        if self.vft is None:
            return None
        return eval_temp_at_viscosity(self.vft, log_visc)


class ViscosityModel:
    """
    Composition → iso-viscosity temperatures → VFT curve.

    The regression table is parsed once at construction and never mutated,
    so one instance can serve any number of callers. No fitted curve is kept
    on the instance; every call returns a fresh :class:`ViscosityProfile`.
    """

    def __init__(self, table: Mapping[str, Mapping[str, float]] | None = None) -> None:
        self.regression: RegressionModel = default_model() if table is None else load_model(table)
        missing = [s for s, _ in FIT_SCALES if s not in self.regression]
        if missing:
            raise ValueError(f"regression table lacks fit scales: {missing}")

    def iso_temps(self, comp: Composition) -> Dict[str, float]:
        return {scale: self.regression.predict(scale, comp) for scale in self.regression.scales}

    def fit(self, iso_temps: Mapping[str, float]) -> Optional[VFTParameters]:
        p1, p2, p3 = ((iso_temps[s], y) for s, y in FIT_SCALES)
        return fit_vft(p1, p2, p3)

    def predict(self, raw: Mapping[str, float], unit: str = "mol") -> ViscosityProfile:
        """Run the full pipeline for a raw composition in ``unit`` (``"wt"``/``"mol"``)."""
        comp = normalize_composition(raw, unit)
        temps = self.iso_temps(comp)
        vft = self.fit(temps)
        if vft is None:
            logger.info("no VFT curve for composition %s", comp.as_dict())
            return ViscosityProfile(comp, temps, None, unit=unit)
        return ViscosityProfile(
            composition=comp,
            iso_temps=temps,
            vft=vft,
            tg=glass_transition_temp(vft),
            tstrain=strain_point_temp(vft),
            unit=unit,
        )
