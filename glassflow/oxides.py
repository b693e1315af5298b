"""
Oxide catalog, molar masses and composition normalization.

Compositions are stored as a fixed-size array indexed by :data:`OXIDES`, so a
lookup can never silently miss an oxide; anything outside the catalog is
reported when the raw input is normalized.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, Final, Mapping, Tuple

import numpy as np

__all__ = [
    "OXIDES",
    "OXIDE_INDEX",
    "MOLAR_MASS",
    "DEFAULT_MOLAR_MASS",
    "Composition",
    "molar_mass",
    "normalize_composition",
    "rescale_to_100",
    "interaction_terms",
]

logger = logging.getLogger(__name__)

OXIDES: Final[Tuple[str, ...]] = (
    'SiO2', 'B2O3', 'Al2O3', 'Na2O', 'K2O', 'MgO', 'CaO', 'Li2O', 'PbO', 'ZrO2',
    'BaO', 'SrO', 'TiO2', 'Fe2O3', 'ZnO', 'CeO2', 'MnO2', 'SO3', 'As2O3', 'Sb2O3',
    'F', 'Se', 'CdO', 'P2O5', 'NiO', 'Bi2O3', 'Cr2O3', 'Co3O4', 'La2O3', 'Ga2O3',
    'Gd2O3', 'I', 'MoO3', 'Nb2O5', 'Nd2O3', 'PdO', 'Rb2O', 'ReO2', 'RuO2', 'Sm2O3',
    'SnO2', 'TeO2', 'Pr2O3', 'Rh2O3', 'WO3', 'V2O5', 'Y2O3', 'CuO', 'Eu2O3', 'Cs2O',
    'Cl', 'Ag2O', 'UO2', 'ThO2',
)
OXIDE_INDEX: Final[Dict[str, int]] = {name: i for i, name in enumerate(OXIDES)}

# g mol⁻¹
MOLAR_MASS: Final[Dict[str, float]] = {
    'SiO2': 60.08, 'B2O3': 69.62, 'Al2O3': 101.96, 'Na2O': 61.98, 'K2O': 94.20,
    'MgO': 40.30, 'CaO': 56.08, 'Li2O': 29.88, 'PbO': 223.20, 'ZrO2': 123.22,
    'BaO': 153.33, 'SrO': 103.62, 'TiO2': 79.87, 'Fe2O3': 159.69, 'ZnO': 81.38,
    'CeO2': 172.11, 'MnO2': 86.94, 'SO3': 80.06, 'As2O3': 197.84, 'Sb2O3': 291.50,
    'F': 19.00, 'Se': 78.96, 'CdO': 128.41, 'P2O5': 141.94, 'NiO': 74.69,
    'Bi2O3': 465.96, 'Cr2O3': 151.99, 'Co3O4': 240.80, 'La2O3': 325.81, 'Ga2O3': 187.44,
    'Gd2O3': 362.50, 'I': 126.90, 'MoO3': 143.94, 'Nb2O5': 265.81, 'Nd2O3': 336.48,
    'PdO': 122.42, 'Rb2O': 186.94, 'ReO2': 218.21, 'RuO2': 133.07, 'Sm2O3': 348.72,
    'SnO2': 150.71, 'TeO2': 159.60, 'Pr2O3': 329.81, 'Rh2O3': 253.81, 'WO3': 231.84,
    'V2O5': 181.88, 'Y2O3': 225.81, 'CuO': 79.55, 'Eu2O3': 351.93, 'Cs2O': 281.81,
    'Cl': 35.45, 'Ag2O': 231.74, 'UO2': 270.03, 'ThO2': 264.04,
}
DEFAULT_MOLAR_MASS: Final[float] = 100.0

# Named cross terms precomputed for display; the regression evaluator derives
# every term it needs from the oxide values itself.
_INTERACTIONS: Final[Tuple[Tuple[str, ...], ...]] = (
    ('B2O3', 'Na2O'),
    ('B2O3', 'K2O'),
    ('B2O3', 'Li2O'),
    ('Al2O3', 'Na2O'),
    ('Al2O3', 'MgO'),
    ('Al2O3', 'CaO'),
    ('Al2O3', 'Li2O'),
)


def molar_mass(oxide: str) -> float:
    return MOLAR_MASS.get(oxide, DEFAULT_MOLAR_MASS)


@dataclass(frozen=True, eq=False)
class Composition:
    """Mole-percent composition over the fixed oxide catalog."""

    values: np.ndarray = field(default_factory=lambda: np.zeros(len(OXIDES)))

    def __post_init__(self):  # type: ignore[override]
        arr = np.asarray(self.values, dtype=float)
        if arr.shape != (len(OXIDES),):
            raise ValueError(f"composition needs {len(OXIDES)} entries, got shape {arr.shape}")
        arr = arr.copy()
        arr.setflags(write=False)
        object.__setattr__(self, "values", arr)

    @classmethod
    def from_mapping(cls, comp: Mapping[str, float]) -> "Composition":
        """Catalog oxides are copied as-is; other keys (e.g. ``'B2O3^2'``) and
        negative or non-finite values are ignored."""
        arr = np.zeros(len(OXIDES))
        for name, val in _clean(comp).items():
            i = OXIDE_INDEX.get(name)
            if i is not None:
                arr[i] = val
        return cls(arr)

    def __getitem__(self, oxide: str) -> float:
        i = OXIDE_INDEX.get(oxide)
        return 0.0 if i is None else float(self.values[i])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Composition):
            return NotImplemented
        return bool(np.array_equal(self.values, other.values))

    __hash__ = None  # type: ignore[assignment]

    @property
    def total(self) -> float:
        return float(self.values.sum())

    def as_dict(self, nonzero: bool = True) -> Dict[str, float]:
        return {name: float(v) for name, v in zip(OXIDES, self.values) if v != 0.0 or not nonzero}

    def with_interaction_terms(self) -> Dict[str, float]:
        out = self.as_dict()
        out.update(interaction_terms(self))
        return out


def interaction_terms(comp: Composition) -> Dict[str, float]:
    """Synthetic regression inputs: the constant, ``B2O3^2`` and the pair products."""
    terms = {"Constant": 1.0, "B2O3^2": comp["B2O3"] ** 2}
    for pair in _INTERACTIONS:
        terms["*".join(pair)] = float(np.prod([comp[o] for o in pair]))
    return terms


def _clean(raw: Mapping[str, float]) -> Dict[str, float]:
    # blank / negative / NaN fields contribute nothing
    return {k: float(v) for k, v in raw.items() if np.isfinite(v) and v > 0.0}


def rescale_to_100(raw: Mapping[str, float]) -> Dict[str, float]:
    """Rescale raw values so they sum to 100; unchanged when the sum is zero."""
    total = sum(v for v in raw.values() if np.isfinite(v))
    if total == 0.0:
        return dict(raw)
    return {k: (v / total) * 100.0 if np.isfinite(v) else 0.0 for k, v in raw.items()}


def normalize_composition(raw: Mapping[str, float], unit: str = "mol") -> Composition:
    """Convert a raw oxide map to mole-percent summing to 100.

    Parameters
    ----------
    raw
        Oxide symbol → percentage.
    unit
        ``"wt"`` (weight-percent, converted via molar masses) or ``"mol"``.
    """
    if unit not in ("wt", "mol"):
        raise ValueError(f"unit must be 'wt' or 'mol', got {unit!r}")

    clean = _clean(raw)
    if unit == "wt":
        amounts = {k: v / molar_mass(k) for k, v in clean.items()}
    else:
        amounts = clean

    total = sum(amounts.values())
    if total <= 0.0:
        return Composition()

    unknown = sorted(k for k in amounts if k not in OXIDE_INDEX)
    if unknown:
        logger.warning("dropping oxides outside the catalog: %s", ", ".join(unknown))

    arr = np.zeros(len(OXIDES))
    for name, amount in amounts.items():
        i = OXIDE_INDEX.get(name)
        if i is not None:
            arr[i] = amount / total * 100.0
    return Composition(arr)
