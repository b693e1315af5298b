"""
Polynomial regression of iso-viscosity temperatures on composition.

The string terms of :mod:`glassflow.coefficients` are parsed once into small
term objects holding catalog indices, so evaluating a scale is a loop over
pre-resolved array lookups.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Final, Mapping, Optional, Tuple, Union

import numpy as np

from .coefficients import VISCOSITY_MODEL
from .oxides import OXIDE_INDEX, Composition

__all__ = [
    "Constant",
    "Single",
    "Power",
    "Product",
    "Term",
    "RegressionModel",
    "parse_term",
    "load_model",
    "default_model",
    "predict_iso_temp",
]

logger = logging.getLogger(__name__)

CONSTANT_TERM: Final[str] = "Constant"
MAX_PRODUCT_ARITY: Final[int] = 3


@dataclass(frozen=True)
class Constant:
    def value(self, x: np.ndarray) -> float:
        return 1.0


@dataclass(frozen=True)
class Single:
    index: int

    def value(self, x: np.ndarray) -> float:
        return float(x[self.index])


@dataclass(frozen=True)
class Power:
    index: int
    exponent: int

    def value(self, x: np.ndarray) -> float:
        return float(x[self.index] ** self.exponent)


@dataclass(frozen=True)
class Product:
    indices: Tuple[int, ...]

    def value(self, x: np.ndarray) -> float:
        return float(np.prod(x[list(self.indices)]))


Term = Union[Constant, Single, Power, Product]


def _oxide_index(name: str, term: str) -> int:
    try:
        return OXIDE_INDEX[name]
    except KeyError:
        raise ValueError(f"term {term!r} references unknown oxide {name!r}") from None


def parse_term(term: str) -> Term:
    """``'Constant'`` | ``'Na2O'`` | ``'B2O3^2'`` | ``'Al2O3*Na2O[*CaO]'``."""
    term = term.strip()
    if term == CONSTANT_TERM:
        return Constant()
    if "*" in term:
        parts = term.split("*")
        if not 2 <= len(parts) <= MAX_PRODUCT_ARITY:
            raise ValueError(f"product term {term!r} must have 2..{MAX_PRODUCT_ARITY} factors")
        return Product(tuple(_oxide_index(p, term) for p in parts))
    if "^" in term:
        name, _, power = term.partition("^")
        try:
            exponent = int(power)
        except ValueError:
            raise ValueError(f"power term {term!r} needs an integer exponent") from None
        if exponent < 1:
            raise ValueError(f"power term {term!r} needs a positive exponent")
        return Power(_oxide_index(name, term), exponent)
    return Single(_oxide_index(term, term))


@dataclass(frozen=True)
class RegressionModel:
    scales: Dict[str, Tuple[Tuple[Term, float], ...]]

    def __contains__(self, scale: str) -> bool:
        return scale in self.scales

    def predict(self, scale: str, comp: Composition) -> float:
        try:
            terms = self.scales[scale]
        except KeyError:
            raise ValueError(f"unknown viscosity scale {scale!r}; "
                             f"available: {sorted(self.scales)}") from None
        x = comp.values
        return float(sum(coeff * term.value(x) for term, coeff in terms))


def load_model(table: Mapping[str, Mapping[str, float]]) -> RegressionModel:
    """Parse a ``{scale: {term: coefficient}}`` table."""
    scales = {
        str(scale): tuple((parse_term(term), float(coeff)) for term, coeff in terms.items())
        for scale, terms in table.items()
    }
    logger.debug("loaded regression model: %s",
                 ", ".join(f"{s} ({len(t)} terms)" for s, t in scales.items()))
    return RegressionModel(scales)


@lru_cache(maxsize=None)
def default_model() -> RegressionModel:
    """The bundled coefficient table, parsed on first use."""
    return load_model(VISCOSITY_MODEL)


def predict_iso_temp(
    scale: str,
    composition: Union[Composition, Mapping[str, float]],
    model: Optional[RegressionModel] = None,
) -> float:
    """Temperature (°C) at which the melt reaches ``log10 η = scale``.

    ``composition`` is mole-percent, as returned by
    :func:`~glassflow.oxides.normalize_composition`, or a plain mapping of
    oxide symbol → mole-percent (missing oxides count as zero).
    """
    if not isinstance(composition, Composition):
        composition = Composition.from_mapping(composition)
    return (model or default_model()).predict(scale, composition)
