from __future__ import annotations
import numpy as np
import matplotlib.pyplot as plt

from .flow import solve_flow
from .parameters import Gravity
from .vft import LOG_VISC_TG, LOG_VISC_WORKING, sample_curve


def figure_viscosity(profiles, labels=None):
    """log η – T curves for one or more :class:`ViscosityProfile` objects.

    Profiles without a fitted curve are skipped.
    """
    labels = labels or [f"#{i + 1}" for i in range(len(profiles))]
    fig, ax = plt.subplots(1, 1, figsize=(5.0, 3.6))

    for i, (prof, label) in enumerate(zip(profiles, labels)):
        if prof.vft is None:
            continue
        T, y = sample_curve(prof.vft)
        style = "-" if i == 0 else "--"
        ax.plot(T, y, style, lw=2 if i == 0 else 1.2, label=label)
        ax.plot(list(prof.iso_temps.values()), [float(s) for s in prof.iso_temps], "ko", ms=3)

    ax.axhline(LOG_VISC_WORKING, ls=":", c="k", lw=1, alpha=0.5)
    ax.axhline(LOG_VISC_TG, ls=":", c="k", lw=1, alpha=0.5)
    ax.set_xlabel("Temperature [°C]")
    ax.set_ylabel(r"log$_{10}$ viscosity [Pa s]")
    ax.legend()
    fig.tight_layout()
    return fig


def figure_flow_vs_head(fluid, geometries, length_mm, heads_mm, labels=None):
    """Mass flow against gravity head for several duct cross-sections."""
    labels = labels or [type(g).__name__ for g in geometries]
    heads_mm = np.asarray(heads_mm, dtype=float)

    fig, ax = plt.subplots(1, 1, figsize=(5.0, 3.2))
    for geom, label in zip(geometries, labels):
        flows = [solve_flow(fluid, geom, Gravity(h), length_mm).mass_flow_kg_per_hr for h in heads_mm]
        ax.plot(heads_mm, flows, label=label)
    ax.set_xlabel("Head [mm]")
    ax.set_ylabel("Mass flow [kg/hr]")
    ax.legend()
    fig.tight_layout()
    return fig
