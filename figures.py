#!/usr/bin/env python3
"""
Regenerate the flow and viscosity figures, or print a text report.

Usage:
  python figures.py                 # build all figures
  python figures.py --only visc     # build just one figure
  python figures.py --list          # list figure names
  python figures.py --report        # print results for the stock glasses
"""
from __future__ import annotations
import argparse
import logging
from pathlib import Path
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from glassflow.flow import solve_flow
from glassflow.logging_config import setup_logging
from glassflow.model import ViscosityModel
from glassflow.parameters import Annulus, Circle, Ellipse, Rectangle
from glassflow.plotting import figure_flow_vs_head, figure_viscosity
from glassflow.scenarios import (borosilicate, glass_fluid, lead_crystal, orifice_drain,
                                 slot_feeder, soda_lime)

FIGDIR = Path("figures")
logger = logging.getLogger("glassflow.figures")


# -----------------------
# Figure – VFT curves of the stock compositions
# -----------------------
def fig_viscosity(outfile: Path | None = None):
    mdl = ViscosityModel()
    profiles = [
        mdl.predict(soda_lime(), unit="mol"),
        mdl.predict(borosilicate(), unit="wt"),
        mdl.predict(lead_crystal(), unit="wt"),
    ]
    fig = figure_viscosity(profiles, labels=["soda-lime", "borosilicate", "lead crystal"])
    _save(fig, outfile or FIGDIR / "viscosity_curves.png")


# -----------------------
# Figure – flow vs head for equal-area-ish ducts
# -----------------------
def fig_flow(outfile: Path | None = None):
    geoms = [
        Circle(diameter_mm=10.0),
        Rectangle(width_mm=12.0, height_mm=6.5),
        Ellipse(major_mm=12.0, minor_mm=8.3),
        Annulus(outer_mm=12.0, inner_mm=6.6),
    ]
    fig = figure_flow_vs_head(glass_fluid("soda"), geoms, length_mm=100.0,
                              heads_mm=range(0, 1001, 50))
    _save(fig, outfile or FIGDIR / "flow_vs_head.png")


def report():
    for name, case in (("orifice drain", orifice_drain()), ("slot feeder", slot_feeder())):
        res = solve_flow(*case)
        print(f"{name:14s} {res.mass_flow_kg_per_hr:10.4f} kg/hr  {res.velocity_m_per_s:.4e} m/s")

    mdl = ViscosityModel()
    for name, raw, unit in (("soda-lime", soda_lime(), "mol"),
                            ("borosilicate", borosilicate(), "wt"),
                            ("lead crystal", lead_crystal(), "wt")):
        prof = mdl.predict(raw, unit=unit)
        temps = "  ".join(f"T{s}={t:.1f}" for s, t in prof.iso_temps.items())
        if prof.vft is None:
            print(f"{name:14s} {temps}  (no VFT fit)")
            continue
        tg = "---" if prof.tg is None else f"{prof.tg:.1f}"
        ts = "---" if prof.tstrain is None else f"{prof.tstrain:.1f}"
        print(f"{name:14s} {temps}  A={prof.vft.A:.3f} B={prof.vft.B:.1f} "
              f"T0={prof.vft.T0:.1f}  Tg={tg}  Tstrain={ts}")


# -----------------------
# Helpers / CLI
# -----------------------
def _save(fig, path: Path):
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=300, bbox_inches="tight")
    plt.close(fig)
    logger.info("wrote %s", path)

FIG_FUNCS = {
    "visc": fig_viscosity,
    "flow": fig_flow,
}

def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--only", choices=sorted(FIG_FUNCS), help="build a single figure")
    parser.add_argument("--list", action="store_true", help="list figure names")
    parser.add_argument("--report", action="store_true", help="print results instead of plotting")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    if args.list:
        print("\n".join(FIG_FUNCS))
        return
    if args.report:
        report()
        return
    for name in ([args.only] if args.only else FIG_FUNCS):
        FIG_FUNCS[name]()

if __name__ == "__main__":
    main()
