# File: demos/run_beam_diagrams.py
"""
DEMO: BEAM SHEAR AND MOMENT DIAGRAMS
====================================

Solves the four beam cases (simple / cantilever × point / UDL) for the
default front-end values, prints the reactions and peaks next to the
textbook formulas, and writes an SFD/BMD figure for each case.

OUTPUT FILES:
-------------
    artifacts/beam_<type>_<load>.png     - Shear and moment diagrams
    artifacts/beam_<type>_<load>.csv     - Both fields, long format
"""

import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from structlab.beams import BeamLoadCase, solve_beam
from structlab.config import CONFIG
from structlab.diagrams import fields_to_dataframe
from structlab.logging_utils import configure_logging
from structlab.viz import plot_beam_diagrams


def expected_peaks(beam_type, load_type, L, P, a_ratio):
    """Closed-form peak |V| and |M| for comparison."""
    a = a_ratio * L
    if beam_type == 'simple':
        if load_type == 'point':
            return max(P * (L - a) / L, P * a / L), P * a * (L - a) / L
        return P * L / 2, P * L ** 2 / 8
    if load_type == 'point':
        return P, P * a
    return P * L, P * L ** 2 / 2


def main():
    configure_logging(level="INFO")
    os.makedirs("artifacts", exist_ok=True)

    defaults = CONFIG.defaults['beam']
    L, P, a_ratio = defaults['span'], defaults['load'], 0.3

    print("=" * 70)
    print(f"BEAM DIAGRAMS  (L = {L} m, load = {P}, a/L = {a_ratio})")
    print("=" * 70)

    for beam_type in ('simple', 'cantilever'):
        for load_type in ('point', 'udl'):
            case = BeamLoadCase(beam_type, load_type, L, P, a_ratio)
            res = solve_beam(case)
            v_exp, m_exp = expected_peaks(beam_type, load_type, L, P, a_ratio)

            print(f"\n{beam_type} + {load_type}")
            print("-" * 40)
            for name, r in res.reactions.items():
                print(f"  {name}: V = {r.vertical:8.2f} kN   M = {r.moment:8.2f} kN·m")
            print(f"  max |V| = {res.max_shear:8.2f}   (expected {v_exp:8.2f})")
            print(f"  max |M| = {res.max_moment:8.2f}   (expected {m_exp:8.2f})")

            stem = f"artifacts/beam_{beam_type}_{load_type}"
            plot_beam_diagrams(res, outpath=f"{stem}.png")
            fields_to_dataframe({"shear": res.shear, "moment": res.moment}).to_csv(f"{stem}.csv", index=False)
            print(f"  saved {stem}.png / .csv")


if __name__ == "__main__":
    main()
