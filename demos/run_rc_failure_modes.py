# File: demos/run_rc_failure_modes.py
"""
DEMO: REINFORCED CONCRETE FAILURE MODES
=======================================

Sweeps the tension steel area of a 250 × 500 mm beam (fc = 30 MPa,
fy = 400 MPa) from below the minimum to well above the balanced area and
reports how the failure mode, neutral axis and nominal moment change.

ENGINEERING SIGNIFICANCE:
-------------------------
Adding steel increases Mn, but past As_bal the extra capacity comes with a
brittle failure: the concrete crushes with no yielding and no warning.
Codes therefore cap the steel below the balanced amount.
"""

import os
import sys
from pathlib import Path

import pandas as pd

sys.path.insert(0, str(Path(__file__).parent.parent))

from structlab.concrete import RCSection, analyze_rc_beam
from structlab.viz import plot_rc_strain


def main():
    os.makedirs("artifacts", exist_ok=True)

    base = dict(fc=30.0, fy=400.0, b=250.0, h=500.0)
    ref = analyze_rc_beam(RCSection(As=1000.0, **base))

    print("=" * 70)
    print("RC BEAM FAILURE MODES  (b = 250, h = 500, fc = 30, fy = 400)")
    print("=" * 70)
    print(f"  h0     = {ref.h0:.0f} mm")
    print(f"  ξb     = {ref.xi_b:.4f}")
    print(f"  As_bal = {ref.As_bal:.0f} mm²")
    print(f"  As_min = {ref.As_min:.0f} mm²")
    print()

    rows = []
    for As in [200.0, 500.0, 1000.0, 2000.0, 4000.0, 0.97 * ref.As_bal, 1.5 * ref.As_bal]:
        s = analyze_rc_beam(RCSection(As=As, **base))
        rows.append({
            'As': As,
            'mode': s.mode.value,
            'x': s.x,
            'xi': s.xi,
            'eps_s': s.eps_s,
            'sigma_s': s.sigma_s,
            'Mn_kNm': s.Mn_kNm,
        })
        plot_rc_strain(s, outpath=f"artifacts/rc_strain_{int(As)}.png")

    df = pd.DataFrame(rows)
    print(df.to_string(index=False, float_format=lambda v: f"{v:.4g}"))
    df.to_csv("artifacts/rc_failure_modes.csv", index=False)

    print()
    print(f"As = 1000 mm²: {ref.description}")
    print("\nSaved artifacts/rc_failure_modes.csv and strain plots")


if __name__ == "__main__":
    main()
