# structlab/concrete.py
"""
REINFORCED CONCRETE BEAM: FLEXURAL FAILURE MODE
===============================================

Singly reinforced rectangular section at the ultimate limit state.

        ┌───────── b ─────────┐
        │▓▓▓▓▓▓▓▓▓▓▓▓▓▓▓▓▓▓▓▓▓│  ← compression block, depth β1·x
        │          x          │  ─ ─ neutral axis
   h    │                     │ h0
        │         ●  As       │  ← steel at effective depth h0 = h - cover
        └─────────────────────┘

KEY CONCEPTS:
-------------
- Concrete crushes at εcu = 0.0033.
- Steel yields at εy = fy / Es.
- Balanced section: both happen together, ξb = εcu / (εcu + εy) and
  As_bal = α1·fc·b·ξb·h0 / fy.
- Minimum steel: As_min = 0.002·b·h.

FAILURE MODES (checked in this order):
--------------------------------------
1. under-minimum    As < As_min          cracks and fails almost at once
2. under-reinforced As ≤ As_bal          steel yields first, ductile
   balanced         0.95·As_bal < As ≤ As_bal
3. over-reinforced  As > As_bal          concrete crushes before the steel
                                         yields, brittle

For 1 and 2 the steel is at yield and force equilibrium gives
x = fy·As / (α1·fc·b). For 3 the steel stress is Es·εs with strain
compatibility εs = εcu·(h0 - x)/x, and equilibrium becomes the quadratic

    α1·fc·b·x² + Es·εcu·As·x - Es·εcu·As·h0 = 0

whose positive root is the neutral-axis depth.

Nominal moment: Mn = α1·fc·b·x·(h0 - x/2).

Units: MPa and mm throughout, so Mn is in N·mm (``Mn_kNm`` for kN·m).
"""

from dataclasses import dataclass
from typing import List, Optional

import numpy as np
from loguru import logger

from .config import CONFIG, EngineConfig
from .diagrams import FieldSample, make_field
from .errors import InvalidGeometry, InvalidRange, require_positive
from .model import RCMode


DESCRIPTIONS = {
    RCMode.UNDER_REINFORCED: (
        "Ductile: the steel yields first. Large deflection, wide and tall "
        "cracks give clear warning before failure."
    ),
    RCMode.BALANCED: "Balanced: the steel yields as the concrete crushes.",
    RCMode.OVER_REINFORCED: (
        "Brittle: the concrete crushes before the steel yields. Small "
        "deflection, short fine cracks, no warning."
    ),
    RCMode.UNDER_MINIMUM: (
        "Under-reinforced below the minimum: fails as soon as it cracks, "
        "much like plain concrete."
    ),
}


@dataclass(frozen=True)
class RCSection:
    fc: float           # Concrete strength (MPa)
    fy: float           # Steel yield strength (MPa)
    b: float            # Width (mm)
    h: float            # Height (mm)
    As: float           # Tension steel area (mm²)
    cover: Optional[float] = None  # Centroid of steel to tension face (mm), config default if None


@dataclass
class RCState:
    section: RCSection
    mode: RCMode
    h0: float
    eps_y: float
    xi_b: float
    As_bal: float
    As_min: float
    x: float            # Neutral-axis depth (mm)
    xi: float           # x / h0
    block_depth: float  # β1·x
    eps_s: float        # Steel strain
    sigma_s: float      # Steel stress (MPa)
    Mn: float           # Nominal moment (N·mm)
    strain_profile: List[FieldSample]   # depth from top -> strain (compression -)

    @property
    def Mn_kNm(self) -> float:
        return self.Mn / 1e6

    @property
    def description(self) -> str:
        return DESCRIPTIONS[self.mode]


def balanced_steel_area(section: RCSection, config: EngineConfig = CONFIG) -> float:
    """As_bal for the section's materials and geometry."""
    h0 = section.h - _cover(section, config)
    eps_y = section.fy / config.rc_Es
    xi_b = config.rc_eps_cu / (config.rc_eps_cu + eps_y)
    return config.rc_alpha1 * section.fc * section.b * (xi_b * h0) / section.fy


def minimum_steel_area(section: RCSection, config: EngineConfig = CONFIG) -> float:
    return config.rc_min_ratio * section.b * section.h


def _cover(section: RCSection, config: EngineConfig) -> float:
    return config.rc_cover if section.cover is None else float(section.cover)


def _validate(section: RCSection, config: EngineConfig):
    b = require_positive("b", section.b)
    h = require_positive("h", section.h)
    cover = _cover(section, config)
    if cover < 0 or cover >= h:
        raise InvalidGeometry(f"cover must lie in [0, h={h}), got {cover}")
    fc = require_positive("fc", section.fc, error=InvalidRange)
    fy = require_positive("fy", section.fy, error=InvalidRange)
    As = require_positive("As", section.As, error=InvalidRange)
    return fc, fy, b, h, cover, As


def classify(As: float, As_min: float, As_bal: float, balanced_band: float = 0.95) -> RCMode:
    """Failure mode from the steel area alone; priority order is fixed."""
    if As < As_min:
        return RCMode.UNDER_MINIMUM
    if As <= As_bal:
        return RCMode.BALANCED if As > As_bal * balanced_band else RCMode.UNDER_REINFORCED
    return RCMode.OVER_REINFORCED


def analyze_rc_beam(section: RCSection, config: EngineConfig = CONFIG) -> RCState:
    """
    Failure mode, neutral axis, steel strain/stress and nominal moment.

    Raises:
    -------
    InvalidGeometry : b, h <= 0 or cover outside [0, h)
    InvalidRange : fc, fy, As <= 0, or a neutral axis outside (0, h0)
    """
    fc, fy, b, h, cover, As = _validate(section, config)
    Es = config.rc_Es
    eps_cu = config.rc_eps_cu
    alpha1 = config.rc_alpha1

    h0 = h - cover
    eps_y = fy / Es
    xi_b = eps_cu / (eps_cu + eps_y)
    As_bal = alpha1 * fc * b * (xi_b * h0) / fy
    As_min = config.rc_min_ratio * b * h

    mode = classify(As, As_min, As_bal, config.rc_balanced_band)

    if mode is RCMode.OVER_REINFORCED:
        A_quad = alpha1 * fc * b
        B_quad = Es * eps_cu * As
        C_quad = -Es * eps_cu * As * h0
        x = (-B_quad + np.sqrt(B_quad * B_quad - 4.0 * A_quad * C_quad)) / (2.0 * A_quad)
    else:
        x = fy * As / (alpha1 * fc * b)

    if not (0.0 < x < h0):
        raise InvalidRange(f"Neutral axis depth x={x:.3f} lies outside (0, h0={h0})")

    eps_s = eps_cu * (h0 - x) / x
    if mode is RCMode.UNDER_MINIMUM:
        sigma_s = min(eps_s * Es, fy)
    elif mode is RCMode.OVER_REINFORCED:
        sigma_s = eps_s * Es
    else:
        sigma_s = fy

    Mn = alpha1 * fc * b * x * (h0 - x / 2.0)

    # Plane sections: top fibre at -εcu, zero at x, steel at +εs
    strain_profile = make_field([0.0, x, h0], [-eps_cu, 0.0, eps_s])

    logger.debug(
        "rc fc={} fy={} b={} h={} As={}: {} x={:.2f} As_bal={:.1f} Mn={:.2f} kNm",
        fc, fy, b, h, As, mode.value, x, As_bal, Mn / 1e6,
    )
    return RCState(
        section=section,
        mode=mode,
        h0=h0,
        eps_y=eps_y,
        xi_b=xi_b,
        As_bal=As_bal,
        As_min=As_min,
        x=float(x),
        xi=float(x / h0),
        block_depth=float(config.rc_beta1 * x),
        eps_s=float(eps_s),
        sigma_s=float(sigma_s),
        Mn=float(Mn),
        strain_profile=strain_profile,
    )
