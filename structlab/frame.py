# structlab/frame.py
"""
PORTAL FRAME: APPROXIMATE BENDING MOMENTS
=========================================

            H_load →  C ───────┬─────── D
                      │        ↓ V_load │
                      │                 │  height H
                      │                 │
                      A                 B
                     ▀▀▀      span L   ▀▀▀   (fixed bases)

This is a hand-method shortcut, not a stiffness solution:

1. Sway (lateral load): antisymmetric bending, points of contraflexure at
   column mid-height and beam midspan, each column carrying H_load/2:

       M_sway = (H_load / 2) · (H / 2)
       column: m(y) = M_sway · (1 - 2y/H)          y from base
       beam:   m(x) = -M_sway · (1 - 2x/L)         x from C

2. Gravity (central point load): the simple-beam moment V·L/4 is reduced
   at the joints by a fixed fraction of V·L/8:

       M_joint = 0.7 · V·L/8                        (hogging at C and D)
       beam:   m(x) = (V/2)·x - M_joint             x < L/2
               m(x) = (V/2)·(L - x) - M_joint       x >= L/2
       midspan sagging = V·L/4 - M_joint

The combined beam field is the sum of both parts. Columns carry sway only.
"""

from dataclasses import dataclass
from typing import List

import numpy as np
from loguru import logger

from .config import CONFIG, EngineConfig
from .diagrams import FieldSample, peak_abs, sample_function
from .errors import require_non_negative, require_positive
from .model import Reaction, ReactionSet


@dataclass(frozen=True)
class FrameLoadCase:
    lateral_load: float     # H_load (kN) at the top of column A-C
    gravity_load: float     # V_load (kN) at beam midspan
    height: float           # H (m)
    span: float             # L (m)


@dataclass
class FrameResult:
    case: FrameLoadCase
    left_column: List[FieldSample]      # A -> C, position = height above base
    beam: List[FieldSample]             # C -> D, position = distance from C
    right_column: List[FieldSample]     # B -> D, position = height above base
    sway_moment: float                  # M_sway
    joint_gravity_moment: float         # M_joint (hogging magnitude)
    midspan_gravity_moment: float       # V·L/4 - M_joint
    reactions: ReactionSet              # approximate, 'A' and 'B'
    max_moment: float


def solve_frame(case: FrameLoadCase, config: EngineConfig = CONFIG) -> FrameResult:
    """
    Approximate moment fields for a fixed-base portal frame.

    Raises:
    -------
    InvalidGeometry : height or span <= 0
    InvalidRange : negative loads
    """
    H = require_positive("height", case.height)
    L = require_positive("span", case.span)
    h_load = require_non_negative("lateral_load", case.lateral_load)
    v_load = require_non_negative("gravity_load", case.gravity_load)

    m_joint = (v_load * L / 8.0) * config.frame_gravity_joint_fraction
    m_mid = v_load * L / 4.0 - m_joint
    m_sway = (h_load / 2.0) * (H / 2.0)

    def column(y):
        return m_sway * (1.0 - 2.0 * y / H)

    def beam(x):
        sway = -m_sway * (1.0 - 2.0 * x / L)
        grav = np.where(x < L / 2.0, (v_load / 2.0) * x, (v_load / 2.0) * (L - x)) - m_joint
        return sway + grav

    left = sample_function(column, 0.0, H, config.frame_column_samples)
    right = sample_function(column, 0.0, H, config.frame_column_samples)
    top = sample_function(beam, 0.0, L, config.frame_beam_samples)

    # Portal-method reactions: equal base shears, base moments M_sway, the rest of
    # the overturning moment H_load·H carried as a couple in the columns
    overturn = h_load * H / (2.0 * L)
    reactions = {
        'A': Reaction(vertical=v_load / 2.0 - overturn, horizontal=-h_load / 2.0, moment=m_sway),
        'B': Reaction(vertical=v_load / 2.0 + overturn, horizontal=-h_load / 2.0, moment=m_sway),
    }

    max_moment = max(peak_abs(left), peak_abs(top), peak_abs(right))
    logger.debug(
        "frame H={} L={} Hload={} Vload={}: Msway={:.3f} Mjoint={:.3f} Mmid={:.3f}",
        H, L, h_load, v_load, m_sway, m_joint, m_mid,
    )
    return FrameResult(
        case=case,
        left_column=left,
        beam=top,
        right_column=right,
        sway_moment=m_sway,
        joint_gravity_moment=m_joint,
        midspan_gravity_moment=m_mid,
        reactions=reactions,
        max_moment=max_moment,
    )
