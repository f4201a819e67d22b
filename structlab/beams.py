# structlab/beams.py
"""
BEAM SOLVER: SHEAR AND MOMENT DIAGRAMS
======================================

Closed-form reactions and internal-force fields for the two textbook beams:

    Simply supported              Cantilever (fixed at x = 0)

        P                          ‖     P
        ↓                          ‖     ↓
    ▲───────────────○              ‖═════════════
    A               B              A

Each can carry a point load P (kN) at a = a_ratio·L, or a uniformly
distributed load q (kN/m) over the whole span. In both cases the load
magnitude is passed as ``load``.

SIGN CONVENTIONS:
-----------------
- Positive V: upward on the left face of a cut
- Positive M: sagging
- The cantilever fixing moment is reported with the same sign as the
  internal moment at the root, i.e. negative (hogging): Ma = -P·a.
"""

from dataclasses import dataclass
from typing import List, Union

import numpy as np
from loguru import logger

from .config import CONFIG, EngineConfig
from .diagrams import FieldSample, make_field, peak_abs, sample_function
from .errors import InvalidRange, require_in_range, require_non_negative, require_positive
from .model import BeamType, LoadType, Reaction, ReactionSet, as_tag


@dataclass(frozen=True)
class BeamLoadCase:
    beam_type: Union[BeamType, str]
    load_type: Union[LoadType, str]
    span: float                 # L (m)
    load: float                 # P (kN) or q (kN/m)
    position_ratio: float = 0.5  # a / L, ignored for UDL


@dataclass
class BeamResult:
    """Reactions, diagrams and peaks for one beam evaluation."""
    case: BeamLoadCase
    reactions: ReactionSet
    shear: List[FieldSample]
    moment: List[FieldSample]
    max_shear: float            # Peak |V|
    max_moment: float           # Peak |M|


def _validate(case: BeamLoadCase):
    beam_type = as_tag(BeamType, case.beam_type)
    load_type = as_tag(LoadType, case.load_type)
    L = require_positive("span", case.span)
    P = require_non_negative("load", case.load)
    a_ratio = require_in_range("position_ratio", case.position_ratio, 0.0, 1.0)
    return beam_type, load_type, L, P, a_ratio


def solve_beam(case: BeamLoadCase, config: EngineConfig = CONFIG) -> BeamResult:
    """
    Solve a simply supported or cantilever beam.

    Parameters:
    -----------
    case : BeamLoadCase
        Beam/load tags, span, load magnitude and load position ratio
    config : EngineConfig
        Sampling resolution for curved (UDL) moment fields

    Returns:
    --------
    BeamResult

    Raises:
    -------
    InvalidGeometry : span <= 0
    InvalidRange : position ratio outside [0, 1], negative load, unknown tag
    """
    beam_type, load_type, L, P, a_ratio = _validate(case)
    n = max(int(config.beam_samples), 100)

    if beam_type is BeamType.SIMPLE:
        if load_type is LoadType.POINT:
            a = a_ratio * L
            b = L - a
            rb = P * a / L
            ra = P - rb
            m_peak = P * a * b / L
            shear = make_field([0.0, a, a, L], [ra, ra, -rb, -rb])
            moment = make_field([0.0, a, L], [0.0, m_peak, 0.0])
            max_shear = max(ra, rb)
        else:
            ra = rb = P * L / 2.0
            shear = make_field([0.0, L], [ra, -rb])
            # Even n keeps a sample exactly at midspan
            n += n % 2
            moment = sample_function(lambda x: ra * x - P * x ** 2 / 2.0, 0.0, L, n)
            max_shear = ra
        reactions = {'A': Reaction(vertical=ra), 'B': Reaction(vertical=rb)}
    else:
        if load_type is LoadType.POINT:
            a = a_ratio * L
            ra = P
            ma = -P * a
            shear = make_field([0.0, a, a, L], [P, P, 0.0, 0.0])
            moment = make_field([0.0, a, L], [ma, 0.0, 0.0])
        else:
            ra = P * L
            ma = -P * L ** 2 / 2.0
            shear = make_field([0.0, L], [ra, 0.0])
            moment = sample_function(lambda x: -P * (L - x) ** 2 / 2.0, 0.0, L, n)
        max_shear = ra
        reactions = {'A': Reaction(vertical=ra, moment=ma)}

    result = BeamResult(
        case=case,
        reactions=reactions,
        shear=shear,
        moment=moment,
        max_shear=float(max_shear),
        max_moment=peak_abs(moment),
    )
    logger.debug(
        "beam {}/{} L={} P={} a/L={}: Vmax={:.3f} Mmax={:.3f}",
        beam_type.value, load_type.value, L, P, a_ratio, result.max_shear, result.max_moment,
    )
    return result


def shear_at(case: BeamLoadCase, x: float) -> float:
    """
    Shear force V(x). At a point-load position the value just left of the
    load is returned.
    """
    beam_type, load_type, L, P, a_ratio = _validate(case)
    x = _check_position(x, L)
    a = a_ratio * L

    if beam_type is BeamType.SIMPLE:
        if load_type is LoadType.POINT:
            rb = P * a / L
            ra = P - rb
            return ra if x <= a else -rb
        return P * L / 2.0 - P * x
    if load_type is LoadType.POINT:
        return P if x <= a else 0.0
    return P * (L - x)


def moment_at(case: BeamLoadCase, x: float) -> float:
    """Bending moment M(x), sagging positive."""
    beam_type, load_type, L, P, a_ratio = _validate(case)
    x = _check_position(x, L)
    a = a_ratio * L

    if beam_type is BeamType.SIMPLE:
        if load_type is LoadType.POINT:
            rb = P * a / L
            ra = P - rb
            return ra * x if x <= a else rb * (L - x)
        return P * L / 2.0 * x - P * x ** 2 / 2.0
    if load_type is LoadType.POINT:
        return -P * (a - x) if x <= a else 0.0
    return -P * (L - x) ** 2 / 2.0


def _check_position(x: float, L: float) -> float:
    x = float(x)
    if not (0.0 <= x <= L):
        raise InvalidRange(f"x must lie within the span [0, {L}], got {x}")
    return x


def moment_curve(case: BeamLoadCase, n_intervals: int = 100) -> np.ndarray:
    """Moment evaluated at n_intervals + 1 equally spaced stations, as an (n+1, 2) array."""
    L = require_positive("span", case.span)
    xs = np.linspace(0.0, L, n_intervals + 1)
    return np.column_stack([xs, [moment_at(case, x) for x in xs]])
