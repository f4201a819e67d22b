# structlab/buckling.py
"""Euler column buckling: critical load, stability check and buckled mode shape."""

from dataclasses import dataclass
from typing import Dict, List, Union

import numpy as np
from loguru import logger

from .config import CONFIG, EngineConfig
from .diagrams import FieldSample, make_field, sample_function
from .errors import DivisionByZero, InvalidRange, require_non_negative, require_positive
from .model import BoundaryCondition, as_tag


# Effective length factors
K_FACTORS: Dict[BoundaryCondition, float] = {
    BoundaryCondition.PINNED_PINNED: 1.0,
    BoundaryCondition.FIXED_FREE: 2.0,
    BoundaryCondition.FIXED_FIXED: 0.5,
    BoundaryCondition.FIXED_PINNED: 0.7,
}


@dataclass(frozen=True)
class ColumnCase:
    boundary: Union[BoundaryCondition, str]
    length: float       # L (m)
    load: float         # P (kN), compression
    EI: float           # Flexural rigidity (kN·m²)


@dataclass
class StabilityResult:
    case: ColumnCase
    K: float
    effective_length: float
    critical_load: float
    safety_factor: float        # Pcr / P, inf for P = 0
    utilization: float          # P / Pcr
    buckled: bool
    amplitude: float            # 0 unless buckled
    mode_shape: List[FieldSample]       # unit-amplitude shape over t in [0, 1]
    deflected_shape: List[FieldSample]  # mode_shape * amplitude


def euler_buckling_load(EI: float, L: float, k: float = 1.0) -> float:
    """
    Euler critical buckling load for a column.

    P_cr = π²EI / (kL)²

    Args:
        EI: Flexural rigidity
        L: Member length
        k: Effective length factor (1.0 for pinned-pinned)

    Returns:
        Critical buckling load P_cr
    """
    Le = k * L  # Effective length
    return (np.pi ** 2 * EI) / (Le ** 2)


def safety_factor(critical_load: float, load: float) -> float:
    """Pcr / P. Raises DivisionByZero for P = 0."""
    if load == 0:
        raise DivisionByZero("Safety factor is undefined for zero applied load")
    return critical_load / load


def mode_shape(boundary: Union[BoundaryCondition, str], t):
    """
    Buckled shape along normalized height t in [0, 1], unit amplitude scale.

    - pinned-pinned: sin(πt)
    - fixed-free:    1 - cos(πt/2)
    - fixed-fixed:   ½(1 - cos 2πt)
    - fixed-pinned:  sin(πt) - ½ sin(2πt)
    """
    bc = as_tag(BoundaryCondition, boundary)
    t = np.asarray(t, dtype=float)
    if bc is BoundaryCondition.PINNED_PINNED:
        return np.sin(np.pi * t)
    if bc is BoundaryCondition.FIXED_FREE:
        return 1.0 - np.cos(np.pi * t / 2.0)
    if bc is BoundaryCondition.FIXED_FIXED:
        return 0.5 * (1.0 - np.cos(2.0 * np.pi * t))
    return np.sin(np.pi * t) - 0.5 * np.sin(2.0 * np.pi * t)


def buckled_amplitude(load: float, critical_load: float, config: EngineConfig = CONFIG) -> float:
    """Visual amplitude: grows with (P - Pcr)/Pcr, capped, zero while stable."""
    if load <= critical_load:
        return 0.0
    return min((load - critical_load) / critical_load * config.buckling_amplitude_gain,
               config.buckling_amplitude_limit)


def analyze_column(case: ColumnCase, config: EngineConfig = CONFIG) -> StabilityResult:
    """
    Critical load, safety factor and buckled shape for one column.

    Raises:
    -------
    InvalidGeometry : length <= 0
    InvalidRange : EI <= 0, negative load, unknown boundary condition
    """
    bc = as_tag(BoundaryCondition, case.boundary)
    L = require_positive("length", case.length)
    EI = require_positive("EI", case.EI, error=InvalidRange)
    P = require_non_negative("load", case.load)

    K = K_FACTORS[bc]
    p_cr = euler_buckling_load(EI, L, K)
    buckled = P > p_cr
    sf = safety_factor(p_cr, P) if P > 0 else float('inf')
    amplitude = buckled_amplitude(P, p_cr, config)

    shape = sample_function(lambda t: mode_shape(bc, t), 0.0, 1.0, config.buckling_samples)
    deflected = make_field([s.position for s in shape], [s.value * amplitude for s in shape])

    logger.debug(
        "column {} L={} EI={} P={}: Pcr={:.3f} SF={:.3f} buckled={}",
        bc.value, L, EI, P, p_cr, sf, buckled,
    )
    return StabilityResult(
        case=case,
        K=K,
        effective_length=K * L,
        critical_load=float(p_cr),
        safety_factor=float(sf),
        utilization=P / p_cr,
        buckled=buckled,
        amplitude=float(amplitude),
        mode_shape=shape,
        deflected_shape=deflected,
    )
