# structlab/mohr.py
"""
MOHR'S CIRCLE FOR PLANE STRESS
==============================

Given the stress state on an element (σx, σy, τxy):

    center  C = (σx + σy) / 2
    radius  R = sqrt(((σx - σy) / 2)² + τxy²)
    σ1 = C + R,  σ2 = C - R,  τmax = R

The x-face plots at X = (σx, τxy) and the y-face at Y = (σy, -τxy);
they are diametrically opposite on the circle.

The principal plane is at θp = ½·atan2(2τxy, σx - σy), measured
counterclockwise from x. Rotating the element by θ rotates the
diameter XY by 2θ on the circle.
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np
from loguru import logger

from .errors import InvalidRange


@dataclass(frozen=True)
class StressState:
    sx: float       # σx
    sy: float       # σy
    txy: float      # τxy


@dataclass(frozen=True)
class MohrCircle:
    state: StressState
    center: float
    radius: float
    sigma1: float
    sigma2: float
    max_shear: float
    principal_angle: float          # θp (rad)
    point_x: Tuple[float, float]    # (σx, τxy)
    point_y: Tuple[float, float]    # (σy, -τxy)


def _check(state: StressState):
    values = (state.sx, state.sy, state.txy)
    if not all(np.isfinite(v) for v in values):
        raise InvalidRange(f"Stress components must be finite, got {values}")
    return tuple(float(v) for v in values)


def mohr_circle(state: StressState) -> MohrCircle:
    sx, sy, txy = _check(state)

    center = (sx + sy) / 2.0
    radius = float(np.hypot((sx - sy) / 2.0, txy))
    theta_p = 0.5 * np.arctan2(2.0 * txy, sx - sy)

    logger.debug("mohr sx={} sy={} txy={}: C={:.3f} R={:.3f}", sx, sy, txy, center, radius)
    return MohrCircle(
        state=state,
        center=center,
        radius=radius,
        sigma1=center + radius,
        sigma2=center - radius,
        max_shear=radius,
        principal_angle=float(theta_p),
        point_x=(sx, txy),
        point_y=(sy, -txy),
    )


def transform_stress(state: StressState, theta: float) -> Tuple[float, float, float]:
    """
    Stresses on axes rotated by theta (rad, counterclockwise).

    Returns (σx', σy', τx'y').
    """
    sx, sy, txy = _check(state)
    c = (sx + sy) / 2.0
    d = (sx - sy) / 2.0
    cos2 = np.cos(2.0 * theta)
    sin2 = np.sin(2.0 * theta)
    sx_r = c + d * cos2 + txy * sin2
    sy_r = c - d * cos2 - txy * sin2
    txy_r = -d * sin2 + txy * cos2
    return float(sx_r), float(sy_r), float(txy_r)


def circle_outline(circle: MohrCircle, n_points: int = 73) -> np.ndarray:
    """(n, 2) array of (σ, τ) points around the circle, closed."""
    phi = np.linspace(0.0, 2.0 * np.pi, n_points)
    return np.column_stack([
        circle.center + circle.radius * np.cos(phi),
        circle.radius * np.sin(phi),
    ])
