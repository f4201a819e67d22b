# structlab/config.py
"""
Engine configuration and defaults.

Constants that shape the numbers every solver produces live here, together
with the default parameter values and the control ranges of the interactive
front end. Solvers take an optional ``config`` argument that defaults to the
module-level ``CONFIG`` instance.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from .errors import InvalidRange


# Control ranges of the interactive front end, per module and parameter.
# Units follow the front end: m, kN, kN/m, mm, MPa, kN·m, kg, N/m, N·s/m, rad/s.
DEFAULT_RANGES: Dict[str, Dict[str, Tuple[float, float]]] = {
    'beam': {
        'span': (2.0, 20.0),
        'load': (10.0, 100.0),
        'position_ratio': (0.0, 1.0),
    },
    'truss': {
        'load': (50.0, 500.0),
        'position_ratio': (0.0, 1.0),
    },
    'frame': {
        'lateral_load': (0.0, 100.0),
        'gravity_load': (0.0, 100.0),
        'height': (3.0, 8.0),
        'span': (4.0, 10.0),
    },
    'buckling': {
        'load': (10.0, 500.0),
        'length': (2.0, 10.0),
        'EI': (500.0, 5000.0),
    },
    'mohr': {
        'sx': (-100.0, 100.0),
        'sy': (-100.0, 100.0),
        'txy': (-50.0, 50.0),
    },
    'section': {
        'height': (100.0, 500.0),
        'width': (50.0, 300.0),
        'flange_thickness': (5.0, 40.0),
        'web_thickness': (5.0, 30.0),
        'moment': (10.0, 500.0),
    },
    'concrete': {
        'As': (200.0, 4000.0),
        'fc': (20.0, 60.0),
    },
    'vibration': {
        'mass': (1.0, 20.0),
        'stiffness': (10.0, 200.0),
        'damping': (0.0, 10.0),
        'forcing_frequency': (0.1, 10.0),
    },
}

# Starting values shown when a module is first opened.
DEFAULT_VALUES: Dict[str, Dict[str, float]] = {
    'beam': {'span': 10.0, 'load': 50.0, 'position_ratio': 0.5},
    'truss': {'span': 12.0, 'height': 4.0, 'load': 100.0, 'position_ratio': 0.5},
    'frame': {'lateral_load': 50.0, 'gravity_load': 50.0, 'height': 6.0, 'span': 8.0},
    'buckling': {'length': 5.0, 'load': 100.0, 'EI': 2000.0},
    'mohr': {'sx': 50.0, 'sy': 10.0, 'txy': 20.0},
    'section': {'height': 400.0, 'width': 200.0, 'flange_thickness': 20.0,
                'web_thickness': 10.0, 'moment': 50.0},
    'concrete': {'fc': 30.0, 'fy': 400.0, 'b': 250.0, 'h': 500.0, 'As': 1000.0},
    'vibration': {'mass': 5.0, 'stiffness': 50.0, 'damping': 1.0,
                  'force_amplitude': 0.0, 'forcing_frequency': 1.0},
}


@dataclass
class EngineConfig:
    """Global engine configuration."""

    # Field sampling (number of equal intervals)
    beam_samples: int = 100
    frame_column_samples: int = 10
    frame_beam_samples: int = 20
    buckling_samples: int = 50
    section_samples: int = 20

    # Portal frame: share of the simple-beam moment PL/8 carried as joint hogging moment
    frame_gravity_joint_fraction: float = 0.7

    # Truss: |F| below this is reported as a zero-force member (kN)
    truss_zero_tolerance: float = 1.0

    # Buckled shape amplitude = min(gain * (P - Pcr) / Pcr, limit)
    buckling_amplitude_gain: float = 50.0
    buckling_amplitude_limit: float = 60.0

    # Reinforced concrete (MPa, mm)
    rc_Es: float = 200000.0
    rc_eps_cu: float = 0.0033
    rc_alpha1: float = 1.0
    rc_beta1: float = 0.8
    rc_cover: float = 40.0
    rc_min_ratio: float = 0.002
    rc_balanced_band: float = 0.95

    # Vibration
    vibration_dt: float = 0.016
    vibration_initial_displacement: float = 100.0
    daf_r_max: float = 3.0
    daf_r_step: float = 0.05

    ranges: Dict[str, Dict[str, Tuple[float, float]]] = None
    defaults: Dict[str, Dict[str, float]] = None

    def __post_init__(self):
        if self.ranges is None:
            self.ranges = {k: dict(v) for k, v in DEFAULT_RANGES.items()}
        if self.defaults is None:
            self.defaults = {k: dict(v) for k, v in DEFAULT_VALUES.items()}

    def range_for(self, module: str, name: str) -> Tuple[float, float]:
        try:
            return self.ranges[module][name]
        except KeyError:
            raise InvalidRange(f"No control range defined for {module}.{name}")

    def clamp(self, module: str, name: str, value: float) -> float:
        """Pin ``value`` into the control range of ``module.name``."""
        low, high = self.range_for(module, name)
        return min(max(float(value), low), high)


# Global config instance
CONFIG = EngineConfig()


def clamp(module: str, name: str, value: float) -> float:
    """Clamp against the global configuration."""
    return CONFIG.clamp(module, name, value)
