# structlab - Structural mechanics computation engine
"""
STRUCTLAB: Closed-Form Structural Mechanics
===========================================

Small, pure solvers for the classic teaching problems, each taking a frozen
parameter record and returning a result record (or raising a named error):

ARCHITECTURE:
-------------
    beams.py        Simply supported / cantilever beams: reactions, SFD, BMD
    truss.py        Five-node Warren truss under a moving point load
    frame.py        Portal frame: approximate sway + gravity moments
    buckling.py     Euler column buckling, four boundary conditions
    mohr.py         Mohr's circle for plane stress
    section.py      Rectangle / I-section bending stress
    concrete.py     Reinforced concrete flexural failure mode
    vibration.py    SDOF oscillator: time stepping + frequency response

    diagrams.py     FieldSample lists and their tabulation
    model.py        Tag enums and support reactions
    errors.py       InvalidGeometry / InvalidRange / DivisionByZero
    config.py       EngineConfig constants, defaults and control ranges
    viz.py          Matplotlib figures for every result record

Logging goes through loguru and is disabled for this package until
``structlab.logging_utils.configure_logging()`` is called.
"""

from loguru import logger

from .beams import BeamLoadCase, BeamResult, moment_at, shear_at, solve_beam
from .buckling import ColumnCase, StabilityResult, analyze_column, euler_buckling_load, safety_factor
from .concrete import RCSection, RCState, analyze_rc_beam
from .config import CONFIG, EngineConfig, clamp
from .diagrams import FieldSample
from .errors import DivisionByZero, InvalidGeometry, InvalidRange, StructLabError
from .frame import FrameLoadCase, FrameResult, solve_frame
from .model import BeamType, BoundaryCondition, LoadType, RCMode, Reaction, SectionShape
from .mohr import MohrCircle, StressState, mohr_circle, transform_stress
from .section import SectionGeometry, SectionResult, analyze_section
from .truss import MemberForce, TrussLoadCase, TrussResult, joint_residuals, solve_truss
from .vibration import (
    OscillatorParams,
    OscillatorState,
    SimStatus,
    Ticker,
    VibrationSimulator,
    dynamic_amplification,
    frequency_response,
)

logger.disable("structlab")

__version__ = "0.1.0"
