# structlab/section.py
"""
Elastic bending of rectangular and doubly-symmetric I sections.

    I (rectangle) = b·h³/12
    I (I-beam)    = b·h³/12 - (b - tw)·(h - 2tf)³/12
    σmax          = M·(h/2) / I

Units are whatever the caller supplies consistently; with mm and N·mm the
stresses come out in MPa.
"""

from dataclasses import dataclass
from typing import List, Union

from loguru import logger

from .config import CONFIG, EngineConfig
from .diagrams import FieldSample, sample_function
from .errors import InvalidGeometry, require_positive
from .model import SectionShape, as_tag


@dataclass(frozen=True)
class SectionGeometry:
    shape: Union[SectionShape, str]
    height: float                   # h
    width: float                    # b
    flange_thickness: float = 0.0   # tf, I-beam only
    web_thickness: float = 0.0      # tw, I-beam only


@dataclass
class SectionResult:
    geometry: SectionGeometry
    moment: float
    area: float
    I: float
    S: float                        # Elastic section modulus I / (h/2)
    max_stress: float               # M·(h/2)/I
    stress_profile: List[FieldSample]   # σ(y), y from the neutral axis (up), tension +


def _validate(geom: SectionGeometry):
    shape = as_tag(SectionShape, geom.shape)
    h = require_positive("height", geom.height)
    b = require_positive("width", geom.width)
    tf = tw = 0.0
    if shape is SectionShape.I_BEAM:
        tf = require_positive("flange_thickness", geom.flange_thickness)
        tw = require_positive("web_thickness", geom.web_thickness)
        if tf >= h / 2.0:
            raise InvalidGeometry(f"flange_thickness {tf} must be less than half the height {h / 2.0}")
        if tw >= b:
            raise InvalidGeometry(f"web_thickness {tw} must be less than the width {b}")
    return shape, h, b, tf, tw


def rect_inertia(b: float, h: float) -> float:
    return b * h ** 3 / 12.0


def second_moment(geom: SectionGeometry) -> float:
    """Second moment of area about the horizontal centroidal axis."""
    shape, h, b, tf, tw = _validate(geom)
    if shape is SectionShape.RECTANGLE:
        return rect_inertia(b, h)
    return rect_inertia(b, h) - rect_inertia(b - tw, h - 2.0 * tf)


def section_area(geom: SectionGeometry) -> float:
    shape, h, b, tf, tw = _validate(geom)
    if shape is SectionShape.RECTANGLE:
        return b * h
    return 2.0 * b * tf + (h - 2.0 * tf) * tw


def analyze_section(geom: SectionGeometry, moment: float, config: EngineConfig = CONFIG) -> SectionResult:
    """
    Section properties and the linear bending stress distribution.

    Parameters:
    -----------
    geom : SectionGeometry
    moment : float
        Applied bending moment, sagging positive
    """
    _, h, _, _, _ = _validate(geom)
    I = second_moment(geom)
    y_max = h / 2.0
    M = float(moment)

    sigma_max = M * y_max / I
    profile = sample_function(lambda y: -M * y / I, -y_max, y_max, config.section_samples)

    logger.debug("section {} h={} M={}: I={:.4g} sigma={:.4g}", geom.shape, h, M, I, sigma_max)
    return SectionResult(
        geometry=geom,
        moment=M,
        area=section_area(geom),
        I=I,
        S=I / y_max,
        max_stress=sigma_max,
        stress_profile=profile,
    )
