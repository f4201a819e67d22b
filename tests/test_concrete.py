"""
TEST: Reinforced concrete failure mode
======================================

The reference scenario (fc = 30 MPa, fy = 400 MPa, b = 250 mm, h = 500 mm,
As = 1000 mm²) is checked against a hand calculation:

    h0   = 500 - 40 = 460
    εy   = 400 / 200000 = 0.002
    ξb   = 0.0033 / 0.0053 = 0.6226
    As_bal = 30·250·0.6226·460 / 400 = 5370 mm²
    As_min = 0.002·250·500 = 250 mm²
    → under-reinforced
    x    = 400·1000 / (30·250) = 53.33 mm
    Mn   = 30·250·53.33·(460 - 26.67) = 173.3e6 N·mm = 173.3 kN·m
"""

import numpy as np
import pytest

from structlab.concrete import RCSection, analyze_rc_beam, balanced_steel_area, classify, minimum_steel_area
from structlab.config import EngineConfig
from structlab.errors import InvalidGeometry, InvalidRange
from structlab.model import RCMode


def _section(As, **kw):
    params = dict(fc=30.0, fy=400.0, b=250.0, h=500.0, As=As)
    params.update(kw)
    return RCSection(**params)


def test_reference_scenario_hand_calculation():
    state = analyze_rc_beam(_section(1000.0))

    xi_b = 0.0033 / (0.0033 + 400.0 / 200000.0)
    As_bal = 30.0 * 250.0 * xi_b * 460.0 / 400.0
    x = 400.0 * 1000.0 / (30.0 * 250.0)
    Mn = 30.0 * 250.0 * x * (460.0 - x / 2)

    assert state.mode is RCMode.UNDER_REINFORCED
    assert state.As_bal == pytest.approx(As_bal, rel=0.01)
    assert state.As_bal == pytest.approx(5370.3, rel=0.01)
    assert state.As_min == pytest.approx(250.0)
    assert state.x == pytest.approx(x, rel=0.01)
    assert state.Mn == pytest.approx(Mn, rel=0.01)
    assert state.Mn_kNm == pytest.approx(173.33, rel=0.01)
    assert state.sigma_s == 400.0
    assert state.eps_s == pytest.approx(0.0033 * (460.0 - x) / x)
    assert state.block_depth == pytest.approx(0.8 * x)
    assert state.xi == pytest.approx(x / 460.0)
    assert "Ductile" in state.description


def test_classification_relative_to_balanced_area():
    As_bal = balanced_steel_area(_section(1000.0))

    assert analyze_rc_beam(_section(0.5 * As_bal)).mode is RCMode.UNDER_REINFORCED
    assert analyze_rc_beam(_section(1.5 * As_bal)).mode is RCMode.OVER_REINFORCED
    assert analyze_rc_beam(_section(0.97 * As_bal)).mode is RCMode.BALANCED
    assert analyze_rc_beam(_section(200.0)).mode is RCMode.UNDER_MINIMUM


def test_classify_priority_order():
    """Below-minimum wins even if the balanced area were tiny."""
    assert classify(As=100.0, As_min=250.0, As_bal=50.0) is RCMode.UNDER_MINIMUM
    assert classify(As=1000.0, As_min=250.0, As_bal=1000.0) is RCMode.BALANCED
    assert classify(As=950.0, As_min=250.0, As_bal=1000.0) is RCMode.UNDER_REINFORCED
    assert classify(As=1000.1, As_min=250.0, As_bal=1000.0) is RCMode.OVER_REINFORCED


def test_over_reinforced_uses_strain_compatibility():
    """
    Concrete crushes first: the neutral axis solves the quadratic and the
    steel stays below yield.
    """
    sec = _section(8000.0)
    state = analyze_rc_beam(sec)
    assert state.mode is RCMode.OVER_REINFORCED

    x = state.x
    residual = 30.0 * 250.0 * x ** 2 + 200000.0 * 0.0033 * 8000.0 * x - 200000.0 * 0.0033 * 8000.0 * 460.0
    assert abs(residual) / (200000.0 * 0.0033 * 8000.0 * 460.0) < 1e-9
    assert state.sigma_s < 400.0
    assert state.eps_s < state.eps_y
    assert state.sigma_s == pytest.approx(state.eps_s * 200000.0)
    # Force equilibrium: concrete block = steel force
    assert 30.0 * 250.0 * x == pytest.approx(8000.0 * state.sigma_s)


def test_under_minimum_steel_stress_capped_at_yield():
    state = analyze_rc_beam(_section(200.0))
    assert state.mode is RCMode.UNDER_MINIMUM
    assert state.sigma_s == pytest.approx(min(state.eps_s * 200000.0, 400.0))
    assert state.sigma_s <= 400.0


def test_strain_profile():
    state = analyze_rc_beam(_section(1000.0))
    depths = [s.position for s in state.strain_profile]
    strains = [s.value for s in state.strain_profile]
    assert depths == pytest.approx([0.0, state.x, 460.0])
    assert strains == pytest.approx([-0.0033, 0.0, state.eps_s])


def test_cover_defaults_to_config():
    sec = _section(1000.0)
    assert sec.cover is None
    assert analyze_rc_beam(sec).h0 == 460.0
    assert analyze_rc_beam(sec, config=EngineConfig(rc_cover=50.0)).h0 == 450.0
    # An explicit cover wins over the config
    assert analyze_rc_beam(_section(1000.0, cover=30.0), config=EngineConfig(rc_cover=50.0)).h0 == 470.0


def test_steel_areas_and_cover():
    sec = _section(1000.0, cover=60.0)
    assert minimum_steel_area(sec) == pytest.approx(250.0)
    assert analyze_rc_beam(sec).h0 == 440.0


def test_neutral_axis_outside_effective_depth_rejected():
    cfg = EngineConfig(rc_min_ratio=1.0)
    with pytest.raises(InvalidRange, match="Neutral axis"):
        analyze_rc_beam(_section(100000.0), config=cfg)


def test_rc_input_errors():
    with pytest.raises(InvalidGeometry, match="cover"):
        analyze_rc_beam(_section(1000.0, cover=500.0))
    with pytest.raises(InvalidGeometry, match="b must be positive"):
        analyze_rc_beam(_section(1000.0, b=0.0))
    with pytest.raises(InvalidRange, match="As"):
        analyze_rc_beam(_section(0.0))
    with pytest.raises(InvalidRange, match="fc"):
        analyze_rc_beam(_section(1000.0, fc=-30.0))
