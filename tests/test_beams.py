import numpy as np
import pytest

from structlab.beams import BeamLoadCase, moment_at, moment_curve, shear_at, solve_beam
from structlab.diagrams import peak_sample
from structlab.errors import InvalidGeometry, InvalidRange
from structlab.model import BeamType, LoadType


def test_simple_point_reactions_sum_to_load():
    """
    A simply supported beam with a point load anywhere on the span must
    push back with exactly the applied load: Ra + Rb = P.

    We slide the load from one support to the other, including the two
    end positions where one reaction becomes zero.
    """
    P, L = 50.0, 10.0
    for a_ratio in np.linspace(0.0, 1.0, 21):
        res = solve_beam(BeamLoadCase(BeamType.SIMPLE, LoadType.POINT, L, P, a_ratio))
        ra = res.reactions['A'].vertical
        rb = res.reactions['B'].vertical
        assert np.isclose(ra + rb, P), f"a/L={a_ratio}: Ra+Rb={ra + rb}"
        assert np.isclose(rb, P * a_ratio)


def test_simple_point_diagrams():
    """
    Load at a = 3 on a 10 m span:
      Rb = P·a/L = 15, Ra = 35
      Peak moment under the load = P·a·b/L = 50·3·7/10 = 105
    The shear steps from +Ra to -Rb at x = a (two samples at the same x).
    """
    res = solve_beam(BeamLoadCase('simple', 'point', 10.0, 50.0, 0.3))

    assert np.isclose(res.reactions['A'].vertical, 35.0)
    assert np.isclose(res.reactions['B'].vertical, 15.0)
    assert np.isclose(res.max_moment, 105.0)
    assert np.isclose(res.max_shear, 35.0)

    positions = [s.position for s in res.shear]
    values = [s.value for s in res.shear]
    assert positions == pytest.approx([0.0, 3.0, 3.0, 10.0])
    assert values == pytest.approx([35.0, 35.0, -15.0, -15.0])

    peak = peak_sample(res.moment)
    assert np.isclose(peak.position, 3.0)


def test_simple_udl_reactions_and_midspan_peak():
    """
    UDL q over the whole span:
      Ra = Rb = q·L/2
      M(x) = Ra·x - q·x²/2, peak q·L²/8 at the midspan sample
    """
    q, L = 20.0, 8.0
    res = solve_beam(BeamLoadCase('simple', 'udl', L, q))

    assert np.isclose(res.reactions['A'].vertical, q * L / 2)
    assert np.isclose(res.reactions['B'].vertical, q * L / 2)
    assert np.isclose(res.max_moment, q * L ** 2 / 8)

    peak = peak_sample(res.moment)
    assert np.isclose(peak.position, L / 2)
    assert np.isclose(peak.value, q * L ** 2 / 8)

    # At least 100 equal intervals for the parabola
    assert len(res.moment) >= 101


def test_cantilever_point_load():
    """
    Cantilever fixed at x = 0 with P at a:
      Ra = P, Ma = -P·a (hogging)
      M(x) rises linearly from -P·a at the root to 0 at the load
    """
    P, L = 40.0, 6.0
    res = solve_beam(BeamLoadCase('cantilever', 'point', L, P, 0.5))

    assert set(res.reactions) == {'A'}
    assert np.isclose(res.reactions['A'].vertical, P)
    assert np.isclose(res.reactions['A'].moment, -P * 3.0)
    assert np.isclose(res.moment[0].value, -P * 3.0)
    assert np.isclose(res.moment[-1].value, 0.0)
    assert np.isclose(res.max_moment, P * 3.0)
    assert np.isclose(res.max_shear, P)


def test_cantilever_udl():
    """Ra = q·L, Ma = -q·L²/2, shear falls linearly to zero at the tip."""
    q, L = 10.0, 4.0
    res = solve_beam(BeamLoadCase('cantilever', 'udl', L, q))

    assert np.isclose(res.reactions['A'].vertical, q * L)
    assert np.isclose(res.reactions['A'].moment, -q * L ** 2 / 2)
    assert np.isclose(res.shear[0].value, q * L)
    assert np.isclose(res.shear[-1].value, 0.0)
    assert np.isclose(res.moment[0].value, -q * L ** 2 / 2)
    assert np.isclose(res.moment[-1].value, 0.0)


def test_point_evaluation_matches_fields():
    """shear_at / moment_at agree with the sampled fields."""
    case = BeamLoadCase('simple', 'point', 10.0, 50.0, 0.3)

    # Just left of the load
    assert np.isclose(shear_at(case, 3.0), 35.0)
    assert np.isclose(shear_at(case, 3.5), -15.0)
    assert np.isclose(moment_at(case, 3.0), 105.0)
    assert np.isclose(moment_at(case, 0.0), 0.0)
    assert np.isclose(moment_at(case, 10.0), 0.0)

    udl = BeamLoadCase('cantilever', 'udl', 4.0, 10.0)
    res = solve_beam(udl)
    for s in res.moment[::10]:
        assert np.isclose(moment_at(udl, s.position), s.value)

    curve = moment_curve(case, n_intervals=10)
    assert curve.shape == (11, 2)
    assert np.isclose(curve[3, 1], 105.0)


def test_beam_input_errors():
    with pytest.raises(InvalidGeometry, match="span"):
        solve_beam(BeamLoadCase('simple', 'point', 0.0, 50.0))

    with pytest.raises(InvalidRange, match="position_ratio"):
        solve_beam(BeamLoadCase('simple', 'point', 10.0, 50.0, 1.5))

    with pytest.raises(InvalidRange, match="BeamType"):
        solve_beam(BeamLoadCase('propped', 'point', 10.0, 50.0))

    with pytest.raises(InvalidRange, match="within the span"):
        moment_at(BeamLoadCase('simple', 'udl', 10.0, 5.0), 11.0)
