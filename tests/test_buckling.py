import numpy as np
import pytest

from structlab.buckling import (
    K_FACTORS,
    ColumnCase,
    analyze_column,
    buckled_amplitude,
    euler_buckling_load,
    mode_shape,
    safety_factor,
)
from structlab.errors import DivisionByZero, InvalidGeometry, InvalidRange
from structlab.model import BoundaryCondition


def test_critical_load_ordering_follows_K():
    """
    Same L and EI, different end restraint. A smaller effective length
    factor means a shorter effective length and a higher critical load:

        fixed-free (K=2) < pinned-pinned (K=1) < fixed-pinned (K=0.7) < fixed-fixed (K=0.5)
    """
    L, EI, P = 5.0, 2000.0, 100.0
    pcr = {
        bc: analyze_column(ColumnCase(bc, L, P, EI)).critical_load
        for bc in BoundaryCondition
    }
    assert pcr[BoundaryCondition.FIXED_FREE] < pcr[BoundaryCondition.PINNED_PINNED]
    assert pcr[BoundaryCondition.PINNED_PINNED] < pcr[BoundaryCondition.FIXED_PINNED]
    assert pcr[BoundaryCondition.FIXED_PINNED] < pcr[BoundaryCondition.FIXED_FIXED]


def test_euler_formula():
    """Pcr = π²EI/(KL)²; K = 2 gives a quarter of the pinned-pinned value."""
    EI, L = 2000.0, 5.0
    res = analyze_column(ColumnCase('pinned-pinned', L, 100.0, EI))
    assert np.isclose(res.critical_load, np.pi ** 2 * EI / L ** 2)
    assert res.K == 1.0
    assert np.isclose(res.effective_length, L)

    cant = analyze_column(ColumnCase('fixed-free', L, 100.0, EI))
    assert np.isclose(cant.critical_load, res.critical_load / 4)
    assert np.isclose(cant.effective_length, 2 * L)
    assert np.isclose(euler_buckling_load(EI, L, K_FACTORS[BoundaryCondition.FIXED_FIXED]),
                      4 * res.critical_load)


def test_safety_factor_and_buckled_flag():
    res = analyze_column(ColumnCase('pinned-pinned', 5.0, 100.0, 2000.0))
    assert not res.buckled
    assert np.isclose(res.safety_factor, res.critical_load / 100.0)
    assert np.isclose(res.utilization, 100.0 / res.critical_load)

    over = analyze_column(ColumnCase('pinned-pinned', 5.0, 1000.0, 2000.0))
    assert over.buckled
    assert over.safety_factor < 1.0


def test_zero_load():
    """No load: infinitely safe in the result record, an error from the strict helper."""
    res = analyze_column(ColumnCase('fixed-fixed', 4.0, 0.0, 1000.0))
    assert res.safety_factor == float('inf')
    assert not res.buckled

    with pytest.raises(DivisionByZero):
        safety_factor(res.critical_load, 0.0)
    with pytest.raises(ZeroDivisionError):
        safety_factor(res.critical_load, 0.0)


def test_amplitude_zero_when_stable_and_capped():
    pcr = euler_buckling_load(2000.0, 5.0)
    assert buckled_amplitude(pcr * 0.99, pcr) == 0.0
    assert buckled_amplitude(pcr, pcr) == 0.0
    assert np.isclose(buckled_amplitude(pcr * 1.1, pcr), 0.1 * 50)
    assert buckled_amplitude(pcr * 10.0, pcr) == 60.0

    stable = analyze_column(ColumnCase('pinned-pinned', 5.0, 100.0, 2000.0))
    assert stable.amplitude == 0.0
    assert all(s.value == 0.0 for s in stable.deflected_shape)


def test_mode_shapes():
    t = np.linspace(0.0, 1.0, 51)

    pp = mode_shape('pinned-pinned', t)
    assert np.isclose(pp[0], 0.0) and np.isclose(pp[-1], 0.0)
    assert np.isclose(pp.max(), 1.0)

    ff = mode_shape('fixed-free', t)
    assert np.isclose(ff[0], 0.0) and np.isclose(ff[-1], 1.0)

    fx = mode_shape('fixed-fixed', t)
    assert np.isclose(fx[0], 0.0) and np.isclose(fx[-1], 0.0)
    assert np.isclose(fx[25], 1.0)

    fp = mode_shape('fixed-pinned', t)
    assert np.isclose(fp[0], 0.0) and np.isclose(fp[-1], 0.0)

    res = analyze_column(ColumnCase('pinned-pinned', 5.0, 2000.0, 2000.0))
    assert len(res.mode_shape) == 51
    assert res.buckled
    peak = max(abs(s.value) for s in res.deflected_shape)
    assert np.isclose(peak, res.amplitude)


def test_buckling_input_errors():
    with pytest.raises(InvalidGeometry, match="length"):
        analyze_column(ColumnCase('pinned-pinned', 0.0, 100.0, 2000.0))
    with pytest.raises(InvalidRange, match="EI"):
        analyze_column(ColumnCase('pinned-pinned', 5.0, 100.0, 0.0))
    with pytest.raises(InvalidRange, match="load"):
        analyze_column(ColumnCase('pinned-pinned', 5.0, -10.0, 2000.0))
    with pytest.raises(InvalidRange, match="BoundaryCondition"):
        analyze_column(ColumnCase('hinged', 5.0, 100.0, 2000.0))
