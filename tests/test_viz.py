"""Smoke tests: every plotting function builds a figure and writes a PNG."""

import numpy as np
from matplotlib.figure import Figure

from structlab import viz
from structlab.beams import BeamLoadCase, solve_beam
from structlab.buckling import ColumnCase, analyze_column
from structlab.concrete import RCSection, analyze_rc_beam
from structlab.frame import FrameLoadCase, solve_frame
from structlab.mohr import StressState, mohr_circle
from structlab.section import SectionGeometry, analyze_section
from structlab.truss import TrussLoadCase, solve_truss
from structlab.vibration import OscillatorParams, Ticker, VibrationSimulator, frequency_response


def _check(fig, path):
    assert isinstance(fig, Figure)
    assert path.exists() and path.stat().st_size > 0


def test_structural_plots(tmp_path):
    cases = [
        (viz.plot_beam_diagrams, solve_beam(BeamLoadCase('simple', 'point', 10.0, 50.0, 0.3))),
        (viz.plot_truss_forces, solve_truss(TrussLoadCase(load=100.0, position=4.0))),
        (viz.plot_frame_moments, solve_frame(FrameLoadCase(50.0, 50.0, 6.0, 8.0))),
        (viz.plot_buckled_shape, analyze_column(ColumnCase('fixed-free', 5.0, 500.0, 2000.0))),
        (viz.plot_mohr_circle, mohr_circle(StressState(50.0, 10.0, 20.0))),
        (viz.plot_section_stress, analyze_section(SectionGeometry('i-beam', 400.0, 200.0, 20.0, 10.0), 50e6)),
        (viz.plot_rc_strain, analyze_rc_beam(RCSection(30.0, 400.0, 250.0, 500.0, 1000.0))),
    ]
    for i, (plot, result) in enumerate(cases):
        path = tmp_path / f"plot_{i}.png"
        _check(plot(result, outpath=str(path)), path)


def test_vibration_plots(tmp_path):
    params = OscillatorParams(mass=5.0, stiffness=50.0, damping=0.0, forcing_frequency=np.sqrt(10.0))
    path = tmp_path / "daf.png"
    # Undamped resonance: the infinite point must not break the plot
    _check(viz.plot_frequency_response(frequency_response(params), outpath=str(path)), path)

    sim = VibrationSimulator(params)
    sim.start()
    path = tmp_path / "nested" / "trajectory.png"
    _check(viz.plot_trajectory(Ticker(sim).run(100), outpath=str(path)), path)


def test_plot_without_outpath_returns_figure():
    fig = viz.plot_mohr_circle(mohr_circle(StressState(0.0, 0.0, 10.0)))
    assert isinstance(fig, Figure)
