"""
VISUALIZATION: PLOTTING SOLVER RESULTS
======================================

Static matplotlib renderings of the records the solvers return. Every
function builds one figure, saves it when ``outpath`` is given, closes it
(so batch scripts don't pile up open figures) and returns it.

COLOR CONVENTIONS:
------------------
- Tension / positive moment: coral red
- Compression / negative moment: sky blue
- Zero-force members, construction lines: silver gray
"""

import os
from typing import Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure
from matplotlib.patches import Circle

from .beams import BeamResult
from .buckling import StabilityResult
from .concrete import RCState
from .diagrams import FieldSample, field_arrays
from .frame import FrameResult
from .mohr import MohrCircle, circle_outline
from .section import SectionResult
from .truss import TrussResult
from .vibration import FrequencyResponse, OscillatorState

COLORS = {
    'structure': '#2C3E50',      # Dark blue-gray
    'tension': '#E74C3C',        # Coral red
    'compression': '#3498DB',    # Sky blue
    'zero': '#BDC3C7',           # Silver gray
    'accent': '#F39C12',         # Golden yellow
    'load': '#9B59B6',           # Purple
    'background': '#FAFAFA',
    'grid': '#E0E0E0',
}

FONT_TITLE = {'family': 'sans-serif', 'weight': 'bold', 'size': 13}


def _finish(fig: Figure, outpath: Optional[str]) -> Figure:
    if outpath:
        folder = os.path.dirname(outpath)
        if folder:
            os.makedirs(folder, exist_ok=True)
        fig.savefig(outpath, dpi=150, bbox_inches='tight', facecolor=COLORS['background'])
    plt.close(fig)
    return fig


def _style(ax, title: str, xlabel: str, ylabel: str):
    ax.set_facecolor(COLORS['background'])
    ax.set_title(title, fontdict=FONT_TITLE)
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    ax.grid(True, alpha=0.3, linestyle='--', color=COLORS['grid'])
    ax.axhline(0.0, color=COLORS['structure'], linewidth=0.8)


def _fill_field(ax, field: Sequence[FieldSample], color: str, invert: bool = False):
    xs, vs = field_arrays(field)
    ax.plot(xs, vs, color=color, linewidth=2)
    ax.fill_between(xs, 0.0, vs, color=color, alpha=0.25)
    if invert:
        ax.invert_yaxis()


def plot_beam_diagrams(result: BeamResult, outpath: Optional[str] = None) -> Figure:
    """Shear force and bending moment diagrams, stacked."""
    fig, (ax_v, ax_m) = plt.subplots(2, 1, figsize=(10, 7), sharex=True, facecolor=COLORS['background'])

    _fill_field(ax_v, result.shear, COLORS['compression'])
    _style(ax_v, f"Shear force (max {result.max_shear:.2f} kN)", "", "V (kN)")

    # Moment drawn on the tension side: sagging plotted downward
    _fill_field(ax_m, result.moment, COLORS['tension'], invert=True)
    _style(ax_m, f"Bending moment (max {result.max_moment:.2f} kN·m)", "x (m)", "M (kN·m)")

    fig.tight_layout()
    return _finish(fig, outpath)


def plot_truss_forces(result: TrussResult, outpath: Optional[str] = None) -> Figure:
    """Truss geometry with members coloured by tension / compression / zero."""
    fig, ax = plt.subplots(figsize=(10, 5), facecolor=COLORS['background'])
    nodes = result.nodes

    for member in result.members:
        i, j = member.nodes
        color = {
            'tension': COLORS['tension'],
            'compression': COLORS['compression'],
            'zero': COLORS['zero'],
        }[member.state]
        width = 1.5 + 4.0 * min(abs(member.force) / max(result.case.load, 1e-9), 1.0)
        ax.plot([nodes[i][0], nodes[j][0]], [nodes[i][1], nodes[j][1]], color=color, linewidth=width)
        mx, my = (nodes[i][0] + nodes[j][0]) / 2.0, (nodes[i][1] + nodes[j][1]) / 2.0
        ax.annotate(f"{member.force:.1f}", (mx, my), fontsize=9, ha='center', va='bottom')

    xy = np.array([nodes[k] for k in sorted(nodes)])
    ax.scatter(xy[:, 0], xy[:, 1], s=60, color=COLORS['structure'], zorder=3)
    ax.annotate("", xy=(result.case.position, 0.0), xytext=(result.case.position, -0.25 * result.case.height),
                arrowprops=dict(arrowstyle='<-', color=COLORS['load'], linewidth=2))
    ax.set_aspect('equal')
    _style(ax, f"Truss member forces (P = {result.case.load:.0f} kN)", "x (m)", "y (m)")
    return _finish(fig, outpath)


def plot_frame_moments(result: FrameResult, outpath: Optional[str] = None) -> Figure:
    """Moment diagrams drawn perpendicular to each member of the portal frame."""
    H, L = result.case.height, result.case.span
    fig, ax = plt.subplots(figsize=(9, 7), facecolor=COLORS['background'])
    ax.plot([0, 0, L, L], [0, H, H, 0], color=COLORS['structure'], linewidth=3)

    scale = 0.25 * min(H, L) / max(result.max_moment, 1e-9)

    ys, ms = field_arrays(result.left_column)
    ax.fill_betweenx(ys, 0.0, -ms * scale, color=COLORS['tension'], alpha=0.3)
    ys, ms = field_arrays(result.right_column)
    ax.fill_betweenx(ys, L, L + ms * scale, color=COLORS['tension'], alpha=0.3)
    xs, ms = field_arrays(result.beam)
    ax.fill_between(xs, H, H - ms * scale, color=COLORS['compression'], alpha=0.3)

    ax.set_aspect('equal')
    _style(ax, f"Portal frame moments (max {result.max_moment:.2f} kN·m)", "x (m)", "y (m)")
    return _finish(fig, outpath)


def plot_buckled_shape(result: StabilityResult, outpath: Optional[str] = None) -> Figure:
    """Column axis with the normalized mode shape and the current deflected shape."""
    fig, ax = plt.subplots(figsize=(5, 8), facecolor=COLORS['background'])
    L = result.case.length
    t, mode = field_arrays(result.mode_shape)
    _, defl = field_arrays(result.deflected_shape)

    ax.plot(np.zeros_like(t), t * L, color=COLORS['zero'], linestyle='--', label='axis')
    ax.plot(mode * 0.1 * L, t * L, color=COLORS['compression'], label='mode shape')
    if result.buckled:
        ax.plot(defl / 100.0, t * L, color=COLORS['tension'], linewidth=2, label='buckled')

    status = "BUCKLED" if result.buckled else f"SF = {result.safety_factor:.2f}"
    _style(ax, f"Pcr = {result.critical_load:.1f} kN ({status})", "lateral", "height (m)")
    ax.legend(loc='best')
    return _finish(fig, outpath)


def plot_mohr_circle(circle: MohrCircle, outpath: Optional[str] = None) -> Figure:
    fig, ax = plt.subplots(figsize=(7, 7), facecolor=COLORS['background'])
    pts = circle_outline(circle)
    ax.plot(pts[:, 0], pts[:, 1], color=COLORS['structure'], linewidth=2)
    ax.add_patch(Circle((circle.center, 0.0), circle.radius, fill=True, alpha=0.08, color=COLORS['compression']))

    (xx, xt), (yx, yt) = circle.point_x, circle.point_y
    ax.plot([xx, yx], [xt, yt], color=COLORS['accent'], linewidth=1.5)
    ax.scatter([xx, yx], [xt, yt], color=COLORS['accent'], zorder=3)
    ax.annotate("X", (xx, xt), textcoords='offset points', xytext=(5, 5))
    ax.annotate("Y", (yx, yt), textcoords='offset points', xytext=(5, 5))
    ax.scatter([circle.sigma1, circle.sigma2], [0.0, 0.0], color=COLORS['tension'], zorder=3)

    ax.set_aspect('equal')
    _style(ax, f"σ1 = {circle.sigma1:.1f}, σ2 = {circle.sigma2:.1f}, τmax = {circle.max_shear:.1f}",
           "σ (MPa)", "τ (MPa)")
    return _finish(fig, outpath)


def plot_section_stress(result: SectionResult, outpath: Optional[str] = None) -> Figure:
    """Linear bending stress across the depth."""
    fig, ax = plt.subplots(figsize=(6, 7), facecolor=COLORS['background'])
    ys, sig = field_arrays(result.stress_profile)
    ax.plot(sig, ys, color=COLORS['structure'], linewidth=2)
    ax.fill_betweenx(ys, 0.0, sig, where=sig >= 0, color=COLORS['tension'], alpha=0.3)
    ax.fill_betweenx(ys, 0.0, sig, where=sig < 0, color=COLORS['compression'], alpha=0.3)
    _style(ax, f"σmax = {result.max_stress:.2f}", "σ", "y")
    ax.axvline(0.0, color=COLORS['structure'], linewidth=0.8)
    return _finish(fig, outpath)


def plot_rc_strain(state: RCState, outpath: Optional[str] = None) -> Figure:
    """Strain distribution over the effective depth, depth measured down from the top."""
    fig, ax = plt.subplots(figsize=(6, 7), facecolor=COLORS['background'])
    depth, eps = field_arrays(state.strain_profile)
    ax.plot(eps * 1000.0, depth, color=COLORS['structure'], marker='o')
    ax.axhline(state.x, color=COLORS['accent'], linestyle='--', label=f"neutral axis x = {state.x:.1f}")
    ax.axhspan(0.0, state.block_depth, color=COLORS['compression'], alpha=0.2, label='stress block')
    ax.invert_yaxis()
    _style(ax, f"{state.mode.value}: Mn = {state.Mn_kNm:.1f} kN·m", "strain (‰)", "depth (mm)")
    ax.legend(loc='lower right')
    return _finish(fig, outpath)


def plot_frequency_response(response: FrequencyResponse, outpath: Optional[str] = None) -> Figure:
    fig, ax = plt.subplots(figsize=(8, 5), facecolor=COLORS['background'])
    daf = np.where(np.isfinite(response.daf), response.daf, np.nan)
    ax.plot(response.ratios, daf, color=COLORS['compression'], linewidth=2)
    if np.isfinite(response.current_daf):
        ax.scatter([response.current_ratio], [response.current_daf], color=COLORS['tension'], zorder=3)
    ax.axvline(1.0, color=COLORS['zero'], linestyle=':')
    _style(ax, f"Dynamic amplification (ζ = {response.damping_ratio:.3f})", "r = ω/ωn", "DAF")
    return _finish(fig, outpath)


def plot_trajectory(trajectory: Sequence[OscillatorState], outpath: Optional[str] = None) -> Figure:
    fig, ax = plt.subplots(figsize=(10, 4), facecolor=COLORS['background'])
    t = np.array([s.time for s in trajectory])
    x = np.array([s.displacement for s in trajectory])
    ax.plot(t, x, color=COLORS['structure'], linewidth=1.5)
    _style(ax, "Displacement history", "t (s)", "x")
    return _finish(fig, outpath)
