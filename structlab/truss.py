# structlab/truss.py
"""
WARREN TRUSS UNDER A MOVING LOAD
================================

Fixed five-node, seven-member Warren truss:

              3 ─────── 4
             ╱ ╲       ╱ ╲
            ╱   ╲     ╱   ╲
           0 ─── 1 ─── ─── 2
           ▲                ○
        (pinned)         (roller)

- Bottom chord nodes 0, 1, 2 at y = 0, spaced L/2
- Top chord nodes 3, 4 at height H above the quarter points
- Members (id: nodes): 0: 0-1, 1: 1-2, 2: 3-4, 3: 0-3, 4: 3-1, 5: 1-4, 6: 4-2

A single downward point load P rolls along the bottom chord (a vehicle).
It is first shared between the two bottom-chord nodes either side of it by
linear interpolation, then joint equilibrium at nodes 0, 2, 3 and 4 gives
every member force in closed form. All diagonals share one angle, so only
sin/cos of that angle appear.

SIGN CONVENTION: positive N = tension, negative N = compression.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

import numpy as np
from loguru import logger

from .config import CONFIG, EngineConfig
from .diagrams import FieldSample, make_field
from .errors import InvalidRange, require_in_range, require_non_negative, require_positive
from .model import Reaction, ReactionSet


MEMBERS: Tuple[Tuple[int, int], ...] = (
    (0, 1),  # bottom left
    (1, 2),  # bottom right
    (3, 4),  # top chord
    (0, 3),  # diagonal 1
    (3, 1),  # diagonal 2
    (1, 4),  # diagonal 3
    (4, 2),  # diagonal 4
)

PINNED_NODE = 0
ROLLER_NODE = 2


@dataclass(frozen=True)
class TrussLoadCase:
    load: float             # P (kN), downward
    position: float         # px (m) from node 0 along the bottom chord
    span: float = 12.0      # L (m)
    height: float = 4.0     # H (m)


@dataclass(frozen=True)
class MemberForce:
    id: int
    nodes: Tuple[int, int]
    force: float            # + tension, - compression
    zero_tolerance: float = field(default=1.0, compare=False, repr=False)

    @property
    def is_zero_force(self) -> bool:
        return abs(self.force) < self.zero_tolerance

    @property
    def state(self) -> str:
        if self.is_zero_force:
            return "zero"
        return "tension" if self.force > 0 else "compression"


@dataclass
class TrussResult:
    case: TrussLoadCase
    nodes: Dict[int, Tuple[float, float]]
    nodal_loads: Dict[int, float]       # downward load share at bottom-chord nodes
    reactions: ReactionSet              # 'A' at node 0, 'B' at node 2
    members: List[MemberForce]

    def forces(self) -> np.ndarray:
        return np.array([m.force for m in self.members], dtype=float)


def truss_nodes(span: float, height: float) -> Dict[int, Tuple[float, float]]:
    return {
        0: (0.0, 0.0),
        1: (span / 2.0, 0.0),
        2: (span, 0.0),
        3: (span / 4.0, height),
        4: (span * 0.75, height),
    }


def distribute_load(load: float, position: float, span: float) -> Tuple[float, float, float]:
    """Share a point load between bottom-chord nodes 0, 1, 2 by linear interpolation."""
    half = span / 2.0
    p0 = p1 = p2 = 0.0
    if position <= half:
        ratio = position / half
        p1 = load * ratio
        p0 = load * (1.0 - ratio)
    else:
        ratio = (position - half) / half
        p2 = load * ratio
        p1 = load * (1.0 - ratio)
    return p0, p1, p2


def solve_truss(case: TrussLoadCase, config: EngineConfig = CONFIG) -> TrussResult:
    """
    Reactions and member forces for the moving-load Warren truss.

    Raises:
    -------
    InvalidGeometry : span or height <= 0
    InvalidRange : position outside [0, span], negative load
    """
    L = require_positive("span", case.span)
    H = require_positive("height", case.height)
    P = require_non_negative("load", case.load)
    px = require_in_range("position", case.position, 0.0, L)

    # Reactions
    r2 = P * px / L
    r0 = P - r2

    # Diagonal geometry
    dx = L / 4.0
    hyp = np.hypot(dx, H)
    sin = H / hyp
    cos = dx / hyp

    p0, p1, p2 = distribute_load(P, px, L)

    # Joint 0
    f03 = (p0 - r0) / sin
    f01 = -f03 * cos
    # Joint 2
    f42 = (p2 - r2) / sin
    f12 = -f42 * cos
    # Joint 3
    f31 = -f03
    f34 = (f03 - f31) * cos
    # Joint 4
    f14 = -f42

    values = [f01, f12, f34, f03, f31, f14, f42]
    tol = config.truss_zero_tolerance
    members = [
        MemberForce(id=i, nodes=MEMBERS[i], force=float(f), zero_tolerance=tol)
        for i, f in enumerate(values)
    ]

    logger.debug(
        "truss P={} px={} L={} H={}: Ra={:.3f} Rb={:.3f} top chord={:.3f}",
        P, px, L, H, r0, r2, f34,
    )
    return TrussResult(
        case=case,
        nodes=truss_nodes(L, H),
        nodal_loads={0: p0, 1: p1, 2: p2},
        reactions={'A': Reaction(vertical=r0), 'B': Reaction(vertical=r2)},
        members=members,
    )


def joint_residuals(result: TrussResult) -> Dict[int, Tuple[float, float]]:
    """
    Net (ΣFx, ΣFy) at every joint from member forces, nodal loads and reactions.

    A tension member pulls each end node toward the other end. All entries
    are zero (to round-off) for an equilibrium solution.
    """
    nodes = result.nodes
    sums = {nid: np.zeros(2) for nid in nodes}

    for m in result.members:
        i, j = m.nodes
        xi, yi = nodes[i]
        xj, yj = nodes[j]
        L = np.hypot(xj - xi, yj - yi)
        u = np.array([xj - xi, yj - yi]) / L
        sums[i] += m.force * u
        sums[j] -= m.force * u

    for nid, p in result.nodal_loads.items():
        sums[nid][1] -= p

    sums[PINNED_NODE][1] += result.reactions['A'].vertical
    sums[ROLLER_NODE][1] += result.reactions['B'].vertical

    return {nid: (float(v[0]), float(v[1])) for nid, v in sums.items()}


def influence_line(
    case: TrussLoadCase,
    member_id: int,
    n_intervals: int = 48,
    config: EngineConfig = CONFIG,
) -> List[FieldSample]:
    """
    Force in one member as the load travels from node 0 to node 2.

    ``case.position`` is ignored; load, span and height are reused.
    """
    if not 0 <= member_id < len(MEMBERS):
        raise InvalidRange(f"member_id must be in 0..{len(MEMBERS) - 1}, got {member_id}")
    L = require_positive("span", case.span)
    positions = np.linspace(0.0, L, n_intervals + 1)
    values = []
    for px in positions:
        res = solve_truss(
            TrussLoadCase(load=case.load, position=float(px), span=L, height=case.height),
            config=config,
        )
        values.append(res.members[member_id].force)
    return make_field(positions, values)
