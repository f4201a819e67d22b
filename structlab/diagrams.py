# structlab/diagrams.py
"""
FIELD DIAGRAMS
==============

Every distribution the engine produces (shear, moment, strain, stress,
buckled shape) is returned as an ordered list of ``FieldSample`` points.

KEY CONCEPTS:
-------------
- Order matters: samples are stored in the order a renderer would draw them,
  which is also increasing position.
- A step (e.g. the shear jump under a point load) is two consecutive samples
  at the same position: the value just left of the step, then the value
  just right of it.
- Piecewise-linear fields only need their vertices. Curved fields
  (parabolic moment under a UDL, mode shapes) are sampled at equal intervals.

SIGN CONVENTIONS (beam and frame fields):
-----------------------------------------
- Positive V: left-hand support reaction side pushes up
- Positive M: sagging (compression on top fiber)
"""

from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class FieldSample:
    """A single point on a field diagram."""
    position: float     # Position along member (or across a section)
    value: float        # Field value at that position


def make_field(positions: Sequence[float], values: Sequence[float]) -> List[FieldSample]:
    """Zip positions and values into a field, preserving order."""
    if len(positions) != len(values):
        raise ValueError(f"Length mismatch: {len(positions)} positions vs {len(values)} values")
    return [FieldSample(float(x), float(v)) for x, v in zip(positions, values)]


def sample_function(
    func: Callable[[np.ndarray], np.ndarray],
    start: float,
    end: float,
    n_intervals: int,
) -> List[FieldSample]:
    """
    Sample a vectorised function at ``n_intervals`` equal intervals.

    Returns n_intervals + 1 samples, including both end points.
    """
    if n_intervals < 1:
        raise ValueError(f"n_intervals must be >= 1, got {n_intervals}")
    xs = np.linspace(start, end, n_intervals + 1)
    values = np.broadcast_to(np.asarray(func(xs), dtype=float), xs.shape)
    return make_field(xs, values)


def field_arrays(field: Sequence[FieldSample]) -> Tuple[np.ndarray, np.ndarray]:
    """Return (positions, values) as numpy arrays."""
    xs = np.array([s.position for s in field], dtype=float)
    vs = np.array([s.value for s in field], dtype=float)
    return xs, vs


def peak_abs(field: Sequence[FieldSample]) -> float:
    """Largest |value| in the field (0 for an empty field)."""
    if not field:
        return 0.0
    return max(abs(s.value) for s in field)


def peak_sample(field: Sequence[FieldSample]) -> FieldSample:
    """The sample with the largest |value|; first one wins on ties."""
    if not field:
        raise ValueError("Empty field has no peak")
    return max(field, key=lambda s: abs(s.value))


def field_to_dataframe(
    field: Sequence[FieldSample],
    value_name: str = "value",
    position_name: str = "x",
) -> pd.DataFrame:
    """Tabulate a field, one row per sample."""
    xs, vs = field_arrays(field)
    return pd.DataFrame({position_name: xs, value_name: vs})


def fields_to_dataframe(fields: dict, position_name: str = "x") -> pd.DataFrame:
    """
    Stack several named fields into one long-format table.

    Columns: ``field``, ``position_name``, ``value``. Fields keep their
    own sample positions, so steps and differing resolutions survive.
    """
    frames = []
    for name, field in fields.items():
        df = field_to_dataframe(field, position_name=position_name)
        df.insert(0, "field", name)
        frames.append(df)
    if not frames:
        return pd.DataFrame(columns=["field", position_name, "value"])
    return pd.concat(frames, ignore_index=True)
