# Tag enums and support reactions shared by the solvers

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from .errors import InvalidRange


def as_tag(enum_cls, value):
    """Accept an enum member or its string value; anything else is InvalidRange."""
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ', '.join(m.value for m in enum_cls)
        raise InvalidRange(f"Unknown {enum_cls.__name__} {value!r}; expected one of: {allowed}")


class BeamType(str, Enum):
    SIMPLE = 'simple'
    CANTILEVER = 'cantilever'


class LoadType(str, Enum):
    POINT = 'point'
    UDL = 'udl'


class BoundaryCondition(str, Enum):
    PINNED_PINNED = 'pinned-pinned'
    FIXED_FREE = 'fixed-free'
    FIXED_FIXED = 'fixed-fixed'
    FIXED_PINNED = 'fixed-pinned'


class SectionShape(str, Enum):
    RECTANGLE = 'rectangle'
    I_BEAM = 'i-beam'


class RCMode(str, Enum):
    UNDER_REINFORCED = 'under-reinforced'
    BALANCED = 'balanced'
    OVER_REINFORCED = 'over-reinforced'
    UNDER_MINIMUM = 'under-minimum'


@dataclass(frozen=True)
class Reaction:
    """
    Support reaction. Forces positive upward / to the right,
    moments positive counterclockwise.
    """
    vertical: float = 0.0
    horizontal: float = 0.0
    moment: float = 0.0


# support name -> reaction, one entry per support
ReactionSet = Dict[str, Reaction]


def total_vertical(reactions: ReactionSet) -> float:
    return sum(r.vertical for r in reactions.values())


def total_horizontal(reactions: ReactionSet) -> float:
    return sum(r.horizontal for r in reactions.values())
