# pappus_kit/model.py
"""
MODEL DEFINITIONS: Axis, Segment and Derived Results
====================================================

PURPOSE:
--------
This module defines the data structures the revolution engine works with:
- Axis: the coordinate axis of revolution (X, Y or Z)
- Segment: a straight line piece between two 3D points
- PolylineAggregate: total length and centroid of a list of segments
- PappusResult: radius, circumference and swept area for a full revolution
- RevolutionReport: everything above bundled for one evaluation

GEOMETRIC CONTEXT:
------------------
A polyline revolved about an axis sweeps a surface. The second
Pappus-Guldinus theorem gives its area without any meshing:

    A = L × 2πR

where L is the length of the curve and R is the distance from the curve's
centroid to the axis. For a polyline, L is the sum of segment lengths and the
centroid is the length-weighted average of the segment midpoints.

All types here are immutable. Derived fields are computed once at
construction and never change afterwards.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple

import numpy as np

from .config import CONFIG


Vec3 = Tuple[float, float, float]

# Segments with length at or below this are degenerate and excluded
EPSILON = CONFIG.epsilon

ZERO_VEC: Vec3 = (0.0, 0.0, 0.0)


class InvalidAxisError(ValueError):
    """Raised when a value cannot be interpreted as an axis of revolution."""
    pass


class Axis(str, Enum):
    """
    Coordinate axis of revolution.

    The string values match what the input layer sends ('x', 'y', 'z'), so
    an Axis can be compared directly against its lowercase name.

    Examples:
    ---------
    >>> Axis.parse('Y')
    <Axis.Y: 'y'>
    >>> Axis.Y.orthogonal
    (0, 2)
    """
    X = 'x'
    Y = 'y'
    Z = 'z'

    @property
    def index(self) -> int:
        """Component index of this axis in an (x, y, z) vector."""
        return 'xyz'.index(self.value)

    @property
    def orthogonal(self) -> Tuple[int, int]:
        """Component indices of the two coordinates perpendicular to this axis."""
        return tuple(i for i in range(3) if i != self.index)

    @classmethod
    def parse(cls, value) -> 'Axis':
        """
        Interpret an Axis or a case-insensitive axis name.

        Raises:
        -------
        InvalidAxisError
            If value is not one of x, y, z
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            for axis in cls:
                if axis.value == key:
                    return axis
        raise InvalidAxisError(
            f"Unknown axis of revolution {value!r}; expected one of 'x', 'y', 'z'."
        )


@dataclass(frozen=True)
class Segment:
    """
    A straight segment of the polyline.

    Parameters:
    -----------
    p1 : Vec3
        Start point (x, y, z)

    p2 : Vec3
        End point (x, y, z). Consecutive segments chain p2 → next p1.

    Derived (computed at construction):
    -----------------------------------
    length : float
        Euclidean distance |p2 - p1|

    centroid : Vec3
        Midpoint (p1 + p2) / 2

    Examples:
    ---------
    >>> seg = Segment((1.0, 0.0, 0.0), (1.0, 2.0, 0.0))
    >>> seg.length
    2.0
    >>> seg.centroid
    (1.0, 1.0, 0.0)

    Notes:
    ------
    - frozen=True keeps endpoints and derived values consistent
    - A segment with length <= EPSILON is still constructible, but
      is_valid is False and build_segments() will drop it
    """
    p1: Vec3
    p2: Vec3
    length: float = field(init=False)
    centroid: Vec3 = field(init=False)

    def __post_init__(self):
        a = np.asarray(self.p1, dtype=float)
        b = np.asarray(self.p2, dtype=float)
        if a.shape != (3,) or b.shape != (3,):
            raise ValueError(f"Segment endpoints must be 3D points, got {self.p1!r} and {self.p2!r}")

        object.__setattr__(self, 'p1', tuple(float(v) for v in a))
        object.__setattr__(self, 'p2', tuple(float(v) for v in b))
        object.__setattr__(self, 'length', float(np.linalg.norm(b - a)))
        object.__setattr__(self, 'centroid', tuple(float(v) for v in (a + b) * 0.5))

    @property
    def is_valid(self) -> bool:
        return self.length > EPSILON


@dataclass(frozen=True)
class PolylineAggregate:
    """
    Length and centroid of a whole polyline.

    total_length is the sum of segment lengths. centroid is the length-weighted
    mean of segment midpoints, or ZERO_VEC when there is no length at all
    (in which case it carries no meaning; see has_length).
    """
    total_length: float
    centroid: Vec3
    n_segments: int = 0

    @property
    def has_length(self) -> bool:
        return self.total_length > 0.0


@dataclass(frozen=True)
class PappusResult:
    """
    Result of the Pappus-Guldinus surface theorem for a full 360° sweep.

    radius : float
        R, distance from the polyline centroid to the axis
    circumference : float
        d = 2πR, the path travelled by the centroid
    surface_area : float
        L × d, the area of the swept surface
    """
    radius: float
    circumference: float
    surface_area: float


@dataclass(frozen=True)
class RevolutionReport:
    """One complete evaluation: inputs that survived validation plus results."""
    axis: Axis
    segments: Tuple[Segment, ...]
    aggregate: PolylineAggregate
    pappus: PappusResult
    n_input_segments: int = 0

    @property
    def n_dropped(self) -> int:
        return max(self.n_input_segments - len(self.segments), 0)
