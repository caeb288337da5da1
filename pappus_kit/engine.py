# pappus_kit/engine.py
"""
REVOLUTION ENGINE: Pappus-Guldinus Surface Area of a Revolved Polyline
======================================================================

PURPOSE:
--------
This module turns a list of segments and an axis into the numbers the user
sees: total length, centroid, centroid radius R, centroid path d and the
swept surface area. It is the only part of the package with real geometric
content.

DERIVATION:
-----------
For a polyline made of segments i with length L_i and midpoint c_i:

    L = Σ L_i
    C = Σ (c_i × L_i) / L          (length-weighted centroid)

The distance from C to a coordinate axis uses only the two coordinates
perpendicular to it:

    R_x = sqrt(y² + z²)
    R_y = sqrt(x² + z²)
    R_z = sqrt(x² + y²)

and the second Pappus-Guldinus theorem gives the area of the full revolution:

    d = 2πR
    A = L × d

Example (textbook cylinder): segment (1,0,0)→(1,2,0) about Y gives
L = 2, C = (1,1,0), R = 1, d = 2π, A = 4π ≈ 12.57.

FULL SWEEP ONLY:
----------------
The area is always for a 360° revolution. A partial sweep angle may be shown
by a viewer, but it is never an input here and A is never scaled by angle/360.

Every function is pure: the same segments and axis give identical results.
"""

import logging
import math
from typing import Any, Iterable, Optional, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from .model import (
    EPSILON,
    ZERO_VEC,
    Axis,
    PappusResult,
    PolylineAggregate,
    RevolutionReport,
    Segment,
    Vec3,
)
from .parse import build_segments

logger = logging.getLogger(__name__)


def aggregate(segments: Sequence[Segment]) -> PolylineAggregate:
    """
    Compute total length and length-weighted centroid of a polyline.

    Parameters:
    -----------
    segments : Sequence[Segment]
        Valid segments (may be empty)

    Returns:
    --------
    PolylineAggregate
        total_length = Σ length; centroid = Σ(centroid × length) / total_length,
        or the zero vector when total_length is 0

    Example:
    --------
    >>> agg = aggregate([Segment((1, 0, 0), (1, 2, 0))])
    >>> agg.total_length, agg.centroid
    (2.0, (1.0, 1.0, 0.0))
    """
    if len(segments) == 0:
        return PolylineAggregate(total_length=0.0, centroid=ZERO_VEC, n_segments=0)

    lengths = np.array([seg.length for seg in segments], dtype=float)
    midpoints = np.array([seg.centroid for seg in segments], dtype=float)

    total_length = float(lengths.sum())
    if total_length <= 0.0:
        return PolylineAggregate(total_length=0.0, centroid=ZERO_VEC, n_segments=len(segments))

    # (n,) @ (n, 3) -> weighted sum of midpoints
    weighted = lengths @ midpoints
    centroid = tuple(float(v) for v in weighted / total_length)

    return PolylineAggregate(total_length=total_length, centroid=centroid, n_segments=len(segments))


def axial_distance(point: Vec3, axis: Union[Axis, str]) -> float:
    """
    Perpendicular distance from a point to a coordinate axis.

    Parameters:
    -----------
    point : Vec3
        (x, y, z)
    axis : Axis or str
        Axis of revolution ('x', 'y' or 'z')

    Returns:
    --------
    float
        Norm of the two coordinates orthogonal to the axis (always >= 0)

    Raises:
    -------
    InvalidAxisError
        If axis is not one of the three coordinate axes
    """
    axis = Axis.parse(axis)
    i, j = axis.orthogonal
    return float(math.hypot(point[i], point[j]))


def pappus(total_length: float, centroid: Vec3, axis: Union[Axis, str]) -> PappusResult:
    """
    Apply the Pappus-Guldinus surface theorem for a full revolution.

    Parameters:
    -----------
    total_length : float
        Length of the revolved curve (L)
    centroid : Vec3
        Centroid of the curve
    axis : Axis or str
        Axis of revolution

    Returns:
    --------
    PappusResult
        R = axial_distance(centroid, axis), d = 2πR, area = L × d.
        All zero when total_length is 0 (the centroid is meaningless then).
    """
    if total_length <= 0.0:
        return PappusResult(radius=0.0, circumference=0.0, surface_area=0.0)

    R = axial_distance(centroid, axis)
    d = 2.0 * math.pi * R
    area = total_length * d
    return PappusResult(radius=R, circumference=d, surface_area=area)


def centroid_path_visible(radius: float, sweep_angle: float) -> bool:
    """Whether a viewer should draw the centroid's circular path."""
    # Only a complete sweep matches the circle the area is computed from
    return radius > EPSILON and sweep_angle == 360.0


def evaluate(
    raw_endpoint_pairs: Iterable[Tuple[Any, Any]],
    axis: Union[Axis, str],
) -> RevolutionReport:
    """
    Run the whole pipeline: raw pairs → segments → aggregate → Pappus values.

    Parameters:
    -----------
    raw_endpoint_pairs : Iterable[Tuple[Any, Any]]
        Raw (p1, p2) pairs; see parse.build_segments for accepted shapes
    axis : Axis or str
        Axis of revolution

    Returns:
    --------
    RevolutionReport
    """
    axis = Axis.parse(axis)
    raw = list(raw_endpoint_pairs)
    segments = build_segments(raw)
    return evaluate_segments(segments, axis, n_input_segments=len(raw))


def evaluate_segments(
    segments: Sequence[Segment],
    axis: Union[Axis, str],
    n_input_segments: Optional[int] = None,
) -> RevolutionReport:
    """Evaluate already-built segments (invalid ones are filtered out)."""
    axis = Axis.parse(axis)
    valid = tuple(seg for seg in segments if seg.is_valid)
    agg = aggregate(valid)
    result = pappus(agg.total_length, agg.centroid, axis)

    logger.debug(
        "Evaluated %d segments about %s: L=%.6g R=%.6g A=%.6g",
        len(valid), axis.value, agg.total_length, result.radius, result.surface_area,
    )

    return RevolutionReport(
        axis=axis,
        segments=valid,
        aggregate=agg,
        pappus=result,
        n_input_segments=len(segments) if n_input_segments is None else n_input_segments,
    )


def compare_axes(segments: Sequence[Segment]) -> pd.DataFrame:
    """
    Evaluate the same polyline about each coordinate axis.

    Returns:
    --------
    pd.DataFrame
        One row per axis with columns: axis, total_length, radius,
        circumference, surface_area
    """
    agg = aggregate([seg for seg in segments if seg.is_valid])

    rows = []
    for axis in Axis:
        result = pappus(agg.total_length, agg.centroid, axis)
        rows.append({
            'axis': axis.value,
            'total_length': agg.total_length,
            'radius': result.radius,
            'circumference': result.circumference,
            'surface_area': result.surface_area,
        })

    return pd.DataFrame(rows, columns=['axis', 'total_length', 'radius', 'circumference', 'surface_area'])
