# pappus_kit/parse.py
"""
Tolerant input parsing: raw endpoint data → validated Segment list.

Coordinates come from free-form, live-edited numeric fields. A field that is
empty, half-typed or garbage must never stop a recomputation, so every
coordinate is coerced to a float (0.0 when nothing usable is there) and
zero-length segments are dropped instead of reported.
"""

import logging
import math
import re
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from .model import Segment, Vec3

logger = logging.getLogger(__name__)

# Leading decimal number, as a numeric entry field would read it
_NUMBER_PREFIX = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')


def coerce_coordinate(value: Any) -> float:
    """
    Convert one raw coordinate to a float, never raising.

    - int/float pass through
    - strings are read from their leading numeric prefix ("2.5m" → 2.5)
    - None, empty or unparseable values → 0.0
    - non-finite or unconvertible results (nan, inf, 10**400) → 0.0

    Examples:
    ---------
    >>> coerce_coordinate("  -1.5e1 ")
    -15.0
    >>> coerce_coordinate("abc")
    0.0
    """
    if value is None or isinstance(value, bool):
        return 0.0

    try:
        if isinstance(value, (int, float)):
            result = float(value)
        else:
            match = _NUMBER_PREFIX.match(str(value).strip())
            if match is None:
                return 0.0
            result = float(match.group(0))
    except (OverflowError, ValueError, TypeError):
        return 0.0

    if not math.isfinite(result):
        return 0.0
    return result


def coerce_point(point: Optional[Any]) -> Vec3:
    """
    Convert a raw point to an (x, y, z) tuple.

    Accepts a mapping with 'x'/'y'/'z' keys, a sequence of up to three values
    (missing components are 0.0) or None (the origin).
    """
    if point is None:
        return (0.0, 0.0, 0.0)

    if isinstance(point, Mapping):
        return (
            coerce_coordinate(point.get('x')),
            coerce_coordinate(point.get('y')),
            coerce_coordinate(point.get('z')),
        )

    values = list(point)[:3]
    values += [None] * (3 - len(values))
    return tuple(coerce_coordinate(v) for v in values)


def build_segments(raw_endpoint_pairs: Iterable[Tuple[Any, Any]]) -> List[Segment]:
    """
    Build the ordered list of valid segments from raw (p1, p2) pairs.

    Parameters:
    -----------
    raw_endpoint_pairs : Iterable[Tuple[Any, Any]]
        Ordered pairs of raw points (see coerce_point)

    Returns:
    --------
    List[Segment]
        Valid segments in input order. Degenerate segments (length <= EPSILON)
        are left out with no signal to the caller.
    """
    segments = []
    for i, (raw_p1, raw_p2) in enumerate(raw_endpoint_pairs):
        seg = Segment(coerce_point(raw_p1), coerce_point(raw_p2))
        if not seg.is_valid:
            logger.debug("Dropping degenerate segment %d: %s -> %s", i, seg.p1, seg.p2)
            continue
        segments.append(seg)
    return segments


def segments_from_rows(rows: Iterable[Sequence[Any]]) -> List[Segment]:
    """
    Build segments from flat six-value rows: p1x, p1y, p1z, p2x, p2y, p2z.

    Short rows are padded with 0.0.
    """
    pairs = []
    for row in rows:
        values = list(row)[:6]
        values += [None] * (6 - len(values))
        pairs.append((values[0:3], values[3:6]))
    return build_segments(pairs)
