# pappus_kit - Surface of Revolution Geometry
"""
PAPPUS_KIT: Polyline Revolution Engine
======================================

This package provides:
- Tolerant parsing of segment endpoints from free-form numeric input
- Length and length-weighted centroid of a 3D polyline
- Surface area of the full revolution about X, Y or Z (Pappus-Guldinus)
- Display strings and CSV/JSON exports of the results

ARCHITECTURE:
-------------
    config.py       Application defaults (CONFIG)
    model.py        Axis, Segment, PolylineAggregate, PappusResult
    parse.py        Raw coordinates → valid Segment list
    engine.py       aggregate, axial_distance, pappus, evaluate
    report.py       Display strings ("N/A" centroid when there is no length)
    export.py       pandas segment tables, CSV and JSON documents
"""

from .model import (
    Axis,
    InvalidAxisError,
    PappusResult,
    PolylineAggregate,
    RevolutionReport,
    Segment,
)
from .parse import build_segments, coerce_coordinate, segments_from_rows
from .engine import aggregate, axial_distance, pappus, evaluate, evaluate_segments, compare_axes

__version__ = "0.1.0"

__all__ = [
    'Axis',
    'InvalidAxisError',
    'PappusResult',
    'PolylineAggregate',
    'RevolutionReport',
    'Segment',
    'build_segments',
    'coerce_coordinate',
    'segments_from_rows',
    'aggregate',
    'axial_distance',
    'pappus',
    'evaluate',
    'evaluate_segments',
    'compare_axes',
]
