# pappus_kit/export.py
"""
Export helpers: segment tables (CSV) and full evaluation documents (JSON).
"""

import json
from typing import Optional, Sequence

import pandas as pd

from .model import RevolutionReport, Segment
from .report import format_report, report_metrics

SEGMENT_COLUMNS = [
    'segment',
    'p1x', 'p1y', 'p1z',
    'p2x', 'p2y', 'p2z',
    'length',
    'cx', 'cy', 'cz',
]

EXPORT_VERSION = "1.0"


def segments_frame(segments: Sequence[Segment]) -> pd.DataFrame:
    """
    Tabulate segments, one row each, in polyline order.

    Columns: segment (0-based position), endpoints, length, midpoint.
    """
    rows = []
    for i, seg in enumerate(segments):
        rows.append([i, *seg.p1, *seg.p2, seg.length, *seg.centroid])
    return pd.DataFrame(rows, columns=SEGMENT_COLUMNS)


def generate_segments_csv(report: RevolutionReport, decimals: int = 6) -> str:
    """
    Generate a CSV segment table for a report.

    Returns CSV content as a string.
    """
    df = segments_frame(report.segments).round(decimals)
    return df.to_csv(index=False)


def generate_report_json(report: RevolutionReport, sweep_angle: Optional[float] = None) -> str:
    """
    Generate a JSON document describing one evaluation.

    sweep_angle is carried along for viewers only; it plays no part in any
    value in the document.

    Returns JSON content as a string.
    """
    model = {
        "version": EXPORT_VERSION,
        "type": "surface_of_revolution",
        "axis": report.axis.value,
        "sweep_angle": sweep_angle,
        "metrics": report_metrics(report),
        "display": format_report(report),
        "segments": json.loads(segments_frame(report.segments).to_json(orient='records')),
    }
    return json.dumps(model, indent=2)
