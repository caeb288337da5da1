# pappus_kit/report.py
"""
Display formatting for evaluation results.

A viewer shows five values. When the polyline has no length, the centroid is
shown as "N/A" (it does not exist), while the scalar quantities are shown as
zero. The two cases are deliberately different.
"""

from typing import Any, Dict, Optional

from .config import CONFIG
from .model import RevolutionReport

NOT_APPLICABLE = "N/A"


def _fmt(value: float, decimals: int) -> str:
    return f"{value:.{decimals}f}"


def format_report(report: RevolutionReport, decimals: Optional[int] = None) -> Dict[str, str]:
    """
    Format a report as display strings.

    Returns:
    --------
    Dict[str, str]
        Keys: total_length, centroid, radius, circumference, surface_area
    """
    if decimals is None:
        decimals = CONFIG.display_decimals

    agg = report.aggregate
    result = report.pappus
    zero = _fmt(0.0, decimals)

    if not agg.has_length:
        return {
            'total_length': _fmt(agg.total_length, decimals),
            'centroid': NOT_APPLICABLE,
            'radius': zero,
            'circumference': zero,
            'surface_area': zero,
        }

    cx, cy, cz = agg.centroid
    return {
        'total_length': _fmt(agg.total_length, decimals),
        'centroid': f"({_fmt(cx, decimals)}, {_fmt(cy, decimals)}, {_fmt(cz, decimals)})",
        'radius': _fmt(result.radius, decimals),
        'circumference': _fmt(result.circumference, decimals),
        'surface_area': _fmt(result.surface_area, decimals),
    }


def report_metrics(report: RevolutionReport) -> Dict[str, Any]:
    """
    Raw numeric values of a report, for JSON responses and exports.

    centroid is None when the polyline has no length.
    """
    agg = report.aggregate
    return {
        'axis': report.axis.value,
        'n_segments': len(report.segments),
        'n_dropped': report.n_dropped,
        'total_length': agg.total_length,
        'centroid': list(agg.centroid) if agg.has_length else None,
        'radius': report.pappus.radius,
        'circumference': report.pappus.circumference,
        'surface_area': report.pappus.surface_area,
    }
