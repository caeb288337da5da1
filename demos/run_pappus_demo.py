#!/usr/bin/env python3
"""
RUN_PAPPUS_DEMO: Surface of Revolution by the Pappus-Guldinus Theorem
====================================================================

This demo walks through a complete evaluation:
1. Define polyline segments (or take them from the command line)
2. Build the valid segment list
3. Compute total length and centroid
4. Compute centroid radius, centroid path and swept surface area
5. Compare the three possible axes of revolution

With no arguments it revolves the textbook cylinder wall
(1,0,0)→(1,2,0) about Y, whose lateral area is 4π ≈ 12.57.

Run with:
    python demos/run_pappus_demo.py
    python demos/run_pappus_demo.py --axis x --segment 0 1 0 2 1 0 --segment 2 1 0 2 3 0
"""

import argparse
import math
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pappus_kit.engine import aggregate, compare_axes, evaluate_segments, pappus
from pappus_kit.model import Axis
from pappus_kit.parse import segments_from_rows
from pappus_kit.report import format_report


DEFAULT_SEGMENTS = [
    [1.0, 0.0, 0.0, 1.0, 2.0, 0.0],
]


def print_header(text: str):
    """Print a formatted section header."""
    print("\n" + "=" * 60)
    print(f"  {text}")
    print("=" * 60)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Pappus-Guldinus surface area of a revolved polyline")
    parser.add_argument(
        "--segment",
        nargs=6,
        action="append",
        metavar=("P1X", "P1Y", "P1Z", "P2X", "P2Y", "P2Z"),
        help="Segment endpoints; repeat for each segment, in polyline order",
    )
    parser.add_argument(
        "--axis",
        default="y",
        type=Axis.parse,
        help="Axis of revolution: x, y or z (default: y)",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    rows = args.segment or DEFAULT_SEGMENTS
    axis = args.axis

    print_header("SURFACE OF REVOLUTION (PAPPUS-GULDINUS)")

    # =========================================================================
    # STEP 1: BUILD SEGMENTS
    # =========================================================================
    print_header("STEP 1: Segments")

    segments = segments_from_rows(rows)
    print(f"\n{len(rows)} segment(s) given, {len(segments)} valid:")
    for i, seg in enumerate(segments):
        print(f"  Segment {i}: {seg.p1} -> {seg.p2}  L={seg.length:.4f}")

    if len(segments) < len(rows):
        print(f"  ({len(rows) - len(segments)} zero-length segment(s) ignored)")

    # =========================================================================
    # STEP 2: LENGTH AND CENTROID
    # =========================================================================
    print_header("STEP 2: Length and Centroid")

    agg = aggregate(segments)
    print(f"\nTotal length L = {agg.total_length:.4f}")
    if agg.has_length:
        cx, cy, cz = agg.centroid
        print(f"Centroid C = ({cx:.4f}, {cy:.4f}, {cz:.4f})")
    else:
        print("Centroid C = N/A (no valid segments)")

    # =========================================================================
    # STEP 3: PAPPUS
    # =========================================================================
    print_header(f"STEP 3: Revolution about {axis.name}")

    result = pappus(agg.total_length, agg.centroid, axis)
    print(f"\nR = {result.radius:.4f}")
    print(f"d = 2πR = {result.circumference:.4f}")
    print(f"A = L × d = {result.surface_area:.4f}")
    if agg.has_length and result.radius > 0:
        print(f"  (A / π = {result.surface_area / math.pi:.4f})")

    report = evaluate_segments(segments, axis, n_input_segments=len(rows))
    print("\nDisplay values:")
    for key, value in format_report(report).items():
        print(f"  {key:>14}: {value}")

    # =========================================================================
    # STEP 4: ALL AXES
    # =========================================================================
    print_header("STEP 4: Compare Axes")
    print()
    print(compare_axes(segments).to_string(index=False, float_format=lambda v: f"{v:.4f}"))

    return report


if __name__ == "__main__":
    main()
