import math

import numpy as np
import pytest

from pappus_kit.engine import aggregate, evaluate, pappus
from pappus_kit.model import Axis, Segment
from pappus_kit.parse import build_segments


def random_polyline(rng: np.random.Generator, n_segments: int = 6, scale: float = 5.0):
    """Connected polyline of random points: p_i → p_{i+1}."""
    points = rng.uniform(-scale, scale, size=(n_segments + 1, 3))
    return [(tuple(points[i]), tuple(points[i + 1])) for i in range(n_segments)]


def test_total_length_is_sum_of_segment_lengths():
    """
    WHAT IS THIS TEST?
    ==================
    The total length must equal Σ |p2 - p1|, whatever order the segments
    are listed in.

    WHY DOES THIS MATTER?
    ====================
    Length is the L in A = L × 2πR. Addition is commutative, so shuffling
    the list may only change the result by floating-point rounding.
    """
    rng = np.random.default_rng(42)
    pairs = random_polyline(rng, n_segments=8)

    expected = sum(float(np.linalg.norm(np.subtract(p2, p1))) for p1, p2 in pairs)
    agg = aggregate(build_segments(pairs))
    assert agg.total_length == pytest.approx(expected, rel=1e-12)

    shuffled = [pairs[i] for i in rng.permutation(len(pairs))]
    agg_shuffled = aggregate(build_segments(shuffled))
    assert agg_shuffled.total_length == pytest.approx(agg.total_length, rel=1e-12)
    np.testing.assert_allclose(agg_shuffled.centroid, agg.centroid, rtol=1e-10, atol=1e-12)

    print("✓ Total length is additive and order-independent")


def test_centroid_inside_bounding_box_of_midpoints():
    """
    WHAT IS THIS TEST?
    ==================
    The centroid is a weighted average of the segment midpoints with
    positive weights, so it lies in their convex hull. We check the
    coordinate-wise bounds, which the hull is contained in.
    """
    rng = np.random.default_rng(7)
    for _ in range(20):
        segments = build_segments(random_polyline(rng, n_segments=int(rng.integers(1, 10))))
        agg = aggregate(segments)
        mids = np.array([seg.centroid for seg in segments])

        tol = 1e-9
        assert np.all(np.array(agg.centroid) >= mids.min(axis=0) - tol)
        assert np.all(np.array(agg.centroid) <= mids.max(axis=0) + tol)


def test_centroid_is_convex_combination_of_midpoints():
    """
    Solve for the weights explicitly: w_i = L_i / L, all positive, summing
    to 1, reproducing the centroid.
    """
    rng = np.random.default_rng(3)
    segments = build_segments(random_polyline(rng, n_segments=5))
    agg = aggregate(segments)

    weights = np.array([seg.length for seg in segments]) / agg.total_length
    mids = np.array([seg.centroid for seg in segments])

    assert np.all(weights > 0)
    assert weights.sum() == pytest.approx(1.0)
    np.testing.assert_allclose(weights @ mids, agg.centroid, rtol=1e-10, atol=1e-12)


@pytest.mark.parametrize("axis", list(Axis))
def test_results_are_non_negative(axis):
    """R, d and A can never be negative, for any axis and any point."""
    rng = np.random.default_rng(11)
    for _ in range(20):
        report = evaluate(random_polyline(rng, n_segments=3), axis)
        assert report.aggregate.total_length >= 0.0
        assert report.pappus.radius >= 0.0
        assert report.pappus.circumference >= 0.0
        assert report.pappus.surface_area >= 0.0


@pytest.mark.parametrize("axis", list(Axis))
def test_area_matches_theorem(axis):
    """A = L × 2π × R exactly as the theorem states."""
    rng = np.random.default_rng(5)
    report = evaluate(random_polyline(rng), axis)

    L = report.aggregate.total_length
    R = report.pappus.radius
    assert report.pappus.circumference == pytest.approx(2 * math.pi * R)
    assert report.pappus.surface_area == pytest.approx(L * 2 * math.pi * R)


@pytest.mark.parametrize("k", [0.5, 2.0, 10.0])
def test_scaling_homogeneity(k):
    """
    WHAT IS THIS TEST?
    ==================
    Scale every coordinate by k (the axis passes through the origin, so it
    stays fixed). Then L → kL, R → kR and A → k²A.

    WHY DOES THIS MATTER?
    ====================
    Area has units of length². A formula that scaled any other way would be
    dimensionally wrong.
    """
    rng = np.random.default_rng(99)
    pairs = random_polyline(rng)
    scaled = [(tuple(k * np.array(p1)), tuple(k * np.array(p2))) for p1, p2 in pairs]

    base = evaluate(pairs, Axis.Y)
    big = evaluate(scaled, Axis.Y)

    assert big.aggregate.total_length == pytest.approx(k * base.aggregate.total_length)
    assert big.pappus.radius == pytest.approx(k * base.pappus.radius)
    assert big.pappus.surface_area == pytest.approx(k * k * base.pappus.surface_area)


def test_repeat_evaluation_is_identical():
    """Same input twice → bit-identical output."""
    rng = np.random.default_rng(1)
    segments = build_segments(random_polyline(rng))

    first = aggregate(segments)
    second = aggregate(segments)
    assert first == second
    assert pappus(first.total_length, first.centroid, Axis.Z) == pappus(
        second.total_length, second.centroid, Axis.Z
    )


def test_degenerate_segment_changes_nothing():
    """
    A zero-length segment next to a valid one behaves exactly like the valid
    segment on its own.
    """
    valid = ((1, 0, 0), (1, 2, 0))
    degenerate = ((3, 3, 3), (3, 3, 3))

    alone = evaluate([valid], Axis.Y)
    mixed = evaluate([degenerate, valid], Axis.Y)

    assert mixed.segments == alone.segments
    assert mixed.aggregate.total_length == alone.aggregate.total_length
    assert mixed.aggregate.centroid == alone.aggregate.centroid
    assert mixed.pappus == alone.pappus


def test_segment_order_preserved():
    """Aggregates ignore order, but the segment list itself keeps it."""
    pairs = [((0, 0, 0), (1, 0, 0)), ((1, 0, 0), (1, 1, 0)), ((1, 1, 0), (0, 1, 0))]
    segments = build_segments(pairs)
    assert [seg.p1 for seg in segments] == [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (1.0, 1.0, 0.0)]


def test_no_nan_for_empty_or_all_degenerate():
    for pairs in ([], [((1, 1, 1), (1, 1, 1))], [((None, None, None), ("", "", ""))]):
        report = evaluate(pairs, Axis.X)
        values = [
            report.aggregate.total_length,
            *report.aggregate.centroid,
            report.pappus.radius,
            report.pappus.circumference,
            report.pappus.surface_area,
        ]
        assert all(v == 0.0 for v in values)
        assert all(math.isfinite(v) for v in values)


def test_segment_equality_uses_values():
    assert Segment((0, 0, 0), (1, 0, 0)) == Segment((0.0, 0.0, 0.0), (1.0, 0.0, 0.0))
