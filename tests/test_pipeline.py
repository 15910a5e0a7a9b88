"""Tests for the curve collection pipeline."""
import math

import numpy as np
import pytest

from curves3d.model.curves import Circle, CurveKind, Ellipse, Helix
from curves3d.pipeline import (
    CURVE_KINDS,
    CurveSample,
    PipelineResult,
    evaluate,
    filter_by_kind,
    filter_circles,
    make_rng,
    populate,
    run_pipeline,
    sort_by_radius,
    total_radius,
)


def radii(circles):
    return [c.radius for c in circles]


# ---------------------------------------------------------------------------
# Populate
# ---------------------------------------------------------------------------

class TestPopulate:

    def test_count(self):
        assert len(populate(25, make_rng(1))) == 25

    def test_zero_curves(self):
        assert populate(0, make_rng(1)) == []

    def test_attributes_in_range(self):
        curves = populate(200, make_rng(7), low=2.0, high=3.0)
        for curve in curves:
            if isinstance(curve, Ellipse):
                values = [curve.radius_x, curve.radius_y]
            elif isinstance(curve, Helix):
                values = [curve.radius, curve.pitch]
            else:
                values = [curve.radius]
            for v in values:
                assert 2.0 <= v < 3.0

    def test_all_kinds_drawn(self):
        curves = populate(300, make_rng(3))
        kinds = {c.kind for c in curves}
        assert kinds == set(CURVE_KINDS) == set(CurveKind)

    def test_kinds_roughly_uniform(self):
        curves = populate(3000, make_rng(11))
        for kind in CURVE_KINDS:
            share = sum(c.kind is kind for c in curves) / len(curves)
            assert share == pytest.approx(1 / 3, abs=0.05)

    def test_seed_is_reproducible(self):
        a = populate(20, make_rng(42))
        b = populate(20, make_rng(42))
        assert [repr(c) for c in a] == [repr(c) for c in b]

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            populate(-1, make_rng(0))

    @pytest.mark.parametrize("low, high", [
        (0.0, 10.0),
        (-1.0, 2.0),
        (5.0, 5.0),
        (10.0, 1.0),
        (float("nan"), 10.0),
        (1.0, float("nan")),
        (1.0, float("inf")),
    ])
    def test_invalid_range_rejected(self, low, high):
        with pytest.raises(ValueError, match="range"):
            populate(3, make_rng(0), low=low, high=high)


# ---------------------------------------------------------------------------
# Evaluate
# ---------------------------------------------------------------------------

class TestEvaluate:

    def test_one_sample_per_curve_in_order(self, mixed_curves):
        t = math.pi / 4
        samples = evaluate(mixed_curves, t)
        assert len(samples) == len(mixed_curves)
        for curve, sample in zip(mixed_curves, samples):
            assert isinstance(sample, CurveSample)
            assert sample.curve is curve
            assert sample.t == t
            assert sample.position == curve.position(t)
            assert sample.tangent == curve.tangent(t)

    def test_empty(self):
        assert evaluate([], 1.0) == []


# ---------------------------------------------------------------------------
# Filter
# ---------------------------------------------------------------------------

class TestFilter:

    def test_keeps_circles_in_order(self, mixed_curves):
        circles = filter_circles(mixed_curves)
        assert radii(circles) == [3.0, 1.0, 2.0]
        assert all(isinstance(c, Circle) for c in circles)

    def test_shares_references(self, mixed_curves):
        circles = filter_circles(mixed_curves)
        assert circles[0] is mixed_curves[0]
        assert circles[1] is mixed_curves[2]
        assert circles[2] is mixed_curves[4]

    def test_returns_new_list(self, mixed_curves):
        before = list(mixed_curves)
        circles = filter_circles(mixed_curves)
        circles.clear()
        assert mixed_curves == before

    def test_filter_other_kinds(self, mixed_curves):
        assert filter_by_kind(mixed_curves, CurveKind.ELLIPSE) == [mixed_curves[1]]
        assert filter_by_kind(mixed_curves, CurveKind.HELIX) == [mixed_curves[3]]

    def test_filter_by_kind_checks_tag(self, mixed_curves):
        class TaggedEllipse(Ellipse):
            kind = CurveKind.CIRCLE

        tagged = TaggedEllipse(1.0, 2.0)
        circles = filter_circles([tagged, *mixed_curves])
        assert circles[0] is tagged
        assert len(circles) == 4

    def test_no_circles(self, no_circles):
        assert filter_circles(no_circles) == []


# ---------------------------------------------------------------------------
# Sort and aggregate
# ---------------------------------------------------------------------------

class TestSortAndSum:

    def test_sort_ascending(self, mixed_curves):
        circles = filter_circles(mixed_curves)
        result = sort_by_radius(circles)
        assert result is circles
        assert radii(circles) == [1.0, 2.0, 3.0]

    def test_sum(self, mixed_curves):
        circles = sort_by_radius(filter_circles(mixed_curves))
        assert total_radius(circles) == 6.0

    def test_sort_is_stable(self):
        a = Circle(2.0)
        b = Circle(2.0)
        circles = [a, b]
        sort_by_radius(circles)
        assert circles[0] is a
        assert circles[1] is b

    def test_stable_among_mixed_radii(self):
        a, b, c, d = Circle(2.0), Circle(1.0), Circle(2.0), Circle(1.0)
        circles = [a, b, c, d]
        sort_by_radius(circles)
        assert [id(x) for x in circles] == [id(b), id(d), id(a), id(c)]

    def test_normalized_radii_tie(self):
        # both become radius 1.0
        a, b = Circle(-3.0), Circle(0.0)
        circles = [a, b]
        sort_by_radius(circles)
        assert circles == [a, b]

    def test_empty(self, no_circles):
        circles = sort_by_radius(filter_circles(no_circles))
        assert circles == []
        total = total_radius(circles)
        assert total == 0.0
        assert isinstance(total, float)

    def test_sum_independent_of_order(self):
        values = make_rng(5).uniform(1.0, 10.0, size=50)
        circles = [Circle(float(v)) for v in values]
        unsorted_sum = total_radius(circles)
        sort_by_radius(circles)
        assert total_radius(circles) == unsorted_sum
        assert total_radius(circles) == pytest.approx(float(np.sum(values)))

    def test_resort_is_idempotent(self, mixed_curves):
        circles = sort_by_radius(filter_circles(mixed_curves))
        order = list(circles)
        total = total_radius(circles)
        sort_by_radius(circles)
        assert all(x is y for x, y in zip(circles, order))
        assert total_radius(circles) == total


# ---------------------------------------------------------------------------
# Full pipeline
# ---------------------------------------------------------------------------

class TestRunPipeline:

    def test_result(self):
        result = run_pipeline(n=30, t=math.pi / 4, rng=make_rng(2024))
        assert isinstance(result, PipelineResult)
        assert len(result.curves) == 30
        assert len(result.samples) == 30
        assert radii(result.circles) == sorted(radii(result.circles))
        assert result.radius_sum == pytest.approx(sum(radii(result.circles)))

    def test_circles_are_exactly_the_circles_of_the_collection(self):
        result = run_pipeline(n=40, t=0.5, rng=make_rng(9))
        expected = [c for c in result.curves if isinstance(c, Circle)]
        assert len(result.circles) == len(expected)
        for circle in result.circles:
            assert any(circle is c for c in expected)

    def test_reproducible(self):
        a = run_pipeline(n=10, t=1.0, rng=make_rng(123))
        b = run_pipeline(n=10, t=1.0, rng=make_rng(123))
        assert [s.position for s in a.samples] == [s.position for s in b.samples]
        assert a.radius_sum == b.radius_sum

    def test_no_curves(self):
        result = run_pipeline(n=0, t=1.0, rng=make_rng(0))
        assert result.curves == []
        assert result.circles == []
        assert result.radius_sum == 0.0
