"""
Tests for the geometry kernel: circle point, function segments, asymptotes,
arc and tangent-line intercepts.
"""

import math

import numpy as np
import pytest

from trigcircle.model.geometry_primitives import ORIGIN, Point
from trigcircle.model.geometry_utils import arc_points, clip_to_extent, wrap_angle
from trigcircle.model.trig import (
    TrigFunction,
    circle_point,
    compute_geometry,
    compute_segments,
    tangent_intercepts,
)

SAMPLE_ANGLES = [0.1, 0.7, 1.3, 2.0, 2.9, 3.5, 4.4, 5.1, 6.0, -0.8, 12.5]


def _close(p: Point, x: float, y: float, tol: float = 1e-9) -> bool:
    return math.isclose(p.x, x, abs_tol=tol) and math.isclose(p.y, y, abs_tol=tol)


# --- Circle point ---


class TestCirclePoint:
    @pytest.mark.parametrize("theta", np.linspace(-10.0, 10.0, 41))
    def test_pythagorean_identity(self, theta):
        p = circle_point(theta)
        assert math.isclose(p.x ** 2 + p.y ** 2, 1.0, rel_tol=1e-12)

    def test_zero(self):
        assert _close(circle_point(0.0), 1.0, 0.0)

    def test_quarter_turn(self):
        assert _close(circle_point(math.pi / 2), 0.0, 1.0)


# --- Values ---


class TestRatioIdentities:
    @pytest.mark.parametrize("theta", SAMPLE_ANGLES)
    def test_values_match_ratios(self, theta):
        segments = compute_segments(theta)
        s, c = math.sin(theta), math.cos(theta)

        assert math.isclose(segments[TrigFunction.SIN].value, s)
        assert math.isclose(segments[TrigFunction.COS].value, c)
        assert math.isclose(segments[TrigFunction.TAN].value, s / c)
        assert math.isclose(segments[TrigFunction.COT].value, c / s)
        assert math.isclose(segments[TrigFunction.SEC].value, 1 / c)
        assert math.isclose(segments[TrigFunction.CSC].value, 1 / s)

    def test_fixed_order(self):
        assert list(compute_segments(1.0)) == [
            TrigFunction.SIN,
            TrigFunction.COS,
            TrigFunction.TAN,
            TrigFunction.COT,
            TrigFunction.SEC,
            TrigFunction.CSC,
        ]


# --- Segment construction ---


class TestSegmentEndpoints:
    def test_quarter_pi(self):
        theta = math.pi / 4
        h = math.sqrt(0.5)
        seg = compute_segments(theta)

        assert seg[TrigFunction.COS].start == ORIGIN
        assert _close(seg[TrigFunction.COS].end, h, 0.0)
        assert _close(seg[TrigFunction.SIN].start, h, 0.0)
        assert _close(seg[TrigFunction.SIN].end, h, h)
        assert _close(seg[TrigFunction.TAN].start, 1.0, 0.0)
        assert _close(seg[TrigFunction.TAN].end, 1.0, 1.0)
        assert _close(seg[TrigFunction.COT].start, 0.0, 1.0)
        assert _close(seg[TrigFunction.COT].end, 1.0, 1.0)
        assert seg[TrigFunction.SEC].start == ORIGIN
        assert _close(seg[TrigFunction.SEC].end, 1.0, 1.0)
        assert seg[TrigFunction.CSC].start == ORIGIN
        assert _close(seg[TrigFunction.CSC].end, 1.0, 1.0)

    @pytest.mark.parametrize("theta", SAMPLE_ANGLES)
    def test_segment_lengths_match_values(self, theta):
        seg = compute_segments(theta)
        for function in TrigFunction:
            assert math.isclose(seg[function].line.length, abs(seg[function].value), rel_tol=1e-9)

    def test_sec_passes_through_circle_point(self):
        theta = 0.9
        p = circle_point(theta)
        sec = compute_segments(theta)[TrigFunction.SEC]
        # P lies on the segment at parameter cos(theta)
        t = math.cos(theta)
        assert _close(Point(sec.end.x * t, sec.end.y * t), p.x, p.y)

    def test_second_quadrant_tan_is_negative(self):
        seg = compute_segments(2.5)
        assert seg[TrigFunction.TAN].end.y < 0
        assert seg[TrigFunction.TAN].end.x == 1.0


# --- Asymptotes ---


class TestAsymptotes:
    @pytest.mark.parametrize("theta", [math.pi / 2, 3 * math.pi / 2, -math.pi / 2, 5 * math.pi / 2])
    def test_tan_and_sec_undefined(self, theta):
        seg = compute_segments(theta)
        for function in (TrigFunction.TAN, TrigFunction.SEC):
            assert not seg[function].defined
            assert seg[function].value is None
            assert seg[function].start is None
            assert seg[function].end is None
            assert seg[function].line is None
        assert seg[TrigFunction.COT].defined
        assert seg[TrigFunction.CSC].defined

    @pytest.mark.parametrize("theta", [0.0, math.pi, 2 * math.pi, -math.pi])
    def test_cot_and_csc_undefined(self, theta):
        seg = compute_segments(theta)
        assert not seg[TrigFunction.COT].defined
        assert not seg[TrigFunction.CSC].defined
        assert seg[TrigFunction.TAN].defined
        assert seg[TrigFunction.SEC].defined

    @pytest.mark.parametrize("theta", [0.0, math.pi / 2, math.pi, 3 * math.pi / 2])
    def test_sin_and_cos_always_defined(self, theta):
        seg = compute_segments(theta)
        assert seg[TrigFunction.SIN].defined
        assert seg[TrigFunction.COS].defined

    @pytest.mark.parametrize("theta", [0.0, math.pi / 2, math.pi, 3 * math.pi / 2])
    def test_no_non_finite_coordinates(self, theta):
        geometry = compute_geometry(theta)
        for segment in geometry.defined_segments:
            for p in (segment.start, segment.end):
                assert math.isfinite(p.x) and math.isfinite(p.y)
            assert math.isfinite(segment.value)

    def test_just_off_asymptote_is_defined(self):
        seg = compute_segments(math.pi / 2 - 1e-6)
        assert seg[TrigFunction.TAN].defined
        assert seg[TrigFunction.TAN].value > 1e5


# --- Auxiliary geometry ---


class TestAuxiliaryGeometry:
    def test_triangle(self):
        geometry = compute_geometry(1.0)
        tri = geometry.triangle
        assert tri.origin == ORIGIN
        assert _close(tri.foot, math.cos(1.0), 0.0)
        assert _close(tri.apex, math.cos(1.0), math.sin(1.0))
        assert math.isclose(tri.hypotenuse.length, 1.0)
        assert math.isclose(tri.adjacent.length ** 2 + tri.opposite.length ** 2, 1.0)

    def test_tangent_intercepts(self):
        theta = math.pi / 3
        x_hit, y_hit = tangent_intercepts(circle_point(theta))
        assert _close(x_hit, 2.0, 0.0)
        assert _close(y_hit, 0.0, 2.0 / math.sqrt(3))

    def test_tangent_intercepts_at_asymptotes(self):
        x_hit, y_hit = tangent_intercepts(circle_point(math.pi / 2))
        assert x_hit is None
        assert _close(y_hit, 0.0, 1.0)

        x_hit, y_hit = tangent_intercepts(circle_point(0.0))
        assert _close(x_hit, 1.0, 0.0)
        assert y_hit is None

    def test_geometry_carries_intercepts(self):
        geometry = compute_geometry(math.pi / 4)
        assert _close(geometry.x_intercept, math.sqrt(2.0), 0.0)
        assert _close(geometry.y_intercept, 0.0, math.sqrt(2.0))

    def test_geometry_is_deterministic(self):
        a = compute_geometry(2.2)
        b = compute_geometry(2.2)
        assert a.segments == b.segments
        assert np.array_equal(a.arc, b.arc)


class TestArc:
    def test_zero_sweep_is_empty(self):
        assert arc_points(0.0).shape == (0, 2)

    def test_half_turn(self):
        pts = arc_points(math.pi, resolution=128)
        assert pts.shape == (65, 2)
        assert np.allclose(pts[0], [1.0, 0.0])
        assert np.allclose(pts[-1], [-1.0, 0.0])
        assert np.allclose(np.hypot(pts[:, 0], pts[:, 1]), 1.0)

    def test_small_sweep_gets_one_segment(self):
        assert arc_points(0.001).shape == (2, 2)

    def test_invalid_resolution(self):
        with pytest.raises(ValueError):
            arc_points(1.0, resolution=0)

    def test_geometry_arc_uses_wrapped_angle(self):
        geometry = compute_geometry(2 * math.pi + 0.5)
        assert np.allclose(geometry.arc[-1], [math.cos(0.5), math.sin(0.5)])
        assert len(geometry.arc) == len(arc_points(0.5))


class TestHelpers:
    def test_wrap_angle(self):
        assert math.isclose(wrap_angle(7.0), 7.0 - 2 * math.pi)
        assert math.isclose(wrap_angle(-1.0), 2 * math.pi - 1.0)
        assert wrap_angle(0.0) == 0.0
        assert 0.0 <= wrap_angle(-1e-18) < 2 * math.pi

    def test_clip_inside_box_is_unchanged(self):
        end = Point(1.0, 5.0)
        assert clip_to_extent(ORIGIN, end, 10.0) is end

    def test_clip_stays_on_line(self):
        end = clip_to_extent(ORIGIN, Point(1.0, 1e8), 100.0)
        assert _close(end, 1e-6, 100.0)

    def test_clip_from_offset_start(self):
        end = clip_to_extent(Point(1.0, 0.0), Point(1.0, -1e9), 100.0)
        assert _close(end, 1.0, -100.0)
