"""
Trigonometric Geometry Kernel
=============================
Maps an angle to the classical unit-circle construction of the six
trigonometric functions.

Why is this file needed?
------------------------
1. Single source of truth: every frame derives all six segments from one
   angle in one call, so no segment can be computed from a stale angle.
2. Asymptotes: tan/sec (cos θ = 0) and cot/csc (sin θ = 0) are reported as
   undefined segments instead of infinite coordinates, so the renderer never
   sees NaN or inf.

Construction (unit circle at the origin, P = (cos θ, sin θ)):
    cos: O -> (cos θ, 0)                 adjacent side
    sin: (cos θ, 0) -> P                 opposite side
    tan: (1, 0) -> (1, tan θ)            on the vertical tangent line x = 1
    sec: O -> (1, tan θ)                 hypotenuse extended to x = 1
    cot: (0, 1) -> (cot θ, 1)            on the horizontal tangent line y = 1
    csc: O -> (cot θ, 1)                 hypotenuse extended to y = 1

Classes:
    TrigFunction: Identity tag of each function.
    FunctionSegment: One function's segment and value.
    RightTriangle: The triangle O, A, P implied by θ.
    TrigGeometry: Everything derived from one θ.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
import math
from typing import TYPE_CHECKING, Optional

import numpy as np

from trigcircle.model.geometry_primitives import ORIGIN, Line, Point
from trigcircle.model.geometry_utils import arc_points, wrap_angle

if TYPE_CHECKING:
    import numpy.typing as npt

# |cos θ| or |sin θ| at or below this counts as zero
ASYMPTOTE_EPS = 1e-9

UNIT_RADIUS = 1.0


class TrigFunction(StrEnum):
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    COT = "cot"
    SEC = "sec"
    CSC = "csc"

    @property
    def label(self) -> str:
        return f"{self.value} θ"


@dataclass(frozen=True)
class FunctionSegment:
    """
    The drawable segment of one trigonometric function at a given angle.

    `start`, `end` and `value` are all None when the function is undefined.
    """
    function: TrigFunction
    start: Optional[Point] = None
    end: Optional[Point] = None
    value: Optional[float] = None

    @property
    def defined(self) -> bool:
        return self.value is not None

    @property
    def line(self) -> Optional[Line]:
        if not self.defined:
            return None
        return Line(self.start, self.end)

    @classmethod
    def undefined(cls, function: TrigFunction) -> FunctionSegment:
        return cls(function=function)


@dataclass(frozen=True)
class RightTriangle:
    """Right triangle O (origin), A (foot on the x-axis), P (point on the circle)."""
    origin: Point
    foot: Point
    apex: Point

    @property
    def adjacent(self) -> Line:
        return Line(self.origin, self.foot)

    @property
    def opposite(self) -> Line:
        return Line(self.foot, self.apex)

    @property
    def hypotenuse(self) -> Line:
        return Line(self.origin, self.apex)


@dataclass(frozen=True)
class TrigGeometry:
    """All geometry derived from a single angle."""
    theta: float
    point: Point
    segments: dict[TrigFunction, FunctionSegment]
    triangle: RightTriangle
    arc: npt.NDArray[np.float64] = field(repr=False, compare=False)
    # Where the tangent line at P crosses the x and y axes
    x_intercept: Optional[Point] = None
    y_intercept: Optional[Point] = None

    def __getitem__(self, function: TrigFunction) -> FunctionSegment:
        return self.segments[function]

    def value(self, function: TrigFunction) -> Optional[float]:
        return self.segments[function].value

    @property
    def defined_segments(self) -> list[FunctionSegment]:
        return [s for s in self.segments.values() if s.defined]


def circle_point(theta: float) -> Point:
    """P(θ) = (cos θ, sin θ)."""
    return Point(math.cos(theta), math.sin(theta))


def compute_segments(theta: float) -> dict[TrigFunction, FunctionSegment]:
    """
    Compute the six function segments for theta, in a fixed order
    (sin, cos, tan, cot, sec, csc).
    """
    sin = math.sin(theta)
    cos = math.cos(theta)
    foot = Point(cos, 0.0)

    segments = {
        TrigFunction.SIN: FunctionSegment(TrigFunction.SIN, foot, Point(cos, sin), sin),
        TrigFunction.COS: FunctionSegment(TrigFunction.COS, ORIGIN, foot, cos),
    }

    if abs(cos) > ASYMPTOTE_EPS:
        tan = sin / cos
        tangent_point = Point(UNIT_RADIUS, tan)
        segments[TrigFunction.TAN] = FunctionSegment(
            TrigFunction.TAN, Point(UNIT_RADIUS, 0.0), tangent_point, tan
        )
    else:
        segments[TrigFunction.TAN] = FunctionSegment.undefined(TrigFunction.TAN)

    if abs(sin) > ASYMPTOTE_EPS:
        cot = cos / sin
        cotangent_point = Point(cot, UNIT_RADIUS)
        segments[TrigFunction.COT] = FunctionSegment(
            TrigFunction.COT, Point(0.0, UNIT_RADIUS), cotangent_point, cot
        )
    else:
        segments[TrigFunction.COT] = FunctionSegment.undefined(TrigFunction.COT)

    if segments[TrigFunction.TAN].defined:
        segments[TrigFunction.SEC] = FunctionSegment(
            TrigFunction.SEC, ORIGIN, segments[TrigFunction.TAN].end, 1.0 / cos
        )
    else:
        segments[TrigFunction.SEC] = FunctionSegment.undefined(TrigFunction.SEC)

    if segments[TrigFunction.COT].defined:
        segments[TrigFunction.CSC] = FunctionSegment(
            TrigFunction.CSC, ORIGIN, segments[TrigFunction.COT].end, 1.0 / sin
        )
    else:
        segments[TrigFunction.CSC] = FunctionSegment.undefined(TrigFunction.CSC)

    return segments


def tangent_intercepts(point: Point) -> tuple[Optional[Point], Optional[Point]]:
    """
    Axis intercepts of the line tangent to the unit circle at `point`:
    (sec θ, 0) on the x-axis and (0, csc θ) on the y-axis.

    The tangent line is x·cos θ + y·sin θ = 1, so an intercept is missing
    exactly when the matching function is undefined.
    """
    x_hit = Point(1.0 / point.x, 0.0) if abs(point.x) > ASYMPTOTE_EPS else None
    y_hit = Point(0.0, 1.0 / point.y) if abs(point.y) > ASYMPTOTE_EPS else None
    return x_hit, y_hit


def compute_geometry(theta: float, *, arc_resolution: int = 128) -> TrigGeometry:
    """
    Derive the full construction for theta. Pure and deterministic.

    Args:
        theta: Angle in radians.
        arc_resolution: Arc segments for a full turn.

    Returns:
        TrigGeometry with all six segments, the right triangle, the arc
        polyline from 0 to theta and the tangent-line axis intercepts.
    """
    point = circle_point(theta)
    x_hit, y_hit = tangent_intercepts(point)
    return TrigGeometry(
        theta=theta,
        point=point,
        segments=compute_segments(theta),
        triangle=RightTriangle(ORIGIN, Point(point.x, 0.0), point),
        arc=arc_points(wrap_angle(theta), radius=UNIT_RADIUS, resolution=arc_resolution),
        x_intercept=x_hit,
        y_intercept=y_hit,
    )
