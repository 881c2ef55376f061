"""
Frame Assembler
===============
Turns the simulation state into one frame's scene description.

Why is this file needed?
------------------------
1. Ordering: Each tick advances the motion first, then computes the geometry
   for the resulting angle once, then emits every drawable from that single
   geometry. A frame never mixes two angles.
2. Visibility: The toggles are consulted here and only here. Undefined
   segments (asymptotes) are skipped together with their labels; their value
   rows read "undefined". Segments close to an asymptote are clipped to
   DRAW_LIMIT so the surface only receives bounded coordinates.
3. Label fading: Owns the LabelFader, which is presentation state that
   evolves with wall-clock time even while the motion is paused.
"""
from __future__ import annotations

import logging
import math
from typing import Optional

from trigcircle.config import (
    AXIS_EXTENT,
    DRAW_LIMIT,
    PIXELS_PER_UNIT,
    VALUES_PANEL_X,
    VALUES_ROW_SPACING,
    SimulationConfig,
)
from trigcircle.controller.scene import (
    Anchor,
    CircleItem,
    LineItem,
    PointItem,
    PolylineItem,
    Role,
    Scene,
    TextItem,
)
from trigcircle.model.geometry_primitives import ORIGIN, Line, Point, Vector
from trigcircle.model.geometry_utils import clip_to_extent
from trigcircle.model.labels import LabelFader, LabelKey
from trigcircle.model.state import SimulationState
from trigcircle.model.trig import UNIT_RADIUS, FunctionSegment, TrigFunction, TrigGeometry, compute_geometry
from trigcircle.utils import format_angle, format_rate, format_value

logger = logging.getLogger(__name__)

PX = 1.0 / PIXELS_PER_UNIT

# Value panel row of each function, counted from the top row (theta = 0)
VALUE_ROWS: dict[TrigFunction, int] = {
    TrigFunction.SIN: 1,
    TrigFunction.COS: 2,
    TrigFunction.TAN: 3,
    TrigFunction.COT: 5,
    TrigFunction.SEC: 6,
    TrigFunction.CSC: 7,
}
RATE_ROW = 8

STROKE_WEIGHT = 3.0
INTERCEPT_SIZE = 5.0


def drawn_line(segment: FunctionSegment) -> Line:
    """The segment as drawn: its end clipped to DRAW_LIMIT."""
    return Line(segment.start, clip_to_extent(segment.start, segment.end, DRAW_LIMIT))


def _clip_point(point: Point) -> Point:
    return Point(max(-DRAW_LIMIT, min(DRAW_LIMIT, point.x)), max(-DRAW_LIMIT, min(DRAW_LIMIT, point.y)))


def _offset_from_line(line: Line, distance: float, *, clockwise: bool = False) -> Point:
    """Point `distance` away from the middle of `line`, along its normal."""
    normal = line.direction.perpendicular()
    if clockwise:
        normal = -normal
    return line.midpoint + normal * distance


def label_positions(geometry: TrigGeometry, *, show_theta: bool) -> dict[LabelKey, Optional[Point]]:
    """
    Where each label goes for this geometry; None for labels that are not drawn
    (undefined segments, or the theta and radius labels while the theta visual
    is hidden).
    """
    cos = geometry.point.x
    sin = geometry.point.y
    positions: dict[LabelKey, Optional[Point]] = {
        LabelKey.COS: Point(cos * 0.5, 15.0 * PX),
        LabelKey.SIN: Point(cos + 22.0 * PX, sin * 0.5),
    }

    tan = geometry[TrigFunction.TAN]
    if tan.defined:
        positions[LabelKey.TAN] = Point(UNIT_RADIUS + 23.0 * PX, drawn_line(tan).midpoint.y)
    else:
        positions[LabelKey.TAN] = None

    cot = geometry[TrigFunction.COT]
    if cot.defined:
        positions[LabelKey.COT] = Point(drawn_line(cot).midpoint.x, UNIT_RADIUS + 15.0 * PX)
    else:
        positions[LabelKey.COT] = None

    sec = geometry[TrigFunction.SEC]
    positions[LabelKey.SEC] = _offset_from_line(drawn_line(sec), 18.0 * PX) if sec.defined else None

    csc = geometry[TrigFunction.CSC]
    positions[LabelKey.CSC] = _offset_from_line(drawn_line(csc), 18.0 * PX, clockwise=True) if csc.defined else None

    if show_theta:
        positions[LabelKey.THETA] = ORIGIN + Vector.from_angle(geometry.theta * 0.5, UNIT_RADIUS * 0.93)
        radius_dir = Vector.from_angle(geometry.theta - math.pi * 0.5, 15.0 * PX)
        positions[LabelKey.UNIT] = geometry.triangle.hypotenuse.midpoint + radius_dir
    else:
        positions[LabelKey.THETA] = None
        positions[LabelKey.UNIT] = None
    return positions


class FrameAssembler:
    """Builds a Scene per tick from a SimulationState."""

    def __init__(self, config: SimulationConfig | None = None) -> None:
        self.config = config or SimulationConfig()
        self.fader = LabelFader(
            fade_time=self.config.fade_time,
            fade_intensity=self.config.fade_intensity,
        )

    def assemble(self, state: SimulationState, dt: float) -> Scene:
        """
        Run one tick: advance the motion (if running), recompute the geometry
        for the current angle and build the scene.

        Args:
            state: The simulation state; its motion is advanced in place.
            dt: Seconds elapsed since the previous tick.
        """
        state.motion.advance(dt)
        geometry = compute_geometry(state.theta, arc_resolution=self.config.arc_resolution)

        positions = label_positions(geometry, show_theta=state.toggles.show_theta)
        self.fader.update(positions, dt)

        return self.build_scene(state, geometry, positions)

    def build_scene(
        self,
        state: SimulationState,
        geometry: TrigGeometry,
        positions: dict[LabelKey, Optional[Point]],
    ) -> Scene:
        toggles = state.toggles
        scene = Scene(theta=geometry.theta, segments=geometry.segments)

        # Background: axes, ray, circle
        scene.add(LineItem("axis:x", Role.AXIS, Point(-AXIS_EXTENT, 0.0), Point(AXIS_EXTENT, 0.0), STROKE_WEIGHT - 1.0))
        scene.add(LineItem("axis:y", Role.AXIS, Point(0.0, AXIS_EXTENT), Point(0.0, -AXIS_EXTENT), STROKE_WEIGHT - 1.0))

        # The ray O -> P belongs to the theta visual
        if toggles.show_theta:
            hypotenuse = geometry.triangle.hypotenuse
            scene.add(LineItem("radius", Role.RADIUS, hypotenuse.start, hypotenuse.end, STROKE_WEIGHT - 0.8))
            if toggles.show_labels:
                self._add_label(scene, "label:unit", Role.RADIUS_LABEL, "1.0", LabelKey.UNIT, positions)

        scene.add(CircleItem("unit_circle", Role.UNIT_CIRCLE, ORIGIN, UNIT_RADIUS, STROKE_WEIGHT - 0.3))

        if toggles.show_theta:
            if len(geometry.arc) > 0:
                scene.add(PolylineItem("theta:arc", Role.THETA, geometry.arc, STROKE_WEIGHT))
            if toggles.show_labels:
                self._add_label(scene, "label:theta", Role.THETA, "θ", LabelKey.THETA, positions)

        # Function segments, each followed by its label
        for segment in geometry.defined_segments:
            function = segment.function
            role = Role.for_function(function)
            line = drawn_line(segment)
            scene.add(LineItem(f"segment:{function}", role, line.start, line.end, STROKE_WEIGHT))
            if toggles.show_labels:
                self._add_label(scene, f"label:{function}", role, function.label, LabelKey(function.value), positions)

        # Tangent line at P meets the axes at (sec θ, 0) and (0, csc θ)
        if geometry.x_intercept is not None:
            scene.add(PointItem("intercept:x", Role.SEC, _clip_point(geometry.x_intercept), INTERCEPT_SIZE))
        if geometry.y_intercept is not None:
            scene.add(PointItem("intercept:y", Role.CSC, _clip_point(geometry.y_intercept), INTERCEPT_SIZE))

        scene.add(PointItem("node", Role.NODE, geometry.point))

        if toggles.show_values:
            self._add_values(scene, state, geometry)

        return scene

    def _add_label(
        self,
        scene: Scene,
        key: str,
        role: Role,
        text: str,
        label: LabelKey,
        positions: dict[LabelKey, Optional[Point]],
    ) -> None:
        position = positions.get(label)
        if position is None:
            return
        scene.add(TextItem(key, role, text, position, opacity=self.fader.opacity(label)))

    def _add_values(self, scene: Scene, state: SimulationState, geometry: TrigGeometry) -> None:
        def row(index: int) -> Point:
            return Point(VALUES_PANEL_X, 1.0 - index * VALUES_ROW_SPACING)

        if state.toggles.show_theta:
            scene.add(TextItem("value:theta", Role.THETA, f"θ = {format_angle(geometry.theta)}",
                               row(0), Anchor.LEFT, italic=True))

        for function, index in VALUE_ROWS.items():
            text = f"{function.label} = {format_value(geometry.value(function))}"
            scene.add(TextItem(f"value:{function}", Role.for_function(function), text,
                               row(index), Anchor.LEFT, italic=True))

        scene.add(TextItem("value:rate", Role.RATE, f"rate = {format_rate(state.motion.effective_rate)}",
                           row(RATE_ROW), Anchor.LEFT, italic=True))
