"""
Tests for frame assembly: tick ordering, visibility toggles, asymptote
omission and the value panel.
"""

import math

import numpy as np
import pytest

from trigcircle.config import DEFAULT_RATE, SimulationConfig
from trigcircle.config import DRAW_LIMIT
from trigcircle.controller.commands import Command
from trigcircle.controller.frame import FrameAssembler, label_positions
from trigcircle.controller.simulation import Simulation
from trigcircle.controller.scene import (
    CircleItem,
    LineItem,
    PointItem,
    PolylineItem,
    Role,
    TextItem,
)
from trigcircle.model.labels import LabelKey
from trigcircle.model.state import SimulationState
from trigcircle.model.trig import TrigFunction, compute_geometry

ALL_SEGMENTS = {f"segment:{f}" for f in TrigFunction}


def _scene_at(theta: float, state: SimulationState | None = None):
    state = state or SimulationState()
    state.motion.theta = theta
    return FrameAssembler().assemble(state, 0.0)


def _coordinates(scene):
    for item in scene:
        if isinstance(item, LineItem):
            yield from (item.start.x, item.start.y, item.end.x, item.end.y)
        elif isinstance(item, PolylineItem):
            yield from item.points.ravel()
        elif isinstance(item, (TextItem,)):
            yield from (item.position.x, item.position.y)
        elif isinstance(item, PointItem):
            yield from (item.position.x, item.position.y)
        elif isinstance(item, CircleItem):
            yield from (item.center.x, item.center.y, item.radius)


class TestTick:
    def test_advances_when_running(self):
        state = SimulationState()
        scene = FrameAssembler().assemble(state, 1.0)
        assert math.isclose(state.theta, DEFAULT_RATE)
        assert math.isclose(scene.theta, DEFAULT_RATE)

    def test_paused_still_builds_scene(self):
        state = SimulationState()
        state.motion.toggle_motion()
        scene = FrameAssembler().assemble(state, 1.0)
        assert state.theta == 0.0
        assert "node" in scene
        assert "segment:sin" in scene

    def test_segments_share_one_angle(self):
        state = SimulationState()
        scene = FrameAssembler().assemble(state, 2.0)
        expected = compute_geometry(state.theta).segments
        assert scene.segments == expected

    def test_node_on_circle(self):
        scene = _scene_at(1.1)
        node = scene.get("node")
        assert math.isclose(node.position.x, math.cos(1.1))
        assert math.isclose(node.position.y, math.sin(1.1))


class TestAsymptoteOmission:
    def test_quarter_turn_skips_tan_and_sec(self):
        scene = _scene_at(math.pi / 2)
        assert "segment:tan" not in scene
        assert "segment:sec" not in scene
        assert "label:tan" not in scene
        assert "label:sec" not in scene
        assert {"segment:sin", "segment:cos", "segment:cot", "segment:csc"} <= set(scene.keys)
        assert scene.get("value:tan").text == "tan θ = undefined"
        assert scene.get("value:sec").text == "sec θ = undefined"

    def test_zero_skips_cot_and_csc(self):
        scene = _scene_at(0.0)
        assert "segment:cot" not in scene
        assert "segment:csc" not in scene
        assert scene.get("value:cot").text == "cot θ = undefined"
        assert scene.get("value:sin").text == "sin θ = 0.00"

    def test_tangent_intercepts_drawn(self):
        scene = _scene_at(1.0)
        x_hit = scene.get("intercept:x")
        y_hit = scene.get("intercept:y")
        assert math.isclose(x_hit.position.x, 1.0 / math.cos(1.0))
        assert x_hit.position.y == 0.0
        assert math.isclose(y_hit.position.y, 1.0 / math.sin(1.0))
        assert x_hit.role is Role.SEC
        assert y_hit.role is Role.CSC

    def test_intercepts_follow_asymptotes(self):
        zero = _scene_at(0.0)
        assert "intercept:x" in zero
        assert "intercept:y" not in zero
        quarter = _scene_at(math.pi / 2)
        assert "intercept:x" not in quarter
        assert "intercept:y" in quarter

    def test_all_segments_between_asymptotes(self):
        scene = _scene_at(1.0)
        assert ALL_SEGMENTS <= set(scene.keys)

    def test_near_asymptote_is_clipped(self):
        theta = math.pi / 2 - 1e-8
        scene = _scene_at(theta)
        tan = scene.get("segment:tan")
        sec = scene.get("segment:sec")
        assert math.isclose(tan.end.y, DRAW_LIMIT)
        assert tan.end.x == 1.0
        assert math.isclose(sec.end.y, DRAW_LIMIT)
        # still on the ray through P
        assert math.isclose(sec.end.x / sec.end.y, math.cos(theta) / math.sin(theta), rel_tol=1e-6)
        assert scene.get("intercept:x").position.x == DRAW_LIMIT
        assert abs(scene.get("label:tan").position.y) <= DRAW_LIMIT
        assert scene.get("value:tan").text == "tan θ = inf"
        assert scene.segments[TrigFunction.TAN].value > 1e7

    @pytest.mark.parametrize("theta", [0.0, math.pi / 2, math.pi, 3 * math.pi / 2])
    def test_coordinates_are_finite(self, theta):
        scene = _scene_at(theta)
        assert all(math.isfinite(v) for v in _coordinates(scene))


class TestVisibility:
    def test_defaults_show_everything(self):
        scene = _scene_at(1.0)
        keys = set(scene.keys)
        assert {"axis:x", "axis:y", "unit_circle", "radius", "node"} <= keys
        assert {"theta:arc", "label:theta", "value:theta", "value:rate"} <= keys
        assert {f"label:{f}" for f in TrigFunction} <= keys
        assert {f"value:{f}" for f in TrigFunction} <= keys

    def test_labels_off(self):
        state = SimulationState()
        state.toggles.toggle_labels()
        scene = _scene_at(1.0, state)
        assert not any(key.startswith("label:") for key in scene.keys)
        assert "value:sin" in scene
        assert "theta:arc" in scene

    def test_values_off(self):
        state = SimulationState()
        state.toggles.toggle_values()
        scene = _scene_at(1.0, state)
        assert not any(key.startswith("value:") for key in scene.keys)
        assert "label:sin" in scene

    def test_theta_off(self):
        state = SimulationState()
        state.toggles.toggle_theta()
        scene = _scene_at(1.0, state)
        assert "theta:arc" not in scene
        assert "label:theta" not in scene
        assert "value:theta" not in scene
        assert "radius" not in scene
        assert "label:unit" not in scene
        assert "value:sin" in scene
        assert "unit_circle" in scene

    def test_theta_toggle_through_simulation(self):
        sim = Simulation()
        sim.submit(Command.TOGGLE_THETA)
        scene = sim.tick(1.0)
        assert "radius" not in scene
        sim.submit(Command.TOGGLE_THETA)
        assert "radius" in sim.tick(0.0)

    def test_no_arc_at_zero(self):
        scene = _scene_at(0.0)
        assert "theta:arc" not in scene
        assert "label:theta" in scene

    def test_toggles_do_not_change_geometry(self):
        plain = _scene_at(1.0)
        state = SimulationState()
        state.toggles.toggle_labels()
        state.toggles.toggle_values()
        state.toggles.toggle_theta()
        bare = _scene_at(1.0, state)
        for key in ALL_SEGMENTS:
            assert plain.get(key) == bare.get(key)


class TestOrder:
    def test_stable_draw_order(self):
        keys = _scene_at(1.0).keys
        assert keys[:2] == ["axis:x", "axis:y"]
        assert keys.index("unit_circle") < keys.index("theta:arc") < keys.index("segment:sin")
        assert keys.index("segment:csc") < keys.index("node") < keys.index("value:theta")
        assert keys[-1] == "value:rate"

    def test_same_state_same_keys(self):
        assert _scene_at(2.0).keys == _scene_at(2.0).keys

    def test_segments_carry_function_roles(self):
        scene = _scene_at(1.0)
        for function in TrigFunction:
            assert scene.get(f"segment:{function}").role is Role.for_function(function)


class TestValuePanel:
    def test_theta_row(self):
        scene = _scene_at(math.pi / 2)
        assert scene.get("value:theta").text == "θ = 1.57 (90º)"

    def test_rate_row_running(self):
        scene = _scene_at(1.0)
        assert scene.get("value:rate").text == "rate = 0.25 rad/s (14 deg/s)"

    def test_rate_row_paused(self):
        state = SimulationState()
        state.motion.toggle_motion()
        scene = _scene_at(1.0, state)
        assert scene.get("value:rate").text == "rate = 0.00 rad/s (0 deg/s)"

    def test_rate_row_stopped_in_reverse(self):
        state = SimulationState()
        state.motion.reverse_direction()
        for _ in range(5):
            state.motion.decrease_rate()
        scene = FrameAssembler().assemble(state, 0.1)
        assert scene.get("value:rate").text == "rate = 0.00 rad/s (0 deg/s)"

    def test_rows_descend(self):
        scene = _scene_at(1.0)
        ys = [scene.get(f"value:{f}").position.y for f in TrigFunction]
        assert ys == sorted(ys, reverse=True)


class TestLabels:
    def test_positions_skip_undefined(self):
        positions = label_positions(compute_geometry(0.0), show_theta=True)
        assert positions[LabelKey.COT] is None
        assert positions[LabelKey.CSC] is None
        assert positions[LabelKey.TAN] is not None

    def test_theta_label_follows_toggle(self):
        positions = label_positions(compute_geometry(1.0), show_theta=False)
        assert positions[LabelKey.THETA] is None

    def test_label_opacity_in_range(self):
        assembler = FrameAssembler(SimulationConfig(fade_intensity=0.8))
        state = SimulationState()
        for _ in range(200):
            scene = assembler.assemble(state, 0.05)
            for item in scene:
                if isinstance(item, TextItem):
                    assert 0.2 - 1e-12 <= item.opacity <= 1.0

    def test_arc_points_end_at_node(self):
        scene = _scene_at(2.0)
        arc = scene.get("theta:arc").points
        assert np.allclose(arc[-1], [math.cos(2.0), math.sin(2.0)])
