"""
Label overlap fading.

A few labels sit close to the lines they name and end up on top of other
labels for part of every revolution. Those labels dim while they overlap one
of their rivals and brighten back afterwards, at a fixed rate.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Mapping, Optional

from trigcircle.config import FADE_INTENSITY, FADE_TIME_SECS, LABEL_BOX_PX, PIXELS_PER_UNIT
from trigcircle.model.geometry_primitives import Point


class LabelKey(StrEnum):
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    COT = "cot"
    SEC = "sec"
    CSC = "csc"
    THETA = "theta"
    UNIT = "unit"


# label -> labels that make it fade when they overlap it
FADE_RULES: dict[LabelKey, frozenset[LabelKey]] = {
    LabelKey.SIN: frozenset({LabelKey.TAN, LabelKey.CSC}),
    LabelKey.COS: frozenset({LabelKey.SEC}),
    LabelKey.THETA: frozenset({LabelKey.SIN}),
    LabelKey.UNIT: frozenset({LabelKey.COS, LabelKey.SIN, LabelKey.CSC}),
}


@dataclass(frozen=True)
class LabelBox:
    """Axis-aligned box centered on a label position."""
    center: Point
    width: float
    height: float

    def overlaps(self, other: LabelBox) -> bool:
        return (
            abs(self.center.x - other.center.x) < 0.5 * (self.width + other.width)
            and abs(self.center.y - other.center.y) < 0.5 * (self.height + other.height)
        )


class LabelFader:
    """Tracks the opacity of the fading labels from frame to frame."""

    def __init__(
        self,
        box_size: tuple[float, float] = (LABEL_BOX_PX[0] / PIXELS_PER_UNIT, LABEL_BOX_PX[1] / PIXELS_PER_UNIT),
        fade_time: float = FADE_TIME_SECS,
        fade_intensity: float = FADE_INTENSITY,
    ) -> None:
        self.box_width, self.box_height = box_size
        self.fade_time = fade_time
        self.min_opacity = 1.0 - fade_intensity
        self._opacity: dict[LabelKey, float] = {key: 1.0 for key in FADE_RULES}

    def opacity(self, key: LabelKey) -> float:
        """Current opacity; labels without fade rules are always opaque."""
        return self._opacity.get(key, 1.0)

    def update(self, positions: Mapping[LabelKey, Optional[Point]], dt: float) -> None:
        """
        Recompute which labels overlap a rival and step every opacity by dt.

        Args:
            positions: Label centers; None (or missing) means the label is not drawn.
            dt: Elapsed wall-clock time in seconds.
        """
        boxes = {
            key: LabelBox(pos, self.box_width, self.box_height)
            for key, pos in positions.items()
            if pos is not None
        }

        step = dt / self.fade_time
        for key, rivals in FADE_RULES.items():
            box = boxes.get(key)
            fading = box is not None and any(
                rival in boxes and box.overlaps(boxes[rival]) for rival in rivals
            )

            opacity = self._opacity[key] + (-step if fading else step)
            self._opacity[key] = min(1.0, max(self.min_opacity, opacity))
