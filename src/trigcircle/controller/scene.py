"""
Scene description handed to the drawing surface once per frame.

Every item carries a stable `key` (so the surface can reuse its graphics
objects from frame to frame) and a `Role` (so the surface can pick colors and
stroke styles). All coordinates are in the unit circle's local space.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Iterator, Optional, TYPE_CHECKING, Union

import numpy as np

from trigcircle.model.trig import FunctionSegment, TrigFunction

if TYPE_CHECKING:
    import numpy.typing as npt
    from trigcircle.model.geometry_primitives import Point


class Role(StrEnum):
    AXIS = "axis"
    UNIT_CIRCLE = "unit_circle"
    RADIUS = "radius"
    RADIUS_LABEL = "radius_label"
    THETA = "theta"
    NODE = "node"
    RATE = "rate"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    COT = "cot"
    SEC = "sec"
    CSC = "csc"

    @classmethod
    def for_function(cls, function: TrigFunction) -> Role:
        return cls(function.value)


class Anchor(StrEnum):
    CENTER = "center"
    LEFT = "left"


@dataclass(frozen=True)
class LineItem:
    key: str
    role: Role
    start: Point
    end: Point
    width: float = 3.0


@dataclass(frozen=True)
class PolylineItem:
    key: str
    role: Role
    points: npt.NDArray[np.float64] = field(compare=False)
    width: float = 3.0


@dataclass(frozen=True)
class CircleItem:
    key: str
    role: Role
    center: Point
    radius: float
    width: float = 2.7


@dataclass(frozen=True)
class PointItem:
    key: str
    role: Role
    position: Point
    size: float = 8.0


@dataclass(frozen=True)
class TextItem:
    key: str
    role: Role
    text: str
    position: Point
    anchor: Anchor = Anchor.CENTER
    italic: bool = False
    opacity: float = 1.0


SceneItem = Union[LineItem, PolylineItem, CircleItem, PointItem, TextItem]


@dataclass
class Scene:
    """Ordered drawables for one frame; later items are drawn on top."""
    theta: float
    segments: dict[TrigFunction, FunctionSegment]
    items: list[SceneItem] = field(default_factory=list)

    def add(self, item: SceneItem) -> None:
        self.items.append(item)

    def __iter__(self) -> Iterator[SceneItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, key: str) -> bool:
        return any(item.key == key for item in self.items)

    @property
    def keys(self) -> list[str]:
        return [item.key for item in self.items]

    def get(self, key: str) -> Optional[SceneItem]:
        return next((item for item in self.items if item.key == key), None)
