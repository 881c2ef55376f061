"""
Scene Canvas
============
pyqtgraph drawing surface for the per-frame scene description.

Why is this file needed?
------------------------
1. Rendering: It is the only place that knows about pyqtgraph items, pens,
   fonts and colors.
2. Reuse: One graphics item is created per scene key and then updated in
   place every frame; items missing from the current scene are hidden rather
   than destroyed, which keeps a 60 FPS redraw cheap.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
import pyqtgraph as pg
from PySide6.QtCore import Qt
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QGraphicsItem, QWidget

from trigcircle.config import CIRCLE_RESOLUTION, VIEW_X_RANGE, VIEW_Y_RANGE
from trigcircle.controller.scene import (
    Anchor,
    CircleItem,
    LineItem,
    PointItem,
    PolylineItem,
    Scene,
    SceneItem,
    TextItem,
)
from trigcircle.model.geometry_primitives import ORIGIN
from trigcircle.model.geometry_utils import circle_to_polyline
from trigcircle.view.palette import BACKGROUND, ROLE_COLORS, WHITE

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

LABEL_FONT = "Times New Roman"
LABEL_FONT_SIZE = 11
VALUE_FONT_SIZE = 13

TEXT_ANCHORS: dict[Anchor, tuple[float, float]] = {
    Anchor.CENTER: (0.5, 0.5),
    Anchor.LEFT: (0.0, 0.5),
}


class SceneCanvas(pg.PlotWidget):
    """Fixed, non-interactive 2D view of the unit-circle coordinate space."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent=parent, background=BACKGROUND)

        self.setAspectLocked(True)
        self.hideAxis("left")
        self.hideAxis("bottom")
        self.hideButtons()
        self.setMenuEnabled(False)
        self.setMouseEnabled(x=False, y=False)
        self.disableAutoRange()
        self.setXRange(*VIEW_X_RANGE, padding=0.0)
        self.setYRange(*VIEW_Y_RANGE, padding=0.0)

        # Keyboard input belongs to the window shortcuts, not to view scrolling
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)

        self._items: dict[str, QGraphicsItem] = {}
        self._circle_cache: dict[float, npt.NDArray[np.float64]] = {}

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def render_scene(self, scene: Scene) -> None:
        """Draw the scene; item order in the scene is the stacking order."""
        seen: set[str] = set()
        for z, item in enumerate(scene):
            graphics = self._items.get(item.key)
            if graphics is None:
                graphics = self._create(item)
                self._items[item.key] = graphics
                self.addItem(graphics, ignoreBounds=True)
                logger.debug("Created graphics item for %s.", item.key)

            self._update(graphics, item)
            graphics.setZValue(z)
            graphics.setVisible(True)
            seen.add(item.key)

        for key, graphics in self._items.items():
            if key not in seen:
                graphics.setVisible(False)

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    @staticmethod
    def _create(item: SceneItem) -> QGraphicsItem:
        if isinstance(item, TextItem):
            text = pg.TextItem(anchor=TEXT_ANCHORS[item.anchor])
            size = VALUE_FONT_SIZE if item.italic else LABEL_FONT_SIZE
            font = QFont(LABEL_FONT, size)
            font.setItalic(item.italic)
            text.setFont(font)
            return text
        if isinstance(item, PointItem):
            return pg.ScatterPlotItem(pxMode=True)
        return pg.PlotDataItem()

    def _update(self, graphics: QGraphicsItem, item: SceneItem) -> None:
        color = ROLE_COLORS.get(item.role, WHITE)

        if isinstance(item, LineItem):
            graphics.setData(
                x=[item.start.x, item.end.x],
                y=[item.start.y, item.end.y],
            )
            graphics.setPen(pg.mkPen(color=color, width=item.width))
        elif isinstance(item, PolylineItem):
            graphics.setData(
                x=item.points[:, 0],
                y=item.points[:, 1],
            )
            graphics.setPen(pg.mkPen(color=color, width=item.width))
        elif isinstance(item, CircleItem):
            ring = self._circle(item.radius)
            graphics.setData(
                x=ring[:, 0] + item.center.x,
                y=ring[:, 1] + item.center.y,
            )
            graphics.setPen(pg.mkPen(color=color, width=item.width))
        elif isinstance(item, PointItem):
            graphics.setData(
                pos=[(item.position.x, item.position.y)],
                size=2.0 * item.size,
                brush=pg.mkBrush(color),
                pen=None,
            )
        elif isinstance(item, TextItem):
            graphics.setText(item.text, color=color)
            graphics.setPos(item.position.x, item.position.y)
            graphics.setOpacity(item.opacity)
        else:
            raise TypeError(f"Unsupported scene item: {type(item).__name__}")

    def _circle(self, radius: float) -> npt.NDArray[np.float64]:
        """Cached ring around the origin."""
        if radius not in self._circle_cache:
            self._circle_cache[radius] = circle_to_polyline(ORIGIN, radius, CIRCLE_RESOLUTION)
        return self._circle_cache[radius]
