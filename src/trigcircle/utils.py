from __future__ import annotations

from typing import Optional

from trigcircle.config import DISPLAY_LIMIT
from trigcircle.model.geometry_utils import rad2deg


def format_value(value: Optional[float], precision: int = 2) -> str:
    """Format a trigonometric value for display."""
    if value is None:
        return "undefined"
    if value > DISPLAY_LIMIT:
        return "inf"
    if value < -DISPLAY_LIMIT:
        return "-inf"
    return f"{value:.{precision}f}"


def format_angle(theta: float) -> str:
    """Radians with the degree equivalent, e.g. '1.57 (90º)'."""
    return f"{theta:.2f} ({rad2deg(theta):.0f}º)"


def format_rate(rate: float) -> str:
    return f"{rate:.2f} rad/s ({rad2deg(rate):.0f} deg/s)"
