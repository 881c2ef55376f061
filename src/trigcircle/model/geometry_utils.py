from __future__ import annotations

from typing import TYPE_CHECKING

from math import ceil, copysign, tau
import numpy as np

if TYPE_CHECKING:
    from numpy import typing as npt

from trigcircle.model.geometry_primitives import Point


def rad2deg(radians: float) -> float:
    return radians * 360.0 / tau


def wrap_angle(angle: float) -> float:
    """Wrap an angle into [0, 2π)."""
    wrapped = angle % tau
    # -1e-18 % tau rounds up to tau itself
    return 0.0 if wrapped >= tau else wrapped


def circle_to_polyline(
    center: Point,
    radius: float,
    n_segments: int
) -> npt.NDArray[np.float64]:
    """
    Discretize a circle in XY into an (N,2) polyline (closed).

    Args:
        center: (x, y) coordinates of the circle center.
        radius: Circle radius.
        n_segments: Number of segments to use for discretization.

    Returns:
        An array of shape (n_segments + 1, 2) whose last row repeats the first.
    """
    theta = np.linspace(0.0, 2.0 * np.pi, n_segments, endpoint=False)
    pts = np.c_[center.x + radius * np.cos(theta), center.y + radius * np.sin(theta)]

    # close the ring
    if not np.allclose(pts[0], pts[-1]):
        pts = np.vstack((pts, pts[0]))

    return pts


def arc_points(
    theta: float,
    *,
    radius: float = 1.0,
    resolution: int = 128
    ) -> npt.NDArray[np.float64]:
    """
    Generate points along the arc sweeping counter-clockwise from angle 0 to theta.

    The number of segments is proportional to the swept fraction of a full turn,
    so a full circle gets `resolution` segments and a zero sweep gets none.

    Args:
        theta: End angle in radians, expected in [0, 2π).
        radius: Arc radius.
        resolution: Number of segments for a full turn (must be >= 1).

    Returns:
        Array of shape (n + 1, 2), or an empty (0, 2) array when n == 0.
    """
    if resolution < 1:
        raise ValueError(f"Arc resolution must be at least 1, got {resolution}.")

    n_segments = ceil(resolution * abs(theta) / tau)
    if n_segments == 0:
        return np.empty((0, 2), dtype=np.float64)

    angles = np.linspace(0.0, theta, n_segments + 1)
    return np.column_stack((radius * np.cos(angles), radius * np.sin(angles)))


def clip_to_extent(start: Point, end: Point, limit: float) -> Point:
    """
    Pull `end` back along the line from `start` until neither coordinate
    exceeds `limit` in magnitude. `start` must already lie inside the box.
    """
    overshoot = max(abs(end.x), abs(end.y))
    if overshoot <= limit:
        return end

    # Largest t in [0, 1] with start + t * (end - start) inside the box
    t = 1.0
    for s, e in ((start.x, end.x), (start.y, end.y)):
        if abs(e) > limit:
            bound = copysign(limit, e)
            t = min(t, (bound - s) / (e - s))
    return Point(start.x + t * (end.x - start.x), start.y + t * (end.y - start.y))
