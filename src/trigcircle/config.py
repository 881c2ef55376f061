"""
Configuration & Global Constants
================================
This module serves as the central registry for the simulation's tunable
constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (rates, fade times, label boxes)
   scattered throughout the model and controller code.
2. Validation: `SimulationConfig` is the one place where user-supplied
   overrides (from the command line) are checked before anything runs.

Exports:
    DEFAULT_RATE (float): Default motion rate in rad/s.
    RATE_INCREMENT (float): Step applied by increase/decrease rate.
    SimulationConfig: Validated bundle of the above, passed to the controller.
"""
from __future__ import annotations

from dataclasses import dataclass

# Motion
DEFAULT_RATE: float = 0.25  # rad/s
RATE_INCREMENT: float = 0.08  # rad/s

# Geometry
ARC_RESOLUTION: int = 128  # arc segments for a full turn
CIRCLE_RESOLUTION: int = 256
AXIS_EXTENT: float = 5.0  # half-length of the drawn axes in unit-circle units
DRAW_LIMIT: float = 100.0  # segment ends near an asymptote are clipped to this box
DISPLAY_LIMIT: float = 1.0e6  # values beyond this read as inf

# Screen scale: the labels and offsets below are expressed in pixels at this scale
PIXELS_PER_UNIT: float = 200.0

# Labels
LABEL_BOX_PX: tuple[float, float] = (30.0, 25.0)
FADE_TIME_SECS: float = 0.3
FADE_INTENSITY: float = 0.8

# Value panel (unit-circle coordinates, right of the circle)
VALUES_PANEL_X: float = 2.15
VALUES_ROW_SPACING: float = 0.25

# Window / frame clock
WINDOW_SIZE: tuple[int, int] = (800, 800)
VIEW_X_RANGE: tuple[float, float] = (-1.4, 2.6)
VIEW_Y_RANGE: tuple[float, float] = (-2.0, 2.0)
DEFAULT_FPS: int = 60


@dataclass(frozen=True)
class SimulationConfig:
    """
    Validated simulation settings.

    Raises:
        ValueError: if any setting is outside its allowed range.
    """
    default_rate: float = DEFAULT_RATE
    rate_step: float = RATE_INCREMENT
    fps: int = DEFAULT_FPS
    arc_resolution: int = ARC_RESOLUTION
    fade_time: float = FADE_TIME_SECS
    fade_intensity: float = FADE_INTENSITY

    def __post_init__(self) -> None:
        if self.default_rate < 0.0:
            raise ValueError(f"Default rate must be non-negative, got {self.default_rate}.")
        if self.rate_step <= 0.0:
            raise ValueError(f"Rate step must be positive, got {self.rate_step}.")
        if self.fps <= 0:
            raise ValueError(f"Frame rate must be positive, got {self.fps}.")
        if self.arc_resolution < 1:
            raise ValueError(f"Arc resolution must be at least 1, got {self.arc_resolution}.")
        if self.fade_time <= 0.0:
            raise ValueError(f"Fade time must be positive, got {self.fade_time}.")
        if not 0.0 <= self.fade_intensity <= 1.0:
            raise ValueError(f"Fade intensity must be within [0, 1], got {self.fade_intensity}.")

    @property
    def frame_interval_ms(self) -> int:
        return max(1, round(1000 / self.fps))
