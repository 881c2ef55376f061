"""
Motion Controller
=================
Owns the current angle, the signed motion rate and the running/paused flag.

The rate is kept as a non-negative speed plus a direction (+1 counter-clockwise,
-1 clockwise), so changing the speed can never flip the direction.
"""
from __future__ import annotations

import logging

from trigcircle.config import DEFAULT_RATE, RATE_INCREMENT
from trigcircle.model.geometry_utils import wrap_angle

logger = logging.getLogger(__name__)


class MotionController:
    """Angle state machine with states Running and Paused (initially Running)."""

    def __init__(self, default_rate: float = DEFAULT_RATE, rate_step: float = RATE_INCREMENT) -> None:
        if default_rate < 0.0:
            raise ValueError(f"Default rate must be non-negative, got {default_rate}.")
        if rate_step <= 0.0:
            raise ValueError(f"Rate step must be positive, got {rate_step}.")

        self.default_rate: float = default_rate
        self.rate_step: float = rate_step

        self.theta: float = 0.0
        self.speed: float = default_rate
        self.direction: int = 1
        self.running: bool = True

    def __repr__(self) -> str:
        state = "running" if self.running else "paused"
        return f"MotionController(theta={self.theta:.4f}, rate={self.rate:.4f}, {state})"

    @property
    def rate(self) -> float:
        """Signed angular velocity in rad/s (plain 0.0 when stopped)."""
        if self.speed == 0.0:
            return 0.0
        return self.direction * self.speed

    @property
    def effective_rate(self) -> float:
        """Rate actually applied to theta right now (0 while paused)."""
        return self.rate if self.running else 0.0

    # ------------------------------------------------------------------------------
    # Time stepping
    # ------------------------------------------------------------------------------

    def advance(self, dt: float) -> None:
        """
        Advance theta by rate * dt while running. The result is wrapped into
        [0, 2π), which leaves every trigonometric output unchanged.

        Raises:
            ValueError: if dt is negative.
        """
        if dt < 0.0:
            raise ValueError(f"Elapsed time must be non-negative, got {dt}.")
        if not self.running or dt == 0.0:
            return
        self.theta = wrap_angle(self.theta + self.rate * dt)

    # ------------------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------------------

    def toggle_motion(self) -> None:
        self.running = not self.running
        logger.info("Motion %s.", "resumed" if self.running else "paused")

    def reset_theta(self) -> None:
        self.theta = 0.0
        logger.info("Theta reset to 0.")

    def increase_rate(self) -> None:
        self.speed += self.rate_step
        logger.info("Rate increased to %.2f rad/s.", self.rate)

    def decrease_rate(self) -> None:
        self.speed = max(0.0, self.speed - self.rate_step)
        logger.info("Rate decreased to %.2f rad/s.", self.rate)

    def reset_rate(self) -> None:
        self.speed = self.default_rate
        self.direction = 1
        logger.info("Rate reset to %.2f rad/s.", self.rate)

    def reverse_direction(self) -> None:
        self.direction = -self.direction
        logger.info("Direction set to %s.", "counter-clockwise" if self.direction > 0 else "clockwise")
