"""
Simulation State (Data Model)
=============================
This module defines the central data structure for the running animation.

Why is this file needed?
------------------------
1. State Management: It holds the motion controller and the visibility
   toggles in one place. Commands mutate it; the frame assembler reads it.
2. Decoupling: Neither part knows about keys, timers or Qt.

Classes:
    VisualToggles: Independent on/off switches for what gets drawn.
    SimulationState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging

from trigcircle.config import SimulationConfig
from trigcircle.model.motion import MotionController

logger = logging.getLogger(__name__)


@dataclass
class VisualToggles:
    """
    Visibility switches. Each toggle flips only its own flag.
    """
    show_labels: bool = True
    show_values: bool = True
    show_theta: bool = True

    def toggle_labels(self) -> None:
        self.show_labels = not self.show_labels
        logger.info("Labels %s.", "shown" if self.show_labels else "hidden")

    def toggle_values(self) -> None:
        self.show_values = not self.show_values
        logger.info("Values %s.", "shown" if self.show_values else "hidden")

    def toggle_theta(self) -> None:
        self.show_theta = not self.show_theta
        logger.info("Theta visual %s.", "shown" if self.show_theta else "hidden")


@dataclass
class SimulationState:
    """
    Holds the entire state of the animation.
    Pass this instance to the commands and to the frame assembler.
    """
    motion: MotionController = field(default_factory=MotionController)
    toggles: VisualToggles = field(default_factory=VisualToggles)

    @classmethod
    def from_config(cls, config: SimulationConfig) -> SimulationState:
        return cls(motion=MotionController(config.default_rate, config.rate_step))

    @property
    def theta(self) -> float:
        return self.motion.theta

    @property
    def running(self) -> bool:
        return self.motion.running
