"""
Simulation loop driver.

Input arrives between frames and is queued; `tick` drains the whole queue
before anything else happens, so a frame always shows a fully settled state.
"""
from __future__ import annotations

from collections import deque
import logging
from typing import Optional

from trigcircle.config import SimulationConfig
from trigcircle.controller.commands import Command, apply_command, command_for_key
from trigcircle.controller.frame import FrameAssembler
from trigcircle.controller.scene import Scene
from trigcircle.model.state import SimulationState

logger = logging.getLogger(__name__)


class Simulation:
    def __init__(self, config: Optional[SimulationConfig] = None) -> None:
        self.config = config or SimulationConfig()
        self.state = SimulationState.from_config(self.config)
        self.assembler = FrameAssembler(self.config)
        self._pending: deque[Command] = deque()
        self.frame_count: int = 0

    @property
    def pending(self) -> int:
        return len(self._pending)

    def submit(self, command: Command) -> None:
        """Queue a command for the next tick."""
        self._pending.append(command)

    def submit_key(self, key: str) -> bool:
        """Queue the command bound to `key`. Returns False if the key is unbound."""
        command = command_for_key(key)
        if command is None:
            return False
        self.submit(command)
        return True

    def tick(self, dt: float) -> Scene:
        """Apply all queued input, then advance and assemble one frame."""
        while self._pending:
            apply_command(self.state, self._pending.popleft())

        scene = self.assembler.assemble(self.state, dt)
        self.frame_count += 1
        return scene
