"""
Input Commands
==============
Maps key identities to commands and commands to state mutations.

Why is this file needed?
------------------------
1. Dispatch table: Key handling is a lookup instead of a chain of
   conditionals, and the keymap can be listed (menus, help text, tests).
2. Decoupling: The motion controller and the toggles never see a key; the
   view never touches the state directly.

Exports:
    Command: Every discrete operation the user can trigger.
    KEYMAP: Key name (as understood by QKeySequence) -> Command.
    COMMAND_HANDLERS: Command -> callable mutating a SimulationState.
    apply_command: Run one command against a state.
    command_for_key: Resolve a key name, or None if it is unbound.
"""
from __future__ import annotations

from enum import StrEnum
import logging
from typing import Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from trigcircle.model.state import SimulationState

logger = logging.getLogger(__name__)


class Command(StrEnum):
    TOGGLE_MOTION = "toggle_motion"
    TOGGLE_LABELS = "toggle_labels"
    TOGGLE_VALUES = "toggle_values"
    TOGGLE_THETA = "toggle_theta"
    RESET_THETA = "reset_theta"
    RESET_RATE = "reset_rate"
    INCREASE_RATE = "increase_rate"
    DECREASE_RATE = "decrease_rate"
    REVERSE_DIRECTION = "reverse_direction"

    @property
    def description(self) -> str:
        return COMMAND_DESCRIPTIONS[self]


COMMAND_DESCRIPTIONS: dict[Command, str] = {
    Command.TOGGLE_MOTION: "Pause / resume motion",
    Command.TOGGLE_LABELS: "Show / hide labels",
    Command.TOGGLE_VALUES: "Show / hide values",
    Command.TOGGLE_THETA: "Show / hide θ",
    Command.RESET_THETA: "Reset θ",
    Command.RESET_RATE: "Reset motion rate",
    Command.INCREASE_RATE: "Increase motion rate",
    Command.DECREASE_RATE: "Decrease motion rate",
    Command.REVERSE_DIRECTION: "Reverse direction",
}

KEYMAP: dict[str, Command] = {
    "Space": Command.TOGGLE_MOTION,
    "L": Command.TOGGLE_LABELS,
    "V": Command.TOGGLE_VALUES,
    "T": Command.TOGGLE_THETA,
    "R": Command.RESET_THETA,
    "S": Command.RESET_RATE,
    "Up": Command.INCREASE_RATE,
    "Down": Command.DECREASE_RATE,
    "D": Command.REVERSE_DIRECTION,
}

COMMAND_HANDLERS: dict[Command, Callable[[SimulationState], None]] = {
    Command.TOGGLE_MOTION: lambda state: state.motion.toggle_motion(),
    Command.TOGGLE_LABELS: lambda state: state.toggles.toggle_labels(),
    Command.TOGGLE_VALUES: lambda state: state.toggles.toggle_values(),
    Command.TOGGLE_THETA: lambda state: state.toggles.toggle_theta(),
    Command.RESET_THETA: lambda state: state.motion.reset_theta(),
    Command.RESET_RATE: lambda state: state.motion.reset_rate(),
    Command.INCREASE_RATE: lambda state: state.motion.increase_rate(),
    Command.DECREASE_RATE: lambda state: state.motion.decrease_rate(),
    Command.REVERSE_DIRECTION: lambda state: state.motion.reverse_direction(),
}


def command_for_key(key: str) -> Optional[Command]:
    """Resolve a key name case-insensitively ('l' and 'L' are the same key)."""
    for name, command in KEYMAP.items():
        if name.lower() == key.lower():
            return command
    logger.debug("No command bound to key %r.", key)
    return None


def apply_command(state: SimulationState, command: Command) -> None:
    logger.debug("Applying %s.", command)
    COMMAND_HANDLERS[command](state)


def key_for_command(command: Command) -> str:
    return next(name for name, bound in KEYMAP.items() if bound is command)
