"""
Main Application Window
=======================
The GUI container that holds the canvas, the menus and the frame clock.

Why is this file needed?
------------------------
1. Frame clock: A QTimer fires once per frame; the elapsed time since the
   previous frame is measured with a QElapsedTimer and passed to the
   simulation.
2. Routing: Every key binding is a QAction shortcut that queues a command on
   the simulation. The window never mutates the state itself.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QElapsedTimer, Qt, QTimer
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import QMainWindow, QMessageBox

from trigcircle.config import WINDOW_SIZE
from trigcircle.controller.commands import KEYMAP, Command, key_for_command
from trigcircle.controller.simulation import Simulation
from trigcircle.view.canvas import SceneCanvas

logger = logging.getLogger(__name__)

VISIBLE_APP_NAME = "Unit Circle: Trigonometric Functions"

MOTION_COMMANDS = (
    Command.TOGGLE_MOTION,
    Command.INCREASE_RATE,
    Command.DECREASE_RATE,
    Command.RESET_RATE,
    Command.REVERSE_DIRECTION,
    Command.RESET_THETA,
)
DISPLAY_COMMANDS = (
    Command.TOGGLE_LABELS,
    Command.TOGGLE_VALUES,
    Command.TOGGLE_THETA,
)


class MainWindow(QMainWindow):
    def __init__(self, simulation: Simulation) -> None:
        super().__init__()
        self.simulation: Simulation = simulation

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(*WINDOW_SIZE)

        self.canvas = SceneCanvas(self)
        self.setCentralWidget(self.canvas)

        # --- ACTIONS & MENUS ---
        self.command_actions: dict[Command, QAction] = {}
        self._create_actions()
        self._create_menus()

        self.statusBar().showMessage("Space: pause/resume · ↑/↓: rate · L/V/T: labels/values/θ · F1: all keys")

        # --- FRAME CLOCK ---
        self._clock = QElapsedTimer()
        self.timer = QTimer(self)
        self.timer.setTimerType(Qt.TimerType.PreciseTimer)
        self.timer.setInterval(self.simulation.config.frame_interval_ms)
        self.timer.timeout.connect(self.on_tick)

    def _create_actions(self) -> None:
        for key, command in KEYMAP.items():
            action = QAction(command.description, self)
            action.setShortcut(QKeySequence(key))
            action.setShortcutContext(Qt.ShortcutContext.WindowShortcut)
            action.triggered.connect(lambda *_, k=key: self.simulation.submit_key(k))
            # Shortcuts only fire for actions attached to a widget
            self.addAction(action)
            self.command_actions[command] = action

        self.act_help = QAction("Keyboard Shortcuts", self)
        self.act_help.setShortcut(QKeySequence("F1"))
        self.act_help.triggered.connect(self.on_show_shortcuts)

        self.act_quit = QAction("Quit", self)
        self.act_quit.setShortcut(QKeySequence("Ctrl+Q"))
        self.act_quit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        motion_menu = menu_bar.addMenu("Motion")
        for command in MOTION_COMMANDS:
            motion_menu.addAction(self.command_actions[command])
        motion_menu.addSeparator()
        motion_menu.addAction(self.act_quit)

        view_menu = menu_bar.addMenu("View")
        for command in DISPLAY_COMMANDS:
            view_menu.addAction(self.command_actions[command])

        help_menu = menu_bar.addMenu("Help")
        help_menu.addAction(self.act_help)

    # ------------------------------------------------------------------------------
    # Frame loop
    # ------------------------------------------------------------------------------

    def start(self) -> None:
        """Draw the first frame and start the clock."""
        self.canvas.render_scene(self.simulation.tick(0.0))
        self._clock.start()
        self.timer.start()
        logger.info("Animation started at %d ms per frame.", self.timer.interval())

    def on_tick(self) -> None:
        dt = self._clock.nsecsElapsed() / 1e9
        self._clock.restart()
        scene = self.simulation.tick(dt)
        self.canvas.render_scene(scene)

    def on_show_shortcuts(self) -> None:
        rows = "".join(
            f"<tr><td><b>{key_for_command(command)}</b></td><td>{command.description}</td></tr>"
            for command in MOTION_COMMANDS + DISPLAY_COMMANDS
        )
        QMessageBox.information(self, "Keyboard Shortcuts", f"<table>{rows}</table>")

    def closeEvent(self, event) -> None:
        self.timer.stop()
        logger.info("Stopped after %d frames.", self.simulation.frame_count)
        super().closeEvent(event)
