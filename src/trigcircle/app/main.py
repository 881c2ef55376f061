"""
Run with: python -m trigcircle
"""
from __future__ import annotations

import argparse
import logging
import sys

from trigcircle.app.application import create_app
from trigcircle.config import DEFAULT_FPS, DEFAULT_RATE, RATE_INCREMENT, SimulationConfig
from trigcircle.controller.simulation import Simulation
from trigcircle.logging_config import setup_logging
from trigcircle.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="trigcircle",
        description="Animate the six trigonometric functions on the unit circle.",
    )
    parser.add_argument("--rate", type=float, default=DEFAULT_RATE,
                        help=f"default motion rate in rad/s (default: {DEFAULT_RATE})")
    parser.add_argument("--step", type=float, default=RATE_INCREMENT,
                        help=f"rate change per Up/Down key press (default: {RATE_INCREMENT})")
    parser.add_argument("--fps", type=int, default=DEFAULT_FPS,
                        help=f"frames per second (default: {DEFAULT_FPS})")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None, help="also write logs to this file")
    return parser


def parse_config(args: argparse.Namespace) -> SimulationConfig:
    return SimulationConfig(default_rate=args.rate, rate_step=args.step, fps=args.fps)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the application."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file)

    try:
        config = parse_config(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        app = create_app()
        window = MainWindow(Simulation(config))
        window.show()
        window.start()
    except Exception:
        logger.exception("Failed to start the application.")
        return 1

    return app.exec()


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
