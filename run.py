"""
Development runner.

Starts the animation straight from a source checkout, without installing the
package:

    $ python run.py [--rate 0.5] [--fps 60] [--log-level DEBUG]
"""
import os
import sys

SRC_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "src")
WINDOWS_APP_ID = "trigcircle.UnitCircle"


def _use_own_taskbar_entry() -> None:
    """On Windows, group the window under its own taskbar icon instead of python.exe."""
    if sys.platform != "win32":
        return
    import ctypes

    ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID(WINDOWS_APP_ID)


if __name__ == "__main__":
    sys.path.insert(0, SRC_DIR)
    _use_own_taskbar_entry()

    from trigcircle.app.main import run

    run()
