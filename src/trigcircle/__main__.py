"""Command-line interface."""
from trigcircle.app.main import run

if __name__ == "__main__":
    run()
