"""Interactive unit-circle animation of the six trigonometric functions."""

__version__ = "0.1.0"
