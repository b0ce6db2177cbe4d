"""School open/closed status resolution."""

__version__ = "0.1.0"
