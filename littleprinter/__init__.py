"""Client for the little printer messaging service."""

__version__ = "0.1.0"
