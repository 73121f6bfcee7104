"""Command-line media control for MPRIS players with in-place notifications."""

__version__ = "0.1.0"
