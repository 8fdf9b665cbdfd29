"""Biathlon race result reconstruction from timestamped event logs."""

__version__ = "0.1.0"
