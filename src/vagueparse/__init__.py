"""Vague intent resolution: turn "make the thing work" into ranked actions."""

__version__ = "0.1.0"
