"""Eternal Quest — goal tracking with points, levels, and flat-file saves."""

__version__ = "0.1.0"
