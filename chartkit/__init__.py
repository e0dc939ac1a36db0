"""Scales, tick formatting, text measurement, axis measurement and layout for charts."""

__version__ = "0.1.0"

__all__ = ["axis", "axis_geometry", "axis_style", "format", "layout", "measure", "scale"]