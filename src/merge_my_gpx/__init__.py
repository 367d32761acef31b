"""Merge, invert, decimate and summarise GPX tracks."""

__version__ = "0.4.0"
