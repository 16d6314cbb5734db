"""Sway workspace overview helpers: tree reading, JSON flattening, geometry and bitmaps."""

__version__ = "0.1.0"