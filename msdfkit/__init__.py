"""Signed distance field building blocks: geometry types, bitmaps, edge colouring and output."""

__version__ = "1.0.0"