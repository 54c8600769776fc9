"""Utility functions for rasterkit.

Modules:
- loader: Load/save Pillow <-> Image conversion utilities.
- debug_io: Debug image dumps and color-sequence visualization.
"""
from .loader import load_image, save_image
from .debug_io import colors_strip, dump_image, stack_strips, stretch_to_width

__all__ = [
    "load_image",
    "save_image",
    "dump_image",
    "colors_strip",
    "stack_strips",
    "stretch_to_width",
]
