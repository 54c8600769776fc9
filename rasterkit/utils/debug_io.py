"""Debug image dumping and color-sequence visualization.

Used by the test suite to write source/result images next to each test so
results can be inspected by eye.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence, Union

import numpy as np

from ..algorithms.numeric import map_indices
from ..image import Color, Image, colors_to_array
from .loader import save_image

logger = logging.getLogger(__name__)


def dump_image(path: Union[str, Path], image: Image) -> Path:
    """Save ``image`` to ``path``, creating parent directories."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    save_image(image, p)
    logger.debug("dumped %r to %s", image, p)
    return p


def stretch_to_width(colors: Sequence[Color], width: int) -> list[Color]:
    """Stretch a short sequence to ``width`` entries by nearest index."""
    if len(colors) == 0 or width <= 0:
        return []
    return [colors[int(i)] for i in map_indices(width, len(colors))]


def colors_strip(colors: Sequence[Color], height: int = 12) -> Image:
    """Render a color sequence as a band image of shape (height, len(colors))."""
    if len(colors) == 0:
        raise ValueError("colors must not be empty")
    row = colors_to_array(colors)
    band = np.repeat(row[np.newaxis, :, :], height, axis=0)
    return Image.from_array(band, copy=False)


def stack_strips(*sequences: Sequence[Color], band_height: int = 12) -> Image:
    """Stack several sequences as horizontal bands of one image.

    Shorter sequences are stretched to the width of the longest one so
    downsampled results line up with their source. Every band is cast to
    the element type of the first sequence.
    """
    if not sequences:
        raise ValueError("at least one sequence is required")
    width = max(len(s) for s in sequences)
    bands = [colors_strip(stretch_to_width(s, width), band_height).array for s in sequences]
    dtype = bands[0].dtype
    stacked = np.concatenate([band.astype(dtype, copy=False) for band in bands], axis=0)
    return Image.from_array(stacked, copy=False)


__all__ = ["colors_strip", "dump_image", "stack_strips", "stretch_to_width"]
