"""Nearest-index downsampling for images and color sequences.

Every output position picks one source position through a linear,
endpoint-preserving, rounding map (see :func:`numeric.map_indices`). The
value is copied as is: this is point sampling, not area averaging.
"""
from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from ..errors import check
from ..image import Color, Image
from .numeric import map_indices

logger = logging.getLogger(__name__)


def resample_image(image: Image, target_width: int, target_height: int) -> Image:
    """Downsample an image to ``target_width x target_height``.

    Parameters
    ----------
    image : Image
        Source image with 1 or 3 channels.
    target_width, target_height : int
        Output size (> 0). Sizes at or above the source size are accepted
        and still go through the index map.

    Returns
    -------
    Image
        New image of the same element type and channel count.
    """
    check(target_width > 0 and target_height > 0, 781234981, target_width, target_height)

    src_w = image.width
    src_h = image.height
    ch = image.channels
    check(src_w > 0 and src_h > 0, 781234982, src_w, src_h)
    check(ch == 1 or ch == 3, 781234983, ch)

    rows = map_indices(target_height, src_h)
    cols = map_indices(target_width, src_w)

    src = image.array
    out = src[rows[:, np.newaxis], cols[np.newaxis, :], :]
    logger.debug(
        "resample_image: %dx%d -> %dx%d (%d channels)", src_w, src_h, target_width, target_height, ch
    )
    return Image.from_array(out, copy=False)


def resample_sequence(colors: Sequence[Color], target_length: int) -> list[Color]:
    """Downsample an ordered color sequence to ``target_length`` entries.

    Non-positive targets and empty sources give ``[]``. Targets at or above
    the source length return the source elements unchanged (no upsampling).
    """
    if target_length <= 0:
        return []
    if len(colors) == 0:
        return []

    m = len(colors)
    if target_length >= m:
        return list(colors)

    if target_length == 1:
        return [colors[m // 2]]

    return [colors[int(idx)] for idx in map_indices(target_length, m)]


__all__ = ["resample_image", "resample_sequence"]
