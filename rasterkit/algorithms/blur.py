"""Gaussian blur for images and color sequences.

The kernel is a 1D Gaussian truncated at 3 sigma and normalized to sum to 1
(see :func:`numeric.gaussian_kernel`). Images are blurred separably: a
horizontal pass writes a float scratch buffer, and the vertical pass reads
that buffer directly, so values are rounded to the element type only once.
Samples outside the image are taken from the nearest edge (clamp-to-edge).

Accumulation is always done in float64 whatever the element type; results
are converted back with the element type's conversion policy.
"""
from __future__ import annotations

import logging
import math
from typing import Sequence

import numpy as np

from ..errors import check
from ..image import Color, Image, array_to_colors, colors_to_array
from .numeric import GaussianKernel, clamp_indices, gaussian_kernel, policy_for

Array = np.ndarray

logger = logging.getLogger(__name__)


def _convolve_axis(values: Array, kernel: GaussianKernel, axis: int) -> Array:
    """Convolve float ``values`` with ``kernel`` along ``axis``, clamping at the edges."""
    extent = values.shape[axis]
    positions = np.arange(extent)
    acc = np.zeros(values.shape, dtype=np.float64)
    for offset, weight in zip(kernel.offsets, kernel.weights):
        src = clamp_indices(positions + offset, extent)
        acc += weight * np.take(values, src, axis=axis)
    return acc


def blur_image(image: Image, strength: float) -> Image:
    """Blur an image with a Gaussian of standard deviation ``strength``.

    Parameters
    ----------
    image : Image
        Source image with 1 or 3 channels.
    strength : float
        Sigma in pixels. ``strength <= 0`` returns ``image`` itself.
        An infinite ``strength`` is a contract violation.

    Returns
    -------
    Image
        Blurred image of the same element type.
    """
    if not strength > 0:
        logger.debug("blur_image: strength=%r, returning input", strength)
        return image
    check(math.isfinite(strength), 981234005, strength)

    w = image.width
    h = image.height
    c = image.channels
    check(w > 0 and h > 0, 981234001, w, h)
    check(c == 1 or c == 3, 981234002, c)

    kernel = gaussian_kernel(strength)
    if kernel.radius == 0:
        return image

    policy = policy_for(image.dtype)
    src = policy.to_float(image.array)

    # Horizontal pass along columns, then vertical pass along rows of the scratch buffer.
    tmp = _convolve_axis(src, kernel, axis=1)
    acc = _convolve_axis(tmp, kernel, axis=0)

    return Image.from_array(policy.from_float(acc), copy=False)


def blur_sequence(colors: Sequence[Color], strength: float) -> list[Color]:
    """Blur an ordered color sequence with a Gaussian of sigma ``strength``.

    ``strength <= 0`` returns a copy of the input list. An infinite
    ``strength`` is a contract violation.
    """
    if not strength > 0:
        return list(colors)
    check(math.isfinite(strength), 981234005, strength)
    if len(colors) == 0:
        return []

    kernel = gaussian_kernel(strength)
    if kernel.radius == 0:
        return list(colors)

    c = colors[0].channels
    check(c == 1 or c == 3, 981234003, c)
    check(all(col.channels == c for col in colors), 981234004, c)

    dtype = colors[0].dtype
    policy = policy_for(dtype)
    src = policy.to_float(colors_to_array(colors))

    # One scratch row per channel.
    tmp = _convolve_axis(src.T, kernel, axis=1)

    return array_to_colors(policy.from_float(tmp.T), dtype)


__all__ = ["blur_image", "blur_sequence"]
