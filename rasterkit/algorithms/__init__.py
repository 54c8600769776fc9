"""Image algorithms and unified entry points.

Exported API
------------
- resample(target, *size)
- blur(target, strength)
- apply_filter(image, method, **params)

Both algorithms accept either an :class:`~rasterkit.image.Image` or an
ordered sequence of :class:`~rasterkit.image.Color` and never modify their
input.

Supported methods for ``apply_filter``
--------------------------------------
- "none"     : return the input unchanged
- "blur"     : Gaussian blur, params ``strength``
- "resample" : nearest-index downsampling, params ``width``, ``height``
"""
from __future__ import annotations

from typing import Literal, Sequence, Union

from ..image import Color, Image
from .blur import blur_image, blur_sequence
from .resample import resample_image, resample_sequence

Target = Union[Image, Sequence[Color]]


def resample(target: Target, *size: int) -> Target:
    """Downsample an image to ``(width, height)`` or a sequence to ``(length,)``."""
    if isinstance(target, Image):
        if len(size) != 2:
            raise TypeError("resample(image, width, height) takes two sizes")
        return resample_image(target, size[0], size[1])
    if len(size) != 1:
        raise TypeError("resample(colors, length) takes one size")
    return resample_sequence(target, size[0])


def blur(target: Target, strength: float) -> Target:
    """Gaussian-blur an image or a color sequence."""
    if isinstance(target, Image):
        return blur_image(target, strength)
    return blur_sequence(target, strength)


def apply_filter(
    image: Image,
    method: Literal["none", "blur", "resample"] = "none",
    **params,
) -> Image:
    """Apply a named algorithm to an image.

    Parameters
    ----------
    image : Image
        Source image.
    method : str
        Algorithm to apply.
    **params
        ``strength`` for "blur"; ``width`` and ``height`` for "resample".

    Returns
    -------
    Image
        Result image.
    """
    m = method.lower()
    if m == "none":
        return image
    if m == "blur":
        return blur_image(image, float(params["strength"]))
    if m == "resample":
        return resample_image(image, int(params["width"]), int(params["height"]))

    raise ValueError(f"Unknown method: {method}")


__all__ = [
    "apply_filter",
    "blur",
    "blur_image",
    "blur_sequence",
    "resample",
    "resample_image",
    "resample_sequence",
]
