"""Image loading and saving utilities using Pillow.

All processing in this project happens on NumPy-backed :class:`Image`
objects. These helpers only convert between Pillow images and ``uint8``
1- or 3-channel images for IO.
"""
from __future__ import annotations

from pathlib import Path
from typing import Union

import numpy as np
from PIL import Image as PILImage

from ..algorithms.numeric import round_half_away
from ..image import Image

_MODES = {"RGB": 3, "L": 1}


def load_image(path: Union[str, Path], mode: str = "RGB") -> Image:
    """Load an image file into a uint8 :class:`Image`.

    Parameters
    ----------
    path : str | Path
        Path to an image supported by Pillow.
    mode : str
        "RGB" for 3 channels or "L" for grayscale.

    Returns
    -------
    Image
        Image with dtype=uint8 and 3 (RGB) or 1 (L) channels.
    """
    if mode not in _MODES:
        raise ValueError(f"mode must be one of {sorted(_MODES)}, got {mode!r}")
    p = Path(path)
    with PILImage.open(p) as im:
        im = im.convert(mode)
        arr = np.array(im, dtype=np.uint8)
    return Image.from_array(arr, copy=False)


def to_uint8(image: Image) -> np.ndarray:
    """Return the image data as a uint8 ``(H, W, C)`` array.

    Non-uint8 images are clipped to [0, 255] and rounded.
    """
    arr = image.array
    if arr.dtype == np.uint8:
        return arr
    return round_half_away(np.clip(arr, 0, 255)).astype(np.uint8)


def save_image(image: Image, path: Union[str, Path]) -> None:
    """Save a 1- or 3-channel :class:`Image` to a file via Pillow.

    Parameters
    ----------
    image : Image
        Image to save. float32/int32 data is clipped to [0, 255].
    path : str | Path
        Output file path. The format is inferred from the extension.
    """
    if not isinstance(image, Image):
        raise TypeError("image must be a rasterkit Image")
    if image.channels not in (1, 3):
        raise ValueError("image must have 1 or 3 channels")
    if image.width == 0 or image.height == 0:
        raise ValueError("cannot save an empty image")

    arr = to_uint8(image)
    if image.channels == 1:
        im = PILImage.fromarray(np.ascontiguousarray(arr[:, :, 0]))
    else:
        im = PILImage.fromarray(np.ascontiguousarray(arr))
    im.save(Path(path))
