"""Image and Color containers backed by NumPy arrays.

An :class:`Image` is a rectangular raster stored row-major as an
``(H, W, C)`` array. A :class:`Color` is one 1- or 3-channel sample, the
element type of the ordered color sequences (palettes, gradients, scanlines)
that the algorithms accept next to images.

Only three element types are supported: ``uint8``, ``float32`` and
``int32``.
"""
from __future__ import annotations

from typing import Iterator, Sequence, Union

import numpy as np

Array = np.ndarray

SUPPORTED_DTYPES = (np.dtype(np.uint8), np.dtype(np.float32), np.dtype(np.int32))


def resolve_dtype(dtype) -> np.dtype:
    """Return ``dtype`` as a ``np.dtype``, rejecting unsupported element types."""
    dt = np.dtype(dtype)
    if dt not in SUPPORTED_DTYPES:
        names = ", ".join(d.name for d in SUPPORTED_DTYPES)
        raise TypeError(f"Unsupported element type {dt.name}; expected one of: {names}")
    return dt


class Color:
    """Immutable 1- or 3-channel color sample.

    Parameters
    ----------
    *values : scalar
        One (grayscale) or three (RGB) channel values.
    dtype : numpy dtype
        Element type; values are coerced to it.
    """

    __slots__ = ("_values", "_dtype")

    def __init__(self, *values, dtype=np.uint8) -> None:
        if len(values) not in (1, 3):
            raise ValueError(f"Color takes 1 or 3 values, got {len(values)}")
        dt = resolve_dtype(dtype)
        self._values = tuple(np.asarray(values, dtype=dt).tolist())
        self._dtype = dt

    @property
    def channels(self) -> int:
        return len(self._values)

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    def __getitem__(self, channel: int):
        return self._values[channel]

    def __iter__(self) -> Iterator:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._dtype == other._dtype and self._values == other._values

    def __hash__(self) -> int:
        return hash((self._values, self._dtype.str))

    def __repr__(self) -> str:
        vals = ", ".join(repr(v) for v in self._values)
        return f"Color({vals}, dtype={self._dtype.name})"

    def to_array(self) -> Array:
        return np.array(self._values, dtype=self._dtype)


class Image:
    """Raster image of shape (height, width, channels).

    Elements are addressed as ``img[row, col]`` or ``img[row, col, ch]``.
    For a single-channel image ``img[row, col]`` is a scalar; for a
    multi-channel image it is a :class:`Color`.

    Parameters
    ----------
    width, height : int
        Dimensions in pixels (>= 0).
    channels : int
        Channel count (>= 1).
    dtype : numpy dtype
        Element type: uint8, float32 or int32.
    """

    def __init__(self, width: int, height: int, channels: int = 1, dtype=np.uint8) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"Image dimensions must be >= 0, got {width}x{height}")
        if channels < 1:
            raise ValueError(f"channels must be >= 1, got {channels}")
        self._data = np.zeros((height, width, channels), dtype=resolve_dtype(dtype))

    @classmethod
    def from_array(cls, arr: Array, copy: bool = True) -> "Image":
        """Wrap an ``(H, W)`` or ``(H, W, C)`` array as an Image.

        A 2D array becomes a single-channel image. With ``copy=False`` the
        image shares memory with ``arr``.
        """
        if not isinstance(arr, np.ndarray):
            raise TypeError("arr must be a NumPy array")
        if arr.ndim == 2:
            arr = arr[:, :, np.newaxis]
        elif arr.ndim != 3:
            raise ValueError(f"arr must have shape (H, W) or (H, W, C), got {arr.shape}")
        if arr.shape[2] < 1:
            raise ValueError("arr must have at least one channel")
        resolve_dtype(arr.dtype)
        img = cls.__new__(cls)
        img._data = arr.copy() if copy else arr
        return img

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def height(self) -> int:
        return self._data.shape[0]

    @property
    def channels(self) -> int:
        return self._data.shape[2]

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def shape(self) -> tuple[int, int, int]:
        return self._data.shape

    @property
    def array(self) -> Array:
        """Backing ``(H, W, C)`` array (not a copy)."""
        return self._data

    def __getitem__(self, key: tuple):
        if len(key) == 3:
            return self._data[key].item()
        row, col = key
        if self.channels == 1:
            return self._data[row, col, 0].item()
        return Color(*self._data[row, col], dtype=self.dtype)

    def __setitem__(self, key: tuple, value: Union[Color, int, float]) -> None:
        if len(key) == 3:
            self._data[key] = value
            return
        row, col = key
        if isinstance(value, Color):
            if value.channels != self.channels:
                raise ValueError(
                    f"Color has {value.channels} channels, image has {self.channels}"
                )
            self._data[row, col, :] = value.to_array()
        else:
            self._data[row, col, :] = value

    def fill(self, value: Union[Color, int, float]) -> None:
        """Set every element to ``value`` (a scalar or a matching Color)."""
        if isinstance(value, Color):
            if value.channels != self.channels:
                raise ValueError(
                    f"Color has {value.channels} channels, image has {self.channels}"
                )
            self._data[...] = value.to_array()
        else:
            self._data[...] = value

    def copy(self) -> "Image":
        return Image.from_array(self._data, copy=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return (
            self.dtype == other.dtype
            and self.shape == other.shape
            and bool(np.array_equal(self._data, other._data))
        )

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height}, channels={self.channels}, dtype={self.dtype.name})"


def colors_to_array(colors: Sequence[Color]) -> Array:
    """Stack a non-empty color sequence into an ``(N, C)`` array of its dtype."""
    if len(colors) == 0:
        raise ValueError("colors must not be empty")
    return np.stack([c.to_array() for c in colors])


def array_to_colors(arr: Array, dtype=None) -> list[Color]:
    """Convert an ``(N, C)`` array back to a list of Colors."""
    dt = arr.dtype if dtype is None else dtype
    return [Color(*row, dtype=dt) for row in arr]


__all__ = [
    "SUPPORTED_DTYPES",
    "Color",
    "Image",
    "array_to_colors",
    "colors_to_array",
    "resolve_dtype",
]
