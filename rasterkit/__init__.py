"""rasterkit: resampling and Gaussian blur for images and color sequences.

Modules:
- image: Image and Color containers (NumPy-backed).
- algorithms: resample and blur, for images and ordered color sequences.
- errors: ContractViolation raised on precondition failures.
- utils: Pillow IO and debug dumps.
"""
from __future__ import annotations

from .algorithms import (
    apply_filter,
    blur,
    blur_image,
    blur_sequence,
    resample,
    resample_image,
    resample_sequence,
)
from .errors import ContractViolation
from .image import Color, Image

__all__ = [
    "Color",
    "ContractViolation",
    "Image",
    "apply_filter",
    "blur",
    "blur_image",
    "blur_sequence",
    "resample",
    "resample_image",
    "resample_sequence",
]
