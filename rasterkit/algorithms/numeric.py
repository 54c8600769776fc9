"""Numeric helpers shared by the resampler and the blur.

- index mapping for endpoint-preserving nearest-neighbor resampling
- clamp-to-edge index addressing
- truncated, normalized 1D Gaussian kernels
- float <-> element type conversion policies
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable

import numpy as np

from ..image import resolve_dtype

Array = np.ndarray

logger = logging.getLogger(__name__)

# Smallest sigma used to build a kernel; smaller positive values are clamped.
MIN_SIGMA = 0.001
# Kernel radius in standard deviations.
KERNEL_EXTENT = 3.0


def round_half_away(values: Array) -> Array:
    """Round to nearest, ties away from zero (``2.5 -> 3``, ``-2.5 -> -3``).

    ``np.rint`` rounds ties to even, which is not what we want here.
    """
    v = np.asarray(values, dtype=np.float64)
    return np.where(v >= 0.0, np.floor(v + 0.5), np.ceil(v - 0.5))


def clamp_indices(indices: Array, extent: int) -> Array:
    """Clamp integer indices to ``[0, extent - 1]``."""
    return np.clip(indices, 0, extent - 1)


def map_indices(target: int, source: int) -> Array:
    """Map every output index of an axis of size ``target`` onto ``source``.

    For ``target >= 2`` output ``i`` takes ``round(i * (source - 1) / (target - 1))``
    clamped to the source range, so output 0 maps to source 0 and output
    ``target - 1`` maps to ``source - 1``. A single output sample takes the
    lower-middle source element ``source // 2``. Evaluated in integer
    arithmetic so ties resolve exactly.
    """
    if target <= 0 or source <= 0:
        return np.empty(0, dtype=np.intp)
    if target == 1:
        return np.array([source // 2], dtype=np.intp)
    span = target - 1
    i = np.arange(target, dtype=np.int64)
    idx = (2 * i * (source - 1) + span) // (2 * span)
    return clamp_indices(idx, source).astype(np.intp)


@dataclass(frozen=True)
class GaussianKernel:
    """Symmetric 1D kernel with ``2 * radius + 1`` weights summing to 1."""

    weights: Array
    radius: int

    @property
    def offsets(self) -> range:
        return range(-self.radius, self.radius + 1)


def gaussian_kernel(sigma: float) -> GaussianKernel:
    """Build a Gaussian kernel truncated at ``ceil(3 * sigma)``.

    Non-positive (or NaN) ``sigma`` gives an empty kernel of radius 0.
    An infinite ``sigma`` has no finite support and raises ``ValueError``.
    """
    if not sigma > 0:
        return GaussianKernel(weights=np.zeros(0, dtype=np.float64), radius=0)
    if math.isinf(sigma):
        raise ValueError("sigma must be finite, got %r" % (sigma,))

    s = max(MIN_SIGMA, float(sigma))
    radius = max(0, int(math.ceil(KERNEL_EXTENT * s)))
    offsets = np.arange(-radius, radius + 1, dtype=np.float64)
    weights = np.exp(-(offsets * offsets) / (2.0 * s * s))
    total = weights.sum()
    if total > 0.0:
        weights /= total
    logger.debug("gaussian kernel: sigma=%g radius=%d", s, radius)
    return GaussianKernel(weights=weights, radius=radius)


@dataclass(frozen=True)
class ConversionPolicy:
    """How an element type enters and leaves float accumulation."""

    dtype: np.dtype
    from_float: Callable[[Array], Array]

    def to_float(self, values: Array) -> Array:
        return np.asarray(values, dtype=np.float64)


def _uint8_from_float(values: Array) -> Array:
    return round_half_away(np.clip(values, 0.0, 255.0)).astype(np.uint8)


def _int32_from_float(values: Array) -> Array:
    return round_half_away(values).astype(np.int32)


def _float32_from_float(values: Array) -> Array:
    return np.asarray(values).astype(np.float32)


_POLICIES = {
    policy.dtype: policy
    for policy in (
        ConversionPolicy(np.dtype(np.uint8), _uint8_from_float),
        ConversionPolicy(np.dtype(np.int32), _int32_from_float),
        ConversionPolicy(np.dtype(np.float32), _float32_from_float),
    )
}


def policy_for(dtype) -> ConversionPolicy:
    """Return the conversion policy for a supported element type."""
    return _POLICIES[resolve_dtype(dtype)]


__all__ = [
    "KERNEL_EXTENT",
    "MIN_SIGMA",
    "ConversionPolicy",
    "GaussianKernel",
    "clamp_indices",
    "gaussian_kernel",
    "map_indices",
    "policy_for",
    "round_half_away",
]
