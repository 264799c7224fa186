"""
Preprocessing utilities for the FINA package.

This module contains
  • the ``min_max_normalize`` and ``z_score_normalize`` rescaling transforms, and
  • the ``ema`` exponential moving average smoother.

Each returns a new float64 array the same length as its input.
"""

from __future__ import annotations

import logging

import numpy as np

from ._math import EPSILON, ArrayLike, _as_sequence, _require_nonempty
from .errors import DegenerateRangeError, InvalidAlphaError, ZeroVarianceError
from .stats import mean, std_dev

__all__ = ["min_max_normalize", "z_score_normalize", "ema"]

logger = logging.getLogger(__name__)


def min_max_normalize(xs: ArrayLike) -> np.ndarray:
    """Rescale ``xs`` onto ``[0, 1]``. NaN entries are ignored when finding the range."""
    arr = _as_sequence(xs)
    _require_nonempty(arr)

    min_val = np.fmin.reduce(arr)
    max_val = np.fmax.reduce(arr)
    span = max_val - min_val

    if abs(span) < EPSILON:
        logger.debug("rejected degenerate range [%r, %r]", float(min_val), float(max_val))
        raise DegenerateRangeError("All elements are equal, cannot normalize")

    return (arr - min_val) / span


def z_score_normalize(xs: ArrayLike) -> np.ndarray:
    """Standardise ``xs`` to zero mean and unit population standard deviation."""
    arr = _as_sequence(xs)
    _require_nonempty(arr)

    m = mean(arr)
    s = std_dev(arr)

    if abs(s) < EPSILON:
        logger.debug("rejected zero standard deviation over %d values", arr.size)
        raise ZeroVarianceError("Standard deviation is zero, cannot normalize")

    return (arr - m) / s


def ema(xs: ArrayLike, alpha: float) -> np.ndarray:
    """
    Exponential moving average.

    ``out[0] = xs[0]`` and ``out[i] = alpha * xs[i] + (1 - alpha) * out[i - 1]``.

    Parameters
    ----------
    xs :
        Samples in time order.
    alpha :
        Smoothing factor in ``[0, 1]``; 1.0 reproduces ``xs`` and 0.0 holds
        the first sample.
    """
    arr = _as_sequence(xs)
    _require_nonempty(arr)
    alpha = float(alpha)
    if not 0.0 <= alpha <= 1.0:
        logger.debug("rejected smoothing factor %r", alpha)
        raise InvalidAlphaError(f"Alpha must be between 0 and 1 (got {alpha!r})")

    out = np.empty_like(arr)
    value = arr[0]
    out[0] = value
    for i in range(1, arr.size):
        value = alpha * arr[i] + (1.0 - alpha) * value
        out[i] = value
    return out
