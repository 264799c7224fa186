"""
Descriptive statistics over a flat sequence of doubles.

All statistics are population statistics (divide by ``n``).
"""

from __future__ import annotations

import numpy as np

from ._math import ArrayLike, _as_sequence, _require_nonempty

__all__ = ["mean", "variance", "std_dev", "rms"]


def mean(xs: ArrayLike) -> float:
    """Arithmetic mean, ``sum(xs) / len(xs)``."""
    arr = _as_sequence(xs)
    _require_nonempty(arr)
    return float(np.sum(arr) / arr.size)


def variance(xs: ArrayLike) -> float:
    """Population variance, computed in two passes around :func:`mean`."""
    arr = _as_sequence(xs)
    _require_nonempty(arr)
    m = mean(arr)
    return float(np.sum((arr - m) ** 2) / arr.size)


def std_dev(xs: ArrayLike) -> float:
    """Population standard deviation, ``sqrt(variance(xs))``."""
    return float(np.sqrt(variance(xs)))


def rms(xs: ArrayLike) -> float:
    """Root mean square."""
    arr = _as_sequence(xs)
    _require_nonempty(arr)
    return float(np.sqrt(np.sum(arr**2) / arr.size))
