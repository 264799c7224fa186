"""
Low-level numerical helpers used throughout the FINA package.

The functions in this module are intentionally lightweight so they can be
imported by every kernel module without creating cyclic dependencies. They
cover input coercion, the shared precondition checks, the numeric thresholds
and the scalar ``clamp`` utility.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Iterable, Sequence, Union

import numpy as np

from .errors import EmptyInputError, InvalidRangeError, LengthMismatchError

__all__ = [
    "EPSILON",
    "SIGMOID_SATURATION",
    "ArrayLike",
    "clamp",
    "_as_sequence",
    "_require_nonempty",
    "_require_same_length",
]

logger = logging.getLogger(__name__)

ArrayLike = Union[Sequence[float], np.ndarray, Iterable[float]]

# Machine epsilon of a double (2.220446049250313e-16); the near-zero threshold.
EPSILON: float = float(np.finfo(np.float64).eps)

# Beyond this magnitude the logistic function is pinned to 0.0 / 1.0.
SIGMOID_SATURATION: float = 500.0


def _as_sequence(xs: ArrayLike) -> np.ndarray:
    """Coerce ``xs`` to a flat float64 array without touching the caller's object."""
    if isinstance(xs, Iterator):
        xs = list(xs)
    try:
        arr = np.asarray(xs, dtype=np.float64)
    except (TypeError, ValueError, OverflowError) as exc:
        raise TypeError(f"expected a sequence of numbers, got {type(xs).__name__}") from exc
    if arr.ndim != 1:
        raise TypeError(f"expected a one-dimensional sequence, got {arr.ndim} dimension(s)")
    return arr


def _require_nonempty(arr: np.ndarray, message: str = "Data cannot be empty") -> None:
    if arr.size == 0:
        logger.debug("rejected empty input")
        raise EmptyInputError(message)


def _require_same_length(a: np.ndarray, b: np.ndarray) -> None:
    if a.shape[0] != b.shape[0]:
        logger.debug("rejected length mismatch (%d != %d)", a.shape[0], b.shape[0])
        raise LengthMismatchError(
            f"Vectors must be same length (got {a.shape[0]} and {b.shape[0]})"
        )


def clamp(x: float, min_val: float, max_val: float) -> float:
    """
    Bound ``x`` into ``[min_val, max_val]``.

    A NaN ``x`` is returned unchanged. Bounds that cannot be ordered (NaN) are
    rejected the same way as an inverted range.
    """
    x, lo, hi = float(x), float(min_val), float(max_val)
    if np.isnan(lo) or np.isnan(hi) or lo > hi:
        logger.debug("rejected clamp range [%r, %r]", lo, hi)
        raise InvalidRangeError(
            f"min_val cannot be greater than max_val (got min_val={lo!r}, max_val={hi!r})"
        )
    if x < lo:
        return lo
    if x > hi:
        return hi
    return x
