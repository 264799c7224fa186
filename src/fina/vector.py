"""Pairwise vector metrics."""

from __future__ import annotations

import logging

import numpy as np

from ._math import EPSILON, ArrayLike, _as_sequence, _require_nonempty, _require_same_length
from .errors import ZeroNormError

__all__ = ["dot", "euclidean", "cosine_similarity"]

logger = logging.getLogger(__name__)


def dot(a: ArrayLike, b: ArrayLike) -> float:
    """Inner product ``sum(a_i * b_i)``. Two empty vectors give 0.0."""
    a_arr, b_arr = _as_sequence(a), _as_sequence(b)
    _require_same_length(a_arr, b_arr)
    return float(np.sum(a_arr * b_arr))


def euclidean(a: ArrayLike, b: ArrayLike) -> float:
    """Euclidean (L2) distance between ``a`` and ``b``."""
    a_arr, b_arr = _as_sequence(a), _as_sequence(b)
    _require_same_length(a_arr, b_arr)
    return float(np.sqrt(np.sum((a_arr - b_arr) ** 2)))


def cosine_similarity(a: ArrayLike, b: ArrayLike) -> float:
    """
    Cosine of the angle between ``a`` and ``b``.

    Raises
    ------
    LengthMismatchError
        ``a`` and ``b`` differ in length.
    EmptyInputError
        Both vectors are empty.
    ZeroNormError
        Either norm is below machine epsilon.
    """
    a_arr, b_arr = _as_sequence(a), _as_sequence(b)
    _require_same_length(a_arr, b_arr)
    _require_nonempty(a_arr, "Vectors cannot be empty")

    dot_ab = dot(a_arr, b_arr)
    norm_a = np.sqrt(dot(a_arr, a_arr))
    norm_b = np.sqrt(dot(b_arr, b_arr))

    if abs(norm_a) < EPSILON or abs(norm_b) < EPSILON:
        logger.debug("rejected near-zero norm (|a|=%.3e, |b|=%.3e)", norm_a, norm_b)
        raise ZeroNormError("Cannot compute cosine similarity for zero vectors")

    return float(dot_ab / (norm_a * norm_b))
