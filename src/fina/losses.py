"""
Probability normalisation and loss functions.

``cross_entropy`` rejects non-positive predictions while ``log_loss`` clamps
them into ``[eps, 1 - eps]``. Both behaviours are kept as they are.
"""

from __future__ import annotations

import logging

import numpy as np

from ._math import EPSILON, ArrayLike, _as_sequence, _require_nonempty, _require_same_length
from .errors import NonPositivePredictionError, SoftmaxUnderflowError

__all__ = ["softmax", "cross_entropy", "mse", "log_loss"]

logger = logging.getLogger(__name__)


def softmax(xs: ArrayLike) -> np.ndarray:
    """
    Numerically stable softmax.

    The maximum is subtracted from every element before exponentiating so the
    largest term is ``exp(0) == 1``.

    Raises
    ------
    EmptyInputError
        ``xs`` is empty.
    SoftmaxUnderflowError
        The sum of exponentials is exactly 0.0.
    """
    arr = _as_sequence(xs)
    _require_nonempty(arr)

    max_val = np.fmax.reduce(arr, initial=-np.inf)
    exp_values = np.exp(arr - max_val)
    sum_exp = float(np.sum(exp_values))

    if sum_exp == 0.0:
        logger.debug("softmax underflow over %d values", arr.size)
        raise SoftmaxUnderflowError("Underflow in softmax computation")

    return exp_values / sum_exp


def _paired(pred: ArrayLike, target: ArrayLike) -> tuple[np.ndarray, np.ndarray]:
    p, t = _as_sequence(pred), _as_sequence(target)
    _require_same_length(p, t)
    _require_nonempty(p, "Vectors cannot be empty")
    return p, t


def cross_entropy(pred: ArrayLike, target: ArrayLike) -> float:
    """
    Categorical cross-entropy ``-sum(target_i * ln(pred_i))``.

    Every prediction must be strictly positive; the first offending index is
    reported in the :class:`NonPositivePredictionError` message.
    """
    p, t = _paired(pred, target)

    bad = np.flatnonzero(p <= 0.0)
    if bad.size:
        idx = int(bad[0])
        logger.debug("rejected non-positive prediction at index %d", idx)
        raise NonPositivePredictionError(
            f"Predictions must be positive for cross entropy (pred[{idx}]={p[idx]!r})"
        )

    return float(-np.sum(t * np.log(p)))


def mse(pred: ArrayLike, target: ArrayLike) -> float:
    """Mean squared error."""
    p, t = _paired(pred, target)
    return float(np.sum((p - t) ** 2) / p.size)


def log_loss(pred: ArrayLike, target: ArrayLike) -> float:
    """
    Binary cross-entropy averaged over samples.

    Predictions are clamped to ``[eps, 1 - eps]`` per element without raising;
    a NaN prediction clamps to ``eps``.
    """
    p, t = _paired(pred, target)
    p = np.fmin(np.fmax(p, EPSILON), 1.0 - EPSILON)
    loss = np.sum(t * np.log(p) + (1.0 - t) * np.log(1.0 - p))
    return float(-loss / p.size)
