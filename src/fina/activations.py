"""
Scalar activation functions.

None of these can fail: they are defined for every double, including NaN and
the infinities.
"""

from __future__ import annotations

import numpy as np

from ._math import SIGMOID_SATURATION

__all__ = ["sigmoid", "relu", "leaky_relu", "tanh_activation"]


def sigmoid(x: float) -> float:
    """Logistic sigmoid, pinned to exactly 1.0 / 0.0 beyond +/-500 to avoid overflow."""
    x = float(x)
    if x > SIGMOID_SATURATION:
        return 1.0
    if x < -SIGMOID_SATURATION:
        return 0.0
    return float(1.0 / (1.0 + np.exp(-x)))


def relu(x: float) -> float:
    # fmax ignores NaN, so relu(nan) == 0.0
    return float(np.fmax(float(x), 0.0))


def leaky_relu(x: float, alpha: float) -> float:
    """``x`` for non-negative input, ``alpha * x`` otherwise. ``alpha`` is not validated."""
    x = float(x)
    return x if x >= 0.0 else float(alpha) * x


def tanh_activation(x: float) -> float:
    return float(np.tanh(float(x)))
