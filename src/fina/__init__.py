"""
FINA package
------------

Stateless numeric kernels for statistical and machine-learning preprocessing:
descriptive statistics, vector metrics, activations, losses, normalisation
and smoothing over flat sequences of doubles.
"""

from __future__ import annotations

import logging

from ._version import __version__
from ._math import EPSILON, clamp
from .activations import leaky_relu, relu, sigmoid, tanh_activation
from .errors import (
    DegenerateRangeError,
    EmptyInputError,
    ErrorKind,
    InvalidAlphaError,
    InvalidRangeError,
    KernelError,
    LengthMismatchError,
    NonPositivePredictionError,
    SoftmaxUnderflowError,
    ZeroNormError,
    ZeroVarianceError,
)
from .losses import cross_entropy, log_loss, mse, softmax
from .preprocessing import ema, min_max_normalize, z_score_normalize
from .result import Outcome, attempt
from .stats import mean, rms, std_dev, variance
from .vector import cosine_similarity, dot, euclidean

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "EPSILON",
    "mean",
    "variance",
    "std_dev",
    "rms",
    "dot",
    "euclidean",
    "cosine_similarity",
    "sigmoid",
    "relu",
    "leaky_relu",
    "tanh_activation",
    "softmax",
    "cross_entropy",
    "mse",
    "log_loss",
    "min_max_normalize",
    "z_score_normalize",
    "ema",
    "clamp",
    "ErrorKind",
    "KernelError",
    "EmptyInputError",
    "LengthMismatchError",
    "ZeroNormError",
    "ZeroVarianceError",
    "DegenerateRangeError",
    "NonPositivePredictionError",
    "SoftmaxUnderflowError",
    "InvalidAlphaError",
    "InvalidRangeError",
    "Outcome",
    "attempt",
]
