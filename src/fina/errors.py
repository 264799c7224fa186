"""
Error taxonomy for the FINA kernels.

Every kernel failure is a :class:`KernelError` carrying one :class:`ErrorKind`
and a human-readable message. ``KernelError`` derives from ``ValueError`` so
existing ``except ValueError`` call sites keep working.
"""

from __future__ import annotations

from enum import Enum

__all__ = [
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
]


class ErrorKind(str, Enum):
    """Distinguishable failure kinds. None of them is retryable."""

    EMPTY_INPUT = "EmptyInput"
    LENGTH_MISMATCH = "LengthMismatch"
    ZERO_NORM = "ZeroNormError"
    ZERO_VARIANCE = "ZeroVariance"
    DEGENERATE_RANGE = "DegenerateRange"
    NON_POSITIVE_PREDICTION = "NonPositivePrediction"
    SOFTMAX_UNDERFLOW = "SoftmaxUnderflow"
    INVALID_ALPHA = "InvalidAlpha"
    INVALID_RANGE = "InvalidRange"


class KernelError(ValueError):
    """Base class for invalid-input failures raised by a kernel."""

    kind: ErrorKind | None = None

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        kind = None if self.kind is None else self.kind.value
        return f"{type(self).__name__}(kind={kind!r}, message={self.message!r})"


class EmptyInputError(KernelError):
    kind = ErrorKind.EMPTY_INPUT


class LengthMismatchError(KernelError):
    kind = ErrorKind.LENGTH_MISMATCH


class ZeroNormError(KernelError):
    kind = ErrorKind.ZERO_NORM


class ZeroVarianceError(KernelError):
    kind = ErrorKind.ZERO_VARIANCE


class DegenerateRangeError(KernelError):
    kind = ErrorKind.DEGENERATE_RANGE


class NonPositivePredictionError(KernelError):
    kind = ErrorKind.NON_POSITIVE_PREDICTION


class SoftmaxUnderflowError(KernelError):
    kind = ErrorKind.SOFTMAX_UNDERFLOW


class InvalidAlphaError(KernelError):
    kind = ErrorKind.INVALID_ALPHA


class InvalidRangeError(KernelError):
    kind = ErrorKind.INVALID_RANGE
