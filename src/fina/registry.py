"""Name-based lookup of every kernel, with the shape of its arguments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from ._math import clamp
from .activations import leaky_relu, relu, sigmoid, tanh_activation
from .losses import cross_entropy, log_loss, mse, softmax
from .preprocessing import ema, min_max_normalize, z_score_normalize
from .stats import mean, rms, std_dev, variance
from .vector import cosine_similarity, dot, euclidean

__all__ = ["KernelSpec", "KERNELS", "get_kernel"]


@dataclass(frozen=True)
class KernelSpec:
    """
    Parameters
    ----------
    name :
        Public function name.
    func :
        The kernel itself.
    arity :
        Number of leading sequence arguments (0 for scalar kernels).
    params :
        Names of the scalar arguments, in call order after the sequences.
    returns_sequence :
        True when the kernel returns an array rather than a float.
    """

    name: str
    func: Callable
    arity: int
    params: Tuple[str, ...] = ()
    returns_sequence: bool = False


_SPECS = (
    KernelSpec("mean", mean, 1),
    KernelSpec("variance", variance, 1),
    KernelSpec("std_dev", std_dev, 1),
    KernelSpec("rms", rms, 1),
    KernelSpec("dot", dot, 2),
    KernelSpec("euclidean", euclidean, 2),
    KernelSpec("cosine_similarity", cosine_similarity, 2),
    KernelSpec("sigmoid", sigmoid, 0, ("x",)),
    KernelSpec("relu", relu, 0, ("x",)),
    KernelSpec("leaky_relu", leaky_relu, 0, ("x", "alpha")),
    KernelSpec("tanh_activation", tanh_activation, 0, ("x",)),
    KernelSpec("softmax", softmax, 1, returns_sequence=True),
    KernelSpec("cross_entropy", cross_entropy, 2),
    KernelSpec("mse", mse, 2),
    KernelSpec("log_loss", log_loss, 2),
    KernelSpec("min_max_normalize", min_max_normalize, 1, returns_sequence=True),
    KernelSpec("z_score_normalize", z_score_normalize, 1, returns_sequence=True),
    KernelSpec("ema", ema, 1, ("alpha",), returns_sequence=True),
    KernelSpec("clamp", clamp, 0, ("x", "min_val", "max_val")),
)

KERNELS: Dict[str, KernelSpec] = {spec.name: spec for spec in _SPECS}


def get_kernel(name: str) -> KernelSpec:
    try:
        return KERNELS[name]
    except KeyError:
        raise KeyError(f"Unknown kernel '{name}'. Known kernels: {sorted(KERNELS)}") from None
