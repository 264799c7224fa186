import inspect

import pytest

import fina
from fina.registry import KERNELS, get_kernel

# Test 1
def test_registry_covers_every_kernel():
    assert len(KERNELS) == 19
    for name, spec in KERNELS.items():
        assert spec.name == name
        assert getattr(fina, name) is spec.func

# Test 2
def test_registry_arguments_match_signatures():
    for spec in KERNELS.values():
        params = list(inspect.signature(spec.func).parameters)
        assert len(params) == spec.arity + len(spec.params)
        assert tuple(params[spec.arity:]) == spec.params

# Test 3
def test_get_kernel():
    assert get_kernel("ema").returns_sequence
    assert get_kernel("clamp").params == ("x", "min_val", "max_val")
    with pytest.raises(KeyError, match="Unknown kernel"):
        get_kernel("median")
