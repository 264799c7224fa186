import pytest

from fina import (
    EmptyInputError,
    ErrorKind,
    KernelError,
    Outcome,
    attempt,
    dot,
    mean,
    softmax,
)
from fina import errors

# Test 1
def test_every_kind_has_one_error_class():
    classes = [
        cls for cls in vars(errors).values()
        if isinstance(cls, type) and issubclass(cls, KernelError) and cls is not KernelError
    ]
    kinds = [cls.kind for cls in classes]
    assert sorted(kinds) == sorted(ErrorKind)
    assert len(set(kinds)) == len(kinds)

# Test 2
def test_kernel_errors_are_value_errors():
    with pytest.raises(ValueError):
        mean([])
    err = EmptyInputError("Data cannot be empty")
    assert str(err) == "Data cannot be empty"
    assert "EmptyInput" in repr(err)
    assert ErrorKind.EMPTY_INPUT == "EmptyInput"

# Test 3
def test_attempt_success():
    outcome = attempt(dot, [1, 2], [3, 4])
    assert outcome.ok
    assert outcome.kind is None
    assert outcome.value == 11.0
    assert outcome.unwrap() == 11.0

# Test 4
def test_attempt_failure():
    outcome = attempt(softmax, [])
    assert not outcome.ok
    assert outcome.kind is ErrorKind.EMPTY_INPUT
    assert outcome.value is None
    with pytest.raises(EmptyInputError):
        outcome.unwrap()

# Test 5
def test_attempt_does_not_capture_type_errors():
    with pytest.raises(TypeError):
        attempt(mean, [[1.0], [2.0]])

# Test 6
def test_outcome_is_immutable():
    outcome = Outcome(value=1.0)
    with pytest.raises(AttributeError):
        outcome.value = 2.0

# Test 7
def test_base_kernel_error_has_no_kind():
    err = KernelError("something went wrong")
    assert err.kind is None
    assert repr(err) == "KernelError(kind=None, message='something went wrong')"

    def fail():
        raise err

    outcome = attempt(fail)
    assert outcome.error is err
    assert outcome.kind is None
