import logging
import math

import numpy as np
import pytest

from fina import (
    EPSILON,
    EmptyInputError,
    LengthMismatchError,
    NonPositivePredictionError,
    SoftmaxUnderflowError,
    cross_entropy,
    log_loss,
    mse,
    softmax,
)
from fina import losses

# Test 1
def test_softmax_known_values():
    out = softmax([1.0, 2.0, 3.0])
    expected = np.exp([1.0, 2.0, 3.0]) / np.sum(np.exp([1.0, 2.0, 3.0]))
    assert isinstance(out, np.ndarray)
    assert np.allclose(out, expected)

# Test 2
def test_softmax_survives_large_inputs():
    out = softmax([1000.0, 1000.0])
    assert np.allclose(out, [0.5, 0.5])
    out = softmax([-1000.0, 0.0])
    assert out[1] == 1.0
    assert out[0] == 0.0

# Test 3
def test_softmax_empty():
    with pytest.raises(EmptyInputError):
        softmax([])

# Test 4
def test_softmax_underflow_is_reported(monkeypatch):
    monkeypatch.setattr(losses.np, "exp", lambda a: np.zeros_like(a))
    with pytest.raises(SoftmaxUnderflowError, match="Underflow"):
        softmax([1.0, 2.0])

# Test 5
def test_cross_entropy():
    assert cross_entropy([0.5, 0.5], [1.0, 0.0]) == pytest.approx(math.log(2.0))
    assert cross_entropy([1.0], [1.0]) == 0.0

# Test 6
def test_cross_entropy_rejects_non_positive_predictions():
    with pytest.raises(NonPositivePredictionError) as info:
        cross_entropy([0.0, 0.5], [1.0, 0.5])
    assert "pred[0]" in info.value.message
    with pytest.raises(NonPositivePredictionError, match=r"pred\[2\]"):
        cross_entropy([0.2, 0.3, -0.1, 0.0], [0.0, 1.0, 0.0, 0.0])

# Test 7
@pytest.mark.parametrize("func", [cross_entropy, mse, log_loss])
def test_pairwise_losses_check_length_then_emptiness(func):
    with pytest.raises(LengthMismatchError):
        func([0.5], [])
    with pytest.raises(EmptyInputError, match="Vectors cannot be empty"):
        func([], [])

# Test 8
def test_mse():
    assert mse([1.0, 2.0, 3.0], [1.0, 2.0, 3.0]) == 0.0
    assert mse([0.0, 0.0], [1.0, 3.0]) == 5.0

# Test 9
def test_log_loss_matches_binary_cross_entropy():
    pred = [0.9, 0.2]
    target = [1.0, 0.0]
    expected = -(math.log(0.9) + math.log(0.8)) / 2
    assert log_loss(pred, target) == pytest.approx(expected)

# Test 10
def test_log_loss_clamps_instead_of_raising():
    worst = -math.log(EPSILON)
    assert log_loss([0.0], [1.0]) == pytest.approx(worst)
    assert log_loss([-3.0], [1.0]) == pytest.approx(worst)
    assert log_loss([1.0], [0.0]) == pytest.approx(worst)
    assert math.isfinite(log_loss([2.0, -1.0], [1.0, 0.0]))
    assert log_loss([float("nan")], [1.0]) == pytest.approx(worst)

# Test 11
def test_softmax_with_nan_entry_is_all_nan():
    out = softmax([float("nan"), 1.0])
    assert out.shape == (2,)
    assert np.isnan(out).all()

# Test 12
def test_cross_entropy_lets_nan_predictions_through():
    assert math.isnan(cross_entropy([float("nan"), 0.5], [1.0, 1.0]))

# Test 13
def test_rejections_are_logged_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="fina")
    with pytest.raises(NonPositivePredictionError):
        cross_entropy([0.5, -1.0], [0.5, 0.5])
    messages = [r.getMessage() for r in caplog.records if r.name == "fina.losses"]
    assert messages == ["rejected non-positive prediction at index 1"]
    assert all(r.levelno == logging.DEBUG for r in caplog.records)

    caplog.clear()
    with pytest.raises(LengthMismatchError):
        mse([1.0], [1.0, 2.0])
    assert [r.name for r in caplog.records] == ["fina._math"]
