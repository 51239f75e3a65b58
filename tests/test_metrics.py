import pytest

from neuralnet.exceptions import IncompatibleDataset
from neuralnet.metrics import Accuracy, MeanSquaredError, RSquared


def test_accuracy():
    assert Accuracy().score(["a", "b", "a", "c"], ["a", "b", "b", "c"]) == 0.75


def test_mean_squared_error_is_negated():
    assert MeanSquaredError().score([1.0, 2.0], [1.0, 4.0]) == -2.0


def test_r_squared():
    assert RSquared().score([1.0, 2.0, 3.0], [1.0, 2.0, 3.0]) == pytest.approx(1.0)
    assert RSquared().score([2.0, 2.0, 2.0], [1.0, 2.0, 3.0]) == pytest.approx(0.0)


def test_length_mismatch():
    with pytest.raises(IncompatibleDataset):
        Accuracy().score(["a"], ["a", "b"])


def test_empty():
    assert Accuracy().score([], []) == 0.0
