import numpy as np
import pytest

from neuralnet.datasets import Labeled, Unlabeled
from neuralnet.exceptions import ConfigurationError, IncompatibleDataset


@pytest.fixture
def dataset():
    return Labeled([[float(i), float(i * 10)] for i in range(10)], list("abcdefghij"))


def test_labels_must_match_samples():
    with pytest.raises(IncompatibleDataset):
        Labeled([[1.0], [2.0]], ["a"])


def test_unlabeled_has_no_labels():
    with pytest.raises(IncompatibleDataset):
        Unlabeled([[1.0, 2.0]]).labels()


def test_shape(dataset):
    assert dataset.num_rows == 10
    assert dataset.num_columns == 2
    assert len(dataset) == 10
    assert not dataset.empty()


def test_split(dataset):
    left, right = dataset.split(0.8)
    assert (left.num_rows, right.num_rows) == (8, 2)
    assert right.labels() == ["i", "j"]

    with pytest.raises(ConfigurationError):
        dataset.split(1.5)


def test_batch(dataset):
    sizes = [batch.num_rows for batch in dataset.batch(4)]
    assert sizes == [4, 4, 2]


def test_randomize_keeps_rows_aligned(dataset):
    shuffled = dataset.randomize(seed=1)
    lookup = dict(zip(dataset.labels(), dataset.samples().to_list()))
    for row, label in zip(shuffled.samples().to_list(), shuffled.labels()):
        assert lookup[label] == row
    assert sorted(shuffled.labels()) == dataset.labels()


def test_randomize_with_seed_is_repeatable(dataset):
    assert dataset.randomize(seed=3).labels() == dataset.randomize(seed=3).labels()


def test_head_and_take(dataset):
    assert dataset.head(3).labels() == ["a", "b", "c"]
    assert dataset.take([9, 0]).samples().to_list() == [[9.0, 90.0], [0.0, 0.0]]


def test_possible_outcomes_in_first_seen_order():
    dataset = Labeled(np.zeros((4, 1)), ["b", "a", "b", "c"])
    assert dataset.possible_outcomes() == ["b", "a", "c"]


def test_labels_returns_copy(dataset):
    labels = dataset.labels()
    labels[0] = "z"
    assert dataset.labels()[0] == "a"


def test_unlabeled_view(dataset):
    unlabeled = dataset.unlabeled()
    assert isinstance(unlabeled, Unlabeled)
    assert unlabeled.num_rows == 10
