# tests/conftest.py
import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from neuralnet.datasets import Labeled


@pytest.fixture(autouse=True)
def seed():
    np.random.seed(0)
    yield


@pytest.fixture
def blobs():
    """Three well separated Gaussian clusters in 2-D."""
    rng = np.random.default_rng(42)
    centers = {"red": (0.0, 0.0), "green": (5.0, 5.0), "blue": (0.0, 5.0)}
    samples, labels = [], []
    for label, center in centers.items():
        samples.append(rng.normal(center, 0.5, size=(40, 2)))
        labels += [label] * 40
    return Labeled(np.vstack(samples), labels)


@pytest.fixture
def linear():
    """y = 2 * x0 - x1 + 0.5"""
    rng = np.random.default_rng(7)
    x = rng.uniform(-1.0, 1.0, size=(100, 2))
    y = 2.0 * x[:, 0] - x[:, 1] + 0.5
    return Labeled(x, y.tolist())


@pytest.fixture
def xor():
    samples = [[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]] * 10
    labels = ["off", "on", "on", "off"] * 10
    return Labeled(samples, labels)
