from .Estimator import Estimator
from .MultilayerPerceptron import MultilayerPerceptron
from .MLPRegressor import MLPRegressor

__all__ = [
    "Estimator",
    "MultilayerPerceptron",
    "MLPRegressor",
]
