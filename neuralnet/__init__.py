from .tensor import Tensor, Matrix, Vector
from .parameters import Parameter
from .network import Network
from .datasets import Dataset, Labeled, Unlabeled
from .estimators import MultilayerPerceptron, MLPRegressor
from .exceptions import ConfigurationError, DimensionMismatch, IncompatibleDataset, StateError

__version__ = "0.1.0"

__all__ = [
    "Tensor",
    "Matrix",
    "Vector",
    "Parameter",
    "Network",
    "Dataset",
    "Labeled",
    "Unlabeled",
    "MultilayerPerceptron",
    "MLPRegressor",
    "ConfigurationError",
    "DimensionMismatch",
    "IncompatibleDataset",
    "StateError",
]
