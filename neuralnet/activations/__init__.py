from .ActivationFunction import ActivationFunction
from .ReLU import ReLU
from .LeakyReLU import LeakyReLU
from .Sigmoid import Sigmoid
from .HyperbolicTangent import HyperbolicTangent
from .Softmax import Softmax

__all__ = [
    "ActivationFunction",
    "ReLU",
    "LeakyReLU",
    "Sigmoid",
    "HyperbolicTangent",
    "Softmax",
]
