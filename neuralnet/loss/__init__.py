from .CostFunction import CostFunction
from .CrossEntropy import CrossEntropy
from .LeastSquares import LeastSquares

__all__ = [
    "CostFunction",
    "CrossEntropy",
    "LeastSquares",
]
