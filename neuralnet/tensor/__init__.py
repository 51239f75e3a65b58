from .Tensor import Tensor
from .Matrix import Matrix
from .Vector import Vector

__all__ = [
    "Tensor",
    "Matrix",
    "Vector",
]
