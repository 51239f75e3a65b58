from .Initializer import Initializer
from .Constant import Constant
from .Normal import Normal
from .He import He
from .Xavier import Xavier

__all__ = [
    "Initializer",
    "Constant",
    "Normal",
    "He",
    "Xavier",
]
