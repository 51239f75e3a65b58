from .Layer import Layer, Hidden
from .Parametric import Parametric
from .Deferred import Deferred
from .Placeholder import Placeholder
from .Dense import Dense
from .Activation import Activation
from .BatchNorm import BatchNorm
from .Dropout import Dropout
from .Output import Output
from .Multiclass import Multiclass
from .Continuous import Continuous

__all__ = [
    "Layer",
    "Hidden",
    "Parametric",
    "Deferred",
    "Placeholder",
    "Dense",
    "Activation",
    "BatchNorm",
    "Dropout",
    "Output",
    "Multiclass",
    "Continuous",
]
