from .Optimizer import Optimizer
from .Adaptive import Adaptive
from .Stochastic import Stochastic
from .Momentum import Momentum
from .RMSProp import RMSProp
from .AdaGrad import AdaGrad
from .Adam import Adam
from .AdamW import AdamW

__all__ = [
    "Optimizer",
    "Adaptive",
    "Stochastic",
    "Momentum",
    "RMSProp",
    "AdaGrad",
    "Adam",
    "AdamW",
]
