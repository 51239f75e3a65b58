import numpy as np

from .Initializer import Initializer
from ..tensor import Matrix


class Xavier(Initializer):
    """Glorot normal initialization, suited to sigmoid and tanh."""

    def initialize(self, fan_in, fan_out):
        return Matrix.gaussian(fan_out, fan_in) * np.sqrt(2.0 / (fan_in + fan_out))
