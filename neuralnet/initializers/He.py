import numpy as np

from .Initializer import Initializer
from ..tensor import Matrix


class He(Initializer):
    """He initialization, suited to ReLU-family activations."""

    def initialize(self, fan_in, fan_out):
        return Matrix.gaussian(fan_out, fan_in) * np.sqrt(2.0 / fan_in)
