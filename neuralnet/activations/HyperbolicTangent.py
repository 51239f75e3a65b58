import numpy as np

from .ActivationFunction import ActivationFunction


class HyperbolicTangent(ActivationFunction):
    def compute(self, z):
        return z.map(np.tanh)

    def differentiate(self, z, computed):
        return 1.0 - computed.square()
