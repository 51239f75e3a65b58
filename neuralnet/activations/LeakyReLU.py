import numpy as np

from .ActivationFunction import ActivationFunction
from ..exceptions import ConfigurationError


class LeakyReLU(ActivationFunction):
    def __init__(self, leakage=0.1):
        if not 0.0 < leakage < 1.0:
            raise ConfigurationError(f"Leakage must be between 0 and 1, {leakage} given.")
        self.leakage = float(leakage)

    def compute(self, z):
        leakage = self.leakage
        return z.map(lambda a: np.where(a > 0.0, a, leakage * a))

    def differentiate(self, z, computed):
        leakage = self.leakage
        return z.map(lambda a: np.where(a > 0.0, 1.0, leakage))

    def __repr__(self):
        return f"LeakyReLU(leakage={self.leakage})"
