from .Initializer import Initializer
from ..tensor import Matrix
from ..exceptions import ConfigurationError


class Normal(Initializer):
    def __init__(self, std=0.05):
        if std <= 0.0:
            raise ConfigurationError(f"Standard deviation must be greater than 0, {std} given.")
        self.std = float(std)

    def initialize(self, fan_in, fan_out):
        return Matrix.gaussian(fan_out, fan_in) * self.std
