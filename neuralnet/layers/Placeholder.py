from .Layer import Layer
from ..exceptions import ConfigurationError, DimensionMismatch


class Placeholder(Layer):
    """Input layer: fixes the number of features the network accepts."""

    def __init__(self, width):
        super().__init__()
        if width < 1:
            raise ConfigurationError(f"Width must be greater than 0, {width} given.")
        self.features = int(width)

    def initialize(self, fan_in=None):
        self._width = self.features
        return self._width

    def forward(self, x):
        if x.n != self.width:
            raise DimensionMismatch(
                f"Network expects {self.width} features, {x.n} given."
            )
        return x

    def infer(self, x):
        return self.forward(x)

    def __repr__(self):
        return f"Placeholder(width={self.features})"
