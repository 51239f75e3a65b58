import numpy as np

from .Layer import Hidden
from .Deferred import Deferred
from ..tensor import Matrix
from ..exceptions import ConfigurationError, StateError


class Dropout(Hidden):
    """Inverted dropout: scales kept activations by 1 / (1 - ratio)."""

    def __init__(self, ratio=0.5):
        super().__init__()
        if not 0.0 < ratio < 1.0:
            raise ConfigurationError(f"Ratio must be between 0 and 1, {ratio} given.")
        self.ratio = float(ratio)
        self.mask = None

    def initialize(self, fan_in):
        self._width = fan_in
        return fan_in

    def forward(self, x):
        self._check_initialized()
        keep = 1.0 - self.ratio
        self.mask = Matrix(np.random.rand(*x.shape) < keep) / keep
        return x * self.mask

    def infer(self, x):
        self._check_initialized()
        return x

    def back(self, prev_gradient, optimizer):
        self._check_initialized()
        if self.mask is None:
            raise StateError("Must perform forward pass before backpropagating.")

        mask = self.mask
        self.mask = None

        return Deferred(lambda: prev_gradient() * mask)

    def reset(self):
        self.mask = None

    def __repr__(self):
        return f"Dropout(ratio={self.ratio})"
