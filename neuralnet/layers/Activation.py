from .Layer import Hidden
from .Deferred import Deferred
from ..activations import ActivationFunction
from ..exceptions import ConfigurationError, StateError


class Activation(Hidden):
    """Applies a nonlinearity elementwise (or row-wise for Softmax)."""

    def __init__(self, fn):
        super().__init__()
        if not isinstance(fn, ActivationFunction):
            raise ConfigurationError(f"Expected an ActivationFunction, {type(fn).__name__} given.")
        self.fn = fn

        # forward cache
        self.input = None
        self.computed = None

    def initialize(self, fan_in):
        self._width = fan_in
        return fan_in

    def forward(self, x):
        computed = self.infer(x)
        self.input = x
        self.computed = computed
        return computed

    def infer(self, x):
        self._check_initialized()
        return self.fn.compute(x)

    def back(self, prev_gradient, optimizer):
        self._check_initialized()
        if self.input is None or self.computed is None:
            raise StateError("Must perform forward pass before backpropagating.")

        z, computed = self.input, self.computed
        self.reset()
        fn = self.fn

        return Deferred(lambda: fn.gradient(z, computed, prev_gradient()))

    def reset(self):
        self.input = None
        self.computed = None

    def __repr__(self):
        return f"Activation({self.fn!r})"
