from .Layer import Hidden
from .Parametric import Parametric
from .Deferred import Deferred
from ..initializers import He, Constant
from ..parameters import Parameter
from ..exceptions import ConfigurationError, StateError


class Dense(Hidden, Parametric):
    """
    Fully connected layer.

    weights: (neurons, fan_in)
    biases: (neurons,)
    """

    PARAMETERS = ("weights", "biases")

    def __init__(
        self,
        neurons,
        alpha=0.0,
        bias=True,
        weight_initializer=None,
        bias_initializer=None,
    ):
        super().__init__()
        if neurons < 1:
            raise ConfigurationError(f"Number of neurons must be greater than 0, {neurons} given.")
        if alpha < 0.0:
            raise ConfigurationError(f"Alpha must be 0 or greater, {alpha} given.")

        self.neurons = int(neurons)
        self.alpha = alpha
        self.bias = bias
        self.weight_initializer = weight_initializer or He()
        self.bias_initializer = bias_initializer or Constant(0.0)

        self.weights = None
        self.biases = None

        # forward cache
        self.input = None

    def initialize(self, fan_in):
        self.weights = Parameter(self.weight_initializer.initialize(fan_in, self.neurons))
        if self.bias:
            self.biases = Parameter(self.bias_initializer.initialize(1, self.neurons).column(0))
        self._width = self.neurons
        return self._width

    def forward(self, x):
        z = self.infer(x)
        self.input = x
        return z

    def infer(self, x):
        # x: (batch, fan_in) -> (batch, neurons)
        self._check_initialized()
        z = x @ self.weights.w.T
        if self.biases is not None:
            z = z + self.biases.w
        return z

    def back(self, prev_gradient, optimizer):
        self._check_initialized()
        if self.input is None:
            raise StateError("Must perform forward pass before backpropagating.")

        x = self.input
        w = self.weights.w
        self.input = None

        def gradient():
            d_out = prev_gradient()
            self._step(d_out, x, optimizer)
            # pre-update weights
            return d_out @ w

        return Deferred(gradient)

    def _step(self, d_out, x, optimizer):
        d_w = d_out.T @ x
        if self.alpha > 0.0:
            d_w = d_w + self.weights.w * self.alpha
        optimizer.step(self.weights, d_w)

        if self.biases is not None:
            optimizer.step(self.biases, d_out.sum(axis=0))

    def reset(self):
        self.input = None

    def _restored_width(self):
        return self.weights.w.m

    def restored_fan_in(self):
        return self.weights.w.n

    def __repr__(self):
        return f"Dense(neurons={self.neurons}, alpha={self.alpha})"
