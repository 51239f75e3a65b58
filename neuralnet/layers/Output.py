from .Layer import Layer
from .Parametric import Parametric
from .Dense import Dense
from .Deferred import Deferred
from ..exceptions import DimensionMismatch, StateError


class Output(Layer, Parametric):
    """
    A dense projection followed by an output activation, trained directly
    against labels. Subclasses encode labels and derive dLoss/dz.
    """

    def __init__(self, neurons, cost, alpha=0.0, weight_initializer=None, bias_initializer=None):
        super().__init__()
        self.cost = cost
        self.dense = Dense(
            neurons,
            alpha=alpha,
            weight_initializer=weight_initializer,
            bias_initializer=bias_initializer,
        )

        # forward cache
        self.computed = None

    @property
    def width(self):
        return self.dense.width

    @property
    def initialized(self):
        return self.dense.initialized

    def _check_initialized(self):
        self.dense._check_initialized()

    def initialize(self, fan_in):
        return self.dense.initialize(fan_in)

    def forward(self, x):
        computed = self.activate(self.dense.forward(x))
        self.computed = computed
        return computed

    def infer(self, x):
        return self.activate(self.dense.infer(x))

    def back(self, labels, optimizer):
        """
        Return (Deferred producing dLoss/dInput, loss). Parameters are
        updated when the Deferred is invoked.
        """
        self._check_initialized()
        if self.computed is None:
            raise StateError("Must perform forward pass before backpropagating.")

        output = self.computed
        self.computed = None

        expected = self.encode(labels)
        if expected.shape != output.shape:
            raise DimensionMismatch(
                f"Expected {output.m} labels for the batch, {expected.m} given."
            )

        loss = self.cost.compute(output, expected)

        d_z = Deferred(lambda: self.gradient(output, expected))

        return self.dense.back(d_z, optimizer), loss

    def activate(self, z):
        raise NotImplementedError

    def encode(self, labels):
        # Return a Matrix of expected outputs with one row per label
        raise NotImplementedError

    def gradient(self, output, expected):
        # Return dLoss/dz averaged over the batch
        raise NotImplementedError

    def reset(self):
        self.computed = None
        self.dense.reset()

    def parameters(self):
        return self.dense.parameters()

    def read(self):
        return self.dense.read()

    def restore(self, state):
        self.dense.restore(state)

    def restored_fan_in(self):
        return self.dense.restored_fan_in()
