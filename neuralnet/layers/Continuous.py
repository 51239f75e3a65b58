from .Output import Output
from ..loss import LeastSquares
from ..tensor import Matrix


class Continuous(Output):
    """Single linear output for regression targets."""

    def __init__(self, alpha=0.0, cost=None, weight_initializer=None, bias_initializer=None):
        super().__init__(
            1,
            cost or LeastSquares(),
            alpha=alpha,
            weight_initializer=weight_initializer,
            bias_initializer=bias_initializer,
        )

    def activate(self, z):
        return z

    def encode(self, labels):
        return Matrix([[float(label)] for label in labels]) if len(labels) else Matrix.zeros(0, 1)

    def decode(self, output):
        return output.column(0).to_list()

    def gradient(self, output, expected):
        return self.cost.differentiate(output, expected) / output.m

    def __repr__(self):
        return f"Continuous(cost={self.cost!r})"
