from .Output import Output
from ..activations import Softmax
from ..initializers import Xavier
from ..loss import CrossEntropy
from ..tensor import Matrix
from ..exceptions import ConfigurationError, IncompatibleDataset


class Multiclass(Output):
    """Softmax output over a fixed list of class labels."""

    def __init__(self, classes, alpha=0.0, cost=None, weight_initializer=None, bias_initializer=None):
        classes = list(classes)
        if len(classes) < 2:
            raise ConfigurationError(f"At least 2 classes are required, {len(classes)} given.")
        if len(set(classes)) != len(classes):
            raise ConfigurationError("Class labels must be unique.")

        super().__init__(
            len(classes),
            cost or CrossEntropy(),
            alpha=alpha,
            weight_initializer=weight_initializer or Xavier(),
            bias_initializer=bias_initializer,
        )
        self.classes = classes
        self.index = {label: i for i, label in enumerate(classes)}
        self.softmax = Softmax()

    def activate(self, z):
        return self.softmax.compute(z)

    def encode(self, labels):
        onehot = [[0.0] * len(self.classes) for _ in labels]
        for row, label in zip(onehot, labels):
            if label not in self.index:
                raise IncompatibleDataset(f"Unknown class label {label!r}.")
            row[self.index[label]] = 1.0
        return Matrix(onehot) if onehot else Matrix.zeros(0, len(self.classes))

    def decode(self, probabilities):
        return [self.classes[i] for i in probabilities.argmax(axis=1)]

    def gradient(self, output, expected):
        m = output.m
        if isinstance(self.cost, CrossEntropy):
            # fused softmax + cross entropy
            return (output - expected) / m
        d_out = self.cost.differentiate(output, expected) / m
        return self.softmax.gradient(None, output, d_out)

    def __repr__(self):
        return f"Multiclass(classes={self.classes})"
