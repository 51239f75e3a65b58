import numpy as np

from ..layers import Placeholder, Hidden, Output, Parametric
from ..datasets import Dataset, Labeled
from ..parameters import Parameter
from ..tensor import Matrix, Vector
from ..exceptions import ConfigurationError, DimensionMismatch, IncompatibleDataset, StateError


def _as_matrix(samples):
    if isinstance(samples, Dataset):
        return samples.samples()
    if isinstance(samples, Matrix):
        return samples
    return Matrix(samples)


class Network:
    """
    A strictly sequential pipeline: input placeholder, hidden layers, output.

    forward() runs every layer in training mode and leaves each one's cache
    populated. backward() walks the layers in reverse building a chain of
    Deferred gradients, then invokes the input-most one, which pulls the
    chain from the output side and lets every layer step its parameters.
    """

    def __init__(self, input_layer, hidden, output, optimizer):
        if not isinstance(input_layer, Placeholder):
            raise ConfigurationError(f"Input layer must be a Placeholder, {type(input_layer).__name__} given.")
        hidden = list(hidden)
        for layer in hidden:
            if not isinstance(layer, Hidden):
                raise ConfigurationError(f"{layer!r} is not a hidden layer.")
        if not isinstance(output, Output):
            raise ConfigurationError(f"Output layer must be an Output, {type(output).__name__} given.")

        self.input = input_layer
        self.hidden = hidden
        self.output = output
        self.optimizer = optimizer

        # completed training epochs
        self.epochs = 0

    @property
    def layers(self):
        return [self.input, *self.hidden, self.output]

    @property
    def trained(self):
        return self.epochs > 0

    def initialize(self):
        fan_in = self.input.initialize()
        for layer in self.hidden:
            fan_in = layer.initialize(fan_in)
        self.output.initialize(fan_in)

        for param in self.parameters():
            self.optimizer.warm(param)

        self.epochs = 0

    def parametric(self):
        return [layer for layer in self.layers if isinstance(layer, Parametric)]

    def parameters(self):
        for layer in self.parametric():
            yield from layer.parameters()

    def forward(self, samples):
        x = _as_matrix(samples)
        try:
            for layer in self.layers:
                x = layer.forward(x)
        except Exception:
            self.reset()
            raise
        return x

    def infer(self, samples):
        x = _as_matrix(samples)
        for layer in self.layers:
            x = layer.infer(x)
        return x

    def backward(self, labels):
        """Backpropagate the labels of the last forward batch, return the loss."""
        try:
            gradient, loss = self.output.back(labels, self.optimizer)
            for layer in reversed(self.hidden):
                gradient = layer.back(gradient, self.optimizer)
            gradient()
        finally:
            self.reset()
        return loss

    def roundtrip(self, batch):
        try:
            self.forward(batch.samples())
            return self.backward(batch.labels())
        finally:
            self.reset()

    def reset(self):
        for layer in self.layers:
            layer.reset()

    def train(self, dataset, epochs=1, batch_size=128, shuffle=True):
        """
        Run epochs of mini-batch training and return the mean loss of each
        epoch.
        """
        if not isinstance(dataset, Labeled):
            raise IncompatibleDataset("Training requires a Labeled dataset.")
        if epochs < 1:
            raise ConfigurationError(f"Epochs must be greater than 0, {epochs} given.")
        if batch_size < 1:
            raise ConfigurationError(f"Batch size must be greater than 0, {batch_size} given.")
        if dataset.empty():
            raise IncompatibleDataset("Training dataset is empty.")
        if dataset.num_columns != self.input.width:
            raise IncompatibleDataset(
                f"Network expects {self.input.width} features, {dataset.num_columns} given."
            )

        losses = []
        for _ in range(epochs):
            data = dataset.randomize() if shuffle else dataset

            total = 0.0
            for batch in data.batch(batch_size):
                total += self.roundtrip(batch) * batch.num_rows

            losses.append(total / dataset.num_rows)
            self.epochs += 1

        return losses

    def predict(self, samples):
        if not self.trained:
            raise StateError("Network must complete a training epoch before making predictions.")
        return self.infer(samples)

    # ================== persistence ==================
    def read(self):
        state = {"epochs": self.epochs}
        for i, layer in enumerate(self.layers):
            if isinstance(layer, Parametric):
                state[f"layer_{i}"] = layer.read()
        return state

    def restore(self, state):
        fan_in = self.input.initialize()
        for i, layer in enumerate(self.layers[1:], start=1):
            if isinstance(layer, Parametric):
                key = f"layer_{i}"
                if key not in state:
                    raise ConfigurationError(f"No saved state for {key} ({layer!r}).")
                layer.restore(state[key])
                if layer.restored_fan_in() != fan_in:
                    raise DimensionMismatch(
                        f"Saved state for {key} expects {layer.restored_fan_in()} inputs,"
                        f" network provides {fan_in}."
                    )
                fan_in = layer.width
            else:
                fan_in = layer.initialize(fan_in)

        for param in self.parameters():
            self.optimizer.warm(param)

        self.epochs = int(state.get("epochs", 0))

    def save(self, path):
        arrays = {"epochs": np.array(self.epochs)}
        for key, layer_state in self.read().items():
            if key == "epochs":
                continue
            for name, value in layer_state.items():
                if value is None:
                    continue
                tensor = value.w if isinstance(value, Parameter) else value
                arrays[f"{key}.{name}"] = tensor.as_array()
        np.savez(path, **arrays)

    def load(self, path):
        state = {}
        statistics = {}
        for i, layer in enumerate(self.layers):
            if isinstance(layer, Parametric):
                state[f"layer_{i}"] = {}
                statistics[f"layer_{i}"] = layer.STATISTICS

        with np.load(path) as data:
            for name in data.files:
                if name == "epochs":
                    state["epochs"] = int(data[name])
                    continue
                key, attr = name.split(".", 1)
                if key not in state:
                    raise ConfigurationError(f"Saved state {name} does not match the network.")
                array = data[name]
                tensor = Matrix(array) if array.ndim == 2 else Vector(array)
                state[key][attr] = tensor if attr in statistics[key] else Parameter(tensor)

        self.restore(state)

        # loaded parameters carry fresh ids
        self.optimizer.prune(self.parameters())

    def __repr__(self):
        layers = ", ".join(repr(layer) for layer in self.layers)
        return f"Network([{layers}], optimizer={self.optimizer!r})"
