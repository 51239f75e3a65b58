from ..exceptions import StateError


class Layer:
    # Subclasses override as needed
    def __init__(self):
        self._width = None

    @property
    def width(self):
        self._check_initialized()
        return self._width

    @property
    def initialized(self):
        return self._width is not None

    def _check_initialized(self):
        if self._width is None:
            raise StateError(f"{self} has not been initialized.")

    def initialize(self, fan_in):
        # Allocate parameters and return the fan out
        raise NotImplementedError

    def forward(self, x):
        # Training pass, caches whatever back() needs
        raise NotImplementedError

    def infer(self, x):
        # Inference pass, leaves caches and running state alone
        raise NotImplementedError

    def reset(self):
        # Release forward caches
        pass

    def __repr__(self):
        return f"{type(self).__name__}()"


class Hidden(Layer):
    def back(self, prev_gradient, optimizer):
        # prev_gradient: Deferred producing dLoss/dOutput
        # return: Deferred producing dLoss/dInput
        raise NotImplementedError
