from ..exceptions import StateError


class Deferred:
    """
    A single-use, zero-argument gradient producer.

    Layers hand these back from back() to form a strictly linear chain from
    the output layer to the input. Calling one computes the gradient once
    and drops the captured tensors.
    """

    def __init__(self, fn):
        self._fn = fn

    @classmethod
    def of(cls, value):
        return cls(lambda: value)

    @property
    def consumed(self):
        return self._fn is None

    def __call__(self):
        if self._fn is None:
            raise StateError("Gradient has already been computed.")
        fn, self._fn = self._fn, None
        return fn()
