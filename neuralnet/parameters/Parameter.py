import itertools

from ..exceptions import DimensionMismatch

# process-wide handle source; ids are never reused
_ids = itertools.count()


class Parameter:
    """
    A trainable tensor.

    The integer id assigned at creation, not the value, identifies the
    training variable, so optimizers key their caches on it.
    """

    def __init__(self, w, id=None):
        self.id = next(_ids) if id is None else id
        self._w = w

    @property
    def w(self):
        return self._w

    def update(self, w):
        # only called by Optimizer.step
        if w.shape != self._w.shape:
            raise DimensionMismatch(
                f"Parameter {self.id} has shape {self._w.shape},"
                f" update has shape {w.shape}."
            )
        self._w = w

    def copy(self):
        # tensors are immutable so sharing the value is a faithful clone
        return Parameter(self._w, id=self.id)

    def __repr__(self):
        return f"Parameter(id={self.id}, shape={self._w.shape})"
