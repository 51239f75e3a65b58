import numpy as np

from .Tensor import Tensor, wrap


class Vector(Tensor):
    """One dimensional tensor, e.g. per-feature statistics."""

    ndim = 1

    @classmethod
    def zeros(cls, n):
        return wrap(np.zeros(n))

    @classmethod
    def ones(cls, n):
        return wrap(np.ones(n))

    @classmethod
    def fill(cls, value, n):
        return wrap(np.full(n, value, dtype=np.float64))

    @property
    def n(self):
        return self.a.shape[0]

    def __iter__(self):
        return iter(self.a.tolist())

    def as_row_matrix(self):
        return wrap(self.a.reshape(1, -1).copy())

    def as_column_matrix(self):
        return wrap(self.a.reshape(-1, 1).copy())

    def argmax(self):
        return int(np.argmax(self.a))
