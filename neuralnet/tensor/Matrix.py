import numpy as np

from .Tensor import Tensor, wrap
from ..exceptions import DimensionMismatch


class Matrix(Tensor):
    """Two dimensional tensor. Rows are samples, columns are features."""

    ndim = 2

    # ----- factories -----
    @classmethod
    def zeros(cls, m, n):
        return wrap(np.zeros((m, n)))

    @classmethod
    def ones(cls, m, n):
        return wrap(np.ones((m, n)))

    @classmethod
    def fill(cls, value, m, n):
        return wrap(np.full((m, n), value, dtype=np.float64))

    @classmethod
    def identity(cls, n):
        return wrap(np.eye(n))

    @classmethod
    def gaussian(cls, m, n):
        return wrap(np.random.randn(m, n))

    @classmethod
    def uniform(cls, m, n, low=-1.0, high=1.0):
        return wrap(np.random.uniform(low, high, size=(m, n)))

    @classmethod
    def stack(cls, rows):
        return cls([row.a if isinstance(row, Tensor) else row for row in rows])

    # ----- shape -----
    @property
    def m(self):
        return self.a.shape[0]

    @property
    def n(self):
        return self.a.shape[1]

    def row(self, index):
        return wrap(np.array(self.a[index]))

    def column(self, index):
        return wrap(np.array(self.a[:, index]))

    def rows(self, indices):
        return wrap(self.a[np.asarray(indices, dtype=np.intp)])

    def __iter__(self):
        for i in range(self.m):
            yield self.row(i)

    # ----- linear algebra -----
    def matmul(self, b):
        if not isinstance(b, Matrix):
            raise TypeError(f"Cannot multiply Matrix with {type(b).__name__}.")
        if self.n != b.m:
            raise DimensionMismatch(
                f"Inner dimensions {self.shape} and {b.shape} do not match."
            )
        return wrap(self.a @ b.a)

    __matmul__ = matmul

    def transpose(self):
        return wrap(np.ascontiguousarray(self.a.T))

    @property
    def T(self):
        return self.transpose()

    def argmax(self, axis=1):
        """Index of the maximum along axis as a list of ints."""
        return np.argmax(self.a, axis=axis).tolist()
