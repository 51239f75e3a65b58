import numbers

import numpy as np

from ..exceptions import DimensionMismatch


def wrap(a):
    """
    Wrap a fresh NumPy result in the tensor type matching its rank.
    0-d results come back as plain floats.
    """
    from .Matrix import Matrix
    from .Vector import Vector

    if a.ndim == 2:
        cls = Matrix
    elif a.ndim == 1:
        cls = Vector
    else:
        return float(a)

    tensor = cls.__new__(cls)
    a.setflags(write=False)
    tensor.a = a
    return tensor


class Tensor:
    """
    Immutable numeric container.

    The backing array is flagged read-only and every operation returns a
    new tensor, so cached intermediates can be shared between gradient
    closures without defensive copies.
    """

    ndim = None

    # keep NumPy from hijacking reflected operators (np.float64(2) * m)
    __array_ufunc__ = None

    def __init__(self, data, dtype=np.float64):
        if isinstance(data, Tensor):
            data = data.a
        a = np.array(data, dtype=dtype)
        if a.ndim != self.ndim:
            raise DimensionMismatch(
                f"{type(self).__name__} must have {self.ndim} dimension(s),"
                f" {a.ndim} given."
            )
        a.setflags(write=False)
        self.a = a

    @property
    def shape(self):
        return self.a.shape

    @property
    def size(self):
        return self.a.size

    def as_array(self):
        """Return a writable copy of the underlying array."""
        return np.array(self.a)

    def to_list(self):
        return self.a.tolist()

    def zeros_like(self):
        return wrap(np.zeros(self.shape))

    # ----- binary operations -----
    def _operand(self, b, op):
        if isinstance(b, Tensor):
            if b.shape == self.shape:
                return b.a
            # per-feature broadcast: (m, n) op (n,)
            if self.ndim == 2 and b.ndim == 1 and b.shape[0] == self.shape[1]:
                return b.a
            raise DimensionMismatch(
                f"Cannot {op} {type(self).__name__}{self.shape}"
                f" and {type(b).__name__}{b.shape}."
            )
        if isinstance(b, numbers.Real):
            return b
        raise TypeError(f"Unsupported operand type {type(b).__name__} for {op}.")

    def add(self, b):
        return wrap(self.a + self._operand(b, "add"))

    def subtract(self, b):
        return wrap(self.a - self._operand(b, "subtract"))

    def multiply(self, b):
        return wrap(self.a * self._operand(b, "multiply"))

    def divide(self, b):
        return wrap(self.a / self._operand(b, "divide"))

    def pow(self, b):
        return wrap(self.a ** self._operand(b, "raise"))

    def maximum(self, b):
        return wrap(np.maximum(self.a, self._operand(b, "compare")))

    def greater(self, b):
        """1.0 where the element is greater than b, 0.0 elsewhere."""
        return wrap((self.a > self._operand(b, "compare")).astype(np.float64))

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply
    __truediv__ = divide
    __pow__ = pow

    def __radd__(self, b):
        return wrap(self._operand(b, "add") + self.a)

    def __rsub__(self, b):
        return wrap(self._operand(b, "subtract") - self.a)

    def __rmul__(self, b):
        return wrap(self._operand(b, "multiply") * self.a)

    def __rtruediv__(self, b):
        return wrap(self._operand(b, "divide") / self.a)

    def __neg__(self):
        return self.negate()

    # ----- elementwise -----
    def negate(self):
        return wrap(-self.a)

    def abs(self):
        return wrap(np.abs(self.a))

    def square(self):
        return wrap(np.square(self.a))

    def sqrt(self):
        return wrap(np.sqrt(self.a))

    def exp(self):
        return wrap(np.exp(self.a))

    def log(self):
        return wrap(np.log(self.a))

    def reciprocal(self):
        return wrap(1.0 / self.a)

    def clip(self, lower, upper):
        return wrap(np.clip(self.a, lower, upper))

    def clip_lower(self, minimum):
        """Floor every element at minimum, e.g. to avoid division by zero."""
        return wrap(np.maximum(self.a, minimum))

    def clip_upper(self, maximum):
        return wrap(np.minimum(self.a, maximum))

    def map(self, fn):
        """Apply fn to the backing array; fn must preserve the shape."""
        a = np.asarray(fn(self.a), dtype=np.float64)
        if a.shape != self.shape:
            raise DimensionMismatch(
                f"Mapped function changed shape {self.shape} to {a.shape}."
            )
        return wrap(np.array(a))

    # ----- reductions -----
    def sum(self, axis=None):
        return wrap(np.sum(self.a, axis=axis))

    def mean(self, axis=None):
        return wrap(np.mean(self.a, axis=axis))

    def variance(self, axis=None):
        """Population variance."""
        return wrap(np.var(self.a, axis=axis))

    def max(self, axis=None):
        return wrap(np.max(self.a, axis=axis))

    def min(self, axis=None):
        return wrap(np.min(self.a, axis=axis))

    def __len__(self):
        return self.a.shape[0]

    def __repr__(self):
        return f"{type(self).__name__}({self.a.tolist()})"
