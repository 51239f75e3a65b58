import numpy as np

from .ActivationFunction import ActivationFunction
from ..tensor import Matrix


def _softmax(a):
    # Stable softmax over each row
    e = np.exp(a - np.max(a, axis=1, keepdims=True))
    return e / np.sum(e, axis=1, keepdims=True)


class Softmax(ActivationFunction):
    def compute(self, z):
        return z.map(_softmax)

    def gradient(self, z, computed, d_out):
        # Jacobian-vector product per row: s * (dOut - <dOut, s>)
        s = computed.a
        g = d_out.a
        return Matrix(s * (g - np.sum(g * s, axis=1, keepdims=True)))
