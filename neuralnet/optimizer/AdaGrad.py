from collections import namedtuple

from .Adaptive import Adaptive
from ..constants import EPSILON

AdaGradState = namedtuple("AdaGradState", ["norm"])


class AdaGrad(Adaptive):
    def __init__(self, lr=0.01, eps=EPSILON):
        super().__init__(lr)
        self.eps = eps

    def _zero_state(self, w):
        return AdaGradState(w.zeros_like())

    def _update(self, state, w, gradient):
        norm = state.norm + gradient.square()
        delta = gradient * self.lr / (norm.sqrt() + self.eps)
        return AdaGradState(norm), delta
