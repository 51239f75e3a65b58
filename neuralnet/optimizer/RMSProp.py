from collections import namedtuple

from .Adaptive import Adaptive
from ..constants import EPSILON
from ..exceptions import ConfigurationError

RMSPropState = namedtuple("RMSPropState", ["norm"])


class RMSProp(Adaptive):
    def __init__(self, lr=0.001, decay=0.9, eps=EPSILON):
        super().__init__(lr)
        if not 0.0 <= decay < 1.0:
            raise ConfigurationError(f"Decay must be in [0, 1), {decay} given.")
        self.decay = decay
        self.eps = eps

    def _zero_state(self, w):
        return RMSPropState(w.zeros_like())

    def _update(self, state, w, gradient):
        norm = state.norm * self.decay + gradient.square() * (1.0 - self.decay)
        delta = gradient * self.lr / (norm.sqrt() + self.eps)
        return RMSPropState(norm), delta
