from collections import namedtuple

from .Adaptive import Adaptive
from ..exceptions import ConfigurationError

MomentumState = namedtuple("MomentumState", ["velocity"])


class Momentum(Adaptive):
    def __init__(self, lr=0.01, momentum=0.9, nesterov=False):
        super().__init__(lr)
        if not 0.0 <= momentum < 1.0:
            raise ConfigurationError(f"Momentum must be in [0, 1), {momentum} given.")
        self.momentum = momentum
        self.nesterov = nesterov

    def _zero_state(self, w):
        return MomentumState(w.zeros_like())

    def _update(self, state, w, gradient):
        velocity = state.velocity * self.momentum + gradient * self.lr

        if self.nesterov:
            delta = velocity * self.momentum + gradient * self.lr
        else:
            delta = velocity

        return MomentumState(velocity), delta
