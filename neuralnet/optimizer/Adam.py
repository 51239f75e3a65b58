from collections import namedtuple

from .Adaptive import Adaptive
from ..constants import EPSILON
from ..exceptions import ConfigurationError

# m, v: running first/second moment estimates, t: steps taken
AdamState = namedtuple("AdamState", ["m", "v", "t"])


class Adam(Adaptive):
    """
    Adaptive moment estimation.

    Every parameter gets its own step counter, so parameters warmed at
    different times are bias-corrected independently.
    """

    def __init__(self, lr=1e-3, beta1=0.9, beta2=0.999, eps=EPSILON):
        super().__init__(lr)
        for name, beta in (("beta1", beta1), ("beta2", beta2)):
            if not 0.0 <= beta < 1.0:
                raise ConfigurationError(f"{name} must be in [0, 1), {beta} given.")
        self.beta1 = beta1
        self.beta2 = beta2
        self.eps = eps

    def _zero_state(self, w):
        return AdamState(w.zeros_like(), w.zeros_like(), 0)

    def _update(self, state, w, gradient):
        t = state.t + 1

        m = state.m * self.beta1 + gradient * (1.0 - self.beta1)
        v = state.v * self.beta2 + gradient.square() * (1.0 - self.beta2)

        m_hat = m / (1.0 - self.beta1**t)
        v_hat = v / (1.0 - self.beta2**t)

        delta = m_hat * self.lr / (v_hat.sqrt() + self.eps)

        return AdamState(m, v, t), delta

    def __repr__(self):
        return f"Adam(lr={self.lr}, beta1={self.beta1}, beta2={self.beta2})"
