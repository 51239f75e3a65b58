from .Adam import Adam
from ..constants import EPSILON
from ..exceptions import ConfigurationError


class AdamW(Adam):
    """Adam with decoupled weight decay."""

    def __init__(self, lr=1e-3, weight_decay=0.0, beta1=0.9, beta2=0.999, eps=EPSILON):
        super().__init__(lr, beta1=beta1, beta2=beta2, eps=eps)
        if weight_decay < 0.0:
            raise ConfigurationError(f"Weight decay must be 0 or greater, {weight_decay} given.")
        self.weight_decay = weight_decay

    def _update(self, state, w, gradient):
        state, delta = super()._update(state, w, gradient)
        if self.weight_decay != 0.0:
            delta = delta + w * (self.lr * self.weight_decay)
        return state, delta
