from ..exceptions import ConfigurationError, DimensionMismatch


class Optimizer:
    """
    Base update rule.

    step() computes the delta for a parameter given its gradient, assigns
    w - delta to the parameter and returns the delta that was applied.
    """

    def __init__(self, lr=0.01):
        if lr <= 0.0:
            raise ConfigurationError(f"Learning rate must be greater than 0, {lr} given.")
        self.lr = lr

    def warm(self, param):
        # Stateless rules have nothing to warm
        pass

    def step(self, param, gradient):
        raise NotImplementedError

    def prune(self, params):
        # Stateless rules keep no per-parameter records
        pass

    def _check_shape(self, param, gradient):
        if gradient.shape != param.w.shape:
            raise DimensionMismatch(
                f"Gradient shape {gradient.shape} does not match"
                f" parameter {param.id} shape {param.w.shape}."
            )

    def __repr__(self):
        return f"{type(self).__name__}(lr={self.lr})"
