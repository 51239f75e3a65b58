from .Optimizer import Optimizer


class Stochastic(Optimizer):
    """Plain gradient descent, delta = lr * g."""

    def step(self, param, gradient):
        self._check_shape(param, gradient)
        delta = gradient * self.lr
        param.update(param.w - delta)
        return delta
