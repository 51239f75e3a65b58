from .Optimizer import Optimizer


class Adaptive(Optimizer):
    """
    An update rule that keeps a cache record per parameter.

    The cache maps Parameter.id to an immutable record. A record is created
    once by warm() and lives for the parameter's whole training lifetime.
    """

    def __init__(self, lr=0.01):
        super().__init__(lr)
        self.cache = {}

    def warm(self, param):
        if param.id not in self.cache:
            self.cache[param.id] = self._zero_state(param.w)

    def state(self, param):
        return self.cache.get(param.id)

    def step(self, param, gradient):
        self._check_shape(param, gradient)

        # Unwarmed parameters are warmed on first use
        self.warm(param)

        state, delta = self._update(self.cache[param.id], param.w, gradient)
        w = param.w - delta

        self.cache[param.id] = state
        param.update(w)

        return delta

    def reset(self):
        self.cache.clear()

    def prune(self, params):
        """Drop cache records of parameters not in params."""
        keep = {param.id for param in params}
        self.cache = {id: state for id, state in self.cache.items() if id in keep}

    def _zero_state(self, w):
        raise NotImplementedError

    def _update(self, state, w, gradient):
        # Return (new_state, delta) without touching the cache
        raise NotImplementedError
