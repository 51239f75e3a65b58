from ..exceptions import StateError


class Parametric:
    """
    Mixin for layers that own Parameters.

    PARAMETERS names the Parameter attributes, STATISTICS names any
    non-trainable tensors (e.g. running averages) that must persist too.
    """

    PARAMETERS = ()
    STATISTICS = ()

    def parameters(self):
        if not self.initialized:
            raise StateError(f"{self} has not been initialized.")
        for name in self.PARAMETERS:
            param = getattr(self, name)
            if param is not None:
                yield param

    def read(self):
        if not self.initialized:
            raise StateError(f"{self} has not been initialized.")
        state = {}
        for name in self.PARAMETERS:
            param = getattr(self, name)
            if param is not None:
                state[name] = param.copy()
        for name in self.STATISTICS:
            state[name] = getattr(self, name)
        return state

    def restore(self, state):
        for name in self.PARAMETERS:
            param = state.get(name)
            setattr(self, name, None if param is None else param.copy())
        for name in self.STATISTICS:
            setattr(self, name, state.get(name))
        self._width = self._restored_width()

    def _restored_width(self):
        raise NotImplementedError

    def restored_fan_in(self):
        # Input width implied by the restored parameters
        raise NotImplementedError
