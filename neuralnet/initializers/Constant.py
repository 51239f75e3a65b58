from .Initializer import Initializer
from ..tensor import Matrix


class Constant(Initializer):
    def __init__(self, value=0.0):
        self.value = float(value)

    def initialize(self, fan_in, fan_out):
        return Matrix.fill(self.value, fan_out, fan_in)
