from .ActivationFunction import ActivationFunction


class Sigmoid(ActivationFunction):
    def compute(self, z):
        return z.negate().exp().add(1.0).reciprocal()

    def differentiate(self, z, computed):
        return computed * (1.0 - computed)
