from .ActivationFunction import ActivationFunction


class ReLU(ActivationFunction):
    def compute(self, z):
        return z.clip_lower(0.0)

    def differentiate(self, z, computed):
        return z.greater(0.0)
