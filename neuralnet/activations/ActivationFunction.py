class ActivationFunction:
    # Subclasses override compute and differentiate (or gradient)
    def compute(self, z):
        raise NotImplementedError

    def differentiate(self, z, computed):
        # Elementwise derivative of the activation at z
        raise NotImplementedError

    def gradient(self, z, computed, d_out):
        # Gradient wrt z given the gradient wrt the activation output
        return d_out * self.differentiate(z, computed)

    def __repr__(self):
        return f"{type(self).__name__}()"
