class CostFunction:
    # Subclasses override compute and differentiate
    def compute(self, output, expected):
        # Return the mean loss over the batch as a float
        raise NotImplementedError

    def differentiate(self, output, expected):
        # Return dLoss/dOutput per sample, not yet averaged over the batch
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}()"
