from .CostFunction import CostFunction


class CrossEntropy(CostFunction):
    def __init__(self, eps=1e-12):
        self.eps = eps

    def compute(self, output, expected):
        """
        output: (batch, num_classes) probabilities
        expected: (batch, num_classes) one-hot
        """
        log_probs = output.clip_lower(self.eps).log()
        return -(expected * log_probs).sum() / output.m

    def differentiate(self, output, expected):
        return expected.negate() / output.clip_lower(self.eps)
