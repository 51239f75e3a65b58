from .CostFunction import CostFunction


class LeastSquares(CostFunction):
    def compute(self, output, expected):
        return 0.5 * (output - expected).square().sum() / output.m

    def differentiate(self, output, expected):
        return output - expected
