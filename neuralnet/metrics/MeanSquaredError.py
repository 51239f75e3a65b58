import numpy as np

from .Metric import Metric


class MeanSquaredError(Metric):
    """Negated MSE so that higher is better."""

    def score(self, predictions, labels):
        self._check(predictions, labels)
        if len(predictions) == 0:
            return 0.0
        errors = np.asarray(predictions, dtype=np.float64) - np.asarray(labels, dtype=np.float64)
        return -float(np.mean(errors**2))
