import numpy as np

from .Metric import Metric
from ..constants import EPSILON


class RSquared(Metric):
    """Coefficient of determination."""

    def score(self, predictions, labels):
        self._check(predictions, labels)
        if len(predictions) == 0:
            return 0.0
        y_pred = np.asarray(predictions, dtype=np.float64)
        y_true = np.asarray(labels, dtype=np.float64)
        ss_res = np.sum((y_true - y_pred) ** 2)
        ss_tot = np.sum((y_true - np.mean(y_true)) ** 2)
        return float(1.0 - ss_res / max(ss_tot, EPSILON))
