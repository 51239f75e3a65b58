from .Estimator import Estimator
from ..layers import Multiclass
from ..metrics import Accuracy


class MultilayerPerceptron(Estimator):
    """Feed forward classifier with a softmax output over the seen classes."""

    def _default_metric(self):
        return Accuracy()

    def _build_output(self, dataset):
        return Multiclass(dataset.possible_outcomes(), alpha=self.alpha)

    def _decode(self, output):
        return self.network.output.decode(output)

    def predict_proba(self, dataset):
        """Class probabilities, one row per sample, columns in self.classes order."""
        return self._infer(dataset)

    def predict(self, dataset):
        return self._decode(self._infer(dataset))

    @property
    def classes(self):
        return None if self.network is None else list(self.network.output.classes)
