from .Estimator import Estimator
from ..layers import Continuous
from ..metrics import RSquared
from ..exceptions import IncompatibleDataset


class MLPRegressor(Estimator):
    """Feed forward regressor with a single linear output."""

    def _default_metric(self):
        return RSquared()

    def _build_output(self, dataset):
        for label in dataset.labels():
            if isinstance(label, str):
                raise IncompatibleDataset(f"Regression labels must be numeric, {label!r} given.")
        return Continuous(alpha=self.alpha)

    def _decode(self, output):
        return output.column(0).to_list()

    def predict(self, dataset):
        return self._decode(self._infer(dataset))
