from ..exceptions import IncompatibleDataset


class Metric:
    # Subclasses override score; higher is always better
    def score(self, predictions, labels):
        raise NotImplementedError

    def _check(self, predictions, labels):
        if len(predictions) != len(labels):
            raise IncompatibleDataset(
                f"Number of predictions and labels must be equal,"
                f" {len(predictions)} and {len(labels)} given."
            )

    def __repr__(self):
        return f"{type(self).__name__}()"
