from .Dataset import Dataset
from .Unlabeled import Unlabeled
from ..exceptions import IncompatibleDataset


class Labeled(Dataset):
    """Samples with a parallel list of labels (class names or numbers)."""

    def __init__(self, samples, labels):
        super().__init__(samples)
        labels = list(labels)
        if len(labels) != self.num_rows:
            raise IncompatibleDataset(
                f"Number of labels must equal number of samples,"
                f" {len(labels)} labels and {self.num_rows} samples given."
            )
        self._labels = labels

    def labels(self):
        return list(self._labels)

    def possible_outcomes(self):
        """Distinct labels in order of first appearance."""
        return list(dict.fromkeys(self._labels))

    def take(self, indices):
        indices = list(indices)
        return Labeled(self._samples.rows(indices), [self._labels[i] for i in indices])

    def unlabeled(self):
        return Unlabeled(self._samples)
