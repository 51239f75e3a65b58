from .Dataset import Dataset


class Unlabeled(Dataset):
    def take(self, indices):
        return Unlabeled(self._samples.rows(list(indices)))
