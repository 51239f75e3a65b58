import numpy as np

from ..tensor import Matrix
from ..exceptions import ConfigurationError, IncompatibleDataset


class Dataset:
    """An ordered collection of feature vectors, one row per sample."""

    def __init__(self, samples):
        samples = samples if isinstance(samples, Matrix) else Matrix(samples)
        self._samples = samples

    def samples(self):
        return self._samples

    @property
    def num_rows(self):
        return self._samples.m

    @property
    def num_columns(self):
        return self._samples.n

    def __len__(self):
        return self.num_rows

    def empty(self):
        return self.num_rows == 0

    def labels(self):
        raise IncompatibleDataset(f"{type(self).__name__} dataset has no labels.")

    def take(self, indices):
        # Return a new dataset holding the rows at indices, in order
        raise NotImplementedError

    def head(self, n=10):
        return self.take(range(min(n, self.num_rows)))

    def randomize(self, seed=None):
        rng = np.random.default_rng(seed) if seed is not None else np.random
        return self.take(rng.permutation(self.num_rows))

    def split(self, ratio=0.5):
        """Split into (left, right) with round(ratio * n) rows on the left."""
        if not 0.0 <= ratio <= 1.0:
            raise ConfigurationError(f"Ratio must be between 0 and 1, {ratio} given.")
        n = int(round(ratio * self.num_rows))
        return self.take(range(n)), self.take(range(n, self.num_rows))

    def batch(self, size=128):
        """Yield consecutive batches of at most size rows."""
        start = 0
        while start < self.num_rows:
            end = min(start + size, self.num_rows)
            yield self.take(range(start, end))
            start = end
