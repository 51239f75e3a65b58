from .Metric import Metric


class Accuracy(Metric):
    def score(self, predictions, labels):
        self._check(predictions, labels)
        if len(predictions) == 0:
            return 0.0
        correct = sum(1 for p, y in zip(predictions, labels) if p == y)
        return correct / len(predictions)
