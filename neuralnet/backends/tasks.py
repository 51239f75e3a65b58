"""Module level tasks, picklable for the Pool backend."""


def train_and_validate(estimator, training, testing, metric):
    """Train on training, then return metric's score on testing."""
    estimator.fit(training)
    predictions = estimator.predict(testing)
    return metric.score(predictions, testing.labels())


def train_learner(estimator, dataset):
    """Train and return the estimator."""
    estimator.fit(dataset)
    return estimator


def predict(estimator, dataset):
    return estimator.predict(dataset)
