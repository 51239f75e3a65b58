import copy
import time

import numpy as np

from ..datasets import Dataset, Labeled, Unlabeled
from ..early_stopping import EarlyStopping
from ..exceptions import ConfigurationError, IncompatibleDataset, StateError
from ..helpers.logger import RunLogger
from ..helpers.lr_scheduler import get_scheduler
from ..layers import Placeholder
from ..network import Network
from ..optimizer import Adam
from ..tensor import Matrix


class Estimator:
    """
    Shared fit/predict loop for feed forward estimators.

    Subclasses choose the output layer, the default validation metric and
    how raw network output maps to predictions.
    """

    def __init__(
        self,
        hidden_layers=(),
        batch_size=128,
        optimizer=None,
        epochs=100,
        holdout=0.1,
        metric=None,
        early_stopping=None,
        scheduler=None,
        scheduler_kwargs=None,
        alpha=0.0,
        shuffle=True,
        seed=None,
        verbose=1,
        run_dir=None,
        tag="run",
    ):
        if batch_size < 1:
            raise ConfigurationError(f"Batch size must be greater than 0, {batch_size} given.")
        if epochs < 1:
            raise ConfigurationError(f"Epochs must be greater than 0, {epochs} given.")
        if not 0.0 <= holdout < 0.5:
            raise ConfigurationError(f"Holdout ratio must be in [0, 0.5), {holdout} given.")
        if alpha < 0.0:
            raise ConfigurationError(f"Alpha must be 0 or greater, {alpha} given.")

        self.hidden_layers = list(hidden_layers)
        self.batch_size = batch_size
        self.optimizer = optimizer or Adam()
        self.epochs = epochs
        self.holdout = holdout
        self.metric = metric or self._default_metric()
        self.early_stopping = early_stopping
        self.scheduler = scheduler
        self.scheduler_kwargs = scheduler_kwargs or {}
        self.alpha = alpha
        self.shuffle = shuffle
        self.seed = seed
        self.verbose = verbose
        self.run_dir = run_dir
        self.tag = tag

        self.network = None
        self.history = None

    @property
    def trained(self):
        return self.network is not None and self.network.trained

    def _default_metric(self):
        raise NotImplementedError

    def _build_output(self, dataset):
        raise NotImplementedError

    def _decode(self, output):
        raise NotImplementedError

    def fit(self, dataset):
        if not isinstance(dataset, Labeled):
            raise IncompatibleDataset(f"{type(self).__name__} requires a Labeled dataset.")
        if dataset.empty():
            raise IncompatibleDataset("Training dataset is empty.")

        if self.seed is not None:
            np.random.seed(self.seed)

        # fresh layers and optimizer state on every fit
        self.network = Network(
            Placeholder(dataset.num_columns),
            copy.deepcopy(self.hidden_layers),
            self._build_output(dataset),
            copy.deepcopy(self.optimizer),
        )
        self.network.initialize()

        training, testing = dataset.randomize().split(1.0 - self.holdout)

        stopper = self.early_stopping
        if isinstance(stopper, dict):
            stopper = EarlyStopping(**stopper)
        else:
            stopper = copy.deepcopy(stopper)

        monitored = {"loss"}
        if not testing.empty():
            monitored |= {"val_loss", "val_score"}
        if stopper is not None and stopper.monitor not in monitored:
            raise ConfigurationError(
                f"Cannot monitor {stopper.monitor!r}, available: {sorted(monitored)}."
            )

        scheduler = None
        if self.scheduler is not None:
            scheduler = get_scheduler(self.scheduler, self.network.optimizer, **self.scheduler_kwargs)

        logger = RunLogger(root=self.run_dir, tag=self.tag) if self.run_dir is not None else None

        history = {"loss": []}
        if not testing.empty():
            history["val_loss"] = []
            history["val_score"] = []

        if self.verbose > 0:
            print(f"Starting training for {self.epochs} epochs...")

        for ep in range(1, self.epochs + 1):
            t0 = time.time()

            loss = self.network.train(
                training, epochs=1, batch_size=self.batch_size, shuffle=self.shuffle
            )[0]
            history["loss"].append(loss)
            metrics = {"loss": loss}

            if not testing.empty():
                val_loss, val_score = self._validate(testing)
                history["val_loss"].append(val_loss)
                history["val_score"].append(val_score)
                metrics.update({"val_loss": val_loss, "val_score": val_score})

            # logging (console)
            if self.verbose > 0:
                log_interval = max(1, self.epochs // 10)
                if ep % log_interval == 0 or ep == 1 or ep == self.epochs:
                    line = f"Epoch {ep}/{self.epochs} - loss: {loss:.4f}"
                    if "val_score" in metrics:
                        line += (
                            f" - val_loss: {metrics['val_loss']:.4f}"
                            f" - val_score: {metrics['val_score']:.4f}"
                        )
                    print(line)

            # logging (files + checkpoints)
            if logger is not None:
                logger.log_epoch(ep, time_s=time.time() - t0, **metrics)
                logger.save_checkpoint(self.network, best=False)
                if "val_score" in metrics and metrics["val_score"] >= max(history["val_score"]):
                    logger.save_checkpoint(self.network, best=True)

            if scheduler is not None:
                scheduler.step(ep, metrics)

            if stopper is not None and stopper.update(ep, metrics, self.network):
                if self.verbose > 0:
                    print(
                        f"Early stopping at epoch {ep:02d}. "
                        f"Best {stopper.monitor}={stopper.best:.4f} at epoch {stopper.best_epoch:02d}."
                    )
                break

        if logger is not None:
            logger.save_json()
            logger.plot_all(history)

        self.history = history
        return history

    def _validate(self, testing):
        output = self.network.infer(testing)
        layer = self.network.output
        val_loss = layer.cost.compute(output, layer.encode(testing.labels()))
        val_score = self.metric.score(self._decode(output), testing.labels())
        return float(val_loss), float(val_score)

    def _infer(self, dataset):
        if not self.trained:
            raise StateError(f"{type(self).__name__} must be trained before making predictions.")
        if not isinstance(dataset, Dataset):
            dataset = Unlabeled(dataset)
        if dataset.empty():
            return Matrix.zeros(0, self.network.output.width)
        outputs = [self.network.predict(batch).a for batch in dataset.batch(self.batch_size)]
        return Matrix(np.vstack(outputs))

    def score(self, dataset):
        """Score predictions on a Labeled dataset with the estimator's metric."""
        if not isinstance(dataset, Labeled):
            raise IncompatibleDataset("Scoring requires a Labeled dataset.")
        return self.metric.score(self.predict(dataset), dataset.labels())
