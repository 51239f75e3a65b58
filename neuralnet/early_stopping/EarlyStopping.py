from ..exceptions import ConfigurationError


class EarlyStopping:
    """
    Halt a training loop once a monitored epoch metric stalls.

    The network snapshot taken at the best epoch comes from Network.read(),
    so restoring it brings back parameters, BatchNorm running statistics and
    the completed epoch count together.
    """

    def __init__(
        self,
        patience=5,
        min_delta=0.0,
        monitor="val_loss",
        mode="min",
        restore_best_weights=True,
    ):
        if patience < 1:
            raise ConfigurationError(f"Patience must be greater than 0, {patience} given.")
        if min_delta < 0.0:
            raise ConfigurationError(f"Minimum delta must be 0 or greater, {min_delta} given.")
        if mode not in ("min", "max"):
            raise ConfigurationError(f"Mode must be 'min' or 'max', {mode!r} given.")

        self.monitor = monitor
        self.mode = mode
        self.patience = patience
        self.min_delta = float(min_delta)
        self.restore_best_weights = restore_best_weights

        self.reset()

    def reset(self):
        self.best = None
        self.best_epoch = -1
        self.wait = 0
        self.stopped = False
        self.snapshot = None

    def improved(self, value):
        if self.best is None:
            return True
        # min_delta shifts the bar in the direction of improvement
        sign = -1.0 if self.mode == "min" else 1.0
        return sign * (value - self.best) > self.min_delta

    def update(self, epoch, metrics, network):
        """Record an epoch; return True once training should stop."""
        if self.monitor not in metrics:
            raise ConfigurationError(
                f"Metric {self.monitor!r} not reported, available: {sorted(metrics)}."
            )
        value = float(metrics[self.monitor])

        if self.improved(value):
            self.best, self.best_epoch, self.wait = value, epoch, 0
            self.snapshot = network.read()
            return False

        self.wait += 1
        if self.wait < self.patience:
            return False

        self.stopped = True
        if self.restore_best_weights:
            self.restore(network)
        return True

    def restore(self, network):
        """Roll the network back to the best epoch seen so far."""
        if self.snapshot is not None:
            network.restore(self.snapshot)

    def __repr__(self):
        return (
            f"EarlyStopping(monitor={self.monitor!r}, mode={self.mode!r},"
            f" patience={self.patience})"
        )
