"""
Learning rate schedules applied between epochs.

Every scheduler rewrites optimizer.lr in place; the optimizer's per-parameter
caches are left untouched.
"""
import math

from ..exceptions import ConfigurationError


class LRScheduler:
    """Base class for learning rate schedulers."""

    def __init__(self, optimizer, verbose=False):
        self.optimizer = optimizer
        self.verbose = verbose
        self.initial_lr = optimizer.lr
        self.current_lr = optimizer.lr

    def step(self, epoch, metrics=None):
        """Update the learning rate for the given (0-based) epoch."""
        new_lr = self.get_lr(epoch, metrics)
        if new_lr != self.current_lr:
            self.current_lr = new_lr
            self.optimizer.lr = new_lr
            if self.verbose:
                print(f"   LR updated: {new_lr:.6g}")
        return new_lr

    def get_lr(self, epoch, metrics=None):
        return self.current_lr


class StepLR(LRScheduler):
    """Multiply the rate by gamma every step_size epochs."""

    def __init__(self, optimizer, step_size, gamma=0.1, verbose=False):
        super().__init__(optimizer, verbose)
        if step_size < 1:
            raise ConfigurationError(f"Step size must be greater than 0, {step_size} given.")
        self.step_size = step_size
        self.gamma = gamma

    def get_lr(self, epoch, metrics=None):
        return self.initial_lr * (self.gamma ** (epoch // self.step_size))


class ExponentialLR(LRScheduler):
    def __init__(self, optimizer, gamma=0.95, verbose=False):
        super().__init__(optimizer, verbose)
        if not 0.0 < gamma <= 1.0:
            raise ConfigurationError(f"Gamma must be in (0, 1], {gamma} given.")
        self.gamma = gamma

    def get_lr(self, epoch, metrics=None):
        return self.initial_lr * (self.gamma**epoch)


class CosineAnnealingLR(LRScheduler):
    """Cosine decay from the initial rate to min_lr over T_max epochs."""

    def __init__(self, optimizer, T_max, min_lr=0.0, verbose=False):
        super().__init__(optimizer, verbose)
        if T_max < 1:
            raise ConfigurationError(f"T_max must be greater than 0, {T_max} given.")
        self.T_max = T_max
        self.min_lr = min_lr

    def get_lr(self, epoch, metrics=None):
        progress = min(epoch, self.T_max) / self.T_max
        return self.min_lr + (self.initial_lr - self.min_lr) * (1 + math.cos(math.pi * progress)) / 2


class WarmupCosineScheduler(LRScheduler):
    """Linear warmup, then cosine decay."""

    def __init__(self, optimizer, warmup_epochs=5, max_epochs=100, warmup_lr=1e-6, min_lr=1e-6, verbose=False):
        super().__init__(optimizer, verbose)
        if not 0 <= warmup_epochs < max_epochs:
            raise ConfigurationError(
                f"Warmup epochs must be in [0, max_epochs), {warmup_epochs} given."
            )
        self.warmup_epochs = warmup_epochs
        self.max_epochs = max_epochs
        self.warmup_lr = warmup_lr
        self.min_lr = min_lr

    def get_lr(self, epoch, metrics=None):
        if epoch < self.warmup_epochs:
            return self.warmup_lr + (self.initial_lr - self.warmup_lr) * epoch / self.warmup_epochs
        progress = min(epoch - self.warmup_epochs, self.max_epochs - self.warmup_epochs)
        progress /= self.max_epochs - self.warmup_epochs
        return self.min_lr + (self.initial_lr - self.min_lr) * (1 + math.cos(math.pi * progress)) / 2


class ReduceLROnPlateau(LRScheduler):
    """Shrink the rate by factor when the monitored metric stalls."""

    def __init__(
        self,
        optimizer,
        monitor="val_loss",
        mode="min",
        factor=0.5,
        patience=10,
        threshold=1e-4,
        min_lr=0.0,
        verbose=False,
    ):
        super().__init__(optimizer, verbose)
        if mode not in ("min", "max"):
            raise ConfigurationError(f"Mode must be 'min' or 'max', {mode!r} given.")
        if not 0.0 < factor < 1.0:
            raise ConfigurationError(f"Factor must be between 0 and 1, {factor} given.")
        self.monitor = monitor
        self.mode = mode
        self.factor = factor
        self.patience = patience
        self.threshold = threshold
        self.min_lr = min_lr

        self.best = None
        self.num_bad_epochs = 0

    def _improved(self, current):
        if self.mode == "min":
            return current < self.best - self.threshold
        return current > self.best + self.threshold

    def get_lr(self, epoch, metrics=None):
        if metrics is None or self.monitor not in metrics:
            return self.current_lr

        current = metrics[self.monitor]

        if self.best is None or self._improved(current):
            self.best = current
            self.num_bad_epochs = 0
        else:
            self.num_bad_epochs += 1

        if self.num_bad_epochs >= self.patience:
            new_lr = max(self.current_lr * self.factor, self.min_lr)
            if new_lr < self.current_lr:
                self.num_bad_epochs = 0
                if self.verbose:
                    print(f"   ReduceLROnPlateau: {self.monitor} stalled for {self.patience} epochs")
                return new_lr

        return self.current_lr


SCHEDULERS = {
    "step": StepLR,
    "exponential": ExponentialLR,
    "cosine": CosineAnnealingLR,
    "plateau": ReduceLROnPlateau,
    "warmup_cosine": WarmupCosineScheduler,
}


def get_scheduler(name, optimizer, **kwargs):
    """Create a scheduler by name."""
    if name not in SCHEDULERS:
        raise ConfigurationError(f"Unknown scheduler: {name}. Available: {list(SCHEDULERS)}")
    return SCHEDULERS[name](optimizer, **kwargs)
