import csv
import json
import math

import pytest

from neuralnet.early_stopping import EarlyStopping
from neuralnet.exceptions import ConfigurationError
from neuralnet.helpers import (
    CosineAnnealingLR,
    ExponentialLR,
    ReduceLROnPlateau,
    RunLogger,
    StepLR,
    WarmupCosineScheduler,
    get_scheduler,
)
from neuralnet.activations import ReLU
from neuralnet.layers import Activation, BatchNorm, Dense, Multiclass, Placeholder
from neuralnet.network import Network
from neuralnet.optimizer import Adam


class RecordingNetwork:
    def __init__(self):
        self.version = 0
        self.restored = None

    def read(self):
        return {"version": self.version}

    def restore(self, state):
        self.restored = state


# ================== early stopping ==================
def test_early_stopping_waits_for_patience():
    stopper = EarlyStopping(patience=2, monitor="val_loss", mode="min")
    network = RecordingNetwork()

    assert not stopper.update(1, {"val_loss": 1.0}, network)
    network.version = 1
    assert not stopper.update(2, {"val_loss": 0.5}, network)
    network.version = 2
    assert not stopper.update(3, {"val_loss": 0.6}, network)
    assert stopper.update(4, {"val_loss": 0.7}, network)

    assert stopper.stopped
    assert stopper.best == 0.5
    assert stopper.best_epoch == 2
    assert network.restored == {"version": 1}


def test_early_stopping_max_mode_and_min_delta():
    stopper = EarlyStopping(patience=1, monitor="val_score", mode="max", min_delta=0.1)
    network = RecordingNetwork()
    assert not stopper.update(1, {"val_score": 0.5}, network)
    assert stopper.update(2, {"val_score": 0.55}, network)


def test_early_stopping_without_restore():
    stopper = EarlyStopping(patience=1, restore_best_weights=False)
    network = RecordingNetwork()
    stopper.update(1, {"val_loss": 1.0}, network)
    assert stopper.update(2, {"val_loss": 2.0}, network)
    assert network.restored is None


def test_early_stopping_validation():
    with pytest.raises(ConfigurationError):
        EarlyStopping(patience=0)
    with pytest.raises(ConfigurationError):
        EarlyStopping(mode="sideways")
    with pytest.raises(ConfigurationError):
        EarlyStopping(min_delta=-0.1)


def test_early_stopping_requires_monitored_metric():
    stopper = EarlyStopping(monitor="val_loss")
    with pytest.raises(ConfigurationError):
        stopper.update(1, {"loss": 1.0}, RecordingNetwork())


def test_early_stopping_reset():
    stopper = EarlyStopping(patience=1)
    network = RecordingNetwork()
    stopper.update(1, {"val_loss": 1.0}, network)
    stopper.update(2, {"val_loss": 2.0}, network)

    stopper.reset()

    assert not stopper.stopped
    assert stopper.best is None
    assert stopper.snapshot is None
    assert not stopper.update(1, {"val_loss": 5.0}, network)


def test_early_stopping_restores_statistics_and_epoch_count(blobs):
    network = Network(
        Placeholder(2),
        [Dense(4), BatchNorm(), Activation(ReLU())],
        Multiclass(blobs.possible_outcomes()),
        Adam(lr=0.01),
    )
    network.initialize()
    stopper = EarlyStopping(patience=1, monitor="loss")

    network.train(blobs, epochs=1)
    stopper.update(1, {"loss": 0.1}, network)
    mean = network.hidden[1].mean.to_list()
    expected = network.predict(blobs).to_list()

    network.train(blobs, epochs=2)
    assert network.hidden[1].mean.to_list() != mean

    assert stopper.update(2, {"loss": 0.5}, network)
    assert network.epochs == 1
    assert network.hidden[1].mean.to_list() == mean
    assert network.predict(blobs).to_list() == expected


# ================== schedulers ==================
def test_step_lr():
    optimizer = Adam(lr=0.1)
    scheduler = StepLR(optimizer, step_size=2, gamma=0.5)
    scheduler.step(1)
    assert optimizer.lr == pytest.approx(0.1)
    scheduler.step(2)
    assert optimizer.lr == pytest.approx(0.05)
    scheduler.step(4)
    assert optimizer.lr == pytest.approx(0.025)


def test_exponential_lr():
    optimizer = Adam(lr=1.0)
    ExponentialLR(optimizer, gamma=0.5).step(3)
    assert optimizer.lr == pytest.approx(0.125)


def test_cosine_annealing_reaches_minimum():
    optimizer = Adam(lr=1.0)
    scheduler = CosineAnnealingLR(optimizer, T_max=10, min_lr=0.1)
    scheduler.step(5)
    assert optimizer.lr == pytest.approx(0.55)
    scheduler.step(10)
    assert optimizer.lr == pytest.approx(0.1)
    scheduler.step(20)
    assert optimizer.lr == pytest.approx(0.1)


def test_warmup_cosine():
    optimizer = Adam(lr=1.0)
    scheduler = WarmupCosineScheduler(optimizer, warmup_epochs=4, max_epochs=10, warmup_lr=0.0, min_lr=0.0)
    scheduler.step(2)
    assert optimizer.lr == pytest.approx(0.5)
    scheduler.step(4)
    assert optimizer.lr == pytest.approx(1.0)
    scheduler.step(7)
    assert optimizer.lr == pytest.approx(0.5 * (1 + math.cos(math.pi * 0.5)))


def test_reduce_on_plateau():
    optimizer = Adam(lr=1.0)
    scheduler = ReduceLROnPlateau(optimizer, monitor="val_loss", patience=2, factor=0.5)
    for epoch, value in enumerate([1.0, 1.0, 1.0], start=1):
        scheduler.step(epoch, {"val_loss": value})
    assert optimizer.lr == pytest.approx(0.5)

    # missing metric leaves the rate alone
    scheduler.step(4, {"loss": 0.1})
    assert optimizer.lr == pytest.approx(0.5)


def test_get_scheduler():
    optimizer = Adam()
    assert isinstance(get_scheduler("step", optimizer, step_size=3), StepLR)
    with pytest.raises(ConfigurationError):
        get_scheduler("linear", optimizer)


def test_scheduler_validation():
    with pytest.raises(ConfigurationError):
        StepLR(Adam(), step_size=0)
    with pytest.raises(ConfigurationError):
        ReduceLROnPlateau(Adam(), factor=2.0)


# ================== run logger ==================
def test_run_logger_writes_history(tmp_path):
    logger = RunLogger(root=tmp_path, tag="test")
    logger.log_epoch(1, loss=0.9, val_score=0.5)
    logger.log_epoch(2, loss=0.7, val_score=0.6)

    with open(logger.csv_path, newline="") as f:
        rows = list(csv.DictReader(f))
    assert [float(row["loss"]) for row in rows] == [0.9, 0.7]

    with open(logger.save_json()) as f:
        assert json.load(f)[1] == {"epoch": 2, "loss": 0.7, "val_score": 0.6}


def test_run_logger_plots(tmp_path):
    logger = RunLogger(root=tmp_path, tag="test")
    paths = logger.plot_all({"loss": [1.0, 0.5], "val_score": [0.2, 0.4]})
    assert len(paths) == 2
    assert all((tmp_path / p).exists() for p in paths)

    assert logger.plot_all({"loss": []}) == []
