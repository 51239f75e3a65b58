# helpers/logger.py
import csv
import datetime
import json
import pathlib

import matplotlib.pyplot as plt


class RunLogger:
    """
    Per-run output directory: epoch history as CSV and JSON, network
    checkpoints as .npz, and training curves as PNG.
    """

    def __init__(self, root="runs", tag="run"):
        ts = datetime.datetime.now().strftime("%Y%m%d-%H%M%S-%f")
        self.root = pathlib.Path(root)
        self.dir = self.root / f"{tag}_{ts}"
        self.dir.mkdir(parents=True, exist_ok=True)
        self.tag = tag
        self.csv_path = self.dir / "history.csv"
        self.json_path = self.dir / "history.json"
        self.best_ckpt = self.dir / "checkpoint_best.npz"
        self.last_ckpt = self.dir / "checkpoint_last.npz"
        self.metrics = []  # one dict per epoch
        self._fieldnames = None

    # ---------- logging ----------
    def log_epoch(self, epoch, **kwargs):
        row = {"epoch": int(epoch), **{k: float(v) for k, v in kwargs.items()}}
        self.metrics.append(row)
        with open(self.csv_path, "a", newline="") as f:
            if self._fieldnames is None:
                self._fieldnames = list(row.keys())
                writer = csv.DictWriter(f, fieldnames=self._fieldnames)
                writer.writeheader()
            else:
                writer = csv.DictWriter(f, fieldnames=self._fieldnames)
            writer.writerow(row)

    def save_json(self):
        with open(self.json_path, "w") as f:
            json.dump(self.metrics, f, indent=2)
        return str(self.json_path)

    def save_checkpoint(self, network, best=False):
        path = self.best_ckpt if best else self.last_ckpt
        network.save(path)
        return str(path)

    # ---------- plotting ----------
    def _plots_dir(self, subdir):
        out = self.dir / subdir
        out.mkdir(parents=True, exist_ok=True)
        return out

    def plot_loss(self, history, subdir="plots"):
        """Save the training loss curve (and validation score if present)."""
        loss = history.get("loss", [])
        if len(loss) == 0:
            return None

        outdir = self._plots_dir(subdir)
        plt.figure()
        plt.plot(range(1, len(loss) + 1), loss, label="train loss")
        plt.xlabel("Epoch")
        plt.ylabel("Loss")
        plt.title(f"Loss vs Epochs ({self.tag})")
        plt.legend()
        plt.tight_layout()
        path = outdir / f"loss_curve_{self.tag}_epochs_{len(loss)}.png"
        plt.savefig(path, dpi=160)
        plt.close()
        return str(path)

    def plot_val_metrics(self, history, subdir="plots"):
        scores = history.get("val_score", [])
        if len(scores) == 0:
            return None

        outdir = self._plots_dir(subdir)
        plt.figure()
        plt.plot(range(1, len(scores) + 1), scores, label="validation score")
        plt.xlabel("Epoch")
        plt.ylabel("Score")
        plt.title(f"Validation Score vs Epochs ({self.tag})")
        plt.legend()
        plt.tight_layout()
        path = outdir / f"val_metrics_{self.tag}_epochs_{len(scores)}.png"
        plt.savefig(path, dpi=160)
        plt.close()
        return str(path)

    def plot_all(self, history, subdir="plots"):
        return [
            p
            for p in (self.plot_loss(history, subdir), self.plot_val_metrics(history, subdir))
            if p is not None
        ]
