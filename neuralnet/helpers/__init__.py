from .logger import RunLogger
from .lr_scheduler import (
    LRScheduler,
    StepLR,
    ExponentialLR,
    CosineAnnealingLR,
    WarmupCosineScheduler,
    ReduceLROnPlateau,
    get_scheduler,
)

__all__ = [
    "RunLogger",
    "LRScheduler",
    "StepLR",
    "ExponentialLR",
    "CosineAnnealingLR",
    "WarmupCosineScheduler",
    "ReduceLROnPlateau",
    "get_scheduler",
]
