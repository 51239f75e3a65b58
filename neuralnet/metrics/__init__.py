from .Metric import Metric
from .Accuracy import Accuracy
from .MeanSquaredError import MeanSquaredError
from .RSquared import RSquared

__all__ = [
    "Metric",
    "Accuracy",
    "MeanSquaredError",
    "RSquared",
]
