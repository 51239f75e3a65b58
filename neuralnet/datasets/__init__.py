from .Dataset import Dataset
from .Labeled import Labeled
from .Unlabeled import Unlabeled

__all__ = [
    "Dataset",
    "Labeled",
    "Unlabeled",
]
