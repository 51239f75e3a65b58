from .Backend import Backend
from .Serial import Serial
from .Pool import Pool
from . import tasks

__all__ = [
    "Backend",
    "Serial",
    "Pool",
    "tasks",
]
