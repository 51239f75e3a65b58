from .Network import Network

__all__ = ["Network"]
