from .Parameter import Parameter

__all__ = ["Parameter"]
