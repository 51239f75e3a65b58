class ConfigurationError(ValueError):
    """Invalid constructor argument, raised eagerly at construction."""


class StateError(RuntimeError):
    """Operation invoked out of sequence, e.g. forward before initialize."""


class DimensionMismatch(ValueError):
    """Shape-incompatible tensor operation."""


class IncompatibleDataset(ValueError):
    """Dataset cannot be used for the requested operation."""
