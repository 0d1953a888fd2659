"""Error taxonomy shared by the numeric core, the configuration layer and the GUI."""


class FourierExplorerError(Exception):
    """Base error."""


class InvalidFrequency(FourierExplorerError, ValueError):
    """Raised for a non-positive or non-finite analysis angular frequency."""


class InvalidPeriod(FourierExplorerError, ValueError):
    """Raised for a non-positive or non-finite period / window width."""


class EmptySeries(FourierExplorerError, ValueError):
    """Raised (only when explicitly requested) for a series with fewer than two samples."""


class ConfigError(FourierExplorerError, ValueError):
    """Raised when a visualizer profile fails validation."""
