"""Exception types raised by the mlog sinks and registry."""


class MLogError(RuntimeError):
    """Base error for mlog."""


class InvalidSeverityError(ValueError):
    """Raised when a severity code is outside 0-7."""


class InvalidFacilityError(ValueError):
    """Raised when a facility code is outside 0-23."""


class SinkOpenError(MLogError):
    """Raised when a sink cannot acquire its file or socket."""


class LoggerNotInitializedError(MLogError):
    """Raised when a registry sink is used before it was initialized."""


class LoggerAlreadyInitializedError(MLogError):
    """Raised when a registry sink is initialized twice without replace=True."""
