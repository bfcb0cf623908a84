"""Exceptions raised by the confluence engine."""


class ConfluenceError(Exception):
    """Base class for engine errors."""


class InsufficientDataError(ConfluenceError):
    """Raised when a series is too short to derive a value from it.

    Callers should treat the derived value as absent (e.g. show an
    insufficient-data state) rather than substituting a neutral result.
    """
