"""Custom exceptions used in cpchop."""


class ChopError(Exception):
    """Base class for errors raised while extracting a sub grid from a corner point deck."""
    pass


class FormatError(ChopError):
    """Raised when a deck keyword is missing, malformed or has a length inconsistent with SPECGRID."""
    pass


class RangeError(ChopError):
    """Raised when a requested I, J or z range cannot be honoured by the source grid."""
    pass
