"""
Error taxonomy for csh2sh.

Every failure raised by a converter derives from ConversionError, and also
from the closest built-in exception so callers can catch either.
"""


class ConversionError(Exception):
    """Base class for all conversion failures."""
    pass


class InvalidInputError(ConversionError, ValueError):
    """Raised when the input is not acceptable (wrong extension, not a directory, bad encoding)."""
    pass


class SourceNotFoundError(ConversionError, FileNotFoundError):
    """Raised when the source file does not exist."""
    pass


class ConversionIOError(ConversionError, OSError):
    """Raised when reading the source or writing the destination fails."""
    pass


class UnsupportedConversionError(ConversionError, LookupError):
    """Raised when no converter is registered for an (extension, kind) pair."""
    pass


class UnsupportedConstructWarning(UserWarning):
    """Emitted for source constructs the line-oriented rewrite cannot represent."""
    pass


__all__ = [
    "ConversionError",
    "InvalidInputError",
    "SourceNotFoundError",
    "ConversionIOError",
    "UnsupportedConversionError",
    "UnsupportedConstructWarning",
]
