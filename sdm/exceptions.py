"""Exceptions raised by the SDM package."""


class SDMError(Exception):
    """Base class for all errors raised by the SDM package."""


class InvalidArgumentError(SDMError, ValueError):
    """Raised when a parameter or vector value is outside its allowed range."""


class ShapeMismatchError(SDMError, ValueError):
    """Raised when a vector's shape disagrees with the expected shape."""
