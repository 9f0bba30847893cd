"""
Exception types raised by the boundary scanning package.

The concrete errors also derive from the matching builtin exception so that
callers written against ValueError / IndexError / RuntimeError keep working.
"""


class BoundaryScanError(Exception):
    """Base class for all boundary scanning errors."""


class InvalidArgumentError(BoundaryScanError, ValueError):
    """Bad dimensionality, connectivity, buffer shape or configuration value."""


class OutOfBoundsError(BoundaryScanError, IndexError):
    """A coordinate lies outside the matrix."""


class IllegalStateError(BoundaryScanError, RuntimeError):
    """The scanner is queried before it is positioned or before its first step."""


class ScanInterruptedError(BoundaryScanError):
    """A boundary scan was cancelled through its execution context."""
