"""Exception hierarchy for TernaryTreeLib.

Every exception derives from TernaryTreeError and from the builtin
exception that best describes the failure, so callers can catch either
the library-specific type or the familiar builtin one.
"""

from typing import Optional


class TernaryTreeError(Exception):
    """Base class for all TernaryTreeLib errors."""
    pass


class InvalidValueError(TernaryTreeError, ValueError):
    """Raised when an absent value (None) is inserted into a tree."""
    pass


class IteratorStateError(TernaryTreeError, RuntimeError):
    """Raised when remove() is called without a valid preceding next()."""
    pass


class DetachedNodeError(TernaryTreeError, RuntimeError):
    """Raised when self-removal is attempted on a node no longer in a tree."""
    pass


class ConfigurationError(TernaryTreeError, ValueError):
    """Raised when a TreeConfig fails validation."""
    pass


class ParseError(TernaryTreeError, ValueError):
    """Raised when a numeric string contains an illegal character.

    Attributes:
        index: Position of the offending character in the input string
        char: The offending character
    """

    def __init__(self, message: str, index: int, char: Optional[str] = None):
        super().__init__(message)
        self.index = index
        self.char = char

    def __str__(self) -> str:
        return f"{self.args[0]} (at index {self.index})"
