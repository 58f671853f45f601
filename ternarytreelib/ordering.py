"""Orderings for TernaryTreeLib.

An ordering is any callable ``compare(a, b)`` returning a negative number,
zero or a positive number when ``a`` is less than, equal to or greater than
``b`` - the same convention used by ``functools.cmp_to_key``. The tree
normalises every result to a Comparison so node code never has to reason
about arbitrary integers.
"""

from enum import IntEnum
from typing import Any, Callable, TypeVar

T = TypeVar("T")

Ordering = Callable[[Any, Any], int]


class Comparison(IntEnum):
    """Normalised outcome of comparing two values."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


def compare(ordering: Ordering, a: Any, b: Any) -> Comparison:
    """Compare ``a`` against ``b`` and normalise the result.

    Args:
        ordering: Comparison function in cmp style
        a: Left-hand value
        b: Right-hand value

    Returns:
        Comparison.LESS, Comparison.EQUAL or Comparison.GREATER
    """
    result = ordering(a, b)
    if result < 0:
        return Comparison.LESS
    if result > 0:
        return Comparison.GREATER
    return Comparison.EQUAL


def natural_order(a: Any, b: Any) -> int:
    """Order values by their own ``<`` and ``>`` operators."""
    return (a > b) - (a < b)


def key_order(key: Callable[[Any], Any]) -> Ordering:
    """Build an ordering that compares ``key(value)`` naturally.

    Example:
        >>> by_length = key_order(len)
        >>> by_length("abc", "de")
        1
    """
    def _ordering(a: Any, b: Any) -> int:
        return natural_order(key(a), key(b))

    _ordering.__name__ = f"key_order({getattr(key, '__name__', repr(key))})"
    return _ordering


def reversed_order(ordering: Ordering) -> Ordering:
    """Invert an ordering. Equal values stay equal."""
    def _ordering(a: Any, b: Any) -> int:
        return ordering(b, a)

    _ordering.__name__ = f"reversed({getattr(ordering, '__name__', repr(ordering))})"
    return _ordering


def case_insensitive_order(a: str, b: str) -> int:
    """Compare strings ignoring case; "abc" and "ABC" are equal."""
    return natural_order(a.lower(), b.lower())
