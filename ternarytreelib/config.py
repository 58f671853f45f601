"""Configuration system for TernaryTreeLib.

A TreeConfig describes how a tree orders its values: by the values' own
natural ordering, by an explicit comparison function, or by a key function
applied before a natural comparison. Any of them can be reversed.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional

from .ordering import (
    Ordering,
    case_insensitive_order,
    key_order,
    natural_order,
    reversed_order,
)


class OrderingSource(Enum):
    """Where the effective ordering of a tree comes from."""
    NATURAL = "natural"   # Values compare themselves
    CUSTOM = "custom"     # Explicit cmp-style function
    KEY = "key"           # Key function, compared naturally


@dataclass
class TreeConfig:
    """Complete configuration for a TernaryTree.

    ``ordering`` and ``key`` are mutually exclusive. When neither is given
    the natural ordering of the values is used.
    """

    ordering: Optional[Ordering] = None
    key: Optional[Callable[[Any], Any]] = None
    reverse: bool = False

    @property
    def source(self) -> OrderingSource:
        if self.ordering is not None:
            return OrderingSource.CUSTOM
        if self.key is not None:
            return OrderingSource.KEY
        return OrderingSource.NATURAL

    # Convenience constructors for common configurations

    @classmethod
    def natural(cls, reverse: bool = False) -> 'TreeConfig':
        """Create config ordering values by their own comparison operators."""
        return cls(reverse=reverse)

    @classmethod
    def by_key(cls, key: Callable[[Any], Any], reverse: bool = False) -> 'TreeConfig':
        """Create config ordering values by ``key(value)``.

        Args:
            key: Function extracting the comparison key from a value
            reverse: Sort descending instead of ascending

        Returns:
            TreeConfig using a key-derived ordering
        """
        return cls(key=key, reverse=reverse)

    @classmethod
    def case_insensitive(cls, reverse: bool = False) -> 'TreeConfig':
        """Create config for string values compared without regard to case."""
        return cls(ordering=case_insensitive_order, reverse=reverse)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.ordering is not None and self.key is not None:
            errors.append("ordering and key are mutually exclusive")

        if self.ordering is not None and not callable(self.ordering):
            errors.append("ordering must be callable")

        if self.key is not None and not callable(self.key):
            errors.append("key must be callable")

        if not isinstance(self.reverse, bool):
            errors.append("reverse must be a bool")

        return errors

    def resolve_ordering(self) -> Ordering:
        """Build the effective ordering described by this config.

        Callers are expected to have checked validate() first.
        """
        source = self.source
        if source is OrderingSource.CUSTOM:
            ordering = self.ordering
        elif source is OrderingSource.KEY:
            ordering = key_order(self.key)
        else:
            ordering = natural_order

        if self.reverse:
            ordering = reversed_order(ordering)
        return ordering
