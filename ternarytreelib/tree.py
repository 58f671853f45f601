"""TernaryTree facade for TernaryTreeLib.

The tree owns a single root slot and the ordering every node compares
with. All structural work is delegated to the root slot; the tree itself
only validates input and keeps an element count.
"""

import logging
from typing import Any, Callable, Generic, Iterable, Optional, TypeVar

from .config import TreeConfig
from .core.iterator import InOrderIterator
from .core.node import NodeView, TernaryNode
from .core.slot import NodeSlot
from .errors import ConfigurationError, InvalidValueError
from .ordering import Ordering

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TernaryTree(Generic[T]):
    """Ordered multiset backed by a ternary search tree.

    Values comparing equal are all kept and are iterated in the order they
    were inserted. The tree is not self-balancing; its shape depends only on
    insertion (and deletion) order.

    Example:
        >>> tree = TernaryTree.create()
        >>> tree.extend([5, 4, 9, 5, 7, 2, 2])
        >>> list(tree)
        [2, 2, 4, 5, 5, 7, 9]
    """

    def __init__(self, ordering: Ordering):
        """Create an empty tree with an explicit ordering.

        Args:
            ordering: cmp-style function returning <0, 0 or >0

        Raises:
            ConfigurationError: If ordering is not callable
        """
        if not callable(ordering):
            raise ConfigurationError("ordering must be callable")
        self._ordering = ordering
        self._root: NodeSlot[T] = NodeSlot()
        self._size = 0

    @classmethod
    def create(cls,
               key: Optional[Callable[[Any], Any]] = None,
               reverse: bool = False) -> 'TernaryTree':
        """Create a tree ordered by the values' natural ordering.

        Args:
            key: Optional key function applied before comparing
            reverse: Order descending instead of ascending

        Returns:
            An empty TernaryTree
        """
        return cls.from_config(TreeConfig(key=key, reverse=reverse))

    @classmethod
    def from_config(cls, config: TreeConfig) -> 'TernaryTree':
        """Create a tree from a TreeConfig.

        Raises:
            ConfigurationError: If the config fails validation
        """
        config_errors = config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )
        return cls(config.resolve_ordering())

    @property
    def ordering(self) -> Ordering:
        return self._ordering

    @property
    def root(self) -> Optional[NodeView[T]]:
        """Read-only view of the root node, or None when the tree is empty.

        Structural changes go through the tree so that len() stays exact.
        """
        node = self._root.peek()
        return None if node is None else NodeView(node)

    def insert(self, value: T) -> None:
        """Insert a value.

        Raises:
            InvalidValueError: If value is None; the tree is left unchanged
        """
        if value is None:
            raise InvalidValueError("Attempted insert of None")
        self._root.add(TernaryNode(value, self._ordering))
        self._size += 1

    def extend(self, values: Iterable[T]) -> None:
        """Insert every value from an iterable.

        All values are checked before any is inserted, so a None anywhere
        leaves the tree unchanged.

        Raises:
            InvalidValueError: If any value is None
        """
        values = list(values)
        for index, value in enumerate(values):
            if value is None:
                raise InvalidValueError(f"Attempted insert of None at position {index}")
        for value in values:
            self.insert(value)

    def delete(self, value: T) -> bool:
        """Remove one occurrence of ``value``.

        The occurrence removed is the earliest inserted among those
        comparing equal.

        Returns:
            True if an element was removed, False if none matched
        """
        if value is None:
            return False
        removed = self._root.delete(value)
        if removed:
            self._size -= 1
        logger.debug("delete(%r) -> %s", value, removed)
        return removed

    def iterator(self) -> InOrderIterator[T]:
        """Return a fresh in-order iterator supporting remove()."""
        return _TreeIterator(self)

    def count(self, value: T) -> int:
        """Return how many stored values compare equal to ``value``."""
        node = self._find(value)
        occurrences = 0
        while node is not None:
            occurrences += 1
            node = node.equal.peek()
        return occurrences

    def clear(self) -> None:
        """Remove every element.

        Elements are removed one by one so that iterators still in flight
        find their nodes detached and fail fast on remove().
        """
        it = self.iterator()
        while it.has_next():
            it.next()
            it.remove()

    def _find(self, value: T) -> Optional[TernaryNode[T]]:
        """Return the first node comparing equal to ``value``, if any."""
        root = self._root.peek()
        if value is None or root is None:
            return None
        return root.find(value)

    def __contains__(self, value: object) -> bool:
        return self._find(value) is not None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> InOrderIterator[T]:
        return self.iterator()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self)!r})"


class _TreeIterator(InOrderIterator[T]):
    """In-order iterator that keeps its tree's element count in step."""

    def __init__(self, tree: TernaryTree[T]):
        super().__init__(tree._root)
        self._tree = tree

    def _removed(self, value: T) -> None:
        self._tree._size -= 1
