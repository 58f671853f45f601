"""In-order iteration for TernaryTreeLib.

Iteration is an explicit state machine rather than a generator. Each
occupied slot gets a cursor holding three child cursors (less, equal,
greater) and a phase recording how far through "less, self, equal,
greater" it has got. The whole cursor tree is built when iteration
starts, so the nodes each cursor will visit are fixed at that point.
Removing the current element re-arranges the live tree, but cursors keep
walking the subtrees they captured, and every surviving node is still
produced exactly once.

Both building and walking use explicit stacks, so degenerate trees built
from sorted input iterate without hitting the recursion limit.
"""

import logging
from enum import Enum
from typing import Generic, List, Optional, TypeVar

from ..errors import IteratorStateError
from .node import TernaryNode
from .slot import NodeSlot

logger = logging.getLogger(__name__)

T = TypeVar("T")


class IteratorState(Enum):
    """Lookahead state of an InOrderIterator."""
    UNINITIALIZED = "uninitialized"   # No lookahead computed
    HAS_LOOKAHEAD = "has_lookahead"   # Next node buffered
    EXHAUSTED = "exhausted"           # Traversal complete (terminal)


class _Phase(Enum):
    LESS = 0
    SELF = 1
    EQUAL = 2
    GREATER = 3
    DONE = 4


class _SubtreeCursor(Generic[T]):
    """Position within the subtree captured from one slot."""

    __slots__ = ("node", "less", "equal", "greater", "phase")

    def __init__(self, node: Optional[TernaryNode[T]]):
        self.node = node
        self.less: Optional["_SubtreeCursor[T]"] = None
        self.equal: Optional["_SubtreeCursor[T]"] = None
        self.greater: Optional["_SubtreeCursor[T]"] = None
        self.phase = _Phase.DONE if node is None else _Phase.LESS

    @classmethod
    def capture(cls, slot: NodeSlot[T]) -> "_SubtreeCursor[T]":
        """Build cursors for every node currently below ``slot``."""
        root = cls(slot.peek())
        pending = [root]
        while pending:
            cursor = pending.pop()
            if cursor.node is None:
                continue
            cursor.less = cls(cursor.node.less.peek())
            cursor.equal = cls(cursor.node.equal.peek())
            cursor.greater = cls(cursor.node.greater.peek())
            pending.extend((cursor.less, cursor.equal, cursor.greater))
        return root


def _advance(stack: List[_SubtreeCursor[T]]) -> Optional[TernaryNode[T]]:
    """Return the next node in less, self, equal, greater order.

    ``stack`` holds the cursors from the root down to the one in progress
    and is left positioned for the following call.
    """
    while stack:
        cursor = stack[-1]
        phase = cursor.phase

        if phase is _Phase.LESS:
            cursor.phase = _Phase.SELF
            stack.append(cursor.less)
        elif phase is _Phase.SELF:
            cursor.phase = _Phase.EQUAL
            return cursor.node
        elif phase is _Phase.EQUAL:
            cursor.phase = _Phase.GREATER
            stack.append(cursor.equal)
        elif phase is _Phase.GREATER:
            cursor.phase = _Phase.DONE
            stack.append(cursor.greater)
        else:
            stack.pop()
    return None


class InOrderIterator(Generic[T]):
    """Sorted, insertion-stable iterator over a ternary tree.

    Supports both the explicit ``has_next()`` / ``next()`` / ``remove()``
    protocol and the Python iterator protocol. Both share one position.

    Example:
        >>> it = tree.iterator()
        >>> while it.has_next():
        ...     if it.next() % 2:
        ...         it.remove()
    """

    def __init__(self, root: NodeSlot[T]):
        """Start an iteration over everything below ``root``.

        Args:
            root: Slot whose subtree is traversed
        """
        self._stack = [_SubtreeCursor.capture(root)]
        self._lookahead: Optional[TernaryNode[T]] = None
        self._current: Optional[TernaryNode[T]] = None
        self._state = (
            IteratorState.EXHAUSTED if root.is_empty() else IteratorState.UNINITIALIZED
        )

    @property
    def state(self) -> IteratorState:
        return self._state

    def has_next(self) -> bool:
        """Return True if another value is available, buffering it."""
        if self._state is IteratorState.UNINITIALIZED:
            self._lookahead = _advance(self._stack)
            if self._lookahead is None:
                self._state = IteratorState.EXHAUSTED
            else:
                self._state = IteratorState.HAS_LOOKAHEAD
        return self._state is IteratorState.HAS_LOOKAHEAD

    def next(self) -> Optional[T]:
        """Return the next value, or None once the traversal is exhausted.

        None can never be a stored value, so it unambiguously marks the end.
        """
        if not self.has_next():
            self._current = None
            return None

        self._current = self._lookahead
        self._lookahead = None
        self._state = IteratorState.UNINITIALIZED
        return self._current.value

    def remove(self) -> None:
        """Remove the element most recently returned by next().

        The exact occurrence returned is removed, not an arbitrary equal
        value.

        Raises:
            IteratorStateError: If next() has not returned a value since the
                last remove(), or the element already left the tree
        """
        node = self._current
        if node is None:
            raise IteratorStateError("remove() requires a preceding next() that returned a value")
        self._current = None
        if not node.is_attached:
            raise IteratorStateError(f"Element {node.value!r} is no longer in the tree")

        node.remove()
        logger.debug("Iterator removed %r", node.value)

        self._removed(node.value)

    def _removed(self, value: T) -> None:
        """Hook called after remove() detaches a value; no-op here."""

    def __iter__(self) -> "InOrderIterator[T]":
        return self

    def __next__(self) -> T:
        if not self.has_next():
            self._current = None
            raise StopIteration
        return self.next()
