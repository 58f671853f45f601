"""TernaryNode for TernaryTreeLib.

A node holds one value and three child slots. Values comparing less than
the node's value live under ``less``, greater values under ``greater``, and
values comparing equal hang off ``equal`` in insertion order.

Nodes never point at their parent. Instead each node remembers the slot
that currently owns it; that slot is all self-removal needs, because the
removed node's subtrees are re-added straight back into it.
"""

import logging
from enum import Enum
from typing import Generic, Iterator, Optional, Tuple, TypeVar

from ..errors import DetachedNodeError
from ..ordering import Comparison, Ordering, compare
from .slot import NodeSlot

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Branch(Enum):
    """Child position of a node."""
    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"


class TernaryNode(Generic[T]):
    """A single value plus less/equal/greater child slots."""

    __slots__ = ("value", "ordering", "owner", "less", "equal", "greater")

    def __init__(self, value: T, ordering: Ordering):
        """Create a detached node with three empty child slots.

        Args:
            value: The stored value (never None)
            ordering: The owning tree's ordering
        """
        self.value = value
        self.ordering = ordering
        self.owner: Optional[NodeSlot[T]] = None
        self.less: NodeSlot[T] = NodeSlot()
        self.equal: NodeSlot[T] = NodeSlot()
        self.greater: NodeSlot[T] = NodeSlot()

    @property
    def is_attached(self) -> bool:
        """True while the owning slot still holds this node."""
        return self.owner is not None and self.owner.peek() is self

    def compare_to(self, value: T) -> Comparison:
        """Compare ``value`` against this node's value."""
        return compare(self.ordering, value, self.value)

    def slot_for(self, value: T) -> NodeSlot[T]:
        """Return the child slot a value comparing like ``value`` belongs in."""
        comparison = self.compare_to(value)
        if comparison is Comparison.LESS:
            return self.less
        if comparison is Comparison.GREATER:
            return self.greater
        return self.equal

    def children(self) -> Iterator[Tuple[Branch, "TernaryNode[T]"]]:
        """Yield (branch, child) pairs for occupied slots, in in-order position order."""
        for branch, slot in ((Branch.LESS, self.less),
                             (Branch.EQUAL, self.equal),
                             (Branch.GREATER, self.greater)):
            child = slot.peek()
            if child is not None:
                yield branch, child

    def is_leaf(self) -> bool:
        return self.less.is_empty() and self.equal.is_empty() and self.greater.is_empty()

    def add(self, node: "TernaryNode[T]") -> None:
        """Place ``node`` in the first empty slot along its comparison path.

        Loops rather than recursing, so deep, skewed trees do not exhaust
        the interpreter stack.
        """
        slot = self.slot_for(node.value)
        while not slot.is_empty():
            slot = slot.peek().slot_for(node.value)
        slot.add(node)

    def find(self, value: T) -> Optional["TernaryNode[T]"]:
        """Return the first node at or below this one comparing equal to ``value``.

        The first match is the head of its equal chain, i.e. the earliest
        inserted of the equal values still present.
        """
        node: Optional[TernaryNode[T]] = self
        while node is not None:
            comparison = node.compare_to(value)
            if comparison is Comparison.EQUAL:
                return node
            node = (node.less if comparison is Comparison.LESS else node.greater).peek()
        return None

    def delete(self, value: T) -> bool:
        """Delete the first node at or below this one equal to ``value``.

        Returns:
            True if a node was removed, False if no node matched
        """
        match = self.find(value)
        if match is None:
            return False
        match.remove()
        return True

    def remove(self) -> None:
        """Detach this node and re-add its subtrees into the vacated slot.

        Subtrees are re-added equal first, then less, then greater. Each is
        a full add through the vacated slot, so each lands wherever the
        ordering puts it relative to what the previous re-add left there.

        Raises:
            DetachedNodeError: If this node is not currently in a tree
        """
        if not self.is_attached:
            raise DetachedNodeError(f"Node {self.value!r} is not attached to a tree")

        previous_owner = self.owner
        equal_node = self.equal.peek()
        less_node = self.less.peek()
        greater_node = self.greater.peek()

        previous_owner.clear()

        for subtree in (equal_node, less_node, greater_node):
            if subtree is not None:
                previous_owner.add(subtree)

        logger.debug(
            "Removed node %r; re-added subtrees equal=%s less=%s greater=%s",
            self.value,
            equal_node is not None,
            less_node is not None,
            greater_node is not None,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self.value!r})"


class NodeView(Generic[T]):
    """Read-only view of a node, for inspecting tree shape.

    A view exposes the value and the occupied children, never the slots,
    so nothing reached through it can restructure the tree. Views are
    taken over the tree as it is now; after a mutation, ask the tree for
    its root again.
    """

    __slots__ = ("_node",)

    def __init__(self, node: TernaryNode[T]):
        self._node = node

    @property
    def value(self) -> T:
        return self._node.value

    def child(self, branch: Branch) -> Optional["NodeView[T]"]:
        """Return a view of the child on ``branch``, or None if that slot is empty."""
        node = getattr(self._node, branch.value).peek()
        return None if node is None else NodeView(node)

    @property
    def less(self) -> Optional["NodeView[T]"]:
        return self.child(Branch.LESS)

    @property
    def equal(self) -> Optional["NodeView[T]"]:
        return self.child(Branch.EQUAL)

    @property
    def greater(self) -> Optional["NodeView[T]"]:
        return self.child(Branch.GREATER)

    def children(self) -> Iterator[Tuple[Branch, "NodeView[T]"]]:
        for branch, child in self._node.children():
            yield branch, NodeView(child)

    def is_leaf(self) -> bool:
        return self._node.is_leaf()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodeView):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return id(self._node)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(value={self._node.value!r})"
