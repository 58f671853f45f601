"""NodeSlot abstraction for TernaryTreeLib.

A slot is a possibly-empty owning reference to a TernaryNode. Every child
position in the tree, and the root itself, is a slot. Keeping the empty
case inside the slot means node code never checks for missing children,
and it lets deletion rebuild a subtree in place without knowing the parent:
the vacated slot is simply cleared and refilled.
"""

from typing import TYPE_CHECKING, Generic, Optional, TypeVar

if TYPE_CHECKING:
    from .node import TernaryNode

T = TypeVar("T")


class NodeSlot(Generic[T]):
    """Holds zero or one TernaryNode."""

    __slots__ = ("_node",)

    def __init__(self) -> None:
        self._node: Optional["TernaryNode[T]"] = None

    def peek(self) -> Optional["TernaryNode[T]"]:
        """Return the contained node, or None if the slot is empty."""
        return self._node

    def is_empty(self) -> bool:
        return self._node is None

    def add(self, node: "TernaryNode[T]") -> None:
        """Place ``node`` (and whatever subtree it carries) below this slot.

        An empty slot takes ownership directly; an occupied slot hands the
        node to the node it holds, which routes it by comparison.

        Args:
            node: Node to place; its own children are kept as they are
        """
        if self._node is None:
            self._node = node
            node.owner = self
        else:
            self._node.add(node)

    def delete(self, value: T) -> bool:
        """Remove the first node below this slot comparing equal to ``value``.

        Args:
            value: Value to delete

        Returns:
            True if a node was found and removed, False otherwise
        """
        if self._node is None:
            return False
        return self._node.delete(value)

    def clear(self) -> None:
        """Empty the slot, detaching the node it held.

        Callers must capture anything they need from the node first.
        """
        node = self._node
        self._node = None
        if node is not None and node.owner is self:
            node.owner = None

    def __repr__(self) -> str:
        if self._node is None:
            return "NodeSlot(empty)"
        return f"NodeSlot({self._node.value!r})"
