"""Test fixtures for TernaryTreeLib consumers.

These fixtures provide controlled access to tree shape for testing
purposes without making node and slot navigation part of the everyday
TernaryTree API.
"""

from typing import Any, List, Optional, Set, Tuple

from ..core.node import Branch, TernaryNode
from ..core.traversal import DepthFirstPreOrderTraverser
from ..ordering import Comparison
from ..tree import TernaryTree


def format_path(path: Tuple[Branch, ...]) -> str:
    """Render a branch path as a dotted string ("" for the root)."""
    return ".".join(branch.value for branch in path)


def parse_path(path: str) -> Tuple[Branch, ...]:
    """Parse a dotted path such as "less.equal" into branches.

    Raises:
        ValueError: If a segment is not less, equal or greater
    """
    if not path:
        return ()
    try:
        return tuple(Branch(segment) for segment in path.split("."))
    except ValueError:
        raise ValueError(
            f"Invalid path {path!r}: segments must be less, equal or greater"
        ) from None


class TreeShapeHelper:
    """Public test fixture for verifying tree shape.

    Example:
        tree = TernaryTree.create()
        tree.extend([5, 4, 9])
        shape = TreeShapeHelper(tree)

        assert shape.value_at("less") == 4
        assert shape.occupied_paths() == {"", "less", "greater"}
        assert shape.check_invariants() == []
    """

    def __init__(self, tree: TernaryTree):
        """Initialize with the tree to inspect.

        Args:
            tree: The TernaryTree under test
        """
        self._tree = tree

    def _root_node(self) -> Optional[TernaryNode]:
        return self._tree._root.peek()

    def node_at(self, path: str) -> Optional[TernaryNode]:
        """Return the node at a dotted path, or None if that slot is empty."""
        slot = self._tree._root
        for branch in parse_path(path):
            node = slot.peek()
            if node is None:
                return None
            slot = getattr(node, branch.value)
        return slot.peek()

    def value_at(self, path: str) -> Any:
        """Return the value at a dotted path, or None if that slot is empty."""
        node = self.node_at(path)
        return None if node is None else node.value

    def is_empty_at(self, path: str) -> bool:
        return self.node_at(path) is None

    def occupied_paths(self) -> Set[str]:
        """Return the dotted path of every occupied slot."""
        return {
            format_path(visit.path)
            for visit in DepthFirstPreOrderTraverser().traverse(self._root_node())
        }

    def shape(self) -> Optional[tuple]:
        """Return the tree as nested ``(value, less, equal, greater)`` tuples.

        Empty slots are None. Recursive, so intended for small trees.
        """
        def _shape(node: Optional[TernaryNode]) -> Optional[tuple]:
            if node is None:
                return None
            return (
                node.value,
                _shape(node.less.peek()),
                _shape(node.equal.peek()),
                _shape(node.greater.peek()),
            )

        return _shape(self._root_node())

    def check_invariants(self) -> List[str]:
        """Check ordering, ownership and size invariants.

        Every node is compared against each of its ancestors, so this is
        quadratic in tree height.

        Returns:
            List of violations (empty if the tree is well formed)
        """
        violations = []
        expected = {
            Branch.LESS: Comparison.LESS,
            Branch.EQUAL: Comparison.EQUAL,
            Branch.GREATER: Comparison.GREATER,
        }
        # Nodes on the path from the root to the current visit, by depth
        ancestors: List[TernaryNode] = []
        count = 0

        for visit in DepthFirstPreOrderTraverser().traverse(self._root_node()):
            count += 1
            node = visit.node
            where = format_path(visit.path) or "<root>"
            del ancestors[visit.depth:]

            if node.value is None:
                violations.append(f"{where}: stores None")
            if not node.is_attached:
                violations.append(f"{where}: owner slot does not hold this node")
            if node.ordering is not self._tree.ordering:
                violations.append(f"{where}: node ordering differs from tree ordering")

            for ancestor, branch in zip(ancestors, visit.path):
                actual = ancestor.compare_to(node.value)
                if actual is not expected[branch]:
                    violations.append(
                        f"{where}: {node.value!r} compares {actual.name} to ancestor "
                        f"{ancestor.value!r} but sits on its {branch.value} side"
                    )

            ancestors.append(node)

        if count != len(self._tree):
            violations.append(f"tree reports {len(self._tree)} values but holds {count}")

        return violations
