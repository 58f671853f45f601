"""Structural traversal strategies for TernaryTreeLib.

These traversers walk the *nodes* of a tree, not its values in sorted
order (use InOrderIterator for that). They report where each node sits,
which is what statistics and shape inspection need.

Any node-like object with ``children()`` and ``is_leaf()`` can be walked:
TernaryNode internally, NodeView from TernaryTree.root otherwise.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Deque, Iterator, NamedTuple, Optional, Tuple

from .node import Branch


class NodeVisit(NamedTuple):
    """A node together with its position below the traversal root."""
    node: Any
    depth: int
    path: Tuple[Branch, ...]

    @property
    def branch(self) -> Optional[Branch]:
        """Branch the node hangs from, or None for the traversal root."""
        return self.path[-1] if self.path else None


class NodeTraverser(ABC):
    """Abstract base class for structural traversal strategies."""

    @abstractmethod
    def traverse(self,
                 root: Optional[Any],
                 max_depth: Optional[int] = None) -> Iterator[NodeVisit]:
        """Traverse every node below ``root``.

        Args:
            root: Node to start from (None yields nothing)
            max_depth: Maximum depth to traverse (None = unlimited)

        Yields:
            NodeVisit records; the root node has depth 0 and an empty path
        """
        pass

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class BreadthFirstTraverser(NodeTraverser):
    """Visits all nodes at depth N before any node at depth N+1."""

    def traverse(self,
                 root: Optional[Any],
                 max_depth: Optional[int] = None) -> Iterator[NodeVisit]:
        if root is None:
            return

        queue: Deque[NodeVisit] = deque([NodeVisit(root, 0, ())])
        while queue:
            visit = queue.popleft()
            yield visit

            if self._should_explore(visit.depth, max_depth):
                for branch, child in visit.node.children():
                    queue.append(NodeVisit(child, visit.depth + 1, visit.path + (branch,)))


class DepthFirstPreOrderTraverser(NodeTraverser):
    """Visits a node, then its less, equal and greater subtrees.

    Uses an explicit stack so skewed trees do not hit the recursion limit.
    """

    def traverse(self,
                 root: Optional[Any],
                 max_depth: Optional[int] = None) -> Iterator[NodeVisit]:
        if root is None:
            return

        stack = [NodeVisit(root, 0, ())]
        while stack:
            visit = stack.pop()
            yield visit

            if self._should_explore(visit.depth, max_depth):
                # Push in reverse so less is visited first
                for branch, child in reversed(list(visit.node.children())):
                    stack.append(NodeVisit(child, visit.depth + 1, visit.path + (branch,)))


def create_traverser(strategy: str) -> NodeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (bfs, dfs_pre)

    Returns:
        NodeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
        'dfs': DepthFirstPreOrderTraverser,
        'dfs_pre': DepthFirstPreOrderTraverser,
        'depth_first_pre': DepthFirstPreOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower]()
