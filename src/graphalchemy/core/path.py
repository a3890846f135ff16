"""
Path container returned by the graph's path-finding algorithms.
"""
from collections import deque
from typing import Any, Deque, Iterator, List, Optional

from graphalchemy.core.graph_node import GraphNode


class Path:
    """
    Ordered sequence of nodes from start to end.

    Paths are built backwards from the end node while following parent
    links, so the only mutation offered is ``prepend``.
    """

    def __init__(self):
        self._nodes: Deque[GraphNode] = deque()

    def prepend(self, node: GraphNode) -> "Path":
        """Insert a node at the front of the path."""
        self._nodes.appendleft(node)
        return self

    def first(self) -> Optional[GraphNode]:
        """First node, or None for an empty path."""
        return self._nodes[0] if self._nodes else None

    def last(self) -> Optional[GraphNode]:
        """Last node, or None for an empty path."""
        return self._nodes[-1] if self._nodes else None

    def nodes(self) -> List[GraphNode]:
        return list(self._nodes)

    def ids(self) -> List[int]:
        """Node identifiers in path order."""
        return [node.id for node in self._nodes]

    def is_empty(self) -> bool:
        return not self._nodes

    @property
    def length(self) -> int:
        """Number of edges traversed."""
        return max(len(self._nodes) - 1, 0)

    def weight(self, key: str, default: Any = 0) -> Any:
        """
        Sum the weights of the edges along the path.

        Args:
            key: Edge property holding the weight
            default: Weight used for an edge without the property

        Returns:
            Total weight, 0 for empty and single-node paths
        """
        total = 0
        nodes = list(self._nodes)

        for current, following in zip(nodes, nodes[1:]):
            edge = current.edge(following)
            if edge is None:
                raise ValueError(f"Node {current.id} has no edge to node {following.id}")
            total += edge.weight(key, default)

        return total

    def __len__(self) -> int:
        return len(self._nodes)

    def __bool__(self) -> bool:
        return bool(self._nodes)

    def __iter__(self) -> Iterator[GraphNode]:
        return iter(self._nodes)

    def __getitem__(self, index: int) -> GraphNode:
        return self._nodes[index]

    def __repr__(self) -> str:
        return f"Path({' -> '.join(str(i) for i in self.ids())})"
