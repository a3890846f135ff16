from typing import Dict, Iterable, Iterator, List, Optional

from graphalchemy.core.graph_node import GraphNode


class NodeIndex:
    """
    Owning map from node identifier to node.

    Iteration yields nodes in insertion order.
    """

    def __init__(self):
        self._nodes: Dict[int, GraphNode] = {}

    def put(self, node: GraphNode) -> None:
        """Store a node under its own identifier."""
        if node.id in self._nodes:
            raise ValueError(f"Node {node.id} already exists")
        self._nodes[node.id] = node

    def get(self, node_id: int) -> Optional[GraphNode]:
        """Get a node by ID."""
        return self._nodes.get(node_id)

    def mget(self, node_ids: Iterable[int]) -> List[GraphNode]:
        """Get many nodes by ID. Unknown ids are skipped."""
        return [self._nodes[i] for i in node_ids if i in self._nodes]

    def remove(self, node_id: int) -> Optional[GraphNode]:
        """Remove a node and return it, or None if absent."""
        return self._nodes.pop(node_id, None)

    def ids(self) -> List[int]:
        return list(self._nodes.keys())

    def all(self) -> List[GraphNode]:
        return list(self._nodes.values())

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: int) -> bool:
        return node_id in self._nodes

    def __iter__(self) -> Iterator[GraphNode]:
        return iter(self._nodes.values())
