"""
GraphAlchemy Core Graph Implementation

This module contains the Graph class: an in-memory directed graph that owns
its nodes and provides cycle detection, path finding, weighted shortest
paths and topological sorting over them.
"""
from typing import (
    Dict,
    List,
    Set,
    Optional,
    Any,
    Tuple,
    Iterable,
    Iterator,
    Union,
)
from collections import deque
from datetime import datetime
import heapq
import itertools
import logging
import math
import uuid

from graphalchemy.core.config import GraphConfig
from graphalchemy.core.counter import Counter
from graphalchemy.core.exceptions import NegativeCycleError
from graphalchemy.core.graph_edge import GraphEdge
from graphalchemy.core.graph_node import GraphNode
from graphalchemy.core.node_index import NodeIndex
from graphalchemy.core.path import Path

logger = logging.getLogger(__name__)

# Node states for ancestor-based cycle detection
_IN_PROGRESS = 1
_DONE = 2


class Graph:
    """
    In-memory directed graph with traversal and shortest path algorithms.

    The graph owns every node through its node index. Edges live on their
    source node and point at targets by identifier.

    Not safe for concurrent mutation: the algorithms read the node index
    and edge collections across many steps and assume they stay stable.
    """

    def __init__(
        self,
        name: Optional[str] = None,
        config: Optional[GraphConfig] = None,
        **options: Any
    ):
        """
        Initialize empty graph.

        Args:
            name: Graph name, generated when omitted
            config: Behavioral configuration, defaults to ``GraphConfig()``
            **options: Overrides for individual ``GraphConfig`` fields
        """
        self.name = name or f"graph_{uuid.uuid4().hex[:8]}"
        self.created_at = datetime.now()

        base = config or GraphConfig()
        self.config = GraphConfig.model_validate({**base.model_dump(), **options})

        # Core storage
        self._counter = Counter(start=self.config.first_id)
        self._nodes = NodeIndex()

    @property
    def nodes(self) -> NodeIndex:
        return self._nodes

    @property
    def counter(self) -> Counter:
        return self._counter

    # =============================================================================
    # BASIC GRAPH OPERATIONS
    # =============================================================================

    def insert(self, properties: Optional[Dict[str, Any]] = None) -> GraphNode:
        """Insert a node with a fresh identifier. O(1)"""
        node = GraphNode(id=self._counter.next(), properties=properties or {})
        self._nodes.put(node)

        logger.debug(f"Inserted node {node.id} into {self.name}")
        return node

    def find(self, node_id: int) -> Optional[GraphNode]:
        """Find a node by identifier. O(1)"""
        return self._nodes.get(node_id)

    def find_many(self, node_ids: Iterable[int]) -> List[GraphNode]:
        """Find many nodes by identifier. Missing ids are silently dropped."""
        return self._nodes.mget(node_ids)

    def delete(self, node: GraphNode) -> "Graph":
        """
        Remove a node and every edge pointing at it. O(V)

        Args:
            node: Node to remove

        Returns:
            The graph itself, for chaining
        """
        if not self._owns(node):
            logger.warning(f"Node {node.id} is not part of {self.name}, nothing deleted")
            return self

        removed = 0
        for current in self._nodes:
            if current.detach(node.id) is not None:
                removed += 1

        self._nodes.remove(node.id)

        logger.debug(f"Deleted node {node.id} from {self.name} with {removed} incoming edges")
        return self

    # =============================================================================
    # GRAPH STATISTICS
    # =============================================================================

    def order(self) -> int:
        """The order of the graph, or the total number of nodes. O(1)"""
        return len(self._nodes)

    def size(self) -> int:
        """The size of the graph, or the total number of edges. O(V)"""
        return sum(node.degree for node in self._nodes)

    # =============================================================================
    # CYCLE DETECTION
    # =============================================================================

    def acyclic(self) -> bool:
        """Is the graph acyclic? O(V+E)"""
        return not self.cyclic()

    def cyclic(self) -> bool:
        """Does the graph contain at least one cycle?"""
        if self.config.cycle_detection == "discovered":
            found = self._cyclic_discovered()
        else:
            found = self._cyclic_ancestor()

        logger.debug(f"Cycle check ({self.config.cycle_detection}) on {self.name}: {found}")
        return found

    def _cyclic_ancestor(self) -> bool:
        """Three-state DFS: a cycle is an edge back into the current branch."""
        state: Dict[int, int] = {}

        for root in self._nodes:
            if root.id in state:
                continue

            state[root.id] = _IN_PROGRESS
            stack: List[Tuple[GraphNode, Iterator[GraphNode]]] = [(root, self._neighbors(root))]

            while stack:
                current, neighbors = stack[-1]

                for target in neighbors:
                    seen = state.get(target.id)

                    if seen == _IN_PROGRESS:
                        return True

                    if seen is None:
                        state[target.id] = _IN_PROGRESS
                        stack.append((target, self._neighbors(target)))
                        break
                else:
                    state[current.id] = _DONE
                    stack.pop()

        return False

    def _cyclic_discovered(self) -> bool:
        """
        Per-root discovered set: any node reached twice from one root counts.

        Also reports diamonds (two distinct routes to the same node) as cycles.
        """
        for root in self._nodes:
            discovered: Set[int] = set()
            stack = [root]

            while stack:
                current = stack.pop()

                for target in self._neighbors(current):
                    if target.id in discovered:
                        return True

                    discovered.add(target.id)
                    stack.append(target)

        return False

    # =============================================================================
    # PATH FINDING
    # =============================================================================

    def find_path(self, start: GraphNode, end: GraphNode) -> Optional[Path]:
        """
        Find a path between a start node and an end node using DFS. O(V+E)

        The path is not guaranteed to be the shortest.

        Returns:
            Path from start to end, or None if no path exists
        """
        if not (self._owns(start) and self._owns(end)):
            return None

        discovered: Dict[int, Optional[GraphNode]] = {start.id: None}
        stack = [start]

        while stack:
            current = stack.pop()

            if current.is_same(end):
                return self._backtrack(end, discovered)

            for target in self._neighbors(current):
                if target.id not in discovered:
                    discovered[target.id] = current
                    stack.append(target)

        logger.debug(f"No path from {start.id} to {end.id} in {self.name}")
        return None

    def find_shortest_path(self, start: GraphNode, end: GraphNode) -> Optional[Path]:
        """
        Find a path with the fewest edges using BFS. O(V+E)

        Returns:
            Path from start to end, or None if no path exists
        """
        if not (self._owns(start) and self._owns(end)):
            return None

        discovered: Dict[int, Optional[GraphNode]] = {start.id: None}
        queue = deque([start])

        while queue:
            current = queue.popleft()

            if current.is_same(end):
                return self._backtrack(end, discovered)

            for target in self._neighbors(current):
                if target.id not in discovered:
                    discovered[target.id] = current
                    queue.append(target)

        logger.debug(f"No path from {start.id} to {end.id} in {self.name}")
        return None

    def find_shortest_weighted_path(
        self,
        start: GraphNode,
        end: GraphNode,
        weight: str,
        default: Any = math.inf
    ) -> Optional[Path]:
        """
        Find a shortest weighted path, allowing negative weights. O(VE)

        Args:
            start: Start node
            end: End node
            weight: Edge property holding the weight
            default: Weight of an edge without the property

        Returns:
            Path from start to end, or None if end is unreachable

        Raises:
            NegativeCycleError: If a negative weight cycle is reachable from start
        """
        if not (self._owns(start) and self._owns(end)):
            return None

        distances: Dict[int, float] = {node.id: math.inf for node in self._nodes}
        parents: Dict[int, Optional[GraphNode]] = {node.id: None for node in self._nodes}
        distances[start.id] = 0

        for _ in range(len(self._nodes) - 1):
            changed = False

            for current in self._nodes:
                if distances[current.id] == math.inf:
                    continue

                for edge, target in self._adjacent(current):
                    distance = distances[current.id] + edge.weight(weight, default)

                    if distance < distances[target.id]:
                        distances[target.id] = distance
                        parents[target.id] = current
                        changed = True

            if not changed:
                break

        for current in self._nodes:
            if distances[current.id] == math.inf:
                continue

            for edge, target in self._adjacent(current):
                if distances[current.id] + edge.weight(weight, default) < distances[target.id]:
                    logger.warning(f"Negative weight cycle on '{weight}' detected in {self.name}")
                    raise NegativeCycleError(weight, target.id)

        path = self._backtrack(end, parents)

        if path.first().is_same(start):
            return path

        logger.debug(f"No weighted path from {start.id} to {end.id} in {self.name}")
        return None

    def find_shortest_unsigned_weighted_path(
        self,
        start: GraphNode,
        end: GraphNode,
        weight: str,
        default: Any = math.inf
    ) -> Optional[Path]:
        """
        Find a shortest path over weight magnitudes. O((V+E)logV)

        The absolute value of each weight is used, so results on graphs with
        negative weights differ from ``find_shortest_weighted_path``.

        Args:
            start: Start node
            end: End node
            weight: Edge property holding the weight
            default: Weight of an edge without the property

        Returns:
            Path from start to end, or None if end is unreachable
        """
        if not (self._owns(start) and self._owns(end)):
            return None

        distances: Dict[int, float] = {node.id: math.inf for node in self._nodes}
        parents: Dict[int, Optional[GraphNode]] = {node.id: None for node in self._nodes}
        distances[start.id] = 0

        # Counter breaks ties so equal distances pop in insertion order
        sequence = itertools.count()
        frontier: List[Tuple[float, int, GraphNode]] = [(0, next(sequence), start)]
        settled: Set[int] = set()

        while frontier:
            _, _, current = heapq.heappop(frontier)

            if current.is_same(end):
                return self._backtrack(end, parents)

            if self.config.skip_settled:
                if current.id in settled:
                    continue
                settled.add(current.id)

            for edge, target in self._adjacent(current):
                distance = distances[current.id] + abs(edge.weight(weight, default))

                if distance < distances[target.id]:
                    distances[target.id] = distance
                    parents[target.id] = current
                    heapq.heappush(frontier, (distance, next(sequence), target))

        logger.debug(f"No unsigned weighted path from {start.id} to {end.id} in {self.name}")
        return None

    # =============================================================================
    # ORDERING
    # =============================================================================

    def sort(self) -> Path:
        """
        Topologically sort the graph. O(V+E)

        The result is only meaningful for an acyclic graph; no check is
        performed here.
        """
        discovered: Set[int] = set()
        emitted: Set[int] = set()
        stack: List[GraphNode] = list(self._nodes)
        path = Path()

        while stack:
            current = stack.pop()

            if current.id not in discovered:
                discovered.add(current.id)
                stack.append(current)
                stack.extend(self._neighbors(current))
            elif current.id not in emitted:
                emitted.add(current.id)
                path.prepend(current)

        return path

    # =============================================================================
    # UTILITIES
    # =============================================================================

    def _owns(self, node: GraphNode) -> bool:
        """Check the node is the one stored under its id in this graph."""
        return self._nodes.get(node.id) is node

    def _adjacent(self, node: GraphNode) -> Iterator[Tuple[GraphEdge, GraphNode]]:
        """Outgoing edges paired with their target nodes."""
        for target_id, edge in node.edges.items():
            target = self._nodes.get(target_id)
            if target is not None:
                yield edge, target

    def _neighbors(self, node: GraphNode) -> Iterator[GraphNode]:
        for _, target in self._adjacent(node):
            yield target

    def _backtrack(
        self,
        end: GraphNode,
        parents: Dict[int, Optional[GraphNode]]
    ) -> Path:
        """Rebuild a path by following parent links back from ``end``."""
        path = Path()
        current: Optional[GraphNode] = end

        while current is not None:
            path.prepend(current)
            current = parents.get(current.id)

        return path

    def __len__(self) -> int:
        """Return number of nodes."""
        return len(self._nodes)

    def __contains__(self, item: Union[GraphNode, int]) -> bool:
        """Check if a node (or node id) is in the graph."""
        if isinstance(item, GraphNode):
            return self._owns(item)
        return item in self._nodes

    def __iter__(self) -> Iterator[GraphNode]:
        """Iterate over nodes in insertion order."""
        return iter(self._nodes)

    def __repr__(self) -> str:
        """String representation of graph."""
        return f"Graph(name='{self.name}', order={self.order()}, size={self.size()})"
