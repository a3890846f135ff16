# src/graphalchemy/__init__.py
r"""
GraphAlchemy - In-memory directed graphs for Python

GraphAlchemy provides a small directed graph engine with:
- Pydantic-validated nodes and edges with free-form property bags
- Cycle detection and topological sorting
- Depth-first and breadth-first path finding
- Weighted shortest paths with negative weights and cycle detection
- Dijkstra-style shortest paths over weight magnitudes

Example:
    ```python
    from graphalchemy import Graph

    graph = Graph(name="roads")

    berlin = graph.insert({"name": "Berlin"})
    leipzig = graph.insert({"name": "Leipzig"})
    munich = graph.insert({"name": "Munich"})

    berlin.attach(leipzig, {"km": 190})
    leipzig.attach(munich, {"km": 430})
    berlin.attach(munich, {"km": 700})

    path = graph.find_shortest_weighted_path(berlin, munich, "km")
    print(path.ids(), path.weight("km"))  # [1, 2, 3] 620
    ```
"""

from graphalchemy.core.config import GraphConfig
from graphalchemy.core.counter import Counter
from graphalchemy.core.exceptions import GraphError, NegativeCycleError
from graphalchemy.core.graph import Graph
from graphalchemy.core.graph_edge import GraphEdge
from graphalchemy.core.graph_node import GraphNode
from graphalchemy.core.node_index import NodeIndex
from graphalchemy.core.path import Path

__version__ = "0.1.0"

__all__ = [
    # Core classes
    "Graph",
    "GraphConfig",
    "GraphNode",
    "GraphEdge",
    "NodeIndex",
    "Path",
    "Counter",

    # Errors
    "GraphError",
    "NegativeCycleError",

    # Version
    "__version__",
]
