"""
GraphAlchemy Core Module

This module provides the graph data structure, its node and edge models,
and the algorithms operating over them.
"""

from graphalchemy.core.config import GraphConfig
from graphalchemy.core.counter import Counter
from graphalchemy.core.exceptions import GraphError, NegativeCycleError
from graphalchemy.core.graph import Graph
from graphalchemy.core.graph_edge import GraphEdge
from graphalchemy.core.graph_node import GraphNode
from graphalchemy.core.node_index import NodeIndex
from graphalchemy.core.path import Path

__all__ = [
    "Graph",
    "GraphConfig",
    "GraphNode",
    "GraphEdge",
    "NodeIndex",
    "Path",
    "Counter",
    "GraphError",
    "NegativeCycleError",
]
