"""
Exceptions raised by the graph engine.

Lookups and path searches report "not found" with ``None``; only conditions
that make an algorithm's result meaningless are raised.
"""


class GraphError(Exception):
    """Base class for graph engine errors."""


class NegativeCycleError(GraphError, RuntimeError):
    """The graph contains a negative weight cycle reachable from the start node."""

    def __init__(self, weight: str, node_id: int):
        self.weight = weight
        self.node_id = node_id
        super().__init__(
            f"Graph contains an infinite negative weight cycle "
            f"(weight '{weight}', relaxable edge into node {node_id})"
        )
