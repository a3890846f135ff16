from pydantic import BaseModel, Field, field_validator, ConfigDict
from typing import Dict, Any, List, Optional, Union

from graphalchemy.core.graph_edge import GraphEdge


class GraphNode(BaseModel):
    """
    Represents a node in the graph with properties and outgoing edges.

    Outgoing edges are keyed by the identifier of their target, so a node
    holds at most one edge per target. Attaching a second edge to the same
    target replaces the first.
    """

    id: int = Field(..., ge=0, frozen=True, description="Unique node identifier")
    properties: Dict[str, Any] = Field(
        default_factory=dict,
        description="Node properties and data"
    )
    edges: Dict[int, GraphEdge] = Field(
        default_factory=dict,
        description="Outgoing edges keyed by target node id"
    )

    model_config = ConfigDict(
        # Validate on assignment
        validate_assignment=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "properties": {
                    "name": "Berlin",
                    "population": 3645000
                },
                "edges": {}
            }
        }
    )

    @field_validator('properties')
    @classmethod
    def validate_properties(cls, v):
        """Validate properties dictionary."""
        if v is None:
            return {}

        # Ensure all keys are strings
        if not all(isinstance(k, str) for k in v.keys()):
            raise ValueError("All property keys must be strings")

        return v

    # =============================================================================
    # EDGES
    # =============================================================================

    def attach(
        self,
        target: "GraphNode",
        properties: Optional[Dict[str, Any]] = None
    ) -> GraphEdge:
        """
        Create a directed edge from this node to ``target``.

        Args:
            target: Node the edge points to
            properties: Edge properties (weights etc.)

        Returns:
            The new edge. Any previous edge to the same target is replaced.
        """
        if not isinstance(target, GraphNode):
            raise TypeError(f"Edge target must be a GraphNode, got {type(target).__name__}")

        edge = GraphEdge(target_id=target.id, properties=properties or {})
        self.edges[target.id] = edge
        return edge

    def detach(self, target: Union["GraphNode", int]) -> Optional[GraphEdge]:
        """
        Remove the edge pointing at ``target``.

        Args:
            target: Target node or its identifier

        Returns:
            Removed edge or None if there was no such edge
        """
        return self.edges.pop(_target_id(target), None)

    def edge(self, target: Union["GraphNode", int]) -> Optional[GraphEdge]:
        """Get the edge pointing at ``target``, if any."""
        return self.edges.get(_target_id(target))

    def has_edge(self, target: Union["GraphNode", int]) -> bool:
        """Check if an edge to ``target`` exists."""
        return _target_id(target) in self.edges

    def targets(self) -> List[int]:
        """Target ids in edge insertion order."""
        return list(self.edges.keys())

    @property
    def degree(self) -> int:
        """Number of outgoing edges."""
        return len(self.edges)

    def is_same(self, other: Optional["GraphNode"]) -> bool:
        return other is not None and self.id == other.id

    # =============================================================================
    # PROPERTIES
    # =============================================================================

    def update_properties(self, new_properties: Dict[str, Any]) -> None:
        """
        Update node properties.

        Args:
            new_properties: Properties to update/add
        """
        self.properties.update(new_properties)

    def get_property(self, key: str, default: Any = None) -> Any:
        """
        Get a specific property value.

        Args:
            key: Property key to retrieve
            default: Default value if key not found

        Returns:
            Property value or default
        """
        return self.properties.get(key, default)

    def set_property(self, key: str, value: Any) -> None:
        """
        Set a single property value.

        Args:
            key: Property key
            value: Property value
        """
        self.properties[key] = value

    def remove_property(self, key: str) -> Any:
        """
        Remove a property and return its value.

        Args:
            key: Property key to remove

        Returns:
            Removed property value or None
        """
        return self.properties.pop(key, None)

    @property
    def property_count(self) -> int:
        """Get number of properties."""
        return len(self.properties)

    def has_property(self, key: str) -> bool:
        """Check if property exists."""
        return key in self.properties


def _target_id(target: Union[GraphNode, int]) -> int:
    return target.id if isinstance(target, GraphNode) else target
