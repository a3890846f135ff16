from pydantic import BaseModel, Field, field_validator, ConfigDict
from typing import Dict, Any


class GraphEdge(BaseModel):
    """
    Represents a directed edge pointing at a target node.

    The edge stores the target's identifier rather than the node itself;
    the graph's node index owns every node and resolves identifiers.
    """

    target_id: int = Field(
        ...,
        ge=0,
        frozen=True,
        description="Identifier of the node this edge points to"
    )
    properties: Dict[str, Any] = Field(
        default_factory=dict,
        description="Edge properties, e.g. weights under named keys"
    )

    model_config = ConfigDict(
        validate_assignment=True,
        json_schema_extra={
            "example": {
                "target_id": 2,
                "properties": {
                    "distance": 4.5,
                    "cost": 12
                }
            }
        }
    )

    @field_validator('properties')
    @classmethod
    def validate_properties(cls, v):
        """Validate properties dictionary."""
        if v is None:
            return {}

        if not all(isinstance(k, str) for k in v.keys()):
            raise ValueError("All property keys must be strings")

        return v

    def weight(self, key: str, default: Any) -> Any:
        """
        Read a weight stored under ``key``.

        Args:
            key: Property key holding the weight
            default: Value used when the edge has no such property

        Returns:
            The stored weight or ``default``
        """
        return self.properties.get(key, default)

    def update_properties(self, new_properties: Dict[str, Any]) -> None:
        """Update edge properties."""
        self.properties.update(new_properties)

    def get_property(self, key: str, default: Any = None) -> Any:
        """Get a specific property value."""
        return self.properties.get(key, default)

    def set_property(self, key: str, value: Any) -> None:
        """Set a single property value."""
        self.properties[key] = value

    def remove_property(self, key: str) -> Any:
        """Remove a property and return its value, or None if absent."""
        return self.properties.pop(key, None)

    def has_property(self, key: str) -> bool:
        return key in self.properties

    @property
    def property_count(self) -> int:
        """Get number of properties."""
        return len(self.properties)
