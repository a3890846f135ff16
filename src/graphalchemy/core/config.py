from pydantic import BaseModel, Field, ConfigDict
from typing import Literal


class GraphConfig(BaseModel):
    """
    Behavioral switches for a Graph.

    Passed to ``Graph(config=...)`` or given as keyword overrides,
    e.g. ``Graph(cycle_detection="discovered")``.
    """

    cycle_detection: Literal["ancestor", "discovered"] = Field(
        default="ancestor",
        description=(
            "'ancestor' reports a cycle only for an edge back into the current "
            "DFS branch; 'discovered' reports any node reached twice from the "
            "same root, which also flags diamonds"
        )
    )
    skip_settled: bool = Field(
        default=True,
        description="Skip frontier entries for nodes already settled in unsigned weighted search"
    )
    first_id: int = Field(
        default=1,
        ge=0,
        description="First identifier handed out by the graph's counter"
    )

    model_config = ConfigDict(
        validate_assignment=True,
        extra="forbid",
    )
