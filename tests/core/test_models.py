"""
Tests for the building blocks of the graph: nodes, edges, the node index,
paths and the identifier counter.
"""

import json
import pytest
from pydantic import ValidationError

from graphalchemy.core.counter import Counter
from graphalchemy.core.graph_edge import GraphEdge
from graphalchemy.core.graph_node import GraphNode
from graphalchemy.core.node_index import NodeIndex
from graphalchemy.core.path import Path


class TestGraphNode:
    """Test the Pydantic GraphNode model."""

    def test_node_creation(self):
        """Test basic node creation."""
        node = GraphNode(id=1)

        assert node.id == 1
        assert node.properties == {}
        assert node.edges == {}
        assert node.degree == 0

    def test_node_with_properties(self):
        """Test node creation with properties."""
        properties = {"name": "Alice", "age": 30}
        node = GraphNode(id=1, properties=properties)

        assert node.properties == properties
        assert node.get_property("name") == "Alice"
        assert node.get_property("missing", "default") == "default"

    def test_node_validation_errors(self):
        """Test validation errors."""
        # Negative ids are rejected
        with pytest.raises(ValidationError):
            GraphNode(id=-1)

        # Non-string property keys should raise error
        with pytest.raises(ValidationError):
            GraphNode(id=1, properties={123: "value"})

    def test_node_id_is_frozen(self):
        """The identifier cannot change after creation."""
        node = GraphNode(id=1)

        with pytest.raises(ValidationError):
            node.id = 2

        assert node.id == 1

    def test_node_property_operations(self):
        """Test property manipulation methods."""
        node = GraphNode(id=1)

        node.set_property("name", "Alice")
        assert node.get_property("name") == "Alice"
        assert node.property_count == 1
        assert node.has_property("name")
        assert not node.has_property("missing")

        node.update_properties({"age": 30})
        assert node.properties == {"name": "Alice", "age": 30}

        assert node.remove_property("name") == "Alice"
        assert not node.has_property("name")
        assert node.remove_property("missing") is None

    def test_attach(self):
        """Test attaching edges to other nodes."""
        a = GraphNode(id=1)
        b = GraphNode(id=2)

        edge = a.attach(b, {"weight": 3})

        assert isinstance(edge, GraphEdge)
        assert edge.target_id == b.id
        assert a.has_edge(b)
        assert a.has_edge(b.id)
        assert a.edge(b) is edge
        assert a.targets() == [b.id]

        # Edges are directed
        assert not b.has_edge(a)

    def test_attach_overwrites(self):
        """A second edge to the same target replaces the first."""
        a = GraphNode(id=1)
        b = GraphNode(id=2)

        a.attach(b, {"weight": 3})
        a.attach(b, {"weight": 7})

        assert a.degree == 1
        assert a.edge(b).weight("weight", 0) == 7

    def test_attach_requires_node(self):
        a = GraphNode(id=1)

        with pytest.raises(TypeError):
            a.attach(2)

    def test_detach(self):
        """Test removing edges by node or by id."""
        a = GraphNode(id=1)
        b = GraphNode(id=2)
        c = GraphNode(id=3)
        a.attach(b)
        a.attach(c)

        removed = a.detach(b)
        assert removed.target_id == b.id
        assert a.detach(c.id) is not None
        assert a.detach(b) is None
        assert a.degree == 0

    def test_self_loop(self):
        node = GraphNode(id=1)
        node.attach(node)

        assert node.has_edge(node)
        assert node.targets() == [1]

    def test_is_same(self):
        a = GraphNode(id=1)

        assert a.is_same(a)
        assert a.is_same(GraphNode(id=1))
        assert not a.is_same(GraphNode(id=2))
        assert not a.is_same(None)

    def test_node_serialization(self):
        """Test Pydantic serialization methods."""
        a = GraphNode(id=1, properties={"name": "A"})
        a.attach(GraphNode(id=2), {"weight": 1.5})

        data = a.model_dump()
        assert data["id"] == 1
        assert data["edges"][2]["target_id"] == 2

        parsed = json.loads(a.model_dump_json())
        assert parsed["properties"]["name"] == "A"
        assert parsed["edges"]["2"]["properties"]["weight"] == 1.5


class TestGraphEdge:
    """Test the Pydantic GraphEdge model."""

    def test_edge_creation(self):
        edge = GraphEdge(target_id=4)

        assert edge.target_id == 4
        assert edge.properties == {}
        assert edge.property_count == 0

    def test_weight(self):
        """Weights come from properties, falling back to the default."""
        edge = GraphEdge(target_id=4, properties={"km": 12.5})

        assert edge.weight("km", 0) == 12.5
        assert edge.weight("minutes", 60) == 60

    def test_edge_property_operations(self):
        edge = GraphEdge(target_id=4)

        edge.set_property("km", 3)
        assert edge.get_property("km") == 3
        assert edge.has_property("km")

        edge.update_properties({"toll": True})
        assert edge.property_count == 2

        assert edge.remove_property("km") == 3
        assert edge.remove_property("km") is None

    def test_edge_validation_errors(self):
        with pytest.raises(ValidationError):
            GraphEdge(target_id=1, properties={1: "value"})

        with pytest.raises(ValidationError):
            GraphEdge(target_id=-3)

        edge = GraphEdge(target_id=1)
        with pytest.raises(ValidationError):
            edge.target_id = 2

    def test_edge_schema_generation(self):
        schema = GraphEdge.model_json_schema()

        assert "target_id" in schema["properties"]
        assert schema["properties"]["target_id"]["type"] == "integer"


class TestNodeIndex:
    """Test the identifier to node mapping."""

    def test_put_and_get(self):
        index = NodeIndex()
        node = GraphNode(id=1)

        index.put(node)

        assert index.get(1) is node
        assert index.get(2) is None
        assert 1 in index
        assert len(index) == 1

    def test_put_duplicate(self):
        """Two live nodes never share an identifier."""
        index = NodeIndex()
        index.put(GraphNode(id=1))

        with pytest.raises(ValueError, match="Node 1 already exists"):
            index.put(GraphNode(id=1))

    def test_mget(self):
        index = NodeIndex()
        nodes = [GraphNode(id=i) for i in range(1, 4)]
        for node in nodes:
            index.put(node)

        found = index.mget([3, 7, 1])

        assert [n.id for n in found] == [3, 1]

    def test_remove(self):
        index = NodeIndex()
        node = GraphNode(id=1)
        index.put(node)

        assert index.remove(1) is node
        assert index.remove(1) is None
        assert len(index) == 0

    def test_iteration_order(self):
        index = NodeIndex()
        for i in (5, 2, 9):
            index.put(GraphNode(id=i))

        assert [n.id for n in index] == [5, 2, 9]
        assert index.ids() == [5, 2, 9]
        assert [n.id for n in index.all()] == [5, 2, 9]


class TestPath:
    """Test the Path container."""

    def test_empty_path(self):
        path = Path()

        assert path.is_empty()
        assert not path
        assert len(path) == 0
        assert path.length == 0
        assert path.first() is None
        assert path.last() is None
        assert path.weight("weight") == 0

    def test_prepend(self):
        """Nodes are added to the front."""
        a, b, c = GraphNode(id=1), GraphNode(id=2), GraphNode(id=3)
        path = Path()

        path.prepend(c).prepend(b).prepend(a)

        assert path.ids() == [1, 2, 3]
        assert path.first() is a
        assert path.last() is c
        assert path[1] is b
        assert list(path) == [a, b, c]
        assert path.nodes() == [a, b, c]
        assert len(path) == 3
        assert path.length == 2
        assert repr(path) == "Path(1 -> 2 -> 3)"

    def test_singleton(self):
        a = GraphNode(id=1)
        path = Path().prepend(a)

        assert path.first() is path.last() is a
        assert path.length == 0

    def test_weight(self):
        a, b, c = GraphNode(id=1), GraphNode(id=2), GraphNode(id=3)
        a.attach(b, {"cost": 4})
        b.attach(c)

        path = Path().prepend(c).prepend(b).prepend(a)

        assert path.weight("cost", default=1) == 5

    def test_weight_without_edge(self):
        """A path whose nodes are not connected has no weight."""
        a, b = GraphNode(id=1), GraphNode(id=2)
        path = Path().prepend(b).prepend(a)

        with pytest.raises(ValueError, match="no edge"):
            path.weight("cost")


class TestCounter:
    """Test the identifier counter."""

    def test_increasing(self):
        counter = Counter()

        values = [counter.next() for _ in range(5)]

        assert values == [1, 2, 3, 4, 5]
        assert counter.current == 5

    def test_custom_start(self):
        counter = Counter(start=0)

        assert counter.current == -1
        assert counter.next() == 0
        assert counter.next() == 1

    def test_counters_are_independent(self):
        first = Counter()
        second = Counter()

        first.next()
        first.next()

        assert second.next() == 1
