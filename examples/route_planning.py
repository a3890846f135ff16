"""
Example demonstrating GraphAlchemy path finding on a small road network.

Builds a handful of cities, connects them with one-way roads carrying
distance and toll properties, then compares the different search strategies.
"""
import logging

from graphalchemy import Graph, NegativeCycleError


def build_network() -> Graph:
    """Create the sample road network."""
    graph = Graph(name="roads")

    cities = {
        name: graph.insert({"name": name})
        for name in ["Hamburg", "Berlin", "Hanover", "Leipzig", "Munich"]
    }

    roads = [
        ("Hamburg", "Berlin", 290, 0),
        ("Hamburg", "Hanover", 150, 5),
        ("Berlin", "Leipzig", 190, 0),
        ("Hanover", "Leipzig", 260, 0),
        ("Leipzig", "Munich", 430, 10),
        ("Hanover", "Munich", 630, 0),
    ]

    for source, target, km, toll in roads:
        cities[source].attach(cities[target], {"km": km, "toll": toll})

    return graph


def names(path) -> str:
    return " -> ".join(node.get_property("name") for node in path)


def demonstrate_routes():
    """Show the different search strategies side by side."""

    print("=== GraphAlchemy Route Planning Demo ===\n")

    graph = build_network()
    hamburg = graph.find(1)
    munich = graph.find(5)

    print(f"Network: {graph.order()} cities, {graph.size()} roads")
    print(f"Acyclic: {graph.acyclic()}")

    # 1. Any route, then the one with fewest roads
    print("\n1. Unweighted search:")
    print(f"Depth-first:   {names(graph.find_path(hamburg, munich))}")
    print(f"Breadth-first: {names(graph.find_shortest_path(hamburg, munich))}")

    # 2. Shortest by distance
    print("\n2. Weighted search:")
    path = graph.find_shortest_unsigned_weighted_path(hamburg, munich, "km")
    print(f"By distance: {names(path)} ({path.weight('km')} km)")

    path = graph.find_shortest_weighted_path(hamburg, munich, "toll", default=0)
    print(f"By toll:     {names(path)} ({path.weight('toll')} EUR)")

    # 3. Topological order of the one-way network
    print("\n3. Topological order:")
    print(names(graph.sort()))

    # 4. A rebate loop makes costs unbounded
    print("\n4. Negative cycle:")
    leipzig = graph.find(4)
    hanover = graph.find(3)
    leipzig.attach(hanover, {"toll": -20})
    try:
        graph.find_shortest_weighted_path(hamburg, munich, "toll", default=0)
    except NegativeCycleError as e:
        print(f"✓ {e}")

    # 5. Closing a city removes every road into it
    print("\n5. Deleting Leipzig:")
    graph.delete(leipzig)
    path = graph.find_shortest_unsigned_weighted_path(hamburg, munich, "km")
    print(f"By distance: {names(path)} ({path.weight('km')} km)")
    print(f"Network: {graph.order()} cities, {graph.size()} roads")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    demonstrate_routes()
