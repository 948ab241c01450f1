import math

import pytest

from dsakit.shortest_path import Route, WeightedGraph, shortest_route

EXAMPLE_EDGES = [(0, 1, 1), (1, 2, 1), (0, 2, 4), (0, 3, 7), (3, 2, 2), (3, 4, 3)]

ROUTE_EDGES = [
    ("a", "c", 1),
    ("a", "d", 2),
    ("b", "c", 2),
    ("c", "d", 1),
    ("b", "f", 3),
    ("c", "e", 3),
    ("e", "f", 2),
    ("d", "g", 1),
    ("g", "f", 1),
]


def _example_graph():
    graph = WeightedGraph(5)
    for u, v, w in EXAMPLE_EDGES:
        graph.add_edge(u, v, w)
    return graph


def test_example_distance():
    assert _example_graph().shortest_distance(0, 4) == 7


def test_source_distance_is_zero():
    graph = _example_graph()
    for vertex in range(5):
        assert graph.dijkstra(vertex)[vertex] == 0


def test_distances_satisfy_triangle_inequality():
    graph = _example_graph()
    for source in range(5):
        dist = graph.dijkstra(source)
        for u, v, w in EXAMPLE_EDGES:
            assert dist[v] <= dist[u] + w
            assert dist[u] <= dist[v] + w


def test_undirected_distances_are_symmetric():
    graph = _example_graph()
    for u in range(5):
        for v in range(5):
            assert graph.shortest_distance(u, v) == graph.shortest_distance(v, u)


def test_directed_edge_one_way_only():
    graph = WeightedGraph(2)
    graph.add_edge(0, 1, 5, undirected=False)
    assert graph.shortest_distance(0, 1) == 5
    assert math.isinf(graph.shortest_distance(1, 0))


def test_unreachable_is_infinite():
    graph = WeightedGraph(3)
    graph.add_edge(0, 1, 2)
    dist = graph.dijkstra(0)
    assert dist[1] == 2
    assert dist[2] == math.inf


def test_out_of_range_vertex_raises():
    graph = WeightedGraph(2)
    with pytest.raises(ValueError):
        graph.add_edge(0, 2, 1)
    with pytest.raises(ValueError):
        graph.dijkstra(3)


def test_negative_weight_raises():
    graph = WeightedGraph(2)
    with pytest.raises(ValueError):
        graph.add_edge(0, 1, -1)


def test_route_example():
    route = shortest_route(ROUTE_EDGES, "a", "f")
    assert route.distance == 4
    assert route.path == ("a", "d", "g", "f")


def test_route_path_is_consistent():
    weights = {frozenset((a, b)): w for a, b, w in ROUTE_EDGES}
    for destination in "bcdefg":
        route = shortest_route(ROUTE_EDGES, "a", destination)
        assert route.path[0] == "a"
        assert route.path[-1] == destination
        total = sum(weights[frozenset(pair)] for pair in zip(route.path, route.path[1:]))
        assert total == route.distance


def test_route_to_self():
    assert shortest_route(ROUTE_EDGES, "c", "c") == Route(0, ("c",))


def test_route_agrees_with_weighted_graph():
    labels = sorted({n for a, b, _ in ROUTE_EDGES for n in (a, b)})
    index = {label: i for i, label in enumerate(labels)}
    graph = WeightedGraph(len(labels))
    for a, b, w in ROUTE_EDGES:
        graph.add_edge(index[a], index[b], w)
    for label in labels:
        route = shortest_route(ROUTE_EDGES, "b", label)
        assert route.distance == graph.shortest_distance(index["b"], index[label])


def test_route_unreachable_raises():
    with pytest.raises(ValueError):
        shortest_route([("a", "b", 1), ("c", "d", 1)], "a", "d")


def test_route_unknown_node_raises():
    with pytest.raises(KeyError):
        shortest_route(ROUTE_EDGES, "a", "z")