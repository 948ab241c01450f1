"""Single-source shortest paths with Dijkstra's algorithm."""

from __future__ import annotations

import heapq
import math
from collections.abc import Hashable, Iterable
from dataclasses import dataclass


class WeightedGraph:
    """A graph on vertices 0..n-1 with non-negative edge weights."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self._adjacency: list[list[tuple[int, float]]] = [[] for _ in range(vertex_count)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise ValueError(f"vertex {vertex} out of range")

    def add_edge(self, u: int, v: int, weight: float, undirected: bool = True) -> None:
        """Add an edge of the given weight, in both directions if undirected."""
        self._check(u)
        self._check(v)
        if weight < 0:
            raise ValueError("edge weights must not be negative")
        self._adjacency[u].append((v, weight))
        if undirected:
            self._adjacency[v].append((u, weight))

    def dijkstra(self, source: int) -> list[float]:
        """Return the distance from source to every vertex; math.inf if unreachable."""
        self._check(source)
        dist: list[float] = [math.inf] * len(self._adjacency)
        dist[source] = 0
        heap: list[tuple[float, int]] = [(0, source)]
        while heap:
            distance, node = heapq.heappop(heap)
            if distance > dist[node]:
                continue
            for nbr, weight in self._adjacency[node]:
                candidate = distance + weight
                if candidate < dist[nbr]:
                    dist[nbr] = candidate
                    heapq.heappush(heap, (candidate, nbr))
        return dist

    def shortest_distance(self, source: int, destination: int) -> float:
        """Return the shortest distance from source to destination."""
        self._check(destination)
        return self.dijkstra(source)[destination]


@dataclass(frozen=True)
class Route:
    """A shortest route: its total distance and the vertices from start to end."""

    distance: float
    path: tuple[Hashable, ...]


def shortest_route(
    edges: Iterable[tuple[Hashable, Hashable, float]],
    start: Hashable,
    destination: Hashable,
) -> Route:
    """Find the shortest route between two labelled nodes of an undirected graph.

    Nodes are taken in the order they first appear in ``edges``; between equally
    near nodes the earlier one is settled first. Where two nodes share several
    edges, the first edge listed gives their distance.
    """
    edge_list = list(edges)
    nodes: dict[Hashable, None] = {}
    weights: dict[frozenset, float] = {}
    for a, b, weight in edge_list:
        nodes.setdefault(a)
        nodes.setdefault(b)
        weights.setdefault(frozenset((a, b)), weight)
    for node in (start, destination):
        if node not in nodes:
            raise KeyError(f"unknown node {node!r}")

    dist: dict[Hashable, float] = dict.fromkeys(nodes, math.inf)
    dist[start] = 0
    previous: dict[Hashable, Hashable] = {}
    remaining = list(nodes)
    remaining_set = set(remaining)

    while remaining:
        smallest = min(remaining, key=dist.__getitem__)
        remaining.remove(smallest)
        remaining_set.discard(smallest)
        for a, b, _ in edge_list:
            if a == smallest:
                adjacent = b
            elif b == smallest:
                adjacent = a
            else:
                continue
            if adjacent not in remaining_set:
                continue
            candidate = dist[smallest] + weights[frozenset((smallest, adjacent))]
            if candidate < dist[adjacent]:
                dist[adjacent] = candidate
                previous[adjacent] = smallest

    if math.isinf(dist[destination]):
        raise ValueError(f"no route from {start!r} to {destination!r}")
    path = [destination]
    while path[-1] in previous:
        path.append(previous[path[-1]])
    return Route(dist[destination], tuple(reversed(path)))