"""Adjacency-list graphs with breadth-first, depth-first and topological traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable, Iterable, Iterator


class Graph:
    """A graph stored as ordered adjacency lists keyed by vertex.

    Vertices keep the order in which they were added, and each vertex keeps
    its neighbours in the order the edges were added.
    """

    def __init__(self, vertices: Iterable[Hashable] = ()) -> None:
        self._adjacency: dict[Hashable, list[Hashable]] = {}
        for vertex in vertices:
            self.add_vertex(vertex)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._adjacency)

    def _require(self, vertex: Hashable) -> list[Hashable]:
        try:
            return self._adjacency[vertex]
        except KeyError:
            raise KeyError(f"unknown vertex {vertex!r}") from None

    def add_vertex(self, vertex: Hashable) -> None:
        """Add a vertex with no neighbours; an existing vertex is left as it is."""
        self._adjacency.setdefault(vertex, [])

    def add_edge(self, u: Hashable, v: Hashable, undirected: bool = False) -> None:
        """Add an edge from u to v, and from v to u as well if undirected."""
        self.add_vertex(u)
        self.add_vertex(v)
        self._adjacency[u].append(v)
        if undirected:
            self._adjacency[v].append(u)

    def neighbours(self, vertex: Hashable) -> list[Hashable]:
        """Return the neighbours of a vertex in insertion order."""
        return list(self._require(vertex))

    def bfs(self, source: Hashable) -> list[Hashable]:
        """Return the vertices reachable from source in breadth-first order."""
        self._require(source)
        visited = {source}
        queue = deque([source])
        order: list[Hashable] = []
        while queue:
            node = queue.popleft()
            order.append(node)
            for nbr in self._adjacency[node]:
                if nbr not in visited:
                    visited.add(nbr)
                    queue.append(nbr)
        return order

    def dfs(self, source: Hashable) -> list[Hashable]:
        """Return the vertices reachable from source in depth-first preorder."""
        self._require(source)
        visited = {source}
        order: list[Hashable] = [source]
        stack = [iter(self._adjacency[source])]
        while stack:
            for nbr in stack[-1]:
                if nbr not in visited:
                    visited.add(nbr)
                    order.append(nbr)
                    stack.append(iter(self._adjacency[nbr]))
                    break
            else:
                stack.pop()
        return order

    def topological_sort(self) -> list[Hashable]:
        """Return the vertices in a topological order (Kahn's algorithm).

        Raises ValueError if the graph has a cycle.
        """
        indegree = dict.fromkeys(self._adjacency, 0)
        for nbrs in self._adjacency.values():
            for nbr in nbrs:
                indegree[nbr] += 1
        queue = deque(vertex for vertex, degree in indegree.items() if degree == 0)
        order: list[Hashable] = []
        while queue:
            node = queue.popleft()
            order.append(node)
            for nbr in self._adjacency[node]:
                indegree[nbr] -= 1
                if indegree[nbr] == 0:
                    queue.append(nbr)
        if len(order) != len(self._adjacency):
            raise ValueError("graph contains a cycle")
        return order

    def format_adjacency(self) -> str:
        """Render one line per vertex: the vertex, '-->', then each neighbour and a comma."""
        return "".join(
            f"{vertex}-->" + "".join(f"{nbr}," for nbr in nbrs) + "\n"
            for vertex, nbrs in self._adjacency.items()
        )


def from_edges(
    edges: Iterable[tuple[Hashable, Hashable]],
    vertices: int | Iterable[Hashable] | None = None,
    undirected: bool = False,
) -> Graph:
    """Build a graph from (u, v) pairs.

    ``vertices`` may be a count, meaning vertices 0 to count - 1, or an
    iterable of vertices added first so that they keep that order.
    """
    if vertices is None:
        vertices = ()
    elif isinstance(vertices, int):
        if vertices < 0:
            raise ValueError("vertex count must not be negative")
        vertices = range(vertices)
    graph = Graph(vertices)
    for u, v in edges:
        graph.add_edge(u, v, undirected)
    return graph