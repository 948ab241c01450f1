"""Minimum spanning trees with Kruskal's and Prim's algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def kruskal(
    vertex_count: int, edges: Iterable[tuple[int, int, float]]
) -> list[tuple[int, int, float]]:
    """Return a minimum spanning forest of a graph on vertices 0..n-1.

    ``edges`` holds (u, v, weight) triples. Edges are considered by increasing
    weight, ties broken by u and then v, and each edge that joins two separate
    trees is kept. The kept edges are returned as (u, v, weight) in that order.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    ordered: list[tuple[float, int, int]] = []
    for u, v, weight in edges:
        for vertex in (u, v):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} out of range")
        ordered.append((weight, u, v))
    ordered.sort()

    parent = list(range(vertex_count))

    def find(vertex: int) -> int:
        while parent[vertex] != vertex:
            vertex = parent[vertex]
        return vertex

    tree: list[tuple[int, int, float]] = []
    for weight, u, v in ordered:
        u_root, v_root = find(u), find(v)
        if u_root != v_root:
            tree.append((u, v, weight))
            parent[u_root] = v_root
    return tree


def prim(matrix: Sequence[Sequence[float]]) -> list[tuple[int, int, float]]:
    """Return the edges of a minimum spanning tree of an adjacency matrix.

    A zero entry means there is no edge. The tree grows from vertex 0; at each
    step the lightest edge from a chosen vertex to an unchosen one is added,
    the first such edge in row-major order winning ties. Edges are returned as
    (chosen vertex, new vertex, weight). Raises ValueError if the matrix is not
    square or the graph is not connected.
    """
    rows = [list(row) for row in matrix]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("matrix must be square")
    if size == 0:
        return []

    selected = [False] * size
    selected[0] = True
    tree: list[tuple[int, int, float]] = []
    for _ in range(size - 1):
        best: tuple[int, int, float] | None = None
        for i, row in enumerate(rows):
            if not selected[i]:
                continue
            for j, weight in enumerate(row):
                if weight and not selected[j] and (best is None or weight < best[2]):
                    best = (i, j, weight)
        if best is None:
            raise ValueError("graph is not connected")
        tree.append(best)
        selected[best[1]] = True
    return tree