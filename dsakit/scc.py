"""Strongly connected components of a directed graph (Tarjan's algorithm)."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import count


def strongly_connected_components(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """Return the strongly connected components of a graph on vertices 0..n-1.

    Components come in the order Tarjan's algorithm completes them, which is a
    reverse topological order of the condensed graph. Each component lists its
    vertices in the order they leave the algorithm's stack.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        for vertex in (u, v):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} out of range")
        adjacency[u].append(v)

    disc = [-1] * vertex_count
    low = [-1] * vertex_count
    on_stack = [False] * vertex_count
    stack: list[int] = []
    clock = count(1)
    components: list[list[int]] = []

    def visit(vertex: int) -> None:
        disc[vertex] = low[vertex] = next(clock)
        stack.append(vertex)
        on_stack[vertex] = True

    for start in range(vertex_count):
        if disc[start] != -1:
            continue
        visit(start)
        calls = [(start, iter(adjacency[start]))]
        while calls:
            u, nbrs = calls[-1]
            descended = False
            for v in nbrs:
                if disc[v] == -1:
                    visit(v)
                    calls.append((v, iter(adjacency[v])))
                    descended = True
                    break
                if on_stack[v]:
                    low[u] = min(low[u], disc[v])
            if descended:
                continue
            calls.pop()
            if low[u] == disc[u]:
                component: list[int] = []
                while True:
                    w = stack.pop()
                    on_stack[w] = False
                    component.append(w)
                    if w == u:
                        break
                components.append(component)
            if calls:
                parent = calls[-1][0]
                low[parent] = min(low[parent], low[u])
    return components