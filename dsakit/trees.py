"""Binary-tree traversals and views, and the diameter of a general tree."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class TreeNode:
    """A binary-tree node."""

    val: Any
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def _inorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.val
        yield from _inorder(node.right)


def _preorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield node.val
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.val


def inorder(root: Optional[TreeNode]) -> list[Any]:
    """Values in left, node, right order."""
    return list(_inorder(root))


def preorder(root: Optional[TreeNode]) -> list[Any]:
    """Values in node, left, right order."""
    return list(_preorder(root))


def postorder(root: Optional[TreeNode]) -> list[Any]:
    """Values in left, right, node order."""
    return list(_postorder(root))


def level_order(root: Optional[TreeNode]) -> list[list[Any]]:
    """Values grouped by depth, each level from left to right."""
    levels: list[list[Any]] = []
    level = [root] if root is not None else []
    while level:
        levels.append([node.val for node in level])
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def left_view(root: Optional[TreeNode]) -> list[Any]:
    """The first value seen at each depth looking from the left."""
    return [level[0] for level in level_order(root)]


def right_view(root: Optional[TreeNode]) -> list[Any]:
    """The first value seen at each depth looking from the right."""
    return [level[-1] for level in level_order(root)]


def top_view(root: Optional[TreeNode]) -> list[Any]:
    """Values seen from above, ordered from the leftmost column to the rightmost.

    Each column shows the node nearest the root, the leftmost one on ties.
    """
    if root is None:
        return []
    columns: dict[int, Any] = {}
    queue = deque([(root, 0)])
    while queue:
        node, column = queue.popleft()
        columns.setdefault(column, node.val)
        if node.left is not None:
            queue.append((node.left, column - 1))
        if node.right is not None:
            queue.append((node.right, column + 1))
    return [columns[column] for column in sorted(columns)]


def _farthest(adjacency: list[list[int]], start: int) -> tuple[int, int, int]:
    """Return (farthest vertex, its depth, number of vertices reached)."""
    depth = {start: 0}
    queue = deque([start])
    far, far_depth = start, 0
    while queue:
        node = queue.popleft()
        for nbr in adjacency[node]:
            if nbr not in depth:
                depth[nbr] = depth[node] + 1
                if depth[nbr] > far_depth:
                    far, far_depth = nbr, depth[nbr]
                queue.append(nbr)
    return far, far_depth, len(depth)


def tree_diameter(vertex_count: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return the number of edges on the longest path of a tree on vertices 0..n-1.

    Raises ValueError if an edge names an unknown vertex or the edges do not
    connect every vertex.
    """
    if vertex_count <= 0:
        raise ValueError("a tree needs at least one vertex")
    adjacency: list[list[int]] = [[] for _ in range(vertex_count)]
    for u, v in edges:
        for vertex in (u, v):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} out of range")
        adjacency[u].append(v)
        adjacency[v].append(u)
    end, _, reached = _farthest(adjacency, 0)
    if reached != vertex_count:
        raise ValueError("edges do not connect every vertex")
    _, diameter, _ = _farthest(adjacency, end)
    return diameter