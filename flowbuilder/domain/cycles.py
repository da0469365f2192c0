"""Directed cycle detection over a flow's adjacency view."""

from __future__ import annotations

from typing import Iterator, Sequence

from .graph import Edge, Node, NodeId, build_adjacency


def find_cycle(nodes: Sequence[Node], edges: Sequence[Edge]) -> list[NodeId] | None:
    """Return the node ids of the first cycle found, in path order.

    Depth-first search with an explicit stack. A node stays ``on_stack``
    while its subtree is being explored; meeting such a node again is a
    back-edge. Meeting a node that is only ``visited`` is a reconverging
    path and is skipped. Every node is tried as a root so disconnected
    components are covered.
    """

    adjacency = build_adjacency(nodes, edges)
    visited: set[NodeId] = set()
    on_stack: set[NodeId] = set()

    for root in adjacency:
        if root in visited:
            continue

        visited.add(root)
        on_stack.add(root)
        path: list[NodeId] = [root]
        frames: list[Iterator[NodeId]] = [iter(adjacency[root])]

        while frames:
            neighbor = next(frames[-1], None)
            if neighbor is None:
                on_stack.discard(path.pop())
                frames.pop()
                continue
            if neighbor in on_stack:
                return path[path.index(neighbor):]
            if neighbor in visited:
                continue
            visited.add(neighbor)
            on_stack.add(neighbor)
            path.append(neighbor)
            frames.append(iter(adjacency[neighbor]))

    return None


def has_cycle(nodes: Sequence[Node], edges: Sequence[Edge]) -> bool:
    """Return ``True`` when the flow contains a directed cycle."""

    return find_cycle(nodes, edges) is not None


__all__ = ["find_cycle", "has_cycle"]
