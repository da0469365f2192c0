"""Connection rules applied before an edge reaches the flow."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from .graph import Edge, NodeId, edge_id_for


@dataclass(frozen=True, slots=True)
class Connection:
    """A prospective link the user is dragging or committing."""

    source: NodeId
    target: NodeId


def can_connect(proposed: Connection, edges: Iterable[Edge]) -> bool:
    """Return ``False`` when ``proposed.source`` already has an outgoing edge.

    Shared by the live drag check and the commit gate so both agree.
    Self-loops pass here and are rejected by the save-time cycle check.
    """

    return not any(edge.source == proposed.source for edge in edges)


def connect(proposed: Connection, edges: Sequence[Edge]) -> list[Edge] | None:
    """Return ``edges`` plus the new link, or ``None`` when it is refused."""

    if not can_connect(proposed, edges):
        return None
    edge = Edge(
        id=edge_id_for(proposed.source, proposed.target),
        source=proposed.source,
        target=proposed.target,
    )
    return [*edges, edge]


__all__ = ["Connection", "can_connect", "connect"]
