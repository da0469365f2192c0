"""Save-time structural rules for message flows."""

from __future__ import annotations

from enum import Enum
from typing import Mapping, Sequence

from .cycles import has_cycle
from .graph import Edge, Node, NodeId


class SaveVerdict(str, Enum):
    """Outcome of the save-time validation."""

    OK = "OK"
    CYCLE_DETECTED = "CYCLE_DETECTED"
    MULTIPLE_DANGLING_STARTS = "MULTIPLE_DANGLING_STARTS"


VERDICT_MESSAGES: Mapping[SaveVerdict, str] = {
    SaveVerdict.OK: "Flow saved successfully",
    SaveVerdict.CYCLE_DETECTED: "Cannot save flow: Infinite loop detected.",
    SaveVerdict.MULTIPLE_DANGLING_STARTS: "Cannot save Flow",
}


def dangling_starts(nodes: Sequence[Node], edges: Sequence[Edge]) -> list[NodeId]:
    """Return ids of nodes that no edge points at, in node order."""

    targeted = {edge.target for edge in edges}
    return [node.id for node in nodes if node.id not in targeted]


def validate_for_save(nodes: Sequence[Node], edges: Sequence[Edge]) -> SaveVerdict:
    """Combine the structural checks into one verdict.

    A cycle is reported ahead of extra dangling starts. Single-node flows are
    exempt from the dangling-start rule.
    """

    if has_cycle(nodes, edges):
        return SaveVerdict.CYCLE_DETECTED

    if len(nodes) > 1 and len(dangling_starts(nodes, edges)) > 1:
        return SaveVerdict.MULTIPLE_DANGLING_STARTS

    return SaveVerdict.OK


__all__ = [
    "SaveVerdict",
    "VERDICT_MESSAGES",
    "dangling_starts",
    "validate_for_save",
]
