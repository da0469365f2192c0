"""Editing session that wraps every undo-worthy flow mutation."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..domain.bursts import BurstGate
from ..domain.constraints import Connection, can_connect, connect
from ..domain.graph import (
    CounterIdGenerator,
    Edge,
    IdGenerator,
    ImageData,
    Node,
    NodeId,
    NodeType,
    Position,
    TextData,
    create_node,
    find_node,
)
from ..domain.history import DEFAULT_HISTORY_LIMIT, GraphState, HistoryManager
from ..domain.images import normalize_image_url
from ..domain.validation import SaveVerdict, validate_for_save

logger = logging.getLogger(__name__)


class NodeNotFoundError(Exception):
    """Raised when a node id is not part of the flow."""


class EdgeNotFoundError(Exception):
    """Raised when an edge id is not part of the flow."""


class NodeTypeMismatchError(Exception):
    """Raised when editing a field the node's type does not carry."""


class FlowSession:
    """Live nodes and edges of one flow plus their undo/redo history.

    Every mutation wrapper records a snapshot *before* it applies the change.
    Field edits go through a :class:`BurstGate` keyed on node and field, so one
    undo reverts a whole typing burst on that field. Every other mutation
    closes the burst and records.
    """

    def __init__(
        self,
        flow_id: str,
        *,
        id_generator: Optional[IdGenerator] = None,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
        burst_gate: Optional[BurstGate] = None,
    ) -> None:
        self.flow_id = flow_id
        self._nodes: list[Node] = []
        self._edges: list[Edge] = []
        self._id_generator: IdGenerator = id_generator or CounterIdGenerator()
        self._bursts = burst_gate or BurstGate()
        self.history = HistoryManager(
            self._read_state, self._restore_state, limit=history_limit
        )

    @property
    def nodes(self) -> tuple[Node, ...]:
        return tuple(self._nodes)

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges)

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    def _read_state(self) -> GraphState:
        return self._nodes, self._edges

    def _restore_state(self, nodes: list[Node], edges: list[Edge]) -> None:
        self._nodes = nodes
        self._edges = edges
        self._bursts.close()

    def require_node(self, node_id: NodeId) -> Node:
        node = find_node(self._nodes, node_id)
        if node is None:
            raise NodeNotFoundError(f"Node {node_id} not found")
        return node

    def _require_text_node(self, node_id: NodeId) -> Node:
        node = self.require_node(node_id)
        if node.type is not NodeType.TEXT:
            raise NodeTypeMismatchError(f"Node {node_id} is not a text node")
        return node

    def add_node(self, node_type: NodeType, position: Optional[Position] = None) -> Node:
        node = create_node(node_type, position or Position(), self._id_generator)
        self._bursts.close()
        self.history.record()
        self._nodes.append(node)
        return node

    def can_connect(self, source: NodeId, target: NodeId) -> bool:
        """Live predicate for a connection that is still being dragged."""

        return can_connect(Connection(source, target), self._edges)

    def connect(self, source: NodeId, target: NodeId) -> Optional[Edge]:
        """Commit a connection, or return ``None`` if the source is taken."""

        self.require_node(source)
        self.require_node(target)

        updated = connect(Connection(source, target), self._edges)
        if updated is None:
            logger.info(
                "Refused connection %s -> %s in flow %s: source already has an outgoing edge",
                source,
                target,
                self.flow_id,
            )
            return None

        self._bursts.close()
        self.history.record()
        self._edges = updated
        return updated[-1]

    def update_text(self, node_id: NodeId, label: str) -> Node:
        node = self._require_text_node(node_id)
        if self._bursts.should_record((node_id, "label")):
            self.history.record()
        node.data = TextData(label=label)
        return node

    def update_image_url(self, node_id: NodeId, image_url: str) -> Node:
        node = self.require_node(node_id)
        if node.type is not NodeType.IMAGE:
            raise NodeTypeMismatchError(f"Node {node_id} is not an image node")
        if self._bursts.should_record((node_id, "image_url")):
            self.history.record()
        node.data = ImageData(image_url=normalize_image_url(image_url))
        return node

    def apply_text(self, node_id: NodeId, text: str) -> Node:
        """Replace a text node's label as one atomic, undoable step."""

        node = self._require_text_node(node_id)
        self._bursts.close()
        self.history.record()
        node.data = TextData(label=text)
        return node

    def delete_nodes(self, node_ids: Iterable[NodeId]) -> list[NodeId]:
        """Remove nodes and every edge touching them; returns removed ids."""

        doomed = set(node_ids)
        removed = [node.id for node in self._nodes if node.id in doomed]
        if not removed:
            return []

        self._bursts.close()
        self.history.record()
        self._nodes = [node for node in self._nodes if node.id not in doomed]
        self._edges = [
            edge
            for edge in self._edges
            if edge.source not in doomed and edge.target not in doomed
        ]
        return removed

    def delete_edges(self, edge_ids: Iterable[str]) -> list[str]:
        doomed = set(edge_ids)
        removed = [edge.id for edge in self._edges if edge.id in doomed]
        if not removed:
            return []

        self._bursts.close()
        self.history.record()
        self._edges = [edge for edge in self._edges if edge.id not in doomed]
        return removed

    def delete_node(self, node_id: NodeId) -> None:
        if not self.delete_nodes([node_id]):
            raise NodeNotFoundError(f"Node {node_id} not found")

    def delete_edge(self, edge_id: str) -> None:
        if not self.delete_edges([edge_id]):
            raise EdgeNotFoundError(f"Edge {edge_id} not found")

    def undo(self) -> bool:
        if not self.history.undo():
            logger.debug("Nothing to undo in flow %s", self.flow_id)
            return False
        return True

    def redo(self) -> bool:
        if not self.history.redo():
            logger.debug("Nothing to redo in flow %s", self.flow_id)
            return False
        return True

    def validate(self) -> SaveVerdict:
        return validate_for_save(self._nodes, self._edges)


__all__ = [
    "EdgeNotFoundError",
    "FlowSession",
    "NodeNotFoundError",
    "NodeTypeMismatchError",
]
