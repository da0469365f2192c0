"""Lightweight structures for modeling chatbot message flows as directed graphs."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Protocol, Sequence, Union

import networkx as nx

NodeId = str

DEFAULT_TEXT_LABEL = "text message"


class NodeType(str, Enum):
    """Enumeration of supported flow node types."""

    TEXT = "textNode"
    IMAGE = "imageNode"


@dataclass(frozen=True, slots=True)
class Position:
    """Canvas coordinates of a node. Presentation-only."""

    x: float = 0.0
    y: float = 0.0


@dataclass(slots=True)
class TextData:
    label: str = DEFAULT_TEXT_LABEL


@dataclass(slots=True)
class ImageData:
    image_url: str = ""


NodeData = Union[TextData, ImageData]


@dataclass(slots=True)
class Node:
    """A messaging step placed on the canvas."""

    id: NodeId
    type: NodeType
    data: NodeData
    position: Position = field(default_factory=Position)


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed link ``source -> target`` between two nodes."""

    id: str
    source: NodeId
    target: NodeId


class IdGenerator(Protocol):
    """Capability that mints globally unique node identifiers."""

    def __call__(self) -> NodeId:
        ...


class CounterIdGenerator:
    """Monotonically increasing id source, one per editing session."""

    def __init__(self, prefix: str = "dndnode_", start: int = 0) -> None:
        self._prefix = prefix
        self._counter = itertools.count(start)

    def __call__(self) -> NodeId:
        return f"{self._prefix}{next(self._counter)}"


def default_node_data(node_type: NodeType) -> NodeData:
    """Return the payload a freshly dropped node of ``node_type`` starts with."""

    if node_type is NodeType.IMAGE:
        return ImageData()
    return TextData()


def create_node(
    node_type: NodeType, position: Position, id_generator: IdGenerator
) -> Node:
    """Mint a node with a fresh id and the default data for its type."""

    return Node(
        id=id_generator(),
        type=node_type,
        data=default_node_data(node_type),
        position=position,
    )


def _escape_id_part(node_id: NodeId) -> str:
    return node_id.replace("%", "%25").replace("-", "%2D")


def edge_id_for(source: NodeId, target: NodeId) -> str:
    """Build a unique edge id; a literal ``-`` inside a node id is escaped."""

    return f"edge_{_escape_id_part(source)}-{_escape_id_part(target)}"


def build_adjacency(
    nodes: Iterable[Node], edges: Iterable[Edge]
) -> dict[NodeId, list[NodeId]]:
    """Map each node id to the ordered ids reachable by one outgoing edge.

    Edges referencing a ``source`` or ``target`` that is not among ``nodes``
    are omitted; interactive editing can leave such references behind for a
    moment.
    """

    adjacency: dict[NodeId, list[NodeId]] = {node.id: [] for node in nodes}
    for edge in edges:
        if edge.source in adjacency and edge.target in adjacency:
            adjacency[edge.source].append(edge.target)
    return adjacency


def find_node(nodes: Iterable[Node], node_id: NodeId) -> Node | None:
    for node in nodes:
        if node.id == node_id:
            return node
    return None


def parent_text(
    node_id: NodeId, nodes: Sequence[Node], edges: Sequence[Edge]
) -> str | None:
    """Return the label of the Text node feeding ``node_id``, if any.

    Only the first incoming edge is followed. Image parents, missing parents
    and empty labels all yield ``None``.
    """

    incoming = next((edge for edge in edges if edge.target == node_id), None)
    if incoming is None:
        return None

    parent = find_node(nodes, incoming.source)
    if parent is None or parent.type is not NodeType.TEXT:
        return None
    if not isinstance(parent.data, TextData):
        return None
    return parent.data.label or None


def to_digraph(nodes: Iterable[Node], edges: Iterable[Edge]) -> nx.DiGraph:
    """Create a NetworkX view of the flow, keeping node types as attributes."""

    graph = nx.DiGraph()
    for node in nodes:
        graph.add_node(node.id, node_type=node.type)

    for edge in edges:
        if edge.source in graph and edge.target in graph:
            graph.add_edge(edge.source, edge.target, edge_id=edge.id)

    return graph


__all__ = [
    "CounterIdGenerator",
    "DEFAULT_TEXT_LABEL",
    "Edge",
    "IdGenerator",
    "ImageData",
    "Node",
    "NodeData",
    "NodeId",
    "NodeType",
    "Position",
    "TextData",
    "build_adjacency",
    "create_node",
    "default_node_data",
    "edge_id_for",
    "find_node",
    "parent_text",
    "to_digraph",
]
