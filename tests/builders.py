"""Builder helpers to express test graphs succinctly."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from flowbuilder.domain.graph import (
    Edge,
    ImageData,
    Node,
    NodeType,
    Position,
    TextData,
    edge_id_for,
)


def text_node(node_id: str, label: str = "text message") -> Node:
    return Node(id=node_id, type=NodeType.TEXT, data=TextData(label=label), position=Position())


def image_node(node_id: str, image_url: str = "") -> Node:
    return Node(
        id=node_id, type=NodeType.IMAGE, data=ImageData(image_url=image_url), position=Position()
    )


def edge(source: str, target: str) -> Edge:
    return Edge(id=edge_id_for(source, target), source=source, target=target)


def make_graph(
    node_ids: Iterable[str], links: Sequence[Tuple[str, str]] = ()
) -> Tuple[List[Node], List[Edge]]:
    """Return text nodes for ``node_ids`` and edges for ``links``."""

    nodes = [text_node(node_id) for node_id in node_ids]
    edges = [edge(source, target) for source, target in links]
    return nodes, edges


def chain(length: int, prefix: str = "n") -> Tuple[List[Node], List[Edge]]:
    """Build ``n0 -> n1 -> ... -> n{length-1}``."""

    ids = [f"{prefix}{index}" for index in range(length)]
    return make_graph(ids, list(zip(ids, ids[1:])))
