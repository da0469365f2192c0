from __future__ import annotations

import logging
from dataclasses import dataclass

from ..domain.graph import Node, NodeId, NodeType, parent_text
from .ports import FlowSessionStore, SuggestionProvider
from .session import NodeTypeMismatchError

logger = logging.getLogger(__name__)


@dataclass
class SuggestReplyUseCase:
    """Draft a reply for a text node from the message that leads into it."""

    store: FlowSessionStore
    provider: SuggestionProvider

    async def __call__(self, flow_id: str, node_id: NodeId) -> Node:
        session = self.store.get(flow_id)
        node = session.require_node(node_id)
        if node.type is not NodeType.TEXT:
            raise NodeTypeMismatchError(f"Node {node_id} is not a text node")

        context = parent_text(node_id, session.nodes, session.edges)
        try:
            suggestion = await self.provider.suggest(context)
        except Exception:
            logger.exception("Suggestion provider failed for node %s in flow %s", node_id, flow_id)
            raise

        # apply_text re-checks the node; it may be gone after the await.
        return session.apply_text(node_id, suggestion)


__all__ = ["SuggestReplyUseCase"]
