from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

import networkx as nx

from ..domain.cycles import find_cycle
from ..domain.graph import NodeId, to_digraph
from ..domain.validation import (
    VERDICT_MESSAGES,
    SaveVerdict,
    dangling_starts,
    validate_for_save,
)
from .ports import FlowSessionStore

logger = logging.getLogger(__name__)


class FlowValidationError(Exception):
    """Raised when a flow fails the save-time structural rules."""

    def __init__(
        self,
        verdict: SaveVerdict,
        *,
        cycle: Optional[List[NodeId]] = None,
        dangling: Optional[List[NodeId]] = None,
    ) -> None:
        self.verdict = verdict
        self.message = VERDICT_MESSAGES[verdict]
        self.cycle = cycle or []
        self.dangling = dangling or []
        super().__init__(self.message)


@dataclass
class SavedFlow:
    flow_id: str
    message: str
    message_order: List[NodeId] = field(default_factory=list)


@dataclass
class SaveFlowUseCase:
    """Validate a flow and report the order its messages will be sent in."""

    store: FlowSessionStore

    def __call__(self, flow_id: str) -> SavedFlow:
        session = self.store.get(flow_id)
        nodes, edges = session.nodes, session.edges

        verdict = validate_for_save(nodes, edges)
        if verdict is SaveVerdict.CYCLE_DETECTED:
            cycle = find_cycle(nodes, edges) or []
            logger.warning("Rejected save of flow %s: cycle through %s", flow_id, cycle)
            raise FlowValidationError(verdict, cycle=cycle)
        if verdict is SaveVerdict.MULTIPLE_DANGLING_STARTS:
            dangling = dangling_starts(nodes, edges)
            logger.warning(
                "Rejected save of flow %s: %d nodes without incoming edges",
                flow_id,
                len(dangling),
            )
            raise FlowValidationError(verdict, dangling=dangling)

        order = list(nx.topological_sort(to_digraph(nodes, edges)))
        logger.info("Saved flow %s with %d messages", flow_id, len(order))
        return SavedFlow(
            flow_id=flow_id,
            message=VERDICT_MESSAGES[SaveVerdict.OK],
            message_order=order,
        )


__all__ = ["FlowValidationError", "SaveFlowUseCase", "SavedFlow"]
