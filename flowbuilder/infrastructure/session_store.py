"""Process-local storage for flow editing sessions."""

from __future__ import annotations

from typing import Callable, Dict
from uuid import uuid4

from ..application.ports import FlowNotFoundError
from ..application.session import FlowSession
from ..domain.bursts import BurstGate
from ..domain.graph import CounterIdGenerator
from ..domain.history import DEFAULT_HISTORY_LIMIT

SessionFactory = Callable[[str], FlowSession]


def make_session_factory(
    *,
    history_limit: int = DEFAULT_HISTORY_LIMIT,
    burst_quiet_seconds: float = 1.0,
    node_id_prefix: str = "dndnode_",
) -> SessionFactory:
    """Return a factory producing sessions with fresh id counters and burst gates."""

    def factory(flow_id: str) -> FlowSession:
        return FlowSession(
            flow_id,
            id_generator=CounterIdGenerator(prefix=node_id_prefix),
            history_limit=history_limit,
            burst_gate=BurstGate(quiet_period=burst_quiet_seconds),
        )

    return factory


class InMemoryFlowSessionStore:
    """Keeps sessions in a dict; nothing survives a restart."""

    def __init__(
        self,
        session_factory: SessionFactory | None = None,
        id_factory: Callable[[], str] = lambda: uuid4().hex,
    ) -> None:
        self._sessions: Dict[str, FlowSession] = {}
        self._session_factory = session_factory or make_session_factory()
        self._id_factory = id_factory

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self) -> FlowSession:
        flow_id = self._id_factory()
        session = self._session_factory(flow_id)
        self._sessions[flow_id] = session
        return session

    def get(self, flow_id: str) -> FlowSession:
        try:
            return self._sessions[flow_id]
        except KeyError as exc:
            raise FlowNotFoundError(f"Flow {flow_id} not found") from exc

    def delete(self, flow_id: str) -> None:
        if self._sessions.pop(flow_id, None) is None:
            raise FlowNotFoundError(f"Flow {flow_id} not found")


__all__ = ["InMemoryFlowSessionStore", "SessionFactory", "make_session_factory"]
