from __future__ import annotations

import pytest

from flowbuilder.application.ports import FlowNotFoundError, FlowSessionStore
from flowbuilder.domain.graph import NodeType
from flowbuilder.infrastructure.session_store import (
    InMemoryFlowSessionStore,
    make_session_factory,
)


def test_store_satisfies_port() -> None:
    assert isinstance(InMemoryFlowSessionStore(), FlowSessionStore)


def test_create_get_delete() -> None:
    store = InMemoryFlowSessionStore()

    session = store.create()

    assert store.get(session.flow_id) is session
    assert len(store) == 1
    store.delete(session.flow_id)
    with pytest.raises(FlowNotFoundError):
        store.get(session.flow_id)
    with pytest.raises(FlowNotFoundError):
        store.delete(session.flow_id)


def test_sessions_have_independent_id_counters() -> None:
    store = InMemoryFlowSessionStore(make_session_factory(node_id_prefix="msg_"))

    first = store.create().add_node(NodeType.TEXT)
    second = store.create().add_node(NodeType.TEXT)

    assert first.id == second.id == "msg_0"


def test_factory_applies_history_limit() -> None:
    session = make_session_factory(history_limit=3)("flow")
    assert session.history.limit == 3

    for _ in range(5):
        session.add_node(NodeType.TEXT)

    assert len(session.history.past) == 3
