"""Tests for reply suggestions and the canned provider."""

from __future__ import annotations

import pytest

from flowbuilder.application.session import NodeNotFoundError, NodeTypeMismatchError
from flowbuilder.application.suggestions import SuggestReplyUseCase
from flowbuilder.domain.graph import NodeType, TextData
from flowbuilder.infrastructure.session_store import InMemoryFlowSessionStore
from flowbuilder.infrastructure.suggestions import CannedSuggestionProvider

from tests.fakes import FailingSuggestionProvider, RecordingSuggestionProvider

pytestmark = pytest.mark.asyncio


@pytest.fixture
def store() -> InMemoryFlowSessionStore:
    return InMemoryFlowSessionStore(id_factory=lambda: "flow-1")


async def test_parent_text_is_sent_and_reply_applied(store: InMemoryFlowSessionStore) -> None:
    session = store.create()
    parent = session.add_node(NodeType.TEXT)
    child = session.add_node(NodeType.TEXT)
    session.connect(parent.id, child.id)
    session.apply_text(parent.id, "Where is my order?")
    provider = RecordingSuggestionProvider(reply="Please share your order number.")

    node = await SuggestReplyUseCase(store, provider)("flow-1", child.id)

    assert provider.calls == ["Where is my order?"]
    assert node.data == TextData(label="Please share your order number.")


async def test_root_node_sends_no_context(store: InMemoryFlowSessionStore) -> None:
    session = store.create()
    node = session.add_node(NodeType.TEXT)
    provider = RecordingSuggestionProvider()

    await SuggestReplyUseCase(store, provider)("flow-1", node.id)

    assert provider.calls == [None]


async def test_one_undo_reverts_the_suggestion(store: InMemoryFlowSessionStore) -> None:
    session = store.create()
    node = session.add_node(NodeType.TEXT)

    await SuggestReplyUseCase(store, RecordingSuggestionProvider("new"))("flow-1", node.id)
    session.undo()

    assert session.nodes[0].data == TextData(label="text message")


async def test_image_nodes_are_rejected(store: InMemoryFlowSessionStore) -> None:
    session = store.create()
    node = session.add_node(NodeType.IMAGE)
    provider = RecordingSuggestionProvider()

    with pytest.raises(NodeTypeMismatchError):
        await SuggestReplyUseCase(store, provider)("flow-1", node.id)
    assert provider.calls == []


async def test_provider_failure_propagates_without_recording(
    store: InMemoryFlowSessionStore,
) -> None:
    session = store.create()
    node = session.add_node(NodeType.TEXT)
    past_before = len(session.history.past)

    with pytest.raises(RuntimeError):
        await SuggestReplyUseCase(store, FailingSuggestionProvider())("flow-1", node.id)

    assert len(session.history.past) == past_before


async def test_node_deleted_during_suggestion(store: InMemoryFlowSessionStore) -> None:
    session = store.create()
    node = session.add_node(NodeType.TEXT)
    provider = RecordingSuggestionProvider(before_reply=lambda: session.delete_nodes([node.id]))

    with pytest.raises(NodeNotFoundError):
        await SuggestReplyUseCase(store, provider)("flow-1", node.id)


@pytest.mark.parametrize(
    ("context", "expected"),
    [
        pytest.param(None, "Hi there! How can I help you today?", id="no-context"),
        pytest.param("   ", "Hi there! How can I help you today?", id="blank"),
        pytest.param(
            "Where is my ORDER?",
            "I can help with that! Please provide your order number.",
            id="order",
        ),
        pytest.param("Hello friend", "Hello! What brings you here today?", id="hello"),
        pytest.param(
            "What does it cost?",
            "Our pricing depends on the specific plan. Would you like a breakdown?",
            id="cost",
        ),
        pytest.param(
            "Tell me about the weather today",
            'That\'s interesting. Tell me more about "Tell me about the we..."',
            id="fallback",
        ),
    ],
)
async def test_canned_provider_replies(context: str | None, expected: str) -> None:
    provider = CannedSuggestionProvider(delay_seconds=0)

    assert await provider.suggest(context) == expected
