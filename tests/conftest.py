"""Shared test fixtures and doubles."""

from __future__ import annotations

import itertools
import sys
from collections.abc import AsyncIterator, Iterator
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from flowbuilder import main
from flowbuilder.application.session import FlowSession
from flowbuilder.domain.bursts import BurstGate
from flowbuilder.domain.graph import CounterIdGenerator
from flowbuilder.infrastructure.session_store import InMemoryFlowSessionStore
from flowbuilder.platform.config import Settings, get_settings
from flowbuilder.platform.wiring import provide_session_store, provide_suggestion_provider

from tests.fakes import FakeClock, RecordingSuggestionProvider


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def session(clock: FakeClock) -> FlowSession:
    """Empty session with deterministic node ids and a controllable clock."""

    return FlowSession(
        "flow-test",
        id_generator=CounterIdGenerator(prefix="node_"),
        burst_gate=BurstGate(quiet_period=1.0, clock=clock),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        api_key="test-key",
        history_limit=50,
        burst_quiet_seconds=1.0,
        suggestion_delay_seconds=0,
        node_id_prefix="dndnode_",
    )


@pytest.fixture
def session_store(clock: FakeClock) -> InMemoryFlowSessionStore:
    flow_ids = (f"flow-{index}" for index in itertools.count(1))

    def factory(flow_id: str) -> FlowSession:
        return FlowSession(
            flow_id,
            id_generator=CounterIdGenerator(prefix="dndnode_"),
            burst_gate=BurstGate(quiet_period=1.0, clock=clock),
        )

    return InMemoryFlowSessionStore(factory, id_factory=lambda: next(flow_ids))


@pytest.fixture
def suggestion_provider() -> RecordingSuggestionProvider:
    return RecordingSuggestionProvider(reply="How can I help?")


@pytest.fixture
def app(
    settings: Settings,
    session_store: InMemoryFlowSessionStore,
    suggestion_provider: RecordingSuggestionProvider,
) -> Iterator[FastAPI]:
    """Configured FastAPI application instance for integration tests."""

    app = main.app
    overrides = {
        get_settings: lambda: settings,
        provide_session_store: lambda: session_store,
        provide_suggestion_provider: lambda: suggestion_provider,
    }
    app.dependency_overrides.update(overrides)
    try:
        yield app
    finally:
        for dependency in overrides:
            app.dependency_overrides.pop(dependency, None)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """Async HTTP client bound to the FastAPI app."""

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as api_client:
        yield api_client


@pytest.fixture
def auth_headers(settings: Settings) -> dict[str, str]:
    return {"x-api-key": settings.api_key}
