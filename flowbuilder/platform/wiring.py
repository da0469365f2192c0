"""FastAPI dependency wiring for application use cases."""

from __future__ import annotations

from functools import lru_cache

from fastapi import Depends

from ..application.ports import FlowSessionStore, SuggestionProvider
from ..application.saving import SaveFlowUseCase
from ..application.suggestions import SuggestReplyUseCase
from ..infrastructure.session_store import InMemoryFlowSessionStore, make_session_factory
from ..infrastructure.suggestions import CannedSuggestionProvider
from .config import Settings, get_settings


@lru_cache()
def _session_store(
    history_limit: int, burst_quiet_seconds: float, node_id_prefix: str
) -> InMemoryFlowSessionStore:
    return InMemoryFlowSessionStore(
        make_session_factory(
            history_limit=history_limit,
            burst_quiet_seconds=burst_quiet_seconds,
            node_id_prefix=node_id_prefix,
        )
    )


def provide_session_store(settings: Settings = Depends(get_settings)) -> FlowSessionStore:
    """Return the process-wide store for the configured session parameters."""

    return _session_store(
        settings.history_limit,
        settings.burst_quiet_seconds,
        settings.node_id_prefix,
    )


def provide_suggestion_provider(
    settings: Settings = Depends(get_settings),
) -> SuggestionProvider:
    return CannedSuggestionProvider(delay_seconds=settings.suggestion_delay_seconds)


def get_save_flow_use_case(
    store: FlowSessionStore = Depends(provide_session_store),
) -> SaveFlowUseCase:
    return SaveFlowUseCase(store)


def get_suggest_reply_use_case(
    store: FlowSessionStore = Depends(provide_session_store),
    provider: SuggestionProvider = Depends(provide_suggestion_provider),
) -> SuggestReplyUseCase:
    return SuggestReplyUseCase(store=store, provider=provider)


__all__ = [
    "provide_session_store",
    "provide_suggestion_provider",
    "get_save_flow_use_case",
    "get_suggest_reply_use_case",
]
