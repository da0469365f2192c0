from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .session import FlowSession


class FlowNotFoundError(Exception):
    """Raised when a flow id has no live editing session."""


@runtime_checkable
class SuggestionProvider(Protocol):
    """Port for the service that drafts a reply for a text node."""

    async def suggest(self, parent_text: Optional[str]) -> str:
        """Return suggested text given the parent message, if any."""


@runtime_checkable
class FlowSessionStore(Protocol):
    """Port holding editing sessions keyed by flow id."""

    def create(self) -> "FlowSession":
        """Start a new, empty session and return it."""

    def get(self, flow_id: str) -> "FlowSession":
        """Return the session for ``flow_id`` or raise ``FlowNotFoundError``."""

    def delete(self, flow_id: str) -> None:
        """Drop the session for ``flow_id`` or raise ``FlowNotFoundError``."""


__all__ = ["FlowNotFoundError", "FlowSessionStore", "SuggestionProvider"]
