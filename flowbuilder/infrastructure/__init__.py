from .session_store import InMemoryFlowSessionStore, make_session_factory
from .suggestions import CannedSuggestionProvider

__all__ = [
    "CannedSuggestionProvider",
    "InMemoryFlowSessionStore",
    "make_session_factory",
]
