"""Application layer use cases coordinating the flow domain."""

from .ports import FlowNotFoundError, FlowSessionStore, SuggestionProvider
from .saving import FlowValidationError, SavedFlow, SaveFlowUseCase
from .session import (
    EdgeNotFoundError,
    FlowSession,
    NodeNotFoundError,
    NodeTypeMismatchError,
)
from .suggestions import SuggestReplyUseCase

__all__ = [
    "EdgeNotFoundError",
    "FlowNotFoundError",
    "FlowSession",
    "FlowSessionStore",
    "FlowValidationError",
    "NodeNotFoundError",
    "NodeTypeMismatchError",
    "SaveFlowUseCase",
    "SavedFlow",
    "SuggestReplyUseCase",
    "SuggestionProvider",
]
