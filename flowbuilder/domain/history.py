"""Bounded undo/redo history of full flow snapshots."""

from __future__ import annotations

import copy
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Sequence, Tuple

from .graph import Edge, Node

DEFAULT_HISTORY_LIMIT = 50

GraphState = Tuple[Sequence[Node], Sequence[Edge]]
StateReader = Callable[[], GraphState]
StateRestorer = Callable[[list[Node], list[Edge]], None]


@dataclass(frozen=True, slots=True)
class HistorySnapshot:
    """Detached copy of ``(nodes, edges)`` at one instant."""

    nodes: tuple[Node, ...]
    edges: tuple[Edge, ...]

    @classmethod
    def capture(cls, nodes: Sequence[Node], edges: Sequence[Edge]) -> "HistorySnapshot":
        """Deep-copy the live state so later in-place edits cannot leak in."""

        return cls(
            nodes=tuple(copy.deepcopy(list(nodes))),
            edges=tuple(copy.deepcopy(list(edges))),
        )


class HistoryManager:
    """Linear undo/redo over snapshots of the flow.

    ``record`` must run *before* the mutation it protects, so the top of
    ``past`` is always the state immediately preceding that mutation. The
    manager reads the live state through ``read_state`` and hands restored
    state back through ``restore_state``; it never owns the live graph.
    """

    def __init__(
        self,
        read_state: StateReader,
        restore_state: StateRestorer,
        limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> None:
        if limit < 1:
            raise ValueError("History limit must be at least 1")
        self._read_state = read_state
        self._restore_state = restore_state
        self._limit = limit
        self._past: Deque[HistorySnapshot] = deque(maxlen=limit)
        self._future: Deque[HistorySnapshot] = deque()

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def can_undo(self) -> bool:
        return bool(self._past)

    @property
    def can_redo(self) -> bool:
        return bool(self._future)

    @property
    def past(self) -> tuple[HistorySnapshot, ...]:
        return tuple(self._past)

    @property
    def future(self) -> tuple[HistorySnapshot, ...]:
        return tuple(self._future)

    def _capture_current(self) -> HistorySnapshot:
        nodes, edges = self._read_state()
        return HistorySnapshot.capture(nodes, edges)

    def _restore(self, snapshot: HistorySnapshot) -> None:
        self._restore_state(list(snapshot.nodes), list(snapshot.edges))

    def record(self) -> None:
        """Push the current state onto ``past`` and discard redo history."""

        # deque(maxlen=...) evicts the oldest entry on overflow
        self._past.append(self._capture_current())
        self._future.clear()

    def undo(self) -> bool:
        """Restore the most recent past state. Returns ``False`` on underflow."""

        if not self._past:
            return False
        previous = self._past.pop()
        self._future.appendleft(self._capture_current())
        self._restore(previous)
        return True

    def redo(self) -> bool:
        """Restore the next future state. Returns ``False`` on underflow."""

        if not self._future:
            return False
        following = self._future.popleft()
        self._past.append(self._capture_current())
        self._restore(following)
        return True

    def clear(self) -> None:
        self._past.clear()
        self._future.clear()


__all__ = [
    "DEFAULT_HISTORY_LIMIT",
    "GraphState",
    "HistoryManager",
    "HistorySnapshot",
]
