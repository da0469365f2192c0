"""Debounce used by collaborators to coalesce rapid field edits."""

from __future__ import annotations

import time
from typing import Callable, Hashable, Optional

DEFAULT_QUIET_PERIOD_SECONDS = 1.0

Clock = Callable[[], float]


class BurstGate:
    """Tell the caller when an edit opens a new burst.

    A burst is a run of edits to the same field, identified by ``key``, with
    gaps shorter than ``quiet_period`` seconds. The first edit of a burst
    should be preceded by one history record; later edits should not. An edit
    to a different key always opens a new burst.
    """

    def __init__(
        self,
        quiet_period: float = DEFAULT_QUIET_PERIOD_SECONDS,
        clock: Clock = time.monotonic,
    ) -> None:
        self._quiet_period = quiet_period
        self._clock = clock
        self._last_edit: float | None = None
        self._key: Optional[Hashable] = None

    @property
    def in_burst(self) -> bool:
        if self._last_edit is None:
            return False
        return self._clock() - self._last_edit < self._quiet_period

    def should_record(self, key: Optional[Hashable] = None) -> bool:
        """Register one edit to ``key`` and return ``True`` if it starts a new burst."""

        opens_burst = not self.in_burst or key != self._key
        self._last_edit = self._clock()
        self._key = key
        return opens_burst

    def close(self) -> None:
        """End the current burst so the next edit records again."""

        self._last_edit = None
        self._key = None


__all__ = ["BurstGate", "Clock", "DEFAULT_QUIET_PERIOD_SECONDS"]
