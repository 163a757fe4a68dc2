"""Bounded linear undo/redo history of immutable snapshots."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .constants import HistoryConstants

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class HistoryState(Generic[T]):
    """The whole history as one value: snapshots oldest first, and the cursor."""
    entries: tuple[T, ...]
    cursor: int = 0

    @property
    def current(self) -> T:
        return self.entries[self.cursor]


class HistoryStore(Generic[T]):
    """Linear undo/redo history with a fixed size ceiling.

    The store always holds at least one snapshot. ``push`` drops the redo
    branch, appends, and evicts the oldest entry when the ceiling is
    exceeded. ``undo`` and ``redo`` only move the cursor and are no-ops at
    the ends, so callers can invoke them unconditionally.

    Every transition builds a new ``HistoryState`` and assigns it once;
    entries and cursor are never updated separately.
    """

    def __init__(self, initial: T, max_size: int = HistoryConstants.DEFAULT_MAX_SIZE):
        if isinstance(max_size, bool) or not isinstance(max_size, int) or max_size < 1:
            raise ValueError(f"max_size must be a positive integer, got {max_size!r}")
        self._max_size = max_size
        self._state: HistoryState[T] = HistoryState((initial,), 0)

    def _commit(self, state: HistoryState[T]) -> None:
        assert 1 <= len(state.entries) <= self._max_size
        assert 0 <= state.cursor < len(state.entries)
        self._state = state

    def current(self) -> T:
        return self._state.current

    def push(self, snapshot: T) -> T:
        """Record ``snapshot`` as the newest edit point and make it current."""
        state = self._state
        dropped = len(state.entries) - 1 - state.cursor
        if dropped:
            logger.debug(f"Discarding {dropped} redo entries")
        entries = state.entries[:state.cursor + 1] + (snapshot,)
        if len(entries) > self._max_size:
            logger.debug(f"History full at {self._max_size} entries, evicting oldest")
            entries = entries[1:]
        self._commit(HistoryState(entries, len(entries) - 1))
        return snapshot

    def undo(self) -> T:
        state = self._state
        if state.cursor > 0:
            self._commit(HistoryState(state.entries, state.cursor - 1))
        return self.current()

    def redo(self) -> T:
        state = self._state
        if state.cursor < len(state.entries) - 1:
            self._commit(HistoryState(state.entries, state.cursor + 1))
        return self.current()

    def reset(self, snapshot: T) -> None:
        """Discard all history and reseed with ``snapshot``."""
        logger.debug(f"Resetting history ({len(self._state.entries)} entries discarded)")
        self._commit(HistoryState((snapshot,), 0))

    def can_undo(self) -> bool:
        return self._state.cursor > 0

    def can_redo(self) -> bool:
        return self._state.cursor < len(self._state.entries) - 1

    def size(self) -> int:
        return len(self._state.entries)

    def entries(self) -> tuple[T, ...]:
        return self._state.entries

    @property
    def cursor(self) -> int:
        return self._state.cursor

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def state(self) -> HistoryState[T]:
        return self._state

    def __len__(self) -> int:
        return len(self._state.entries)

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(size={self.size()}, cursor={self.cursor}, "
                f"max_size={self._max_size})")


def create(initial: T, max_size: Optional[int] = None) -> HistoryStore[T]:
    """Create a store seeded with ``initial``; ``max_size`` defaults to 50."""
    if max_size is None:
        max_size = HistoryConstants.DEFAULT_MAX_SIZE
    return HistoryStore(initial, max_size)
