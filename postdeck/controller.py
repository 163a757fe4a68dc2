"""Editing controller that owns the canonical document state."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from enum import Enum
from typing import TYPE_CHECKING, Callable, Generic, Iterator, Optional, TypeVar

from .commands import CommandRegistry
from .constants import HistoryConstants
from .history import HistoryStore
from .keyboard import parse_key
from .settings_persistence import get_persistence

if TYPE_CHECKING:
    from .deck import Deck

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ChangeOrigin(Enum):
    """Where a change to the canonical state came from."""
    EDIT = "edit"
    HISTORY = "history"
    LOAD = "load"


Listener = Callable[[T, ChangeOrigin], None]


class EditingController(Generic[T]):
    """Owns one document's canonical state and its undo history.

    User edits go through ``apply_edit``, which records them in the history.
    Undo, redo and document loads go through a separate path that assigns
    the state while ``is_applying_history`` is set, so a listener that
    echoes the change back as an edit cannot destroy the redo branch.
    """

    def __init__(self, initial: T, max_size: Optional[int] = None):
        if max_size is None:
            max_size = get_persistence().get_max_history_size()
        self._state = initial
        self._history: HistoryStore[T] = HistoryStore(initial, max_size)
        self._listeners: list[Listener] = []
        self._applying_history = False
        self.command_registry = CommandRegistry()
        self.deck: Optional["Deck"] = None
        self.modified = False
        self.status_message: Optional[str] = None

    @property
    def state(self) -> T:
        return self._state

    @property
    def history(self) -> HistoryStore[T]:
        return self._history

    @property
    def is_applying_history(self) -> bool:
        return self._applying_history

    @contextmanager
    def applying_history(self) -> Iterator[None]:
        """Mark the enclosed block as applying a history result."""
        previous = self._applying_history
        self._applying_history = True
        try:
            yield
        finally:
            self._applying_history = previous

    def add_listener(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _notify(self, origin: ChangeOrigin) -> None:
        for listener in list(self._listeners):
            listener(self._state, origin)

    def apply_edit(self, snapshot: T) -> bool:
        """Apply a user-originated edit and record it in the history.

        Returns:
            True if the state changed and was recorded.
        """
        if self._applying_history:
            logger.debug("Ignoring edit issued while applying history")
            return False
        if snapshot == self._state:
            return False
        self._state = self._history.push(snapshot)
        self.modified = True
        self.status_message = None
        self._notify(ChangeOrigin.EDIT)
        return True

    def _apply_history(self, snapshot: T, origin: ChangeOrigin) -> None:
        with self.applying_history():
            self._state = snapshot
            self._notify(origin)

    def undo(self) -> bool:
        if not self._history.can_undo():
            self.status_message = HistoryConstants.NOTHING_TO_UNDO_MESSAGE
            return False
        self.modified = True
        self.status_message = HistoryConstants.UNDONE_MESSAGE
        self._apply_history(self._history.undo(), ChangeOrigin.HISTORY)
        return True

    def redo(self) -> bool:
        if not self._history.can_redo():
            self.status_message = HistoryConstants.NOTHING_TO_REDO_MESSAGE
            return False
        self.modified = True
        self.status_message = HistoryConstants.REDONE_MESSAGE
        self._apply_history(self._history.redo(), ChangeOrigin.HISTORY)
        return True

    def load_document(self, snapshot: T) -> None:
        """Replace the document entirely; prior history is discarded."""
        self._history.reset(snapshot)
        self.modified = False
        self._apply_history(snapshot, ChangeOrigin.LOAD)

    def can_undo(self) -> bool:
        return self._history.can_undo()

    def can_redo(self) -> bool:
        return self._history.can_redo()

    def history_size(self) -> int:
        return self._history.size()

    def handle_key(self, key: str) -> bool:
        """Dispatch a key name such as ``ctrl+z`` to its command.

        Returns:
            True if a command is bound to the key.
        """
        return self.command_registry.execute(self, parse_key(key))

    def can_handle_key(self, key: str) -> bool:
        """True if a command is bound to ``key`` and would act right now."""
        key_event = parse_key(key)
        command = self.command_registry.get_command(key_event.key_type, key_event.value)
        return command is not None and command.is_available(self)
