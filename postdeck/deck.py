"""An ordered deck of posts edited one at a time."""

from __future__ import annotations

import logging
from typing import Generic, Sequence, TypeVar

from .constants import HistoryConstants
from .controller import EditingController

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Deck(Generic[T]):
    """Posts edited in sequence through one controller.

    Moving to another post writes the current draft back into its slot and
    loads the neighbour, which starts a fresh undo history.
    """

    def __init__(self, posts: Sequence[T], controller: EditingController[T], index: int = 0):
        if not posts:
            raise ValueError("a deck needs at least one post")
        if not 0 <= index < len(posts):
            raise ValueError(f"index {index} out of range for {len(posts)} posts")
        self._posts = list(posts)
        self._index = index
        self._controller = controller
        controller.deck = self
        controller.load_document(self._posts[index])

    @property
    def current_index(self) -> int:
        return self._index

    def posts(self) -> tuple[T, ...]:
        self._store_current()
        return tuple(self._posts)

    def __len__(self) -> int:
        return len(self._posts)

    def _store_current(self) -> None:
        self._posts[self._index] = self._controller.state

    def _go_to(self, index: int, message: str) -> None:
        self._store_current()
        self._index = index
        logger.debug(f"Loading post {index + 1}/{len(self._posts)}")
        # Set before loading so listeners notified by the load see it
        self._controller.status_message = message.format(index + 1, len(self._posts))
        self._controller.load_document(self._posts[index])

    def previous(self) -> bool:
        if self._index == 0:
            return False
        self._go_to(self._index - 1, HistoryConstants.PREVIOUS_POST_MESSAGE)
        return True

    def next(self) -> bool:
        if self._index >= len(self._posts) - 1:
            return False
        self._go_to(self._index + 1, HistoryConstants.NEXT_POST_MESSAGE)
        return True

    def can_move(self, step: int) -> bool:
        return 0 <= self._index + step < len(self._posts)
