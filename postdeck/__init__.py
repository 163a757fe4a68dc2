"""postdeck - Bounded undo/redo history for a post editor."""

from .history import HistoryState, HistoryStore, create
from .controller import ChangeOrigin, EditingController
from .deck import Deck
from .snapshot import PostDraft, freeze, thaw

__all__ = [
    'HistoryState',
    'HistoryStore',
    'create',
    'ChangeOrigin',
    'EditingController',
    'Deck',
    'PostDraft',
    'freeze',
    'thaw',
]
