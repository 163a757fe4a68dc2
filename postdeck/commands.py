"""Command pattern implementation for editor shortcuts."""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING
from .constants import HistoryConstants
from .keyboard import KeyType

if TYPE_CHECKING:
    from .controller import EditingController
    from .keyboard import KeyEvent


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, controller: 'EditingController', key_event: 'KeyEvent') -> bool:
        """Execute the command.

        Args:
            controller: Controller owning the document
            key_event: The key event that triggered this command

        Returns:
            True if the command changed the document
        """
        pass

    def is_available(self, controller: 'EditingController') -> bool:
        """Whether executing now would change anything."""
        return True


class UndoCommand(EditorCommand):
    def execute(self, controller, key_event):
        return controller.undo()

    def is_available(self, controller):
        return controller.can_undo()


class RedoCommand(EditorCommand):
    def execute(self, controller, key_event):
        return controller.redo()

    def is_available(self, controller):
        return controller.can_redo()


class DeckCommand(EditorCommand):
    """Base class for moving between posts in the attached deck."""

    step = 0

    def execute(self, controller: 'EditingController', key_event: 'KeyEvent') -> bool:
        if controller.deck is None:
            controller.status_message = HistoryConstants.NO_DECK_MESSAGE
            return False
        return self._move(controller.deck)

    def is_available(self, controller):
        return controller.deck is not None and controller.deck.can_move(self.step)

    @abstractmethod
    def _move(self, deck) -> bool:
        pass


class PreviousPostCommand(DeckCommand):
    step = -1

    def _move(self, deck):
        return deck.previous()


class NextPostCommand(DeckCommand):
    step = 1

    def _move(self, deck):
        return deck.next()


class CommandRegistry:
    """Registry for mapping key combinations to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], EditorCommand] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Undo/redo; Cmd is parsed as Ctrl, shift shows as an uppercase letter
        self.register((KeyType.CTRL, 'z'), UndoCommand())
        self.register((KeyType.CTRL, 'Z'), RedoCommand())
        self.register((KeyType.CTRL, 'y'), RedoCommand())

        # Deck navigation
        self.register((KeyType.ALT, 'left'), PreviousPostCommand())
        self.register((KeyType.ALT, 'right'), NextPostCommand())

    def register(self, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        """Get the command for a key combination."""
        return self._commands.get((key_type, value))

    def execute(self, controller: 'EditingController', key_event: 'KeyEvent') -> bool:
        """Execute the command for the given key event.

        Returns:
            True if a command was bound to the key
        """
        command = self.get_command(key_event.key_type, key_event.value)
        if command is None:
            return False
        command.execute(controller, key_event)
        return True
