"""Tests for the command registry."""

from unittest.mock import Mock

from postdeck.commands import (
    CommandRegistry,
    EditorCommand,
    NextPostCommand,
    PreviousPostCommand,
    RedoCommand,
    UndoCommand,
)
from postdeck.controller import EditingController
from postdeck.keyboard import KeyType, parse_key


def test_default_bindings():
    registry = CommandRegistry()
    assert isinstance(registry.get_command(KeyType.CTRL, 'z'), UndoCommand)
    assert isinstance(registry.get_command(KeyType.CTRL, 'Z'), RedoCommand)
    assert isinstance(registry.get_command(KeyType.CTRL, 'y'), RedoCommand)
    assert isinstance(registry.get_command(KeyType.ALT, 'left'), PreviousPostCommand)
    assert isinstance(registry.get_command(KeyType.ALT, 'right'), NextPostCommand)
    assert registry.get_command(KeyType.REGULAR, 'z') is None


def test_execute_dispatches_to_controller():
    registry = CommandRegistry()
    controller = Mock()
    assert registry.execute(controller, parse_key("ctrl+z")) is True
    controller.undo.assert_called_once_with()
    assert registry.execute(controller, parse_key("ctrl+y")) is True
    controller.redo.assert_called_once_with()


def test_execute_unbound_key_returns_false():
    registry = CommandRegistry()
    controller = Mock()
    assert registry.execute(controller, parse_key("x")) is False
    controller.undo.assert_not_called()


def test_register_overrides_binding():
    class ClearStatusCommand(EditorCommand):
        def execute(self, controller, key_event):
            controller.status_message = None
            return False

    registry = CommandRegistry()
    registry.register((KeyType.CTRL, 'z'), ClearStatusCommand())
    controller = EditingController("v0", max_size=5)
    controller.status_message = "something"
    registry.execute(controller, parse_key("ctrl+z"))
    assert controller.status_message is None


def test_deck_commands_without_deck():
    controller = EditingController("v0", max_size=5)
    assert PreviousPostCommand().execute(controller, parse_key("alt+left")) is False
    assert controller.status_message == "No deck"
    assert NextPostCommand().execute(controller, parse_key("alt+right")) is False


def test_availability_tracks_controller():
    controller = EditingController("v0", max_size=5)
    assert not UndoCommand().is_available(controller)
    assert not NextPostCommand().is_available(controller)
    controller.apply_edit("v1")
    assert UndoCommand().is_available(controller)
    assert not RedoCommand().is_available(controller)


def test_can_handle_key():
    controller = EditingController("v0", max_size=5)
    assert controller.can_handle_key("ctrl+z") is False
    assert controller.can_handle_key("ctrl+q") is False
    controller.apply_edit("v1")
    assert controller.can_handle_key("ctrl+z") is True
    assert controller.can_handle_key("meta+z") is True
