"""Textual post editor backed by the editing controller."""

from typing import Optional, Sequence

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, TextArea

from .controller import ChangeOrigin, EditingController
from .deck import Deck
from .snapshot import PostDraft


class CaptionArea(TextArea):
    """TextArea whose own undo stack is bypassed; the controller keeps history."""

    def action_undo(self) -> None:
        """No-op; a greyed-out app binding falls through to here."""

    def action_redo(self) -> None:
        """No-op; a greyed-out app binding falls through to here."""


class PostEditorApp(App):
    """Edit post captions with bounded undo/redo."""

    CSS = """
    CaptionArea {
        background: $surface;
        border: none;
    }
    """

    # Keys forwarded to the controller's command registry
    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
        Binding("ctrl+z", "dispatch_key('ctrl+z')", "Undo", priority=True),
        Binding("ctrl+y", "dispatch_key('ctrl+y')", "Redo", priority=True),
        Binding("ctrl+shift+z", "dispatch_key('ctrl+shift+z')", "Redo", show=False, priority=True),
        Binding("alt+left", "dispatch_key('alt+left')", "Prev post", priority=True),
        Binding("alt+right", "dispatch_key('alt+right')", "Next post", priority=True),
    ]

    def __init__(self, draft: Optional[PostDraft] = None, max_size: Optional[int] = None,
                 posts: Optional[Sequence[PostDraft]] = None):
        super().__init__()
        self.text_area: Optional[CaptionArea] = None
        self._editor_ready = False
        self.controller: EditingController[PostDraft] = EditingController(
            draft if draft is not None else PostDraft(), max_size)
        self.controller.add_listener(self._on_state_changed)
        self.deck: Optional[Deck[PostDraft]] = None
        if posts:
            self.deck = Deck(posts, self.controller)

    def compose(self) -> ComposeResult:
        yield Header()
        self.text_area = CaptionArea(self.controller.state.caption, id="caption")
        yield self.text_area
        yield Footer()

    def on_mount(self) -> None:
        self._editor_ready = True
        self._update_title()
        self.text_area.focus()
        self._update_status()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        draft = self.controller.state.with_changes(caption=event.text_area.text)
        self.controller.apply_edit(draft)

    def _on_state_changed(self, draft: PostDraft, origin: ChangeOrigin) -> None:
        if origin is not ChangeOrigin.EDIT and self._editor_ready:
            if self.text_area.text != draft.caption:
                with self.text_area.prevent(TextArea.Changed):
                    self.text_area.load_text(draft.caption)
            if origin is ChangeOrigin.LOAD:
                self._update_title()
        self._update_status()

    def _update_title(self) -> None:
        self.title = self.controller.state.headline or "postdeck"

    def _update_status(self) -> None:
        if not self._editor_ready:
            return
        history = self.controller.history
        position = f"{history.cursor + 1}/{history.size()}"
        status = self.controller.status_message
        self.sub_title = f"{status} · {position}" if status else position
        self.refresh_bindings()

    def check_action(self, action: str, parameters: tuple) -> Optional[bool]:
        # None shows the binding greyed out in the footer
        if action == "dispatch_key":
            return True if self.controller.can_handle_key(parameters[0]) else None
        return True

    def action_dispatch_key(self, key: str) -> None:
        self.controller.handle_key(key)
        self._update_status()


def main(max_size: Optional[int] = None, posts: Optional[Sequence[PostDraft]] = None):
    """Run the Textual app."""
    app = PostEditorApp(max_size=max_size, posts=posts)
    app.run()


if __name__ == "__main__":
    main()
