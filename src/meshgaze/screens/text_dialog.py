"""Modal screen showing an opaque text payload verbatim."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Static


class TextDialog(ModalScreen[None]):
    """Read-only dialog for the VPN portal config and the event log."""

    BINDINGS = [
        ("escape", "dismiss_modal", "Close"),
    ]

    DEFAULT_CSS = """
    TextDialog {
        align: center middle;
    }
    #text-dialog {
        width: 90;
        height: 30;
        border: thick $accent;
        background: $surface;
        padding: 1 2;
    }
    #text-title {
        text-style: bold;
        margin-bottom: 1;
    }
    #text-body {
        height: 1fr;
        margin-bottom: 1;
    }
    #text-close {
        width: 100%;
    }
    """

    def __init__(self, title: str, body: str, empty_text: str = "Nothing to show.") -> None:
        super().__init__()
        self.title_text = title
        self.body = body
        self._empty_text = empty_text

    def compose(self) -> ComposeResult:
        with Vertical(id="text-dialog"):
            yield Static(self.title_text, id="text-title")
            with VerticalScroll(id="text-body"):
                yield Static(self.body or self._empty_text, id="text-content", markup=False)
            yield Button("Close [Esc]", id="text-close", variant="primary")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "text-close":
            self.dismiss(None)

    def action_dismiss_modal(self) -> None:
        self.dismiss(None)
