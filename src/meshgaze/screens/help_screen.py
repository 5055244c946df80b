"""Help modal screen showing all key bindings."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Static

BUILTIN_BINDINGS = [
    ("q", "Quit"),
    ("r", "Re-read the status source now"),
    ("n", "Switch to the next network instance"),
    ("v", "Show VPN portal config"),
    ("e", "Show event log"),
    ("?", "Show this help"),
]

COLUMN_HELP = [
    ("Route Cost", "local, p2p (direct) or relay(<cost>)"),
    ("Latency", "Mean over connections, rounded up to whole ms"),
    ("Upload/Download", "Cumulative bytes over all connections"),
    ("Loss", "Sum of per-connection loss ratios"),
    ("Proxy CIDRs", "Subnets the peer routes for the mesh"),
]


class HelpScreen(ModalScreen[None]):
    """Modal displaying key bindings and column meanings."""

    BINDINGS = [
        ("escape", "dismiss_modal", "Close"),
        ("question_mark", "dismiss_modal", "Close"),
    ]

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }
    #help-dialog {
        width: 72;
        height: auto;
        max-height: 30;
        border: thick $accent;
        background: $surface;
        padding: 1 2;
    }
    #help-title {
        text-style: bold;
        text-align: center;
        margin-bottom: 1;
    }
    #help-bindings {
        margin-bottom: 1;
    }
    #help-columns-header {
        text-style: bold;
        margin-top: 1;
    }
    #help-columns {
        margin-bottom: 1;
    }
    #help-close {
        dock: bottom;
        width: 100%;
    }
    """

    def compose(self) -> ComposeResult:
        with VerticalScroll(id="help-dialog"):
            yield Static("Key Bindings", id="help-title")
            yield Static(_format_pairs(BUILTIN_BINDINGS), id="help-bindings")
            yield Static("Columns", id="help-columns-header")
            yield Static(_format_pairs(COLUMN_HELP), id="help-columns")
            yield Button("Close [Esc]", id="help-close", variant="primary")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "help-close":
            self.dismiss(None)

    def action_dismiss_modal(self) -> None:
        self.dismiss(None)


def _format_pairs(pairs: list[tuple[str, str]]) -> str:
    return "\n".join(f"  {key:20s} {desc}" for key, desc in pairs)
