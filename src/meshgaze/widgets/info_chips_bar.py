"""Local node summary: addresses, listeners and NAT type as chips."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static


class InfoChipsBar(Static):
    """Wrapping row of node info chips."""

    DEFAULT_CSS = """
    InfoChipsBar {
        height: auto;
        max-height: 4;
        padding: 0 1;
        background: $surface;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self.chips: list[str] = []

    def update_chips(self, chips: list[str]) -> None:
        self.chips = list(chips)
        text = Text()
        for idx, chip in enumerate(self.chips):
            if idx:
                text.append("  ")
            text.append(f" {chip} ", style="reverse")
        self.update(text)
