"""Bottom stats bar widget showing live throughput and peer count."""

from __future__ import annotations

from textual.widgets import Static


class StatsBar(Static):
    """Bottom bar: upload rate, download rate, peer count."""

    DEFAULT_CSS = """
    StatsBar {
        dock: bottom;
        height: 1;
        background: $surface;
        color: $text-muted;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self.tx_rate = "0 B"
        self.rx_rate = "0 B"
        self.peer_count = 0

    def on_mount(self) -> None:
        self._refresh_display()

    def update_rates(self, tx_rate: str, rx_rate: str) -> None:
        self.tx_rate = tx_rate
        self.rx_rate = rx_rate
        self._refresh_display()

    def update_peer_count(self, count: int) -> None:
        self.peer_count = count
        self._refresh_display()

    def _refresh_display(self) -> None:
        parts = [
            f" Upload: {self.tx_rate}/s",
            f"Download: {self.rx_rate}/s",
            f"Peers: {self.peer_count}",
        ]
        self.update(" | ".join(parts) + " ")
