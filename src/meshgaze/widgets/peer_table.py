"""Route table widget: one row per snapshot entry."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.widgets import DataTable, Static

from meshgaze import metrics
from meshgaze.models import PeerRoutePair
from meshgaze.utils import truncate

# Column definitions: (key, label)
COLUMNS = [
    ("ipv4", "Virtual IPv4"),
    ("hostname", "Hostname"),
    ("cost", "Route Cost"),
    ("proto", "Protocol"),
    ("latency", "Latency"),
    ("tx", "Upload"),
    ("rx", "Download"),
    ("loss", "Loss"),
    ("nat", "NAT"),
    ("version", "Version"),
    ("proxy", "Proxy CIDRs"),
]


class PeerTable(Static):
    """DataTable listing the local node and every remote peer."""

    DEFAULT_CSS = """
    PeerTable {
        height: 1fr;
    }
    PeerTable DataTable {
        height: 1fr;
    }
    """

    def __init__(self, si: bool = False, precision: int = 1) -> None:
        super().__init__()
        self._si = si
        self._precision = precision
        self._snapshot: list[PeerRoutePair] = []

    def compose(self) -> ComposeResult:
        yield DataTable(id="peer-table", cursor_type="row")

    def on_mount(self) -> None:
        table = self.query_one(DataTable)
        for key, label in COLUMNS:
            table.add_column(label, key=key)

    def update_data(self, snapshot: list[PeerRoutePair]) -> None:
        """Replace all rows; the snapshot order is kept."""
        self._snapshot = snapshot
        table = self.query_one(DataTable)

        try:
            cursor_row = table.cursor_row
        except Exception:
            cursor_row = 0

        table.clear()
        used: set[str] = set()
        for idx, pair in enumerate(snapshot):
            key = _row_key(pair, idx)
            if key in used:
                key = f"row-{idx}"
            used.add(key)
            table.add_row(*row_cells(pair, self._si, self._precision), key=key)

        if snapshot and cursor_row < len(snapshot):
            try:
                table.move_cursor(row=cursor_row)
            except Exception:
                pass


def row_cells(pair: PeerRoutePair, si: bool = False, precision: int = 1) -> tuple[str, ...]:
    route = pair.route
    return (
        route.ipv4_addr if route else "",
        truncate(route.hostname, 24) if route else "",
        metrics.route_cost(pair),
        metrics.tunnel_protos(pair),
        metrics.latency_ms(pair),
        metrics.tx_bytes(pair, si=si, precision=precision),
        metrics.rx_bytes(pair, si=si, precision=precision),
        metrics.loss_rate(pair),
        metrics.peer_nat_type(pair),
        metrics.version(pair),
        metrics.proxy_cidrs(pair),
    )


def _row_key(pair: PeerRoutePair, idx: int) -> str:
    if pair.peer is None:
        return "local" if idx == 0 else f"row-{idx}"
    if pair.peer.peer_id is None:
        return f"row-{idx}"
    return f"peer-{pair.peer.peer_id}"
