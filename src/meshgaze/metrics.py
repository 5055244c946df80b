"""Per-peer derived metrics for the route table.

Every display function takes one PeerRoutePair and returns a string, empty
when the underlying stat is absent. Absent (None) and zero are kept distinct
up to the point of formatting.
"""

from __future__ import annotations

import math
from typing import Callable, Iterable

from meshgaze.chips import nat_type_label
from meshgaze.models import PeerConn, PeerRoutePair
from meshgaze.utils import format_bytes

LOCAL_ROUTE = "local"
UNKNOWN_VERSION = "unknown"

ConnAccessor = Callable[[PeerConn], "int | float | None"]


# --- Named accessors ---


def tx_bytes_of(conn: PeerConn) -> int | None:
    return conn.stats.tx_bytes if conn.stats is not None else None


def rx_bytes_of(conn: PeerConn) -> int | None:
    return conn.stats.rx_bytes if conn.stats is not None else None


def latency_us_of(conn: PeerConn) -> int | None:
    return conn.stats.latency_us if conn.stats is not None else None


def loss_rate_of(conn: PeerConn) -> float | None:
    return conn.loss_rate


# --- Stat extraction ---


def conn_stat(pair: PeerRoutePair, accessor: ConnAccessor) -> int | float | None:
    """Sum one stat across the peer's connections.

    Returns None for the local node entry, for a peer without connections,
    and when no connection carries the stat.
    """
    if pair.peer is None or not pair.peer.conns:
        return None
    values = [v for v in (accessor(conn) for conn in pair.peer.conns) if v is not None]
    if not values:
        return None
    return sum(values)


def total_stat(pairs: Iterable[PeerRoutePair], accessor: ConnAccessor) -> int | float:
    """Sum a stat across every entry, counting absent entries as zero."""
    total: int | float = 0
    for pair in pairs:
        value = conn_stat(pair, accessor)
        if value is not None:
            total += value
    return total


# --- Display values ---


def route_cost(pair: PeerRoutePair) -> str:
    if pair.route is None:
        return "?"
    if pair.peer is None:
        return LOCAL_ROUTE
    if pair.route.cost == 1:
        return "p2p"
    return f"relay({pair.route.cost})"


def latency_ms(pair: PeerRoutePair) -> str:
    """Mean latency across the connections that report one.

    Any fractional millisecond rounds up.
    """
    total_us = conn_stat(pair, latency_us_of)
    if total_us is None:
        return ""
    reporting = sum(1 for conn in pair.peer.conns if latency_us_of(conn) is not None)
    mean_ms = total_us / 1000 / reporting
    return f"{math.ceil(mean_ms)}ms"


def tx_bytes(pair: PeerRoutePair, si: bool = False, precision: int = 1) -> str:
    total = conn_stat(pair, tx_bytes_of)
    if not total:
        return ""
    return format_bytes(total, si=si, precision=precision)


def rx_bytes(pair: PeerRoutePair, si: bool = False, precision: int = 1) -> str:
    total = conn_stat(pair, rx_bytes_of)
    if not total:
        return ""
    return format_bytes(total, si=si, precision=precision)


def loss_rate(pair: PeerRoutePair) -> str:
    """Summed per-connection loss ratios as a percentage.

    Ratios are added, not averaged, so a peer with several lossy
    connections can report more than its real loss.
    """
    total = conn_stat(pair, loss_rate_of)
    if total is None:
        return ""
    return f"{math.floor(total * 100 + 0.5)}%"


def version(pair: PeerRoutePair) -> str:
    if pair.route is None or not pair.route.version:
        return UNKNOWN_VERSION
    return pair.route.version


def tunnel_protos(pair: PeerRoutePair) -> str:
    """Distinct tunnel types of the peer's connections, in first-seen order."""
    if pair.peer is None:
        return ""
    seen: list[str] = []
    for conn in pair.peer.conns:
        if conn.tunnel and conn.tunnel.tunnel_type and conn.tunnel.tunnel_type not in seen:
            seen.append(conn.tunnel.tunnel_type)
    return ",".join(seen)


def peer_nat_type(pair: PeerRoutePair) -> str:
    if pair.route is None:
        return ""
    return nat_type_label(pair.route.stun_info.udp_nat_type) or ""


def proxy_cidrs(pair: PeerRoutePair) -> str:
    if pair.route is None:
        return ""
    return ",".join(pair.route.proxy_cidrs)
