"""Data models for mesh node status snapshots."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class NatType(Enum):
    """UDP/TCP NAT classification reported by STUN probing."""

    UNKNOWN = 0
    OPEN_INTERNET = 1
    NO_PAT = 2
    FULL_CONE = 3
    RESTRICTED = 4
    PORT_RESTRICTED = 5
    SYMMETRIC = 6
    SYM_UDP_FIREWALL = 7

    @classmethod
    def parse(cls, value: Any) -> NatType | None:
        """Accept the numeric wire value or the enum name; None if unmapped."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                return None
        if isinstance(value, str):
            key = value.strip()
            if key.isdigit():
                return cls.parse(int(key))
            for member in cls:
                if member.name.replace("_", "").lower() == key.replace("_", "").lower():
                    return member
        return None


@dataclass(frozen=True)
class StunInfo:
    udp_nat_type: NatType | None = None
    tcp_nat_type: NatType | None = None

    @classmethod
    def from_dict(cls, data: dict | None) -> StunInfo:
        data = data or {}
        return cls(
            udp_nat_type=NatType.parse(data.get("udp_nat_type")),
            tcp_nat_type=NatType.parse(data.get("tcp_nat_type")),
        )


@dataclass(frozen=True)
class NodeAddresses:
    """Local interface and public addresses of a node."""

    interface_ipv4s: tuple[str, ...] = ()
    interface_ipv6s: tuple[str, ...] = ()
    public_ipv4: str = ""
    public_ipv6: str = ""

    @classmethod
    def from_dict(cls, data: dict | None) -> NodeAddresses:
        data = data or {}
        return cls(
            interface_ipv4s=_str_tuple(data.get("interface_ipv4s")),
            interface_ipv6s=_str_tuple(data.get("interface_ipv6s")),
            public_ipv4=_str(data.get("public_ipv4")),
            public_ipv6=_str(data.get("public_ipv6")),
        )


@dataclass(frozen=True)
class NodeInfo:
    """Identity and addressing of the local node."""

    virtual_ipv4: str = ""
    hostname: str = ""
    version: str = ""
    ips: NodeAddresses = field(default_factory=NodeAddresses)
    listeners: tuple[str, ...] = ()
    stun_info: StunInfo = field(default_factory=StunInfo)
    vpn_portal_cfg: str = ""

    @classmethod
    def from_dict(cls, data: dict | None) -> NodeInfo:
        data = data or {}
        return cls(
            virtual_ipv4=_str(data.get("virtual_ipv4")),
            hostname=_str(data.get("hostname")),
            version=_str(data.get("version")),
            ips=NodeAddresses.from_dict(data.get("ips")),
            listeners=_str_tuple(data.get("listeners")),
            stun_info=StunInfo.from_dict(data.get("stun_info")),
            vpn_portal_cfg=_str(data.get("vpn_portal_cfg")),
        )


@dataclass(frozen=True)
class TunnelInfo:
    tunnel_type: str = ""
    local_addr: str = ""
    remote_addr: str = ""

    @classmethod
    def from_dict(cls, data: dict | None) -> TunnelInfo:
        data = data or {}
        return cls(
            tunnel_type=_str(data.get("tunnel_type")),
            local_addr=_str(data.get("local_addr")),
            remote_addr=_str(data.get("remote_addr")),
        )


@dataclass(frozen=True)
class ConnStats:
    """Cumulative counters of one connection; None where the exporter omitted one."""

    rx_bytes: int | None = None
    tx_bytes: int | None = None
    rx_packets: int | None = None
    tx_packets: int | None = None
    latency_us: int | None = None

    @classmethod
    def from_dict(cls, data: dict) -> ConnStats:
        return cls(
            rx_bytes=_int_or_none(data.get("rx_bytes")),
            tx_bytes=_int_or_none(data.get("tx_bytes")),
            rx_packets=_int_or_none(data.get("rx_packets")),
            tx_packets=_int_or_none(data.get("tx_packets")),
            latency_us=_int_or_none(data.get("latency_us")),
        )


@dataclass(frozen=True)
class PeerConn:
    """One physical link to a peer."""

    conn_id: str = ""
    tunnel: TunnelInfo | None = None
    stats: ConnStats | None = None
    loss_rate: float | None = None
    is_client: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> PeerConn:
        stats = data.get("stats")
        tunnel = data.get("tunnel")
        return cls(
            conn_id=_str(data.get("conn_id")),
            tunnel=TunnelInfo.from_dict(tunnel) if isinstance(tunnel, dict) else None,
            stats=ConnStats.from_dict(stats) if isinstance(stats, dict) else None,
            loss_rate=_float_or_none(data.get("loss_rate")),
            is_client=bool(data.get("is_client", False)),
        )


@dataclass(frozen=True)
class PeerInfo:
    peer_id: int | None = None
    conns: tuple[PeerConn, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> PeerInfo:
        return cls(
            peer_id=_int_or_none(data.get("peer_id")),
            conns=tuple(
                PeerConn.from_dict(c) for c in data.get("conns") or [] if isinstance(c, dict)
            ),
        )


@dataclass(frozen=True)
class Route:
    """Best route to a peer. cost is None on the synthetic local route."""

    peer_id: int | None = None
    ipv4_addr: str = ""
    next_hop_peer_id: int | None = None
    cost: int | None = None
    proxy_cidrs: tuple[str, ...] = ()
    hostname: str = ""
    stun_info: StunInfo = field(default_factory=StunInfo)
    inst_id: str = ""
    version: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> Route:
        return cls(
            peer_id=_int_or_none(data.get("peer_id")),
            ipv4_addr=_str(data.get("ipv4_addr")),
            next_hop_peer_id=_int_or_none(data.get("next_hop_peer_id")),
            cost=_int_or_none(data.get("cost")),
            proxy_cidrs=_str_tuple(data.get("proxy_cidrs")),
            hostname=_str(data.get("hostname")),
            stun_info=StunInfo.from_dict(data.get("stun_info")),
            inst_id=_str(data.get("inst_id")),
            version=_str(data.get("version")),
        )


@dataclass(frozen=True)
class PeerRoutePair:
    """A remote peer with its route; peer is None for the local node entry."""

    route: Route | None = None
    peer: PeerInfo | None = None

    @classmethod
    def from_dict(cls, data: dict) -> PeerRoutePair:
        route = data.get("route")
        peer = data.get("peer")
        return cls(
            route=Route.from_dict(route) if isinstance(route, dict) else None,
            peer=PeerInfo.from_dict(peer) if isinstance(peer, dict) else None,
        )


@dataclass(frozen=True)
class NetworkInstanceDetail:
    my_node_info: NodeInfo = field(default_factory=NodeInfo)
    peer_route_pairs: tuple[PeerRoutePair, ...] = ()
    events: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> NetworkInstanceDetail:
        events = data.get("events")
        if isinstance(events, str):
            events = events.splitlines()
        return cls(
            my_node_info=NodeInfo.from_dict(data.get("my_node_info")),
            peer_route_pairs=tuple(
                PeerRoutePair.from_dict(p)
                for p in data.get("peer_route_pairs") or []
                if isinstance(p, dict)
            ),
            events=_str_tuple(events),
        )


@dataclass(frozen=True)
class NetworkInstance:
    """One running (or failed) network instance as published by the store."""

    instance_id: str
    running: bool = True
    error_msg: str | None = None
    detail: NetworkInstanceDetail | None = None

    @classmethod
    def from_dict(cls, data: dict) -> NetworkInstance:
        detail = data.get("detail")
        return cls(
            instance_id=_str(data.get("instance_id")) or "default",
            running=bool(data.get("running", True)),
            error_msg=data.get("error_msg") or None,
            detail=(
                NetworkInstanceDetail.from_dict(detail) if isinstance(detail, dict) else None
            ),
        )


def _str(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _str_tuple(value: Any) -> tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(str(v) for v in value if v is not None)


def _int_or_none(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None


def _float_or_none(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
