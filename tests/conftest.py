"""Shared test fixtures for Meshgaze tests."""

from __future__ import annotations

import json
import textwrap

import pytest

from meshgaze.config import AppConfig
from meshgaze.models import (
    ConnStats,
    NetworkInstanceDetail,
    PeerConn,
    PeerInfo,
    PeerRoutePair,
    Route,
    TunnelInfo,
)


def make_conn(
    tx: int = 0,
    rx: int = 0,
    latency_us: int = 0,
    loss: float | None = 0.0,
    tunnel_type: str = "tcp",
) -> PeerConn:
    return PeerConn(
        conn_id=f"conn-{tx}-{rx}",
        tunnel=TunnelInfo(tunnel_type=tunnel_type),
        stats=ConnStats(tx_bytes=tx, rx_bytes=rx, latency_us=latency_us),
        loss_rate=loss,
    )


def make_pair(
    *conns: PeerConn,
    peer_id: int = 100,
    cost: int | None = 1,
    version: str = "1.2.0",
    ipv4: str = "10.144.144.2",
    hostname: str = "peer",
) -> PeerRoutePair:
    return PeerRoutePair(
        route=Route(
            peer_id=peer_id,
            ipv4_addr=ipv4,
            cost=cost,
            hostname=hostname,
            version=version,
        ),
        peer=PeerInfo(peer_id=peer_id, conns=tuple(conns)),
    )


SAMPLE_DETAIL = {
    "my_node_info": {
        "virtual_ipv4": "10.144.144.1",
        "hostname": "alpha",
        "version": "1.2.0-abc",
        "ips": {
            "public_ipv4": "203.0.113.7",
            "interface_ipv4s": ["192.168.1.10", "172.17.0.1"],
            "public_ipv6": "",
            "interface_ipv6s": ["fd00::10"],
        },
        "listeners": ["tcp://0.0.0.0:11010", "udp://0.0.0.0:11010"],
        "stun_info": {"udp_nat_type": 3, "tcp_nat_type": 0},
        "vpn_portal_cfg": "[Interface]\nPrivateKey = xyz\n",
    },
    "events": ["peer 200 connected", "peer 300 connected"],
    "peer_route_pairs": [
        {
            "route": {
                "peer_id": 200,
                "ipv4_addr": "10.144.144.2",
                "next_hop_peer_id": 200,
                "cost": 1,
                "proxy_cidrs": ["192.168.50.0/24"],
                "hostname": "beta",
                "stun_info": {"udp_nat_type": 6},
                "inst_id": "b-inst",
                "version": "1.2.0",
            },
            "peer": {
                "peer_id": 200,
                "conns": [
                    {
                        "conn_id": "c1",
                        "tunnel": {
                            "tunnel_type": "udp",
                            "local_addr": "udp://192.168.1.10:11010",
                            "remote_addr": "udp://198.51.100.2:11010",
                        },
                        "stats": {
                            "rx_bytes": 4096,
                            "tx_bytes": 2048,
                            "rx_packets": 10,
                            "tx_packets": 8,
                            "latency_us": 4300,
                        },
                        "loss_rate": 0.01,
                        "is_client": True,
                    }
                ],
            },
        },
        {
            "route": {
                "peer_id": 300,
                "ipv4_addr": "10.144.144.3",
                "next_hop_peer_id": 200,
                "cost": 2,
                "hostname": "gamma",
                "version": "",
            },
        },
    ],
}


@pytest.fixture
def sample_detail_dict():
    return json.loads(json.dumps(SAMPLE_DETAIL))


@pytest.fixture
def sample_detail(sample_detail_dict):
    return NetworkInstanceDetail.from_dict(sample_detail_dict)


@pytest.fixture
def sample_export(tmp_path, sample_detail_dict):
    """Write a two-instance status export and return its path."""
    export = {
        "selected": "net-a",
        "instances": [
            {"instance_id": "net-a", "running": True, "detail": sample_detail_dict},
            {"instance_id": "net-b", "running": False, "error_msg": "tun device busy"},
        ],
    }
    path = tmp_path / "status.json"
    path.write_text(json.dumps(export))
    return path


@pytest.fixture
def sample_config(tmp_path):
    """Create a sample config file and return its path."""
    config_content = textwrap.dedent("""\
        instance = "net-b"

        [source]
        path = "/run/meshgaze/status.json"
        timeout = 3

        [refresh]
        poll_interval = 0.5
        rate_interval = 5

        [display]
        si_units = true
        precision = 2

        [logging]
        level = "DEBUG"
    """)
    config_file = tmp_path / "config.toml"
    config_file.write_text(config_content)
    return config_file


@pytest.fixture
def default_config():
    """Return a default AppConfig."""
    return AppConfig()
