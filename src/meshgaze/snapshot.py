"""Snapshot assembly and dialog payloads for the selected instance."""

from __future__ import annotations

from meshgaze.models import NetworkInstanceDetail, NodeInfo, PeerRoutePair, Route


def local_entry(node: NodeInfo) -> PeerRoutePair:
    """Synthetic route-table row for the local node: no peer, no cost."""
    return PeerRoutePair(
        route=Route(
            ipv4_addr=node.virtual_ipv4,
            hostname=node.hostname,
            version=node.version,
        ),
        peer=None,
    )


def assemble_snapshot(detail: NetworkInstanceDetail | None) -> list[PeerRoutePair]:
    """Local node first, then the store's peer/route pairs in store order."""
    if detail is None:
        return []
    return [local_entry(detail.my_node_info), *detail.peer_route_pairs]


def peer_count(snapshot: list[PeerRoutePair]) -> int:
    """Displayed peer count. Includes the local node entry."""
    return len(snapshot)


def portal_config_text(node: NodeInfo, help_url: str) -> str:
    if not node.vpn_portal_cfg:
        return ""
    return f"# Setup guide: {help_url}\n" + node.vpn_portal_cfg


def event_log_text(detail: NetworkInstanceDetail | None) -> str:
    if detail is None:
        return ""
    return "\n".join(detail.events)
