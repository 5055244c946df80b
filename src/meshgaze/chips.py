"""Local node summary chips and NAT type labels."""

from __future__ import annotations

from meshgaze.models import NatType, NodeInfo

NAT_TYPE_LABELS: dict[NatType, str] = {
    NatType.UNKNOWN: "Unknown",
    NatType.OPEN_INTERNET: "Open Internet",
    NatType.NO_PAT: "No PAT",
    NatType.FULL_CONE: "Full Cone",
    NatType.RESTRICTED: "Restricted",
    NatType.PORT_RESTRICTED: "Port Restricted",
    NatType.SYMMETRIC: "Symmetric",
    NatType.SYM_UDP_FIREWALL: "Symmetric UDP Firewall",
}


def nat_type_label(value: NatType | int | str | None) -> str | None:
    """Human label for a NAT type, None when unknown or unmapped."""
    nat = NatType.parse(value)
    if nat is None or nat is NatType.UNKNOWN:
        return None
    return NAT_TYPE_LABELS[nat]


def info_chips(node: NodeInfo) -> list[str]:
    """Project NodeInfo into ordered chip labels for the summary bar.

    Order: virtual IPv4, interface IPv4s, interface IPv6s, public IPs,
    listeners, UDP NAT type.
    """
    chips = [f"Virtual IPv4: {node.virtual_ipv4 or '-'}"]
    for idx, ip in enumerate(node.ips.interface_ipv4s, start=1):
        chips.append(f"Local IPv4 {idx}: {ip}")
    for idx, ip in enumerate(node.ips.interface_ipv6s, start=1):
        chips.append(f"Local IPv6 {idx}: {ip}")
    if node.ips.public_ipv4:
        chips.append(f"Public IPv4: {node.ips.public_ipv4}")
    if node.ips.public_ipv6:
        chips.append(f"Public IPv6: {node.ips.public_ipv6}")
    for idx, listener in enumerate(node.listeners, start=1):
        chips.append(f"Listener {idx}: {listener}")
    nat = nat_type_label(node.stun_info.udp_nat_type)
    if nat:
        chips.append(f"UDP NAT: {nat}")
    return chips
