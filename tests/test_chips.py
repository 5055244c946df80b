"""Tests for meshgaze.chips."""

import pytest

from meshgaze.chips import info_chips, nat_type_label
from meshgaze.models import NatType, NodeAddresses, NodeInfo, StunInfo


class TestInfoChips:
    def test_full_node(self, sample_detail):
        assert info_chips(sample_detail.my_node_info) == [
            "Virtual IPv4: 10.144.144.1",
            "Local IPv4 1: 192.168.1.10",
            "Local IPv4 2: 172.17.0.1",
            "Local IPv6 1: fd00::10",
            "Public IPv4: 203.0.113.7",
            "Listener 1: tcp://0.0.0.0:11010",
            "Listener 2: udp://0.0.0.0:11010",
            "UDP NAT: Full Cone",
        ]

    def test_idempotent(self, sample_detail):
        node = sample_detail.my_node_info
        assert info_chips(node) == info_chips(node)

    def test_public_ipv6(self):
        node = NodeInfo(
            virtual_ipv4="10.0.0.1",
            ips=NodeAddresses(public_ipv4="", public_ipv6="2001:db8::1"),
        )
        assert info_chips(node) == ["Virtual IPv4: 10.0.0.1", "Public IPv6: 2001:db8::1"]

    def test_unknown_nat_omitted(self):
        node = NodeInfo(virtual_ipv4="10.0.0.1", stun_info=StunInfo(udp_nat_type=NatType.UNKNOWN))
        assert info_chips(node) == ["Virtual IPv4: 10.0.0.1"]

    def test_missing_nat_omitted(self):
        assert info_chips(NodeInfo(virtual_ipv4="10.0.0.1")) == ["Virtual IPv4: 10.0.0.1"]

    def test_no_virtual_ip(self):
        assert info_chips(NodeInfo()) == ["Virtual IPv4: -"]


class TestNatTypeLabel:
    @pytest.mark.parametrize(
        "value,label",
        [
            (1, "Open Internet"),
            (2, "No PAT"),
            (3, "Full Cone"),
            (4, "Restricted"),
            (5, "Port Restricted"),
            (6, "Symmetric"),
            (7, "Symmetric UDP Firewall"),
        ],
    )
    def test_numeric(self, value, label):
        assert nat_type_label(value) == label

    def test_by_name(self):
        assert nat_type_label("PortRestricted") == "Port Restricted"
        assert nat_type_label("SymUdpFirewall") == "Symmetric UDP Firewall"
        assert nat_type_label("NoPAT") == "No PAT"

    def test_enum_member(self):
        assert nat_type_label(NatType.FULL_CONE) == "Full Cone"

    def test_unknown_and_unmapped(self):
        assert nat_type_label(0) is None
        assert nat_type_label(None) is None
        assert nat_type_label(42) is None
        assert nat_type_label("Carrier") is None
