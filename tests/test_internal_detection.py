import socket

import pytest

import gpportal.network.dns as dns_mod
from gpportal.network.detection import is_external_gateway
from gpportal.transform.xml_utils import parse_document

from tests.conftest import FakeResolver


def _doc(*elements: str):
    return parse_document("<policy>" + "".join(elements) + "</policy>")


def test_no_marker_skips_detection(fake_resolver):
    root = _doc("<ip-address>10.0.0.1</ip-address>", "<host>vpn.example</host>")

    assert is_external_gateway(root, fake_resolver) is True
    assert fake_resolver.lookups == []


def test_matching_reverse_lookup_marks_internal():
    resolver = FakeResolver({"10.0.0.1": "vpn.example"})
    root = _doc(
        "<internal-host-detection/>",
        "<ip-address>10.0.0.1</ip-address>",
        "<host>vpn.example</host>",
    )

    assert is_external_gateway(root, resolver) is False


@pytest.mark.parametrize("names", [{}, {"10.0.0.1": "other.example"}])
def test_failing_or_mismatched_lookup_stays_external(names):
    resolver = FakeResolver(names)
    root = _doc(
        "<internal-host-detection>yes</internal-host-detection>",
        "<ip-address>10.0.0.1</ip-address>",
        "<host>vpn.example</host>",
    )

    assert is_external_gateway(root, resolver) is True


def test_ipv4_match_skips_ipv6_lookup():
    resolver = FakeResolver({"10.0.0.1": "vpn.example", "fd00::1": "vpn6.example"})
    root = _doc(
        "<internal-host-detection/>",
        "<ip-address>10.0.0.1</ip-address>",
        "<host>vpn.example</host>",
        "<ipv6-address>fd00::1</ipv6-address>",
        "<ipv6-host>vpn6.example</ipv6-host>",
    )

    assert is_external_gateway(root, resolver) is False
    assert resolver.lookups == ["10.0.0.1"]


def test_ipv6_pair_checked_after_ipv4_mismatch():
    resolver = FakeResolver({"10.0.0.1": "elsewhere", "fd00::1": "vpn6.example"})
    root = _doc(
        "<internal-host-detection/>",
        "<ip-address>10.0.0.1</ip-address>",
        "<host>vpn.example</host>",
        "<ipv6-address>fd00::1</ipv6-address>",
        "<ipv6-host>vpn6.example</ipv6-host>",
    )

    assert is_external_gateway(root, resolver) is False
    assert resolver.lookups == ["10.0.0.1", "fd00::1"]


def test_invalid_ip_is_skipped_not_fatal(caplog):
    resolver = FakeResolver({"fd00::1": "vpn6.example"})
    root = _doc(
        "<internal-host-detection/>",
        "<ip-address>not-an-ip</ip-address>",
        "<host>vpn.example</host>",
        "<ipv6-address>fd00::1</ipv6-address>",
        "<ipv6-host>vpn6.example</ipv6-host>",
    )

    assert is_external_gateway(root, resolver) is False
    assert resolver.lookups == ["fd00::1"]
    assert "Invalid IP address not-an-ip" in caplog.text


def test_pairs_with_empty_fields_are_ignored(fake_resolver):
    root = _doc(
        "<internal-host-detection/>",
        "<ip-address>10.0.0.1</ip-address>",
        "<host></host>",
        "<ipv6-address/>",
        "<ipv6-host>vpn6.example</ipv6-host>",
    )

    assert is_external_gateway(root, fake_resolver) is True
    assert fake_resolver.lookups == []


def test_socket_resolver_returns_hostname(monkeypatch):
    monkeypatch.setattr(
        dns_mod.socket,
        "gethostbyaddr",
        lambda ip: ("vpn.example", [], [ip]),
    )

    assert dns_mod.SocketReverseResolver().lookup("10.0.0.1") == "vpn.example"


def test_socket_resolver_swallows_lookup_errors(monkeypatch, caplog):
    def raising(ip):
        raise socket.herror(1, "Unknown host")

    monkeypatch.setattr(dns_mod.socket, "gethostbyaddr", raising)

    assert dns_mod.SocketReverseResolver().lookup("10.0.0.1") is None
    assert "DNS lookup failed for 10.0.0.1" in caplog.text
