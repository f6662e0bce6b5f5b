import pytest

from gpportal.network.server import normalize_server, remove_url_scheme


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("vpn.example.com", "https://vpn.example.com"),
        ("  vpn.example.com  ", "https://vpn.example.com"),
        ("https://vpn.example.com/global-protect/login.esp", "https://vpn.example.com"),
        ("http://vpn.example.com:8443/", "http://vpn.example.com:8443"),
        ("HTTPS://VPN.Example.com", "https://vpn.example.com"),
        ("user@vpn.example.com?x=1", "https://vpn.example.com"),
        ("[fd00::1]:443", "https://[fd00::1]"),
        ("[fd00::1]:4443", "https://[fd00::1]:4443"),
        ("https://vpn.example.com:443", "https://vpn.example.com"),
        ("http://vpn.example.com:80/login", "http://vpn.example.com"),
        ("http://vpn.example.com:443", "http://vpn.example.com:443"),
        ("10.0.0.1", "https://10.0.0.1"),
    ],
)
def test_normalize_server(raw, expected):
    assert normalize_server(raw) == expected


@pytest.mark.parametrize("raw", ["", "   ", "https://", "vpn.example.com:notaport"])
def test_normalize_server_rejects_invalid(raw):
    with pytest.raises(ValueError):
        normalize_server(raw)


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://vpn.example.com", "vpn.example.com"),
        ("http://vpn.example.com:8080", "vpn.example.com:8080"),
        ("vpn.example.com", "vpn.example.com"),
    ],
)
def test_remove_url_scheme(url, expected):
    assert remove_url_scheme(url) == expected
