"""Portal address normalization."""

from urllib.parse import urlsplit

_SCHEMES = ("https://", "http://")
_DEFAULT_PORTS = {"https": 443, "http": 80}


def normalize_server(server: str) -> str:
    """Return ``scheme://host[:port]`` for a user-supplied portal string.

    A missing scheme defaults to ``https``. Paths, queries, userinfo and the
    scheme's default port are dropped.

    Raises:
        ValueError: If the string is empty, has no host, or has a bad port.
    """
    candidate = (server or "").strip()
    if not candidate:
        raise ValueError("Portal address must be provided")

    if not candidate.lower().startswith(_SCHEMES):
        candidate = f"https://{candidate}"

    parts = urlsplit(candidate)
    host = parts.hostname
    if not host:
        raise ValueError(f"Invalid server URL: missing host in {server!r}")

    try:
        port = parts.port
    except ValueError:
        raise ValueError(f"Invalid server URL: bad port in {server!r}") from None

    scheme = parts.scheme.lower()
    if port == _DEFAULT_PORTS[scheme]:
        port = None

    if ":" in host:
        host = f"[{host}]"
    suffix = f":{port}" if port is not None else ""
    return f"{scheme}://{host}{suffix}"


def remove_url_scheme(url: str) -> str:
    for scheme in _SCHEMES:
        if url.lower().startswith(scheme):
            return url[len(scheme):]
    return url


__all__ = ["normalize_server", "remove_url_scheme"]
