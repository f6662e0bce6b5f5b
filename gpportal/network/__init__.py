"""Network utilities for talking to a GlobalProtect portal.

Exports:
- ``normalize_server`` / ``remove_url_scheme``: portal address handling.
- ``parse_gp_response``: turn an HTTP response into a body or ``GpHttpError``.
- ``ReverseResolver`` / ``SocketReverseResolver``: reverse-DNS capability.
- ``is_external_gateway``: internal host detection.
"""

from gpportal.network.detection import is_external_gateway
from gpportal.network.dns import ReverseResolver, SocketReverseResolver
from gpportal.network.response import parse_gp_response
from gpportal.network.server import normalize_server, remove_url_scheme

__all__ = [
    "ReverseResolver",
    "SocketReverseResolver",
    "is_external_gateway",
    "normalize_server",
    "parse_gp_response",
    "remove_url_scheme",
]
