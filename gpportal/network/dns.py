"""Reverse-DNS lookups behind a one-method capability."""

import logging
import socket
from typing import Optional, Protocol

from gpportal.logging_utils import perf_span

LOGGER = logging.getLogger(__name__)


class ReverseResolver(Protocol):
    def lookup(self, ip: str) -> Optional[str]:
        """Return the PTR name for ``ip`` or ``None`` when it cannot be resolved."""


class SocketReverseResolver:
    """Resolve through the system resolver (``socket.gethostbyaddr``)."""

    def lookup(self, ip: str) -> Optional[str]:
        with perf_span("dns.reverse_lookup", tags={"ip": ip}, level=logging.DEBUG, logger=LOGGER):
            try:
                hostname, _aliases, _addresses = socket.gethostbyaddr(ip)
            except OSError as exc:
                LOGGER.warning("DNS lookup failed for %s: %s", ip, exc)
                return None
        return hostname


__all__ = ["ReverseResolver", "SocketReverseResolver"]
