"""Decide whether the client sits inside the portal's network.

When the portal includes ``internal-host-detection`` it also sends up to two
address/hostname pairs. If reverse DNS for one of those addresses resolves to
exactly the hostname the portal gave, the client is on the internal network
and the internal gateway list applies.
"""

import ipaddress
import logging
import xml.etree.ElementTree as ET
from typing import List, Optional, Tuple

from gpportal.network.dns import ReverseResolver
from gpportal.transform.xml_utils import get_child_text

LOGGER = logging.getLogger(__name__)

DETECTION_MARKER = "internal-host-detection"
# IPv4 pair first; the first confirmed match ends the scan.
ADDRESS_HOST_TAGS: List[Tuple[str, str]] = [
    ("ip-address", "host"),
    ("ipv6-address", "ipv6-host"),
]


def _confirms_internal(ip_address: str, host: str, resolver: ReverseResolver) -> bool:
    try:
        ip = ipaddress.ip_address(ip_address)
    except ValueError as exc:
        LOGGER.warning("Invalid IP address %s: %s", ip_address, exc)
        return False

    resolved: Optional[str] = resolver.lookup(str(ip))
    if resolved is None:
        return False
    if resolved != host:
        LOGGER.debug("Reverse lookup for %s returned %s, expected %s", ip, resolved, host)
        return False
    return True


def is_external_gateway(root: ET.Element, resolver: ReverseResolver) -> bool:
    """Return ``False`` only when internal host detection is confirmed."""
    if get_child_text(root, DETECTION_MARKER) is None:
        return True

    LOGGER.info("internal-host-detection returned, performing DNS lookup")
    for address_tag, host_tag in ADDRESS_HOST_TAGS:
        ip_address = get_child_text(root, address_tag)
        host = get_child_text(root, host_tag)
        if not ip_address or not host:
            continue
        if _confirms_internal(ip_address, host, resolver):
            LOGGER.info("Internal host detected via %s, using internal gateways", address_tag)
            return False

    return True


__all__ = ["DETECTION_MARKER", "is_external_gateway"]
