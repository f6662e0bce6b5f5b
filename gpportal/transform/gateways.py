"""Extract the gateway list from a portal configuration document.

The portal groups gateways by reachability:

    <gateways>
      <external><list>
        <entry name="gw1.example.com">
          <description>US East</description>
          <priority>1</priority>
          <priority-rule>
            <entry name="US"><priority>1</priority></entry>
            <entry name="Any"><priority>3</priority></entry>
          </priority-rule>
        </entry>
      </list></external>
      <internal><list>...</list></internal>
    </gateways>

Only the list matching the internal/external verdict is read.
"""

import logging
import xml.etree.ElementTree as ET
from typing import List, Optional, Tuple

from gpportal.gateway import MAX_PRIORITY, Gateway, PriorityRule
from gpportal.transform.xml_utils import child_text, find_first

LOGGER = logging.getLogger(__name__)


def _to_priority(value: Optional[str]) -> int:
    # Plain decimal digits only; int() would also take signs and underscores.
    if not value or not (value.isascii() and value.isdigit()):
        return MAX_PRIORITY
    priority = int(value)
    if priority > MAX_PRIORITY:
        return MAX_PRIORITY
    return priority


def _parse_priority_rules(entry: ET.Element) -> Tuple[PriorityRule, ...]:
    node = entry.find("priority-rule")
    if node is None:
        return ()
    return tuple(
        PriorityRule(
            name=rule.get("name", ""),
            priority=_to_priority(child_text(rule, "priority")),
        )
        for rule in node.findall("entry")
    )


def _parse_gateway(entry: ET.Element, external: bool) -> Optional[Gateway]:
    address = (entry.get("name") or "").strip()
    if not address:
        LOGGER.debug("Skipping gateway entry without an address")
        return None

    name = child_text(entry, "description") or address
    return Gateway(
        name=name,
        address=address,
        priority=_to_priority(child_text(entry, "priority")),
        priority_rules=_parse_priority_rules(entry),
        external=external,
    )


def parse_gateways(root: ET.Element, external: bool) -> Optional[List[Gateway]]:
    """Return the gateways of the external or internal list.

    Returns ``None`` when the document has no such list.
    """
    gateways_node = find_first(root, "gateways")
    if gateways_node is None:
        return None

    group = gateways_node.find("external" if external else "internal")
    if group is None:
        return None

    list_node = group.find("list")
    if list_node is None:
        return None

    gateways = []
    for entry in list_node.findall("entry"):
        gateway = _parse_gateway(entry, external)
        if gateway is not None:
            gateways.append(gateway)
    return gateways


__all__ = ["parse_gateways"]
