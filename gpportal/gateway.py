"""Gateway records and their per-region priority rules."""

from dataclasses import dataclass, field
from typing import Any, Dict, Sequence

ANY_REGION = "Any"
# Upper bound of the unsigned 32-bit priorities the portal sends; also used
# when a priority is missing or unparsable so such rules never win.
MAX_PRIORITY = 0xFFFFFFFF


@dataclass(frozen=True)
class PriorityRule:
    """One region-to-priority row; lower priority is preferred.

    ``name`` is a region code or ``ANY_REGION``.
    """

    name: str
    priority: int

    def matches(self, region: str) -> bool:
        return self.name == region or self.name == ANY_REGION

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "priority": self.priority}


@dataclass(frozen=True)
class Gateway:
    name: str
    address: str
    priority: int = 0
    priority_rules: Sequence[PriorityRule] = field(default_factory=tuple)
    external: bool = True

    def __post_init__(self) -> None:
        # Stored as a tuple so gateways stay hashable.
        object.__setattr__(self, "priority_rules", tuple(self.priority_rules))

    def matches(self, name_or_address: str) -> bool:
        return self.name == name_or_address or self.address == name_or_address

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "address": self.address,
            "priority": self.priority,
            "priorityRules": [rule.to_dict() for rule in self.priority_rules],
            "external": self.external,
        }


__all__ = ["ANY_REGION", "MAX_PRIORITY", "Gateway", "PriorityRule"]
