"""Portal configuration returned by a successful retrieval."""

from typing import Any, Dict, List, Optional, Sequence, Tuple

from gpportal.credential import AuthCookieCredential, Credential
from gpportal.gateway import MAX_PRIORITY, Gateway


class PortalConfig:
    """Parsed portal configuration.

    The gateway list is never empty. It is only mutated by ``sort_gateways``;
    callers sharing one instance across threads must synchronize that call.
    """

    def __init__(
        self,
        portal: str,
        auth_cookie: AuthCookieCredential,
        config_cred: Credential,
        gateways: Sequence[Gateway],
        config_digest: Optional[str] = None,
    ) -> None:
        if not gateways:
            raise ValueError("PortalConfig requires at least one gateway")
        self._portal = portal
        self._auth_cookie = auth_cookie
        self._config_cred = config_cred
        self._gateways: List[Gateway] = list(gateways)
        self._config_digest = config_digest

    @property
    def portal(self) -> str:
        return self._portal

    @property
    def auth_cookie(self) -> AuthCookieCredential:
        return self._auth_cookie

    @property
    def config_cred(self) -> Credential:
        return self._config_cred

    @property
    def gateways(self) -> Tuple[Gateway, ...]:
        return tuple(self._gateways)

    @property
    def config_digest(self) -> Optional[str]:
        return self._config_digest

    def find_gateway(self, name_or_address: str) -> Optional[Gateway]:
        """Return the first gateway whose name or address equals the input."""
        for gateway in self._gateways:
            if gateway.matches(name_or_address):
                return gateway
        return None

    def find_preferred_gateway(self, region: str) -> Gateway:
        """Return the gateway with the lowest priority rule for ``region``.

        Rules for the region and ``Any`` rules both count. Ties keep the first
        rule seen in list order. When no rule applies, the gateway with the
        lowest baseline priority is returned.
        """
        preferred: Optional[Gateway] = None
        lowest_priority = MAX_PRIORITY

        for gateway in self._gateways:
            for rule in gateway.priority_rules:
                if rule.matches(region) and rule.priority < lowest_priority:
                    preferred = gateway
                    lowest_priority = rule.priority

        if preferred is None:
            return min(self._gateways, key=lambda gateway: gateway.priority)
        return preferred

    def sort_gateways(self, region: str) -> None:
        """Swap the preferred gateway for ``region`` into the first slot.

        This is a single exchange with position 0, not a move-to-front: the
        gateway previously first takes the preferred gateway's old slot.
        """
        preferred = self.find_preferred_gateway(region)
        index = next(i for i, gateway in enumerate(self._gateways) if gateway is preferred)
        self._gateways[0], self._gateways[index] = self._gateways[index], self._gateways[0]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "portal": self._portal,
            "authCookie": self._auth_cookie.to_dict(),
            "configCred": self._config_cred.to_dict(),
            "gateways": [gateway.to_dict() for gateway in self._gateways],
            "configDigest": self._config_digest,
        }

    def __repr__(self) -> str:
        return (
            f"PortalConfig(portal={self._portal!r}, gateways={len(self._gateways)}, "
            f"config_digest={self._config_digest!r})"
        )


__all__ = ["PortalConfig"]
