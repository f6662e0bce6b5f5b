"""Client-identification parameters sent alongside every portal request."""

import socket
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from gpportal.config import AppConfig, DEFAULT_USER_AGENT, normalize_client_os

DEFAULT_CLIENT_VERSION_CODE = "4100"

DEFAULT_OS_VERSIONS: Dict[str, str] = {
    "Linux": "Linux",
    "Windows": "Microsoft Windows 10 Pro , 64-bit",
    "Mac": "Apple Mac OS X 13.4.0",
}


@dataclass(frozen=True)
class GpParams:
    """Request configuration for the portal handshake.

    ``extra`` holds additional form fields; they override the defaults
    rendered by ``to_params`` but never the ``server``/``host`` fields the
    client adds last.
    """

    user_agent: str = DEFAULT_USER_AGENT
    client_os: str = "Linux"
    os_version: Optional[str] = None
    client_version: Optional[str] = None
    computer: Optional[str] = None
    ignore_tls_errors: bool = False
    extra: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "client_os", normalize_client_os(self.client_os))

    @classmethod
    def from_config(cls, config: AppConfig, **overrides) -> "GpParams":
        values = {
            "user_agent": config.user_agent,
            "client_os": config.client_os,
            "os_version": config.os_version,
            "client_version": config.client_version,
            "computer": config.computer,
            "ignore_tls_errors": config.ignore_tls_errors,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def resolved_os_version(self) -> str:
        return self.os_version or DEFAULT_OS_VERSIONS[self.client_os]

    def resolved_computer(self) -> str:
        return self.computer or socket.gethostname()

    def to_params(self) -> Dict[str, str]:
        params = {
            "prot": "https:",
            "jnlpReady": "jnlpReady",
            "ok": "Login",
            "direct": "yes",
            "ipv6-support": "yes",
            "inputStr": "",
            "clientVer": DEFAULT_CLIENT_VERSION_CODE,
            "clientos": self.client_os,
            "os-version": self.resolved_os_version(),
            "computer": self.resolved_computer(),
        }
        if self.client_version:
            params["clientgpversion"] = self.client_version
        params.update(self.extra)
        return params


__all__ = ["GpParams", "DEFAULT_OS_VERSIONS"]
