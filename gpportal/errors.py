"""Exception hierarchy for portal configuration retrieval.

Callers can catch ``PortalError`` for any failure raised by this package, or
one of the narrower classes to react to a specific cause.
"""

from typing import Optional


class PortalError(Exception):
    """Base class for every portal retrieval failure."""


class PortalNetworkError(PortalError):
    """The portal could not be reached at the transport level."""


class PortalConfigError(PortalError):
    """The portal answered but no usable configuration came back."""


class ConfigEndpointNotFoundError(PortalConfigError):
    """The configuration endpoint answered 404."""

    def __init__(self, message: str = "Config endpoint not found") -> None:
        super().__init__(message)


class EmptyConfigResponseError(PortalConfigError):
    def __init__(self, message: str = "Empty portal config response") -> None:
        super().__init__(message)


class InvalidConfigDocumentError(PortalConfigError):
    """The response body is not a well-formed XML document."""


class PortalStatusError(PortalConfigError):
    """Any other 4xx/5xx answer from the configuration endpoint."""

    def __init__(self, status: int, reason: str) -> None:
        super().__init__(f"Portal config error: {reason}")
        self.status = status
        self.reason = reason


class GpHttpError(Exception):
    """Structured HTTP failure produced while reading a portal response."""

    def __init__(self, status: Optional[int], reason: str) -> None:
        super().__init__(f"HTTP {status}: {reason}")
        self.status = status
        self.reason = reason

    def is_status_error(self) -> bool:
        return self.status is not None and 400 <= self.status < 600


__all__ = [
    "ConfigEndpointNotFoundError",
    "EmptyConfigResponseError",
    "GpHttpError",
    "InvalidConfigDocumentError",
    "PortalConfigError",
    "PortalError",
    "PortalNetworkError",
    "PortalStatusError",
]
