"""GlobalProtect portal configuration client."""

from gpportal.api import PortalClient, retrieve_config
from gpportal.credential import (
    AuthCookieCredential,
    CachedCredential,
    Credential,
    PasswordCredential,
    PreloginCookieCredential,
)
from gpportal.errors import (
    ConfigEndpointNotFoundError,
    EmptyConfigResponseError,
    InvalidConfigDocumentError,
    PortalConfigError,
    PortalError,
    PortalNetworkError,
    PortalStatusError,
)
from gpportal.gateway import ANY_REGION, Gateway, PriorityRule
from gpportal.params import GpParams
from gpportal.portal_config import PortalConfig

__all__ = [
    "ANY_REGION",
    "AuthCookieCredential",
    "CachedCredential",
    "ConfigEndpointNotFoundError",
    "Credential",
    "EmptyConfigResponseError",
    "Gateway",
    "GpParams",
    "InvalidConfigDocumentError",
    "PasswordCredential",
    "PortalClient",
    "PortalConfig",
    "PortalConfigError",
    "PortalError",
    "PortalNetworkError",
    "PortalStatusError",
    "PreloginCookieCredential",
    "PriorityRule",
    "retrieve_config",
]
