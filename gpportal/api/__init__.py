"""API clients for GlobalProtect endpoints."""

from gpportal.api.portal import PortalClient, retrieve_config

__all__ = ["PortalClient", "retrieve_config"]
