"""Client for the GlobalProtect portal configuration endpoint.

One call posts the credential to ``/global-protect/getconfig.esp``, works out
whether the client is on the internal network, and assembles a
``PortalConfig`` from the returned XML.
"""

import logging
import xml.etree.ElementTree as ET
from typing import Dict, Optional

import requests

from gpportal.credential import AuthCookieCredential, Credential
from gpportal.errors import (
    ConfigEndpointNotFoundError,
    EmptyConfigResponseError,
    GpHttpError,
    PortalConfigError,
    PortalNetworkError,
    PortalStatusError,
)
from gpportal.gateway import Gateway
from gpportal.logging_utils import perf
from gpportal.network import (
    ReverseResolver,
    SocketReverseResolver,
    is_external_gateway,
    normalize_server,
    parse_gp_response,
    remove_url_scheme,
)
from gpportal.params import GpParams
from gpportal.portal_config import PortalConfig
from gpportal.transform import get_child_text, parse_document, parse_gateways

LOGGER = logging.getLogger(__name__)

CONFIG_PATH = "/global-protect/getconfig.esp"


def build_form(server: str, credential: Credential, params: GpParams) -> Dict[str, str]:
    """Merge credential fields, request fields, then ``server``/``host``."""
    form = dict(credential.to_params())
    form.update(params.to_params())
    form["server"] = server
    form["host"] = server
    return form


def parse_portal_config(
    body: str,
    server: str,
    credential: Credential,
    external_gateway: bool,
    root: Optional[ET.Element] = None,
) -> PortalConfig:
    """Build a ``PortalConfig`` from a getconfig response body.

    ``root`` may be passed when the caller already parsed ``body``.

    Raises:
        EmptyConfigResponseError: If ``body`` is empty.
        InvalidConfigDocumentError: If ``body`` is not XML.
    """
    if not body:
        raise EmptyConfigResponseError()
    if root is None:
        root = parse_document(body)

    gateways = parse_gateways(root, external_gateway)
    if gateways is None:
        LOGGER.info("No gateways found in portal config")
        gateways = []

    user_auth_cookie = get_child_text(root, "portal-userauthcookie") or ""
    prelogon_user_auth_cookie = get_child_text(root, "portal-prelogonuserauthcookie") or ""
    config_digest = get_child_text(root, "config-digest")

    if not gateways:
        gateways = [Gateway(name=server, address=server)]

    return PortalConfig(
        portal=server,
        auth_cookie=AuthCookieCredential(
            username=credential.username,
            user_auth_cookie=user_auth_cookie,
            prelogon_user_auth_cookie=prelogon_user_auth_cookie,
        ),
        config_cred=credential,
        gateways=gateways,
        config_digest=config_digest,
    )


class PortalClient:
    """Wrapper around a Requests session for portal configuration calls."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: float = 10.0,
        resolver: Optional[ReverseResolver] = None,
    ) -> None:
        """Initialize the portal client.

        Args:
            session: Optional pre-configured Requests session.
            timeout: Per-request timeout in seconds.
            resolver: Reverse-DNS capability used for internal host detection;
                defaults to the system resolver.
        """
        if timeout <= 0:
            raise ValueError("timeout must be positive")
        self._session = session or requests.Session()
        self._timeout = timeout
        self._resolver = resolver or SocketReverseResolver()

    def _post_config(self, url: str, form: Dict[str, str], params: GpParams) -> str:
        try:
            response = self._session.post(
                url,
                data=form,
                headers={"User-Agent": params.user_agent},
                timeout=self._timeout,
                verify=not params.ignore_tls_errors,
            )
        except requests.RequestException as exc:
            raise PortalNetworkError(str(exc)) from exc

        try:
            return parse_gp_response(response)
        except GpHttpError as err:
            if err.status == 404:
                raise ConfigEndpointNotFoundError() from err
            if err.is_status_error():
                LOGGER.warning("%s", err)
                raise PortalStatusError(err.status, err.reason) from err
            raise PortalConfigError(err.reason) from err

    @perf("api.retrieve_config", tags={"component": "portal"})
    def retrieve_config(
        self,
        portal: str,
        credential: Credential,
        params: Optional[GpParams] = None,
    ) -> PortalConfig:
        """Retrieve and parse the portal configuration.

        Raises:
            ValueError: If ``portal`` is not a usable address.
            PortalNetworkError: On transport failure.
            PortalConfigError: On any HTTP or document failure.
        """
        params = params or GpParams()
        normalized = normalize_server(portal)
        server = remove_url_scheme(normalized)
        url = f"{normalized}{CONFIG_PATH}"
        form = build_form(server, credential, params)

        LOGGER.info("Portal config, user_agent: %s", params.user_agent)
        body = self._post_config(url, form, params)
        if not body:
            raise EmptyConfigResponseError()

        root = parse_document(body)
        external_gateway = is_external_gateway(root, self._resolver)
        config = parse_portal_config(body, server, credential, external_gateway, root=root)
        LOGGER.info(
            "Retrieved portal config for %s with %s gateway(s)",
            server,
            len(config.gateways),
        )
        return config

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "PortalClient":
        return self

    def __exit__(self, exc_type, exc, exc_tb) -> None:
        self.close()


def retrieve_config(
    portal: str,
    credential: Credential,
    params: Optional[GpParams] = None,
    *,
    session: Optional[requests.Session] = None,
    timeout: float = 10.0,
    resolver: Optional[ReverseResolver] = None,
) -> PortalConfig:
    """Open a ``PortalClient`` for a single retrieval."""
    with PortalClient(session=session, timeout=timeout, resolver=resolver) as client:
        return client.retrieve_config(portal, credential, params)


__all__ = [
    "CONFIG_PATH",
    "PortalClient",
    "build_form",
    "parse_portal_config",
    "retrieve_config",
]
