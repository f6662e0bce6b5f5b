"""Read GlobalProtect HTTP responses into a body or a structured error."""

import logging

import requests

from gpportal.errors import GpHttpError

LOGGER = logging.getLogger(__name__)

PAN_STATUS_HEADER = "x-private-pan-sslvpn"
MAX_REASON_LENGTH = 256

_HEADER_REASONS = {
    "auth-failed": "Invalid username or password",
    "auth-failed-password-expired": "Password expired",
}


def _error_reason(response: requests.Response) -> str:
    header = (response.headers.get(PAN_STATUS_HEADER) or "").strip()
    if header:
        return _HEADER_REASONS.get(header, header)

    try:
        body = (response.text or "").strip()
    except requests.RequestException:
        body = ""
    if body:
        return body[:MAX_REASON_LENGTH]

    return response.reason or f"HTTP {response.status_code}"


def parse_gp_response(response: requests.Response) -> str:
    """Return the decoded body of a successful response.

    Raises:
        GpHttpError: For 4xx/5xx statuses, or when the body cannot be decoded.
    """
    status = response.status_code
    if 400 <= status < 600:
        raise GpHttpError(status, _error_reason(response))

    try:
        return response.text or ""
    except requests.RequestException as exc:
        LOGGER.debug("Failed to decode portal response body: %s", exc)
        raise GpHttpError(status, str(exc)) from exc


__all__ = ["parse_gp_response", "PAN_STATUS_HEADER"]
