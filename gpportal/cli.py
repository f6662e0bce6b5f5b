"""Command-line interface for retrieving a GlobalProtect portal configuration."""

import argparse
import getpass
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, List, Optional

from gpportal.api import PortalClient
from gpportal.config import CLIENT_OS_CHOICES, REPO_ROOT, AppConfig, load_config
from gpportal.credential import Credential, PasswordCredential, PreloginCookieCredential
from gpportal.errors import PortalError
from gpportal.logging_utils import configure_logging, perf_span
from gpportal.params import GpParams

LOGGER = logging.getLogger(__name__)

# Keys whose values are passwords, cookies or tokens in PortalConfig.to_dict().
SECRET_KEYS = frozenset(
    {"password", "preloginCookie", "token", "userAuthCookie", "prelogonUserAuthCookie"}
)
REDACTED = "***"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Retrieve a GlobalProtect portal configuration and print it as JSON.",
    )
    parser.add_argument("portal", help="Portal address, with or without scheme.")
    parser.add_argument("--user", required=True, help="Username sent to the portal.")
    secret = parser.add_mutually_exclusive_group()
    secret.add_argument(
        "--password",
        default=None,
        help="Password (defaults to $GP_PASSWORD, then an interactive prompt).",
    )
    secret.add_argument(
        "--prelogin-cookie",
        default=None,
        help="Prelogin cookie obtained from a SAML flow, used instead of a password.",
    )
    parser.add_argument(
        "--region",
        default=None,
        help="Region code used to move the preferred gateway to the front.",
    )
    parser.add_argument("--user-agent", default=None, help="Override GP_USER_AGENT.")
    parser.add_argument(
        "--client-os",
        choices=CLIENT_OS_CHOICES,
        default=None,
        help="Override GP_CLIENT_OS.",
    )
    parser.add_argument(
        "--insecure",
        action="store_true",
        help="Skip TLS certificate verification.",
    )
    parser.add_argument(
        "--show-secrets",
        action="store_true",
        help="Print passwords and cookies in clear text instead of masking them.",
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Alternative dotenv file (default: .env at the repository root).",
    )
    return parser.parse_args(argv)


def build_credential(args: argparse.Namespace) -> Credential:
    if args.prelogin_cookie:
        return PreloginCookieCredential(username=args.user, prelogin_cookie=args.prelogin_cookie)
    password = args.password or os.environ.get("GP_PASSWORD")
    if password is None:
        password = getpass.getpass(f"Password for {args.user}: ")
    return PasswordCredential(username=args.user, password=password)


def redact_secrets(value: Any) -> Any:
    """Return a copy of ``value`` with non-empty secret fields masked."""
    if isinstance(value, dict):
        return {
            key: REDACTED if key in SECRET_KEYS and item else redact_secrets(item)
            for key, item in value.items()
        }
    if isinstance(value, list):
        return [redact_secrets(item) for item in value]
    return value


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        config = load_config(args.env_file)
    except ValueError as exc:
        # Still capture the failure in a log file.
        configure_logging(AppConfig(log_directory=REPO_ROOT / "logs", log_level="INFO"))
        LOGGER.error("Failed to load configuration: %s", exc)
        return 1

    configure_logging(config)

    params = GpParams.from_config(
        config,
        user_agent=args.user_agent,
        client_os=args.client_os,
        ignore_tls_errors=True if args.insecure else None,
    )
    credential = build_credential(args)

    try:
        with PortalClient(timeout=config.timeout) as client:
            with perf_span("portal.total", tags={"app": config.app_name}, logger=LOGGER):
                portal_config = client.retrieve_config(args.portal, credential, params)
    except (PortalError, ValueError) as exc:
        LOGGER.error("Failed to retrieve portal config: %s", exc)
        return 1

    if args.region:
        portal_config.sort_gateways(args.region)

    output = portal_config.to_dict()
    if not args.show_secrets:
        output = redact_secrets(output)
    json.dump(output, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":  # pragma: no cover - module entrypoint
    raise SystemExit(main())
