"""Configuration utilities for GlobalProtect portal retrieval.

This module reads environment variables (optionally from an `.env` file) and
produces an application configuration object consumed across the project.

Supported keys: `LOG_DIR`, `LOG_LEVEL`, `APP_NAME`, `GP_USER_AGENT`,
`GP_CLIENT_OS`, `GP_OS_VERSION`, `GP_CLIENT_VERSION`, `GP_COMPUTER`,
`GP_TIMEOUT` and `GP_IGNORE_TLS_ERRORS`.

Usage example:

    from gpportal.config import load_config
    from gpportal.params import GpParams

    config = load_config()
    params = GpParams.from_config(config)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, MutableMapping, Optional

REPO_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_ENV_FILE = REPO_ROOT / ".env"

DEFAULT_APP_NAME = "gp-portal"
DEFAULT_USER_AGENT = "PAN GlobalProtect"
DEFAULT_TIMEOUT_SECONDS = 10.0
CLIENT_OS_CHOICES = ("Linux", "Windows", "Mac")

_TRUTHY = {"1", "true", "t", "yes", "y", "on"}
_FALSY = {"0", "false", "f", "no", "n", "off", ""}


def _load_env_file(path: Path) -> Dict[str, str]:
    """Parse a dotenv-style file into a dictionary."""
    if not path.exists():
        return {}

    data: Dict[str, str] = {}
    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        data[key.strip()] = value.strip().strip("\"'")
    return data


def _merge_envs(dotenv_values: Mapping[str, str], env: MutableMapping[str, str]) -> Dict[str, str]:
    """Merge dotenv values with the current environment, preferring os.environ."""
    merged = dict(dotenv_values)
    merged.update(env)  # os.environ wins
    return merged


def load_environment(env_file: Optional[Path] = None) -> Dict[str, str]:
    """Return the dotenv file merged with ``os.environ``."""
    target_file = env_file or DEFAULT_ENV_FILE
    return _merge_envs(_load_env_file(target_file), os.environ)


def _parse_bool(key: str, value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ValueError(f"{key} must be a boolean value, got {value!r}.")


def _parse_timeout(value: Optional[str]) -> float:
    if value is None or not value.strip():
        return DEFAULT_TIMEOUT_SECONDS
    try:
        timeout = float(value)
    except ValueError:
        raise ValueError(f"GP_TIMEOUT must be numeric, got {value!r}.") from None
    if timeout <= 0:
        raise ValueError("GP_TIMEOUT must be positive.")
    return timeout


def normalize_client_os(value: str) -> str:
    """Map a case-insensitive OS name onto one of ``CLIENT_OS_CHOICES``."""
    for choice in CLIENT_OS_CHOICES:
        if value.strip().lower() == choice.lower():
            return choice
    raise ValueError(
        f"Unsupported client OS {value!r}; expected one of {', '.join(CLIENT_OS_CHOICES)}."
    )


@dataclass(frozen=True)
class AppConfig:
    """Application-level configuration values."""

    log_directory: Path
    log_level: str
    app_name: str = DEFAULT_APP_NAME
    user_agent: str = DEFAULT_USER_AGENT
    client_os: str = "Linux"
    os_version: Optional[str] = None
    client_version: Optional[str] = None
    computer: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    ignore_tls_errors: bool = False


def load_config(env_file: Optional[Path] = None) -> AppConfig:
    """Load configuration values using environment defaults."""
    merged = load_environment(env_file)

    log_directory = Path(merged.get("LOG_DIR", REPO_ROOT / "logs"))
    if not log_directory.is_absolute():
        log_directory = REPO_ROOT / log_directory

    log_level = merged.get("LOG_LEVEL", "INFO").upper()

    return AppConfig(
        log_directory=log_directory,
        log_level=log_level,
        app_name=merged.get("APP_NAME", DEFAULT_APP_NAME),
        user_agent=merged.get("GP_USER_AGENT") or DEFAULT_USER_AGENT,
        client_os=normalize_client_os(merged.get("GP_CLIENT_OS") or "Linux"),
        os_version=merged.get("GP_OS_VERSION") or None,
        client_version=merged.get("GP_CLIENT_VERSION") or None,
        computer=merged.get("GP_COMPUTER") or None,
        timeout=_parse_timeout(merged.get("GP_TIMEOUT")),
        ignore_tls_errors=_parse_bool(
            "GP_IGNORE_TLS_ERRORS", merged.get("GP_IGNORE_TLS_ERRORS"), False
        ),
    )


__all__ = [
    "AppConfig",
    "CLIENT_OS_CHOICES",
    "load_config",
    "load_environment",
    "normalize_client_os",
    "REPO_ROOT",
]
