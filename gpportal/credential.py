"""Credentials carried in GlobalProtect portal requests.

Every credential renders the same five form fields so the portal always sees a
complete login form; fields the credential does not hold are sent empty.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

_MASK = "***"


def _mask(value: Optional[str]) -> Optional[str]:
    return _MASK if value else value


@dataclass(frozen=True)
class Credential:
    """Base credential; only knows the username."""

    username: str

    def _secret_params(self) -> Dict[str, str]:
        return {}

    def to_params(self) -> Dict[str, str]:
        params = {
            "user": self.username,
            "passwd": "",
            "prelogin-cookie": "",
            "portal-userauthcookie": "",
            "portal-prelogonuserauthcookie": "",
        }
        params.update(self._secret_params())
        return params

    def to_dict(self) -> Dict[str, Any]:
        return {"username": self.username}


@dataclass(frozen=True)
class PasswordCredential(Credential):
    password: str = field(default="", repr=False)

    def _secret_params(self) -> Dict[str, str]:
        return {"passwd": self.password}

    def to_dict(self) -> Dict[str, Any]:
        return {"username": self.username, "password": self.password}

    def __repr__(self) -> str:
        return f"PasswordCredential(username={self.username!r}, password={_mask(self.password)!r})"


@dataclass(frozen=True)
class PreloginCookieCredential(Credential):
    """Cookie returned by a SAML prelogin flow."""

    prelogin_cookie: str = field(default="", repr=False)
    token: Optional[str] = field(default=None, repr=False)

    def _secret_params(self) -> Dict[str, str]:
        params = {"prelogin-cookie": self.prelogin_cookie}
        if self.token:
            params["token"] = self.token
        return params

    def to_dict(self) -> Dict[str, Any]:
        return {
            "username": self.username,
            "preloginCookie": self.prelogin_cookie,
            "token": self.token,
        }

    def __repr__(self) -> str:
        return (
            f"PreloginCookieCredential(username={self.username!r}, "
            f"prelogin_cookie={_mask(self.prelogin_cookie)!r})"
        )


@dataclass(frozen=True)
class AuthCookieCredential(Credential):
    """Session cookies issued by the portal with its configuration.

    Both cookies may be empty strings; the portal omits them for some
    authentication profiles.
    """

    user_auth_cookie: str = field(default="", repr=False)
    prelogon_user_auth_cookie: str = field(default="", repr=False)

    def _secret_params(self) -> Dict[str, str]:
        return {
            "portal-userauthcookie": self.user_auth_cookie,
            "portal-prelogonuserauthcookie": self.prelogon_user_auth_cookie,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "username": self.username,
            "userAuthCookie": self.user_auth_cookie,
            "prelogonUserAuthCookie": self.prelogon_user_auth_cookie,
        }

    def __repr__(self) -> str:
        return (
            f"AuthCookieCredential(username={self.username!r}, "
            f"user_auth_cookie={_mask(self.user_auth_cookie)!r}, "
            f"prelogon_user_auth_cookie={_mask(self.prelogon_user_auth_cookie)!r})"
        )


@dataclass(frozen=True)
class CachedCredential(Credential):
    """A stored password and/or auth cookie from an earlier session."""

    password: Optional[str] = field(default=None, repr=False)
    auth_cookie: Optional[AuthCookieCredential] = field(default=None, repr=False)

    def _secret_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        if self.password:
            params["passwd"] = self.password
        if self.auth_cookie is not None:
            params.update(self.auth_cookie._secret_params())
        return params

    def to_dict(self) -> Dict[str, Any]:
        return {
            "username": self.username,
            "password": self.password,
            "authCookie": self.auth_cookie.to_dict() if self.auth_cookie else None,
        }

    def __repr__(self) -> str:
        cookie = _MASK if self.auth_cookie is not None else None
        return (
            f"CachedCredential(username={self.username!r}, "
            f"password={_mask(self.password)!r}, auth_cookie={cookie!r})"
        )


__all__ = [
    "AuthCookieCredential",
    "CachedCredential",
    "Credential",
    "PasswordCredential",
    "PreloginCookieCredential",
]
