"""Shared pytest fixtures for the gpportal tests.

Provides fake HTTP and DNS collaborators so no test touches the network.
"""

from pathlib import Path
from typing import Dict, List, Optional

import pytest

from gpportal.config import AppConfig
from gpportal.credential import PasswordCredential
from gpportal.params import GpParams


@pytest.fixture
def app_config(tmp_path: Path) -> AppConfig:
    """Application config fixture.

    Points logging to a temporary directory so tests never write to the repo.
    """
    return AppConfig(
        log_directory=tmp_path,
        log_level="INFO",
    )


class FakeResponse:
    def __init__(
        self,
        status_code: int = 200,
        text: str = "",
        headers: Optional[Dict[str, str]] = None,
        reason: str = "OK",
    ) -> None:
        self.status_code = status_code
        self.text = text
        self.headers = headers or {}
        self.reason = reason


class FakeSession:
    """Records ``post`` calls and replays a canned response or exception."""

    def __init__(self, response=None, error: Optional[Exception] = None) -> None:
        self.response = response or FakeResponse()
        self.error = error
        self.calls: List[tuple] = []
        self.closed = False

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response

    def close(self) -> None:
        self.closed = True


class FakeResolver:
    """Reverse resolver backed by a dict; records the order of lookups."""

    def __init__(self, names: Optional[Dict[str, str]] = None) -> None:
        self.names = names or {}
        self.lookups: List[str] = []

    def lookup(self, ip: str) -> Optional[str]:
        self.lookups.append(ip)
        return self.names.get(ip)


@pytest.fixture
def fake_resolver() -> FakeResolver:
    return FakeResolver()


@pytest.fixture
def credential() -> PasswordCredential:
    return PasswordCredential(username="alice", password="s3cret")


@pytest.fixture
def gp_params() -> GpParams:
    return GpParams(computer="test-host")


PORTAL_CONFIG_XML = """<?xml version="1.0" encoding="UTF-8"?>
<policy>
  <portal-name>portal</portal-name>
  <portal-userauthcookie>user-cookie</portal-userauthcookie>
  <portal-prelogonuserauthcookie>prelogon-cookie</portal-prelogonuserauthcookie>
  <config-digest>digest-123</config-digest>
  <gateways>
    <external>
      <list>
        <entry name="us.vpn.example.com">
          <priority-rule>
            <entry name="US"><priority>1</priority></entry>
            <entry name="Any"><priority>5</priority></entry>
          </priority-rule>
          <priority>2</priority>
          <description>US East</description>
        </entry>
        <entry name="eu.vpn.example.com">
          <priority-rule>
            <entry name="EU"><priority>1</priority></entry>
          </priority-rule>
          <priority>1</priority>
          <description>Europe</description>
        </entry>
      </list>
    </external>
    <internal>
      <list>
        <entry name="10.1.1.1">
          <description>Internal HQ</description>
        </entry>
      </list>
    </internal>
  </gateways>
</policy>
"""


@pytest.fixture
def portal_config_xml() -> str:
    return PORTAL_CONFIG_XML
