import logging
from datetime import datetime

import pytest

from gpportal.logging_utils import (
    configure_logging,
    generate_session_id,
    perf,
    perf_span,
)


def _flush_and_read(log_path) -> str:
    for handler in logging.getLogger().handlers:
        handler.flush()
    return log_path.read_text(encoding="utf-8")


@pytest.fixture(autouse=True)
def _reset_root_handlers():
    yield
    root = logging.getLogger()
    for handler in root.handlers[:]:
        # Only the handlers configure_logging installs; pytest owns the rest.
        if type(handler) in (logging.FileHandler, logging.StreamHandler):
            handler.close()
            root.removeHandler(handler)


def test_configure_logging_creates_session_scoped_file(app_config):
    session_id = "session id/42"
    log_path = configure_logging(app_config, session_id=session_id, include_console=False)

    assert log_path.name == f"{app_config.app_name}-session-id-42.log"
    assert log_path.exists()

    logging.getLogger("gpportal.tests").info("hello from test")

    contents = _flush_and_read(log_path)
    assert "hello from test" in contents
    assert "[session=session id/42]" in contents


def test_generate_session_id_uses_utc_timestamp_format():
    datetime.strptime(generate_session_id(), "%Y%m%dT%H%M%SZ")


def test_perf_decorator_logs_success(app_config):
    log_path = configure_logging(app_config, session_id="perf-ok", include_console=False)

    @perf("test_func", tags={"portal": "vpn.example.com"})
    def fast_fn(x: int) -> int:
        return x + 1

    assert fast_fn(1) == 2

    contents = _flush_and_read(log_path)
    assert "event=perf name=test_func" in contents
    assert "success=true" in contents
    assert "duration_ms=" in contents
    assert "portal='vpn.example.com'" in contents


def test_perf_decorator_logs_failure_and_reraises(app_config):
    log_path = configure_logging(app_config, session_id="perf-fail", include_console=False)

    @perf("explode")
    def boom():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        boom()

    contents = _flush_and_read(log_path)
    assert "event=perf name=explode" in contents
    assert "success=false" in contents


def test_perf_span_logs_block_even_on_error(app_config):
    log_path = configure_logging(app_config, session_id="perf-span", include_console=False)

    with pytest.raises(KeyError):
        with perf_span("lookup", tags={"ip": "10.0.0.1"}):
            raise KeyError("missing")

    contents = _flush_and_read(log_path)
    assert "event=perf name=lookup" in contents
    assert "success=false" in contents
    assert "ip='10.0.0.1'" in contents
