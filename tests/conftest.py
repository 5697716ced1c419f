"""
Pytest configuration shared by the icejobs test suite.
"""

import io
import pytest

from icejobs.env import Env
from icejobs.logging import LoggingConfig, LoggerStream
from icejobs.monitor import SessionContext


@pytest.fixture(autouse=True)
def reset_logging_config():
    """Keep log level/output changes made by one test out of the next."""
    LoggingConfig().reset()
    yield
    LoggingConfig().reset()


@pytest.fixture(autouse=True)
def clear_icejobs_environment(monkeypatch: pytest.MonkeyPatch):
    for envar_name in Env.types_map():
        monkeypatch.delenv(envar_name, raising=False)


@pytest.fixture
def log_output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def test_logger(log_output: io.StringIO) -> LoggerStream:
    return LoggerStream(
        name="test",
        template="{level} - {message}",
        stdout=log_output,
        stderr=log_output,
    )


@pytest.fixture
def session() -> SessionContext:
    return SessionContext()
