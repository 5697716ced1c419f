"""
Tests for the icejobs command entry point.
"""

import io
import socket

import pytest

from icejobs.commands.root import (
    EXIT_FAILURE,
    EXIT_SUCCESS,
    configure_logging,
    icejobs,
    report,
)
from icejobs.env import Env
from icejobs.errors import StatsParseError
from icejobs.logging import LoggingConfig, LogLevel
from icejobs.monitor import Fatal, Retryable, SessionEnded, SessionEndReason
from tests.unit.monitor.mocks import FakeConnection, connected_discovery, stats


@pytest.fixture
def readable_fd():
    """A descriptor that stays readable for the duration of a test."""
    left, right = socket.socketpair()
    right.send(b"x")

    yield left.fileno()

    left.close()
    right.close()


class TestReport:
    """Tests for mapping a monitor outcome to output and exit status."""

    def test_session_ended_prints_total(self):
        """A finished session prints the total on its own line."""
        output = io.StringIO()

        status = report(
            SessionEnded(
                total_jobs_available=12,
                reason=SessionEndReason.IDLE_TIMEOUT,
            ),
            output,
        )

        assert status == EXIT_SUCCESS
        assert output.getvalue() == "12\n"

    def test_empty_network_prints_zero(self):
        """A scheduler with no workers still reports a total of zero."""
        output = io.StringIO()

        status = report(
            SessionEnded(
                total_jobs_available=0,
                reason=SessionEndReason.IDLE_TIMEOUT,
            ),
            output,
        )

        assert status == EXIT_SUCCESS
        assert output.getvalue() == "0\n"

    @pytest.mark.parametrize(
        "outcome",
        [
            Fatal(StatsParseError("IP:1", "missing MaxJobs")),
            Retryable(),
        ],
    )
    def test_failures_print_nothing(self, outcome):
        """Non-final outcomes exit with failure and no output."""
        output = io.StringIO()

        assert report(outcome, output) == EXIT_FAILURE
        assert output.getvalue() == ""


class TestConfigureLogging:
    """Tests for applying logging settings."""

    def test_disabled_loggers_are_applied(self):
        """Loggers named in ICEJOBS_DISABLED_LOGGERS emit nothing."""
        configure_logging(Env(ICEJOBS_DISABLED_LOGGERS="discovery,monitor"))

        config = LoggingConfig()
        assert config.enabled("discovery", LogLevel.FATAL) is False
        assert config.enabled("monitor", LogLevel.FATAL) is False
        assert config.enabled("aggregator", LogLevel.FATAL) is True

    def test_level_and_output_are_applied(self):
        """Level and output stream come from the settings."""
        configure_logging(
            Env(ICEJOBS_LOG_LEVEL="debug", ICEJOBS_LOG_OUTPUT="stdout")
        )

        config = LoggingConfig()
        assert config.level is LogLevel.DEBUG
        assert config.output.value == "stdout"


class TestIcejobs:
    """Tests for the icejobs command."""

    def test_prints_total_of_distinct_hosts(self, readable_fd):
        """Capacity of each distinct host is summed and printed."""
        connection = FakeConnection(
            bursts=[
                [stats("10.0.0.1", 4), stats("10.0.0.2", 8), stats("10.0.0.1", 4)],
                [None],
            ],
            fd=readable_fd,
        )
        output = io.StringIO()

        status = icejobs(
            env=Env(),
            discovery=connected_discovery(connection),
            output=output,
        )

        assert status == EXIT_SUCCESS
        assert output.getvalue() == "12\n"
        assert connection.bulk_mode is True
        assert connection.close_count == 1

    def test_strict_parse_failure_exits_with_failure(self, readable_fd):
        """Malformed stats are fatal in strict mode."""
        connection = FakeConnection(
            bursts=[[stats("10.0.0.1", "many")]],
            fd=readable_fd,
        )
        output = io.StringIO()

        status = icejobs(
            env=Env(ICEJOBS_STATS_PARSE_MODE="strict"),
            discovery=connected_discovery(connection),
            output=output,
        )

        assert status == EXIT_FAILURE
        assert output.getvalue() == ""
        assert connection.close_count == 1

    def test_lenient_parse_skips_malformed_stats(self, readable_fd):
        """Malformed stats are skipped in lenient mode."""
        connection = FakeConnection(
            bursts=[[stats("10.0.0.1", "many"), stats("10.0.0.2", 3)], [None]],
            fd=readable_fd,
        )
        output = io.StringIO()

        status = icejobs(
            env=Env(),
            discovery=connected_discovery(connection),
            output=output,
        )

        assert status == EXIT_SUCCESS
        assert output.getvalue() == "3\n"

    def test_missing_transport_exits_with_failure(self, capsys):
        """Without a configured transport the command logs and fails."""
        output = io.StringIO()

        status = icejobs(env=Env(), output=output)

        assert status == EXIT_FAILURE
        assert output.getvalue() == ""
        assert "Scheduler transport unavailable" in capsys.readouterr().err

    def test_unimportable_transport_exits_with_failure(self, capsys):
        """A transport path that cannot be imported is reported."""
        status = icejobs(
            env=Env(ICEJOBS_TRANSPORT="icejobs_missing_transport:Discovery"),
            output=io.StringIO(),
        )

        assert status == EXIT_FAILURE
        assert "icejobs_missing_transport" in capsys.readouterr().err

    def test_invalid_settings_exit_with_failure(self, monkeypatch, tmp_path, capsys):
        """Settings that fail validation are reported instead of raising."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("ICEJOBS_IDLE_DEADLINE", "soon")

        status = icejobs(output=io.StringIO())

        assert status == EXIT_FAILURE
        assert "Invalid icejobs settings" in capsys.readouterr().err

    def test_disabled_logger_silences_failure_report(self, capsys):
        """A disabled command logger still exits with failure, silently."""
        status = icejobs(
            env=Env(ICEJOBS_DISABLED_LOGGERS="icejobs"),
            output=io.StringIO(),
        )

        assert status == EXIT_FAILURE
        assert capsys.readouterr().err == ""
