"""
Outcomes returned by the stats aggregator and the monitor.

The core never exits the process. It returns one of these and the command
entry point decides what to print and which status to exit with.
"""

from dataclasses import dataclass
from enum import Enum


class SessionEndReason(Enum):
    IDLE_TIMEOUT = "idle_timeout"
    CONNECTION_LOST = "connection_lost"
    UNHANDLED_MESSAGE = "unhandled_message"


@dataclass(slots=True, frozen=True)
class Retryable:
    """The login could not be sent; re-acquire a scheduler and try again."""

    reason: str = "login_failed"


@dataclass(slots=True, frozen=True)
class Fatal:
    error: Exception


@dataclass(slots=True, frozen=True)
class SessionEnded:
    total_jobs_available: int
    reason: SessionEndReason


MonitorOutcome = Retryable | Fatal | SessionEnded
