"""Models for the scheduler monitor."""

from .aggregate_state import AggregateState as AggregateState
from .host_stats import HostStats as HostStats
from .monitor_outcome import (
    Fatal as Fatal,
    MonitorOutcome as MonitorOutcome,
    Retryable as Retryable,
    SessionEnded as SessionEnded,
    SessionEndReason as SessionEndReason,
)
from .session_context import SessionContext as SessionContext
from .session_phase import SessionPhase as SessionPhase
