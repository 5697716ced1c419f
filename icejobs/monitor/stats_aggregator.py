from icejobs.errors import StatsParseError
from icejobs.logging import LoggerStream
from icejobs.logging.icejobs_logging_models import (
    SessionInfo,
    SessionWarning,
    StatsTrace,
    StatsWarning,
)
from icejobs.transport import (
    MonitorLogin,
    MonitorStats,
    ReadinessWaiter,
    Unhandled,
)

from .models import (
    Fatal,
    MonitorOutcome,
    Retryable,
    SessionContext,
    SessionEnded,
    SessionEndReason,
    SessionPhase,
)
from .scoped_connection import ScopedConnection
from .stats_parser import parse_host_stats


class StatsAggregator:
    """
    Subscribes to a scheduler's monitor broadcast and sums the capacity of
    each distinct worker host.

    The loop waits for the connection to become readable for at most
    ``idle_deadline`` seconds. A quiet period that long ends the session,
    as does losing the connection or, unless ``ignore_unhandled`` is set,
    receiving any message other than a stats report.
    """

    def __init__(
        self,
        waiter: ReadinessWaiter | None = None,
        idle_deadline: float | None = 2.0,
        strict_parsing: bool = False,
        ignore_unhandled: bool = False,
        logger: LoggerStream | None = None,
    ) -> None:
        if waiter is None:
            waiter = ReadinessWaiter()

        if logger is None:
            logger = LoggerStream(name="aggregator")

        self._waiter = waiter
        self._idle_deadline = idle_deadline
        self._strict_parsing = strict_parsing
        self._ignore_unhandled = ignore_unhandled
        self._logger = logger

    def run(
        self,
        session: SessionContext,
        connection: ScopedConnection,
    ) -> MonitorOutcome:
        if not connection.send(MonitorLogin()):
            self._logger.log(
                SessionWarning(
                    message="Monitor login failed, scheduler will be re-acquired",
                    network_name=session.network_name,
                    scheduler_name=session.scheduler_name,
                )
            )

            return Retryable()

        while True:
            ready = self._waiter.wait(
                connection.readiness_fd(),
                self._idle_deadline,
            )

            if not ready:
                return self._end(session, SessionEndReason.IDLE_TIMEOUT)

            outcome = self._drain(session, connection)
            if outcome is not None:
                return outcome

    def _drain(
        self,
        session: SessionContext,
        connection: ScopedConnection,
    ) -> MonitorOutcome | None:
        while True:
            outcome = self._handle_activity(session, connection)
            if outcome is not None:
                return outcome

            if not connection.has_buffered_message():
                return None

    def _handle_activity(
        self,
        session: SessionContext,
        connection: ScopedConnection,
    ) -> MonitorOutcome | None:
        message = connection.receive_message()

        match message:
            case None:
                session.phase = SessionPhase.OFFLINE
                return self._end(session, SessionEndReason.CONNECTION_LOST)

            case MonitorStats(payload=payload):
                try:
                    self._handle_host_stats(session, payload)

                except StatsParseError as err:
                    if self._strict_parsing:
                        return Fatal(err)

                    self._logger.log(
                        StatsWarning(
                            message=f"Skipping malformed stats report: {err.reason}",
                            payload=payload,
                        )
                    )

                return None

            case Unhandled(name=name):
                return self._handle_unhandled(session, name)

            case _:
                return self._handle_unhandled(session, type(message).__name__)

    def _handle_unhandled(
        self,
        session: SessionContext,
        name: str,
    ) -> MonitorOutcome | None:
        if self._ignore_unhandled:
            self._logger.log(
                SessionWarning(
                    message=f"Ignoring unhandled {name} message",
                    network_name=session.network_name,
                    scheduler_name=session.scheduler_name,
                )
            )

            return None

        self._logger.log(
            SessionWarning(
                message=f"Received unhandled {name} message",
                network_name=session.network_name,
                scheduler_name=session.scheduler_name,
            )
        )

        return self._end(session, SessionEndReason.UNHANDLED_MESSAGE)

    def _handle_host_stats(self, session: SessionContext, payload: str):
        stats = parse_host_stats(payload)

        if session.aggregate.record(stats):
            self._logger.log(
                StatsTrace(
                    message="Recorded host capacity",
                    ip=stats.ip,
                    max_jobs=stats.max_jobs,
                    total_jobs_available=session.aggregate.total_jobs_available,
                )
            )

    def _end(
        self,
        session: SessionContext,
        reason: SessionEndReason,
    ) -> SessionEnded:
        self._logger.log(
            SessionInfo(
                message="Monitor session ended",
                reason=reason.value,
                total_jobs_available=session.aggregate.total_jobs_available,
                known_hosts=session.aggregate.host_count,
            )
        )

        return SessionEnded(
            total_jobs_available=session.aggregate.total_jobs_available,
            reason=reason,
        )
