import time
from typing import Callable

from icejobs.errors import LocalTransportError
from icejobs.logging import LoggerStream
from icejobs.logging.icejobs_logging_models import MonitorFatal, SessionWarning

from .discovery_controller import DiscoveryController
from .models import (
    Fatal,
    MonitorOutcome,
    Retryable,
    SessionContext,
    SessionEnded,
    SessionEndReason,
    SessionPhase,
)
from .stats_aggregator import StatsAggregator


class IcejobsMonitor:
    """
    Runs discovery and aggregation in turn until the session produces a
    final total.

    The session context, and with it the aggregate, outlives individual
    connections: a failed login or (with ``resume_on_connection_loss``) a
    dropped connection re-acquires a scheduler and keeps counting into the
    same totals, so a host already counted is never counted twice.
    """

    def __init__(
        self,
        discovery_controller: DiscoveryController,
        aggregator: StatsAggregator,
        network_name: str = "",
        login_retry_delay: float = 1.0,
        resume_on_connection_loss: bool = False,
        sleep: Callable[[float], None] = time.sleep,
        logger: LoggerStream | None = None,
    ) -> None:
        if logger is None:
            logger = LoggerStream(name="monitor")

        self._discovery_controller = discovery_controller
        self._aggregator = aggregator
        self._network_name = network_name
        self._login_retry_delay = login_retry_delay
        self._resume_on_connection_loss = resume_on_connection_loss
        self._sleep = sleep
        self._logger = logger

    def create_session(self) -> SessionContext:
        return SessionContext(network_name=self._network_name)

    def run(self, session: SessionContext | None = None) -> MonitorOutcome:
        if session is None:
            session = self.create_session()

        try:
            return self._run(session)

        except LocalTransportError as err:
            self._logger.log(
                MonitorFatal(
                    message="Local transport failure",
                    error=str(err),
                )
            )

            return Fatal(err)

    def _run(self, session: SessionContext) -> MonitorOutcome:
        while True:
            with self._discovery_controller.acquire_scheduler(session) as connection:
                outcome = self._aggregator.run(session, connection)

                if isinstance(outcome, Retryable):
                    self._sleep(self._login_retry_delay)

            session.phase = SessionPhase.OFFLINE

            match outcome:
                case Retryable():
                    continue

                case SessionEnded(
                    reason=SessionEndReason.CONNECTION_LOST,
                ) if self._resume_on_connection_loss:
                    self._logger.log(
                        SessionWarning(
                            message="Scheduler connection lost, re-acquiring",
                            network_name=session.network_name,
                            scheduler_name=session.scheduler_name,
                        )
                    )
                    continue

                case Fatal(error=error):
                    self._logger.log(
                        MonitorFatal(
                            message="Monitor session failed",
                            error=str(error),
                        )
                    )
                    return outcome

                case _:
                    return outcome
