"""
Scheduler discovery with unbounded retry.

Walks an ordered list of candidate network names, polling one probe per
name until it yields a connection or times out. When every candidate has
been tried the list is rebuilt and the walk starts over, so
``acquire_scheduler`` only returns once a scheduler answers.
"""

from icejobs.logging import LoggerStream
from icejobs.logging.icejobs_logging_models import (
    DiscoveryDebug,
    DiscoveryTrace,
    SchedulerInfo,
)
from icejobs.transport import Connection, Discovery, ReadinessWaiter

from .models import SessionContext, SessionPhase
from .scoped_connection import ScopedConnection

DEFAULT_NETWORK_NAME = "ICECREAM"


def candidate_network_names(
    network_name: str,
    default_network_name: str = DEFAULT_NETWORK_NAME,
    override_network_name: str | None = None,
) -> list[str]:
    """
    The configured (or last resolved) name if there is one, else the
    default, followed by the override when set.
    """
    names = [network_name if network_name else default_network_name]

    if override_network_name is not None:
        names.append(override_network_name)

    return names


class DiscoveryController:
    def __init__(
        self,
        discovery: Discovery,
        waiter: ReadinessWaiter | None = None,
        default_network_name: str = DEFAULT_NETWORK_NAME,
        override_network_name: str | None = None,
        wait_timeout: float = 3.0,
        logger: LoggerStream | None = None,
    ) -> None:
        if waiter is None:
            waiter = ReadinessWaiter()

        if logger is None:
            logger = LoggerStream(name="discovery")

        self._discovery = discovery
        self._waiter = waiter
        self._default_network_name = default_network_name
        self._override_network_name = override_network_name
        self._wait_timeout = wait_timeout
        self._logger = logger

    def candidates(self, session: SessionContext) -> list[str]:
        return candidate_network_names(
            session.network_name,
            default_network_name=self._default_network_name,
            override_network_name=self._override_network_name,
        )

    def acquire_scheduler(self, session: SessionContext) -> ScopedConnection:
        """
        Block until a scheduler connection is obtained.

        Never gives up on absence. Raises LocalTransportError if a probe's
        descriptor cannot be waited on.
        """
        while True:
            candidates = self.candidates(session)

            self._logger.log(
                DiscoveryDebug(
                    message="Searching for scheduler",
                    candidates=candidates,
                )
            )

            for network_name in candidates:
                connection = self._attempt(session, network_name)
                if connection is not None:
                    return connection

            self._logger.log(
                DiscoveryDebug(
                    message="No scheduler answered, retrying",
                    candidates=candidates,
                )
            )

    def _attempt(
        self,
        session: SessionContext,
        network_name: str,
    ) -> ScopedConnection | None:
        self._logger.log(
            DiscoveryTrace(
                message="Probing network",
                network_name=network_name,
            )
        )

        probe = self._discovery.start(network_name)

        connection: Connection | None = probe.try_connect()
        while connection is None and not probe.timed_out():
            self._waiter.wait(probe.readiness_fd(), self._wait_timeout)
            connection = probe.try_connect()

        if connection is None:
            return None

        session.phase = SessionPhase.ONLINE
        session.network_name = probe.resolved_network_name()
        session.scheduler_name = probe.resolved_scheduler_name()

        scoped_connection = ScopedConnection(connection)
        scoped_connection.set_bulk_mode()

        self._logger.log(
            SchedulerInfo(
                message="Connected to scheduler",
                network_name=session.network_name,
                scheduler_name=session.scheduler_name,
            )
        )

        return scoped_connection
