"""
Exceptions raised by the icejobs monitor.

Only the command entry point turns these into exit status. Inside the
monitor they are either raised out of the local I/O layer or carried as
``Fatal`` outcomes.
"""


class IcejobsError(Exception):
    pass


class LocalTransportError(IcejobsError):
    """
    Raised when waiting on a readiness descriptor fails.

    This means the local I/O facility is broken (bad descriptor, poller
    failure) rather than the scheduler being absent, so it is never retried.
    """

    def __init__(self, fd: int | None, reason: str) -> None:
        self.fd = fd
        self.reason = reason
        super().__init__(f"Failed waiting on descriptor {fd}: {reason}")


class StatsParseError(IcejobsError):
    """Raised when a scheduler stats payload lacks IP/MaxJobs or MaxJobs is not a count."""

    def __init__(self, payload: str, reason: str) -> None:
        self.payload = payload
        self.reason = reason
        super().__init__(f"Malformed stats payload ({reason}): {payload!r}")


class TransportConfigError(IcejobsError):
    pass
