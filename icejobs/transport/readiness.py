import selectors
import time
from typing import Callable

from icejobs.errors import LocalTransportError


class ReadinessWaiter:
    """
    Block until a descriptor is readable or a timeout elapses.

    Both discovery polling and the stats loop wait through this class so
    neither has to care which poller the platform provides. When there is
    no descriptor to wait on, the waiter sleeps for the poll interval
    instead.
    """

    def __init__(
        self,
        poll_interval: float = 0.05,
        sleep: Callable[[float], None] = time.sleep,
        selector_factory: Callable[[], selectors.BaseSelector] = selectors.DefaultSelector,
    ) -> None:
        self._poll_interval = poll_interval
        self._sleep = sleep
        self._selector_factory = selector_factory

    def wait(self, fd: int | None, timeout: float | None) -> bool:
        """
        Returns True if ``fd`` is readable (or has hung up / errored, which
        the next read will surface), False on timeout.

        A ``timeout`` of None blocks indefinitely. Raises LocalTransportError
        if the descriptor cannot be waited on.
        """
        if fd is None:
            self._sleep(self._poll_interval)
            return False

        if timeout is not None and timeout < 0:
            timeout = None

        try:
            with self._selector_factory() as selector:
                selector.register(fd, selectors.EVENT_READ)
                events = selector.select(timeout)

        except (OSError, ValueError, KeyError) as err:
            raise LocalTransportError(fd, str(err)) from err

        return len(events) > 0
