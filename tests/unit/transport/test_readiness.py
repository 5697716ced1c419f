"""
Tests for ReadinessWaiter against real descriptors.
"""

import socket
import time

import pytest

from icejobs.errors import LocalTransportError
from icejobs.transport import ReadinessWaiter


@pytest.fixture
def socket_pair():
    reader, writer = socket.socketpair()
    yield reader, writer
    reader.close()
    writer.close()


class TestReadinessWaiter:
    """Tests for ReadinessWaiter.wait."""

    def test_readable_descriptor_returns_true(self, socket_pair):
        """Pending data wakes the waiter immediately."""
        reader, writer = socket_pair
        writer.send(b"stats")

        assert ReadinessWaiter().wait(reader.fileno(), 1.0) is True

    def test_quiet_descriptor_times_out(self, socket_pair):
        """With nothing to read the wait lasts about the timeout."""
        reader, _ = socket_pair

        start = time.monotonic()
        ready = ReadinessWaiter().wait(reader.fileno(), 0.05)
        elapsed = time.monotonic() - start

        assert ready is False
        assert elapsed >= 0.04

    def test_hangup_counts_as_ready(self, socket_pair):
        """A closed peer wakes the waiter so the read can report it."""
        reader, writer = socket_pair
        writer.close()

        assert ReadinessWaiter().wait(reader.fileno(), 1.0) is True

    def test_missing_descriptor_sleeps_poll_interval(self):
        """Without a descriptor the waiter sleeps and reports not ready."""
        sleeps: list[float] = []
        waiter = ReadinessWaiter(poll_interval=0.05, sleep=sleeps.append)

        assert waiter.wait(None, 3.0) is False
        assert sleeps == [0.05]

    def test_invalid_descriptor_raises_local_transport_error(self):
        """A descriptor that cannot be registered is a local transport fault."""
        with pytest.raises(LocalTransportError) as error:
            ReadinessWaiter().wait(-1, 0.01)

        assert error.value.fd == -1
