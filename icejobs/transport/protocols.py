"""
Interfaces a scheduler transport must provide.

The monitor never touches sockets, framing or wire formats directly. A
transport package implements these protocols and is loaded by dotted path
(see ``icejobs.transport.loader``).
"""

from typing import Protocol

from .messages import Message, MonitorLogin


class Connection(Protocol):
    """A live session with a scheduler."""

    def send(self, message: MonitorLogin) -> bool:
        """Send a request. Returns False if the channel is broken."""
        ...

    def readiness_fd(self) -> int:
        """Descriptor that becomes readable when data arrives."""
        ...

    def has_buffered_message(self) -> bool:
        """Whether a complete message is already buffered locally."""
        ...

    def receive_message(self) -> Message | None:
        """Decode the next message, or None if the channel closed or is corrupt."""
        ...

    def set_bulk_mode(self) -> None:
        """Favor throughput over latency for a long-lived monitoring stream."""
        ...

    def close(self) -> None:
        ...


class Probe(Protocol):
    """A discovery attempt bound to one network name."""

    def try_connect(self) -> Connection | None:
        """Non-blocking check for a ready scheduler connection."""
        ...

    def timed_out(self) -> bool:
        ...

    def readiness_fd(self) -> int | None:
        """Descriptor to wait on between attempts, or None if the probe has none."""
        ...

    def resolved_network_name(self) -> str:
        ...

    def resolved_scheduler_name(self) -> str:
        ...


class Discovery(Protocol):
    """Entry point of a transport: starts probes for network names."""

    def start(self, network_name: str) -> Probe:
        ...
