from icejobs.transport import Connection, Message, MonitorLogin


class ScopedConnection:
    """
    Exclusive owner of a live scheduler connection.

    Closing is idempotent, and leaving a ``with`` block always closes, so a
    connection cannot outlive the discovery round or session that made it.
    """

    def __init__(self, connection: Connection) -> None:
        self._connection = connection
        self._closed = False

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    @property
    def closed(self):
        return self._closed

    def send(self, message: MonitorLogin) -> bool:
        if self._closed:
            return False

        return self._connection.send(message)

    def readiness_fd(self) -> int:
        return self._connection.readiness_fd()

    def has_buffered_message(self) -> bool:
        if self._closed:
            return False

        return self._connection.has_buffered_message()

    def receive_message(self) -> Message | None:
        if self._closed:
            return None

        return self._connection.receive_message()

    def set_bulk_mode(self) -> None:
        self._connection.set_bulk_mode()

    def close(self) -> None:
        if self._closed:
            return

        self._closed = True
        self._connection.close()
