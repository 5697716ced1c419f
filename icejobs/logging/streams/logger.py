from typing import Dict, TextIO

from .logger_stream import LoggerStream


class Logger:
    def __init__(self) -> None:
        self._streams: Dict[str, LoggerStream] = {}

    def __getitem__(self, name: str):

        if self._streams.get(name) is None:
            self._streams[name] = LoggerStream(name=name)

        return self._streams[name]

    def get_stream(
        self,
        name: str | None = None,
        template: str | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ):
        if name is None:
            name = 'default'

        self._streams[name] = LoggerStream(
            name=name,
            template=template,
            stdout=stdout,
            stderr=stderr,
        )

        return self._streams[name]

    def close(self):
        for stream in self._streams.values():
            stream.close()
