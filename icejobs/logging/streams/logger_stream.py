import datetime
import io
import os
import pathlib
import sys
import threading
from typing import (
    Dict,
    TextIO,
    TypeVar,
)

import msgspec

from icejobs.logging.config.logging_config import LoggingConfig
from icejobs.logging.config.stream_type import StreamType
from icejobs.logging.models import Entry, Log

T = TypeVar('T', bound=Entry)


class LoggerStream:
    def __init__(
        self, 
        name: str | None = None,
        template: str | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        if name is None:
            name = "default"

        self._name = name
        self._default_template = template
        self._config = LoggingConfig()

        # None means resolve sys.stdout/sys.stderr at write time
        self._stdout = stdout
        self._stderr = stderr

        self._files: Dict[str, io.BufferedWriter] = {}

    @property
    def name(self):
        return self._name

    def log(
        self,
        entry: T,
        template: str | None = None,
        path: str | None = None,
    ):
        if self._config.enabled(self._name, entry.level) is False:
            return

        log_file, line_number, function_name = self._find_caller()

        if path is None:
            path = self._config.logfile_path

        if path:
            self._log_to_file(
                Log(
                    logger_name=self._name,
                    entry=entry,
                    filename=log_file,
                    function_name=function_name,
                    line_number=line_number,
                ),
                path,
            )

        else:
            self._log(
                entry,
                log_file,
                line_number,
                function_name,
                template=template,
            )

    def _log(
        self,
        entry: Entry,
        log_file: str,
        line_number: int,
        function_name: str,
        template: str | None = None,
    ):
        if template is None:
            template = self._default_template

        if template is None:
            template = "{timestamp} - {level} - {thread_id} - {filename}:{function_name}.{line_number} - {message}"

        stream = self._get_stream(self._config.output)

        try:
            stream.write(
                entry.to_template(
                    template,
                    context={
                        "filename": log_file,
                        "function_name": function_name,
                        "line_number": line_number,
                        "thread_id": threading.get_native_id(),
                        "timestamp": datetime.datetime.now(datetime.UTC).isoformat(),
                    },
                )
                + "\n"
            )
            stream.flush()

        except (KeyError, IndexError, ValueError) as err:
            self._write_error(entry, log_file, line_number, function_name, err)

    def _log_to_file(
        self,
        log: Log,
        path: str,
    ):
        logfile_path = str(pathlib.Path(path).absolute())

        try:
            logfile = self._files.get(logfile_path)
            if logfile is None or logfile.closed:
                directory = os.path.dirname(logfile_path)
                if directory:
                    os.makedirs(directory, exist_ok=True)

                logfile = open(logfile_path, "ab")
                self._files[logfile_path] = logfile

            logfile.write(msgspec.json.encode(log) + b"\n")
            logfile.flush()

        except OSError as err:
            self._write_error(
                log.entry,
                log.filename,
                log.line_number,
                log.function_name,
                err,
            )

    def _write_error(
        self,
        entry: Entry,
        log_file: str,
        line_number: int,
        function_name: str,
        err: Exception,
    ):
        error_template = "{timestamp} - {level} - {thread_id}.{filename}:{function_name}.{line_number} - {error}"

        stderr = self._get_stream(StreamType.STDERR)
        if stderr.closed is False:
            stderr.write(
                entry.to_template(
                    error_template,
                    context={
                        "filename": log_file,
                        "function_name": function_name,
                        "line_number": line_number,
                        "error": str(err),
                        "thread_id": threading.get_native_id(),
                        "timestamp": datetime.datetime.now(datetime.UTC).isoformat(),
                    },
                )
                + "\n"
            )

    def _get_stream(self, stream_type: StreamType) -> TextIO:
        if stream_type == StreamType.STDOUT:
            return self._stdout if self._stdout is not None else sys.stdout

        return self._stderr if self._stderr is not None else sys.stderr

    def _find_caller(self):
        """
        Find the stack frame of the caller so that we can note the source
        file name, line number and function name.
        """
        frame = sys._getframe(2)
        code = frame.f_code

        return (
            code.co_filename,
            frame.f_lineno,
            code.co_name,
        )

    def close(self):
        for logfile in self._files.values():
            if logfile.closed is False:
                logfile.close()

        self._files.clear()
