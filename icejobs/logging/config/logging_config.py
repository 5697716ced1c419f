import contextvars
from typing import List, Literal

from icejobs.logging.models import LogLevel, LogLevelName
from .stream_type import StreamType


LogOutput = Literal['stdout', 'stderr']

_global_log_level = contextvars.ContextVar("_global_log_level", default=LogLevel.ERROR)
_global_disabled_loggers = contextvars.ContextVar("_global_disabled_loggers", default=[])
_global_log_output_type = contextvars.ContextVar("_global_log_level_type", default=StreamType.STDERR)
_global_logfile_path = contextvars.ContextVar("_global_logfile_path", default=None)


class LoggingConfig:
    def __init__(self) -> None:
        self._log_level: contextvars.ContextVar[LogLevel] = _global_log_level
        self._log_output_type: contextvars.ContextVar[StreamType] = _global_log_output_type
        self._logfile_path: contextvars.ContextVar[str | None] = _global_logfile_path

        self._disabled_loggers: contextvars.ContextVar[List[str]] = (
            _global_disabled_loggers
        )

    def update(
        self, 
        log_level: LogLevelName | None = None,
        log_output: LogOutput | None = None,
        logfile_path: str | None = None,
        disabled_loggers: List[str] | None = None,
    ):
        if log_level:
            self._log_level.set(
                LogLevel.to_level(log_level)
            )

        if log_output:
            self._log_output_type.set(
                StreamType.STDOUT if log_output == 'stdout' else StreamType.STDERR
            )

        if logfile_path:
            self._logfile_path.set(logfile_path)

        if disabled_loggers is not None:
            self._disabled_loggers.set(list(disabled_loggers))

    def reset(self):
        self._log_level.set(LogLevel.ERROR)
        self._log_output_type.set(StreamType.STDERR)
        self._logfile_path.set(None)
        self._disabled_loggers.set([])

    def enabled(self, logger_name: str, log_level: LogLevel) -> bool:
        disabled_loggers = self._disabled_loggers.get()
        current_log_level = self._log_level.get()
        return logger_name not in disabled_loggers and (
            log_level.severity >= current_log_level.severity
        )

    @property
    def level(self):
        return self._log_level.get()

    @property
    def output(self):
        return self._log_output_type.get()

    @property
    def logfile_path(self):
        return self._logfile_path.get()
