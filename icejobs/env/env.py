from __future__ import annotations

from pydantic import BaseModel, StrictBool, StrictStr, model_validator
from typing import Callable, Dict, Literal, Union

from .time_parser import TimeParser

PrimaryType = Union[str, int, float, bytes, bool]


def parse_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Env(BaseModel):
    ICEJOBS_NETWORK_NAME: StrictStr = ""
    ICEJOBS_DEFAULT_NETWORK_NAME: StrictStr = "ICECREAM"
    USE_SCHEDULER: StrictStr | None = None
    ICEJOBS_TRANSPORT: StrictStr | None = None

    # Durations
    ICEJOBS_IDLE_DEADLINE: StrictStr = "2s"
    ICEJOBS_DISCOVERY_WAIT: StrictStr = "3s"
    ICEJOBS_DISCOVERY_POLL_INTERVAL: StrictStr = "50ms"
    ICEJOBS_LOGIN_RETRY_DELAY: StrictStr = "1s"

    # Session policy
    ICEJOBS_STATS_PARSE_MODE: Literal["strict", "lenient"] = "lenient"
    ICEJOBS_IGNORE_UNHANDLED_MESSAGES: StrictBool = False
    ICEJOBS_RESUME_ON_CONNECTION_LOSS: StrictBool = False

    # Logging
    ICEJOBS_LOG_LEVEL: Literal[
        "trace", "debug", "info", "warn", "error", "critical", "fatal"
    ] = "error"
    ICEJOBS_LOG_OUTPUT: Literal["stdout", "stderr"] = "stderr"
    ICEJOBS_LOG_FILE: StrictStr | None = None
    ICEJOBS_DISABLED_LOGGERS: StrictStr = ""

    @classmethod
    def types_map(cls) -> Dict[str, Callable[[str], PrimaryType]]:
        return {
            "ICEJOBS_NETWORK_NAME": str,
            "ICEJOBS_DEFAULT_NETWORK_NAME": str,
            "USE_SCHEDULER": str,
            "ICEJOBS_TRANSPORT": str,
            "ICEJOBS_IDLE_DEADLINE": str,
            "ICEJOBS_DISCOVERY_WAIT": str,
            "ICEJOBS_DISCOVERY_POLL_INTERVAL": str,
            "ICEJOBS_LOGIN_RETRY_DELAY": str,
            "ICEJOBS_STATS_PARSE_MODE": str,
            "ICEJOBS_IGNORE_UNHANDLED_MESSAGES": parse_bool,
            "ICEJOBS_RESUME_ON_CONNECTION_LOSS": parse_bool,
            "ICEJOBS_LOG_LEVEL": str,
            "ICEJOBS_LOG_OUTPUT": str,
            "ICEJOBS_LOG_FILE": str,
            "ICEJOBS_DISABLED_LOGGERS": str,
        }

    @classmethod
    def keep_empty(cls) -> set[str]:
        # Set but empty still counts as set for these
        return {"USE_SCHEDULER"}

    @model_validator(mode="after")
    def validate_durations(self) -> Env:
        parser = TimeParser()
        for duration in (
            self.ICEJOBS_IDLE_DEADLINE,
            self.ICEJOBS_DISCOVERY_WAIT,
            self.ICEJOBS_DISCOVERY_POLL_INTERVAL,
            self.ICEJOBS_LOGIN_RETRY_DELAY,
        ):
            parser.parse(duration)

        return self

    def get_disabled_loggers(self) -> list[str]:
        """Logger names from the comma separated ICEJOBS_DISABLED_LOGGERS."""
        return [
            name.strip()
            for name in self.ICEJOBS_DISABLED_LOGGERS.split(",")
            if name.strip()
        ]

    def get_discovery_config(self) -> dict:
        """Get discovery controller settings, durations in seconds."""
        parser = TimeParser()

        return {
            'network_name': self.ICEJOBS_NETWORK_NAME,
            'default_network_name': self.ICEJOBS_DEFAULT_NETWORK_NAME,
            'override_network_name': self.USE_SCHEDULER,
            'wait_timeout': parser.parse(self.ICEJOBS_DISCOVERY_WAIT),
            'poll_interval': parser.parse(self.ICEJOBS_DISCOVERY_POLL_INTERVAL),
        }

    def get_aggregator_config(self) -> dict:
        """Get stats aggregator settings, durations in seconds."""
        parser = TimeParser()

        return {
            'idle_deadline': parser.parse(self.ICEJOBS_IDLE_DEADLINE),
            'strict_parsing': self.ICEJOBS_STATS_PARSE_MODE == "strict",
            'ignore_unhandled': self.ICEJOBS_IGNORE_UNHANDLED_MESSAGES,
        }

    def get_monitor_config(self) -> dict:
        """Get reconnect policy settings for the top-level monitor."""
        parser = TimeParser()

        return {
            'login_retry_delay': parser.parse(self.ICEJOBS_LOGIN_RETRY_DELAY),
            'resume_on_connection_loss': self.ICEJOBS_RESUME_ON_CONNECTION_LOSS,
        }
