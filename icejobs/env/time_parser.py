import re
from datetime import timedelta


class TimeParser:
    """
    Convert durations such as ``2s``, ``50ms`` or ``1m30s`` to seconds.
    A number without a unit is read as seconds. Anything else in the
    string, including signs, spaces or longer unit names, is an error.
    """

    def __init__(self) -> None:
        self._units = {
            "ms": "milliseconds",
            "s": "seconds",
            "m": "minutes",
            "h": "hours",
            "d": "days",
            "w": "weeks",
        }
        self._duration = re.compile(
            r"(?:\d+(?:\.\d+)?(?:ms|[smhdw])?)+",
            flags=re.I,
        )
        self._part = re.compile(
            r"(?P<val>\d+(\.\d+)?)(?P<unit>ms|[smhdw]?)",
            flags=re.I,
        )

    def parse(self, time_amount: str) -> float:
        time_amount = time_amount.strip()
        if self._duration.fullmatch(time_amount) is None:
            raise ValueError(f"Invalid duration {time_amount!r}")

        duration = timedelta()
        for part in self._part.finditer(time_amount):
            unit = self._units.get(part.group("unit").lower(), "seconds")
            duration += timedelta(**{unit: float(part.group("val"))})

        return duration.total_seconds()
