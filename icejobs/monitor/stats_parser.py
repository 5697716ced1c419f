import re

from icejobs.errors import StatsParseError

from .models import HostStats

_MAX_JOBS_PATTERN = re.compile(r"\s*\+?(?P<count>\d+)\s*")


def parse_stats(payload: str) -> dict[str, str]:
    """
    Split a scheduler stats payload into its KEY:VALUE pairs.

    Each pair runs from the current position to the next colon (the key)
    and from there to the end of the line (the value). A key that is
    repeated keeps its first value. A trailing key with nothing after its
    colon is dropped.
    """
    stats: dict[str, str] = {}
    position = 0
    length = len(payload)

    while position < length:
        colon = payload.find(":", position)
        if colon < 0:
            break

        key = payload[position:colon]

        value_start = colon + 1
        if value_start >= length:
            break

        newline = payload.find("\n", value_start)
        if newline < 0:
            value = payload[value_start:]
            position = length

        else:
            value = payload[value_start:newline]
            position = newline + 1

        stats.setdefault(key, value)

    return stats


def parse_host_stats(payload: str) -> HostStats:
    stats = parse_stats(payload)

    ip = stats.get("IP")
    if ip is None:
        raise StatsParseError(payload, "missing IP")

    max_jobs = stats.get("MaxJobs")
    if max_jobs is None:
        raise StatsParseError(payload, "missing MaxJobs")

    match = _MAX_JOBS_PATTERN.fullmatch(max_jobs)
    if match is None:
        raise StatsParseError(payload, f"MaxJobs is not an unsigned integer: {max_jobs!r}")

    return HostStats(
        ip=ip,
        max_jobs=int(match.group("count")),
        fields=stats,
    )
