from .models import Entry, LogLevel


class DiscoveryTrace(Entry, kw_only=True):
    network_name: str
    level: LogLevel = LogLevel.TRACE

class DiscoveryDebug(Entry, kw_only=True):
    candidates: list[str]
    level: LogLevel = LogLevel.DEBUG

class SchedulerInfo(Entry, kw_only=True):
    network_name: str
    scheduler_name: str
    level: LogLevel = LogLevel.INFO

class StatsTrace(Entry, kw_only=True):
    ip: str
    max_jobs: int
    total_jobs_available: int
    level: LogLevel = LogLevel.TRACE

class StatsWarning(Entry, kw_only=True):
    payload: str
    level: LogLevel = LogLevel.WARN

class SessionInfo(Entry, kw_only=True):
    reason: str
    total_jobs_available: int
    known_hosts: int
    level: LogLevel = LogLevel.INFO

class SessionWarning(Entry, kw_only=True):
    network_name: str
    scheduler_name: str
    level: LogLevel = LogLevel.WARN

class MonitorFatal(Entry, kw_only=True):
    error: str
    level: LogLevel = LogLevel.FATAL
