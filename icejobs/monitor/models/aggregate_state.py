from dataclasses import dataclass, field

from .host_stats import HostStats


@dataclass(slots=True)
class AggregateState:
    """
    Running job capacity across distinct worker hosts.

    ``total_jobs_available`` is always the sum of MaxJobs from the first
    report seen for each IP in ``known_ips``. Later reports from a known IP
    never change it, and IPs are never removed.
    """

    total_jobs_available: int = 0
    known_ips: set[str] = field(default_factory=set)

    def record(self, stats: HostStats) -> bool:
        """
        Account for a host report. Returns True if the host was new and
        its capacity was added.
        """
        if stats.ip in self.known_ips:
            return False

        self.total_jobs_available += stats.max_jobs
        self.known_ips.add(stats.ip)

        return True

    @property
    def host_count(self) -> int:
        return len(self.known_ips)
