from dataclasses import dataclass, field


@dataclass(slots=True, frozen=True)
class HostStats:
    """One worker host's stats report as broadcast by the scheduler."""

    ip: str
    max_jobs: int
    fields: dict[str, str] = field(default_factory=dict)
    """All KEY:VALUE pairs from the report, including IP and MaxJobs."""
