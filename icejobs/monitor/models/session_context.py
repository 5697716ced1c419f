from dataclasses import dataclass, field

from .aggregate_state import AggregateState
from .session_phase import SessionPhase


@dataclass(slots=True)
class SessionContext:
    """
    State carried across discovery and aggregation for one monitor run.

    The network and scheduler names start from configuration and are
    replaced with what the transport resolved once a scheduler is found,
    so re-acquisition targets the network that last answered.
    """

    network_name: str = ""
    scheduler_name: str = ""
    phase: SessionPhase = SessionPhase.OFFLINE
    aggregate: AggregateState = field(default_factory=AggregateState)

    @property
    def online(self) -> bool:
        return self.phase == SessionPhase.ONLINE

    @property
    def total_jobs_available(self) -> int:
        return self.aggregate.total_jobs_available
