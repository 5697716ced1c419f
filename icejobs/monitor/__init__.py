from .discovery_controller import (
    DEFAULT_NETWORK_NAME as DEFAULT_NETWORK_NAME,
    DiscoveryController as DiscoveryController,
    candidate_network_names as candidate_network_names,
)
from .models import (
    AggregateState as AggregateState,
    Fatal as Fatal,
    HostStats as HostStats,
    MonitorOutcome as MonitorOutcome,
    Retryable as Retryable,
    SessionContext as SessionContext,
    SessionEnded as SessionEnded,
    SessionEndReason as SessionEndReason,
    SessionPhase as SessionPhase,
)
from .monitor import IcejobsMonitor as IcejobsMonitor
from .scoped_connection import ScopedConnection as ScopedConnection
from .stats_aggregator import StatsAggregator as StatsAggregator
from .stats_parser import (
    parse_host_stats as parse_host_stats,
    parse_stats as parse_stats,
)
