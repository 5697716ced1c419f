from .monitor import (
    DiscoveryController as DiscoveryController,
    IcejobsMonitor as IcejobsMonitor,
    SessionContext as SessionContext,
    StatsAggregator as StatsAggregator,
)
