from .errors import (
    IcejobsError as IcejobsError,
    LocalTransportError as LocalTransportError,
    StatsParseError as StatsParseError,
    TransportConfigError as TransportConfigError,
)
