from .loader import load_transport as load_transport
from .messages import (
    Message as Message,
    MonitorLogin as MonitorLogin,
    MonitorStats as MonitorStats,
    Unhandled as Unhandled,
)
from .protocols import (
    Connection as Connection,
    Discovery as Discovery,
    Probe as Probe,
)
from .readiness import ReadinessWaiter as ReadinessWaiter
