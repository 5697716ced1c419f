"""
Session phase model for the scheduler monitor.
"""

from enum import IntEnum


class SessionPhase(IntEnum):
    """
    Whether a scheduler connection is currently believed live.

    Moved to ONLINE by a successful discovery and back to OFFLINE when the
    message loop can no longer decode from the connection.
    """

    OFFLINE = 0
    """No scheduler connection."""

    ONLINE = 1
    """Connected to a scheduler and receiving monitor events."""
