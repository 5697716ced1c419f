"""
Scheduler monitor messages.

Transports decode the scheduler's wire messages into this closed set of
tagged structs. Only the stats broadcast carries data the monitor uses;
every other message kind is surfaced as ``Unhandled`` with the name the
transport gave it.

The struct tags are the wire contract for transports that speak msgspec:
``msgspec.json.decode(data, type=Message)`` yields the matching struct
from a ``{"type": "mon_stats", ...}`` object, and ``MonitorLogin``
encodes as ``{"type": "mon_login"}``.
"""

import msgspec


class MonitorLogin(msgspec.Struct, tag="mon_login", kw_only=True):
    """Passive-subscriber handshake asking the scheduler to forward monitor events."""


class MonitorStats(msgspec.Struct, tag="mon_stats", kw_only=True):
    payload: str


class Unhandled(msgspec.Struct, tag="unhandled", kw_only=True):
    name: str


Message = MonitorStats | Unhandled
