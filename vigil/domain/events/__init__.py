"""
Domain Events Package

Architectural Intent:
- Cluster events as received from the transport layer
- Events are immutable and consumed exactly once by the dispatcher
"""

from vigil.domain.events.event import Event, decode_events

__all__ = [
    "Event",
    "decode_events",
]
