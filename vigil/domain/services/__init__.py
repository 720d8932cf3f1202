"""
Domain Services Package

Architectural Intent:
- Contains domain services implementing alerting logic
"""

from vigil.domain.services.alert_aggregator import group_by_node, summarize

__all__ = [
    "group_by_node",
    "summarize",
]
