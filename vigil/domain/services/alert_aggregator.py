"""
Alert Aggregation Service

Architectural Intent:
- Pure domain logic turning a batch of alert records into an AlertSummary
- No I/O and no shared state: deterministic for a given input order

Status Precedence:
- CRITICAL if any critical record, else UNSTABLE if any warning, else OK
- Records with an unrecognized status are grouped under their node but
  excluded from every count
"""

from typing import Iterable

from vigil.domain.value_objects.alert_summary import AlertSummary, SystemStatus
from vigil.domain.value_objects.message import CRITICAL, PASSING, WARNING, Message


def group_by_node(messages: Iterable[Message]) -> dict[str, tuple[Message, ...]]:
    """Group records by node, keeping arrival order within each node."""
    nodes: dict[str, list[Message]] = {}
    for message in messages:
        nodes.setdefault(message.node, []).append(message)
    return {name: tuple(checks) for name, checks in nodes.items()}


def summarize(messages: Iterable[Message]) -> AlertSummary:
    """Count records by status and group them by node in a single pass."""
    counts = {PASSING: 0, WARNING: 0, CRITICAL: 0}
    nodes: dict[str, list[Message]] = {}

    for message in messages:
        if message.status in counts:
            counts[message.status] += 1
        nodes.setdefault(message.node, []).append(message)

    if counts[CRITICAL]:
        status = SystemStatus.CRITICAL
    elif counts[WARNING]:
        status = SystemStatus.UNSTABLE
    else:
        status = SystemStatus.OK

    return AlertSummary(
        status=status,
        pass_count=counts[PASSING],
        warn_count=counts[WARNING],
        fail_count=counts[CRITICAL],
        nodes={name: tuple(checks) for name, checks in nodes.items()},
    )
