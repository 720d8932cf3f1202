from dataclasses import dataclass, field
from enum import Enum

from vigil.domain.value_objects.message import Message


class SystemStatus(Enum):
    OK = "OK"
    UNSTABLE = "UNSTABLE"
    CRITICAL = "CRITICAL"


@dataclass(frozen=True)
class AlertSummary:
    """
    Value Object holding the cluster-wide view of one alert batch.

    Node iteration order follows first appearance but callers must not rely on it.
    """
    status: SystemStatus
    pass_count: int = 0
    warn_count: int = 0
    fail_count: int = 0
    nodes: dict[str, tuple[Message, ...]] = field(default_factory=dict)

    @property
    def is_critical(self) -> bool:
        return self.status is SystemStatus.CRITICAL

    @property
    def is_warning(self) -> bool:
        return self.status is SystemStatus.UNSTABLE

    @property
    def is_passing(self) -> bool:
        return self.status is SystemStatus.OK
