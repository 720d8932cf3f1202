"""
Alert Message Value Object

Architectural Intent:
- Immutable health-check observation produced by the upstream check subsystem
- Read-only input to aggregation and rendering
- Status predicates exist purely for template branching
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional

from vigil.domain.errors import EncodingError

PASSING = "passing"
WARNING = "warning"
CRITICAL = "critical"


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    except ValueError as e:
        raise EncodingError(f"Invalid timestamp: {value!r}") from e


@dataclass(frozen=True)
class Message:
    """
    Value Object representing one check observation on one node.
    """
    node: str
    check: str
    status: str
    service: str = ""
    service_id: str = ""
    check_id: str = ""
    timestamp: Optional[datetime] = None
    notes: str = ""
    output: str = ""

    @property
    def is_critical(self) -> bool:
        return self.status == CRITICAL

    @property
    def is_warning(self) -> bool:
        return self.status == WARNING

    @property
    def is_passing(self) -> bool:
        return self.status == PASSING

    def to_dict(self) -> dict[str, Any]:
        return {
            "Node": self.node,
            "ServiceId": self.service_id,
            "Service": self.service,
            "CheckId": self.check_id,
            "Check": self.check,
            "Status": self.status,
            "Output": self.output,
            "Notes": self.notes,
            "Timestamp": self.timestamp.isoformat() if self.timestamp else None,
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Message":
        if not isinstance(data, Mapping):
            raise EncodingError(f"Message must be an object, got {type(data).__name__}")
        return Message(
            node=str(data.get("Node") or ""),
            check=str(data.get("Check") or ""),
            status=str(data.get("Status") or ""),
            service=data.get("Service") or "",
            service_id=data.get("ServiceId") or "",
            check_id=data.get("CheckId") or "",
            timestamp=_parse_timestamp(data.get("Timestamp")),
            notes=data.get("Notes") or "",
            output=data.get("Output") or "",
        )
