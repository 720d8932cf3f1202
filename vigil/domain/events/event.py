"""
Cluster Event

Architectural Intent:
- Immutable record of a cluster-wide occurrence delivered for handler dispatch
- Owns its canonical encoding so handlers always see the same document
- Wire keys follow the cluster event format (ID, Name, Payload, ...)
"""

import json
from dataclasses import dataclass
from typing import Any, Mapping

from vigil.domain.errors import EncodingError

_WIRE_KEYS = (
    ("id", "ID"),
    ("name", "Name"),
    ("payload", "Payload"),
    ("node_filter", "NodeFilter"),
    ("service_filter", "ServiceFilter"),
    ("tag_filter", "TagFilter"),
    ("version", "Version"),
    ("ltime", "LTime"),
)


def _int_field(value: Any, default: int) -> int:
    return default if value is None else int(value)


@dataclass(frozen=True)
class Event:
    id: str
    name: str
    payload: Any = None
    node_filter: str = ""
    service_filter: str = ""
    tag_filter: str = ""
    version: int = 1
    ltime: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {wire: getattr(self, attr) for attr, wire in _WIRE_KEYS}

    def to_json(self) -> bytes:
        """Canonical handler input: compact JSON in wire key order."""
        try:
            return json.dumps(self.to_dict(), separators=(",", ":")).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise EncodingError(f"Unable to encode event {self.id}: {e}") from e

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Event":
        if not isinstance(data, Mapping):
            raise EncodingError(f"Event must be an object, got {type(data).__name__}")
        try:
            return Event(
                id=str(data.get("ID") or ""),
                name=str(data.get("Name") or ""),
                payload=data.get("Payload"),
                node_filter=data.get("NodeFilter") or "",
                service_filter=data.get("ServiceFilter") or "",
                tag_filter=data.get("TagFilter") or "",
                version=_int_field(data.get("Version"), 1),
                ltime=_int_field(data.get("LTime"), 0),
            )
        except (TypeError, ValueError) as e:
            raise EncodingError(f"Invalid event: {e}") from e


def decode_events(raw: bytes) -> list[Event]:
    """Decode a transport body (JSON array of events) into Events."""
    try:
        data = json.loads(raw) if raw else []
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise EncodingError(f"Invalid event batch: {e}") from e
    if not isinstance(data, list):
        raise EncodingError("Event batch must be a JSON array")
    return [Event.from_dict(item) for item in data]
