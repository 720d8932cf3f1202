"""Tests for the alert Message value object."""

from datetime import datetime, timezone

import pytest
from vigil.domain.errors import EncodingError
from vigil.domain.value_objects.message import Message


class TestMessage:
    @pytest.mark.parametrize(
        "status,expected",
        [
            ("critical", (True, False, False)),
            ("warning", (False, True, False)),
            ("passing", (False, False, True)),
            ("flapping", (False, False, False)),
        ],
    )
    def test_status_predicates(self, make_message, status, expected):
        message = make_message(status=status)
        assert (message.is_critical, message.is_warning, message.is_passing) == expected

    def test_to_dict_wire_keys(self, make_message):
        ts = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        data = make_message(service="redis", timestamp=ts, notes="n").to_dict()
        assert data["Node"] == "node-1"
        assert data["Service"] == "redis"
        assert data["Timestamp"] == "2024-05-01T12:00:00+00:00"
        assert data["Notes"] == "n"

    def test_from_dict(self):
        message = Message.from_dict({
            "Node": "web-1",
            "Check": "http",
            "Status": "critical",
            "Output": "connection refused",
            "Timestamp": "2024-05-01T12:00:00Z",
        })
        assert message.node == "web-1"
        assert message.is_critical
        assert message.timestamp == datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
        assert message.service == ""

    def test_from_dict_roundtrip(self, make_message):
        message = make_message(
            service="api", service_id="api-1", check_id="service:api",
            timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc), output="ok",
        )
        assert Message.from_dict(message.to_dict()) == message

    def test_from_dict_null_fields(self):
        message = Message.from_dict(
            {"Node": None, "Check": None, "Status": None, "Timestamp": None}
        )
        assert message.node == ""
        assert message.check == ""
        assert message.status == ""
        assert message.timestamp is None

    def test_invalid_timestamp(self):
        with pytest.raises(EncodingError, match="timestamp"):
            Message.from_dict({"Node": "a", "Timestamp": "yesterday"})

    def test_rejects_non_mapping(self):
        with pytest.raises(EncodingError):
            Message.from_dict("web-1")
