"""Tests for FileConfigProvider."""

import json

import pytest
from unittest.mock import AsyncMock, MagicMock
from vigil.application.use_cases.ingress_gate import IngressGate
from vigil.domain.errors import ConfigurationError
from vigil.domain.ports.config_provider_port import ConfigProviderPort
from vigil.infrastructure.config_provider import FileConfigProvider


@pytest.fixture()
def config_file(tmp_path):
    path = tmp_path / "vigil.json"
    path.write_text(json.dumps({
        "events": {"enabled": True, "handlers": {"deploy": ["/bin/a", "/bin/b"]}},
    }))
    return path


class TestFileConfigProvider:
    def test_implements_port(self, config_file):
        assert isinstance(FileConfigProvider(str(config_file)), ConfigProviderPort)

    def test_event_handlers(self, config_file):
        provider = FileConfigProvider(str(config_file))
        assert provider.events_enabled() is True
        assert provider.event_handlers("deploy") == ["/bin/a", "/bin/b"]

    def test_unknown_event_has_no_handlers(self, config_file):
        provider = FileConfigProvider(str(config_file))
        assert provider.event_handlers("other") == []

    def test_load_config_picks_up_changes(self, config_file):
        provider = FileConfigProvider(str(config_file))
        config_file.write_text(json.dumps({"events": {"enabled": False}}))

        assert provider.events_enabled() is True
        provider.load_config()
        assert provider.events_enabled() is False
        assert provider.event_handlers("deploy") == []

    def test_load_config_raises_on_bad_values(self, config_file):
        provider = FileConfigProvider(str(config_file))
        config_file.write_text(json.dumps({"events": {"handlers": ["not-a-map"]}}))

        with pytest.raises(ConfigurationError):
            provider.load_config()


class TestUnreadableConfig:
    @pytest.mark.asyncio
    async def test_gate_rejects_batch_when_file_unreadable(self, config_file, make_event):
        provider = FileConfigProvider(str(config_file))
        dispatcher = MagicMock()
        dispatcher.submit = AsyncMock()
        gate = IngressGate(provider, dispatcher)
        await gate.admit([])

        config_file.write_bytes(b"\xff\xfe{")

        assert await gate.admit([make_event()]) is False
        dispatcher.submit.assert_not_awaited()
