"""Tests for composition root DI container."""

import json

import pytest
from vigil.composition_root import VigilContainer, build_notifiers, create_container
from vigil.infrastructure.adapters.custom_notifier import CustomNotifier
from vigil.infrastructure.adapters.email_notifier import EmailNotifier
from vigil.infrastructure.adapters.log_notifier import LogNotifier
from vigil.infrastructure.config import load_config
from vigil.infrastructure.rendering.notification_renderer import (
    BuiltinTemplate,
    FileTemplate,
    NotificationRenderer,
)


@pytest.fixture()
def config_file(tmp_path):
    def _write(data):
        path = tmp_path / "vigil.json"
        path.write_text(json.dumps(data))
        return str(path)

    return _write


class TestCompositionRoot:
    def test_create_container(self, config_file):
        container = create_container(config_file({}))

        assert isinstance(container, VigilContainer)
        assert container.config_provider is not None
        assert container.handler_executor is not None
        assert container.dispatcher is not None
        assert container.gate is not None
        assert container.notify_alerts is not None
        assert container.telemetry.initialized is False

    def test_gate_feeds_dispatcher(self, config_file):
        container = create_container(config_file({}))

        assert container.gate.dispatcher is container.dispatcher
        assert container.gate.config_provider is container.config_provider
        assert container.dispatcher.handler_runner is container.handler_executor

    def test_handler_timeout_applied(self, config_file):
        container = create_container(
            config_file({"events": {"handler_timeout": 12, "queue_size": 4}})
        )
        assert container.handler_executor.timeout == 12.0

    def test_default_notifiers_is_logfile_only(self, config_file):
        container = create_container(config_file({}))

        assert [n.name for n in container.notifiers] == ["log"]
        assert container.notify_alerts.notifiers == container.notifiers


class TestBuildNotifiers:
    def test_all_enabled(self, config_file, tmp_path):
        config = load_config(config_file({
            "email": {"enabled": True, "receivers": ["ops@example.com"]},
            "logfile": {"enabled": True, "path": str(tmp_path / "a.log")},
            "custom": {"enabled": True, "commands": ["/usr/local/bin/page"]},
        }))

        notifiers = build_notifiers(config, NotificationRenderer())

        assert [type(n) for n in notifiers] == [EmailNotifier, LogNotifier, CustomNotifier]

    def test_custom_without_commands_skipped(self, config_file):
        config = load_config(config_file({
            "logfile": {"enabled": False},
            "custom": {"enabled": True, "commands": []},
        }))

        assert build_notifiers(config, NotificationRenderer()) == []


class TestTemplateWiring:
    def test_builtin_template_by_default(self, config_file):
        container = create_container(config_file({}))
        assert isinstance(container.renderer.source, BuiltinTemplate)

    def test_configured_template_file(self, config_file, tmp_path):
        template = tmp_path / "alert.html"
        template.write_text("{{ cluster_name }} is {{ system_status }}")

        container = create_container(config_file({
            "email": {"enabled": True, "cluster_name": "prod", "template": str(template)},
        }))

        assert isinstance(container.renderer.source, FileTemplate)
        assert container.renderer.source.path == str(template)
        email = next(n for n in container.notifiers if n.name == "email")
        assert email.renderer is container.renderer
