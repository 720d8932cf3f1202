"""Global test configuration.

Shared factories for alert records, events, handler scripts and an
in-memory config provider.
"""

import os
import stat

import pytest

from vigil.domain.events.event import Event
from vigil.domain.value_objects.message import Message


class StaticConfigProvider:
    """In-memory ConfigProviderPort for tests."""

    def __init__(self, enabled: bool = True, handlers: dict | None = None) -> None:
        self.enabled = enabled
        self.handlers = handlers or {}
        self.load_calls = 0

    def load_config(self) -> None:
        self.load_calls += 1

    def events_enabled(self) -> bool:
        return self.enabled

    def event_handlers(self, event_name: str) -> list[str]:
        return list(self.handlers.get(event_name, []))


@pytest.fixture()
def config_provider():
    return StaticConfigProvider()


@pytest.fixture()
def make_message():
    def _make(node="node-1", status="passing", check="serfHealth", **kwargs):
        return Message(node=node, check=check, status=status, **kwargs)

    return _make


@pytest.fixture()
def make_event():
    def _make(event_id="e1", name="deploy", payload=None, **kwargs):
        return Event(id=event_id, name=name, payload=payload, **kwargs)

    return _make


@pytest.fixture()
def make_script(tmp_path):
    """Write an executable shell script and return its path."""

    def _make(name: str, body: str) -> str:
        path = tmp_path / name
        path.write_text("#!/bin/sh\n" + body + "\n")
        os.chmod(path, os.stat(path).st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return str(path)

    return _make
