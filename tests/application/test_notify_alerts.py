"""Tests for the NotifyAlerts use case."""

import pytest
from unittest.mock import AsyncMock, MagicMock
from vigil.application.use_cases.notify_alerts import NotifyAlerts


def _notifier(name, result=True, error=None):
    notifier = MagicMock()
    notifier.name = name
    notifier.notify = AsyncMock(return_value=result, side_effect=error)
    return notifier


class TestNotifyAlerts:
    @pytest.mark.asyncio
    async def test_every_notifier_receives_batch(self, make_message):
        email, log = _notifier("email"), _notifier("log")
        messages = [make_message(status="critical")]

        results = await NotifyAlerts([email, log]).execute(messages)

        assert results == {"email": True, "log": True}
        email.notify.assert_awaited_once_with(messages)
        log.notify.assert_awaited_once_with(messages)

    @pytest.mark.asyncio
    async def test_failure_does_not_stop_others(self, make_message):
        email = _notifier("email", result=False)
        custom = _notifier("custom", error=RuntimeError("crashed"))
        log = _notifier("log")

        results = await NotifyAlerts([email, custom, log]).execute([make_message()])

        assert results == {"email": False, "custom": False, "log": True}
        log.notify.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_no_notifiers(self, make_message):
        assert await NotifyAlerts([]).execute([make_message()]) == {}

    @pytest.mark.asyncio
    async def test_records_telemetry(self, make_message):
        telemetry = MagicMock()
        await NotifyAlerts([_notifier("log")], telemetry=telemetry).execute(
            [make_message()]
        )
        telemetry.record_notification.assert_called_once_with("log", True)
