"""
Notify Alerts Use Case

Architectural Intent:
- Fans one alert batch out to every configured notifier
- Notifiers are invoked uniformly through NotifierPort
- One notifier failing never prevents the others from running
"""

import logging
from typing import Optional, Sequence

from vigil.domain.ports.notifier_port import NotifierPort
from vigil.domain.value_objects.message import Message
from vigil.infrastructure.telemetry.otel_exporter import OTELExporter

logger = logging.getLogger(__name__)


class NotifyAlerts:
    def __init__(
        self,
        notifiers: Sequence[NotifierPort],
        telemetry: Optional[OTELExporter] = None,
    ) -> None:
        self.notifiers = list(notifiers)
        self.telemetry = telemetry

    async def execute(self, messages: Sequence[Message]) -> dict[str, bool]:
        if not self.notifiers:
            logger.warning("No notifiers enabled, %d alert(s) dropped", len(messages))
            return {}

        results: dict[str, bool] = {}
        for notifier in self.notifiers:
            try:
                success = await notifier.notify(messages)
            except Exception:
                logger.exception("Notifier %s failed", notifier.name)
                success = False

            results[notifier.name] = success
            if self.telemetry:
                self.telemetry.record_notification(notifier.name, success)

        return results
