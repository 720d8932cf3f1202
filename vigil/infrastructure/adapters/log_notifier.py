"""
Log File Notification Adapter

Architectural Intent:
- Implements NotifierPort by appending one JSON line per alert to a file
- Reuses the project JSONFormatter; message fields go into each entry
- Uses a standalone logger so entries never leak into the console output
- File I/O runs in the default executor, like the other notifiers
"""

import asyncio
import logging
from typing import Sequence

from vigil.domain.value_objects.message import CRITICAL, WARNING, Message
from vigil.infrastructure.logging import JSONFormatter

logger = logging.getLogger(__name__)

_LEVELS = {
    CRITICAL: logging.ERROR,
    WARNING: logging.WARNING,
}


class LogNotifier:
    """Log file notifier."""

    name = "log"

    def __init__(self, path: str) -> None:
        self.path = path
        self._alert_logger = logging.Logger("vigil.alerts")

    def _write(self, messages: Sequence[Message]) -> None:
        handler = logging.FileHandler(self.path, encoding="utf-8")
        handler.setFormatter(JSONFormatter())
        self._alert_logger.addHandler(handler)
        try:
            for message in messages:
                self._alert_logger.log(
                    _LEVELS.get(message.status, logging.INFO),
                    "%s:%s:%s is %s.",
                    message.node,
                    message.service,
                    message.check,
                    message.status,
                    extra={"fields": message.to_dict()},
                )
        finally:
            self._alert_logger.removeHandler(handler)
            handler.close()

    async def notify(self, messages: Sequence[Message]) -> bool:
        loop = asyncio.get_event_loop()
        try:
            await loop.run_in_executor(None, self._write, messages)
        except OSError as e:
            logger.error("Unable to write notification log %s: %s", self.path, e)
            return False

        logger.info("Logged %d alert(s) to %s", len(messages), self.path)
        return True
