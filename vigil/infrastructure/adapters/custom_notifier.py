"""
Custom Command Notification Adapter

Architectural Intent:
- Implements NotifierPort by piping the alert batch into external commands
- Each command receives a JSON array of alert records on stdin
- Shares the subprocess helper with the event handler executor
"""

import asyncio
import json
import logging
import shlex
from typing import Optional, Sequence

from vigil.domain.errors import EncodingError, HandlerExecutionError
from vigil.domain.value_objects.message import Message
from vigil.infrastructure.adapters.subprocess_runner import run_with_input

logger = logging.getLogger(__name__)


def encode_messages(messages: Sequence[Message]) -> bytes:
    try:
        return json.dumps([m.to_dict() for m in messages]).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise EncodingError(f"Unable to encode alert batch: {e}") from e


class CustomNotifier:
    """External command notifier."""

    name = "custom"

    def __init__(self, commands: Sequence[str], timeout: Optional[float] = 300.0) -> None:
        self.commands = tuple(commands)
        self.timeout = timeout

    async def notify(self, messages: Sequence[Message]) -> bool:
        try:
            data = encode_messages(messages)
        except EncodingError as e:
            logger.error("%s", e)
            return False

        loop = asyncio.get_event_loop()
        success = True
        for command in self.commands:
            try:
                argv = shlex.split(command)
            except ValueError as e:
                logger.error("Invalid custom notifier command %r: %s", command, e)
                success = False
                continue

            try:
                await loop.run_in_executor(
                    None, run_with_input, argv, data, self.timeout
                )
            except HandlerExecutionError as e:
                logger.error(
                    "Custom notifier failed: %s\n%s",
                    e,
                    e.output.decode(errors="replace"),
                )
                success = False
            else:
                logger.info("Custom notifier %s ran.", command)
        return success
