"""
Handler Executor

Architectural Intent:
- Infrastructure adapter implementing HandlerRunnerPort
- Runs one external program per (event, handler) pair
- Uses subprocess wrapped in async, like the other CLI-backed adapters

Handler Protocol:
- The handler reference is an executable path, launched without arguments
- The canonical event JSON is written to its stdin
- Exit status zero means success; stdout and stderr come back combined
"""

import asyncio
import logging
from typing import Optional

from vigil.domain.events.event import Event
from vigil.domain.ports.handler_runner_port import HandlerRunnerPort
from vigil.infrastructure.adapters.subprocess_runner import run_with_input

logger = logging.getLogger(__name__)


class SubprocessHandlerExecutor(HandlerRunnerPort):
    def __init__(self, timeout: Optional[float] = 300.0) -> None:
        self.timeout = timeout

    async def run(self, event: Event, handler: str) -> bytes:
        data = event.to_json()

        def _run():
            return run_with_input([handler], data, self.timeout)

        output = await asyncio.get_event_loop().run_in_executor(None, _run)
        logger.debug("Handler %s finished for event %s", handler, event.id)
        return output
