"""
Dispatch Events Use Case

Architectural Intent:
- Single long-lived consumer of the event queue
- For each event, runs every handler configured for the event's name
- Handler failures are logged per invocation and never stop the loop

Queue Model:
- Bounded asyncio.Queue; submit() waits while the queue is full
- Each item is a whole batch, so producers interleave at batch granularity
- Batches are processed in FIFO order, events in batch order, handlers in
  configured order
"""

import asyncio
import logging
import time
from typing import Iterable, Optional

from vigil.domain.errors import VigilError
from vigil.domain.events.event import Event
from vigil.domain.ports.config_provider_port import ConfigProviderPort
from vigil.domain.ports.handler_runner_port import HandlerRunnerPort
from vigil.infrastructure.telemetry.otel_exporter import OTELExporter

logger = logging.getLogger(__name__)


class EventDispatcher:
    def __init__(
        self,
        config_provider: ConfigProviderPort,
        handler_runner: HandlerRunnerPort,
        queue_size: int = 1,
        telemetry: Optional[OTELExporter] = None,
    ) -> None:
        self.config_provider = config_provider
        self.handler_runner = handler_runner
        self.telemetry = telemetry
        self._queue: asyncio.Queue[tuple[Event, ...]] = asyncio.Queue(
            maxsize=max(queue_size, 1)
        )
        self._task: Optional[asyncio.Task] = None

    async def submit(self, batch: Iterable[Event]) -> None:
        """Hand a batch to the worker, waiting while the queue is full."""
        await self._queue.put(tuple(batch))

    async def run(self) -> None:
        """Consume batches forever."""
        while True:
            batch = await self._queue.get()
            try:
                for event in batch:
                    await self.process_event(event)
            finally:
                self._queue.task_done()

    async def process_event(self, event: Event) -> dict[str, bool]:
        logger.info("Processing event %s (%s)", event.id, event.name)
        results: dict[str, bool] = {}
        try:
            handlers = self.config_provider.event_handlers(event.name)
        except Exception:
            logger.exception("Unable to resolve handlers for event %s", event.id)
            return results

        for handler in handlers:
            results[handler] = await self._execute(event, handler)

        logger.info("Event %s processed.", event.id)
        return results

    async def _execute(self, event: Event, handler: str) -> bool:
        started = time.monotonic()
        success = False
        try:
            output = await self.handler_runner.run(event, handler)
            success = True
            logger.info(
                ">>> %s -> %s:\n%s",
                event.id,
                handler,
                output.decode("utf-8", errors="replace"),
            )
        except VigilError as e:
            logger.error("Error running handler for event %s: %s", event.id, e)
        except Exception:
            logger.exception("Unexpected error running handler %s", handler)

        if self.telemetry:
            self.telemetry.record_handler_run(
                event.name, handler, success, (time.monotonic() - started) * 1000
            )
        return success

    def start(self) -> asyncio.Task:
        """Schedule the worker on the running event loop."""
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self.run(), name="vigil-dispatcher")
            logger.info("Event dispatcher started")
        return self._task

    async def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
            logger.info("Event dispatcher stopped")

    async def join(self) -> None:
        """Wait until every submitted batch has been processed."""
        await self._queue.join()
