"""
Ingress Gate Use Case

Architectural Intent:
- Boundary called by the transport layer for every incoming event batch
- Refreshes configuration on each call, then drops or enqueues the batch
- The first successful call after start-up is a connectivity probe and is
  swallowed; the gate is armed from then on
"""

import logging
from typing import Sequence

from vigil.application.use_cases.dispatch_events import EventDispatcher
from vigil.domain.errors import ConfigurationError
from vigil.domain.events.event import Event
from vigil.domain.ports.config_provider_port import ConfigProviderPort

logger = logging.getLogger(__name__)


class IngressGate:
    def __init__(
        self, config_provider: ConfigProviderPort, dispatcher: EventDispatcher
    ) -> None:
        self.config_provider = config_provider
        self.dispatcher = dispatcher
        self.armed = False

    async def admit(self, batch: Sequence[Event]) -> bool:
        """Admit a batch of events.

        Returns:
            True when the caller should report success upstream (including
            the warm-up probe and batches dropped because handling is
            disabled), False when configuration could not be refreshed.
        """
        try:
            self.config_provider.load_config()
        except ConfigurationError as e:
            logger.error("Unable to refresh configuration, batch rejected: %s", e)
            return False

        if not self.armed:
            self.armed = True
            logger.info("Now watching for events.")
            return True

        if not self.config_provider.events_enabled():
            logger.info("Event handling disabled. %d event(s) ignored.", len(batch))
            return True

        logger.debug("Queueing %d event(s)", len(batch))
        await self.dispatcher.submit(batch)
        return True
