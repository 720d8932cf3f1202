"""
Handler Runner Port

Architectural Intent:
- Port interface for running one external handler against one event
- Implemented by SubprocessHandlerExecutor
"""

from abc import ABC, abstractmethod
from vigil.domain.events.event import Event


class HandlerRunnerPort(ABC):
    """
    Port interface for executing event handlers.
    """

    @abstractmethod
    async def run(self, event: Event, handler: str) -> bytes:
        """
        Feeds the encoded event to the handler and returns its combined output.

        Raises EncodingError if the event cannot be encoded and
        HandlerExecutionError if the handler fails to start or exits non-zero.
        """
        pass
