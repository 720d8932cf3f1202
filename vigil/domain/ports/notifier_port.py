"""
Notifier Port

Architectural Intent:
- Abstract interface for turning a batch of alert records into a delivered notification
- Decouples the alert fan-out from channels (email, log file, external command)
- New notifier variants plug in without touching the dispatch code

Design Decisions:
- Uses Protocol for structural typing (no inheritance needed)
- notify returns bool to indicate success/failure; failures are logged by the notifier
"""

from typing import Protocol, Sequence, runtime_checkable

from vigil.domain.value_objects.message import Message


@runtime_checkable
class NotifierPort(Protocol):
    """Port for delivering alert batches through a notification channel."""

    name: str

    async def notify(self, messages: Sequence[Message]) -> bool:
        """Deliver a notification for a batch of alert records.

        Args:
            messages: Alert records, already debounced upstream

        Returns:
            True if the notification was delivered, False otherwise
        """
        ...
