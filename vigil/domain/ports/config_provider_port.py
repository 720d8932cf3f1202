"""
Config Provider Port

Architectural Intent:
- Abstract interface over the cluster configuration store
- The core reads it fresh on every relevant operation and never caches
- Implemented by FileConfigProvider or a KV-store backed adapter
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConfigProviderPort(Protocol):
    """Port for reading event-handling configuration."""

    def load_config(self) -> None:
        """Refresh configuration from the backing store.

        Raises:
            ConfigurationError: if stored values cannot be interpreted
        """
        ...

    def events_enabled(self) -> bool:
        """Whether event handling is currently enabled."""
        ...

    def event_handlers(self, event_name: str) -> list[str]:
        """Paths of the executables to run for an event name."""
        ...
