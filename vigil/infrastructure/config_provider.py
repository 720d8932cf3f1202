"""
File Config Provider

Architectural Intent:
- Implements ConfigProviderPort on top of load_config()
- Each load_config() call re-reads the file and environment so edits apply
  without a restart
"""

import logging
from typing import Optional

from vigil.infrastructure.config import VigilConfig, load_config

logger = logging.getLogger(__name__)


class FileConfigProvider:
    """Config provider backed by a JSON file plus VIGIL_* environment variables."""

    def __init__(self, path: Optional[str] = None, env_prefix: str = "VIGIL") -> None:
        self._path = path
        self._env_prefix = env_prefix
        self._config = load_config(path, env_prefix)

    @property
    def config(self) -> VigilConfig:
        return self._config

    def load_config(self) -> None:
        self._config = load_config(self._path, self._env_prefix)
        logger.debug("Configuration reloaded from %s", self._path or "vigil.json")

    def events_enabled(self) -> bool:
        return self._config.events.enabled

    def event_handlers(self, event_name: str) -> list[str]:
        return list(self._config.events.handlers.get(event_name, ()))
