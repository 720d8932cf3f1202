"""
Configuration Module

Architectural Intent:
- Centralized configuration loading from a JSON file
- Provides typed access to all Vigil settings
- Falls back to sensible defaults when config file is absent
- Environment variables override file-based config

Design Decisions:
- Config is a frozen dataclass for immutability after load
- Nested config sections map to sub-dataclasses
- Section names are single words so VIGIL_SECTION_KEY splits unambiguously
"""

from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional
import dataclasses
import json
import logging
import os

from vigil.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

_TOP_LEVEL_KEYS = ("log_level",)


@dataclass(frozen=True)
class EventsConfig:
    """Cluster event handling configuration."""
    enabled: bool = True
    handlers: dict[str, tuple[str, ...]] = field(default_factory=dict)
    queue_size: int = 1
    handler_timeout: float = 300.0


@dataclass(frozen=True)
class EmailConfig:
    """Email notifier configuration."""
    enabled: bool = False
    cluster_name: str = "Consul"
    template: str = ""
    url: str = "localhost"
    port: int = 25
    username: str = ""
    password: str = ""
    sender_alias: str = "Vigil"
    sender_email: str = "vigil@localhost"
    receivers: tuple[str, ...] = ()
    timeout: float = 30.0


@dataclass(frozen=True)
class LogFileConfig:
    """Log file notifier configuration."""
    enabled: bool = True
    path: str = "/tmp/vigil-notifications.log"


@dataclass(frozen=True)
class CustomConfig:
    """External command notifier configuration."""
    enabled: bool = False
    commands: tuple[str, ...] = ()


@dataclass(frozen=True)
class WebConfig:
    """HTTP transport configuration."""
    host: str = "127.0.0.1"
    port: int = 9000


@dataclass(frozen=True)
class TelemetryConfig:
    """OpenTelemetry configuration."""
    endpoint: str = ""
    insecure: bool = False


@dataclass(frozen=True)
class VigilConfig:
    """Root configuration for the Vigil daemon."""
    events: EventsConfig = field(default_factory=EventsConfig)
    email: EmailConfig = field(default_factory=EmailConfig)
    logfile: LogFileConfig = field(default_factory=LogFileConfig)
    custom: CustomConfig = field(default_factory=CustomConfig)
    web: WebConfig = field(default_factory=WebConfig)
    telemetry: TelemetryConfig = field(default_factory=TelemetryConfig)
    log_level: str = "INFO"


def _env_override(data: dict, prefix: str = "VIGIL") -> dict:
    """Override config values with environment variables.

    Environment variables follow the pattern VIGIL_SECTION_KEY.
    For example: VIGIL_WEB_PORT=9090, VIGIL_EMAIL_RECEIVERS=a@x.io,b@x.io
    """
    for key, value in os.environ.items():
        if not key.startswith(f"{prefix}_"):
            continue
        name = key[len(prefix) + 1:].lower()
        if name in _TOP_LEVEL_KEYS:
            data[name] = value
            continue
        parts = name.split("_", 1)
        if len(parts) == 2:
            section, field_name = parts
            if not isinstance(data.get(section), dict):
                data[section] = {}
            data[section][field_name] = value
        elif len(parts) == 1:
            data[parts[0]] = value
    return data


def _parse_config_file(path: Path) -> dict:
    """Parse a JSON config file.

    A missing or malformed file yields an empty dict. An unreadable file
    raises ConfigurationError.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.debug("Config file not found: %s", path)
        return {}
    except json.JSONDecodeError as e:
        logger.warning("Invalid config file %s: %s", path, e)
        return {}
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Unable to read config file {path}: {e}") from e
    if not isinstance(data, dict):
        logger.warning("Invalid config file %s: expected an object", path)
        return {}
    return data


def _to_tuple(val) -> tuple[str, ...]:
    if isinstance(val, str):
        return tuple(v.strip() for v in val.split(",") if v.strip())
    return tuple(val)


def _to_handlers(val) -> dict[str, tuple[str, ...]]:
    if isinstance(val, str):
        val = json.loads(val) if val.strip() else {}
    if not isinstance(val, dict):
        raise TypeError("handlers must map event names to handler lists")
    return {str(name): _to_tuple(paths) for name, paths in val.items()}


def _build_sub_config(cls, data: dict):
    """Build a sub-config dataclass from a dict, ignoring unknown keys."""
    if not isinstance(data, dict):
        data = {}
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in data.items() if k in valid_fields}

    try:
        for f in dataclasses.fields(cls):
            if f.name not in filtered:
                continue
            val = filtered[f.name]

            if f.type == "tuple[str, ...]":
                filtered[f.name] = _to_tuple(val)
            elif f.type == "dict[str, tuple[str, ...]]":
                filtered[f.name] = _to_handlers(val)
            elif isinstance(val, str):
                # Convert string numbers to int/float/bool
                if f.type == "int":
                    filtered[f.name] = int(val)
                elif f.type == "float":
                    filtered[f.name] = float(val)
                elif f.type == "bool":
                    filtered[f.name] = val.lower() in ("true", "1", "yes")
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid {cls.__name__} value: {e}") from e

    return cls(**filtered)


def load_config(
    path: Optional[str] = None,
    env_prefix: str = "VIGIL",
) -> VigilConfig:
    """Load configuration from file and environment variables.

    Priority (highest to lowest):
    1. Environment variables (VIGIL_SECTION_KEY)
    2. Config file values
    3. Defaults

    Args:
        path: Path to config file (JSON). Defaults to vigil.json in CWD.
        env_prefix: Environment variable prefix. Defaults to VIGIL.

    Raises:
        ConfigurationError: if a value cannot be coerced to its field type
    """
    config_path = Path(path) if path else Path("vigil.json")
    data = _parse_config_file(config_path)
    data = _env_override(data, env_prefix)

    return VigilConfig(
        events=_build_sub_config(EventsConfig, data.get("events", {})),
        email=_build_sub_config(EmailConfig, data.get("email", {})),
        logfile=_build_sub_config(LogFileConfig, data.get("logfile", {})),
        custom=_build_sub_config(CustomConfig, data.get("custom", {})),
        web=_build_sub_config(WebConfig, data.get("web", {})),
        telemetry=_build_sub_config(TelemetryConfig, data.get("telemetry", {})),
        log_level=str(data.get("log_level", "INFO")),
    )
