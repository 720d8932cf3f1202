"""
Domain Ports Package

Architectural Intent:
- Contains port interfaces (abstract contracts) for external dependencies
- Ports define what the domain needs, adapters implement how
- Follows Hexagonal Architecture principles
"""

from vigil.domain.ports.config_provider_port import ConfigProviderPort
from vigil.domain.ports.handler_runner_port import HandlerRunnerPort
from vigil.domain.ports.notifier_port import NotifierPort

__all__ = [
    "ConfigProviderPort",
    "HandlerRunnerPort",
    "NotifierPort",
]
