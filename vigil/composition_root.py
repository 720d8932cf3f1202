"""
Composition Root

Architectural Intent:
- Dependency injection composition root for the Vigil daemon
- Single place where all adapters and use cases are wired together
- Notifiers are selected from configuration here, not in the use cases

Design Decisions:
- Uses a simple dataclass container instead of a DI framework
- Telemetry exporter is created disabled; the CLI initializes it when an
  endpoint is configured
"""

from dataclasses import dataclass
from typing import Optional

from vigil.application.use_cases.dispatch_events import EventDispatcher
from vigil.application.use_cases.ingress_gate import IngressGate
from vigil.application.use_cases.notify_alerts import NotifyAlerts
from vigil.domain.ports.notifier_port import NotifierPort
from vigil.infrastructure.adapters.custom_notifier import CustomNotifier
from vigil.infrastructure.adapters.email_notifier import EmailNotifier
from vigil.infrastructure.adapters.handler_executor import SubprocessHandlerExecutor
from vigil.infrastructure.adapters.log_notifier import LogNotifier
from vigil.infrastructure.config import VigilConfig
from vigil.infrastructure.config_provider import FileConfigProvider
from vigil.infrastructure.rendering.notification_renderer import (
    NotificationRenderer,
    template_source_for,
)
from vigil.infrastructure.telemetry.otel_exporter import OTELConfig, OTELExporter


@dataclass
class VigilContainer:
    """DI container holding all wired dependencies."""

    config_provider: FileConfigProvider
    handler_executor: SubprocessHandlerExecutor
    dispatcher: EventDispatcher
    gate: IngressGate
    renderer: NotificationRenderer
    notifiers: list[NotifierPort]
    notify_alerts: NotifyAlerts
    telemetry: OTELExporter


def build_notifiers(
    config: VigilConfig, renderer: NotificationRenderer
) -> list[NotifierPort]:
    """Instantiate every notifier enabled in *config*."""
    notifiers: list[NotifierPort] = []
    if config.email.enabled:
        notifiers.append(EmailNotifier(config.email, renderer))
    if config.logfile.enabled:
        notifiers.append(LogNotifier(config.logfile.path))
    if config.custom.enabled and config.custom.commands:
        notifiers.append(
            CustomNotifier(config.custom.commands, config.events.handler_timeout)
        )
    return notifiers


def create_container(
    config_path: Optional[str] = None, env_prefix: str = "VIGIL"
) -> VigilContainer:
    """Create and wire all dependencies."""
    config_provider = FileConfigProvider(config_path, env_prefix)
    config = config_provider.config

    telemetry = OTELExporter(
        OTELConfig(
            endpoint=config.telemetry.endpoint,
            insecure=config.telemetry.insecure,
        )
    )
    handler_executor = SubprocessHandlerExecutor(config.events.handler_timeout)
    dispatcher = EventDispatcher(
        config_provider,
        handler_executor,
        queue_size=config.events.queue_size,
        telemetry=telemetry,
    )
    gate = IngressGate(config_provider, dispatcher)

    renderer = NotificationRenderer(template_source_for(config.email.template))
    notifiers = build_notifiers(config, renderer)
    notify_alerts = NotifyAlerts(notifiers, telemetry=telemetry)

    return VigilContainer(
        config_provider=config_provider,
        handler_executor=handler_executor,
        dispatcher=dispatcher,
        gate=gate,
        renderer=renderer,
        notifiers=notifiers,
        notify_alerts=notify_alerts,
        telemetry=telemetry,
    )
