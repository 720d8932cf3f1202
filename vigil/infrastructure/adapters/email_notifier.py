"""
Email Notification Adapter

Architectural Intent:
- Implements NotifierPort for HTML email notifications
- Summarizes the alert batch, renders it, and sends it over SMTP
- Uses stdlib smtplib and email.mime for the mail layer

Design Decisions:
- STARTTLS is used whenever the server advertises it
- login() only when a username is configured
- At-most-once: no retry; failures are logged and reported as False
- The blocking SMTP session runs in the default executor so the event
  loop keeps draining the event queue
"""

import asyncio
import logging
import smtplib
from email.mime.text import MIMEText
from email.utils import formataddr
from typing import Optional, Sequence

from vigil.domain.errors import DeliveryError, TemplateError
from vigil.domain.services.alert_aggregator import summarize
from vigil.domain.value_objects.alert_summary import AlertSummary
from vigil.domain.value_objects.message import Message
from vigil.infrastructure.config import EmailConfig
from vigil.infrastructure.rendering.notification_renderer import (
    NotificationRenderer,
    template_source_for,
)

logger = logging.getLogger(__name__)


def build_message(config: EmailConfig, summary: AlertSummary, body: bytes) -> MIMEText:
    """Wrap a rendered body in a minimal HTML MIME envelope."""
    message = MIMEText(body.decode("utf-8"), "html", "utf-8")
    message["From"] = formataddr((config.sender_alias, config.sender_email))
    message["To"] = ", ".join(config.receivers)
    message["Subject"] = f"{config.cluster_name} is {summary.status.value}"
    return message


def send_message(config: EmailConfig, message: MIMEText) -> None:
    """Send *message* over an authenticated SMTP session.

    Raises:
        DeliveryError: if the transport fails at any step
    """
    try:
        with smtplib.SMTP(config.url, config.port, timeout=config.timeout) as server:
            server.ehlo()
            if server.has_extn("starttls"):
                server.starttls()
                server.ehlo()
            if config.username:
                server.login(config.username, config.password)
            server.sendmail(
                config.sender_email, list(config.receivers), message.as_string()
            )
    except (smtplib.SMTPException, OSError) as e:
        raise DeliveryError(f"{config.url}:{config.port}: {e}") from e


class EmailNotifier:
    """Email notifier delivering a rendered cluster status summary."""

    name = "email"

    def __init__(
        self, config: EmailConfig, renderer: Optional[NotificationRenderer] = None
    ) -> None:
        """Initialize email notifier.

        Args:
            config: SMTP server, credentials, sender, receivers and template
            renderer: Renderer used for the body (default: config.template,
                falling back to the built-in template)
        """
        self.config = config
        self.renderer = renderer or NotificationRenderer(
            template_source_for(config.template)
        )

    async def notify(self, messages: Sequence[Message]) -> bool:
        return await self.deliver(summarize(messages))

    async def deliver(
        self, summary: AlertSummary, config: Optional[EmailConfig] = None
    ) -> bool:
        """Render and send one notification.

        Args:
            summary: Aggregated alert batch
            config: Overrides the notifier's configuration for this call,
                including its template path

        Returns:
            True only after the SMTP session accepted the message
        """
        template_path = (config.template or None) if config else None
        config = config or self.config
        try:
            body = self.renderer.render(summary, config.cluster_name, template_path)
        except TemplateError as e:
            logger.error("Template error, unable to send email notification: %s", e)
            return False

        message = build_message(config, summary, body)
        try:
            await asyncio.get_event_loop().run_in_executor(
                None, send_message, config, message
            )
        except DeliveryError as e:
            logger.error("Unable to send notification: %s", e)
            return False

        logger.info(
            "Email notification sent: %s [receivers=%s]",
            message["Subject"],
            ",".join(config.receivers),
        )
        return True
