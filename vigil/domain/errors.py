"""
Domain Errors

Architectural Intent:
- One small taxonomy shared by every layer
- Each error is scoped to a single event, handler run or notification attempt
- Callers recover at that boundary: log and continue, never retry
"""

from typing import Optional


class VigilError(Exception):
    """Base class for all Vigil errors."""


class EncodingError(VigilError):
    """An event or alert record could not be serialized or decoded."""


class TemplateError(VigilError):
    """A notification template is missing, unparseable or failed to render."""


class DeliveryError(VigilError):
    """The mail transport refused or failed to deliver a notification."""


class ConfigurationError(VigilError):
    """A configuration value could not be coerced to its declared type."""


class HandlerExecutionError(VigilError):
    """An external handler could not be started or exited unsuccessfully."""

    def __init__(
        self,
        handler: str,
        reason: str,
        returncode: Optional[int] = None,
        output: bytes = b"",
    ) -> None:
        super().__init__(f"handler {handler!r} failed: {reason}")
        self.handler = handler
        self.returncode = returncode
        self.output = output
