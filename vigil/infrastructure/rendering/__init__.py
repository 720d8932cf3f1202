"""
Vigil Rendering Infrastructure

Architectural Intent:
- Jinja2 rendering of alert summaries into notification bodies
- Template sources are swappable strategies
"""

from vigil.infrastructure.rendering.notification_renderer import (
    BuiltinTemplate,
    FileTemplate,
    NotificationRenderer,
    TemplateSource,
    template_source_for,
)

__all__ = [
    "BuiltinTemplate",
    "FileTemplate",
    "NotificationRenderer",
    "TemplateSource",
    "template_source_for",
]
