"""
Notification Renderer

Architectural Intent:
- Turns an AlertSummary into a rendered notification body
- The template is an injectable strategy: built-in markup or a file on disk
- Rendering is synchronous and pure given the summary and the template

Design Decisions:
- Jinja2 with HTML autoescaping and StrictUndefined, so a misspelled
  variable in an override template fails loudly instead of rendering blank
- Once an override path is requested there is no fallback to the default
- Output is produced into a private string; bytes are returned only on success
"""

from pathlib import Path
from typing import Optional, Protocol

import jinja2

from vigil.domain.errors import TemplateError
from vigil.domain.value_objects.alert_summary import AlertSummary
from vigil.infrastructure.rendering.default_template import DEFAULT_TEMPLATE


def _environment() -> jinja2.Environment:
    return jinja2.Environment(
        autoescape=True,
        undefined=jinja2.StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )


class TemplateSource(Protocol):
    def load(self, env: jinja2.Environment) -> jinja2.Template: ...


class BuiltinTemplate:
    """The default HTML template shipped with Vigil."""

    def __init__(self, source: str = DEFAULT_TEMPLATE) -> None:
        self._source = source

    def load(self, env: jinja2.Environment) -> jinja2.Template:
        try:
            return env.from_string(self._source)
        except jinja2.TemplateSyntaxError as e:
            raise TemplateError(f"Invalid built-in template: {e}") from e


class FileTemplate:
    """A user supplied template read from disk on every render."""

    def __init__(self, path: str) -> None:
        self.path = path

    def load(self, env: jinja2.Environment) -> jinja2.Template:
        try:
            source = Path(self.path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateError(f"Unable to read template {self.path}: {e}") from e
        try:
            return env.from_string(source)
        except jinja2.TemplateSyntaxError as e:
            raise TemplateError(f"Unable to parse template {self.path}: {e}") from e


def template_source_for(path: Optional[str]) -> TemplateSource:
    """Pick the file template when a path is configured, else the built-in one."""
    return FileTemplate(path) if path else BuiltinTemplate()


class NotificationRenderer:
    def __init__(self, source: Optional[TemplateSource] = None) -> None:
        self.source = source or BuiltinTemplate()

    def render(
        self,
        summary: AlertSummary,
        cluster_name: str,
        template_path: Optional[str] = None,
    ) -> bytes:
        """Render *summary* for *cluster_name*.

        Raises:
            TemplateError: if the template cannot be loaded or rendered
        """
        source = FileTemplate(template_path) if template_path else self.source
        template = source.load(_environment())

        context = {
            "cluster_name": cluster_name,
            "system_status": summary.status.value,
            "fail_count": summary.fail_count,
            "warn_count": summary.warn_count,
            "pass_count": summary.pass_count,
            "nodes": summary.nodes,
            "is_critical": summary.is_critical,
            "is_warning": summary.is_warning,
            "is_passing": summary.is_passing,
        }
        try:
            body = template.render(context)
        except jinja2.TemplateError as e:
            raise TemplateError(f"Unable to render template: {e}") from e
        return body.encode("utf-8")
