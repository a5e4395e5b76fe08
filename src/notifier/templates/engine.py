"""Jinja2 rendering for notification templates.

Templates are stored on NotificationType records and use Jinja placeholders::

    "Order #{{orderNumber}} confirmed, total ${{total}}"

``{{order.number}}`` walks into a nested mapping or object. Anything missing
or None renders as an empty string. Email bodies are rendered with
autoescaping; ``{{ link|safe }}`` opts a value out.
"""

from collections.abc import Mapping
from typing import Any

from jinja2 import ChainableUndefined, Environment, FunctionLoader, Template


def _to_text(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def _load_source(source: str):
    # The template name is its own source text; a stored template never goes stale.
    return source, None, lambda: True


def _environment(autoescape: bool) -> Environment:
    return Environment(
        loader=FunctionLoader(_load_source),
        undefined=ChainableUndefined,
        finalize=_to_text,
        autoescape=autoescape,
        keep_trailing_newline=True,
    )


class TemplateRenderer:
    """Renders template sources against event data.

    Compiled templates live in the Jinja template cache of this renderer's
    environments, keyed by source text.
    """

    def __init__(self):
        self._text = _environment(autoescape=False)
        self._html = _environment(autoescape=True)

    def compile(self, source: str, escape: bool = False) -> Template:
        environment = self._html if escape else self._text
        return environment.get_template(source)

    def render(self, source: str | None, data: Mapping[str, Any] | None, escape: bool = False) -> str:
        if not source:
            return ""
        return self.compile(source, escape=escape).render(dict(data or {}))

    def clear(self) -> None:
        self._text.cache.clear()
        self._html.cache.clear()
