"""Templates — rendering, titles, typed payloads and the default type catalog."""

from notifier.templates.catalog import DEFAULT_NOTIFICATION_TYPES
from notifier.templates.engine import TemplateRenderer
from notifier.templates.payloads import TemplateData
from notifier.templates.titles import generate_title

__all__ = [
    "DEFAULT_NOTIFICATION_TYPES",
    "TemplateData",
    "TemplateRenderer",
    "generate_title",
]
