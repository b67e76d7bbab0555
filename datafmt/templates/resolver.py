"""Template formatting entry point.

    format_string_with_data("Hello, {{name}}!", {"name": "Ada"}) -> "Hello, Ada!"

Placeholders:
    {{key}}                         value at key
    {{key.subkey}} / {{items.0}}    nested mapping keys and list indexes
    {{default(key, 'fallback')}}    fallback when missing or null
    {{date(key)}}                   timestamp or date string as month/day/year
    {{replace(key, ['a', 'b'])}}    sequential literal replacements

Missing values render as "", failed transformations as "#ERROR". The call
never raises.
"""

from typing import Any

from datafmt.templates.evaluator import PlaceholderEvaluator
from datafmt.templates.scanner import substitute
from datafmt.templates.transforms import TransformRegistry, get_registry


class TemplateFormatter:
    """Formats templates against data documents.

    Usage:
        formatter = TemplateFormatter()
        text = formatter.format("You live in {{address.city}}.", data)
    """

    def __init__(self, registry: TransformRegistry | None = None):
        self._registry = registry if registry is not None else get_registry()

    def format(self, template: str | None, data: Any = None) -> str:
        """Replace every placeholder in template with values from data.

        Args:
            template: Text with {{...}} placeholders; None yields ""
            data: JSON-like document; None is treated as {}

        Returns:
            Fully substituted text
        """
        if not template:
            return ""
        if data is None:
            data = {}

        evaluator = PlaceholderEvaluator(data, self._registry)
        return substitute(template, evaluator.evaluate)


_default_formatter = TemplateFormatter()


def format_string_with_data(template: str | None, data: Any = None) -> str:
    """Format template with data using the shared formatter."""
    return _default_formatter.format(template, data)


format_string = format_string_with_data
