"""Template engine module.

Placeholders in user-facing messages are filled from a data document:
    "Hello, {{user.name}}!" -> "Hello, Ada!"

Supports three placeholder forms:
    {{}}              - empty, renders nothing
    {{key.path}}      - value lookup
    {{name(args)}}    - transformation (default, date, replace)
"""

from datafmt.templates.arguments import parse_arguments
from datafmt.templates.display import to_display
from datafmt.templates.evaluator import PlaceholderEvaluator
from datafmt.templates.paths import NOT_FOUND, resolve_path
from datafmt.templates.resolver import (
    TemplateFormatter,
    format_string,
    format_string_with_data,
)
from datafmt.templates.scanner import iter_placeholders, substitute
from datafmt.templates.transforms import (
    TransformDefinition,
    TransformKind,
    TransformRegistry,
    get_registry,
)
from datafmt.templates.tutorial import TUTORIAL

__all__ = [
    # Formatting
    "TemplateFormatter",
    "format_string",
    "format_string_with_data",
    # Building blocks
    "NOT_FOUND",
    "PlaceholderEvaluator",
    "iter_placeholders",
    "parse_arguments",
    "resolve_path",
    "substitute",
    "to_display",
    # Transformations
    "TransformDefinition",
    "TransformKind",
    "TransformRegistry",
    "get_registry",
    # Docs
    "TUTORIAL",
]
