"""datafmt - fill {{placeholders}} in user-facing messages from JSON-like data."""

from datafmt.config import ERROR_SENTINEL, VERSION
from datafmt.templates import (
    TemplateFormatter,
    format_string,
    format_string_with_data,
)

__all__ = [
    "ERROR_SENTINEL",
    "TemplateFormatter",
    "VERSION",
    "format_string",
    "format_string_with_data",
]
