"""Placeholder evaluation.

Turns the body of one ``{{...}}`` placeholder into replacement text:

    ""                        -> ""
    "address.city"            -> display text of the value, "" if missing/null
    "date(createdAt)"         -> output of the named transformation
    "bogus(x)"                -> "#ERROR"

Evaluation never raises: a failing placeholder becomes "#ERROR" and the
rest of the template is unaffected.
"""

import logging
import re
from typing import Any

from datafmt.config import ERROR_SENTINEL
from datafmt.templates.arguments import parse_arguments
from datafmt.templates.display import to_display
from datafmt.templates.paths import NOT_FOUND, resolve_path
from datafmt.templates.transforms import TransformKind, TransformRegistry, get_registry

logger = logging.getLogger(__name__)

# name(anything) spanning the whole trimmed body
TRANSFORM_CALL = re.compile(r"(\w+)\((.*)\)", re.ASCII)


class PlaceholderEvaluator:
    """Evaluates placeholder bodies against one data document."""

    def __init__(self, data: Any, registry: TransformRegistry | None = None):
        self._data = data
        self._registry = registry if registry is not None else get_registry()

    def evaluate(self, body: str) -> str:
        """Replacement text for a placeholder body (text between the braces)."""
        content = body.strip()
        if not content:
            return ""

        call = TRANSFORM_CALL.fullmatch(content)
        if call:
            return self._apply_transform(call.group(1), call.group(2))

        return to_display(resolve_path(self._data, content))

    def _apply_transform(self, name: str, args_text: str) -> str:
        kind = TransformKind.lookup(name)
        definition = self._registry.get(kind) if kind else None
        if definition is None:
            logger.debug(f"Unknown transformation: {name}")
            return ERROR_SENTINEL

        args = parse_arguments(args_text)
        key = args[0] if args else ""
        value = resolve_path(self._data, key) if isinstance(key, str) and key else NOT_FOUND

        try:
            return definition(value, *args[1:])
        except Exception as e:
            logger.warning(f"Error in transformation {name}: {e}")
            return ERROR_SENTINEL
