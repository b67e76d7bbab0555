"""replace(path, ['search', 'replacement'], ...) - sequential literal replacement.

Pairs are applied in argument order, each one operating on the output of
the previous pair:

    replace("This is a test.", ["is", "WAS"], ["test", "T"]) -> "ThWAS WAS a T."

A pair with an empty search string does nothing. Arguments that are not a
two-element array of strings are skipped.
"""

import logging
from typing import Any

from datafmt.templates.display import to_display
from datafmt.templates.transforms.registry import TransformKind, register_transform

logger = logging.getLogger(__name__)


def _is_pair(arg: Any) -> bool:
    return isinstance(arg, list) and len(arg) == 2 and all(isinstance(s, str) for s in arg)


@register_transform(
    kind=TransformKind.REPLACE,
    description="Replace every occurrence of each search text, pair by pair",
    usage="{{replace(description, ['x', 'X'], ['y', 'Y'])}}",
)
def transform_replace(value: Any, *pairs: Any) -> str:
    result = to_display(value)
    for pair in pairs:
        if not _is_pair(pair):
            logger.debug(f"Skipping malformed replace pair: {pair!r}")
            continue
        search, replacement = pair
        if search:
            result = result.replace(search, replacement)
    return result
