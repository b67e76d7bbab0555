"""Template scanning.

Finds ``{{...}}`` regions left to right and replaces each one with the text
returned by a callback. A region is ``{{``, then any run of characters other
than ``{`` and ``}``, then ``}}``. Text that does not form such a region,
including an unterminated ``{{``, is copied through unchanged.
"""

from collections.abc import Callable, Iterator

OPEN = "{{"
CLOSE = "}}"
BRACES = "{}"


def _placeholder_end(template: str, start: int) -> int | None:
    """Index just past the }} closing a region opened at start, or None."""
    pos = start + len(OPEN)
    while pos < len(template) and template[pos] not in BRACES:
        pos += 1
    if template.startswith(CLOSE, pos):
        return pos + len(CLOSE)
    return None


def iter_placeholders(template: str) -> Iterator[tuple[int, int]]:
    """Yield (start, end) spans of every placeholder, non-overlapping."""
    pos = template.find(OPEN)
    while pos != -1:
        end = _placeholder_end(template, pos)
        if end is None:
            pos = template.find(OPEN, pos + 1)
        else:
            yield pos, end
            pos = template.find(OPEN, end)


def substitute(template: str, replace: Callable[[str], str]) -> str:
    """Replace every placeholder with replace(body)."""
    parts: list[str] = []
    last = 0
    for start, end in iter_placeholders(template):
        parts.append(template[last:start])
        parts.append(replace(template[start + len(OPEN):end - len(CLOSE)]))
        last = end
    parts.append(template[last:])
    return "".join(parts)
