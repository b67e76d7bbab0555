"""Transformation argument parsing.

Turns the text between the parentheses of ``name(...)`` into a list of
arguments:

    "description, ['is', 'WAS'], ['test', 'T']"
        -> ["description", ["is", "WAS"], ["test", "T"]]
    "favoriteColor, 'unknown'"
        -> ["favoriteColor", "unknown"]

Three token shapes are recognised:
    'text'         quoted string, quotes stripped (no escapes)
    ['a', 'b']     array literal of strings
    anything else  bare token up to the next comma, whitespace trimmed

Parsing is lenient and never raises. A quote or bracket that is not closed
before the next comma degrades to a bare token, and empty arguments
(``a,,b``) are dropped.
"""

Argument = str | list[str]


def _skip_separators(text: str, pos: int) -> int:
    """Advance past whitespace and commas (empty arguments are dropped)."""
    while pos < len(text) and (text[pos] == "," or text[pos].isspace()):
        pos += 1
    return pos


def _end_of_token(text: str, pos: int) -> int | None:
    """If only whitespace stands between pos and a comma (or the end),
    return the index just past that comma. Otherwise None."""
    while pos < len(text) and text[pos].isspace():
        pos += 1
    if pos == len(text):
        return pos
    if text[pos] == ",":
        return pos + 1
    return None


def _delimited(text: str, pos: int, closer: str) -> tuple[str, int] | None:
    """Match an opener at pos through the first closer, followed by a separator."""
    close = text.find(closer, pos + 1)
    if close == -1:
        return None
    next_pos = _end_of_token(text, close + 1)
    if next_pos is None:
        return None
    return text[pos:close + 1], next_pos


def _split_tokens(text: str, allow_arrays: bool) -> list[str]:
    """Split text into raw, trimmed tokens at top-level commas."""
    tokens: list[str] = []
    pos = _skip_separators(text, 0)

    while pos < len(text):
        match = None
        if allow_arrays and text[pos] == "[":
            match = _delimited(text, pos, "]")
        if match is None and text[pos] == "'":
            match = _delimited(text, pos, "'")

        if match is not None:
            token, pos = match
        else:
            comma = text.find(",", pos)
            if comma == -1:
                token, pos = text[pos:], len(text)
            else:
                token, pos = text[pos:comma], comma + 1

        tokens.append(token.strip())
        pos = _skip_separators(text, pos)

    return tokens


def _unquote(token: str) -> str:
    if token.startswith("'") and token.endswith("'"):
        return token[1:-1]
    return token


def parse_array(text: str) -> list[str]:
    """Parse the interior of an array literal (without the brackets)."""
    inner = text.strip()
    if not inner:
        return []
    return [_unquote(element) for element in _split_tokens(inner, allow_arrays=False)]


def parse_arguments(text: str) -> list[Argument]:
    """Parse a transformation argument string into ordered arguments.

    Args:
        text: Raw text between the parentheses of a transformation call

    Returns:
        List of str (quoted or bare) and list[str] (array literals)
    """
    args: list[Argument] = []
    for token in _split_tokens(text, allow_arrays=True):
        if token.startswith("[") and token.endswith("]"):
            args.append(parse_array(token[1:-1]))
        else:
            args.append(_unquote(token))
    return args
