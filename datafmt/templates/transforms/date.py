"""date(path) - render a timestamp or date string as month/day/year.

Numbers below 1e11 are whole seconds since the epoch, larger numbers are
milliseconds, so 1678886400 and 1678886400000 both render as 3/15/2023
(in host local time). Strings are read as ISO 8601 or one of a handful of
common textual forms.

Missing, null and empty values render as "". Anything that does not yield
a valid instant renders as #ERROR.
"""

import logging
import math
from datetime import date, datetime
from email.utils import parsedate_to_datetime
from typing import Any

from datafmt.config import ERROR_SENTINEL, MILLISECONDS_THRESHOLD
from datafmt.templates.paths import is_missing
from datafmt.templates.transforms.registry import TransformKind, register_transform

logger = logging.getLogger(__name__)

# Non-ISO forms tried in order after fromisoformat
TEXT_FORMATS = (
    "%B %d, %Y",  # March 15, 2023
    "%b %d, %Y",  # Mar 15, 2023
    "%B %d %Y",  # March 15 2023
    "%b %d %Y",  # Mar 15 2023
    "%d %B %Y",  # 15 March 2023
    "%d %b %Y",  # 15 Mar 2023
    "%m/%d/%Y",  # 03/15/2023
    "%m/%d/%Y %H:%M",
    "%m/%d/%Y %H:%M:%S",
    "%Y/%m/%d",  # 2023/03/15
    "%a %b %d %Y",  # Wed Mar 15 2023
)


def format_short_date(value: date) -> str:
    """month/day/year without zero padding."""
    return f"{value.month}/{value.day}/{value.year}"


def _from_timestamp(value: int | float) -> datetime:
    if isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"Not a finite timestamp: {value}")
    seconds = value if value < MILLISECONDS_THRESHOLD else value / 1000
    return datetime.fromtimestamp(seconds)


def _parse_text(text: str) -> date:
    text = text.strip()
    if not text:
        raise ValueError("Empty date string")

    # ISO 8601, with "Z" read as UTC
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        return parsed.astimezone() if parsed.tzinfo else parsed
    except ValueError:
        pass

    for fmt in TEXT_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    # RFC 2822 (e.g. "Wed, 15 Mar 2023 13:20:00 GMT")
    try:
        parsed = parsedate_to_datetime(text)
    except (TypeError, ValueError):
        parsed = None
    if parsed is not None:
        return parsed.astimezone() if parsed.tzinfo else parsed

    raise ValueError(f"Unrecognized date: {text[:60]!r}")


def to_date(value: Any) -> date:
    """Interpret a resolved value as a calendar date.

    Raises:
        ValueError: value is not a number or string that yields a valid instant
        OverflowError, OSError: timestamp outside the platform's range
    """
    if isinstance(value, bool):
        raise ValueError("Booleans are not dates")
    if isinstance(value, (int, float)):
        return _from_timestamp(value)
    if isinstance(value, str):
        return _parse_text(value)
    raise ValueError(f"Cannot read {type(value).__name__} as a date")


@register_transform(
    kind=TransformKind.DATE,
    description="Format a timestamp (seconds or milliseconds) or date string as month/day/year",
    usage="{{date(createdAt)}}",
)
def transform_date(value: Any) -> str:
    if is_missing(value) or value == "":
        return ""
    try:
        return format_short_date(to_date(value))
    except (ValueError, OverflowError, OSError) as e:
        logger.debug(f"[DATE] Invalid date value {value!r}: {e}")
        return ERROR_SENTINEL
