"""default(path, 'fallback') - fallback text for missing or null values."""

from typing import Any

from datafmt.templates.display import to_display
from datafmt.templates.paths import is_missing
from datafmt.templates.transforms.registry import TransformKind, register_transform


@register_transform(
    kind=TransformKind.DEFAULT,
    description="Use the fallback text when the value is missing or null",
    usage="{{default(favoriteColor, 'unknown')}}",
)
def transform_default(value: Any, fallback: Any) -> str:
    if is_missing(value):
        return to_display(fallback)
    return to_display(value)
