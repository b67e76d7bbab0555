"""Template transformations module.

Importing this module registers every transformation via decorators.
Each transform file defines one function decorated with @register_transform.
"""

from datafmt.templates.transforms import (  # noqa: F401 - side effect imports
    default,
    replace,
)
from datafmt.templates.transforms import date as date_transform  # noqa: F401
from datafmt.templates.transforms.registry import (
    TransformDefinition,
    TransformKind,
    TransformRegistry,
    get_registry,
    register_transform,
)

__all__ = [
    "TransformDefinition",
    "TransformKind",
    "TransformRegistry",
    "get_registry",
    "register_transform",
]
