"""Transformation registry.

The set of transformations is closed: every entry is keyed by a
TransformKind member, and each transform module registers its function
with @register_transform when it is imported.

    @register_transform(
        kind=TransformKind.DEFAULT,
        description="Fallback text when the value is missing or null",
        usage="{{default(user.nickname, 'friend')}}",
    )
    def transform_default(value, fallback): ...
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

TransformFunc = Callable[..., str]


class TransformKind(Enum):
    """Names usable as ``name(...)`` inside a placeholder."""

    DEFAULT = "default"
    DATE = "date"
    REPLACE = "replace"

    @classmethod
    def lookup(cls, name: str) -> "TransformKind | None":
        """Member for a placeholder name, or None if unknown."""
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass(frozen=True)
class TransformDefinition:
    """A registered transformation."""

    kind: TransformKind
    func: TransformFunc
    description: str
    usage: str = ""

    @property
    def name(self) -> str:
        return self.kind.value

    def __call__(self, value: Any, *args: Any) -> str:
        return self.func(value, *args)


class TransformRegistry:
    """Holds one definition per TransformKind."""

    def __init__(self) -> None:
        self._transforms: dict[TransformKind, TransformDefinition] = {}

    def register(self, definition: TransformDefinition) -> None:
        if not isinstance(definition.kind, TransformKind):
            raise TypeError(f"Transform kind must be a TransformKind, got {definition.kind!r}")
        if definition.kind in self._transforms:
            logger.warning(f"Transform '{definition.name}' already registered, overwriting")
        self._transforms[definition.kind] = definition
        logger.debug(f"Registered transform: {definition.name}")

    def get(self, kind: TransformKind) -> TransformDefinition | None:
        return self._transforms.get(kind)

    def list_all(self) -> list[TransformDefinition]:
        """All definitions in TransformKind declaration order."""
        return [self._transforms[kind] for kind in TransformKind if kind in self._transforms]

    def missing(self) -> list[TransformKind]:
        """Kinds with no registered implementation."""
        return [kind for kind in TransformKind if kind not in self._transforms]

    def __contains__(self, kind: TransformKind) -> bool:
        return kind in self._transforms

    def __len__(self) -> int:
        return len(self._transforms)


_registry = TransformRegistry()


def get_registry() -> TransformRegistry:
    """Get the process-wide transform registry."""
    return _registry


def register_transform(
    kind: TransformKind,
    description: str,
    usage: str = "",
) -> Callable[[TransformFunc], TransformFunc]:
    """Decorator registering a function as the implementation of kind."""

    def decorator(func: TransformFunc) -> TransformFunc:
        _registry.register(
            TransformDefinition(kind=kind, func=func, description=description, usage=usage)
        )
        return func

    return decorator
