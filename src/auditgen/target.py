"""
Read-only handles onto the user type being augmented.
"""

from dataclasses import dataclass
from typing import FrozenSet, Protocol, Type

from .core.contracts import Entity
from .core.types import TypeRef


class TargetType(Protocol):
    """Anything that can answer 'does this type already declare method N'."""

    def has_declared_method(self, name: str) -> bool:
        ...


@dataclass(frozen=True)
class DeclaredType:
    """A target described by value: its Java type and declared method names."""

    java_type: TypeRef
    declared_methods: FrozenSet[str] = frozenset()

    def has_declared_method(self, name: str) -> bool:
        return name in self.declared_methods


class EntityTarget:
    """Adapts an Entity contract class to the TargetType protocol."""

    def __init__(self, entity_cls: Type[Entity]):
        if not (isinstance(entity_cls, type) and issubclass(entity_cls, Entity)):
            raise TypeError(f"{entity_cls!r} is not an Entity contract")
        self.entity_cls = entity_cls

    @property
    def java_type(self) -> TypeRef:
        return self.entity_cls.get_java_type()

    def has_declared_method(self, name: str) -> bool:
        return name in self.entity_cls.get_declared_methods()

    def __repr__(self):
        return f"EntityTarget({self.entity_cls.__name__})"


__all__ = ["TargetType", "DeclaredType", "EntityTarget"]
