"""
Immutable member descriptors for generated companion units.

Descriptors hold tuples rather than lists so that two descriptor sets built
from the same inputs compare equal and can be shared freely between threads.
"""

from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Optional, Set, Tuple, Union

from . import types
from .types import TypeRef


class Modifier(IntFlag):
    """Java member modifiers."""
    PUBLIC = 0x0001
    PRIVATE = 0x0002
    PROTECTED = 0x0004
    STATIC = 0x0008
    FINAL = 0x0010
    TRANSIENT = 0x0080

    def keywords(self) -> str:
        """Render as Java source keywords in canonical order."""
        order = [
            (Modifier.PUBLIC, "public"),
            (Modifier.PROTECTED, "protected"),
            (Modifier.PRIVATE, "private"),
            (Modifier.STATIC, "static"),
            (Modifier.FINAL, "final"),
            (Modifier.TRANSIENT, "transient"),
        ]
        return " ".join(word for flag, word in order if self & flag)


class AnnotationTag(Enum):
    """Kinds of annotation the audit producer emits."""
    COLUMN = types.COLUMN
    CREATED_DATE = types.CREATED_DATE
    LAST_MODIFIED_DATE = types.LAST_MODIFIED_DATE
    TEMPORAL = types.TEMPORAL
    CREATED_BY = types.CREATED_BY
    LAST_MODIFIED_BY = types.LAST_MODIFIED_BY
    ENTITY_LISTENERS = types.ENTITY_LISTENERS

    @property
    def annotation_type(self) -> TypeRef:
        return self.value


@dataclass(frozen=True)
class EnumValue:
    """An enum constant used as an annotation attribute value."""

    enum_type: TypeRef
    constant: str


AttributeValue = Union[str, EnumValue, TypeRef]


@dataclass(frozen=True)
class AnnotationAttribute:
    """A single key/value pair on an annotation."""

    name: str
    value: AttributeValue

    def referenced_types(self) -> Set[TypeRef]:
        if isinstance(self.value, EnumValue):
            return {self.value.enum_type}
        if isinstance(self.value, TypeRef):
            return {self.value}
        return set()


@dataclass(frozen=True)
class AnnotationDescriptor:
    """An annotation: a tag plus zero or more attributes."""

    tag: AnnotationTag
    attributes: Tuple[AnnotationAttribute, ...] = ()

    @property
    def annotation_type(self) -> TypeRef:
        return self.tag.annotation_type

    def attribute(self, name: str) -> Optional[AnnotationAttribute]:
        """Get an attribute by name, or None if not present."""
        for attr in self.attributes:
            if attr.name == name:
                return attr
        return None

    def referenced_types(self) -> Set[TypeRef]:
        found = {self.annotation_type}
        for attr in self.attributes:
            found |= attr.referenced_types()
        return found


@dataclass(frozen=True)
class FieldDescriptor:
    """A field to be introduced into the target type."""

    name: str
    field_type: TypeRef
    modifier: Modifier = Modifier.PRIVATE
    annotations: Tuple[AnnotationDescriptor, ...] = ()

    @property
    def is_transient(self) -> bool:
        return bool(self.modifier & Modifier.TRANSIENT)

    @property
    def is_static(self) -> bool:
        return bool(self.modifier & Modifier.STATIC)

    def annotation(self, tag: AnnotationTag) -> Optional[AnnotationDescriptor]:
        """Get the first annotation with the given tag, or None."""
        for annotation in self.annotations:
            if annotation.tag is tag:
                return annotation
        return None

    def referenced_types(self) -> Set[TypeRef]:
        found = {self.field_type}
        for annotation in self.annotations:
            found |= annotation.referenced_types()
        return found


@dataclass(frozen=True)
class MethodDescriptor:
    """A no-argument method to be introduced into the target type."""

    name: str
    return_type: TypeRef
    modifier: Modifier = Modifier.PUBLIC
    body: Tuple[str, ...] = ()

    def referenced_types(self) -> Set[TypeRef]:
        return {self.return_type}


@dataclass(frozen=True)
class AuditBundle:
    """Everything the audit producer contributes for one target type."""

    fields: Tuple[FieldDescriptor, ...]
    methods: Tuple[MethodDescriptor, ...]
    listener_annotation: AnnotationDescriptor

    def field(self, name: str) -> Optional[FieldDescriptor]:
        for descriptor in self.fields:
            if descriptor.name == name:
                return descriptor
        return None

    def method(self, name: str) -> Optional[MethodDescriptor]:
        for descriptor in self.methods:
            if descriptor.name == name:
                return descriptor
        return None

    def referenced_types(self) -> Set[TypeRef]:
        """All types the bundle mentions, for import registration."""
        found = self.listener_annotation.referenced_types()
        for descriptor in self.fields:
            found |= descriptor.referenced_types()
        for descriptor in self.methods:
            found |= descriptor.referenced_types()
        return found


__all__ = [
    "Modifier",
    "AnnotationTag",
    "EnumValue",
    "AnnotationAttribute",
    "AnnotationDescriptor",
    "FieldDescriptor",
    "MethodDescriptor",
    "AuditBundle",
]
