"""Core module for auditgen."""

from .contracts import Entity, EntityMeta, EntityOptions
from .descriptors import (
    Modifier,
    AnnotationTag,
    EnumValue,
    AnnotationAttribute,
    AnnotationDescriptor,
    FieldDescriptor,
    MethodDescriptor,
    AuditBundle,
)
from .naming import accessor_method_name
from .types import TypeRef

__all__ = [
    "Entity",
    "EntityMeta",
    "EntityOptions",
    "Modifier",
    "AnnotationTag",
    "EnumValue",
    "AnnotationAttribute",
    "AnnotationDescriptor",
    "FieldDescriptor",
    "MethodDescriptor",
    "AuditBundle",
    "accessor_method_name",
    "TypeRef",
]
