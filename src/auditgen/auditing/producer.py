"""
Audit field and accessor producer.

Given a target type and an AuditConfig, builds the four audit fields
(createdDate, modifiedDate, createdBy, modifiedBy), a getter for each one the
target does not already declare, and the @EntityListeners type annotation that
wires the target into Spring Data's AuditingEntityListener.

The producer is a pure function: it never touches a builder and keeps no state,
so it can be called concurrently for different targets.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..config import AuditConfig
from ..core import types
from ..core.descriptors import (
    AnnotationAttribute,
    AnnotationDescriptor,
    AnnotationTag,
    AuditBundle,
    EnumValue,
    FieldDescriptor,
    MethodDescriptor,
    Modifier,
)
from ..core.naming import accessor_method_name
from ..core.types import TypeRef
from ..errors import InvalidConfiguration, InvalidFieldState
from ..target import TargetType

logger = logging.getLogger('auditgen')


@dataclass(frozen=True)
class AuditFieldSpec:
    """One row of the audit field table."""

    name: str
    field_type: TypeRef
    role: AnnotationTag
    temporal: bool
    config_key: str


AUDIT_FIELDS: Tuple[AuditFieldSpec, ...] = (
    AuditFieldSpec("createdDate", types.CALENDAR, AnnotationTag.CREATED_DATE, True,
                   "created_date_column"),
    AuditFieldSpec("modifiedDate", types.CALENDAR, AnnotationTag.LAST_MODIFIED_DATE, True,
                   "modified_date_column"),
    AuditFieldSpec("createdBy", types.STRING, AnnotationTag.CREATED_BY, False,
                   "created_by_column"),
    AuditFieldSpec("modifiedBy", types.STRING, AnnotationTag.LAST_MODIFIED_BY, False,
                   "modified_by_column"),
)

TIMESTAMP_PRECISION = AnnotationDescriptor(
    AnnotationTag.TEMPORAL,
    (AnnotationAttribute("value", EnumValue(types.TEMPORAL_TYPE, "TIMESTAMP")),),
)

ENTITY_LISTENERS = AnnotationDescriptor(
    AnnotationTag.ENTITY_LISTENERS,
    (AnnotationAttribute("value", types.AUDITING_ENTITY_LISTENER),),
)


def column_annotation(column_name: str) -> AnnotationDescriptor:
    """Build @Column(name = column_name)."""
    return AnnotationDescriptor(
        AnnotationTag.COLUMN,
        (AnnotationAttribute("name", column_name),),
    )


def build_field(spec: AuditFieldSpec, config: AuditConfig) -> FieldDescriptor:
    """
    Build the field descriptor for one row of the audit field table.

    Annotation order: @Column (only when overridden), the role marker, then
    @Temporal(TIMESTAMP) for date fields.
    """
    annotations: List[AnnotationDescriptor] = []

    column_name = config.column_for(spec.config_key)
    if column_name is not None:
        annotations.append(column_annotation(column_name))

    annotations.append(AnnotationDescriptor(spec.role))

    if spec.temporal:
        annotations.append(TIMESTAMP_PRECISION)

    return FieldDescriptor(
        name=spec.name,
        field_type=spec.field_type,
        modifier=Modifier.PRIVATE,
        annotations=tuple(annotations),
    )


def accessor_for(field: FieldDescriptor, target: TargetType) -> Optional[MethodDescriptor]:
    """
    Build the getter for a field, or None when none should be generated.

    Args:
        field: Field that will be introduced into the target
        target: Target type, queried for an accessor it already declares

    Returns:
        A public getter returning the field, or None when the target declares
        a method of the same name or the field is transient or static

    Raises:
        InvalidFieldState: If no field is given
    """
    if field is None:
        raise InvalidFieldState("Field required")

    method_name = accessor_method_name(field.name, field.field_type)

    # See if the type itself declared the accessor
    if target.has_declared_method(method_name):
        logger.debug(f"Target already declares {method_name}(), skipping getter")
        return None

    if field.is_transient or field.is_static:
        return None

    return MethodDescriptor(
        name=method_name,
        return_type=field.field_type,
        modifier=Modifier.PUBLIC,
        body=(f"return this.{field.name};",),
    )


def produce(target: TargetType, config: AuditConfig) -> AuditBundle:
    """
    Produce the audit members for one target type.

    Args:
        target: Read-only handle exposing has_declared_method(name)
        config: Column-name overrides from the @audit marker

    Returns:
        AuditBundle with four fields, zero to four getters and the
        @EntityListeners annotation

    Raises:
        InvalidConfiguration: If config or target is missing or malformed
        InvalidFieldState: If an audit field is found transient or static

    Example:
        bundle = produce(EntityTarget(Customer), AuditConfig(created_date_column="created_at"))
        bundle.field("createdDate").annotation(AnnotationTag.COLUMN)
    """
    if config is None:
        raise InvalidConfiguration("Audit configuration is required")
    if not isinstance(config, AuditConfig):
        raise InvalidConfiguration(
            f"Expected AuditConfig, got {type(config).__name__}"
        )
    if target is None:
        raise InvalidConfiguration("Target type is required")
    if not callable(getattr(target, "has_declared_method", None)):
        raise InvalidConfiguration(
            f"Target {target!r} does not provide has_declared_method()"
        )

    fields: List[FieldDescriptor] = []
    methods: List[MethodDescriptor] = []

    for spec in AUDIT_FIELDS:
        field = build_field(spec, config)

        if field.is_transient or field.is_static:
            raise InvalidFieldState(
                f"Audit field '{field.name}' must not be transient or static"
            )

        fields.append(field)

        getter = accessor_for(field, target)
        if getter is not None:
            methods.append(getter)

    return AuditBundle(
        fields=tuple(fields),
        methods=tuple(methods),
        listener_annotation=ENTITY_LISTENERS,
    )


__all__ = [
    "AuditFieldSpec",
    "AUDIT_FIELDS",
    "TIMESTAMP_PRECISION",
    "ENTITY_LISTENERS",
    "column_annotation",
    "build_field",
    "accessor_for",
    "produce",
]
