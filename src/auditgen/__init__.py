"""
auditgen - Audit field generation for entity companion units.

auditgen is a leaf producer in a project-scaffolding toolchain. Mark an entity
contract with @audit and it generates an AspectJ inter-type declaration that
adds, to the matching Java entity:
- createdDate / modifiedDate timestamp fields (@CreatedDate, @LastModifiedDate)
- createdBy / modifiedBy actor fields (@CreatedBy, @LastModifiedBy)
- getters for each field the entity does not already declare
- @EntityListeners(AuditingEntityListener.class) on the type

Column names default to JPA naming and can be overridden per field.
"""

from .core import (
    Entity,
    TypeRef,
    Modifier,
    AnnotationTag,
    AnnotationDescriptor,
    FieldDescriptor,
    MethodDescriptor,
    AuditBundle,
)

from .config import AuditConfig

from .decorators import audit, AuditRegistry

from .errors import (
    AuditGenError,
    InvalidConfiguration,
    InvalidFieldState,
    InvalidMetadataIdentifier,
)

from .target import DeclaredType, EntityTarget

from .auditing import produce, AuditMetadata, LogicalPath

from .itd import render_itd

__version__ = "0.1.0"

__all__ = [
    # Contracts
    "Entity",
    # Descriptors
    "TypeRef",
    "Modifier",
    "AnnotationTag",
    "AnnotationDescriptor",
    "FieldDescriptor",
    "MethodDescriptor",
    "AuditBundle",
    # Configuration
    "AuditConfig",
    # Decorators
    "audit",
    "AuditRegistry",
    # Errors
    "AuditGenError",
    "InvalidConfiguration",
    "InvalidFieldState",
    "InvalidMetadataIdentifier",
    # Targets
    "DeclaredType",
    "EntityTarget",
    # Generation
    "produce",
    "AuditMetadata",
    "LogicalPath",
    "render_itd",
]
