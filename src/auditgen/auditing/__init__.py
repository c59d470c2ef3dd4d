"""
Audit member generation: the producer and the metadata item that runs it.
"""

from .producer import AUDIT_FIELDS, AuditFieldSpec, accessor_for, produce
from .metadata import (
    AuditMetadata,
    LogicalPath,
    aspect_name_for,
    create_identifier,
    get_java_type,
    get_path,
    is_valid,
)

__all__ = [
    "AUDIT_FIELDS",
    "AuditFieldSpec",
    "accessor_for",
    "produce",
    "AuditMetadata",
    "LogicalPath",
    "aspect_name_for",
    "create_identifier",
    "get_java_type",
    "get_path",
    "is_valid",
]
