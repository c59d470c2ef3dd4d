"""
Audit metadata item: identification strings and ITD assembly.

A metadata identification string ("MID") names the audit contribution for one
governor type on one logical path:

    MID:auditgen.auditing.metadata.AuditMetadata#SRC_MAIN_JAVA?com.example.domain.Customer
"""

import logging
from dataclasses import dataclass

from ..config import AuditConfig
from ..core.types import TypeRef
from ..errors import InvalidMetadataIdentifier
from ..itd.builder import CompanionUnit, CompanionUnitBuilder
from ..target import TargetType
from .producer import produce

logger = logging.getLogger('auditgen')

MID_PREFIX = "MID:"
PROVIDES_TYPE_STRING = "auditgen.auditing.metadata.AuditMetadata"
PROVIDES_TYPE = MID_PREFIX + PROVIDES_TYPE_STRING

ASPECT_SUFFIX = "_Audit"

_MODULE_SEPARATOR = ":"


@dataclass(frozen=True)
class LogicalPath:
    """A source path within an optional project module."""

    path: str = "SRC_MAIN_JAVA"
    module: str = ""

    @property
    def name(self) -> str:
        if self.module:
            return f"{self.module}{_MODULE_SEPARATOR}{self.path}"
        return self.path

    @classmethod
    def from_name(cls, name: str) -> "LogicalPath":
        """Parse 'SRC_MAIN_JAVA' or 'module:SRC_MAIN_JAVA'."""
        if _MODULE_SEPARATOR in name:
            module, path = name.split(_MODULE_SEPARATOR, 1)
            return cls(path=path, module=module)
        return cls(path=name)

    def __str__(self):
        return self.name


def get_metadata_identifier_type() -> str:
    return PROVIDES_TYPE


def create_identifier(java_type: TypeRef, path: LogicalPath) -> str:
    """Create the metadata identification string for a governor type."""
    return f"{PROVIDES_TYPE}#{path.name}?{java_type.fully_qualified_name}"


def is_valid(metadata_identification_string: str) -> bool:
    """Check that the string is an audit MID with a path and a type."""
    if not isinstance(metadata_identification_string, str):
        return False
    prefix = PROVIDES_TYPE + "#"
    if not metadata_identification_string.startswith(prefix):
        return False
    instance = metadata_identification_string[len(prefix):]
    path, sep, type_name = instance.partition("?")
    return bool(sep and path and type_name)


def _instance_parts(metadata_identification_string: str):
    if not is_valid(metadata_identification_string):
        raise InvalidMetadataIdentifier(
            f"Metadata identification string '{metadata_identification_string}' "
            "does not appear to be a valid physical type identifier"
        )
    instance = metadata_identification_string[len(PROVIDES_TYPE) + 1:]
    path, _, type_name = instance.partition("?")
    return path, type_name


def get_java_type(metadata_identification_string: str) -> TypeRef:
    return TypeRef(_instance_parts(metadata_identification_string)[1])


def get_path(metadata_identification_string: str) -> LogicalPath:
    return LogicalPath.from_name(_instance_parts(metadata_identification_string)[0])


def aspect_name_for(java_type: TypeRef) -> TypeRef:
    """Customer -> Customer_Audit, in the governor's package."""
    return TypeRef(java_type.fully_qualified_name + ASPECT_SUFFIX)


class AuditMetadata:
    """
    The audit contribution for one governor type.

    Runs the producer and merges its bundle into a companion unit builder.
    """

    def __init__(self, identifier: str, aspect_name: TypeRef,
                 governor: TargetType, config: AuditConfig):
        if not is_valid(identifier):
            raise InvalidMetadataIdentifier(
                f"Metadata identification string '{identifier}' "
                "does not appear to be a valid physical type identifier"
            )

        self.identifier = identifier
        self.aspect_name = aspect_name
        self.governor_type = get_java_type(identifier)
        self.config = config

        self.bundle = produce(governor, config)

        builder = CompanionUnitBuilder(identifier, aspect_name, self.governor_type)
        builder.merge(self.bundle)
        self.itd: CompanionUnit = builder.build()

        logger.debug(
            f"Built {aspect_name.simple_name}: {len(self.bundle.fields)} field(s), "
            f"{len(self.bundle.methods)} method(s)"
        )

    @classmethod
    def for_target(cls, java_type: TypeRef, governor: TargetType, config: AuditConfig,
                   path: LogicalPath = LogicalPath()) -> "AuditMetadata":
        """Build the metadata for a governor, deriving identifier and aspect name."""
        return cls(create_identifier(java_type, path), aspect_name_for(java_type),
                   governor, config)

    def __repr__(self):
        return f"AuditMetadata(identifier='{self.identifier}')"


__all__ = [
    "LogicalPath",
    "PROVIDES_TYPE_STRING",
    "PROVIDES_TYPE",
    "get_metadata_identifier_type",
    "create_identifier",
    "is_valid",
    "get_java_type",
    "get_path",
    "aspect_name_for",
    "AuditMetadata",
]
