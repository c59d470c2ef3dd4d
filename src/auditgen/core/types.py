"""
Type references used in generated companion units.
These map to the Java types the generated ITD source refers to.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TypeRef:
    """Opaque reference to an external (Java) type by fully qualified name."""

    fully_qualified_name: str

    def __post_init__(self):
        if not self.fully_qualified_name or not isinstance(self.fully_qualified_name, str):
            raise ValueError("Type reference requires a fully qualified name")

    @property
    def simple_name(self) -> str:
        """Get the unqualified type name (e.g. 'Calendar')."""
        return self.fully_qualified_name.rsplit(".", 1)[-1]

    @property
    def package(self) -> str:
        """Get the package part of the name, or '' for the default package."""
        if "." not in self.fully_qualified_name:
            return ""
        return self.fully_qualified_name.rsplit(".", 1)[0]

    @property
    def is_java_lang(self) -> bool:
        """Types in java.lang never need an import."""
        return self.package == "java.lang"

    def __str__(self):
        return self.fully_qualified_name


# JDK
CALENDAR = TypeRef("java.util.Calendar")
STRING = TypeRef("java.lang.String")

# JPA
COLUMN = TypeRef("javax.persistence.Column")
TEMPORAL = TypeRef("javax.persistence.Temporal")
TEMPORAL_TYPE = TypeRef("javax.persistence.TemporalType")
ENTITY_LISTENERS = TypeRef("javax.persistence.EntityListeners")

# Spring Data
CREATED_DATE = TypeRef("org.springframework.data.annotation.CreatedDate")
LAST_MODIFIED_DATE = TypeRef("org.springframework.data.annotation.LastModifiedDate")
CREATED_BY = TypeRef("org.springframework.data.annotation.CreatedBy")
LAST_MODIFIED_BY = TypeRef("org.springframework.data.annotation.LastModifiedBy")
AUDITING_ENTITY_LISTENER = TypeRef(
    "org.springframework.data.jpa.domain.support.AuditingEntityListener"
)


__all__ = [
    "TypeRef",
    "CALENDAR",
    "STRING",
    "COLUMN",
    "TEMPORAL",
    "TEMPORAL_TYPE",
    "ENTITY_LISTENERS",
    "CREATED_DATE",
    "LAST_MODIFIED_DATE",
    "CREATED_BY",
    "LAST_MODIFIED_BY",
    "AUDITING_ENTITY_LISTENER",
]
