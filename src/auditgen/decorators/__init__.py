"""
Audit decorator and registry for auditgen.
The @audit marker declares that an entity contract gets audit fields.
"""

from typing import Dict, Optional, Type

from ..config import AuditConfig
from ..core.contracts import Entity


class AuditRegistry:
    """Global registry of audited entities, keyed by fully qualified Java name."""

    _entities: Dict[str, Type[Entity]] = {}

    @classmethod
    def register(cls, entity_cls: Type[Entity]) -> None:
        """
        Register an audited entity.

        Args:
            entity_cls: Entity class carrying an _auditgen_audit config

        Raises:
            ValueError: If an entity with the same Java type is already registered
        """
        key = entity_cls.get_java_type().fully_qualified_name
        if key in cls._entities and cls._entities[key] is not entity_cls:
            raise ValueError(f"Audited entity '{key}' is already registered")
        cls._entities[key] = entity_cls

    @classmethod
    def get(cls, java_type_name: str) -> Optional[Type[Entity]]:
        """
        Get an audited entity by fully qualified Java name.

        Returns:
            Entity class or None if not found
        """
        return cls._entities.get(java_type_name)

    @classmethod
    def get_all(cls) -> Dict[str, Type[Entity]]:
        """Get all audited entities."""
        return cls._entities.copy()

    @classmethod
    def clear(cls) -> None:
        """Clear all entities (useful for testing and code generation)."""
        cls._entities.clear()


def get_audit_config(entity_cls: Type[Entity]) -> Optional[AuditConfig]:
    """Get the AuditConfig attached by @audit, or None for unaudited entities."""
    return entity_cls.__dict__.get("_auditgen_audit")


def audit(
    created_date_column: Optional[str] = None,
    modified_date_column: Optional[str] = None,
    created_by_column: Optional[str] = None,
    modified_by_column: Optional[str] = None,
):
    """
    Decorator marking an entity contract as audited.

    The generator adds createdDate, modifiedDate, createdBy and modifiedBy
    fields, their getters and @EntityListeners(AuditingEntityListener.class)
    to the entity's companion ITD.

    Args:
        created_date_column: Column name for createdDate (default naming if omitted)
        modified_date_column: Column name for modifiedDate
        created_by_column: Column name for createdBy
        modified_by_column: Column name for modifiedBy

    Example:
        @audit(created_date_column="created_at")
        class Customer(Entity):
            class Meta:
                package = "com.example.domain"
    """
    # Validate marker arguments up front
    config = AuditConfig.from_marker(
        created_date_column=created_date_column,
        modified_date_column=modified_date_column,
        created_by_column=created_by_column,
        modified_by_column=modified_by_column,
    )

    def decorator(cls: Type[Entity]) -> Type[Entity]:
        if not (isinstance(cls, type) and issubclass(cls, Entity)):
            raise TypeError(
                f"@audit can only be applied to Entity subclasses, got {cls!r}"
            )

        # Attach config to the class (dual-storage pattern)
        cls._auditgen_audit = config

        AuditRegistry.register(cls)

        return cls

    return decorator


__all__ = [
    "audit",
    "AuditRegistry",
    "get_audit_config",
]
