"""
JavaBean naming rules for generated accessors.
"""

from typing import Optional

from .types import TypeRef

# Primitive boolean fields use the "is" prefix
_BOOLEAN_PRIMITIVE = "boolean"


def capitalize(name: str) -> str:
    """Upper-case the first character only ('createdBy' -> 'CreatedBy')."""
    if not name:
        raise ValueError("Name must be a non-empty string")
    return name[0].upper() + name[1:]


def accessor_method_name(field_name: str, field_type: Optional[TypeRef] = None) -> str:
    """
    Compute the JavaBean getter name for a field.

    Examples:
        createdDate -> getCreatedDate
        active (boolean) -> isActive
    """
    if field_type is not None and field_type.fully_qualified_name == _BOOLEAN_PRIMITIVE:
        return "is" + capitalize(field_name)
    return "get" + capitalize(field_name)


__all__ = ["capitalize", "accessor_method_name"]
