"""
Audit marker configuration.

Holds the four optional column-name overrides resolved from an @audit marker.
"""

from dataclasses import dataclass, fields
from typing import Optional

from .errors import InvalidConfiguration


@dataclass(frozen=True)
class AuditConfig:
    """Column-name overrides for the generated audit fields."""

    created_date_column: Optional[str] = None
    modified_date_column: Optional[str] = None
    created_by_column: Optional[str] = None
    modified_by_column: Optional[str] = None

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if value is not None and not isinstance(value, str):
                raise InvalidConfiguration(
                    f"'{f.name}' must be a string or None, got {type(value).__name__}"
                )

    def column_for(self, key: str) -> Optional[str]:
        """
        Get the column override for a configuration key.

        Args:
            key: One of the field names of this class (e.g. 'created_by_column')

        Returns:
            The override string exactly as given, or None when absent or blank
        """
        if key not in self.keys():
            raise InvalidConfiguration(f"Unknown audit configuration key '{key}'")
        value = getattr(self, key)
        if value is None or not value.strip():
            return None
        return value

    @classmethod
    def keys(cls):
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_marker(cls, **values) -> "AuditConfig":
        """
        Build a configuration from @audit marker arguments.

        Raises:
            InvalidConfiguration: On unknown keys or non-string values
        """
        unknown = set(values) - set(cls.keys())
        if unknown:
            raise InvalidConfiguration(
                f"Unknown audit configuration keys: {sorted(unknown)}. "
                f"Expected any of {list(cls.keys())}"
            )
        return cls(**values)


__all__ = ["AuditConfig"]
