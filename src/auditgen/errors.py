"""
Exceptions raised while producing audit members.
"""


class AuditGenError(Exception):
    """Base class for all auditgen errors."""


class InvalidConfiguration(AuditGenError, ValueError):
    """Configuration or target handle is missing or malformed."""


class InvalidFieldState(AuditGenError, RuntimeError):
    """A generated field broke an internal contract (e.g. marked transient)."""


class InvalidMetadataIdentifier(AuditGenError, ValueError):
    """Metadata identification string does not belong to the audit producer."""


__all__ = [
    "AuditGenError",
    "InvalidConfiguration",
    "InvalidFieldState",
    "InvalidMetadataIdentifier",
]
