"""
Entity contracts.

Each @audit entity gets createdDate, modifiedDate, createdBy and modifiedBy
fields plus getters in a generated <Entity>_Audit.aj companion file.
"""

from auditgen import Entity, audit


@audit(created_date_column="created_at", modified_date_column="updated_at")
class Customer(Entity):
    """Customer aggregate root."""

    class Meta:
        package = "com.example.domain"
        # Accessors already hand-written in Customer.java
        declared_methods = ["getModifiedBy"]
