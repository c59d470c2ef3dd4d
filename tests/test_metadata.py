"""
Tests for audit metadata identifiers and companion unit assembly.
"""

import pytest

from auditgen import AuditConfig, AuditMetadata, LogicalPath, TypeRef
from auditgen.auditing import metadata
from auditgen.core import types
from auditgen.errors import InvalidMetadataIdentifier

CUSTOMER_MID = (
    "MID:auditgen.auditing.metadata.AuditMetadata"
    "#SRC_MAIN_JAVA?com.example.domain.Customer"
)


class TestIdentifiers:
    """Test metadata identification strings."""

    def test_create_identifier(self, customer_type):
        assert metadata.create_identifier(customer_type, LogicalPath()) == CUSTOMER_MID

    def test_identifier_type(self):
        assert metadata.get_metadata_identifier_type() == \
            "MID:auditgen.auditing.metadata.AuditMetadata"

    def test_round_trip_with_module(self, customer_type):
        path = LogicalPath(path="SRC_MAIN_JAVA", module="core")
        mid = metadata.create_identifier(customer_type, path)

        assert "#core:SRC_MAIN_JAVA?" in mid
        assert metadata.get_java_type(mid) == customer_type
        assert metadata.get_path(mid) == path

    def test_is_valid(self):
        assert metadata.is_valid(CUSTOMER_MID)
        assert not metadata.is_valid("MID:other.Metadata#SRC_MAIN_JAVA?com.example.Customer")
        assert not metadata.is_valid("MID:auditgen.auditing.metadata.AuditMetadata#SRC_MAIN_JAVA")
        assert not metadata.is_valid(None)

    def test_get_java_type_rejects_foreign_identifier(self):
        with pytest.raises(InvalidMetadataIdentifier, match="valid physical type identifier"):
            metadata.get_java_type("MID:other.Metadata#SRC_MAIN_JAVA?com.example.Customer")

    def test_aspect_name(self, customer_type):
        aspect = metadata.aspect_name_for(customer_type)

        assert aspect == TypeRef("com.example.domain.Customer_Audit")


class TestAuditMetadata:
    """Test running the producer into a companion unit."""

    def test_rejects_invalid_identifier(self, make_target, customer_type):
        with pytest.raises(InvalidMetadataIdentifier):
            AuditMetadata("MID:bogus", metadata.aspect_name_for(customer_type),
                          make_target(), AuditConfig())

    def test_builds_itd(self, make_target, customer_type):
        item = AuditMetadata.for_target(customer_type, make_target("getModifiedBy"),
                                        AuditConfig(created_date_column="created_at"))

        assert item.identifier == CUSTOMER_MID
        assert item.governor_type == customer_type
        assert item.itd.aspect_name.simple_name == "Customer_Audit"
        assert [f.name for f in item.itd.fields] == [f.name for f in item.bundle.fields]
        assert len(item.itd.methods) == 3
        assert item.itd.annotations == (item.bundle.listener_annotation,)

    def test_imports(self, make_target, customer_type):
        item = AuditMetadata.for_target(customer_type, make_target(), AuditConfig())

        assert [t.fully_qualified_name for t in item.itd.imports] == [
            "java.util.Calendar",
            "javax.persistence.EntityListeners",
            "javax.persistence.Temporal",
            "javax.persistence.TemporalType",
            "org.springframework.data.annotation.CreatedBy",
            "org.springframework.data.annotation.CreatedDate",
            "org.springframework.data.annotation.LastModifiedBy",
            "org.springframework.data.annotation.LastModifiedDate",
            "org.springframework.data.jpa.domain.support.AuditingEntityListener",
        ]

    def test_column_import_only_when_overridden(self, make_target, customer_type):
        item = AuditMetadata.for_target(customer_type, make_target(),
                                        AuditConfig(modified_by_column="editor"))

        assert types.COLUMN in item.itd.imports
