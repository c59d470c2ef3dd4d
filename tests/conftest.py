"""Pytest configuration and fixtures."""

import textwrap

import pytest

from auditgen import DeclaredType, TypeRef


@pytest.fixture
def customer_type():
    """Java type of the sample governor."""
    return TypeRef("com.example.domain.Customer")


@pytest.fixture
def make_target(customer_type):
    """Build a target declaring the given method names."""

    def _make(*methods):
        return DeclaredType(customer_type, frozenset(methods))

    return _make


@pytest.fixture
def make_project(tmp_path):
    """Write an auditgen project with the given entity modules and settings."""

    def _make(entities, settings=None):
        root = tmp_path / "project"
        (root / "entities").mkdir(parents=True)
        for name, source in entities.items():
            (root / "entities" / f"{name}.py").write_text(textwrap.dedent(source))
        if settings is not None:
            (root / "config").mkdir()
            (root / "config" / "settings.py").write_text(textwrap.dedent(settings))
        return root

    return _make


@pytest.fixture
def customer_entity_source():
    """Source of an audited entity module."""
    return '''
    from auditgen import Entity, audit


    @audit(created_date_column="created_at")
    class Customer(Entity):
        """Customer aggregate root."""

        class Meta:
            package = "com.example.domain"
            declared_methods = ["getModifiedBy"]
    '''
