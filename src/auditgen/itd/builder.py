"""
Mutable builder for a generated companion unit (AspectJ ITD).

Producers return immutable descriptor bundles; this builder is where those
bundles are merged, at the call boundary, together with import bookkeeping.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..core.descriptors import (
    AnnotationDescriptor,
    AuditBundle,
    FieldDescriptor,
    MethodDescriptor,
)
from ..core.types import TypeRef


class ImportRegistrationResolver:
    """Tracks the imports a compilation unit needs."""

    def __init__(self, compilation_unit_package: str):
        self.compilation_unit_package = compilation_unit_package
        # Simple name -> the one type allowed to be written by that name
        self._by_simple_name: Dict[str, TypeRef] = {}

    def _is_implicit(self, type_ref: TypeRef) -> bool:
        return type_ref.is_java_lang or type_ref.package == self.compilation_unit_package

    def reserve(self, *type_refs: TypeRef) -> None:
        """
        Claim simple names without importing anything.

        Used for the aspect and its governor: their simple names appear in
        the unit, so no imported type may take them.
        """
        for type_ref in type_refs:
            self._by_simple_name.setdefault(type_ref.simple_name, type_ref)

    def add_imports(self, *type_refs: TypeRef) -> None:
        """
        Register types as used by the compilation unit.

        java.lang types and types from the unit's own package are never
        imported. When two types share a simple name, the first one wins and
        the other is referred to by its fully qualified name.
        """
        self.reserve(*type_refs)

    def owns_simple_name(self, type_ref: TypeRef) -> bool:
        return self._by_simple_name.get(type_ref.simple_name) == type_ref

    def is_imported(self, type_ref: TypeRef) -> bool:
        return self.owns_simple_name(type_ref) and not self._is_implicit(type_ref)

    def simple_name_for(self, type_ref: TypeRef) -> str:
        """Get the name to write in source for a type."""
        if self.owns_simple_name(type_ref):
            return type_ref.simple_name
        if self._is_implicit(type_ref) and type_ref.simple_name not in self._by_simple_name:
            return type_ref.simple_name
        return type_ref.fully_qualified_name

    @property
    def imports(self) -> List[TypeRef]:
        """Registered imports sorted by fully qualified name."""
        return sorted(
            (t for t in self._by_simple_name.values() if not self._is_implicit(t)),
            key=lambda t: t.fully_qualified_name,
        )


@dataclass(frozen=True)
class CompanionUnit:
    """The built contents of one ITD."""

    declared_by: str
    aspect_name: TypeRef
    governor_type: TypeRef
    fields: Tuple[FieldDescriptor, ...]
    methods: Tuple[MethodDescriptor, ...]
    annotations: Tuple[AnnotationDescriptor, ...]
    imports: Tuple[TypeRef, ...]


class CompanionUnitBuilder:
    """Accumulates members for a companion unit before it is built."""

    def __init__(self, declared_by: str, aspect_name: TypeRef, governor_type: TypeRef):
        self.declared_by = declared_by
        self.aspect_name = aspect_name
        self.governor_type = governor_type
        self._fields: List[FieldDescriptor] = []
        self._methods: List[MethodDescriptor] = []
        self._annotations: List[AnnotationDescriptor] = []
        self.import_resolver = ImportRegistrationResolver(aspect_name.package)
        self.import_resolver.reserve(aspect_name, governor_type)

    def add_field(self, field: FieldDescriptor) -> None:
        if any(existing.name == field.name for existing in self._fields):
            raise ValueError(f"Field '{field.name}' is already declared in {self.aspect_name}")
        self._fields.append(field)
        self.import_resolver.add_imports(*field.referenced_types())

    def add_method(self, method: Optional[MethodDescriptor]) -> None:
        # A suppressed getter arrives as None
        if method is None:
            return
        if any(existing.name == method.name for existing in self._methods):
            raise ValueError(f"Method '{method.name}' is already declared in {self.aspect_name}")
        self._methods.append(method)
        self.import_resolver.add_imports(*method.referenced_types())

    def add_annotation(self, annotation: AnnotationDescriptor) -> None:
        self._annotations.append(annotation)
        self.import_resolver.add_imports(*annotation.referenced_types())

    def merge(self, bundle: AuditBundle) -> None:
        """Add every member of an audit bundle."""
        for field in bundle.fields:
            self.add_field(field)
        for method in bundle.methods:
            self.add_method(method)
        self.add_annotation(bundle.listener_annotation)

    def build(self) -> CompanionUnit:
        return CompanionUnit(
            declared_by=self.declared_by,
            aspect_name=self.aspect_name,
            governor_type=self.governor_type,
            fields=tuple(self._fields),
            methods=tuple(self._methods),
            annotations=tuple(self._annotations),
            imports=tuple(self.import_resolver.imports),
        )


__all__ = [
    "ImportRegistrationResolver",
    "CompanionUnit",
    "CompanionUnitBuilder",
]
