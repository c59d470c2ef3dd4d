"""
Entity contract definitions using metaclass pattern.
Defines the Entity base class that user-authored types derive from.
"""

import inspect
from typing import FrozenSet, Tuple

from .types import TypeRef

DEFAULT_PACKAGE = "com.example.domain"


class EntityOptions:
    """Metadata container for entity configuration."""

    def __init__(self):
        self.package: str = DEFAULT_PACKAGE
        self.declared_methods: Tuple[str, ...] = ()
        self.module: str = ""


class EntityMeta(type):
    """Metaclass for Entity that records the Meta options and body methods."""

    def __new__(mcs, name, bases, namespace, **kwargs):
        # Skip processing for Entity itself
        if name == "Entity" and not bases:
            return super().__new__(mcs, name, bases, namespace)

        # Functions written directly in the class body count as declared
        body_methods = frozenset(
            attr_name
            for attr_name, attr_value in namespace.items()
            if not attr_name.startswith("_")
            and inspect.isfunction(
                attr_value.__func__
                if isinstance(attr_value, (staticmethod, classmethod)) else attr_value
            )
        )
        namespace["_body_methods"] = body_methods

        # Process Meta inner class if it exists
        meta = namespace.get("Meta", None)
        options = EntityOptions()

        if meta:
            options.package = getattr(meta, "package", DEFAULT_PACKAGE)
            declared = getattr(meta, "declared_methods", ())
            # A bare string names a single method
            if isinstance(declared, str):
                declared = (declared,)
            options.declared_methods = tuple(declared)
            options.module = getattr(meta, "module", "")

        namespace["_options"] = options

        return super().__new__(mcs, name, bases, namespace)


class Entity(metaclass=EntityMeta):
    """Base class for all entity contracts."""

    _options: EntityOptions = EntityOptions()
    _body_methods: FrozenSet[str] = frozenset()

    class Meta:
        """Override this in subclasses to provide entity metadata."""
        package: str = DEFAULT_PACKAGE
        declared_methods: Tuple[str, ...] = ()
        module: str = ""

    @classmethod
    def get_package(cls) -> str:
        """Get the Java package the entity lives in."""
        return cls._options.package

    @classmethod
    def get_module(cls) -> str:
        """Get the logical module name ('' for single-module projects)."""
        return cls._options.module

    @classmethod
    def get_java_type(cls) -> TypeRef:
        """
        Get the Java type this contract describes.

        Returns:
            TypeRef: e.g. TypeRef('com.example.domain.Customer')
        """
        package = cls.get_package()
        if package:
            return TypeRef(f"{package}.{cls.__name__}")
        return TypeRef(cls.__name__)

    @classmethod
    def get_declared_methods(cls) -> FrozenSet[str]:
        """Get the names of methods the user already wrote for this type."""
        return cls._body_methods | frozenset(cls._options.declared_methods)


__all__ = [
    "Entity",
    "EntityMeta",
    "EntityOptions",
    "DEFAULT_PACKAGE",
]
