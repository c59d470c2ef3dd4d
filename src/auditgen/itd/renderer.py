"""
Render a CompanionUnit as AspectJ inter-type declaration source.
"""

from typing import List

from ..core.descriptors import (
    AnnotationAttribute,
    AnnotationDescriptor,
    EnumValue,
    FieldDescriptor,
    MethodDescriptor,
)
from ..core.types import TypeRef
from .builder import CompanionUnit, ImportRegistrationResolver

INDENT = "    "

BANNER = (
    "// WARNING: DO NOT EDIT THIS FILE. THIS FILE IS MANAGED BY AUDITGEN.\n"
    "// You may push code into the target .java compilation unit if you wish to edit any member(s).\n"
)


def _escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def render_attribute_value(attribute: AnnotationAttribute,
                           resolver: ImportRegistrationResolver) -> str:
    value = attribute.value
    if isinstance(value, EnumValue):
        return f"{resolver.simple_name_for(value.enum_type)}.{value.constant}"
    if isinstance(value, TypeRef):
        return f"{resolver.simple_name_for(value)}.class"
    return f'"{_escape(value)}"'


def render_annotation(annotation: AnnotationDescriptor,
                      resolver: ImportRegistrationResolver) -> str:
    """
    Render an annotation, e.g. @Column(name = "created_at").

    A lone 'value' attribute is written positionally: @Temporal(TemporalType.TIMESTAMP).
    """
    name = "@" + resolver.simple_name_for(annotation.annotation_type)
    if not annotation.attributes:
        return name

    if len(annotation.attributes) == 1 and annotation.attributes[0].name == "value":
        return f"{name}({render_attribute_value(annotation.attributes[0], resolver)})"

    rendered = ", ".join(
        f"{attr.name} = {render_attribute_value(attr, resolver)}"
        for attr in annotation.attributes
    )
    return f"{name}({rendered})"


def _render_field(field: FieldDescriptor, governor: str,
                  resolver: ImportRegistrationResolver) -> List[str]:
    lines = [INDENT + render_annotation(a, resolver) for a in field.annotations]
    field_type = resolver.simple_name_for(field.field_type)
    lines.append(f"{INDENT}{field.modifier.keywords()} {field_type} {governor}.{field.name};")
    return lines


def _render_method(method: MethodDescriptor, governor: str,
                   resolver: ImportRegistrationResolver) -> List[str]:
    return_type = resolver.simple_name_for(method.return_type)
    lines = [f"{INDENT}{method.modifier.keywords()} {return_type} {governor}.{method.name}() {{"]
    lines.extend(INDENT * 2 + line for line in method.body)
    lines.append(INDENT + "}")
    return lines


def render_itd(unit: CompanionUnit) -> str:
    """
    Render the full .aj source for a companion unit.

    Args:
        unit: Built companion unit

    Returns:
        str: AspectJ source text ending with a newline
    """
    package = unit.aspect_name.package
    resolver = ImportRegistrationResolver(package)
    resolver.reserve(unit.aspect_name, unit.governor_type)
    resolver.add_imports(*unit.imports)
    governor = resolver.simple_name_for(unit.governor_type)

    out: List[str] = [BANNER]
    if package:
        out.append(f"package {package};\n")

    imports = resolver.imports
    if imports:
        out.extend(f"import {t.fully_qualified_name};" for t in imports)
        out.append("")

    out.append(f"privileged aspect {unit.aspect_name.simple_name} {{")

    for annotation in unit.annotations:
        out.append("")
        out.append(f"{INDENT}declare @type: {governor}: {render_annotation(annotation, resolver)};")

    for field in unit.fields:
        out.append("")
        out.extend(_render_field(field, governor, resolver))

    for method in unit.methods:
        out.append("")
        out.extend(_render_method(method, governor, resolver))

    out.append("")
    out.append("}")
    return "\n".join(out) + "\n"


__all__ = ["render_itd", "render_annotation", "render_attribute_value"]
