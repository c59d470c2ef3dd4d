"""
Companion unit (AspectJ ITD) assembly and rendering.
"""

from .builder import CompanionUnit, CompanionUnitBuilder, ImportRegistrationResolver
from .renderer import render_annotation, render_itd

__all__ = [
    "CompanionUnit",
    "CompanionUnitBuilder",
    "ImportRegistrationResolver",
    "render_annotation",
    "render_itd",
]
