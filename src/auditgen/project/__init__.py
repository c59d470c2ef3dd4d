"""
Project-level generation for auditgen.
Scans entity contracts and writes their audit ITDs.
"""

from .generator import ItdGenerator

__all__ = ["ItdGenerator"]
