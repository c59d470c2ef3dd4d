"""
Configuration settings for your auditgen project.
Edit these values to match your Java project layout.

Environment variables can override these settings:
- AUDITGEN_SOURCE_ROOT
- AUDITGEN_OUTPUT_DIR
- AUDITGEN_LOGICAL_PATH, AUDITGEN_MODULE
"""

import os

# Where generated .aj files go, relative to OUTPUT_DIR
SOURCE_ROOT = os.getenv("AUDITGEN_SOURCE_ROOT", "src/main/java")

# Root of the Java project (relative paths resolve against this project)
OUTPUT_DIR = os.getenv("AUDITGEN_OUTPUT_DIR", "generated")

# Logical path and module used in metadata identifiers
LOGICAL_PATH = os.getenv("AUDITGEN_LOGICAL_PATH", "SRC_MAIN_JAVA")
MODULE = os.getenv("AUDITGEN_MODULE", "")
