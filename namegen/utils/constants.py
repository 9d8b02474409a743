"""
Constants and Enumerations for the namegen package.

This module consolidates the constant definitions used by the naming
pipeline, providing a single source of truth for separators, prefixes,
configuration keys and generator slots.
"""

from __future__ import annotations

from enum import Enum


# =============================================================================
# Generator Slots
# =============================================================================

class GeneratorSlot(Enum):
    """Named generator roles in the naming pipeline."""

    ENUM = "Enum"
    TYPE = "Type"
    PROPERTY = "Property"


# =============================================================================
# Normalization Constants
# =============================================================================

CANONICAL_SEPARATOR = "-"
DIGIT_PREFIX = "N"

# Enum slot
ENUM_SEPARATOR_CHARS = (":", "_")
ENUM_POST_CASING_REPLACEMENTS = ((".", "_"),)

# Type slot
TYPE_SEPARATOR_CHARS = ("_",)

# Property slot
PROPERTY_SEPARATOR_CHARS = ("_", ".")
PROPERTY_STRIPPED_CHARS = ("@",)

# Type name used when neither a hint nor a schema title is available
ANONYMOUS_TYPE_NAME = "Anonymous"

# Comparison operators used as enum names
ENUM_OPERATOR_NAMES = {
    "=": "Eq",
    "!=": "Ne",
    ">": "Gt",
    "<": "Lt",
    ">=": "Ge",
    "<=": "Le",
    "~=": "Approx",
}


# =============================================================================
# Plugin Descriptor Constants
# =============================================================================

DESCRIPTOR_SEPARATOR = ":"
TYPE_PATH_SEPARATOR = "."
PLUGIN_MODULE_PREFIX = "namegen_plugin_"
PYTHON_SOURCE_SUFFIX = ".py"
PACKAGE_INIT_FILE = "__init__.py"


# =============================================================================
# Environment Variables
# =============================================================================

ENV_CONFIG_FILE = "NAMEGEN_CONFIG"
ENV_LOG_LEVEL = "NAMEGEN_LOG_LEVEL"
ENV_TYPE_NAME_GENERATOR = "NAMEGEN_TYPE_NAME_GENERATOR"
ENV_PROPERTY_NAME_GENERATOR = "NAMEGEN_PROPERTY_NAME_GENERATOR"
ENV_ENUM_NAME_GENERATOR = "NAMEGEN_ENUM_NAME_GENERATOR"
