"""
Naming generators.

This package provides the naming contracts and their implementations:
- EnumNameGenerator / TypeNameGenerator / PropertyNameGenerator: contracts
- Default*NameGenerator: base generators producing raw candidate names
- *NameDecorator: normalizing decorators producing UpperCamelCase identifiers
"""

from .base import (
    EnumNameGenerator,
    TypeNameGenerator,
    PropertyNameGenerator,
    get_contract,
)
from .defaults import (
    DefaultEnumNameGenerator,
    DefaultTypeNameGenerator,
    DefaultPropertyNameGenerator,
)
from .decorators import (
    IdentifierNormalizer,
    EnumNameDecorator,
    TypeNameDecorator,
    PropertyNameDecorator,
)

__all__ = [
    "EnumNameGenerator",
    "TypeNameGenerator",
    "PropertyNameGenerator",
    "get_contract",
    "DefaultEnumNameGenerator",
    "DefaultTypeNameGenerator",
    "DefaultPropertyNameGenerator",
    "IdentifierNormalizer",
    "EnumNameDecorator",
    "TypeNameDecorator",
    "PropertyNameDecorator",
]
