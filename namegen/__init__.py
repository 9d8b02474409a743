"""
namegen: Pluggable Identifier Naming for Schema Code Generation

Turns schema enums, types and properties into valid UpperCamelCase
identifiers through a chain of base generators and normalizing
decorators. Any of the three generator slots can be replaced by a class
loaded at runtime from a 'fullTypeName' or 'assemblyName:fullTypeName'
descriptor.

Usage:
    from namegen import NamingPipeline, JsonSchemaProperty

    pipeline = NamingPipeline(enum_name_generator_type="my_plugins.py:ShortEnumNames")
    pipeline.apply_overrides()
    pipeline.generate_property_name(JsonSchemaProperty(name="@odata.type"))  # 'OdataType'
"""

__version__ = "0.1.0"
__author__ = "namegen Team"
__email__ = "namegen@example.com"

# Public API exports
from .schema import JsonSchema, JsonSchemaProperty

from .generators import (
    EnumNameGenerator,
    TypeNameGenerator,
    PropertyNameGenerator,
    DefaultEnumNameGenerator,
    DefaultTypeNameGenerator,
    DefaultPropertyNameGenerator,
    EnumNameDecorator,
    TypeNameDecorator,
    PropertyNameDecorator,
)

from .runtime import PluginLoader, TypeDescriptor

from .pipeline import GeneratorSettings, NamingPipeline

from .utils import (
    GeneratorSlot,
    NamegenError,
    NamingError,
    PluginError,
    AssemblyLoadError,
    TypeNotFoundError,
    InstantiationError,
    InterfaceMismatchError,
    PipelineStateError,
    NamegenConfig,
    get_config,
)

__all__ = [
    "JsonSchema",
    "JsonSchemaProperty",
    "EnumNameGenerator",
    "TypeNameGenerator",
    "PropertyNameGenerator",
    "DefaultEnumNameGenerator",
    "DefaultTypeNameGenerator",
    "DefaultPropertyNameGenerator",
    "EnumNameDecorator",
    "TypeNameDecorator",
    "PropertyNameDecorator",
    "PluginLoader",
    "TypeDescriptor",
    "GeneratorSettings",
    "NamingPipeline",
    "GeneratorSlot",
    "NamegenError",
    "NamingError",
    "PluginError",
    "AssemblyLoadError",
    "TypeNotFoundError",
    "InstantiationError",
    "InterfaceMismatchError",
    "PipelineStateError",
    "NamegenConfig",
    "get_config",
]
