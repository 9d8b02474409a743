"""
Default base generators.

These produce raw candidate names from schema context. They resolve
operator symbols, generic type hints and reserved type names, but leave
separator handling and final casing to the normalizing decorators that
wrap them.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from ..schema import JsonSchema, JsonSchemaProperty
from ..utils.constants import ANONYMOUS_TYPE_NAME, ENUM_OPERATOR_NAMES, GeneratorSlot
from ..utils.exceptions import NamingError
from ..utils.naming import apply_replacements, generate_unique_name, to_upper_camel_case
from .base import EnumNameGenerator, PropertyNameGenerator, TypeNameGenerator

# Generic type hints such as "Page[Pet]" or "Map<string, Pet>"
_GENERIC_HINT_REPLACEMENTS = (
    ("[", " Of "),
    ("]", " "),
    ("<", " Of "),
    (">", " "),
    (",", " And "),
)

_PROPERTY_REPLACEMENTS = (
    ('"', ""),
    ("?", ""),
    ("$", ""),
    ("[", ""),
    ("]", ""),
    ("(", "_"),
    (")", ""),
    ("=", "-"),
    ("+", "plus"),
    ("*", "Star"),
    ("#", "_"),
)


class DefaultEnumNameGenerator(EnumNameGenerator):
    """Uses the declared enum name, falling back to the value itself."""

    def generate(self, index: int, name: Optional[str], value: Any, schema: JsonSchema) -> str:
        raw = name if name is not None else (str(value) if value is not None else "")
        if not raw:
            raise NamingError(GeneratorSlot.ENUM, name, f"enum member {index} has no name or value")

        if raw in ENUM_OPERATOR_NAMES:
            return ENUM_OPERATOR_NAMES[raw]

        return raw.replace('"', "")


class DefaultTypeNameGenerator(TypeNameGenerator):
    """
    Derives a type name from the hint, the schema title or the document path.

    Generic hints are spelled out (``Page[Pet]`` becomes ``PageOfPet``), only
    the last dotted segment of a qualified name is kept, and a name already
    in ``reserved_type_names`` receives the first free numeric suffix.
    """

    def generate(
        self, schema: JsonSchema, type_name_hint: Optional[str], reserved_type_names: Iterable[str]
    ) -> str:
        hint = type_name_hint
        if not hint and schema.has_type_name_title:
            hint = schema.title
        if not hint and schema.document_path:
            hint = schema.document_path.replace("\\", "/").rstrip("/").split("/")[-1]
            hint = hint.rsplit(".", 1)[0] if "." in hint else hint

        hint = apply_replacements(hint or "", _GENERIC_HINT_REPLACEMENTS)
        parts = [part.split(".")[-1] for part in hint.split()]
        # Digit-leading names are left to the decorator's prefix policy
        type_name = to_upper_camel_case(" ".join(parts), separator=" ", digit_prefix="") or ANONYMOUS_TYPE_NAME

        return generate_unique_name(type_name, set(reserved_type_names))


class DefaultPropertyNameGenerator(PropertyNameGenerator):
    """Drops or spells out punctuation that has no identifier meaning."""

    def generate(self, property: JsonSchemaProperty) -> str:
        if not property.name:
            raise NamingError(GeneratorSlot.PROPERTY, property.name, "property has no name")

        return apply_replacements(property.name, _PROPERTY_REPLACEMENTS)
