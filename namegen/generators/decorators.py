"""
Normalizing decorators.

Each decorator owns one base generator, exposes the same contract and only
transforms the base output. Normalization runs in two stages:

1. Character substitution: slot-specific separator-like characters become
   the canonical separator, whitespace is treated as a separator and
   characters with no identifier representation are stripped.
2. Casing: the string is split on the separator, empty segments are
   dropped, every segment gets an upper-case head and the segments are
   concatenated.

Some slots apply a final replacement after casing (the enum slot maps
``.`` to ``_``). A result that does not start with a letter then receives
the digit prefix.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Tuple

from ..schema import JsonSchema, JsonSchemaProperty
from ..utils.constants import (
    CANONICAL_SEPARATOR,
    DIGIT_PREFIX,
    ENUM_POST_CASING_REPLACEMENTS,
    ENUM_SEPARATOR_CHARS,
    PROPERTY_SEPARATOR_CHARS,
    PROPERTY_STRIPPED_CHARS,
    TYPE_SEPARATOR_CHARS,
    GeneratorSlot,
)
from ..utils.exceptions import NamingError
from ..utils.logging import NamegenLogger
from ..utils.naming import (
    apply_replacements,
    ensure_letter_leading,
    generate_unique_name,
    replace_chars,
    strip_invalid_chars,
    to_upper_camel_case,
)
from .base import EnumNameGenerator, PropertyNameGenerator, TypeNameGenerator
from .defaults import DefaultEnumNameGenerator, DefaultPropertyNameGenerator, DefaultTypeNameGenerator

_log = NamegenLogger(__name__)


class IdentifierNormalizer:
    """
    Turns a base generator output into an UpperCamelCase identifier.

    Args:
        slot: Generator slot, used in error reports
        separator_chars: Characters mapped to the separator before casing
        stripped_chars: Characters removed before casing
        post_casing: ``(old, new)`` replacements applied after casing
        separator: Canonical separator character
        digit_prefix: Prefix for digit-leading identifiers
    """

    def __init__(
        self,
        slot: GeneratorSlot,
        separator_chars: Iterable[str] = (),
        stripped_chars: Iterable[str] = (),
        post_casing: Iterable[Tuple[str, str]] = (),
        separator: str = CANONICAL_SEPARATOR,
        digit_prefix: str = DIGIT_PREFIX,
    ):
        self.slot = slot
        self.separator_chars = tuple(separator_chars)
        self.stripped_chars = tuple(stripped_chars)
        self.post_casing = tuple(post_casing)
        self.separator = separator
        self.digit_prefix = digit_prefix
        self._keep = frozenset(old for old, _ in self.post_casing)

    def substitute(self, value: str) -> str:
        """Stage 1: map separator-like characters and strip invalid ones."""
        value = replace_chars(value, self.stripped_chars, "")
        value = replace_chars(value, self.separator_chars, self.separator)
        return strip_invalid_chars(value, separator=self.separator, keep=self._keep)

    def normalize(self, value: str) -> str:
        """Run both stages; raises NamingError when nothing is left."""
        cased = to_upper_camel_case(
            self.substitute(value), separator=self.separator, digit_prefix=self.digit_prefix
        )
        result = ensure_letter_leading(apply_replacements(cased, self.post_casing), self.digit_prefix)
        if not result:
            raise NamingError(self.slot, value, "normalizes to an empty identifier")
        return result


class _NormalizingDecorator:
    """Shared failure handling for the slot decorators."""

    slot: GeneratorSlot

    def __init__(self, base_generator, normalizer: IdentifierNormalizer):
        self._base_generator = base_generator
        self._normalizer = normalizer

    @property
    def base_generator(self):
        """The wrapped base generator."""
        return self._base_generator

    def _normalize_output(self, subject: Any, produce) -> str:
        try:
            base_name = produce()
        except NamingError as e:
            _log.log_naming_failure(self.slot.value, subject, e.reason or str(e))
            raise
        except Exception as e:
            _log.log_naming_failure(self.slot.value, subject, str(e))
            raise NamingError(self.slot, subject, f"base generator failed: {e}") from e

        if not isinstance(base_name, str) or not base_name:
            _log.log_naming_failure(self.slot.value, subject, f"base generator returned {base_name!r}")
            raise NamingError(self.slot, subject, f"base generator returned {base_name!r}")

        return self._normalizer.normalize(base_name)


class EnumNameDecorator(_NormalizingDecorator, EnumNameGenerator):
    """Normalizes enum member names: ``my_enum:value`` becomes ``MyEnumValue``."""

    def __init__(
        self,
        base_generator: Optional[EnumNameGenerator] = None,
        separator: str = CANONICAL_SEPARATOR,
        digit_prefix: str = DIGIT_PREFIX,
    ):
        normalizer = IdentifierNormalizer(
            GeneratorSlot.ENUM,
            separator_chars=ENUM_SEPARATOR_CHARS,
            post_casing=ENUM_POST_CASING_REPLACEMENTS,
            separator=separator,
            digit_prefix=digit_prefix,
        )
        super().__init__(base_generator or DefaultEnumNameGenerator(), normalizer)

    def generate(self, index: int, name: Optional[str], value: Any, schema: JsonSchema) -> str:
        subject = name if name is not None else value
        return self._normalize_output(
            subject, lambda: self._base_generator.generate(index, name, value, schema)
        )


class TypeNameDecorator(_NormalizingDecorator, TypeNameGenerator):
    """
    Normalizes type names: ``foo_bar`` becomes ``FooBar``.

    The base generator checks uniqueness before normalization, so the
    normalized name is checked against the reserved names again and
    suffixed when two distinct base names collapse onto a reserved one.
    """

    def __init__(
        self,
        base_generator: Optional[TypeNameGenerator] = None,
        separator: str = CANONICAL_SEPARATOR,
        digit_prefix: str = DIGIT_PREFIX,
    ):
        normalizer = IdentifierNormalizer(
            GeneratorSlot.TYPE,
            separator_chars=TYPE_SEPARATOR_CHARS,
            separator=separator,
            digit_prefix=digit_prefix,
        )
        super().__init__(base_generator or DefaultTypeNameGenerator(), normalizer)

    def generate(
        self, schema: JsonSchema, type_name_hint: Optional[str], reserved_type_names: Iterable[str]
    ) -> str:
        reserved = frozenset(reserved_type_names)
        subject = type_name_hint if type_name_hint else schema.title
        name = self._normalize_output(
            subject, lambda: self._base_generator.generate(schema, type_name_hint, reserved)
        )
        return generate_unique_name(name, reserved)


class PropertyNameDecorator(_NormalizingDecorator, PropertyNameGenerator):
    """Normalizes property names: ``@odata.type`` becomes ``OdataType``."""

    def __init__(
        self,
        base_generator: Optional[PropertyNameGenerator] = None,
        separator: str = CANONICAL_SEPARATOR,
        digit_prefix: str = DIGIT_PREFIX,
    ):
        normalizer = IdentifierNormalizer(
            GeneratorSlot.PROPERTY,
            separator_chars=PROPERTY_SEPARATOR_CHARS,
            stripped_chars=PROPERTY_STRIPPED_CHARS,
            separator=separator,
            digit_prefix=digit_prefix,
        )
        super().__init__(base_generator or DefaultPropertyNameGenerator(), normalizer)

    def generate(self, property: JsonSchemaProperty) -> str:
        return self._normalize_output(property.name, lambda: self._base_generator.generate(property))
