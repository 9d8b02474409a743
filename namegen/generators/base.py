"""
Naming contracts.

Each contract exposes a single ``generate`` method that maps schema-derived
context to a candidate identifier. Implementations must be deterministic
and free of side effects; unprocessable input is reported by raising
``NamingError`` rather than by returning an empty or malformed name.

Conformance is nominal: plugins either subclass a contract or are
registered on it with ``Contract.register(cls)``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional

from ..schema import JsonSchema, JsonSchemaProperty
from ..utils.constants import GeneratorSlot


class EnumNameGenerator(ABC):
    """Generates the member name of an enumeration value."""

    slot = GeneratorSlot.ENUM

    @abstractmethod
    def generate(self, index: int, name: Optional[str], value: Any, schema: JsonSchema) -> str:
        """Generate the name of the enum member at ``index``."""
        pass


class TypeNameGenerator(ABC):
    """Generates the name of a type derived from a schema."""

    slot = GeneratorSlot.TYPE

    @abstractmethod
    def generate(
        self, schema: JsonSchema, type_name_hint: Optional[str], reserved_type_names: Iterable[str]
    ) -> str:
        """Generate a type name that is not among ``reserved_type_names``."""
        pass


class PropertyNameGenerator(ABC):
    """Generates the name of a property."""

    slot = GeneratorSlot.PROPERTY

    @abstractmethod
    def generate(self, property: JsonSchemaProperty) -> str:
        """Generate the name of ``property``."""
        pass


CONTRACTS = {
    GeneratorSlot.ENUM: EnumNameGenerator,
    GeneratorSlot.TYPE: TypeNameGenerator,
    GeneratorSlot.PROPERTY: PropertyNameGenerator,
}


def get_contract(slot: GeneratorSlot) -> type:
    """Return the contract class for a generator slot."""
    return CONTRACTS[slot]
