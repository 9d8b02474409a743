"""
Naming pipeline composition.

This module wires the three generator slots used during code generation.
At construction every slot holds a normalizing decorator around the
default base generator. Configured type descriptors replace slots
wholesale through ``apply_overrides()``, which must run before the first
identifier is generated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from ..generators.base import (
    EnumNameGenerator,
    PropertyNameGenerator,
    TypeNameGenerator,
    get_contract,
)
from ..generators.decorators import EnumNameDecorator, PropertyNameDecorator, TypeNameDecorator
from ..runtime.loader import PluginLoader
from ..schema import JsonSchema, JsonSchemaProperty
from ..utils.config import NamegenConfig
from ..utils.constants import CANONICAL_SEPARATOR, DIGIT_PREFIX, GeneratorSlot
from ..utils.exceptions import PipelineStateError
from ..utils.logging import NamegenLogger

_log = NamegenLogger(__name__)


@dataclass
class GeneratorSettings:
    """The active implementation of each generator slot."""

    separator: str = CANONICAL_SEPARATOR
    digit_prefix: str = DIGIT_PREFIX
    enum_name_generator: Optional[EnumNameGenerator] = None
    type_name_generator: Optional[TypeNameGenerator] = None
    property_name_generator: Optional[PropertyNameGenerator] = None

    def __post_init__(self):
        """Wire the default normalizing decorators into empty slots."""
        if self.enum_name_generator is None:
            self.enum_name_generator = EnumNameDecorator(
                separator=self.separator, digit_prefix=self.digit_prefix
            )
        if self.type_name_generator is None:
            self.type_name_generator = TypeNameDecorator(
                separator=self.separator, digit_prefix=self.digit_prefix
            )
        if self.property_name_generator is None:
            self.property_name_generator = PropertyNameDecorator(
                separator=self.separator, digit_prefix=self.digit_prefix
            )

    def get_generator(self, slot: GeneratorSlot) -> Any:
        """Return the generator occupying ``slot``."""
        return getattr(self, _SLOT_ATTRIBUTES[slot])

    def set_generator(self, slot: GeneratorSlot, generator: Any) -> None:
        """Place ``generator`` in ``slot``."""
        setattr(self, _SLOT_ATTRIBUTES[slot], generator)

    def as_dict(self) -> Dict[str, Any]:
        """Slot name to generator mapping."""
        return {slot.value: self.get_generator(slot) for slot in GeneratorSlot}


_SLOT_ATTRIBUTES = {
    GeneratorSlot.ENUM: "enum_name_generator",
    GeneratorSlot.TYPE: "type_name_generator",
    GeneratorSlot.PROPERTY: "property_name_generator",
}


class NamingPipeline:
    """
    Composition root for identifier generation.

    Args:
        settings: Slot holder; a default one is created if omitted
        type_name_generator_type: Descriptor overriding the type slot
        property_name_generator_type: Descriptor overriding the property slot
        enum_name_generator_type: Descriptor overriding the enum slot
        loader: Plugin loader used to resolve descriptors
    """

    def __init__(
        self,
        settings: Optional[GeneratorSettings] = None,
        type_name_generator_type: Optional[str] = None,
        property_name_generator_type: Optional[str] = None,
        enum_name_generator_type: Optional[str] = None,
        loader: Optional[PluginLoader] = None,
    ):
        self.settings = settings or GeneratorSettings()
        self.type_name_generator_type = type_name_generator_type
        self.property_name_generator_type = property_name_generator_type
        self.enum_name_generator_type = enum_name_generator_type
        self._loader = loader or PluginLoader()
        self._generation_started = False

        _log.log_slot_defaults(self.settings.as_dict())

    @classmethod
    def from_config(cls, config: NamegenConfig, loader: Optional[PluginLoader] = None) -> "NamingPipeline":
        """Build a pipeline from ``config``, applying its logging section first."""
        config.apply_logging()
        settings = GeneratorSettings(
            separator=config.naming.separator, digit_prefix=config.naming.digit_prefix
        )
        return cls(
            settings=settings,
            type_name_generator_type=config.generators.type_name_generator_type,
            property_name_generator_type=config.generators.property_name_generator_type,
            enum_name_generator_type=config.generators.enum_name_generator_type,
            loader=loader,
        )

    @property
    def generation_started(self) -> bool:
        """Whether an identifier has been generated; slots are fixed from then on."""
        return self._generation_started

    def descriptors(self) -> Dict[GeneratorSlot, Optional[str]]:
        """Configured override descriptor per slot."""
        return {
            GeneratorSlot.TYPE: self.type_name_generator_type,
            GeneratorSlot.PROPERTY: self.property_name_generator_type,
            GeneratorSlot.ENUM: self.enum_name_generator_type,
        }

    def apply_overrides(self) -> None:
        """
        Replace slots that have a configured descriptor.

        Each resolved instance is stored as is: an override replaces the
        default normalization rather than being wrapped by it. All
        descriptors are resolved before any slot is touched, so a failing
        descriptor leaves the settings unchanged.

        Raises:
            PipelineStateError: If generation has already started
            PluginError: If a descriptor cannot be resolved
        """
        if self._generation_started:
            raise PipelineStateError("Generator overrides must be applied before generation starts")

        resolved = {}
        for slot, descriptor in self.descriptors().items():
            if descriptor:
                resolved[slot] = (descriptor, self._loader.resolve(descriptor, get_contract(slot)))

        for slot, (descriptor, instance) in resolved.items():
            self.settings.set_generator(slot, instance)
            _log.log_override_applied(slot.value, descriptor, instance)

    # -------------------------------------------------------------------------
    # Naming calls
    # -------------------------------------------------------------------------

    def generate_enum_name(self, index: int, name: Optional[str], value: Any, schema: JsonSchema) -> str:
        """Name the enum member at ``index``."""
        self._generation_started = True
        return self.settings.enum_name_generator.generate(index, name, value, schema)

    def generate_type_name(
        self, schema: JsonSchema, type_name_hint: Optional[str], reserved_type_names: Iterable[str]
    ) -> str:
        """Name the type derived from ``schema``."""
        self._generation_started = True
        return self.settings.type_name_generator.generate(schema, type_name_hint, reserved_type_names)

    def generate_property_name(self, property: JsonSchemaProperty) -> str:
        """Name ``property``."""
        self._generation_started = True
        return self.settings.property_name_generator.generate(property)

    def generate_enum_names(self, schema: JsonSchema) -> List[str]:
        """
        Name every member of an enum schema.

        ``schema.enumeration_names`` supplies declared names by position;
        members without one are named from their value.
        """
        names = []
        for index, value in enumerate(schema.enumeration):
            declared = schema.enumeration_names[index] if index < len(schema.enumeration_names) else None
            names.append(self.generate_enum_name(index, declared, value, schema))
        return names
