"""
Unit tests for the naming pipeline composer.

Tests default slot wiring, override application and the generation
state guard.
"""

import logging
from unittest.mock import Mock

import pytest

from conftest import StaticPropertyBase
from namegen.generators import (
    EnumNameDecorator,
    EnumNameGenerator,
    PropertyNameDecorator,
    PropertyNameGenerator,
    TypeNameDecorator,
    TypeNameGenerator,
)
from namegen.pipeline import GeneratorSettings, NamingPipeline
from namegen.runtime import PluginLoader
from namegen.schema import JsonSchema, JsonSchemaProperty
from namegen.utils.config import NamegenConfig
from namegen.utils.constants import GeneratorSlot
from namegen.utils.logging import setup_logging
from namegen.utils.exceptions import (
    InterfaceMismatchError,
    PipelineStateError,
    TypeNotFoundError,
)


class TestGeneratorSettings:
    """Test slot wiring."""

    def test_default_slots_are_decorators(self, settings):
        assert isinstance(settings.enum_name_generator, EnumNameDecorator)
        assert isinstance(settings.type_name_generator, TypeNameDecorator)
        assert isinstance(settings.property_name_generator, PropertyNameDecorator)

    def test_none_slot_gets_default(self):
        settings = GeneratorSettings(enum_name_generator=None, type_name_generator=None)

        assert isinstance(settings.enum_name_generator, EnumNameDecorator)
        assert isinstance(settings.type_name_generator, TypeNameDecorator)

    def test_explicit_slot_kept(self):
        custom = PropertyNameDecorator(StaticPropertyBase("fixed"))
        settings = GeneratorSettings(property_name_generator=custom)

        assert settings.property_name_generator is custom
        assert isinstance(settings.enum_name_generator, EnumNameDecorator)

    def test_get_and_set_by_slot(self, settings):
        custom = PropertyNameDecorator(StaticPropertyBase("fixed"))
        settings.set_generator(GeneratorSlot.PROPERTY, custom)

        assert settings.get_generator(GeneratorSlot.PROPERTY) is custom

    def test_naming_options_reach_decorators(self):
        settings = GeneratorSettings(digit_prefix="Num")
        pipeline = NamingPipeline(settings=settings)

        assert pipeline.generate_enum_name(0, None, 7, JsonSchema()) == "Num7"

    def test_as_dict(self, settings):
        assert set(settings.as_dict()) == {"Enum", "Type", "Property"}


class TestNamingCalls:
    """Test generation through the default slots."""

    def test_enum_name(self, pipeline):
        assert pipeline.generate_enum_name(0, "my_enum:value", None, JsonSchema()) == "MyEnumValue"

    def test_type_name(self, pipeline):
        assert pipeline.generate_type_name(JsonSchema(), "foo_bar", []) == "FooBar"

    def test_property_name(self, pipeline, odata_property):
        assert pipeline.generate_property_name(odata_property) == "OdataType"

    def test_enum_names_for_schema(self, pipeline, status_schema):
        assert pipeline.generate_enum_names(status_schema) == ["InStock", "SoldOut", "N3"]

    def test_generation_marks_started(self, pipeline):
        assert pipeline.generation_started is False
        pipeline.generate_type_name(JsonSchema(), "Pet", [])
        assert pipeline.generation_started is True


class TestApplyOverrides:
    """Test override resolution and slot replacement."""

    def test_no_descriptors_keeps_defaults(self, pipeline):
        before = pipeline.settings.as_dict()
        pipeline.apply_overrides()

        assert pipeline.settings.as_dict() == before

    def test_empty_descriptor_ignored(self):
        loader = Mock(spec=PluginLoader)
        pipeline = NamingPipeline(enum_name_generator_type="", loader=loader)
        pipeline.apply_overrides()

        loader.resolve.assert_not_called()
        assert isinstance(pipeline.settings.enum_name_generator, EnumNameDecorator)

    def test_override_is_not_decorated(self, plugin_file):
        pipeline = NamingPipeline(property_name_generator_type=f"{plugin_file}:RawPropertyNames")
        pipeline.apply_overrides()

        assert not isinstance(pipeline.settings.property_name_generator, PropertyNameDecorator)
        assert pipeline.generate_property_name(JsonSchemaProperty(name="@odata.type")) == "@odata.type"

    def test_each_slot_resolved_with_its_contract(self):
        loader = Mock(spec=PluginLoader)
        pipeline = NamingPipeline(
            type_name_generator_type="a.T",
            property_name_generator_type="a.P",
            enum_name_generator_type="a.E",
            loader=loader,
        )
        pipeline.apply_overrides()

        calls = {call.args for call in loader.resolve.call_args_list}
        assert calls == {
            ("a.T", TypeNameGenerator),
            ("a.P", PropertyNameGenerator),
            ("a.E", EnumNameGenerator),
        }

    def test_applied_twice_yields_fresh_instances(self, plugin_file):
        pipeline = NamingPipeline(enum_name_generator_type=f"{plugin_file}:ShortEnumNames")

        pipeline.apply_overrides()
        first = pipeline.settings.enum_name_generator
        pipeline.apply_overrides()
        second = pipeline.settings.enum_name_generator

        assert first is not second
        assert type(first) is type(second)
        assert not isinstance(second, EnumNameDecorator)
        assert first.generate(2, "x", None, JsonSchema()) == second.generate(2, "x", None, JsonSchema())

    def test_failed_override_leaves_slots_untouched(self, plugin_file):
        pipeline = NamingPipeline(
            type_name_generator_type=f"{plugin_file}:LowerTypeNames",
            enum_name_generator_type=f"{plugin_file}:RawPropertyNames",
        )

        with pytest.raises(InterfaceMismatchError):
            pipeline.apply_overrides()

        assert isinstance(pipeline.settings.type_name_generator, TypeNameDecorator)
        assert isinstance(pipeline.settings.enum_name_generator, EnumNameDecorator)

    def test_unknown_type_propagates(self, plugin_file):
        pipeline = NamingPipeline(type_name_generator_type=f"{plugin_file}:Nope")

        with pytest.raises(TypeNotFoundError):
            pipeline.apply_overrides()

    def test_after_generation_started_rejected(self, plugin_file):
        pipeline = NamingPipeline(enum_name_generator_type=f"{plugin_file}:ShortEnumNames")
        pipeline.generate_enum_name(0, "a", None, JsonSchema())

        with pytest.raises(PipelineStateError):
            pipeline.apply_overrides()

        assert isinstance(pipeline.settings.enum_name_generator, EnumNameDecorator)


class TestFromConfig:
    """Test building a pipeline from configuration."""

    def test_descriptors_and_naming_options(self, tmp_path, plugin_file):
        config_file = tmp_path / "namegen.json"
        config_file.write_text(
            '{"generators": {"enum_name_generator_type": "%s:ShortEnumNames"},'
            ' "naming": {"digit_prefix": "Item"}}' % plugin_file
        )
        pipeline = NamingPipeline.from_config(NamegenConfig(str(config_file)))

        assert pipeline.enum_name_generator_type == f"{plugin_file}:ShortEnumNames"
        assert pipeline.type_name_generator_type is None
        assert pipeline.generate_type_name(JsonSchema(), "2d_point", []) == "Item2dPoint"

    def test_overrides_from_config(self, tmp_path, plugin_file):
        config_file = tmp_path / "namegen.yaml"
        config_file.write_text(
            f"generators:\n  type_name_generator_type: '{plugin_file}:LowerTypeNames'\n"
        )
        pipeline = NamingPipeline.from_config(NamegenConfig(str(config_file)))
        pipeline.apply_overrides()

        assert pipeline.generate_type_name(JsonSchema(), "Pet", []) == "pet"

    def test_logging_section_applied(self, tmp_path):
        log_file = tmp_path / "namegen-run.log"
        config_file = tmp_path / "namegen.yaml"
        config_file.write_text(
            "logging:\n"
            "  level: DEBUG\n"
            "  enable_file_logging: true\n"
            f"  log_file: '{log_file}'\n"
        )

        try:
            NamingPipeline.from_config(NamegenConfig(str(config_file)))

            logger = logging.getLogger("namegen")
            assert logger.level == logging.DEBUG
            assert log_file.exists()
        finally:
            setup_logging()
