"""
Pytest configuration and shared fixtures for namegen tests.

This module provides common test fixtures, plugin sources and helper
generators used across the test suite.
"""

import sys
import textwrap
import types
import uuid

import pytest

from namegen.generators import EnumNameGenerator, PropertyNameGenerator, TypeNameGenerator
from namegen.pipeline import GeneratorSettings, NamingPipeline
from namegen.runtime import PluginLoader
from namegen.schema import JsonSchema, JsonSchemaProperty
from namegen.utils.config import set_config


# Plugin module written to disk by the loader tests. Each execution is
# recorded in the ``namegen_test_load_tracker`` module.
PLUGIN_SOURCE = textwrap.dedent(
    '''
    import namegen_test_load_tracker

    from namegen.generators import EnumNameGenerator, PropertyNameGenerator, TypeNameGenerator

    namegen_test_load_tracker.loads.append(__name__)


    class ShortEnumNames(EnumNameGenerator):
        def generate(self, index, name, value, schema):
            return f"Value{index}"


    class LowerTypeNames(TypeNameGenerator):
        def generate(self, schema, type_name_hint, reserved_type_names):
            return (type_name_hint or "anonymous").lower()


    class RawPropertyNames(PropertyNameGenerator):
        def generate(self, property):
            return property.name


    class MyCompany:
        class CustomEnumGen(EnumNameGenerator):
            def generate(self, index, name, value, schema):
                return f"Custom{index}"


    class DuckTypedEnumNames:
        def generate(self, index, name, value, schema):
            return name


    class NeedsArguments(EnumNameGenerator):
        def __init__(self, prefix):
            self.prefix = prefix

        def generate(self, index, name, value, schema):
            return f"{self.prefix}{index}"


    class FailingConstructor(PropertyNameGenerator):
        def __init__(self):
            raise RuntimeError("constructor exploded")

        def generate(self, property):
            return property.name


    NOT_A_CLASS = 42
    '''
)


# =============================================================================
# Helper generators
# =============================================================================

class StaticEnumBase(EnumNameGenerator):
    """Returns a fixed output, ignoring the context."""

    def __init__(self, output):
        self.output = output

    def generate(self, index, name, value, schema):
        return self.output


class StaticTypeBase(TypeNameGenerator):
    """Returns a fixed output, ignoring the context."""

    def __init__(self, output):
        self.output = output

    def generate(self, schema, type_name_hint, reserved_type_names):
        return self.output


class StaticPropertyBase(PropertyNameGenerator):
    """Returns a fixed output, ignoring the context."""

    def __init__(self, output):
        self.output = output

    def generate(self, property):
        return self.output


class PassThroughEnumBase(EnumNameGenerator):
    """Returns the raw name unchanged."""

    def generate(self, index, name, value, schema):
        return name


class PassThroughTypeBase(TypeNameGenerator):
    """Returns the hint unchanged."""

    def generate(self, schema, type_name_hint, reserved_type_names):
        return type_name_hint


class PassThroughPropertyBase(PropertyNameGenerator):
    """Returns the property name unchanged."""

    def generate(self, property):
        return property.name


class ExplodingEnumBase(EnumNameGenerator):
    """Always fails."""

    def generate(self, index, name, value, schema):
        raise ValueError("base generator exploded")


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def reset_global_config():
    """Keep the global configuration from leaking between tests."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def load_tracker(monkeypatch):
    """Module recording every execution of the plugin source."""
    tracker = types.ModuleType("namegen_test_load_tracker")
    tracker.loads = []
    monkeypatch.setitem(sys.modules, "namegen_test_load_tracker", tracker)
    return tracker


@pytest.fixture
def plugin_file(tmp_path, load_tracker):
    """Path to a plugin assembly file containing the test generators."""
    path = tmp_path / "my_plugins.py"
    path.write_text(PLUGIN_SOURCE)
    return path


@pytest.fixture
def plugin_module(tmp_path, monkeypatch, load_tracker):
    """Name of an importable plugin module containing the test generators."""
    module_name = f"namegen_test_plugins_{uuid.uuid4().hex[:8]}"
    source_dir = tmp_path / "site"
    source_dir.mkdir()
    (source_dir / f"{module_name}.py").write_text(PLUGIN_SOURCE)
    monkeypatch.syspath_prepend(str(source_dir))

    yield module_name

    sys.modules.pop(module_name, None)


@pytest.fixture
def plugin_loader():
    """Create a fresh PluginLoader instance."""
    return PluginLoader()


@pytest.fixture
def settings():
    """Create default generator settings."""
    return GeneratorSettings()


@pytest.fixture
def pipeline():
    """Create a pipeline with default slots and no overrides."""
    return NamingPipeline()


@pytest.fixture
def pet_schema():
    """Schema with a type-name title."""
    return JsonSchema(title="Pet")


@pytest.fixture
def status_schema():
    """Enum schema with values and partial names."""
    return JsonSchema(
        title="Status",
        enumeration=("in_stock", "sold:out", 3),
        enumeration_names=("in_stock",),
    )


@pytest.fixture
def odata_property():
    """Property whose name needs stripping and separator mapping."""
    return JsonSchemaProperty(name="@odata.type")


# =============================================================================
# Pytest configuration
# =============================================================================

def pytest_collection_modifyitems(config, items):
    """Add markers based on test path."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
