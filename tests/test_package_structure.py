"""
Test package structure and basic imports.

This test module verifies that the package is properly structured
and all modules can be imported without errors.
"""

import sys
from pathlib import Path

# Add the project root to the path for testing
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def test_main_package_import():
    """Test that the main namegen package can be imported."""
    import namegen

    assert hasattr(namegen, '__version__')
    assert hasattr(namegen, '__author__')
    assert hasattr(namegen, 'NamingPipeline')
    assert hasattr(namegen, 'PluginLoader')


def test_generators_imports():
    """Test that generator submodules can be imported."""
    from namegen.generators import (
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

    assert issubclass(DefaultEnumNameGenerator, EnumNameGenerator)
    assert issubclass(DefaultTypeNameGenerator, TypeNameGenerator)
    assert issubclass(DefaultPropertyNameGenerator, PropertyNameGenerator)
    assert issubclass(EnumNameDecorator, EnumNameGenerator)
    assert issubclass(TypeNameDecorator, TypeNameGenerator)
    assert issubclass(PropertyNameDecorator, PropertyNameGenerator)


def test_runtime_imports():
    """Test that runtime submodules can be imported."""
    from namegen.runtime import PluginLoader, TypeDescriptor

    assert PluginLoader is not None
    assert TypeDescriptor is not None


def test_utils_imports():
    """Test that utility submodules can be imported."""
    from namegen.utils import (
        setup_logging,
        get_logger,
        NamegenError,
        NamingError,
        AssemblyLoadError,
        TypeNotFoundError,
        InstantiationError,
        InterfaceMismatchError,
        NamegenConfig,
    )

    assert setup_logging is not None
    assert get_logger is not None
    assert issubclass(NamingError, NamegenError)
    assert issubclass(AssemblyLoadError, NamegenError)
    assert issubclass(TypeNotFoundError, NamegenError)
    assert issubclass(InstantiationError, NamegenError)
    assert issubclass(InterfaceMismatchError, NamegenError)
    assert NamegenConfig is not None


def test_package_structure():
    """Test that the package directory structure is correct."""
    namegen_path = project_root / 'namegen'

    assert namegen_path.exists()
    assert (namegen_path / '__init__.py').exists()

    subpackages = ['generators', 'runtime', 'pipeline', 'utils']
    for subpackage in subpackages:
        subpackage_path = namegen_path / subpackage
        assert subpackage_path.exists(), f"Subpackage {subpackage} not found"
        assert (subpackage_path / '__init__.py').exists(), f"Subpackage {subpackage} missing __init__.py"
