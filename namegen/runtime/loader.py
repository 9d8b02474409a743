"""
Plugin loading.

This module resolves generator type descriptors of the form
``fullTypeName`` or ``assemblyName:fullTypeName`` into live instances.
An *assembly* is a Python module given either as a path to a ``.py`` file
or package directory, or as an importable dotted module name.

Loading an assembly executes its code in the running process and cannot be
undone, so every assembly is executed at most once: file assemblies are
cached by real path and registered in ``sys.modules``, named assemblies go
through the regular import system.
"""

import hashlib
import importlib
import importlib.util
import os
import sys
from dataclasses import dataclass
from types import ModuleType
from typing import Any, Dict, Optional, Tuple

from ..utils.constants import (
    DESCRIPTOR_SEPARATOR,
    PACKAGE_INIT_FILE,
    PLUGIN_MODULE_PREFIX,
    PYTHON_SOURCE_SUFFIX,
    TYPE_PATH_SEPARATOR,
)
from ..utils.exceptions import (
    AssemblyLoadError,
    InstantiationError,
    InterfaceMismatchError,
    TypeNotFoundError,
)
from ..utils.logging import NamegenLogger

_log = NamegenLogger(__name__)

# File assemblies already executed, keyed by real path
_loaded_assemblies: Dict[str, ModuleType] = {}


@dataclass(frozen=True)
class TypeDescriptor:
    """
    A parsed generator type descriptor.

    ``assembly`` is None when the descriptor names a type by its full
    dotted name only.
    """

    descriptor: str
    type_name: str
    assembly: Optional[str] = None

    @classmethod
    def parse(cls, descriptor: str) -> "TypeDescriptor":
        """
        Parse ``fullTypeName`` or ``assemblyName:fullTypeName``.

        The split uses the last separator so that drive letters in
        assembly paths survive.

        Raises:
            TypeNotFoundError: If the descriptor or one of its parts is empty
        """
        text = (descriptor or "").strip()
        if not text:
            raise TypeNotFoundError(descriptor or "", "", "empty type descriptor")

        assembly, sep, type_name = text.rpartition(DESCRIPTOR_SEPARATOR)
        assembly = assembly.strip()
        type_name = type_name.strip()

        if sep and not assembly:
            raise TypeNotFoundError(text, type_name, "descriptor has an empty assembly name")
        if not type_name:
            raise TypeNotFoundError(text, type_name, "descriptor has an empty type name")
        if any(not part for part in type_name.split(TYPE_PATH_SEPARATOR)):
            raise TypeNotFoundError(text, type_name, "malformed type name")

        return cls(descriptor=text, type_name=type_name, assembly=assembly or None)

    def __str__(self) -> str:
        return self.descriptor


class PluginLoader:
    """
    Resolves type descriptors to instances implementing a naming contract.

    Resolution is synchronous and has no timeout; each call returns a fresh
    instance while reusing assemblies loaded by earlier calls.
    """

    def resolve(self, descriptor: str, contract: type) -> Any:
        """
        Resolve a descriptor to a new instance implementing ``contract``.

        Args:
            descriptor: ``fullTypeName`` or ``assemblyName:fullTypeName``
            contract: Class the instance must be an instance of

        Returns:
            A freshly constructed instance

        Raises:
            AssemblyLoadError: If the assembly cannot be found or loaded
            TypeNotFoundError: If the type does not exist
            InstantiationError: If the type cannot be constructed without arguments
            InterfaceMismatchError: If the instance does not implement ``contract``
        """
        parsed = TypeDescriptor.parse(descriptor)
        instance = self._instantiate(parsed, self._resolve_type(parsed))

        if not isinstance(instance, contract):
            raise InterfaceMismatchError(parsed.descriptor, parsed.type_name, contract.__name__)

        return instance

    def create_instance(self, descriptor: str) -> Any:
        """Resolve and construct the type named by ``descriptor`` without a contract check."""
        parsed = TypeDescriptor.parse(descriptor)
        return self._instantiate(parsed, self._resolve_type(parsed))

    def resolve_type(self, descriptor: str) -> type:
        """Return the class named by ``descriptor`` without constructing it."""
        return self._resolve_type(TypeDescriptor.parse(descriptor))

    # -------------------------------------------------------------------------
    # Type resolution
    # -------------------------------------------------------------------------

    def _resolve_type(self, parsed: TypeDescriptor) -> type:
        if parsed.assembly is not None:
            module = self.load_assembly(parsed.assembly, descriptor=parsed.descriptor)
            attr_path = self._relative_type_path(module, parsed.type_name)
        else:
            module, attr_path = self._find_loaded_module(parsed)

        target = module
        for attr in attr_path:
            target = getattr(target, attr, None)
            if target is None:
                raise TypeNotFoundError(
                    parsed.descriptor,
                    parsed.type_name,
                    f"type '{parsed.type_name}' not found in module '{module.__name__}'",
                )

        if not isinstance(target, type):
            raise TypeNotFoundError(
                parsed.descriptor, parsed.type_name, f"'{parsed.type_name}' is not a class"
            )

        return target

    @staticmethod
    def _relative_type_path(module: ModuleType, type_name: str) -> Tuple[str, ...]:
        """Attribute path of ``type_name`` inside ``module``; the module name may prefix it."""
        parts = type_name.split(TYPE_PATH_SEPARATOR)
        if len(parts) == 1 or hasattr(module, parts[0]):
            return tuple(parts)

        for alias in _module_aliases(module):
            alias_parts = alias.split(TYPE_PATH_SEPARATOR)
            if len(parts) > len(alias_parts) and parts[: len(alias_parts)] == alias_parts:
                return tuple(parts[len(alias_parts):])

        return tuple(parts)

    def _find_loaded_module(self, parsed: TypeDescriptor) -> Tuple[ModuleType, Tuple[str, ...]]:
        """Find the longest module prefix of a full type name, importing it if needed."""
        parts = parsed.type_name.split(TYPE_PATH_SEPARATOR)

        for split in range(len(parts) - 1, 0, -1):
            module_name = TYPE_PATH_SEPARATOR.join(parts[:split])
            module = sys.modules.get(module_name)
            if module is None:
                module = self._import_if_present(module_name, parsed.descriptor)
            if module is not None:
                return module, tuple(parts[split:])

        raise TypeNotFoundError(
            parsed.descriptor,
            parsed.type_name,
            f"no loaded or importable module provides '{parsed.type_name}'",
        )

    @staticmethod
    def _import_if_present(module_name: str, descriptor: str) -> Optional[ModuleType]:
        try:
            return importlib.import_module(module_name)
        except ModuleNotFoundError as e:
            # Missing dependency of an existing module is a load failure
            if e.name is not None and (module_name == e.name or module_name.startswith(e.name + ".")):
                return None
            raise AssemblyLoadError(descriptor, module_name, f"failed to import '{module_name}': {e}") from e
        except Exception as e:
            raise AssemblyLoadError(descriptor, module_name, f"failed to import '{module_name}': {e}") from e

    # -------------------------------------------------------------------------
    # Assembly loading
    # -------------------------------------------------------------------------

    def load_assembly(self, assembly: str, descriptor: Optional[str] = None) -> ModuleType:
        """
        Load an assembly by file path or module name.

        Args:
            assembly: Path to a ``.py`` file or package directory, or a dotted module name
            descriptor: Descriptor being resolved, for error reports

        Returns:
            The loaded module

        Raises:
            AssemblyLoadError: If the assembly cannot be found or loaded
        """
        descriptor = descriptor or assembly
        if self._looks_like_path(assembly):
            return self._load_from_path(assembly, descriptor)
        return self._load_by_name(assembly, descriptor)

    @staticmethod
    def _looks_like_path(assembly: str) -> bool:
        return (
            assembly.endswith(PYTHON_SOURCE_SUFFIX)
            or os.sep in assembly
            or (os.altsep is not None and os.altsep in assembly)
            or os.path.isdir(assembly)
        )

    def _load_from_path(self, assembly: str, descriptor: str) -> ModuleType:
        path = os.path.realpath(os.path.expanduser(assembly))
        if path in _loaded_assemblies:
            return _loaded_assemblies[path]

        if os.path.isdir(path):
            init_file = os.path.join(path, PACKAGE_INIT_FILE)
            if not os.path.isfile(init_file):
                raise AssemblyLoadError(descriptor, assembly, f"'{assembly}' is not a Python package")
            spec_args = {"submodule_search_locations": [path]}
            location = init_file
        elif os.path.isfile(path):
            spec_args = {}
            location = path
        else:
            raise AssemblyLoadError(descriptor, assembly, f"assembly file '{assembly}' not found")

        module_name = self._module_name_for_path(path)
        spec = importlib.util.spec_from_file_location(module_name, location, **spec_args)
        if spec is None or spec.loader is None:
            raise AssemblyLoadError(descriptor, assembly, f"'{assembly}' is not a loadable Python module")

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception as e:
            del sys.modules[module_name]
            raise AssemblyLoadError(descriptor, assembly, f"failed to execute '{assembly}': {e}") from e

        _loaded_assemblies[path] = module
        _log.log_assembly_loaded(assembly, module_name)
        return module

    @staticmethod
    def _module_name_for_path(path: str) -> str:
        stem = os.path.splitext(os.path.basename(path.rstrip(os.sep)))[0]
        stem = "".join(c if c.isalnum() or c == "_" else "_" for c in stem)
        digest = hashlib.sha1(path.encode("utf-8")).hexdigest()[:8]
        return f"{PLUGIN_MODULE_PREFIX}{stem}_{digest}"

    def _load_by_name(self, assembly: str, descriptor: str) -> ModuleType:
        module = sys.modules.get(assembly)
        if module is not None:
            return module

        try:
            module = importlib.import_module(assembly)
        except ImportError as e:
            raise AssemblyLoadError(descriptor, assembly, f"assembly '{assembly}' not found: {e}") from e
        except Exception as e:
            raise AssemblyLoadError(descriptor, assembly, f"failed to import '{assembly}': {e}") from e

        _log.log_assembly_loaded(assembly, module.__name__)
        return module

    # -------------------------------------------------------------------------
    # Instantiation
    # -------------------------------------------------------------------------

    @staticmethod
    def _instantiate(parsed: TypeDescriptor, cls: type) -> Any:
        try:
            return cls()
        except Exception as e:
            raise InstantiationError(
                parsed.descriptor,
                parsed.type_name,
                f"type '{parsed.type_name}' could not be instantiated without arguments: {e}",
            ) from e


def _module_aliases(module: ModuleType) -> Tuple[str, ...]:
    """Names a descriptor may use for ``module``: its module name and its file stem."""
    aliases = [module.__name__]
    module_file = getattr(module, "__file__", None)
    if module_file:
        base = os.path.basename(module_file)
        if base == PACKAGE_INIT_FILE:
            base = os.path.basename(os.path.dirname(module_file))
        aliases.append(os.path.splitext(base)[0])
    return tuple(aliases)


def get_loaded_assemblies() -> Dict[str, ModuleType]:
    """Return a copy of the file assemblies loaded so far, keyed by real path."""
    return dict(_loaded_assemblies)
