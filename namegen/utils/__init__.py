"""
Utils package for namegen.

This module provides the shared infrastructure of the naming pipeline:
constants, exceptions, string primitives, configuration and logging.
"""

from .exceptions import (
    NamegenError,
    NamingError,
    PluginError,
    AssemblyLoadError,
    TypeNotFoundError,
    InstantiationError,
    InterfaceMismatchError,
    PipelineStateError,
)
from .constants import GeneratorSlot, CANONICAL_SEPARATOR, DIGIT_PREFIX
from .naming import (
    to_upper_camel_case,
    strip_invalid_chars,
    generate_unique_name,
    is_upper_camel_case,
    ensure_letter_leading,
)
from .config import (
    NamegenConfig,
    GeneratorConfig,
    NamingConfig,
    LoggingConfig,
    get_config,
    set_config,
    load_config,
)
from .logging import get_logger, setup_logging, NamegenLogger

__all__ = [
    # Exceptions
    "NamegenError",
    "NamingError",
    "PluginError",
    "AssemblyLoadError",
    "TypeNotFoundError",
    "InstantiationError",
    "InterfaceMismatchError",
    "PipelineStateError",

    # Constants
    "GeneratorSlot",
    "CANONICAL_SEPARATOR",
    "DIGIT_PREFIX",

    # Naming primitives
    "to_upper_camel_case",
    "strip_invalid_chars",
    "generate_unique_name",
    "is_upper_camel_case",
    "ensure_letter_leading",

    # Configuration
    "NamegenConfig",
    "GeneratorConfig",
    "NamingConfig",
    "LoggingConfig",
    "get_config",
    "set_config",
    "load_config",

    # Logging
    "get_logger",
    "setup_logging",
    "NamegenLogger",
]
