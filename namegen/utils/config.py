"""
Configuration System for the namegen package.

This module provides a single configuration interface covering the
generator override descriptors, normalization options and logging.
Values come from a JSON or YAML file and can be overridden through
environment variables.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .constants import (
    CANONICAL_SEPARATOR,
    DIGIT_PREFIX,
    ENUM_POST_CASING_REPLACEMENTS,
    ENV_CONFIG_FILE,
    ENV_ENUM_NAME_GENERATOR,
    ENV_LOG_LEVEL,
    ENV_PROPERTY_NAME_GENERATOR,
    ENV_TYPE_NAME_GENERATOR,
)
from .logging import get_logger, setup_logging

logger = get_logger(__name__)

# Characters a slot replaces after casing cannot double as the separator
_POST_CASING_CHARS = frozenset(old for old, _ in ENUM_POST_CASING_REPLACEMENTS)


@dataclass
class GeneratorConfig:
    """Generator override descriptors ('fullTypeName' or 'assemblyName:fullTypeName')."""

    type_name_generator_type: Optional[str] = None
    property_name_generator_type: Optional[str] = None
    enum_name_generator_type: Optional[str] = None


@dataclass
class NamingConfig:
    """Normalization options used by the default decorators."""

    separator: str = CANONICAL_SEPARATOR
    digit_prefix: str = DIGIT_PREFIX


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    enable_file_logging: bool = False
    log_file: str = "namegen.log"


class NamegenConfig:
    """
    Unified configuration manager for the namegen package.

    Sections are loaded from a single JSON or YAML file; the generator
    descriptors can also be set through ``NAMEGEN_*_NAME_GENERATOR``
    environment variables, which take precedence over the file.
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration file. If None, uses
                ``NAMEGEN_CONFIG`` or the default location.
        """
        self.config_file = self._get_config_file_path(config_file)
        self._config_data = self._load_config()

        self.generators = self._create_generator_config()
        self.naming = self._create_naming_config()
        self.logging = self._create_logging_config()

    def _get_config_file_path(self, config_file: Optional[str]) -> Path:
        """Get the configuration file path."""
        if config_file:
            return Path(config_file)

        env_file = os.getenv(ENV_CONFIG_FILE)
        if env_file:
            return Path(env_file)

        # Default location: try YAML first, then JSON
        config_dir = Path.cwd()
        yaml_config = config_dir / "namegen.yaml"
        json_config = config_dir / "namegen.json"

        if yaml_config.exists():
            return yaml_config
        return json_config

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file (JSON or YAML)."""
        if not self.config_file.exists():
            logger.warning(f"Configuration file {self.config_file} not found, using defaults")
            return {}

        try:
            with open(self.config_file, "r") as f:
                if self.config_file.suffix.lower() in (".yaml", ".yml"):
                    config_data = yaml.safe_load(f)
                else:
                    config_data = json.load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Failed to load configuration from {self.config_file}: {e}")
            return {}

        if not isinstance(config_data, dict):
            logger.error(f"Configuration in {self.config_file} is not a mapping, using defaults")
            return {}

        logger.info(f"Loaded configuration from {self.config_file}")
        return config_data

    def _create_generator_config(self) -> GeneratorConfig:
        """Create generator configuration from loaded data and environment."""
        gen_data = self._config_data.get("generators", {}) or {}

        return GeneratorConfig(
            type_name_generator_type=os.getenv(ENV_TYPE_NAME_GENERATOR)
            or gen_data.get("type_name_generator_type"),
            property_name_generator_type=os.getenv(ENV_PROPERTY_NAME_GENERATOR)
            or gen_data.get("property_name_generator_type"),
            enum_name_generator_type=os.getenv(ENV_ENUM_NAME_GENERATOR)
            or gen_data.get("enum_name_generator_type"),
        )

    def _create_naming_config(self) -> NamingConfig:
        """Create naming configuration from loaded data."""
        naming_data = self._config_data.get("naming", {}) or {}

        separator = naming_data.get("separator", CANONICAL_SEPARATOR)
        if (
            not isinstance(separator, str)
            or len(separator) != 1
            or ("a" + separator).isidentifier()
            or separator in _POST_CASING_CHARS
        ):
            logger.warning(f"Invalid separator {separator!r}, using '{CANONICAL_SEPARATOR}'")
            separator = CANONICAL_SEPARATOR

        digit_prefix = naming_data.get("digit_prefix", DIGIT_PREFIX)
        if not isinstance(digit_prefix, str) or not digit_prefix.isidentifier() or not digit_prefix[0].isalpha():
            logger.warning(f"Invalid digit prefix {digit_prefix!r}, using '{DIGIT_PREFIX}'")
            digit_prefix = DIGIT_PREFIX

        return NamingConfig(separator=separator, digit_prefix=digit_prefix)

    def _create_logging_config(self) -> LoggingConfig:
        """Create logging configuration from loaded data."""
        log_data = self._config_data.get("logging", {}) or {}

        return LoggingConfig(
            level=log_data.get("level") or os.getenv(ENV_LOG_LEVEL, "INFO"),
            enable_file_logging=log_data.get("enable_file_logging", False),
            log_file=log_data.get("log_file", "namegen.log"),
        )

    def apply_logging(self) -> None:
        """Configure the namegen logger from the logging section."""
        log_file = self.logging.log_file if self.logging.enable_file_logging else None
        setup_logging(self.logging.level, log_file)

    def has_overrides(self) -> bool:
        """Check if any generator override descriptor is configured."""
        return any(
            (
                self.generators.type_name_generator_type,
                self.generators.property_name_generator_type,
                self.generators.enum_name_generator_type,
            )
        )

    def save_config(self) -> None:
        """Save current configuration to file."""
        config_data = {
            "version": "1.0",
            "description": "namegen configuration",
            "generators": {
                "type_name_generator_type": self.generators.type_name_generator_type,
                "property_name_generator_type": self.generators.property_name_generator_type,
                "enum_name_generator_type": self.generators.enum_name_generator_type,
            },
            "naming": {
                "separator": self.naming.separator,
                "digit_prefix": self.naming.digit_prefix,
            },
            "logging": {
                "level": self.logging.level,
                "enable_file_logging": self.logging.enable_file_logging,
                "log_file": self.logging.log_file,
            },
        }

        try:
            with open(self.config_file, "w") as f:
                if self.config_file.suffix.lower() in (".yaml", ".yml"):
                    yaml.safe_dump(config_data, f, sort_keys=False)
                else:
                    json.dump(config_data, f, indent=2)
            logger.info(f"Configuration saved to {self.config_file}")
        except OSError as e:
            logger.error(f"Failed to save configuration: {e}")


# Global configuration instance
_global_config: Optional[NamegenConfig] = None


def get_config() -> NamegenConfig:
    """Get the global configuration instance."""
    global _global_config
    if _global_config is None:
        _global_config = NamegenConfig()
    return _global_config


def set_config(config: Optional[NamegenConfig]) -> None:
    """Set the global configuration instance."""
    global _global_config
    _global_config = config


def load_config(config_file: str) -> NamegenConfig:
    """Load configuration from a specific file."""
    return NamegenConfig(config_file)
