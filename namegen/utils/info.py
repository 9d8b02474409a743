"""
Package information utility.

This module provides a command-line utility for displaying the namegen
installation, the active configuration and the generator occupying
each slot once configured overrides have been applied.
"""

import platform
import sys
from typing import Any, Dict

import yaml

import namegen
from namegen.pipeline import NamingPipeline
from namegen.utils.config import get_config
from namegen.utils.exceptions import NamegenError


def get_system_info() -> Dict[str, Any]:
    """
    Get system information relevant to namegen.

    Returns:
        Dictionary containing system information
    """
    return {
        'python_version': sys.version,
        'platform': platform.platform(),
        'yaml_version': yaml.__version__,
    }


def get_namegen_info() -> Dict[str, Any]:
    """
    Get namegen-specific information.

    Returns:
        Dictionary containing version, configuration and slot information

    Raises:
        NamegenError: If a configured override cannot be resolved
    """
    config = get_config()
    pipeline = NamingPipeline.from_config(config)
    pipeline.apply_overrides()

    return {
        'version': namegen.__version__,
        'author': namegen.__author__,
        'config_file': str(config.config_file),
        'descriptors': {slot.value: descriptor for slot, descriptor in pipeline.descriptors().items()},
        'slots': {
            name: f"{type(gen).__module__}.{type(gen).__qualname__}"
            for name, gen in pipeline.settings.as_dict().items()
        },
    }


def print_info() -> None:
    """Print formatted information about namegen and the system."""
    print("namegen Identifier Naming Pipeline")
    print("=" * 40)

    info = get_namegen_info()
    print(f"\nnamegen Version: {info['version']}")
    print(f"Author: {info['author']}")
    print(f"Config File: {info['config_file']}")

    print("\nGenerator Slots:")
    for name, generator in info['slots'].items():
        descriptor = info['descriptors'].get(name) or "default"
        print(f"  {name}: {generator} ({descriptor})")

    system_info = get_system_info()
    print(f"\nPython Version: {system_info['python_version'].split()[0]}")
    print(f"Platform: {system_info['platform']}")
    print(f"PyYAML Version: {system_info['yaml_version']}")


def main() -> None:
    """Main entry point for the namegen-info command."""
    try:
        print_info()
    except NamegenError as e:
        print(f"Error resolving generators: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
