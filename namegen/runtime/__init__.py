"""
Runtime plugin loading for generator overrides.
"""

from .loader import PluginLoader, TypeDescriptor, get_loaded_assemblies

__all__ = [
    "PluginLoader",
    "TypeDescriptor",
    "get_loaded_assemblies",
]
