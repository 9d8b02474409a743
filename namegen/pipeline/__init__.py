"""
Naming pipeline composition root.
"""

from .naming_pipeline import GeneratorSettings, NamingPipeline

__all__ = [
    "GeneratorSettings",
    "NamingPipeline",
]
