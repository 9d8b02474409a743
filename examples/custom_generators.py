#!/usr/bin/env python3
"""
Custom generator example for namegen.

Writes a plugin module to a temporary directory and overrides the enum
and property slots with classes loaded from it through
'assemblyName:fullTypeName' descriptors.
"""

import os
import sys
import tempfile
import textwrap

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
from namegen import JsonSchema, JsonSchemaProperty, NamingPipeline, PluginError


PLUGIN_SOURCE = textwrap.dedent(
    '''
    from namegen.generators import EnumNameGenerator, PropertyNameDecorator, PropertyNameGenerator


    class OrdinalEnumNames(EnumNameGenerator):
        def generate(self, index, name, value, schema):
            return f"{schema.title or 'Member'}{index}"


    class PrefixedPropertyNames(PropertyNameGenerator):
        """Reuses the default normalization and adds a prefix."""

        def __init__(self):
            self._inner = PropertyNameDecorator()

        def generate(self, property):
            return "Prop" + self._inner.generate(property)
    '''
)


def main():
    """Demonstrate plugin overrides."""
    print("namegen - Custom Generators Example")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmp_dir:
        plugin_path = os.path.join(tmp_dir, "company_naming.py")
        with open(plugin_path, "w") as f:
            f.write(PLUGIN_SOURCE)

        pipeline = NamingPipeline(
            enum_name_generator_type=f"{plugin_path}:OrdinalEnumNames",
            property_name_generator_type=f"{plugin_path}:PrefixedPropertyNames",
        )
        pipeline.apply_overrides()

        for slot, generator in pipeline.settings.as_dict().items():
            print(f"  {slot}: {type(generator).__name__}")

        status = JsonSchema(title="Status", enumeration=("available", "sold"))
        print(f"\nEnum members: {pipeline.generate_enum_names(status)}")
        print(f"Property: {pipeline.generate_property_name(JsonSchemaProperty(name='pet_name'))}")

        print("\nResolving a missing type:")
        broken = NamingPipeline(type_name_generator_type=f"{plugin_path}:NoSuchGenerator")
        try:
            broken.apply_overrides()
        except PluginError as e:
            print(f"  {e}")


if __name__ == '__main__':
    main()
