#!/usr/bin/env python3
"""
Basic usage example for namegen.

Names the types, properties and enum members of a small schema with the
default generator chain.
"""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))
import namegen
from namegen import JsonSchema, JsonSchemaProperty, NamingError, NamingPipeline


def main():
    """Demonstrate the default naming chain."""
    print("namegen - Basic Usage Example")
    print("=" * 60)

    pipeline = NamingPipeline()
    pipeline.apply_overrides()

    print("\n1. Type names:")
    reserved = set()
    for hint in ["pet", "pet_store", "Pet", "Page[Pet]", "Map<string, Pet>"]:
        name = pipeline.generate_type_name(JsonSchema(), hint, reserved)
        reserved.add(name)
        print(f"  {hint!r:24} -> {name}")

    print("\n2. Property names:")
    for raw in ["id", "@odata.type", "x-ms-tag", "2nd_owner", "count+1"]:
        name = pipeline.generate_property_name(JsonSchemaProperty(name=raw))
        print(f"  {raw!r:24} -> {name}")

    print("\n3. Enum member names:")
    status = JsonSchema(title="Status", enumeration=("available", "on_hold:temp", 1.5, ">="))
    for value, name in zip(status.enumeration, pipeline.generate_enum_names(status)):
        print(f"  {value!r:24} -> {name}")

    print("\n4. Failure handling:")
    try:
        pipeline.generate_property_name(JsonSchemaProperty(name="@"))
    except NamingError as e:
        print(f"  {e}")

    print(f"\nnamegen version: {namegen.__version__}")


if __name__ == '__main__':
    main()
