"""
Read-only schema views used as naming context.

The naming pipeline does not parse schema documents; callers build these
records from whatever schema model they use. They are frozen so that no
generator can mutate the context it is handed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class JsonSchema:
    """Subset of a JSON schema relevant to naming."""

    title: Optional[str] = None
    document_path: Optional[str] = None
    enumeration: Tuple[Any, ...] = ()
    enumeration_names: Tuple[str, ...] = ()

    @property
    def has_type_name_title(self) -> bool:
        """Whether the title can serve as a type name (non-empty, single word)."""
        return bool(self.title) and " " not in self.title.strip()


@dataclass(frozen=True)
class JsonSchemaProperty:
    """A named property of an object schema."""

    name: str
    schema: JsonSchema = field(default_factory=JsonSchema)
    is_required: bool = False
