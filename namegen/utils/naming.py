"""
Naming Utilities for the namegen package.

This module provides the string primitives shared by the default
generators and the normalizing decorators: character substitution,
identifier-character filtering, upper camel casing and reserved-name
suffixing.
"""

from __future__ import annotations

from typing import AbstractSet, Iterable, Tuple

from .constants import CANONICAL_SEPARATOR, DIGIT_PREFIX


# =============================================================================
# Character Substitution
# =============================================================================

def replace_chars(value: str, chars: Iterable[str], replacement: str) -> str:
    """Replace every occurrence of each of ``chars`` with ``replacement``."""
    for char in chars:
        value = value.replace(char, replacement)
    return value


def apply_replacements(value: str, replacements: Iterable[Tuple[str, str]]) -> str:
    """Apply ``(old, new)`` replacements in order."""
    for old, new in replacements:
        value = value.replace(old, new)
    return value


def is_identifier_char(char: str) -> bool:
    """Check whether ``char`` may appear after the first character of an identifier."""
    return ("a" + char).isidentifier()


def can_start_segment(char: str) -> bool:
    """Check whether ``char`` may head a segment: an identifier start or a digit."""
    return char.isidentifier() or (char.isdigit() and is_identifier_char(char))


def strip_invalid_chars(
    value: str, separator: str = CANONICAL_SEPARATOR, keep: AbstractSet[str] = frozenset()
) -> str:
    """
    Drop characters that have no identifier representation.

    Whitespace becomes ``separator``; the separator itself and any
    character in ``keep`` are preserved. Characters that may continue but
    not start an identifier (combining marks) are dropped at the head of
    a segment.

    Args:
        value: String to filter
        separator: Canonical separator character
        keep: Extra characters to preserve for later substitution

    Returns:
        Filtered string
    """
    chars = []
    at_head = True
    for char in value:
        if char.isspace() or char == separator:
            chars.append(separator)
            at_head = True
        elif char in keep:
            chars.append(char)
            at_head = False
        elif is_identifier_char(char) and (not at_head or can_start_segment(char)):
            chars.append(char)
            at_head = False
    return "".join(chars)


# =============================================================================
# Casing
# =============================================================================

def to_upper_camel_case(
    value: str, separator: str = CANONICAL_SEPARATOR, digit_prefix: str = DIGIT_PREFIX
) -> str:
    """
    Convert a separator-delimited string to UpperCamelCase.

    Empty segments are dropped, the first character of every segment is
    upper-cased and the rest is kept as is. A result that does not start
    with a letter is prefixed with ``digit_prefix``.

    Args:
        value: Separator-delimited string
        separator: Segment separator
        digit_prefix: Prefix for results that would not start with a letter

    Returns:
        UpperCamelCase string (empty if ``value`` has no content)
    """
    segments = [segment for segment in value.split(separator) if segment]
    result = "".join(segment[0].upper() + segment[1:] for segment in segments)

    return ensure_letter_leading(result, digit_prefix)


def ensure_letter_leading(value: str, prefix: str = DIGIT_PREFIX) -> str:
    """Prefix ``value`` with ``prefix`` unless it is empty or starts with a letter."""
    if value and not value[0].isalpha():
        return f"{prefix}{value}"
    return value


def is_upper_camel_case(name: str) -> bool:
    """Check that ``name`` is a letter-leading identifier with an upper-case head."""
    return bool(name) and name.isidentifier() and name[0].isalpha() and name[0] == name[0].upper()


# =============================================================================
# Uniqueness
# =============================================================================

def generate_unique_name(base_name: str, used_names: AbstractSet[str]) -> str:
    """
    Generate a name not present in ``used_names``.

    A taken name gets the first free numeric suffix, starting at 2
    (``Pet``, ``Pet2``, ``Pet3``...).
    """
    if base_name not in used_names:
        return base_name

    counter = 1
    while True:
        counter += 1
        candidate = f"{base_name}{counter}"
        if candidate not in used_names:
            return candidate
