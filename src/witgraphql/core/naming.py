"""Casing transforms from WIT kebab-case to GraphQL naming conventions.

Usage:
    to_camel_case("get-user-name")   # "getUserName"  (fields, arguments, functions)
    to_pascal_case("get-user-name")  # "GetUserName"  (type names)
"""

from __future__ import annotations

import re

_HYPHEN_LETTER = re.compile(r"-([a-z])")


def _join_words(name: str) -> str:
    return _HYPHEN_LETTER.sub(lambda m: m.group(1).upper(), name)


def to_camel_case(name: str) -> str:
    """Convert a kebab-case WIT name to camelCase.

    Only a lowercase letter following a hyphen is joined; other hyphens are kept.

    Args:
        name: WIT identifier, e.g. ``"list-items"``.

    Returns:
        camelCase identifier with a lowercase first character.
    """
    joined = _join_words(name)
    return joined[:1].lower() + joined[1:]


def to_pascal_case(name: str) -> str:
    """Convert a kebab-case WIT name to PascalCase.

    Args:
        name: WIT identifier, e.g. ``"user-record"``.

    Returns:
        PascalCase identifier with an uppercase first character.
    """
    joined = _join_words(name)
    return joined[:1].upper() + joined[1:]
