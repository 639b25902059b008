"""Core functionalities: the WIT type graph and naming transforms.

Architecture Note:
    core/ contains pure, stateless models and functions over the supplied
    type graph. Per-build state (type caches, synthesized GraphQL types) lives
    in conversion/ and binding/.
"""

from witgraphql.core.graph import (
    Function,
    Primitive,
    Resolved,
    TypeDef,
    TypeRef,
    World,
    get_typedef,
    parse_resolved,
    resolve_alias,
)
from witgraphql.core.naming import to_camel_case, to_pascal_case

__all__ = [
    # Graph
    "Primitive",
    "TypeRef",
    "TypeDef",
    "Function",
    "World",
    "Resolved",
    "get_typedef",
    "resolve_alias",
    "parse_resolved",
    # Naming
    "to_camel_case",
    "to_pascal_case",
]
