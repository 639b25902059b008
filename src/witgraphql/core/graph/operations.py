"""Pure lookups over the resolved type graph."""

from __future__ import annotations

from witgraphql.core.graph.models import AliasKind, Primitive, Resolved, TypeDef, TypeRef
from witgraphql.errors import TypeCycleError, UnresolvedTypeError


def get_typedef(type_id: int, resolved: Resolved) -> TypeDef:
    """Fetch a type definition by index.

    Args:
        type_id: Index into ``resolved.types``.
        resolved: Type graph.

    Returns:
        The type definition at that index.

    Raises:
        UnresolvedTypeError: If the index is outside the graph.
    """
    if type_id < 0 or type_id >= len(resolved.types):
        raise UnresolvedTypeError(type_id, len(resolved.types))
    return resolved.types[type_id]


def resolve_alias(ref: TypeRef, resolved: Resolved) -> int | None:
    """Follow alias nodes to the definition a type reference denotes.

    Aliases whose target is another node are followed. The walk stops at the
    first non-alias node, whose index is returned. If an alias targets a
    primitive, the *original* index is returned so the alias keeps its name.

    Args:
        ref: Type reference to resolve.
        resolved: Type graph.

    Returns:
        Node index, or None if ``ref`` is itself a primitive tag.

    Raises:
        UnresolvedTypeError: If a node on the chain does not exist.
        TypeCycleError: If the alias chain loops back to a node already visited.
    """
    if isinstance(ref, Primitive):
        return None

    current = ref
    chain: list[int] = []
    while True:
        if current in chain:
            raise TypeCycleError([*chain, current])
        chain.append(current)
        kind = get_typedef(current, resolved).kind
        if not isinstance(kind, AliasKind):
            return current
        if isinstance(kind.target, Primitive):
            return ref
        current = kind.target
