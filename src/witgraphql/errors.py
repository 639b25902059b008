"""Error taxonomy for schema construction and field resolution.

Graph-level errors (unresolved types, unsupported kinds or primitives, cycles)
are raised while building a schema and abort the whole build. Binding errors
(missing bindings, failed invocations) are raised from field resolvers and are
reported by graphql-core as per-field errors.
"""

from __future__ import annotations

from typing import Any


class WitGraphQLError(Exception):
    """Base class for all witgraphql errors."""

    pass


class UnresolvedTypeError(WitGraphQLError, LookupError):
    """Raised when a type reference points to a node absent from the graph."""

    def __init__(self, type_id: int, available: int) -> None:
        super().__init__(
            f"Type index {type_id} not found in resolved types ({available} types available)"
        )
        self.type_id = type_id


class UnsupportedPrimitiveError(WitGraphQLError):
    """Raised for a primitive tag outside the fixed mapping table."""

    def __init__(self, tag: Any) -> None:
        super().__init__(f"Unsupported primitive type: {tag!r}")
        self.tag = tag


class UnsupportedKindError(WitGraphQLError):
    """Raised when a type definition's kind is not a recognized kind."""

    def __init__(self, kind: Any) -> None:
        super().__init__(f"Unsupported WIT type kind: {kind!r}")
        self.kind = kind


class TypeCycleError(WitGraphQLError):
    """Raised when a type chain loops back on itself without an aggregate in between.

    Alias chains must terminate; a wrapper chain (list, option, tuple) that
    refers back to itself has no GraphQL representation.
    """

    def __init__(self, chain: list[int]) -> None:
        path = " -> ".join(str(i) for i in chain)
        super().__init__(f"Type cycle detected: {path}")
        self.chain = chain


class EmptyWorldError(WitGraphQLError):
    """Raised when there is no world, or no function export, to build a schema from."""

    pass


class MissingBindingError(WitGraphQLError):
    """Raised at invocation when the function table has no entry for an export."""

    def __init__(self, function_name: str, binding_name: str) -> None:
        super().__init__(
            f"No binding for exported function {function_name!r} (looked up {binding_name!r})"
        )
        self.function_name = function_name
        self.binding_name = binding_name


class InvocationError(WitGraphQLError):
    """Raised when a bound native function rejects or throws.

    The original exception is kept as ``__cause__``.
    """

    def __init__(self, function_name: str, message: str) -> None:
        super().__init__(f"Error executing {function_name}: {message}")
        self.function_name = function_name
