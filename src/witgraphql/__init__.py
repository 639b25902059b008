"""witgraphql: expose WebAssembly component interfaces as GraphQL schemas.

Usage:
    from graphql import graphql
    from witgraphql import create_schema, load_resolved

    resolved = load_resolved("reverse.json")  # wasm-tools component wit --json
    schema = create_schema(resolved, {"reverse": lambda s: s[::-1]})

    result = await graphql(schema, '{ reverse(input: {str: "hello"}) }')
    assert result.data == {"reverse": "olleh"}
"""

__version__ = "0.1.0"

# Schema building
from witgraphql.binding import FunctionBinder, FunctionTable, RetryPolicy, create_schema

# Configuration
from witgraphql.config import SchemaSettings

# Conversion
from witgraphql.conversion import TypeCache, TypeConverter, map_primitive

# Type graph
from witgraphql.core import (
    Function,
    Primitive,
    Resolved,
    TypeDef,
    TypeRef,
    World,
    parse_resolved,
    resolve_alias,
    to_camel_case,
    to_pascal_case,
)

# Errors
from witgraphql.errors import (
    EmptyWorldError,
    InvocationError,
    MissingBindingError,
    TypeCycleError,
    UnresolvedTypeError,
    UnsupportedKindError,
    UnsupportedPrimitiveError,
    WitGraphQLError,
)

# Loading
from witgraphql.loading import (
    ComponentLoader,
    JsonGraphSource,
    TypeGraphSource,
    functions_from_module,
    load_resolved,
)

__all__ = [
    # Version
    "__version__",
    # Schema building
    "create_schema",
    "FunctionBinder",
    "FunctionTable",
    "RetryPolicy",
    "SchemaSettings",
    # Conversion
    "TypeConverter",
    "TypeCache",
    "map_primitive",
    # Type graph
    "Primitive",
    "TypeRef",
    "TypeDef",
    "Function",
    "World",
    "Resolved",
    "parse_resolved",
    "resolve_alias",
    "to_camel_case",
    "to_pascal_case",
    # Loading
    "ComponentLoader",
    "TypeGraphSource",
    "JsonGraphSource",
    "load_resolved",
    "functions_from_module",
    # Errors
    "WitGraphQLError",
    "UnresolvedTypeError",
    "UnsupportedPrimitiveError",
    "UnsupportedKindError",
    "TypeCycleError",
    "EmptyWorldError",
    "MissingBindingError",
    "InvocationError",
]
