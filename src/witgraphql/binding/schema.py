"""Schema assembly: one root query field per exported function.

Usage:
    from witgraphql import create_schema

    schema = create_schema(resolved, {"reverse": lambda s: s[::-1]})
    result = await graphql(schema, '{ reverse(input: {str: "hello"}) }')
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from graphql import GraphQLField, GraphQLObjectType, GraphQLSchema

from witgraphql.binding.binder import FunctionBinder
from witgraphql.binding.models import FunctionTable
from witgraphql.conversion.converter import TypeConverter
from witgraphql.core.graph.models import Resolved
from witgraphql.errors import EmptyWorldError

if TYPE_CHECKING:
    from witgraphql.config import SchemaSettings

logger = logging.getLogger(__name__)


def create_schema(
    resolved: Resolved,
    functions: FunctionTable,
    settings: SchemaSettings | None = None,
) -> GraphQLSchema:
    """Build a GraphQL schema exposing a world's function exports.

    Caches and synthesized types are local to this call. Bindings are not
    checked here; a missing entry in ``functions`` surfaces when the field is
    first resolved.

    Args:
        resolved: Resolved type graph of the component.
        functions: Native implementations keyed by camelCase export name.
        settings: Build settings. Defaults to ``SchemaSettings()`` (env-aware).

    Returns:
        Schema with a single root query type.

    Raises:
        EmptyWorldError: If the world does not exist or exports no functions.
        UnresolvedTypeError: If a referenced type is missing from the graph.
        UnsupportedKindError: If a referenced type has an unrecognized kind.
        UnsupportedPrimitiveError: If a referenced primitive is not mappable.
        TypeCycleError: If an alias or wrapper chain loops.
    """
    if settings is None:
        # Late import to avoid circular dependency
        from witgraphql.config import SchemaSettings

        settings = SchemaSettings()

    world = resolved.world(settings.world_name)
    if world is None:
        target = repr(settings.world_name) if settings.world_name else "any"
        raise EmptyWorldError(f"No world {target} in resolved graph")

    binder = FunctionBinder(
        TypeConverter(resolved),
        functions,
        resolved,
        input_argument_name=settings.input_argument_name,
        nullable_options=settings.nullable_options,
        retry_policy=settings.retry_policy(),
    )

    query_fields: dict[str, GraphQLField] = {}
    for name, item in world.exports.items():
        if item.function is None:
            logger.debug("Skipping non-function export %s of world %s", name, world.name)
            continue
        query_fields[binder.field_name(name)] = binder.bind(name, item.function)

    if not query_fields:
        raise EmptyWorldError(f"World {world.name!r} exports no functions")

    query_type = GraphQLObjectType(settings.query_type_name, fields=query_fields)
    logger.debug("Built schema for world %s with %d field(s)", world.name, len(query_fields))
    return GraphQLSchema(query=query_type)
