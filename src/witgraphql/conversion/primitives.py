"""Mapping of WIT primitive tags to GraphQL scalars.

The same table is used in input and output position. 64-bit integers map to
String because GraphQL ``Int`` is a signed 32-bit scalar.
"""

from __future__ import annotations

from types import MappingProxyType

from graphql import GraphQLBoolean, GraphQLFloat, GraphQLInt, GraphQLScalarType, GraphQLString

from witgraphql.core.graph.models import Primitive
from witgraphql.errors import UnsupportedPrimitiveError

PRIMITIVE_SCALARS: MappingProxyType[Primitive, GraphQLScalarType] = MappingProxyType(
    {
        Primitive.BOOL: GraphQLBoolean,
        Primitive.U8: GraphQLInt,
        Primitive.U16: GraphQLInt,
        Primitive.U32: GraphQLInt,
        Primitive.S8: GraphQLInt,
        Primitive.S16: GraphQLInt,
        Primitive.S32: GraphQLInt,
        Primitive.F32: GraphQLFloat,
        Primitive.F64: GraphQLFloat,
        Primitive.STRING: GraphQLString,
        Primitive.CHAR: GraphQLString,
        Primitive.ERROR_CONTEXT: GraphQLString,
        Primitive.U64: GraphQLString,
        Primitive.S64: GraphQLString,
    }
)


def map_primitive(tag: Primitive | str) -> GraphQLScalarType:
    """Map a primitive tag to its GraphQL scalar.

    Args:
        tag: Primitive enum member or its WIT spelling (e.g. ``"u32"``).

    Returns:
        The built-in GraphQL scalar for the tag.

    Raises:
        UnsupportedPrimitiveError: If the tag is not a WIT primitive.
    """
    if not isinstance(tag, Primitive):
        try:
            tag = Primitive(tag)
        except ValueError as e:
            raise UnsupportedPrimitiveError(tag) from e
    return PRIMITIVE_SCALARS[tag]
