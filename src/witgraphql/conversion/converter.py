"""Conversion of WIT type references into GraphQL types.

Usage:
    converter = TypeConverter(resolved)
    output_type = converter.to_output(function.result)
    input_type = converter.to_input(param.type)

One converter holds the caches for one schema build and is discarded with it.
Records, variants and results become aggregate types (object types in output
position, input object types in input position). Their field maps are
evaluated lazily by graphql-core, so each aggregate is cached before its
members are converted and filled in place afterwards; recursive references
obtained during the build therefore see the finished type.
"""

from __future__ import annotations

import logging
import warnings
from typing import cast

from graphql import (
    GraphQLBoolean,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInputType,
    GraphQLList,
    GraphQLObjectType,
    GraphQLOutputType,
    GraphQLString,
    GraphQLType,
)

from witgraphql.conversion.cache import Direction, TypeCache
from witgraphql.conversion.primitives import map_primitive
from witgraphql.core.graph.models import (
    AliasKind,
    EnumKind,
    FlagsKind,
    FutureKind,
    HandleKind,
    ListKind,
    OptionKind,
    Primitive,
    RecordKind,
    ResourceKind,
    Resolved,
    ResultKind,
    StreamKind,
    TupleKind,
    TypeDef,
    TypeRef,
    VariantKind,
)
from witgraphql.core.graph.operations import get_typedef, resolve_alias
from witgraphql.core.naming import to_camel_case, to_pascal_case
from witgraphql.errors import TypeCycleError, UnsupportedKindError

logger = logging.getLogger(__name__)

# (member name, type reference or None, fallback when the reference is None, description)
Member = tuple[str, TypeRef | None, GraphQLType, str | None]


class TypeConverter:
    """Converts type references of one resolved graph, caching per direction.

    Args:
        resolved: Type graph to convert from. Never mutated.
    """

    def __init__(self, resolved: Resolved) -> None:
        self._resolved = resolved
        self._caches: dict[Direction, TypeCache[GraphQLType]] = {
            "output": TypeCache("output"),
            "input": TypeCache("input"),
        }
        self._building: dict[Direction, list[int]] = {"output": [], "input": []}

    @property
    def output_cache(self) -> TypeCache[GraphQLType]:
        return self._caches["output"]

    @property
    def input_cache(self) -> TypeCache[GraphQLType]:
        return self._caches["input"]

    def to_output(self, ref: TypeRef) -> GraphQLOutputType:
        """Convert a type reference for use as a field result."""
        return cast(GraphQLOutputType, self._convert(ref, "output"))

    def to_input(self, ref: TypeRef) -> GraphQLInputType:
        """Convert a type reference for use as an argument or input field."""
        return cast(GraphQLInputType, self._convert(ref, "input"))

    def _convert(self, ref: TypeRef, direction: Direction) -> GraphQLType:
        type_id = resolve_alias(ref, self._resolved)
        if type_id is None:
            return map_primitive(cast(Primitive, ref))

        cache = self._caches[direction]
        cached = cache.get(type_id)
        if cached is not None:
            return cached

        # Aggregates are cached before recursing, so only wrapper kinds can re-enter here.
        building = self._building[direction]
        if type_id in building:
            raise TypeCycleError([*building[building.index(type_id) :], type_id])

        typedef = get_typedef(type_id, self._resolved)
        logger.debug("Converting %s type %d (%s)", direction, type_id, typedef.name)
        building.append(type_id)
        try:
            graphql_type = self._build(typedef, direction)
        finally:
            building.pop()
        cache.put(type_id, graphql_type)
        return graphql_type

    def _build(self, typedef: TypeDef, direction: Direction) -> GraphQLType:
        match typedef.kind:
            case AliasKind(target=Primitive() as tag):
                return map_primitive(tag)
            case AliasKind(target=target):
                return self._convert(target, direction)
            case RecordKind(fields=fields):
                return self._aggregate(
                    typedef,
                    self._aggregate_name(typedef, "Record", direction),
                    [(to_camel_case(f.name), f.type, GraphQLString, f.docs) for f in fields],
                    direction,
                )
            case VariantKind(cases=cases):
                return self._aggregate(
                    typedef,
                    self._aggregate_name(typedef, "Variant", direction),
                    [("type", None, GraphQLString, "Name of the active case.")]
                    + self._case_members(typedef, direction),
                    direction,
                )
            case ResultKind(ok=ok, err=err):
                suffix = "_Input" if direction == "input" else ""
                return self._aggregate(
                    typedef,
                    f"Result_{typedef.id}{suffix}",
                    [("ok", ok, GraphQLBoolean, None), ("error", err, GraphQLString, None)],
                    direction,
                )
            case ListKind(type=element):
                return GraphQLList(self._convert(element, direction))
            case OptionKind(type=inner):
                return self._convert(inner, direction)
            case TupleKind(types=types):
                return self._tuple(typedef, types, direction)
            case EnumKind() | FlagsKind() | HandleKind() | ResourceKind():
                return GraphQLString
            case FutureKind() | StreamKind():
                return GraphQLString
            case unknown:
                raise UnsupportedKindError(unknown)

    def _tuple(
        self, typedef: TypeDef, types: tuple[TypeRef, ...], direction: Direction
    ) -> GraphQLType:
        # Lossy: a tuple becomes a list of its first element's type.
        elements = [self._convert(t, direction) for t in types]
        if not elements:
            return GraphQLList(GraphQLString)
        if len(elements) > 1:
            logger.debug(
                "Tuple type %d has %d elements; only the first is kept", typedef.id, len(elements)
            )
        return GraphQLList(elements[0])

    def _case_members(self, typedef: TypeDef, direction: Direction) -> list[Member]:
        kind = cast(VariantKind, typedef.kind)
        members: list[Member] = []
        for case in kind.cases:
            if case.type is None:
                continue
            member_name = to_camel_case(case.name)
            if member_name == "type":
                warnings.warn(
                    f"Variant {typedef.name or typedef.id} has a case named 'type' which "
                    f"collides with the case discriminator; its payload is not exposed.",
                    stacklevel=2,
                )
                continue
            members.append((member_name, case.type, GraphQLString, case.docs))
        return members

    @staticmethod
    def _aggregate_name(typedef: TypeDef, prefix: str, direction: Direction) -> str:
        if typedef.name:
            return to_pascal_case(typedef.name) + ("Input" if direction == "input" else "")
        return f"{prefix}_{typedef.id}" + ("_Input" if direction == "input" else "")

    def _aggregate(
        self,
        typedef: TypeDef,
        name: str,
        members: list[Member],
        direction: Direction,
    ) -> GraphQLType:
        """Create an aggregate type, cache it, then fill its fields in place."""
        aggregate: GraphQLObjectType | GraphQLInputObjectType
        if direction == "input":
            input_fields: dict[str, GraphQLInputField] = {}
            aggregate = GraphQLInputObjectType(
                name, fields=lambda: input_fields, description=typedef.docs
            )
            self._caches[direction].put(typedef.id, aggregate)
            for member_name, ref, fallback, docs in members:
                member_type = fallback if ref is None else self._convert(ref, direction)
                input_fields[member_name] = GraphQLInputField(
                    cast(GraphQLInputType, member_type), description=docs
                )
        else:
            output_fields: dict[str, GraphQLField] = {}
            aggregate = GraphQLObjectType(
                name, fields=lambda: output_fields, description=typedef.docs
            )
            self._caches[direction].put(typedef.id, aggregate)
            for member_name, ref, fallback, docs in members:
                member_type = fallback if ref is None else self._convert(ref, direction)
                output_fields[member_name] = GraphQLField(
                    cast(GraphQLOutputType, member_type), description=docs
                )
        return aggregate
