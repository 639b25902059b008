"""Tests for the primitive scalar table."""

import pytest
from graphql import GraphQLBoolean, GraphQLFloat, GraphQLInt, GraphQLString
from hypothesis import given
from hypothesis import strategies as st

from witgraphql import TypeConverter, map_primitive
from witgraphql.core.graph import Primitive
from witgraphql.errors import UnsupportedPrimitiveError

EXPECTED = {
    "bool": GraphQLBoolean,
    "u8": GraphQLInt,
    "u16": GraphQLInt,
    "u32": GraphQLInt,
    "s8": GraphQLInt,
    "s16": GraphQLInt,
    "s32": GraphQLInt,
    "f32": GraphQLFloat,
    "f64": GraphQLFloat,
    "string": GraphQLString,
    "char": GraphQLString,
    "error-context": GraphQLString,
    # 64-bit integers do not fit GraphQL Int
    "u64": GraphQLString,
    "s64": GraphQLString,
}

WIT_TAGS = frozenset(p.value for p in Primitive)


def test_table_covers_every_primitive():
    assert set(EXPECTED) == WIT_TAGS


@pytest.mark.parametrize(("tag", "scalar"), sorted(EXPECTED.items()))
def test_primitive_maps_identically_in_both_directions(make_resolved, tag, scalar):
    converter = TypeConverter(make_resolved())

    assert map_primitive(tag) is scalar
    assert converter.to_output(Primitive(tag)) is scalar
    assert converter.to_input(Primitive(tag)) is scalar


def test_primitives_are_not_cached(make_resolved):
    converter = TypeConverter(make_resolved())
    converter.to_output(Primitive.STRING)

    assert len(converter.output_cache) == 0


@given(st.text(max_size=16).filter(lambda s: s not in WIT_TAGS))
def test_unknown_tag_raises(tag):
    with pytest.raises(UnsupportedPrimitiveError):
        map_primitive(tag)
