"""Type conversion: primitive mapping, per-direction caches, composite synthesis."""

from witgraphql.conversion.cache import Direction, TypeCache
from witgraphql.conversion.converter import TypeConverter
from witgraphql.conversion.primitives import PRIMITIVE_SCALARS, map_primitive

__all__ = [
    "Direction",
    "TypeCache",
    "TypeConverter",
    "PRIMITIVE_SCALARS",
    "map_primitive",
]
