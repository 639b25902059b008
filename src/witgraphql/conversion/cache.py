from __future__ import annotations

from collections.abc import Iterator
from typing import Generic, Literal, TypeVar

Direction = Literal["input", "output"]


T = TypeVar("T")


class TypeCache(Generic[T]):
    """Per-direction map from type graph node id to its GraphQL type.

    Serves memoization (a node converted twice yields the identical object)
    and recursion: aggregates are put here as soon as they are created, before
    their members are converted, so self-references resolve to the same object.
    """

    __slots__ = ("direction", "_types")

    def __init__(self, direction: Direction) -> None:
        self.direction = direction
        self._types: dict[int, T] = {}

    def get(self, type_id: int) -> T | None:
        return self._types.get(type_id)

    def put(self, type_id: int, graphql_type: T) -> None:
        self._types[type_id] = graphql_type

    def __contains__(self, type_id: object) -> bool:
        return type_id in self._types

    def __len__(self) -> int:
        return len(self._types)

    def __iter__(self) -> Iterator[int]:
        return iter(self._types)
