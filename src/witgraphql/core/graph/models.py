"""Resolved WIT type graph models.

The graph is an arena addressed by integer index: every composite or alias
type definition lives at ``Resolved.types[i]`` and is referenced elsewhere by
that index. A type reference (``TypeRef``) is either a ``Primitive`` tag or an
index into the arena.

Usage:
    resolved = Resolved(
        types=(TypeDef(id=0, name="point", kind=RecordKind((Field("x", Primitive.S32),))),),
        worlds=(World(name="geo", exports={...}),),
    )
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, TypeAlias


class Primitive(Enum):
    """Closed set of WIT primitive (scalar) type tags."""

    BOOL = "bool"
    U8 = "u8"
    U16 = "u16"
    U32 = "u32"
    U64 = "u64"
    S8 = "s8"
    S16 = "s16"
    S32 = "s32"
    S64 = "s64"
    F32 = "f32"
    F64 = "f64"
    CHAR = "char"
    STRING = "string"
    ERROR_CONTEXT = "error-context"


TypeRef: TypeAlias = Primitive | int
"""Reference to a type: a primitive tag or an index into ``Resolved.types``."""


@dataclass(frozen=True, slots=True)
class Field:
    """Named record field."""

    name: str
    type: TypeRef
    docs: str | None = None


@dataclass(frozen=True, slots=True)
class Flag:
    name: str
    docs: str | None = None


@dataclass(frozen=True, slots=True)
class Case:
    """Variant case, optionally carrying a payload type."""

    name: str
    type: TypeRef | None = None
    docs: str | None = None


@dataclass(frozen=True, slots=True)
class EnumCase:
    name: str
    docs: str | None = None


# Kinds: one dataclass per WIT type definition kind.


@dataclass(frozen=True, slots=True)
class RecordKind:
    fields: tuple[Field, ...]


@dataclass(frozen=True, slots=True)
class ResourceKind:
    pass


@dataclass(frozen=True, slots=True)
class HandleKind:
    """Owned or borrowed handle to a resource definition."""

    mode: Literal["own", "borrow"]
    resource: int


@dataclass(frozen=True, slots=True)
class FlagsKind:
    flags: tuple[Flag, ...]


@dataclass(frozen=True, slots=True)
class TupleKind:
    types: tuple[TypeRef, ...]


@dataclass(frozen=True, slots=True)
class VariantKind:
    cases: tuple[Case, ...]


@dataclass(frozen=True, slots=True)
class EnumKind:
    cases: tuple[EnumCase, ...]


@dataclass(frozen=True, slots=True)
class OptionKind:
    type: TypeRef


@dataclass(frozen=True, slots=True)
class ResultKind:
    ok: TypeRef | None = None
    err: TypeRef | None = None


@dataclass(frozen=True, slots=True)
class ListKind:
    type: TypeRef


@dataclass(frozen=True, slots=True)
class FutureKind:
    type: TypeRef | None = None


@dataclass(frozen=True, slots=True)
class StreamKind:
    type: TypeRef | None = None


@dataclass(frozen=True, slots=True)
class AliasKind:
    """Named indirection to another type (``type foo = bar``)."""

    target: TypeRef


TypeDefKind = (
    RecordKind
    | ResourceKind
    | HandleKind
    | FlagsKind
    | TupleKind
    | VariantKind
    | EnumKind
    | OptionKind
    | ResultKind
    | ListKind
    | FutureKind
    | StreamKind
    | AliasKind
)


@dataclass(frozen=True, slots=True)
class TypeOwner:
    """Back-reference from a type definition to the world or interface declaring it."""

    kind: Literal["world", "interface"]
    index: int


@dataclass(frozen=True, slots=True)
class TypeDef:
    """Single node of the type graph."""

    id: int
    kind: TypeDefKind
    name: str | None = None
    owner: TypeOwner | None = None
    docs: str | None = None
    stability: str | None = None


class FunctionKind(Enum):
    """How a function is exposed. Does not affect schema conversion."""

    FREESTANDING = "freestanding"
    ASYNC_FREESTANDING = "async-freestanding"
    METHOD = "method"
    ASYNC_METHOD = "async-method"
    STATIC = "static"
    ASYNC_STATIC = "async-static"
    CONSTRUCTOR = "constructor"


@dataclass(frozen=True, slots=True)
class Param:
    name: str
    type: TypeRef


@dataclass(frozen=True, slots=True)
class Function:
    """Exported function signature.

    Attributes:
        name: Declared (kebab-case) function name.
        kind: Freestanding, method, constructor, ...
        params: Parameters in declaration order.
        result: Result type, or None if the function returns nothing.
        resource: Resource type index for methods, statics and constructors.
    """

    name: str
    params: tuple[Param, ...] = ()
    result: TypeRef | None = None
    kind: FunctionKind = FunctionKind.FREESTANDING
    resource: int | None = None
    docs: str | None = None
    stability: str | None = None


@dataclass(frozen=True, slots=True)
class WorldItem:
    """Import or export of a world.

    Exactly one of ``function``, ``interface`` or ``type`` is set.
    """

    function: Function | None = None
    interface: int | None = None
    type: int | None = None


@dataclass(frozen=True, slots=True)
class World:
    """Named collection of a component's imports and exports."""

    name: str
    exports: Mapping[str, WorldItem] = field(default_factory=dict)
    imports: Mapping[str, WorldItem] = field(default_factory=dict)
    package: int | None = None
    docs: str | None = None

    def function_exports(self) -> list[tuple[str, Function]]:
        """Function exports in declaration order, keyed by export name."""
        return [
            (name, item.function)
            for name, item in self.exports.items()
            if item.function is not None
        ]


@dataclass(frozen=True, slots=True)
class Interface:
    name: str | None
    types: Mapping[str, int] = field(default_factory=dict)
    functions: Mapping[str, Function] = field(default_factory=dict)
    package: int | None = None


@dataclass(frozen=True, slots=True)
class Package:
    name: str
    interfaces: Mapping[str, int] = field(default_factory=dict)
    worlds: Mapping[str, int] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class Resolved:
    """Fully resolved WIT package graph. Read-only once constructed.

    ``types[i].id == i`` for every node.
    """

    types: tuple[TypeDef, ...] = ()
    worlds: tuple[World, ...] = ()
    interfaces: tuple[Interface, ...] = ()
    packages: tuple[Package, ...] = ()

    def world(self, name: str | None = None) -> World | None:
        """Look up a world by name, or the first world when name is None."""
        if name is None:
            return self.worlds[0] if self.worlds else None
        for world in self.worlds:
            if world.name == name:
                return world
        return None
