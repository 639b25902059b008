"""Type graph functionality: models, parsing, and alias resolution."""

from witgraphql.core.graph.models import (
    AliasKind,
    Case,
    EnumCase,
    EnumKind,
    Field,
    Flag,
    FlagsKind,
    Function,
    FunctionKind,
    FutureKind,
    HandleKind,
    Interface,
    ListKind,
    OptionKind,
    Package,
    Param,
    Primitive,
    RecordKind,
    ResourceKind,
    Resolved,
    ResultKind,
    StreamKind,
    TupleKind,
    TypeDef,
    TypeDefKind,
    TypeOwner,
    TypeRef,
    VariantKind,
    World,
    WorldItem,
)
from witgraphql.core.graph.operations import get_typedef, resolve_alias
from witgraphql.core.graph.parsing import parse_kind, parse_resolved, parse_type_ref

__all__ = [
    # Models
    "Primitive",
    "TypeRef",
    "Field",
    "Flag",
    "Case",
    "EnumCase",
    "RecordKind",
    "ResourceKind",
    "HandleKind",
    "FlagsKind",
    "TupleKind",
    "VariantKind",
    "EnumKind",
    "OptionKind",
    "ResultKind",
    "ListKind",
    "FutureKind",
    "StreamKind",
    "AliasKind",
    "TypeDefKind",
    "TypeOwner",
    "TypeDef",
    "FunctionKind",
    "Param",
    "Function",
    "WorldItem",
    "World",
    "Interface",
    "Package",
    "Resolved",
    # Operations
    "get_typedef",
    "resolve_alias",
    # Parsing
    "parse_resolved",
    "parse_kind",
    "parse_type_ref",
]
