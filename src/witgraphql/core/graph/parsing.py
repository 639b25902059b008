"""Build a ``Resolved`` graph from its JSON representation.

The accepted shape is the one printed by ``wasm-tools component wit --json``
(and by JS resolvers that mirror it): kinds are single-key objects such as
``{"record": {"fields": [...]}}`` or the bare string ``"resource"``, and type
references are primitive tag strings or integer indices.

Usage:
    resolved = parse_resolved(json.loads(text))
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

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
from witgraphql.errors import UnsupportedKindError, UnsupportedPrimitiveError


def _docs(raw: Any) -> str | None:
    # wasm-tools nests docs as {"contents": "..."}
    if isinstance(raw, Mapping):
        return raw.get("contents")
    return raw


def parse_type_ref(raw: Any) -> TypeRef:
    """Parse a type reference (primitive tag string or node index).

    Raises:
        UnsupportedPrimitiveError: If a string tag is not a WIT primitive.
    """
    if isinstance(raw, bool):
        raise UnsupportedPrimitiveError(raw)
    if isinstance(raw, int):
        return raw
    try:
        return Primitive(raw)
    except ValueError as e:
        raise UnsupportedPrimitiveError(raw) from e


def _optional_ref(raw: Any) -> TypeRef | None:
    return None if raw is None else parse_type_ref(raw)


def parse_kind(raw: Any) -> TypeDefKind:
    """Parse a type definition kind.

    Args:
        raw: Kind payload, e.g. ``{"list": "u8"}`` or ``"resource"``.

    Returns:
        The matching kind dataclass.

    Raises:
        UnsupportedKindError: If the payload is not a recognized kind.
    """
    if raw == "resource":
        return ResourceKind()
    if not isinstance(raw, Mapping) or len(raw) != 1:
        raise UnsupportedKindError(raw)

    ((tag, body),) = raw.items()
    match tag:
        case "record":
            return RecordKind(
                tuple(
                    Field(f["name"], parse_type_ref(f["type"]), _docs(f.get("docs")))
                    for f in body["fields"]
                )
            )
        case "handle":
            if "own" in body:
                return HandleKind("own", body["own"])
            if "borrow" in body:
                return HandleKind("borrow", body["borrow"])
            raise UnsupportedKindError(raw)
        case "flags":
            return FlagsKind(tuple(Flag(f["name"], _docs(f.get("docs"))) for f in body["flags"]))
        case "tuple":
            return TupleKind(tuple(parse_type_ref(t) for t in body["types"]))
        case "variant":
            return VariantKind(
                tuple(
                    Case(c["name"], _optional_ref(c.get("type")), _docs(c.get("docs")))
                    for c in body["cases"]
                )
            )
        case "enum":
            return EnumKind(tuple(EnumCase(c["name"], _docs(c.get("docs"))) for c in body["cases"]))
        case "option":
            return OptionKind(parse_type_ref(body))
        case "result":
            return ResultKind(_optional_ref(body.get("ok")), _optional_ref(body.get("err")))
        case "list":
            return ListKind(parse_type_ref(body))
        case "future":
            return FutureKind(_optional_ref(body))
        case "stream":
            return StreamKind(_optional_ref(body))
        case "type":
            return AliasKind(parse_type_ref(body))
        case _:
            raise UnsupportedKindError(raw)


def _parse_owner(raw: Any) -> TypeOwner | None:
    if not raw:
        return None
    if "world" in raw:
        return TypeOwner("world", raw["world"])
    return TypeOwner("interface", raw["interface"])


def parse_typedef(index: int, raw: Mapping[str, Any]) -> TypeDef:
    return TypeDef(
        id=index,
        kind=parse_kind(raw["kind"]),
        name=raw.get("name"),
        owner=_parse_owner(raw.get("owner")),
        docs=_docs(raw.get("docs")),
        stability=_stability(raw.get("stability")),
    )


def _stability(raw: Any) -> str | None:
    if raw is None or isinstance(raw, str):
        return raw
    # {"stable": {...}} / {"unstable": {...}}
    return next(iter(raw), None)


def _parse_params(raw: Any) -> tuple[Param, ...]:
    params = []
    for p in raw or ():
        if isinstance(p, Mapping):
            params.append(Param(p["name"], parse_type_ref(p["type"])))
        else:
            name, type_ = p
            params.append(Param(name, parse_type_ref(type_)))
    return tuple(params)


def _parse_result(raw: Mapping[str, Any]) -> TypeRef | None:
    if raw.get("result") is not None:
        return parse_type_ref(raw["result"])
    # Older resolvers: {"results": {"anon": T}} or {"results": {"named": [...]}}
    results = raw.get("results")
    if isinstance(results, Mapping) and results.get("anon") is not None:
        return parse_type_ref(results["anon"])
    return None


def parse_function(raw: Mapping[str, Any]) -> Function:
    """Parse a function signature; the function kind may carry a resource index."""
    kind_raw = raw.get("kind", "freestanding")
    resource = None
    if isinstance(kind_raw, Mapping):
        ((kind_name, resource),) = kind_raw.items()
    else:
        kind_name = kind_raw
    return Function(
        name=raw["name"],
        params=_parse_params(raw.get("params")),
        result=_parse_result(raw),
        kind=FunctionKind(kind_name),
        resource=resource,
        docs=_docs(raw.get("docs")),
        stability=_stability(raw.get("stability")),
    )


def _parse_world_item(raw: Mapping[str, Any]) -> WorldItem:
    if "function" in raw:
        return WorldItem(function=parse_function(raw["function"]))
    if "interface" in raw:
        iface = raw["interface"]
        return WorldItem(interface=iface["id"] if isinstance(iface, Mapping) else iface)
    return WorldItem(type=raw.get("type"))


def parse_world(raw: Mapping[str, Any]) -> World:
    return World(
        name=raw["name"],
        exports={k: _parse_world_item(v) for k, v in (raw.get("exports") or {}).items()},
        imports={k: _parse_world_item(v) for k, v in (raw.get("imports") or {}).items()},
        package=raw.get("package"),
        docs=_docs(raw.get("docs")),
    )


def parse_resolved(data: Mapping[str, Any]) -> Resolved:
    """Parse a full resolved package graph.

    Args:
        data: Decoded JSON object with ``types``, ``worlds``, ``interfaces``
            and ``packages`` arrays (missing arrays are treated as empty).

    Returns:
        Immutable ``Resolved`` graph with node ids equal to array indices.

    Raises:
        UnsupportedKindError: If a type definition has an unknown kind.
        UnsupportedPrimitiveError: If a type reference is an unknown tag.
    """
    return Resolved(
        types=tuple(parse_typedef(i, t) for i, t in enumerate(data.get("types") or ())),
        worlds=tuple(parse_world(w) for w in data.get("worlds") or ()),
        interfaces=tuple(
            Interface(
                name=i.get("name"),
                types=dict(i.get("types") or {}),
                functions={k: parse_function(f) for k, f in (i.get("functions") or {}).items()},
                package=i.get("package"),
            )
            for i in data.get("interfaces") or ()
        ),
        packages=tuple(
            Package(
                name=p["name"],
                interfaces=dict(p.get("interfaces") or {}),
                worlds=dict(p.get("worlds") or {}),
            )
            for p in data.get("packages") or ()
        ),
    )
