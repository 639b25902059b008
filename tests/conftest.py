"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from witgraphql.config import SchemaSettings
from witgraphql.core.graph import (
    Function,
    Param,
    Primitive,
    Resolved,
    TypeDef,
    TypeDefKind,
    World,
    WorldItem,
)


def build_resolved(
    *nodes: tuple[str | None, TypeDefKind],
    functions: tuple[Function, ...] = (),
    world_name: str = "test-world",
) -> Resolved:
    """Build a graph whose node ids are the positions of ``nodes``."""
    types = tuple(
        TypeDef(id=i, name=name, kind=kind) for i, (name, kind) in enumerate(nodes)
    )
    exports = {f.name: WorldItem(function=f) for f in functions}
    return Resolved(types=types, worlds=(World(name=world_name, exports=exports),))


@pytest.fixture
def make_resolved():
    return build_resolved


@pytest.fixture
def settings():
    """Settings independent of WITGRAPHQL_* environment variables."""
    return SchemaSettings(_env_file=None)


@pytest.fixture
def reverse_function():
    return Function(
        name="reverse",
        params=(Param("str", Primitive.STRING),),
        result=Primitive.STRING,
    )


@pytest.fixture
def reverse_json():
    """Resolved graph of a component exporting ``reverse: func(str: string) -> string``."""
    return {
        "worlds": [
            {
                "name": "reverser",
                "imports": {},
                "exports": {
                    "reverse": {
                        "function": {
                            "name": "reverse",
                            "kind": "freestanding",
                            "params": [{"name": "str", "type": "string"}],
                            "result": "string",
                        }
                    }
                },
                "package": 0,
            }
        ],
        "interfaces": [],
        "types": [],
        "packages": [
            {"name": "example:reverse", "interfaces": {}, "worlds": {"reverser": 0}}
        ],
    }
