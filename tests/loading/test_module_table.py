"""Tests for building function tables from modules and objects."""

import sys
from types import ModuleType, SimpleNamespace

import pytest

from witgraphql.loading import ComponentLoader, functions_from_module


def _component_module():
    module = ModuleType("fake_component")
    module.reverse = lambda s: s[::-1]
    module.concatWords = lambda a, b: a + b
    module._private = lambda: None
    module.VERSION = "1.0"
    module.Helper = type("Helper", (), {})
    return module


def test_collects_public_callables():
    table = functions_from_module(_component_module())

    assert set(table) == {"reverse", "concatWords"}
    assert table["reverse"]("abc") == "cba"


def test_imports_module_by_name(monkeypatch):
    monkeypatch.setitem(sys.modules, "fake_component", _component_module())

    table = functions_from_module("fake_component")

    assert "reverse" in table


def test_unknown_module_name_raises():
    with pytest.raises(ModuleNotFoundError):
        functions_from_module("witgraphql_no_such_component")


def test_accepts_plain_objects():
    exports = SimpleNamespace(reverse=lambda s: s[::-1], count=3)

    assert list(functions_from_module(exports)) == ["reverse"]


def test_loader_protocol_is_structural(make_resolved):
    class StaticLoader:
        def load(self, path):
            return make_resolved(), functions_from_module(_component_module())

    loader = StaticLoader()

    assert isinstance(loader, ComponentLoader)
    resolved, functions = loader.load("ignored.wasm")
    assert "reverse" in functions
