"""Tests for the JSON-file type graph source."""

import json

import pytest

from witgraphql.core.graph import Primitive, Resolved
from witgraphql.errors import UnsupportedKindError
from witgraphql.loading import JsonGraphSource, TypeGraphSource, load_resolved


@pytest.fixture
def graph_file(tmp_path, reverse_json):
    path = tmp_path / "reverse.json"
    path.write_text(json.dumps(reverse_json), encoding="utf-8")
    return path


def test_load_resolved(graph_file):
    resolved = load_resolved(graph_file)

    assert isinstance(resolved, Resolved)
    world = resolved.world()
    assert world.name == "reverser"
    [(name, function)] = world.function_exports()
    assert name == "reverse"
    assert function.params[0].type is Primitive.STRING


def test_load_resolved_accepts_str_path(graph_file):
    assert load_resolved(str(graph_file)).world("reverser") is not None


def test_missing_file_raises_os_error(tmp_path):
    with pytest.raises(OSError):
        load_resolved(tmp_path / "absent.json")


def test_invalid_json_raises_value_error(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError):
        load_resolved(path)


def test_unknown_kind_raises(tmp_path):
    path = tmp_path / "weird.json"
    path.write_text(json.dumps({"types": [{"name": "x", "kind": {"quantum": {}}}]}))

    with pytest.raises(UnsupportedKindError):
        load_resolved(path)


def test_json_graph_source_satisfies_protocol(graph_file):
    source = JsonGraphSource(graph_file)

    assert isinstance(source, TypeGraphSource)
    assert source.path == graph_file
    assert source.resolve().world().name == "reverser"


def test_json_graph_source_rereads_file(graph_file, reverse_json):
    source = JsonGraphSource(graph_file)
    first = source.resolve()

    reverse_json["worlds"][0]["name"] = "renamed"
    graph_file.write_text(json.dumps(reverse_json), encoding="utf-8")

    assert first.world().name == "reverser"
    assert source.resolve().world().name == "renamed"
