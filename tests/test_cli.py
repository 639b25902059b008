"""Tests for the witgraphql command line."""

import json

import pytest

from witgraphql.cli import main

COMPONENT_MODULE = '''
def reverse(s):
    return s[::-1]
'''


@pytest.fixture
def graph_file(tmp_path, reverse_json):
    path = tmp_path / "reverse.json"
    path.write_text(json.dumps(reverse_json), encoding="utf-8")
    return str(path)


@pytest.fixture
def component_module(tmp_path, monkeypatch):
    (tmp_path / "cli_reverse_component.py").write_text(COMPONENT_MODULE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    return "cli_reverse_component"


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    # Keep SchemaSettings() from picking up a developer's .env or WITGRAPHQL_* vars
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("WITGRAPHQL_QUERY_TYPE_NAME", raising=False)
    monkeypatch.delenv("WITGRAPHQL_WORLD_NAME", raising=False)


def test_schema_prints_sdl(graph_file, capsys):
    assert main(["schema", graph_file]) == 0

    out = capsys.readouterr().out
    assert "type Query {" in out
    assert "reverse(input: ReverseInput!): String" in out
    assert "input ReverseInput {\n  str: String!\n}" in out


def test_schema_query_type_option(graph_file, capsys):
    assert main(["schema", graph_file, "--query-type", "Component"]) == 0

    assert "type Component {" in capsys.readouterr().out


def test_schema_unknown_world(graph_file, capsys):
    assert main(["schema", graph_file, "--world", "nowhere"]) == 1

    assert "Error: No world 'nowhere'" in capsys.readouterr().err


def test_missing_graph_file(tmp_path, capsys):
    assert main(["schema", str(tmp_path / "absent.json")]) == 1

    assert capsys.readouterr().err.startswith("Error:")


def test_query_executes_module_function(graph_file, component_module, capsys):
    query = '{ reverse(input: { str: "hello" }) }'

    assert main(["query", graph_file, component_module, query]) == 0

    assert json.loads(capsys.readouterr().out) == {"data": {"reverse": "olleh"}}


def test_query_errors_set_exit_code(graph_file, component_module, capsys):
    assert main(["query", graph_file, component_module, "{ reverse(input: {}) }"]) == 1

    result = json.loads(capsys.readouterr().out)
    assert result["errors"]


def test_query_unknown_module(graph_file, capsys):
    assert main(["query", graph_file, "witgraphql_no_such_component", "{ __typename }"]) == 1

    assert "Error:" in capsys.readouterr().err


def test_command_is_required(capsys):
    with pytest.raises(SystemExit):
        main([])
