"""Tests for schema build settings."""

import pytest
from pydantic import ValidationError

from witgraphql import RetryPolicy, SchemaSettings


def test_defaults(settings):
    assert settings.query_type_name == "Query"
    assert settings.input_argument_name == "input"
    assert settings.world_name is None
    assert settings.nullable_options is False
    assert settings.retry_policy() == RetryPolicy()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("WITGRAPHQL_WORLD_NAME", "reverser")
    monkeypatch.setenv("WITGRAPHQL_NULLABLE_OPTIONS", "true")
    monkeypatch.setenv("WITGRAPHQL_RETRY_MAX_ATTEMPTS", "4")
    monkeypatch.setenv("WITGRAPHQL_RETRY_BACKOFF", "exponential")

    settings = SchemaSettings(_env_file=None)

    assert settings.world_name == "reverser"
    assert settings.nullable_options is True
    assert settings.retry_policy() == RetryPolicy(max_attempts=4, backoff="exponential")


def test_explicit_values_win_over_environment(monkeypatch):
    monkeypatch.setenv("WITGRAPHQL_QUERY_TYPE_NAME", "FromEnv")

    settings = SchemaSettings(_env_file=None, query_type_name="Explicit")

    assert settings.query_type_name == "Explicit"


def test_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("WITGRAPHQL_INPUT_ARGUMENT_NAME=args\n", encoding="utf-8")

    settings = SchemaSettings(_env_file=env_file)

    assert settings.input_argument_name == "args"


def test_retry_policy_from_settings():
    settings = SchemaSettings(
        _env_file=None, retry_max_attempts=3, retry_backoff="linear", retry_base_delay=0.5
    )

    assert settings.retry_policy() == RetryPolicy(max_attempts=3, backoff="linear", base_delay=0.5)


@pytest.mark.parametrize(
    "overrides",
    [
        {"retry_max_attempts": 0},
        {"retry_base_delay": -1.0},
        {"retry_backoff": "fibonacci"},
    ],
)
def test_invalid_values_rejected(overrides):
    with pytest.raises(ValidationError):
        SchemaSettings(_env_file=None, **overrides)
