"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for schema builds.

Usage:
    from witgraphql.config import SchemaSettings

    # Load from environment variables (WITGRAPHQL_*)
    settings = SchemaSettings()

    # Or override with explicit values
    settings = SchemaSettings(world_name="reverser", retry_max_attempts=3)
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from witgraphql.binding.models import RetryPolicy


class SchemaSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for building a GraphQL schema from a component interface.

    Attributes:
        query_type_name: Name of the root query type.
        input_argument_name: Name of the single argument carrying parameters.
        world_name: World whose exports are exposed (None for the first world).
        nullable_options: Leave parameters of option type nullable instead of required.
        retry_max_attempts: Attempts per native invocation (1 = no retry).
        retry_backoff: Backoff between retries (none, linear, exponential).
        retry_base_delay: Base delay in seconds for backoff.

    Environment Variables:
        WITGRAPHQL_QUERY_TYPE_NAME
        WITGRAPHQL_INPUT_ARGUMENT_NAME
        WITGRAPHQL_WORLD_NAME
        WITGRAPHQL_NULLABLE_OPTIONS
        WITGRAPHQL_RETRY_MAX_ATTEMPTS
        WITGRAPHQL_RETRY_BACKOFF
        WITGRAPHQL_RETRY_BASE_DELAY
    """

    model_config = SettingsConfigDict(
        env_prefix="WITGRAPHQL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    query_type_name: str = "Query"
    input_argument_name: str = "input"
    world_name: str | None = None
    nullable_options: bool = False
    retry_max_attempts: int = Field(default=1, ge=1)
    retry_backoff: Literal["none", "linear", "exponential"] = "none"
    retry_base_delay: float = Field(default=0.1, ge=0.0)

    def retry_policy(self) -> RetryPolicy:
        """Build the invocation retry policy from these settings."""
        return RetryPolicy(
            max_attempts=self.retry_max_attempts,
            backoff=self.retry_backoff,
            base_delay=self.retry_base_delay,
        )
