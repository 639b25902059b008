"""Binding models: the function table and invocation retry policy."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Literal, TypeAlias

FunctionTable: TypeAlias = Mapping[str, Callable[..., Any]]
"""Native implementations keyed by camelCase export name.

Each callable takes positional arguments in declared parameter order and
returns a value (or an awaitable of one) compatible with the declared result.
"""


@dataclass(frozen=True, slots=True)
class RetryPolicy:
    """Configuration for retrying failed native invocations.

    Useful when bound functions call out to flaky hosts. Retries re-run the
    native function, so only enable them for idempotent exports.
    """

    max_attempts: int = 1
    """Maximum attempts (1 = no retry). Default: no retry."""

    backoff: Literal["none", "linear", "exponential"] = "none"
    """Backoff strategy between retries."""

    base_delay: float = 0.1
    """Base delay in seconds for backoff calculation."""
