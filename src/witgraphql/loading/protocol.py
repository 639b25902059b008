"""Protocols for the collaborators that feed a schema build.

Fetching a component binary, extracting its WIT, and transpiling it into
callables are handled outside this package. These protocols describe what
the schema builder expects from them.

Usage:
    class WasmtimeLoader:
        def load(self, path: str) -> tuple[Resolved, FunctionTable]:
            ...

    resolved, functions = loader.load("reverse.wasm")
    schema = create_schema(resolved, functions)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from witgraphql.binding.models import FunctionTable
    from witgraphql.core.graph.models import Resolved


@runtime_checkable
class TypeGraphSource(Protocol):
    """Produces the resolved type graph of a component interface."""

    def resolve(self) -> Resolved:
        """Return the fully resolved graph. Called once per schema build."""
        ...


@runtime_checkable
class ComponentLoader(Protocol):
    """Loads a component into its type graph and native function table."""

    def load(self, path: str) -> tuple[Resolved, FunctionTable]:
        """Load the component at ``path``.

        Args:
            path: Location of the component.

        Returns:
            Tuple of (resolved type graph, function table keyed by camelCase name).
        """
        ...
