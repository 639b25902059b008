"""Loading collaborators: protocols plus JSON graph and module-backed sources.

Usage:
    from witgraphql.loading import load_resolved, functions_from_module

    resolved = load_resolved("component.json")
    functions = functions_from_module("my_component")
"""

from witgraphql.loading.json_graph import JsonGraphSource, load_resolved
from witgraphql.loading.module_table import functions_from_module
from witgraphql.loading.protocol import ComponentLoader, TypeGraphSource

__all__ = [
    # Protocols
    "ComponentLoader",
    "TypeGraphSource",
    # Implementations
    "JsonGraphSource",
    "load_resolved",
    "functions_from_module",
]
