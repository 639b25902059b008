"""Type graph source backed by a JSON file.

Produce the file with ``wasm-tools component wit --json component.wasm``.

Usage:
    resolved = load_resolved("component.json")
    # or, as a TypeGraphSource:
    source = JsonGraphSource("component.json")
    resolved = source.resolve()
"""

from __future__ import annotations

import json
from pathlib import Path

from witgraphql.core.graph.models import Resolved
from witgraphql.core.graph.parsing import parse_resolved


def load_resolved(path: str | Path) -> Resolved:
    """Read and parse a resolved graph JSON file.

    Raises:
        OSError: If the file cannot be read.
        json.JSONDecodeError: If the file is not valid JSON.
        UnsupportedKindError: If a type definition has an unknown kind.
        UnsupportedPrimitiveError: If a type reference is an unknown tag.
    """
    with open(path, encoding="utf-8") as f:
        return parse_resolved(json.load(f))


class JsonGraphSource:
    """TypeGraphSource reading a JSON file on every resolve()."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def resolve(self) -> Resolved:
        return load_resolved(self._path)
