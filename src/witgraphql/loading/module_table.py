"""Function tables built from Python modules or objects.

A transpiled component exposes its exports as attributes named in camelCase.
Any module or object laid out the same way can serve as a function table.

Usage:
    import my_component
    functions = functions_from_module(my_component)
    functions = functions_from_module("my_component")  # imported by name
"""

from __future__ import annotations

import importlib
from collections.abc import Callable
from types import ModuleType
from typing import Any

from witgraphql.binding.models import FunctionTable


def functions_from_module(module: ModuleType | str | Any) -> FunctionTable:
    """Collect the public callables of a module (or any object) by attribute name.

    Args:
        module: Module, importable module name, or object with callable attributes.

    Returns:
        Mapping of attribute name to callable; names starting with ``_`` and
        classes are left out.

    Raises:
        ModuleNotFoundError: If ``module`` is a name that cannot be imported.
    """
    if isinstance(module, str):
        module = importlib.import_module(module)

    table: dict[str, Callable[..., Any]] = {}
    for name in dir(module):
        if name.startswith("_"):
            continue
        value = getattr(module, name)
        if callable(value) and not isinstance(value, type):
            table[name] = value
    return table
