"""Function binding and schema assembly."""

from witgraphql.binding.binder import FunctionBinder
from witgraphql.binding.models import FunctionTable, RetryPolicy
from witgraphql.binding.schema import create_schema

__all__ = [
    # Models
    "FunctionTable",
    "RetryPolicy",
    # Binding
    "FunctionBinder",
    "create_schema",
]
