"""Binding of exported functions to GraphQL query fields.

Usage:
    binder = FunctionBinder(converter, functions)
    field = binder.bind("reverse", function)   # GraphQLField with resolver
    query_fields[binder.field_name("reverse")] = field

Each field takes one argument (``input`` by default) holding an input object
with one required member per parameter. The resolver projects that object
back into positional arguments in declared order and calls the native
function registered under the camelCase export name.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import Any

from graphql import (
    GraphQLArgument,
    GraphQLBoolean,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInputType,
    GraphQLNonNull,
    GraphQLOutputType,
    GraphQLResolveInfo,
)

from witgraphql.binding.models import FunctionTable, RetryPolicy
from witgraphql.conversion.converter import TypeConverter
from witgraphql.core.graph.models import Function, OptionKind, Param, Resolved
from witgraphql.core.graph.operations import get_typedef, resolve_alias
from witgraphql.core.naming import to_camel_case, to_pascal_case
from witgraphql.errors import InvocationError, MissingBindingError

# Optional tenacity import for retry functionality
try:
    import tenacity

    TENACITY_AVAILABLE = True
except ImportError:
    TENACITY_AVAILABLE = False

logger = logging.getLogger(__name__)

Resolver = Callable[..., Any]


class FunctionBinder:
    """Builds query fields and resolvers for exported functions.

    Args:
        converter: Type converter of the current schema build.
        functions: Native implementations keyed by camelCase export name.
            Entries are looked up at invocation time, not at build time.
        resolved: Type graph, needed to detect option-typed parameters.
        input_argument_name: Name of the field argument carrying parameters.
        nullable_options: If True, option-typed parameters are not required.
        retry_policy: Retry configuration for native invocations.
    """

    def __init__(
        self,
        converter: TypeConverter,
        functions: FunctionTable,
        resolved: Resolved,
        input_argument_name: str = "input",
        nullable_options: bool = False,
        retry_policy: RetryPolicy | None = None,
    ) -> None:
        self._converter = converter
        self._functions = functions
        self._resolved = resolved
        self._input_argument_name = input_argument_name
        self._nullable_options = nullable_options
        self._retry_policy = retry_policy or RetryPolicy()

    @staticmethod
    def field_name(export_name: str) -> str:
        """Query field (and function table key) for an export."""
        return to_camel_case(export_name)

    def bind(self, export_name: str, function: Function) -> GraphQLField:
        """Build the query field for one exported function.

        Args:
            export_name: Name under which the world exports the function.
            function: Exported function signature.

        Returns:
            Field whose resolver invokes the bound native function.

        Raises:
            UnresolvedTypeError: If a parameter or result type is missing from the graph.
            UnsupportedKindError: If a referenced type has an unrecognized kind.
        """
        args: dict[str, GraphQLArgument] = {}
        if function.params:
            input_type = self._build_input_type(export_name, function.params)
            args[self._input_argument_name] = GraphQLArgument(GraphQLNonNull(input_type))

        return_type: GraphQLOutputType = (
            self._converter.to_output(function.result)
            if function.result is not None
            else GraphQLBoolean
        )
        logger.debug("Bound %s with %d parameter(s)", export_name, len(function.params))
        return GraphQLField(
            return_type,
            args=args,
            resolve=self._make_resolver(export_name, function),
            description=function.docs,
        )

    def _build_input_type(
        self, export_name: str, params: tuple[Param, ...]
    ) -> GraphQLInputObjectType:
        fields: dict[str, GraphQLInputField] = {}
        for param in params:
            param_type = self._converter.to_input(param.type)
            if not (self._nullable_options and self._is_option(param)):
                param_type = GraphQLNonNull(param_type)
            fields[to_camel_case(param.name)] = GraphQLInputField(param_type)
        return GraphQLInputObjectType(f"{to_pascal_case(export_name)}Input", fields=fields)

    def _is_option(self, param: Param) -> bool:
        type_id = resolve_alias(param.type, self._resolved)
        if type_id is None:
            return False
        return isinstance(get_typedef(type_id, self._resolved).kind, OptionKind)

    def _make_resolver(self, export_name: str, function: Function) -> Resolver:
        binding_name = self.field_name(export_name)
        param_names = [to_camel_case(p.name) for p in function.params]
        argument_name = self._input_argument_name

        async def resolve(_source: Any, _info: GraphQLResolveInfo, **kwargs: Any) -> Any:
            arguments = kwargs.get(argument_name) or {}
            positional = [arguments.get(name) for name in param_names]
            native = self._functions.get(binding_name)
            if native is None:
                raise MissingBindingError(function.name, binding_name)
            try:
                return await self._invoke(native, positional)
            except Exception as e:
                raise InvocationError(function.name, str(e)) from e

        return resolve

    async def _invoke(self, native: Callable[..., Any], positional: list[Any]) -> Any:
        """Call the native function, retrying per policy.

        Uses tenacity for retry logic when max_attempts > 1.
        Requires tenacity to be installed: pip install witgraphql[retry]
        """
        policy = self._retry_policy

        if policy.max_attempts <= 1:
            return await _call(native, positional)

        if not TENACITY_AVAILABLE:
            msg = "Retry policy requires tenacity. Install with: pip install witgraphql[retry]"
            raise ImportError(msg)

        async for attempt in self._build_retryer(policy):
            with attempt:
                return await _call(native, positional)

        return None  # pragma: no cover

    def _build_retryer(self, policy: RetryPolicy) -> tenacity.AsyncRetrying:
        """Build a tenacity retryer from RetryPolicy configuration."""
        stop = tenacity.stop_after_attempt(policy.max_attempts)

        wait: tenacity.wait.wait_base
        if policy.backoff == "exponential":
            wait = tenacity.wait_exponential(multiplier=policy.base_delay, min=policy.base_delay)
        elif policy.backoff == "linear":
            wait = tenacity.wait_incrementing(start=policy.base_delay, increment=policy.base_delay)
        else:
            wait = tenacity.wait_none()

        # reraise: the last attempt's exception is wrapped by the resolver
        return tenacity.AsyncRetrying(stop=stop, wait=wait, reraise=True)


async def _call(native: Callable[..., Any], positional: list[Any]) -> Any:
    result = native(*positional)
    if inspect.isawaitable(result):
        result = await result
    return result
