"""Command line entry point.

Usage:
    witgraphql schema component.json
    witgraphql schema component.json --world reverser --query-type Component
    witgraphql query component.json my_component '{ reverse(input: {str: "hi"}) }'
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from graphql import graphql, print_schema

from witgraphql.binding.schema import create_schema
from witgraphql.config import SchemaSettings
from witgraphql.errors import WitGraphQLError
from witgraphql.loading import functions_from_module, load_resolved


def _settings(args: argparse.Namespace) -> SchemaSettings:
    overrides = {}
    if args.world:
        overrides["world_name"] = args.world
    if args.query_type:
        overrides["query_type_name"] = args.query_type
    return SchemaSettings(**overrides)


def _print_schema(args: argparse.Namespace) -> int:
    resolved = load_resolved(args.graph)
    # Schema printing never invokes resolvers, so no function table is needed.
    schema = create_schema(resolved, {}, _settings(args))
    print(print_schema(schema))
    return 0


def _run_query(args: argparse.Namespace) -> int:
    resolved = load_resolved(args.graph)
    functions = functions_from_module(args.module)
    schema = create_schema(resolved, functions, _settings(args))
    result = asyncio.run(graphql(schema, args.query))
    print(json.dumps(result.formatted, indent=2))
    return 1 if result.errors else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="witgraphql",
        description="Expose a WebAssembly component interface as a GraphQL schema",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log conversion details")
    subparsers = parser.add_subparsers(dest="command", required=True)

    schema_cmd = subparsers.add_parser("schema", help="Print the schema SDL")
    query_cmd = subparsers.add_parser("query", help="Execute one query against a Python module")
    for sub in (schema_cmd, query_cmd):
        sub.add_argument("graph", help="Resolved WIT graph (wasm-tools component wit --json)")
        sub.add_argument("--world", help="World to expose (default: first world)")
        sub.add_argument("--query-type", help="Name of the root query type")

    schema_cmd.set_defaults(handler=_print_schema)
    query_cmd.add_argument("module", help="Importable module providing the exported functions")
    query_cmd.add_argument("query", help="GraphQL query document")
    query_cmd.set_defaults(handler=_run_query)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        return int(args.handler(args))
    except (WitGraphQLError, OSError, ValueError, ImportError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
