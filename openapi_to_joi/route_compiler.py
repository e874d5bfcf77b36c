"""
Route compiler: the entry point turning an OpenAPI operation into Joi rules.

Each call builds its own parser, resolver and compiler around the
registry it is given, so compilations with different registries never
share state.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .analyzer.reference_resolver import ComponentRegistry, ComponentResolver
from .compiler import SchemaCompiler
from .config import CompilerConfig
from .errors import MissingRouteError
from .schema_ast.parser import SchemaParser

# Parameter locations that produce an output group; others are dropped
PARAMETER_GROUPS = ("path", "query")

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


class RouteCompiler:
    """Compiles one route against a component registry."""

    def __init__(self, registry: Mapping[str, Any] | None, config: CompilerConfig | None = None):
        """
        Initialize the route compiler.

        Args:
            registry: Component name to schema mapping used to resolve $ref
            config: Compiler configuration
        """
        self.config = config or CompilerConfig()
        self.parser = SchemaParser(self.config)
        self.resolver = ComponentResolver(registry or {}, self.parser, self.config)
        self.compiler = SchemaCompiler(self.resolver, self.config)

    def compile(self, route: dict[str, Any] | None) -> dict[str, str]:
        """
        Compile a route into its Joi groups.

        Args:
            route: OpenAPI operation object (parameters, requestBody, operationId, description)

        Returns:
            Dict with "query", "path" and "body" keys, each present only
            when at least one field contributed

        Raises:
            MissingRouteError: If no route is given
            CompilationError: Any compilation fault; nothing is returned then
        """
        if route is None:
            raise MissingRouteError()

        parsed = self.parser.parse_route(route)

        groups = {location: "" for location in PARAMETER_GROUPS}
        for parameter in parsed.parameters:
            text = self.compiler.compile(parameter.node)
            if parameter.location in groups:
                groups[parameter.location] += text

        body = ""
        if parsed.request_body is not None:
            body = self.compiler.compile_fields(parsed.request_body)

        output = {}
        for key, fields in (("query", groups["query"]), ("path", groups["path"]), ("body", body)):
            if fields:
                output[key] = self.compiler.render_keys(fields)

        return output


def compile_route(
    route: dict[str, Any] | None,
    registry: Mapping[str, Any] | None = None,
    config: CompilerConfig | None = None,
) -> dict[str, str]:
    """Compile a single route; see RouteCompiler.compile."""
    return RouteCompiler(registry, config).compile(route)


def _merge_parameters(path_parameters: list[dict], operation_parameters: list[dict]) -> list[dict]:
    """Prepend path-level parameters the operation does not redeclare."""
    declared = {(p.get("name"), p.get("in")) for p in operation_parameters}
    inherited = [p for p in path_parameters if (p.get("name"), p.get("in")) not in declared]
    return inherited + operation_parameters


def compile_document(document: dict[str, Any], config: CompilerConfig | None = None) -> dict[str, dict[str, str]]:
    """
    Compile every operation of an in-memory OpenAPI document.

    Args:
        document: OpenAPI document with `paths` and optional `components`
        config: Compiler configuration

    Returns:
        Compiled groups keyed by operationId, or "<METHOD> <path>" when
        the operation has none
    """
    compiler = RouteCompiler(ComponentRegistry.from_components(document.get("components")), config)

    results = {}
    for path, path_item in (document.get("paths") or {}).items():
        path_parameters = path_item.get("parameters") or []
        for method in HTTP_METHODS:
            operation = path_item.get(method)
            if operation is None:
                continue

            route = dict(operation)
            route["parameters"] = _merge_parameters(path_parameters, operation.get("parameters") or [])

            key = operation.get("operationId") or f"{method.upper()} {path}"
            results[key] = compiler.compile(route)

    return results
