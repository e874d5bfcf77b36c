"""
OpenAPI schema parser that builds an AST.

Normalizes raw route dictionaries into Schema Nodes without resolving
component references. OpenAPI parameters may carry their type facets
directly or nested under a `schema` key; both locations are merged here
so the compiler only reads the normalized node.
"""

from __future__ import annotations

from typing import Any

from ..config import CompilerConfig
from .nodes import (
    ArrayNode,
    IntegerNode,
    NumberNode,
    ObjectNode,
    Parameter,
    RefNode,
    Route,
    SchemaNode,
    StringNode,
    UnknownNode,
)


class SchemaParser:
    """Parses OpenAPI routes and schemas into an AST."""

    def __init__(self, config: CompilerConfig | None = None):
        self.config = config or CompilerConfig()

    def parse_route(self, route: dict[str, Any]) -> Route:
        """
        Parse a route (an OpenAPI operation object).

        Args:
            route: The operation dictionary

        Returns:
            Route with parameters in declaration order and the JSON body, if any
        """
        parameters = tuple(
            self.parse_parameter(parameter, f"#/parameters/{i}") for i, parameter in enumerate(route.get("parameters") or [])
        )

        return Route(
            parameters=parameters,
            request_body=self.parse_request_body(route),
            operation_id=route.get("operationId"),
            description=route.get("description"),
        )

    def parse_parameter(self, parameter: dict[str, Any], path: str) -> Parameter:
        """Parse a parameter object, keeping its `in` location."""
        return Parameter(
            location=parameter.get("in"),
            node=self.parse(parameter, path),
        )

    def parse_request_body(self, route: dict[str, Any]) -> SchemaNode | None:
        """
        Parse the JSON branch of a route's request body.

        Any other content type is ignored, so a body without a JSON
        branch yields None.
        """
        request_body = route.get("requestBody")
        if not request_body:
            return None

        content_type = self.config.json_content_type
        media = (request_body.get("content") or {}).get(content_type)
        if media is None:
            return None

        operation_id = route.get("operationId")
        raw = {**media, "operationId": operation_id}
        if "description" in route:
            raw["description"] = route["description"]

        return self.parse(raw, f"#/requestBody/content/{content_type}", name=operation_id or "body")

    def parse(
        self,
        schema: dict[str, Any],
        path: str = "#",
        name: str | None = None,
        required_by_parent: bool = False,
    ) -> SchemaNode:
        """
        Parse a schema node recursively.

        Args:
            schema: The raw parameter, property or schema dictionary
            path: Current path in the route (for error messages)
            name: Field name; defaults to the schema's own `name`
            required_by_parent: Whether the enclosing object lists this field as required

        Returns:
            Appropriate SchemaNode subclass
        """
        nested = schema.get("schema")
        if not isinstance(nested, dict):
            nested = {}

        # Direct facets win over nested ones
        facets = {**nested, **{k: v for k, v in schema.items() if k != "schema"}}

        common = {
            "name": name if name is not None else schema.get("name"),
            "required": facets.get("required") is True or required_by_parent,
            "description": facets.get("description"),
            "add": facets.get(self.config.add_extension),
            "replace": facets.get(self.config.replace_extension),
            "source_path": path,
        }

        # Handle $ref
        ref_path = nested.get("$ref", schema.get("$ref"))
        if ref_path is not None:
            return RefNode(ref_path=ref_path, operation_id=schema.get("operationId"), **common)

        # The nested schema decides the type
        kind = nested["type"] if "type" in nested else schema.get("type")
        if kind is None and "properties" in facets:
            kind = "object"

        if kind == "string":
            return self._parse_string_node(schema, nested, facets, common)
        if kind == "integer":
            return IntegerNode(minimum=facets.get("minimum"), maximum=facets.get("maximum"), **common)
        if kind == "number":
            return NumberNode(minimum=facets.get("minimum"), maximum=facets.get("maximum"), **common)
        if kind == "array":
            return self._parse_array_node(facets, path, common)
        if kind == "object":
            return self._parse_object_node(schema, nested, facets, path, common)

        return UnknownNode(kind=kind, **common)

    def _parse_string_node(
        self,
        schema: dict[str, Any],
        nested: dict[str, Any],
        facets: dict[str, Any],
        common: dict[str, Any],
    ) -> StringNode:
        """Parse a string node, collecting formats from both locations."""
        formats = tuple(f for f in (schema.get("format"), nested.get("format")) if f)
        enum = facets.get("enum")

        return StringNode(
            formats=formats,
            pattern=facets.get("pattern"),
            enum=tuple(enum) if enum is not None else None,
            **common,
        )

    def _parse_array_node(self, facets: dict[str, Any], path: str, common: dict[str, Any]) -> ArrayNode:
        """Parse an array node; a missing items schema is reported by the compiler."""
        items_schema = facets.get("items")
        items = None
        if items_schema is not None:
            items = self.parse(items_schema, f"{path}/items")

        return ArrayNode(items=items, **common)

    def _parse_object_node(
        self,
        schema: dict[str, Any],
        nested: dict[str, Any],
        facets: dict[str, Any],
        path: str,
        common: dict[str, Any],
    ) -> ObjectNode:
        """Parse an object node with its properties in declaration order."""
        properties_schema = facets.get("properties")
        if properties_schema is None:
            return ObjectNode(**common)

        # A parameter's own `required: true` shadows the nested list
        required_fields = next(
            (r for r in (schema.get("required"), nested.get("required")) if isinstance(r, list)),
            [],
        )

        properties = tuple(
            self.parse(
                prop_schema,
                f"{path}/properties/{prop_name}",
                name=prop_name,
                required_by_parent=prop_name in required_fields,
            )
            for prop_name, prop_schema in properties_schema.items()
        )

        return ObjectNode(properties=properties, **common)
