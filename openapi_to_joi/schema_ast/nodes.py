"""
AST node definitions for OpenAPI schemas.

These nodes are the normalized form of a parameter, property or request
body schema: facets that OpenAPI allows either directly on a parameter or
nested under its `schema` key are already merged, so the compiler only
looks in one place. Nodes are frozen and never modified after parsing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SchemaNode:
    """Base class for all AST nodes."""

    # Field name used as the object key (None for array items)
    name: str | None = None

    # Cross-cutting modifiers
    required: bool = False
    description: str | None = None

    # Verbatim Joi text from the extension fields (never escaped)
    add: str | None = None
    replace: str | None = None

    # Original location in the route document (for error messages)
    source_path: str = ""


@dataclass(frozen=True)
class StringNode(SchemaNode):
    """Represents a string value."""

    # Formats found on the node and in its nested schema, in that order
    formats: tuple[str, ...] = ()
    pattern: str | None = None
    enum: tuple[Any, ...] | None = None


@dataclass(frozen=True)
class NumericNode(SchemaNode):
    """Base class for integer and number values."""

    minimum: float | None = None
    maximum: float | None = None


@dataclass(frozen=True)
class IntegerNode(NumericNode):
    """Represents an integer value."""


@dataclass(frozen=True)
class NumberNode(NumericNode):
    """Represents a number value."""


@dataclass(frozen=True)
class ArrayNode(SchemaNode):
    """Represents an array value."""

    items: SchemaNode | None = None


@dataclass(frozen=True)
class ObjectNode(SchemaNode):
    """Represents an object with properties, in declaration order."""

    properties: tuple[SchemaNode, ...] | None = None


@dataclass(frozen=True)
class RefNode(SchemaNode):
    """Represents an unresolved component reference."""

    ref_path: str = ""  # e.g., "#/components/schemas/User"

    # Synthetic field name given to the resolved component
    operation_id: str | None = None


@dataclass(frozen=True)
class UnknownNode(SchemaNode):
    """Represents a schema whose type is missing or not supported."""

    kind: Any = None


@dataclass(frozen=True)
class Parameter:
    """A route parameter: a schema node tagged with its location."""

    location: str | None = None  # "path", "query", "header", ...
    node: SchemaNode | None = None


@dataclass(frozen=True)
class Route:
    """A parsed route: ordered parameters plus an optional JSON body."""

    parameters: tuple[Parameter, ...] = field(default_factory=tuple)
    request_body: SchemaNode | None = None
    operation_id: str | None = None
    description: str | None = None
