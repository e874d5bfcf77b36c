"""
Schema AST module.

Contains the AST node definitions and the parser that normalizes raw
OpenAPI dictionaries into them.
"""

from __future__ import annotations

from .nodes import (
    ArrayNode,
    IntegerNode,
    NumberNode,
    NumericNode,
    ObjectNode,
    Parameter,
    RefNode,
    Route,
    SchemaNode,
    StringNode,
    UnknownNode,
)
from .parser import SchemaParser

__all__ = [
    "SchemaNode",
    "StringNode",
    "NumericNode",
    "IntegerNode",
    "NumberNode",
    "ArrayNode",
    "ObjectNode",
    "RefNode",
    "UnknownNode",
    "Parameter",
    "Route",
    "SchemaParser",
]
