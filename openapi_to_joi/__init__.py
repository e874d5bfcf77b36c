"""OpenAPI to Joi compiler

A Python package for compiling OpenAPI route descriptions (path and
query parameters plus the JSON request body) into Joi validation-rule
expressions, resolving component references against a registry.
"""

__version__ = "1.0.0"

from .analyzer import ComponentRegistry, ComponentResolver
from .compiler import SchemaCompiler
from .config import CompilerConfig
from .errors import (
    CompilationError,
    ComponentNotFoundError,
    MissingItemsError,
    MissingPropertiesError,
    MissingRouteError,
    UnsupportedKindError,
)
from .route_compiler import RouteCompiler, compile_document, compile_route

__all__ = [
    "compile_route",
    "compile_document",
    "RouteCompiler",
    "SchemaCompiler",
    "ComponentRegistry",
    "ComponentResolver",
    "CompilerConfig",
    "CompilationError",
    "MissingRouteError",
    "MissingItemsError",
    "MissingPropertiesError",
    "ComponentNotFoundError",
    "UnsupportedKindError",
]
