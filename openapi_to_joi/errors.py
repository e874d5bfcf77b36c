"""
Errors raised while compiling routes into validation rules.

Every fault is fatal to the current compilation: nothing is returned
for a route once one of these is raised.
"""

from __future__ import annotations


class CompilationError(Exception):
    """Base class for all compilation failures."""

    pass


class MissingRouteError(CompilationError):
    """Raised when no route is passed to the compiler."""

    def __init__(self):
        super().__init__("No route was passed.")


class MissingItemsError(CompilationError):
    """Raised when an array schema has no items definition."""

    def __init__(self, field_name: str | None):
        self.field_name = field_name
        super().__init__(f"Array definition of '{field_name}' doesn't have items.")


class MissingPropertiesError(CompilationError):
    """Raised when an object schema or a component has no properties."""

    def __init__(self, field_name: str | None):
        self.field_name = field_name
        super().__init__(f"Object definition of '{field_name}' doesn't have properties.")


class ComponentNotFoundError(CompilationError):
    """Raised when a $ref points to a component missing from the registry."""

    def __init__(self, component_name: str):
        self.component_name = component_name
        super().__init__(f"Component {component_name} not found.")


class UnsupportedKindError(CompilationError):
    """Raised when a schema has a type the compiler cannot map."""

    def __init__(self, field_name: str | None, kind):
        self.field_name = field_name
        self.kind = kind
        super().__init__(f"Unexpected parameter type {kind} in parameter named {field_name}.")
