"""
Reference resolver for component $ref resolution.

Resolves `#/components/schemas/<Name>` paths against the registry
supplied for one compilation call.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from ..config import CompilerConfig
from ..errors import ComponentNotFoundError
from ..schema_ast.nodes import SchemaNode
from ..schema_ast.parser import SchemaParser


class ComponentRegistry(Mapping):
    """Read-only catalogue of reusable schemas, keyed by component name."""

    def __init__(self, schemas: Mapping[str, Any] | None = None):
        self._schemas = MappingProxyType(dict(schemas or {}))

    @classmethod
    def from_components(cls, components: Mapping[str, Any] | None) -> ComponentRegistry:
        """Build a registry from an OpenAPI `components` object."""
        return cls((components or {}).get("schemas") or {})

    def __getitem__(self, name: str) -> Any:
        return self._schemas[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._schemas)

    def __len__(self) -> int:
        return len(self._schemas)


class ComponentResolver:
    """Resolves $ref paths to parsed component nodes."""

    def __init__(
        self,
        registry: Mapping[str, Any],
        parser: SchemaParser | None = None,
        config: CompilerConfig | None = None,
    ):
        """
        Initialize the resolver.

        Args:
            registry: Component name to raw schema mapping
            parser: Parser used to normalize resolved components
            config: Compiler configuration (for the reference prefix)
        """
        self.config = config or CompilerConfig()
        self.registry = registry if isinstance(registry, ComponentRegistry) else ComponentRegistry(registry)
        self.parser = parser or SchemaParser(self.config)

    def component_name(self, ref_path: str) -> str:
        """Extract the component name from a reference path."""
        return ref_path.removeprefix(self.config.component_ref_prefix)

    def resolve(self, ref_path: str, name: str | None = None) -> SchemaNode:
        """
        Resolve a reference path to its component.

        Only one level is resolved; references inside the component are
        left for the compiler to follow.

        Args:
            ref_path: e.g. "#/components/schemas/User"
            name: Synthetic field name given to the resolved node

        Returns:
            The parsed component node

        Raises:
            ComponentNotFoundError: If the registry has no such component
        """
        component_name = self.component_name(ref_path)
        if component_name not in self.registry:
            raise ComponentNotFoundError(component_name)

        return self.parser.parse(self.registry[component_name], ref_path, name=name)
