"""
Schema compiler: turns normalized schema nodes into Joi source text.

Keyed fields are emitted as `key: <expression>` followed by
FIELD_SEPARATOR; object wrappers trim the last separator before closing.
"""

from __future__ import annotations

from pathlib import Path

import jinja2

from .analyzer.reference_resolver import ComponentResolver
from .config import CompilerConfig
from .errors import MissingItemsError, MissingPropertiesError, UnsupportedKindError
from .rule_generator import RuleGenerator
from .schema_ast.nodes import (
    ArrayNode,
    IntegerNode,
    NumberNode,
    ObjectNode,
    RefNode,
    SchemaNode,
    StringNode,
)
from .utils import quote_key

FIELD_SEPARATOR = ",\n    "


class SchemaCompiler:
    """Compiles schema nodes into Joi expressions."""

    def __init__(self, resolver: ComponentResolver, config: CompilerConfig | None = None):
        """
        Initialize the compiler.

        Args:
            resolver: Resolver for component references, scoped to one call
            config: Compiler configuration
        """
        self.config = config or CompilerConfig()
        self.resolver = resolver
        self.rules = RuleGenerator(self.config)
        self._mappers = {
            StringNode: self._map_string,
            IntegerNode: self._map_numeric,
            NumberNode: self._map_numeric,
            ArrayNode: self._map_array,
            ObjectNode: self._map_object,
        }
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent / "templates"
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
        )
        self.keys_template = self.jinja_env.get_template("keys.js.jinja2")
        self.array_template = self.jinja_env.get_template("array.js.jinja2")

    def render_keys(self, fields: str) -> str:
        """Wrap accumulated keyed fields in an object expression."""
        return self.keys_template.render(
            validator=self.config.validator_name,
            fields=fields.removesuffix(FIELD_SEPARATOR),
        )

    def compile(self, node: SchemaNode) -> str:
        """
        Compile a node as keyed field text.

        A reference compiles to the resolved component's fields, flattened
        as siblings; anything else compiles to a single field.

        Returns:
            Field text, each field terminated by FIELD_SEPARATOR
        """
        if isinstance(node, RefNode):
            return self.compile_component(node)
        return self.key_text(node, self.compile_value(node))

    def compile_fields(self, node: SchemaNode) -> str:
        """
        Compile a node whose properties become the enclosing group's fields.

        References and plain objects are flattened; other nodes compile as
        a single keyed field.
        """
        if isinstance(node, ObjectNode) and node.replace is None:
            return self._compile_properties(node)
        return self.compile(node)

    def compile_value(self, node: SchemaNode) -> str:
        """
        Compile a node as an unkeyed expression (definition plus modifiers).

        Raises:
            UnsupportedKindError: If the node's kind has no mapper
        """
        # No enclosing object to flatten into, so the component gets its own wrapper
        if isinstance(node, RefNode):
            return self.render_keys(self.compile_component(node))

        if node.replace is not None:
            return node.replace + self.rules.render(self.rules.modifier_rules(node, include_add=False))

        mapper = self._mappers.get(type(node))
        if mapper is None:
            raise UnsupportedKindError(node.name, getattr(node, "kind", None))

        return mapper(node) + self.rules.render(self.rules.modifier_rules(node))

    def compile_component(self, node: RefNode) -> str:
        """
        Resolve a reference and compile the component's properties inline.

        The referencing node's own modifiers are not applied.

        Raises:
            ComponentNotFoundError: If the reference does not resolve
            MissingPropertiesError: If the component has no properties
        """
        component = self.resolver.resolve(node.ref_path, name=node.operation_id)

        if isinstance(component, RefNode):
            return self.compile_component(component)
        if not isinstance(component, ObjectNode) or not component.properties:
            raise MissingPropertiesError(self.resolver.component_name(node.ref_path))

        return "".join(self.compile(prop) for prop in component.properties)

    def key_text(self, node: SchemaNode, expression: str) -> str:
        """Emit `key: expression` followed by the field separator."""
        return f"{quote_key(node.name)}: {expression}{FIELD_SEPARATOR}"

    def _compile_properties(self, node: ObjectNode) -> str:
        if not node.properties:
            raise MissingPropertiesError(node.name)
        return "".join(self.compile(prop) for prop in node.properties)

    def _map_string(self, node: StringNode) -> str:
        return self.rules.render(self.rules.string_rules(node))

    def _map_numeric(self, node: IntegerNode | NumberNode) -> str:
        return self.rules.render(self.rules.numeric_rules(node))

    def _map_array(self, node: ArrayNode) -> str:
        if node.items is None:
            raise MissingItemsError(node.name)
        return self.array_template.render(
            validator=self.config.validator_name,
            items=self.compile_value(node.items),
        )

    def _map_object(self, node: ObjectNode) -> str:
        return self.render_keys(self._compile_properties(node))
