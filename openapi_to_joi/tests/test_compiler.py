"""
Tests for compiling individual schema nodes.
"""

import pytest

from openapi_to_joi.analyzer import ComponentResolver
from openapi_to_joi.compiler import FIELD_SEPARATOR, SchemaCompiler
from openapi_to_joi.config import CompilerConfig
from openapi_to_joi.errors import (
    ComponentNotFoundError,
    MissingItemsError,
    MissingPropertiesError,
    UnsupportedKindError,
)
from openapi_to_joi.schema_ast import SchemaParser

REGISTRY = {
    "Point": {
        "type": "object",
        "required": ["x"],
        "properties": {"x": {"type": "string"}, "y": {"type": "integer"}},
    },
    "Empty": {"type": "object", "properties": {}},
    "Scalar": {"type": "string"},
    "PointAlias": {"$ref": "#/components/schemas/Point"},
}


def _compile(schema, registry=None, config=None):
    config = config or CompilerConfig()
    parser = SchemaParser(config)
    compiler = SchemaCompiler(ComponentResolver(registry or REGISTRY, parser, config), config)
    return compiler.compile(parser.parse(schema))


class TestPrimitiveMappers:
    def test_string(self):
        assert _compile({"name": "s", "type": "string"}) == "s: Joi.string()" + FIELD_SEPARATOR

    def test_string_checks_in_order(self):
        schema = {
            "name": "code",
            "schema": {"type": "string", "format": "hostname", "pattern": "/^[a-z.]+$/", "enum": ["a.com", "b.com"]},
        }
        assert _compile(schema) == "code: Joi.string().hostname().regex(/^[a-z.]+$/).valid('a.com', 'b.com'),\n    "

    def test_string_format_priority_across_locations(self):
        schema = {"name": "id", "format": "email", "schema": {"type": "string", "format": "uuid"}}
        assert _compile(schema).startswith("id: Joi.string().guid(),")

    def test_string_unknown_format_is_ignored(self):
        assert _compile({"name": "d", "type": "string", "format": "date-time"}) == "d: Joi.string(),\n    "

    def test_integer(self):
        schema = {"name": "page", "schema": {"type": "integer", "minimum": 0, "maximum": 100}}
        assert _compile(schema) == "page: Joi.number().integer().min(0).max(100),\n    "

    def test_number(self):
        assert _compile({"name": "ratio", "type": "number", "maximum": 1.5}) == "ratio: Joi.number().max(1.5),\n    "


class TestModifiers:
    def test_modifier_order(self):
        schema = {
            "name": "limit",
            "required": True,
            "description": "Page size",
            "x-joi-add": ".default(20)",
            "schema": {"type": "integer", "minimum": 1},
        }
        assert _compile(schema) == "limit: Joi.number().integer().min(1).required().description('Page size').default(20),\n    "

    def test_quoted_key(self):
        assert _compile({"name": "X-Api-Key", "type": "string"}).startswith("'X-Api-Key': Joi.string()")
        assert _compile({"name": "page[size]", "type": "integer"}).startswith("'page[size]': ")

    def test_replace_takes_precedence(self):
        schema = {
            "name": "code",
            "required": True,
            "description": "Code",
            "x-joi-replace": "Joi.any()",
            "x-joi-add": ".allow(null)",
            "schema": {"type": "string", "pattern": "/x/", "enum": ["x"]},
        }
        assert _compile(schema) == "code: Joi.any().required().description('Code'),\n    "

    def test_replace_without_type(self):
        assert _compile({"name": "any", "x-joi-replace": "Joi.any()"}) == "any: Joi.any(),\n    "

    def test_validator_name(self):
        config = CompilerConfig(validator_name="joi")
        assert _compile({"name": "s", "type": "string"}, config=config) == "s: joi.string(),\n    "


class TestContainerMappers:
    def test_array(self):
        schema = {"name": "tags", "required": True, "schema": {"type": "array", "items": {"type": "string", "enum": ["a", "b"]}}}
        assert _compile(schema) == "tags: Joi.array().items(\n    Joi.string().valid('a', 'b')\n).required(),\n    "

    def test_array_items_keep_their_modifiers(self):
        schema = {"name": "ids", "type": "array", "items": {"type": "integer", "description": "An id"}}
        assert _compile(schema) == "ids: Joi.array().items(\n    Joi.number().integer().description('An id')\n),\n    "

    def test_array_without_items(self):
        with pytest.raises(MissingItemsError) as exc_info:
            _compile({"name": "tags", "type": "array"})
        assert exc_info.value.field_name == "tags"

    def test_object(self):
        schema = {
            "name": "filter",
            "schema": {
                "type": "object",
                "required": ["b"],
                "properties": {"b": {"type": "string"}, "a": {"type": "integer"}, "c": {"type": "number"}},
            },
        }
        assert _compile(schema) == (
            "filter: Joi.object().keys({\n"
            "    b: Joi.string().required(),\n"
            "    a: Joi.number().integer(),\n"
            "    c: Joi.number()\n"
            "  }),\n    "
        )

    def test_object_without_properties(self):
        with pytest.raises(MissingPropertiesError):
            _compile({"name": "o", "type": "object"})
        with pytest.raises(MissingPropertiesError):
            _compile({"name": "o", "type": "object", "properties": {}})

    def test_array_of_objects(self):
        schema = {"name": "points", "type": "array", "items": {"type": "object", "properties": {"x": {"type": "number"}}}}
        assert _compile(schema) == "points: Joi.array().items(\n    Joi.object().keys({\n    x: Joi.number()\n  })\n),\n    "


class TestComponents:
    def test_reference_is_flattened(self):
        schema = {"name": "point", "required": True, "description": "ignored", "schema": {"$ref": "#/components/schemas/Point"}}
        assert _compile(schema) == "x: Joi.string().required(),\n    y: Joi.number().integer(),\n    "

    def test_reference_property_is_flattened_into_object(self):
        schema = {
            "name": "shape",
            "type": "object",
            "properties": {"label": {"type": "string"}, "origin": {"$ref": "#/components/schemas/Point"}},
        }
        assert _compile(schema) == (
            "shape: Joi.object().keys({\n"
            "    label: Joi.string(),\n"
            "    x: Joi.string().required(),\n"
            "    y: Joi.number().integer()\n"
            "  }),\n    "
        )

    def test_reference_as_array_items_gets_object_wrapper(self):
        schema = {"name": "points", "type": "array", "items": {"$ref": "#/components/schemas/Point"}}
        assert _compile(schema) == (
            "points: Joi.array().items(\n"
            "    Joi.object().keys({\n"
            "    x: Joi.string().required(),\n"
            "    y: Joi.number().integer()\n"
            "  })\n"
            "),\n    "
        )

    def test_alias_component(self):
        schema = {"name": "point", "schema": {"$ref": "#/components/schemas/PointAlias"}}
        assert _compile(schema) == "x: Joi.string().required(),\n    y: Joi.number().integer(),\n    "

    def test_missing_component(self):
        with pytest.raises(ComponentNotFoundError) as exc_info:
            _compile({"name": "p", "schema": {"$ref": "#/components/schemas/Nope"}})
        assert exc_info.value.component_name == "Nope"

    @pytest.mark.parametrize("component", ["Empty", "Scalar"])
    def test_component_without_properties(self, component):
        with pytest.raises(MissingPropertiesError) as exc_info:
            _compile({"name": "p", "schema": {"$ref": f"#/components/schemas/{component}"}})
        assert exc_info.value.field_name == component

    def test_self_reference_is_not_guarded(self):
        registry = {"Node": {"type": "object", "properties": {"child": {"$ref": "#/components/schemas/Node"}}}}
        with pytest.raises(RecursionError):
            _compile({"name": "n", "schema": {"$ref": "#/components/schemas/Node"}}, registry=registry)


class TestUnsupportedKinds:
    @pytest.mark.parametrize("kind", ["boolean", "file", None])
    def test_unsupported_kind(self, kind):
        schema = {"name": "flag"}
        if kind is not None:
            schema["schema"] = {"type": kind}
        with pytest.raises(UnsupportedKindError) as exc_info:
            _compile(schema)
        assert exc_info.value.field_name == "flag"
        assert exc_info.value.kind == kind
        assert "flag" in str(exc_info.value)
