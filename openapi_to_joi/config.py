"""
Configuration for the route compiler.

Names the target validator object and the OpenAPI conventions the
compiler recognises (component prefix, JSON content type, extension keys).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CompilerConfig:
    """Configuration options for rule compilation."""

    # Identifier the generated expressions are built on
    validator_name: str = "Joi"

    # Prefix stripped from $ref paths before the registry lookup
    component_ref_prefix: str = "#/components/schemas/"

    # Request body content type whose schema is compiled
    json_content_type: str = "application/json"

    # Extension holding text appended verbatim after the modifiers
    add_extension: str = "x-joi-add"

    # Extension holding text that replaces the whole type expression
    replace_extension: str = "x-joi-replace"

    @staticmethod
    def from_dict(d: dict) -> CompilerConfig:
        """Create a config from a dictionary."""
        config = CompilerConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "validator_name": self.validator_name,
            "component_ref_prefix": self.component_ref_prefix,
            "json_content_type": self.json_content_type,
            "add_extension": self.add_extension,
            "replace_extension": self.replace_extension,
        }
