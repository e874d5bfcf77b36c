"""
Joi rule objects that generate validation-rule text.

Each rule represents one method call in a Joi chain (a base type
constructor, a constraint check or a modifier) and renders it from the
string templates in joi_rules.json.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

from .utils import js_literal


class JoiRule(ABC):
    """Base class for all Joi rules"""

    # Class-level cache for loaded string templates
    _string_templates: Optional[Dict[str, Dict[str, Any]]] = None

    @classmethod
    def _load_string_templates(cls) -> Dict[str, Dict[str, Any]]:
        """
        Load string templates from the JSON file shipped with the package.
        Results are cached to avoid repeated file I/O.

        Returns:
            Dictionary of string templates for all rules
        """
        if JoiRule._string_templates is None:
            template_file = Path(__file__).parent / "joi_rules.json"
            with open(template_file, "r", encoding="utf-8") as f:
                JoiRule._string_templates = json.load(f)
        return JoiRule._string_templates

    def get_string(self, key: str, **format_params) -> Any:
        """
        Get a string template for this rule and format it.

        Args:
            key: The string key to retrieve (e.g., 'expression')
            **format_params: Parameters to format into the string template

        Returns:
            Formatted string, or the raw value for non-string entries
        """
        templates = self._load_string_templates()
        class_name = self.__class__.__name__

        if class_name not in templates:
            raise KeyError(f"No string templates found for {class_name}")

        rule_templates = templates[class_name]

        if key not in rule_templates:
            raise KeyError(f"Key '{key}' not found in templates for {class_name}")

        template = rule_templates[key]
        if isinstance(template, str):
            return template.format(**format_params)
        return template

    @abstractmethod
    def get_template_params(self) -> Dict[str, Any]:
        """
        Get rule-specific parameters for template formatting.

        Returns:
            Dictionary with parameters needed by the expression template
        """
        pass

    def generate_code(self) -> str:
        """Generate the Joi text for this rule."""
        return self.get_string("expression", **self.get_template_params())


class StringTypeRule(JoiRule):
    """Base constructor for string values"""

    def __init__(self, validator: str):
        self.validator = validator

    def get_template_params(self) -> Dict[str, Any]:
        return {"validator": self.validator}


class NumberTypeRule(JoiRule):
    """Base constructor for integer and number values"""

    def __init__(self, validator: str):
        self.validator = validator

    def get_template_params(self) -> Dict[str, Any]:
        return {"validator": self.validator}


class IntegerRule(JoiRule):
    """Restricts a number to integers"""

    def get_template_params(self) -> Dict[str, Any]:
        return {}


class FormatRule(JoiRule):
    """Validates a string format; only the highest-priority known format applies"""

    # Highest priority first
    PRIORITY = ("uuid", "email", "uri", "hostname")

    def __init__(self, string_format: str):
        self.string_format = string_format

    @classmethod
    def select(cls, formats) -> Optional["FormatRule"]:
        """Pick the rule for the highest-priority format among `formats`."""
        for string_format in cls.PRIORITY:
            if string_format in formats:
                return cls(string_format)
        return None

    def get_template_params(self) -> Dict[str, Any]:
        return {"method": self.get_string("methods")[self.string_format]}


class PatternRule(JoiRule):
    """Validates that a string matches a regex; the pattern is a JS regex literal"""

    def __init__(self, pattern: str):
        self.pattern = pattern

    def get_template_params(self) -> Dict[str, Any]:
        return {"pattern": self.pattern}


class EnumRule(JoiRule):
    """Validates that a value is one of an allow-list"""

    def __init__(self, enum_values: List[Any]):
        self.enum_values = enum_values

    def get_template_params(self) -> Dict[str, Any]:
        # Array.prototype.join renders null as an empty string
        values = "', '".join("" if v is None else js_literal(v) for v in self.enum_values)
        return {"values": f"'{values}'"}


class MinimumRule(JoiRule):
    """Validates minimum numeric value"""

    def __init__(self, minimum: float):
        self.minimum = minimum

    def get_template_params(self) -> Dict[str, Any]:
        return {"minimum": js_literal(self.minimum)}


class MaximumRule(JoiRule):
    """Validates maximum numeric value"""

    def __init__(self, maximum: float):
        self.maximum = maximum

    def get_template_params(self) -> Dict[str, Any]:
        return {"maximum": js_literal(self.maximum)}


class RequiredRule(JoiRule):
    """Marks a field as required"""

    def get_template_params(self) -> Dict[str, Any]:
        return {}


class DescriptionRule(JoiRule):
    """Attaches a description; the text is inserted without escaping"""

    def __init__(self, description: str):
        self.description = description

    def get_template_params(self) -> Dict[str, Any]:
        return {"description": self.description}


class AppendRule(JoiRule):
    """Splices caller-supplied Joi text verbatim, with no escaping or validation"""

    def __init__(self, text: str):
        self.text = text

    def get_template_params(self) -> Dict[str, Any]:
        return {"text": self.text}
