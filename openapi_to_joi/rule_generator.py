"""
Joi rule generator for normalized schema nodes.

This module picks the Joi rules for a node: the kind-specific chain
for primitive values and the modifier chain shared by every field.
"""

from typing import List

from .config import CompilerConfig
from .joi_rules import (
    AppendRule,
    DescriptionRule,
    EnumRule,
    FormatRule,
    IntegerRule,
    JoiRule,
    MaximumRule,
    MinimumRule,
    NumberTypeRule,
    PatternRule,
    RequiredRule,
    StringTypeRule,
)
from .schema_ast.nodes import IntegerNode, NumericNode, SchemaNode, StringNode


class RuleGenerator:
    """Generate Joi rule chains from schema nodes"""

    def __init__(self, config: CompilerConfig):
        """
        Initialize the rule generator.

        Args:
            config: Compiler configuration (for the validator name)
        """
        self.config = config

    @staticmethod
    def render(rules: List[JoiRule]) -> str:
        """Concatenate the text of a rule chain."""
        return "".join(rule.generate_code() for rule in rules)

    def string_rules(self, node: StringNode) -> List[JoiRule]:
        """Create string rules: type, format, pattern, then enum"""
        rules: List[JoiRule] = [StringTypeRule(self.config.validator_name)]

        format_rule = FormatRule.select(node.formats)
        if format_rule is not None:
            rules.append(format_rule)

        if node.pattern is not None:
            rules.append(PatternRule(node.pattern))

        if node.enum is not None:
            rules.append(EnumRule(list(node.enum)))

        return rules

    def numeric_rules(self, node: NumericNode) -> List[JoiRule]:
        """Create integer/number rules: type, minimum, then maximum"""
        rules: List[JoiRule] = [NumberTypeRule(self.config.validator_name)]

        if isinstance(node, IntegerNode):
            rules.append(IntegerRule())

        if node.minimum is not None:
            rules.append(MinimumRule(node.minimum))

        if node.maximum is not None:
            rules.append(MaximumRule(node.maximum))

        return rules

    def modifier_rules(self, node: SchemaNode, include_add: bool = True) -> List[JoiRule]:
        """
        Create the trailing modifiers shared by every field.

        Args:
            node: The field's schema node
            include_add: Whether to splice the node's literal append text

        Returns:
            Rules in fixed order: required, description, appended text
        """
        rules: List[JoiRule] = []

        if node.required:
            rules.append(RequiredRule())

        if node.description is not None:
            rules.append(DescriptionRule(node.description))

        if include_add and node.add:
            rules.append(AppendRule(node.add))

        return rules
