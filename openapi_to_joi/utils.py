"""
Utility functions for rendering Joi source text.
"""

import re
from decimal import Decimal

# Keys made only of these characters are valid bare object keys
_SIMPLE_KEY_PATTERN = re.compile(r"[A-Za-z0-9_]+")


def is_simple_key(name: str) -> bool:
    """Check whether a field name can be emitted without quotes."""
    return _SIMPLE_KEY_PATTERN.fullmatch(name) is not None


def quote_key(name: str | None) -> str:
    """Render a field name as an object key.

    Examples:
        "user_id" -> "user_id"
        "X-Request-Id" -> "'X-Request-Id'"
        "page[size]" -> "'page[size]'"

    Args:
        name: The field name

    Returns:
        The name, single-quoted unless it is a plain identifier
    """
    name = name or ""
    return name if is_simple_key(name) else f"'{name}'"


def js_literal(value) -> str:
    """Render a JSON value the way JavaScript prints it in a template string.

    Examples:
        True -> "true"
        None -> "null"
        1.0 -> "1"
        2.5 -> "2.5"
        1e-05 -> "0.00001"
        1e-07 -> "1e-7"
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, int) and abs(value) < 1e21:
        return str(value)
    if isinstance(value, (int, float)):
        return _js_number(float(value))
    return str(value)


def _js_number(value: float) -> str:
    """Number.prototype.toString: plain decimals between 1e-6 and 1e21, exponents outside."""
    if value != value:
        return "NaN"
    if value in (float("inf"), float("-inf")):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if 1e-6 <= abs(value) < 1e21:
        text = format(Decimal(repr(value)), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text
    mantissa, _, exponent = repr(value).partition("e")
    mantissa = mantissa.removesuffix(".0")
    sign = "-" if int(exponent) < 0 else "+"
    return f"{mantissa}e{sign}{abs(int(exponent))}"
