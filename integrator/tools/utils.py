"""Input rules for integrand expressions compiled against the ``math`` module."""

from __future__ import annotations

import keyword
import re

# Function names that sympy parses and that lambdify's ``math`` backend can print.
INTEGRAND_FUNCTIONS = frozenset(
    {"sin", "cos", "tan", "asin", "acos", "atan", "sinh", "cosh", "tanh", "exp", "log", "sqrt", "abs"}
)
INTEGRAND_CONSTANTS = frozenset({"e", "pi"})

_ALLOWED_CHARS = re.compile(r"^[A-Za-z0-9_+\-*/^().,\s]+$")
_NAME = re.compile(r"(?<![\w.])([A-Za-z_]\w*)(\s*\()?")

_SYMBOL_TABLE = str.maketrans(
    {
        "−": "-",
        "–": "-",
        "—": "-",
        "×": "*",
        "·": "*",
        "∙": "*",
        "÷": "/",
        "⁄": "/",
    }
)

_SUPERSCRIPTS = {
    "⁰": "0",
    "¹": "1",
    "²": "2",
    "³": "3",
    "⁴": "4",
    "⁵": "5",
    "⁶": "6",
    "⁷": "7",
    "⁸": "8",
    "⁹": "9",
    "⁺": "+",
    "⁻": "-",
}
_SUPERSCRIPT_RUN = re.compile("[{}]+".format(re.escape("".join(_SUPERSCRIPTS))))


class SanitizationError(ValueError):
    """Raised when an input expression does not pass validation."""


def normalize_math_text(expression: str) -> str:
    """Maps typographic operators to ASCII and ``x³`` to ``x^3``."""
    text = expression.strip().translate(_SYMBOL_TABLE)
    return _SUPERSCRIPT_RUN.sub(lambda match: "^" + "".join(_SUPERSCRIPTS[c] for c in match.group()), text)


def check_variable_name(variable: str) -> str:
    if not variable.isidentifier() or keyword.iskeyword(variable):
        raise SanitizationError("Invalid variable name '{}'.".format(variable))
    if variable in INTEGRAND_FUNCTIONS or variable in INTEGRAND_CONSTANTS:
        raise SanitizationError("Variable name '{}' is reserved.".format(variable))
    return variable


def sanitize_integrand(expression: str, variable: str = "x", max_length: int = 400) -> str:
    """Normalizes an integrand and checks every name it references.

    Calls are limited to ``INTEGRAND_FUNCTIONS``; bare names must be the
    integration variable or one of ``INTEGRAND_CONSTANTS``.

    Args:
        expression: Raw integrand text.
        variable: Name of the integration variable.
        max_length: Upper bound on the normalized length.

    Returns:
        Normalized expression text.

    Raises:
        SanitizationError: If the text is empty, too long, uses unsupported
            characters, calls a function outside the allow-list or references
            an unknown symbol.
    """
    check_variable_name(variable)
    normalized = normalize_math_text(expression)
    if not normalized:
        raise SanitizationError("Expression cannot be empty.")
    if len(normalized) > max_length:
        raise SanitizationError("Expression exceeds max length of {} characters.".format(max_length))
    if not _ALLOWED_CHARS.match(normalized):
        raise SanitizationError("Expression contains unsupported characters.")

    unknown = set()
    for match in _NAME.finditer(normalized):
        name, is_call = match.group(1), match.group(2)
        if is_call:
            if name not in INTEGRAND_FUNCTIONS:
                raise SanitizationError(
                    "Function '{}' is not allowed. Allowed: {}".format(name, ", ".join(sorted(INTEGRAND_FUNCTIONS)))
                )
        elif name != variable and name not in INTEGRAND_CONSTANTS:
            unknown.add(name)

    if unknown:
        raise SanitizationError("Unknown symbol(s) in expression: {}".format(", ".join(sorted(unknown))))

    return normalized
