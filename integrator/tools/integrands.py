"""Built-in integrands and compilation of user-supplied expressions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict

import sympy as sp

from .utils import SanitizationError, sanitize_integrand

_SYMPY_CONSTANTS = {"e": sp.E, "pi": sp.pi}


class InvalidSelectionError(ValueError):
    """Raised when an unknown built-in integrand is requested."""


@dataclass(frozen=True)
class Integrand:
    key: str
    label: str
    func: Callable[[float], float]


def cubic_exp_ratio(x: float) -> float:
    return math.pow(x, 3.0) * math.exp(-x) / (x + 1.0)


def reciprocal(x: float) -> float:
    return 1.0 / x


_BUILTINS = (
    Integrand("1", "f(x) = x³ * e^(-x) / (x+1)", cubic_exp_ratio),
    Integrand("2", "f(x) = 1/x", reciprocal),
)


def builtin_integrands() -> Dict[str, Integrand]:
    """Returns the selectable integrands keyed by menu choice, in menu order."""
    return {item.key: item for item in _BUILTINS}


def select_integrand(choice: str) -> Integrand:
    key = str(choice).strip()
    integrands = builtin_integrands()
    if key not in integrands:
        raise InvalidSelectionError(
            "Invalid function choice '{}'. Expected one of: {}".format(choice, ", ".join(integrands))
        )
    return integrands[key]


def compile_expression(expression: str, variable: str = "x") -> Callable[[float], float]:
    """Turns an expression such as ``"x^2 * exp(-x)"`` into a float callable.

    Args:
        expression: Math expression in one variable; ``^`` means power and
            ``e``/``pi`` are the usual constants.
        variable: Name of the integration variable.

    Returns:
        Function evaluating the expression with the ``math`` module. It raises
        ``ValueError`` where the expression has no real value.

    Raises:
        SanitizationError: If the text is unsafe, unparsable, calls an
            unsupported function or references symbols other than ``variable``.
    """
    sanitized = sanitize_integrand(expression, variable)
    symbol = sp.Symbol(variable)
    local_names = dict(_SYMPY_CONSTANTS)
    local_names[variable] = symbol

    try:
        parsed = sp.sympify(sanitized.replace("^", "**"), locals=local_names)
    except (sp.SympifyError, SyntaxError, TypeError) as exc:
        raise SanitizationError("Could not parse expression '{}': {}".format(expression, exc)) from exc

    if not isinstance(parsed, sp.Expr):
        raise SanitizationError("Expression '{}' is not a scalar function.".format(expression))

    compiled = sp.lambdify(symbol, parsed, modules="math")

    def integrand(x: float) -> float:
        value = compiled(x)
        if isinstance(value, complex):
            raise ValueError("Expression '{}' has no real value at {}={!r}".format(expression, variable, x))
        return float(value)

    return integrand
