"""Integrand helpers and expression-level tools."""

from .calculator import numerical_integration
from .integrands import (
    Integrand,
    InvalidSelectionError,
    builtin_integrands,
    compile_expression,
    select_integrand,
)
from .utils import (
    INTEGRAND_CONSTANTS,
    INTEGRAND_FUNCTIONS,
    SanitizationError,
    normalize_math_text,
    sanitize_integrand,
)

__all__ = [
    "numerical_integration",
    "Integrand",
    "InvalidSelectionError",
    "builtin_integrands",
    "compile_expression",
    "select_integrand",
    "INTEGRAND_CONSTANTS",
    "INTEGRAND_FUNCTIONS",
    "SanitizationError",
    "normalize_math_text",
    "sanitize_integrand",
]
