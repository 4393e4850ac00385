"""Expression-level integration tool returning result envelopes."""

from __future__ import annotations

from typing import Any, Dict

from integrator.engine import Calculator

from .integrands import compile_expression


def _ok(result: Any, method: str, **metadata: Any) -> Dict[str, Any]:
    return {"ok": True, "result": result, "method": method, "metadata": metadata}


def _error(message: str, method: str, **metadata: Any) -> Dict[str, Any]:
    return {"ok": False, "error": message, "method": method, "metadata": metadata}


def numerical_integration(
    expression: str,
    variable: str = "x",
    lower: float = 0.0,
    upper: float = 1.0,
    steps: int = 1000,
    method: str = "simpson",
) -> Dict[str, Any]:
    try:
        func = compile_expression(expression, variable)
        calculator = Calculator.for_method(method)
        result = calculator.calculate(func, lower, upper, steps)
        return _ok(result, calculator.engine.name, lower=lower, upper=upper, steps=steps, variable=variable)
    except Exception as exc:
        return _error(str(exc), "numerical_integration", expression=expression, requested_method=method)
