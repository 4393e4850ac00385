"""Prompt/response session for computing one integral at a terminal."""

from __future__ import annotations

import sys
from typing import Any, Callable, Optional, TextIO

from integrator.engine import Calculator
from integrator.tools.integrands import builtin_integrands, select_integrand

BANNER = "Simpson's Rule Numerical Integration"


def _prompt(read: Callable[[str], str], prompt: str, label: str) -> str:
    try:
        return read(prompt).strip()
    except EOFError as exc:
        raise ValueError("Input ended before the {} was entered".format(label)) from exc


def _read_number(prompt: str, read: Callable[[str], str], cast: Callable[[str], Any], label: str) -> Any:
    raw = _prompt(read, prompt, label)
    try:
        return cast(raw)
    except ValueError as exc:
        raise ValueError("Invalid {}: '{}'".format(label, raw)) from exc


def run_interactive(
    calculator: Calculator,
    input_fn: Optional[Callable[[str], str]] = None,
    output: Optional[TextIO] = None,
) -> float:
    """Asks for the limits, sub-interval count and integrand, then integrates.

    Args:
        calculator: Calculator holding the quadrature rule to use.
        input_fn: Line reader, ``input`` by default.
        output: Stream for the banner and menu, stdout by default.

    Returns:
        Integral value.

    Raises:
        ValueError: On unparsable numbers, invalid limits or count, an
            unknown function choice, or input that ends early.
    """
    read = input_fn or input
    out = output or sys.stdout
    out.write(BANNER + "\n")
    out.write("-" * len(BANNER) + "\n")

    lower = _read_number("Enter lower limit (a): ", read, float, "lower limit")
    upper = _read_number("Enter upper limit (b): ", read, float, "upper limit")
    count = _read_number("Enter number of sub-intervals (must be even): ", read, int, "number of sub-intervals")

    out.write("Choose function to integrate:\n")
    integrands = builtin_integrands()
    for key, item in integrands.items():
        out.write("{}. {}\n".format(key, item.label))
    out.flush()
    choice = _prompt(read, "Enter choice ({}): ".format("/".join(integrands)), "function choice")

    integrand = select_integrand(choice)
    return calculator.calculate(integrand.func, lower, upper, count)
