"""Command line entrypoint for the integrator."""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from integrator.engine import Calculator, available_engines
from integrator.tools.integrands import builtin_integrands, compile_expression, select_integrand
from integrator.ui import run_interactive
from integrator.utils import ConfigError, IntegratorConfig, resolve_integrator_config
from integrator.utils.logger import LOG_LEVELS, configure_logging, get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Builds CLI argument parser.

    Returns:
        Configured argument parser.
    """
    menu = "; ".join("{}: {}".format(key, item.label) for key, item in builtin_integrands().items())
    parser = argparse.ArgumentParser(description="Definite integrals by composite quadrature")
    parser.add_argument("--lower", type=float, default=None, help="Lower limit (a)")
    parser.add_argument("--upper", type=float, default=None, help="Upper limit (b)")
    parser.add_argument("--count", type=int, default=None, help="Number of sub-intervals (positive, even)")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--function", type=str, default=None, help="Built-in integrand ({})".format(menu))
    source.add_argument("--expression", type=str, default=None, help="Integrand expression, e.g. 'x^2 * exp(-x)'")
    parser.add_argument("--variable", type=str, default="x", help="Variable used in --expression")
    parser.add_argument("--method", choices=available_engines(), default=None)
    parser.add_argument("--interactive", action="store_true", help="Prompt for every input")
    parser.add_argument("--json", action="store_true", help="Print a JSON document instead of text")
    parser.add_argument("--config", type=str, default="", help="YAML file with defaults")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=None)
    return parser


def run_cli(
    lower: Optional[float],
    upper: Optional[float],
    count: int,
    method: str,
    function: Optional[str] = None,
    expression: Optional[str] = None,
    variable: str = "x",
    as_json: bool = False,
) -> int:
    """Computes one integral from command line values and prints it.

    Args:
        lower: Lower limit.
        upper: Upper limit.
        count: Number of sub-intervals.
        method: Registered quadrature method name.
        function: Built-in integrand key, used when no expression is given.
        expression: Free-form integrand expression.
        variable: Variable name inside ``expression``.
        as_json: Print a JSON document instead of the text line.

    Returns:
        Process exit code.

    Raises:
        ValueError: If limits are missing or any input is rejected.
    """
    if lower is None or upper is None:
        raise ValueError("--lower and --upper are required unless --interactive is used")

    if expression:
        func = compile_expression(expression, variable)
        label = expression
    else:
        integrand = select_integrand(function or "1")
        func = integrand.func
        label = integrand.label

    calculator = Calculator.for_method(method)
    result = calculator.calculate(func, lower, upper, count)
    logger.info("integration_completed method=%s count=%s function=%s", method, count, label)

    if as_json:
        print(
            json.dumps(
                {
                    "function": label,
                    "method": calculator.engine.name,
                    "lower": lower,
                    "upper": upper,
                    "count": count,
                    "result": result,
                },
                ensure_ascii=True,
                indent=2,
            )
        )
    else:
        print("Numerical Integration Result: {}".format(result))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Application entrypoint.

    Rejected input never escapes as a traceback: the message is printed to
    stderr and the exit code is 1.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config: IntegratorConfig = resolve_integrator_config(args.config)
    except ConfigError as exc:
        print("Error: {}".format(exc), file=sys.stderr)
        return 1

    configure_logging(args.log_level or config.log_level)
    method = args.method or config.defaults.method
    count = args.count if args.count is not None else config.defaults.count

    try:
        if args.interactive:
            result = run_interactive(Calculator.for_method(method))
            print("Numerical Integration Result: {}".format(result))
            return 0
        return run_cli(
            lower=args.lower,
            upper=args.upper,
            count=count,
            method=method,
            function=args.function or config.defaults.function,
            expression=args.expression,
            variable=args.variable,
            as_json=args.json or config.json_output,
        )
    except (ValueError, ArithmeticError) as exc:
        logger.warning("integration_rejected error=%s", exc)
        print("Error: {}".format(exc), file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
