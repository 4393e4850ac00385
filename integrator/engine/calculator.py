"""Facade composing interval validation with a quadrature strategy."""

from __future__ import annotations

from typing import Any, Optional

from integrator.utils.logger import get_logger

from .partition import IntervalPartition
from .strategies import QuadratureEngine, RealFunction, SimpsonRule, get_engine

logger = get_logger(__name__)


class Calculator:
    """Integrates caller-supplied functions with one fixed quadrature rule.

    The engine is chosen at construction and cannot be swapped afterwards;
    build a new calculator to use a different rule. No per-call state is kept,
    so one instance can serve concurrent callers as long as the integrands are
    themselves safe to call concurrently.
    """

    def __init__(self, engine: Optional[QuadratureEngine] = None) -> None:
        self._engine = engine if engine is not None else SimpsonRule()

    @classmethod
    def for_method(cls, name: str) -> "Calculator":
        return cls(get_engine(name))

    @property
    def engine(self) -> QuadratureEngine:
        return self._engine

    def calculate(self, func: RealFunction, lower: Any, upper: Any, count: Any) -> float:
        """Validates the limits and integrates ``func`` over them.

        Args:
            func: Real function of one real variable.
            lower: Lower integration limit.
            upper: Upper integration limit.
            count: Even, positive number of sub-intervals.

        Returns:
            Approximate value of the definite integral.

        Raises:
            InvalidBoundsError: If ``lower`` is not strictly less than ``upper``.
            InvalidPartitionCountError: If ``count`` is not a positive even integer.
        """
        partition = IntervalPartition.create(lower, upper, count)
        logger.debug(
            "integration_start method=%s lower=%s upper=%s count=%s",
            self._engine.name,
            partition.lower,
            partition.upper,
            partition.count,
        )
        result = self._engine.integrate(func, partition)
        logger.debug("integration_done method=%s result=%r", self._engine.name, result)
        return result

    def __repr__(self) -> str:
        return "Calculator(engine={!r})".format(self._engine)
