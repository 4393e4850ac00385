"""Interchangeable fixed-order quadrature rules."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Dict, List, Type

from .errors import UnknownEngineError
from .partition import IntervalPartition

RealFunction = Callable[[float], float]


class QuadratureEngine(ABC):
    """Stateless integration strategy.

    Implementations evaluate ``func`` once per sample point, endpoints first and
    then the interior in increasing index order. Exceptions raised by ``func``
    propagate unchanged and NaN/Inf values flow into the result as-is. The
    partition is trusted and never re-validated.
    """

    name: str = ""

    @abstractmethod
    def integrate(self, func: RealFunction, partition: IntervalPartition) -> float:
        """Approximates the integral of ``func`` over ``partition``."""

    def __repr__(self) -> str:
        return "{}()".format(type(self).__name__)


class SimpsonRule(QuadratureEngine):
    """Composite Simpson's rule with the textbook 1-4-2-...-2-4-1 weighting."""

    name = "simpson"

    def integrate(self, func: RealFunction, partition: IntervalPartition) -> float:
        count = partition.count
        area = func(partition.abscissa(0)) + func(partition.abscissa(count))

        for i in range(1, count):
            x_val = partition.abscissa(i)
            if i % 2 == 0:
                area += 2.0 * func(x_val)
            else:
                area += 4.0 * func(x_val)

        return area * partition.step / 3.0


class TrapezoidalRule(QuadratureEngine):
    """Composite trapezoidal rule on the same equal-width grid."""

    name = "trapezoidal"

    def integrate(self, func: RealFunction, partition: IntervalPartition) -> float:
        count = partition.count
        area = 0.5 * (func(partition.abscissa(0)) + func(partition.abscissa(count)))

        for i in range(1, count):
            area += func(partition.abscissa(i))

        return area * partition.step


_ENGINES: Dict[str, Type[QuadratureEngine]] = {
    SimpsonRule.name: SimpsonRule,
    TrapezoidalRule.name: TrapezoidalRule,
}


def available_engines() -> List[str]:
    return sorted(_ENGINES)


def get_engine(name: str) -> QuadratureEngine:
    """Instantiates a registered quadrature rule by name.

    Raises:
        UnknownEngineError: If ``name`` is not registered.
    """
    key = str(name or "").strip().lower()
    engine_cls = _ENGINES.get(key)
    if engine_cls is None:
        raise UnknownEngineError(
            "Unknown integration method '{}'. Available: {}".format(name, ", ".join(available_engines()))
        )
    return engine_cls()
