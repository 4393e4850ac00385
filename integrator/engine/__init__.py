"""Quadrature core: validated partitions, integration rules and the calculator facade."""

from .calculator import Calculator
from .errors import (
    InvalidBoundsError,
    InvalidPartitionCountError,
    QuadratureError,
    UnknownEngineError,
)
from .partition import IntervalPartition
from .strategies import (
    QuadratureEngine,
    RealFunction,
    SimpsonRule,
    TrapezoidalRule,
    available_engines,
    get_engine,
)

__all__ = [
    "Calculator",
    "IntervalPartition",
    "QuadratureEngine",
    "RealFunction",
    "SimpsonRule",
    "TrapezoidalRule",
    "available_engines",
    "get_engine",
    "QuadratureError",
    "InvalidBoundsError",
    "InvalidPartitionCountError",
    "UnknownEngineError",
]
