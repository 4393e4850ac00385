"""Definite integrals of one-variable real functions by composite quadrature."""

from .engine import (
    Calculator,
    IntervalPartition,
    InvalidBoundsError,
    InvalidPartitionCountError,
    QuadratureEngine,
    QuadratureError,
    SimpsonRule,
    TrapezoidalRule,
    UnknownEngineError,
)

__version__ = "1.0.0"

__all__ = [
    "Calculator",
    "IntervalPartition",
    "QuadratureEngine",
    "SimpsonRule",
    "TrapezoidalRule",
    "QuadratureError",
    "InvalidBoundsError",
    "InvalidPartitionCountError",
    "UnknownEngineError",
]
