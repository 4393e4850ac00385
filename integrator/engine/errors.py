"""Error taxonomy for interval validation and engine lookup."""

from __future__ import annotations


class QuadratureError(ValueError):
    """Base class for rejected integration parameters."""


class InvalidBoundsError(QuadratureError):
    """Raised when the lower limit is not strictly less than the upper limit."""


class InvalidPartitionCountError(QuadratureError):
    """Raised when the number of sub-intervals is not a positive even integer."""


class UnknownEngineError(ValueError):
    """Raised when a quadrature method name is not registered."""
