"""Validated integration interval split into equal-width sub-intervals."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Iterator

from .errors import InvalidBoundsError, InvalidPartitionCountError


@dataclass(frozen=True)
class IntervalPartition:
    """Closed interval ``[lower, upper]`` divided into ``count`` sub-intervals.

    All invariants are checked on construction, so an instance that exists is
    always usable by a quadrature engine:

    - ``lower < upper`` (equal, inverted and NaN bounds are rejected);
    - ``count`` is a positive even integer.

    Bounds are checked before the partition count.
    """

    lower: float
    upper: float
    count: int

    def __post_init__(self) -> None:
        if not self.lower < self.upper:
            raise InvalidBoundsError(
                "Lower limit must be less than upper limit (got lower={}, upper={})".format(self.lower, self.upper)
            )
        if isinstance(self.count, bool) or not isinstance(self.count, numbers.Integral):
            raise InvalidPartitionCountError(
                "Number of sub-intervals must be an integer (got {!r})".format(self.count)
            )
        if self.count <= 0:
            raise InvalidPartitionCountError(
                "Number of sub-intervals must be positive (got {})".format(self.count)
            )
        if self.count % 2 != 0:
            raise InvalidPartitionCountError(
                "Number of sub-intervals must be even (got {})".format(self.count)
            )

    @classmethod
    def create(cls, lower: Any, upper: Any, count: Any) -> "IntervalPartition":
        """Builds a partition from raw caller values.

        Args:
            lower: Lower integration limit, anything ``float()`` accepts.
            upper: Upper integration limit, anything ``float()`` accepts.
            count: Number of sub-intervals; must be an even positive integer.

        Returns:
            Validated partition.

        Raises:
            InvalidBoundsError: If a bound is not a real number or ``lower >= upper``.
            InvalidPartitionCountError: If ``count`` is not a positive even integer.
        """
        try:
            lower_value = float(lower)
            upper_value = float(upper)
        except (TypeError, ValueError) as exc:
            raise InvalidBoundsError("Integration limits must be real numbers: {}".format(exc)) from exc
        return cls(lower=lower_value, upper=upper_value, count=count)

    @property
    def step(self) -> float:
        return (self.upper - self.lower) / self.count

    def abscissa(self, index: int) -> float:
        # Endpoints are the exact bounds, never ``lower + i * step``.
        if index == 0:
            return self.lower
        if index == self.count:
            return self.upper
        return self.lower + index * self.step

    def points(self) -> Iterator[float]:
        for index in range(self.count + 1):
            yield self.abscissa(index)
