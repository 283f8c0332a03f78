"""Value objects describing located extrema."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = ["Extremum", "ExtremumKind"]


class ExtremumKind(Enum):
    """Classification of a critical point by the sign of the second derivative."""

    MINIMUM = "minimum"
    MAXIMUM = "maximum"


@dataclass(frozen=True)
class Extremum:
    """A classified critical point.

    Attributes:
        x: Location of the extremum.
        y: Function value at ``x``.
        kind: Whether the point is a minimum or a maximum.
    """

    x: float
    y: float
    kind: ExtremumKind

    @property
    def is_minimum(self) -> bool:
        return self.kind is ExtremumKind.MINIMUM

    @property
    def is_maximum(self) -> bool:
        return self.kind is ExtremumKind.MAXIMUM
