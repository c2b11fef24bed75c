from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Tuple

from .coordinates import C, CoordinateLike
from .errors import DimensionMismatchError

Bounds = Tuple[Tuple[float, ...], Tuple[float, ...]]


@dataclass(frozen=True)
class LineSegment(Generic[C]):
    """Ordered pair of endpoints describing one edge."""

    p0: C
    p1: C

    def endpoints(self) -> Tuple[C, C]:
        return self.p0, self.p1

    def length(self) -> float:
        return self.p0.distance(self.p1)

    def reversed(self) -> "LineSegment[C]":
        return LineSegment(self.p1, self.p0)

    def envelope(self) -> Bounds:
        """Return the component-wise ``(lower, upper)`` bounds of the segment."""

        dim = self.p0.component_count
        if self.p1.component_count != dim:
            raise DimensionMismatchError(dim, self.p1.component_count, index=1)
        lower = tuple(min(float(self.p0[i]), float(self.p1[i])) for i in range(dim))
        upper = tuple(max(float(self.p0[i]), float(self.p1[i])) for i in range(dim))
        return lower, upper

    def envelope_contains(self, point: CoordinateLike) -> bool:
        lower, upper = self.envelope()
        if point.component_count != len(lower):
            return False
        return all(lo <= float(point[i]) <= hi for i, (lo, hi) in enumerate(zip(lower, upper)))


__all__ = ["Bounds", "LineSegment"]
