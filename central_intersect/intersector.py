"""Approximate intersection of two line segments from their most central endpoint.

Intended as a last resort for ill-conditioned intersections (nearly parallel
segments, or an endpoint of one segment lying on or almost on the interior of
the other) where exact methods become unreliable. Taking the endpoint nearest
to the centroid of all four endpoints guarantees the estimate lies in the
envelope of the segments, and returning one of the inputs keeps segment chains
from fragmenting.
"""

from __future__ import annotations

import logging
import sys
from typing import Generic, List, Optional, Sequence, Tuple

import numpy as np

from .config import IntersectorConfig, get_intersector_config
from .coordinates import C, COORDINATE_FACTORY, CoordinateFactory
from .errors import DimensionMismatchError
from .logging_utils import apply_debug_logging
from .segment import LineSegment

logger = logging.getLogger(__name__)


def average(
    points: Sequence[C],
    factory: Optional[CoordinateFactory] = None,
    *,
    config: Optional[IntersectorConfig] = None,
) -> Optional[C]:
    """Return the component-wise mean of *points*.

    An empty sequence yields ``None``; a single point is returned unchanged.
    The dimensionality is taken from the first point.
    """

    if not points:
        return None
    first = points[0]
    if len(points) == 1:
        return first

    cfg = config or get_intersector_config()
    dim = first.component_count
    if cfg.check_dimensions:
        for idx, pt in enumerate(points):
            if pt.component_count != dim:
                raise DimensionMismatchError(dim, pt.component_count, index=idx)

    total = np.zeros(dim, dtype=float)
    for pt in points:
        for i in range(dim):
            total[i] += float(pt[i])
    total /= len(points)

    factory = factory or COORDINATE_FACTORY
    return factory.create(total.tolist())


def find_nearest_point(reference: C, candidates: Sequence[C]) -> Optional[C]:
    """Return the candidate closest to *reference*, or ``None`` if there are none.

    Ties go to the earliest candidate.
    """

    min_dist = sys.float_info.max
    result: Optional[C] = None
    for candidate in candidates:
        dist = reference.distance(candidate)
        if dist < min_dist:
            min_dist = dist
            result = candidate
    return result


class CentralEndpointIntersector(Generic[C]):
    """Picks the endpoint nearest the centroid of two segments' endpoints."""

    def __init__(
        self,
        line0: LineSegment[C],
        line1: LineSegment[C],
        *,
        factory: Optional[CoordinateFactory] = None,
        config: Optional[IntersectorConfig] = None,
    ) -> None:
        self._line0 = line0
        self._line1 = line1
        self._factory = factory or COORDINATE_FACTORY
        self._config = config or get_intersector_config()
        self._int_pt: C = self._compute()

    @classmethod
    def from_points(
        cls,
        p00: C,
        p01: C,
        p10: C,
        p11: C,
        *,
        factory: Optional[CoordinateFactory] = None,
        config: Optional[IntersectorConfig] = None,
    ) -> "CentralEndpointIntersector[C]":
        return cls(LineSegment(p00, p01), LineSegment(p10, p11), factory=factory, config=config)

    @property
    def line0(self) -> LineSegment[C]:
        return self._line0

    @property
    def line1(self) -> LineSegment[C]:
        return self._line1

    @property
    def intersection_point(self) -> C:
        return self._int_pt

    def get_intersection_point(self) -> C:
        return self._int_pt

    def endpoints(self) -> Tuple[C, C, C, C]:
        return self._line0.p0, self._line0.p1, self._line1.p0, self._line1.p1

    def _compute(self) -> C:
        pts: List[C] = list(self.endpoints())
        centroid = average(pts, self._factory, config=self._config)
        nearest = find_nearest_point(centroid, pts)
        if nearest is None:
            # all distances NaN: fall back to the first endpoint
            logger.warning("No finite endpoint distance to centroid %r", centroid)
            nearest = pts[0]
        logger.debug("Central endpoint %r chosen for centroid %r", nearest, centroid)
        return nearest

    def __repr__(self) -> str:
        return (
            f"CentralEndpointIntersector(line0={self._line0!r}, line1={self._line1!r}, "
            f"intersection_point={self._int_pt!r})"
        )


def get_intersection(
    p00: C,
    p01: C,
    p10: C,
    p11: C,
    *,
    factory: Optional[CoordinateFactory] = None,
    config: Optional[IntersectorConfig] = None,
) -> C:
    """Estimate the intersection of segments ``p00-p01`` and ``p10-p11``."""

    intersector = CentralEndpointIntersector.from_points(
        p00, p01, p10, p11, factory=factory, config=config
    )
    return intersector.get_intersection_point()


apply_debug_logging(globals(), logger=logger)


__all__ = [
    "CentralEndpointIntersector",
    "average",
    "find_nearest_point",
    "get_intersection",
]
