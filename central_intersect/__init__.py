from .config import IntersectorConfig, get_intersector_config, set_intersector_config
from .coordinates import (
    COORDINATE_FACTORY,
    Coordinate,
    CoordinateFactory,
    CoordinateLike,
    DefaultCoordinateFactory,
    as_array,
)
from .errors import DimensionMismatchError, IntersectorError
from .intersector import CentralEndpointIntersector, average, find_nearest_point, get_intersection
from .segment import LineSegment

__all__ = [
    'get_intersection',
    'CentralEndpointIntersector',
    'average',
    'find_nearest_point',
    'Coordinate',
    'CoordinateLike',
    'CoordinateFactory',
    'DefaultCoordinateFactory',
    'COORDINATE_FACTORY',
    'as_array',
    'LineSegment',
    'IntersectorError',
    'DimensionMismatchError',
    'IntersectorConfig',
    'get_intersector_config',
    'set_intersector_config',
]
