"""Coordinate abstraction consumed by the endpoint intersector.

The intersector only needs a narrow view of a point: how many components it
has, indexed component access, Euclidean distance to another point, and a way
to build new points from a raw component vector. Callers may supply any type
satisfying :class:`CoordinateLike` together with a matching
:class:`CoordinateFactory`; :class:`Coordinate` is the stock implementation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Protocol, Sequence, Tuple, TypeVar, runtime_checkable

import numpy as np

from .errors import DimensionMismatchError

C = TypeVar("C", bound="CoordinateLike")
C_co = TypeVar("C_co", bound="CoordinateLike", covariant=True)


@runtime_checkable
class CoordinateLike(Protocol):
    """Minimal read-only point contract used by the intersector."""

    @property
    def component_count(self) -> int: ...

    def __getitem__(self, index: int) -> float: ...

    def distance(self, other: "CoordinateLike") -> float: ...


@runtime_checkable
class CoordinateFactory(Protocol[C_co]):
    """Builds coordinates of one concrete type from a component vector."""

    def create(self, components: Sequence[float]) -> C_co: ...


def as_array(coord: CoordinateLike) -> np.ndarray:
    """Return the components of *coord* as a float64 vector."""

    return np.array([float(coord[i]) for i in range(coord.component_count)], dtype=float)


@dataclass(frozen=True, order=True)
class Coordinate:
    """Immutable point with float components, ordered lexicographically."""

    components: Tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "components", tuple(float(v) for v in self.components))

    @classmethod
    def of(cls, *values: float) -> "Coordinate":
        return cls(tuple(values))

    @property
    def component_count(self) -> int:
        return len(self.components)

    @property
    def x(self) -> float:
        return self.components[0]

    @property
    def y(self) -> float:
        return self.components[1]

    def __getitem__(self, index: int) -> float:
        return self.components[index]

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[float]:
        return iter(self.components)

    def to_array(self) -> np.ndarray:
        return np.asarray(self.components, dtype=float)

    def distance(self, other: CoordinateLike) -> float:
        """Euclidean distance to *other*, which must share dimensionality."""

        if other.component_count != self.component_count:
            raise DimensionMismatchError(self.component_count, other.component_count)
        return float(np.linalg.norm(self.to_array() - as_array(other)))

    def __repr__(self) -> str:
        return f"Coordinate{self.components!r}"


class DefaultCoordinateFactory:
    """Factory producing :class:`Coordinate` values."""

    def create(self, components: Sequence[float]) -> Coordinate:
        return Coordinate(tuple(components))

    def __repr__(self) -> str:
        return "DefaultCoordinateFactory()"


COORDINATE_FACTORY = DefaultCoordinateFactory()


__all__ = [
    "C",
    "CoordinateLike",
    "CoordinateFactory",
    "Coordinate",
    "DefaultCoordinateFactory",
    "COORDINATE_FACTORY",
    "as_array",
]
