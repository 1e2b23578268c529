from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Tuple

from .errors import GeometryInvariantViolation
from .point import Point


class GeometryType(Enum):
    """
    The WKT variants handled by wktproj.
    Each value is (keyword, has_z, min_points).
    """
    POINT = ("POINT", False, 1)
    POINT_Z = ("POINT", True, 1)
    LINESTRING = ("LINESTRING", False, 2)
    LINESTRING_Z = ("LINESTRING", True, 2)
    POLYGON = ("POLYGON", False, 4)

    @property
    def keyword(self) -> str:
        return self.value[0]

    @property
    def has_z(self) -> bool:
        return self.value[1]

    @property
    def min_points(self) -> int:
        return self.value[2]

    @property
    def is_single_point(self) -> bool:
        return self.keyword == "POINT"


@dataclass(frozen=True)
class Geometry:
    """
    A tagged, immutable sequence of points.
    The constructor enforces the per-variant invariants, so a Geometry that
    exists is always a valid one.
    """
    geometry_type: GeometryType
    points: Tuple[Point, ...]

    def __post_init__(self):
        # frozen=True: normalise lists to tuples through object.__setattr__
        object.__setattr__(self, "points", tuple(self.points))
        self._validate()

    def _validate(self):
        kind = self.geometry_type
        count = len(self.points)

        if kind.is_single_point and count != 1:
            raise GeometryInvariantViolation(f"{kind.name} requires exactly 1 point, got {count}")
        if count < kind.min_points:
            raise GeometryInvariantViolation(
                f"{kind.name} requires at least {kind.min_points} points, got {count}"
            )

        for index, point in enumerate(self.points):
            if point.has_z != kind.has_z:
                expected = "a z component" if kind.has_z else "no z component"
                raise GeometryInvariantViolation(
                    f"{kind.name} point {index} must have {expected}: {point}"
                )

        if kind is GeometryType.POLYGON and self.points[0] != self.points[-1]:
            raise GeometryInvariantViolation(
                f"POLYGON ring is not closed: {self.points[0]} != {self.points[-1]}"
            )

    def with_points(self, points: Iterable[Point]) -> "Geometry":
        """Returns a new Geometry of the same variant holding `points`."""
        return Geometry(self.geometry_type, tuple(points))

    @property
    def has_z(self) -> bool:
        return self.geometry_type.has_z

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)
