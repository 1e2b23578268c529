import logging
import math
import re
from dataclasses import dataclass
from typing import List, Tuple

from wktproj.core.errors import MalformedCoordinate, UnsupportedFormat
from wktproj.core.geometry import Geometry, GeometryType
from wktproj.core.point import Point

logger = logging.getLogger(__name__)

# Tokens are matched loosely so that "1.2.3" reaches float() and is reported
# as a malformed coordinate instead of an unsupported format.
_TOKEN = r"[0-9.+\-]+"
_XY = rf"{_TOKEN}\s+{_TOKEN}"
_XYZ = rf"{_TOKEN}\s+{_TOKEN}\s+{_TOKEN}"


def _coordinate_list(coordinate: str) -> str:
    return rf"\s*{coordinate}(?:\s*,\s*{coordinate})*\s*"


@dataclass(frozen=True)
class Grammar:
    geometry_type: GeometryType
    pattern: re.Pattern

    @property
    def arity(self) -> int:
        return 3 if self.geometry_type.has_z else 2


# Most specific first: Z forms ahead of their plain counterparts, POLYGON
# ahead of LINESTRING. Tests pin this order.
GRAMMARS: Tuple[Grammar, ...] = (
    Grammar(GeometryType.POINT_Z, re.compile(rf"POINT ?Z ?\((?P<coords>\s*{_XYZ}\s*)\)")),
    Grammar(GeometryType.POINT, re.compile(rf"POINT ?\((?P<coords>\s*{_XY}\s*)\)")),
    Grammar(GeometryType.LINESTRING_Z, re.compile(rf"LINESTRING ?Z ?\((?P<coords>{_coordinate_list(_XYZ)})\)")),
    Grammar(GeometryType.POLYGON, re.compile(rf"POLYGON ?\(\s*\((?P<coords>{_coordinate_list(_XY)})\)\s*\)")),
    Grammar(GeometryType.LINESTRING, re.compile(rf"LINESTRING ?\((?P<coords>{_coordinate_list(_XY)})\)")),
)


class WktParser:
    """
    Recognizes one of the supported WKT variants and extracts its points.

    Each grammar must match the whole (stripped) input; the first grammar in
    GRAMMARS that does wins.
    """

    def __init__(self, grammars: Tuple[Grammar, ...] = GRAMMARS):
        self.grammars = grammars

    def parse(self, text: str) -> Geometry:
        """
        Args:
            text: A WKT literal, e.g. "LINESTRING(30.0 10.0, 10.0 30.0)".

        Returns:
            The parsed Geometry.

        Raises:
            UnsupportedFormat: no grammar matches, or the matched variant has too
                few points (or an open ring) to form a geometry.
            MalformedCoordinate: a coordinate token is not a finite number.
        """
        if not isinstance(text, str):
            raise UnsupportedFormat(str(text), "not a string")

        stripped = text.strip()
        for grammar in self.grammars:
            match = grammar.pattern.fullmatch(stripped)
            if match is None:
                continue

            logger.debug("Matched %s: %.80s", grammar.geometry_type.name, stripped)
            points = self._parse_points(match.group("coords"), grammar.arity, text)
            self._check_shape(grammar.geometry_type, points, text)
            return Geometry(grammar.geometry_type, tuple(points))

        raise UnsupportedFormat(text)

    def _parse_points(self, coords_text: str, arity: int, text: str) -> List[Point]:
        points = []
        for point_index, tuple_text in enumerate(coords_text.split(',')):
            tokens = tuple_text.split()
            values = []
            for axis_index, token in enumerate(tokens):
                try:
                    value = float(token)
                except ValueError:
                    raise MalformedCoordinate(token, (point_index, axis_index), text) from None
                # Overflowing tokens become inf, which no variant can re-emit.
                if not math.isfinite(value):
                    raise MalformedCoordinate(token, (point_index, axis_index), text)
                values.append(value)

            if arity == 3:
                points.append(Point(x=values[0], y=values[1], z=values[2]))
            else:
                points.append(Point(x=values[0], y=values[1]))
        return points

    def _check_shape(self, geometry_type: GeometryType, points: List[Point], text: str):
        # Reported as a format problem so the Geometry constructor never sees it.
        if len(points) < geometry_type.min_points:
            raise UnsupportedFormat(
                text,
                f"{geometry_type.keyword} requires at least {geometry_type.min_points} points, got {len(points)}"
            )
        if geometry_type is GeometryType.POLYGON and points[0] != points[-1]:
            raise UnsupportedFormat(text, "POLYGON ring is not closed")


def parse_wkt(text: str) -> Geometry:
    return WktParser().parse(text)
