from enum import Enum

import numpy as np

from wktproj.core.geometry import Geometry, GeometryType
from wktproj.core.point import Point


class NumberFormat(Enum):
    """
    How coordinates are rendered.

    CANONICAL always shows a decimal point ("30.0"), which is what parsed
    literals round-trip to. VERBATIM leaves the shortest text of the value
    alone ("30", "-4363323.630289483"), which is how values coming back from
    the reprojection engine are re-emitted.
    """
    CANONICAL = "canonical"
    VERBATIM = "verbatim"


def format_number(value: float, number_format: NumberFormat = NumberFormat.CANONICAL) -> str:
    # Positional, shortest round-trip digits; never exponent notation.
    trim = '0' if number_format is NumberFormat.CANONICAL else '-'
    return np.format_float_positional(float(value), unique=True, trim=trim)


class WktBuilder:
    def __init__(self, number_format: NumberFormat = NumberFormat.CANONICAL):
        """
        Args:
            number_format: Numeric rendering policy for every coordinate.
        """
        self.number_format = number_format

    def build(self, geometry: Geometry) -> str:
        """
        Serializes a Geometry into the canonical template of its variant.
        """
        kind = geometry.geometry_type
        coords = ", ".join(self._format_point(p, kind.has_z) for p in geometry.points)

        if kind is GeometryType.POINT:
            return f"POINT({coords})"
        if kind is GeometryType.POINT_Z:
            return f"POINT Z ({coords})"
        if kind is GeometryType.LINESTRING:
            return f"LINESTRING({coords})"
        if kind is GeometryType.LINESTRING_Z:
            return f"LINESTRING Z ({coords})"
        if kind is GeometryType.POLYGON:
            return f"POLYGON(({coords}))"
        raise ValueError(f"Unknown geometry type: {kind}")

    def _format_point(self, point: Point, with_z: bool) -> str:
        values = (point.x, point.y, point.z) if with_z else (point.x, point.y)
        return " ".join(format_number(v, self.number_format) for v in values)


def build_wkt(geometry: Geometry, number_format: NumberFormat = NumberFormat.CANONICAL) -> str:
    return WktBuilder(number_format).build(geometry)
