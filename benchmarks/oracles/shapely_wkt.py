from typing import List

from shapely import wkt
from shapely.geometry import LineString, Point as ShapelyPoint, Polygon

from wktproj.core.geometry import Geometry, GeometryType
from wktproj.core.point import Point


class ShapelyWktOracle:
    """
    Reference WKT reader built on Shapely/GEOS.
    Produces the same Geometry model as WktParser so the two can be compared
    point for point on literals both understand.
    """

    def parse(self, text: str) -> Geometry:
        shape = wkt.loads(text)

        if isinstance(shape, ShapelyPoint):
            kind = GeometryType.POINT_Z if shape.has_z else GeometryType.POINT
            return Geometry(kind, self._points(shape.coords, shape.has_z))

        if isinstance(shape, Polygon):
            if shape.has_z:
                raise ValueError("POLYGON Z is not part of the supported subset")
            if len(shape.interiors) > 0:
                raise ValueError("Polygons with holes are not part of the supported subset")
            return Geometry(GeometryType.POLYGON, self._points(shape.exterior.coords, False))

        if isinstance(shape, LineString):
            kind = GeometryType.LINESTRING_Z if shape.has_z else GeometryType.LINESTRING
            return Geometry(kind, self._points(shape.coords, shape.has_z))

        raise ValueError(f"Unsupported geometry type: {shape.geom_type}")

    def _points(self, coords, has_z: bool) -> List[Point]:
        if has_z:
            return [Point(x=float(x), y=float(y), z=float(z)) for x, y, z in coords]
        return [Point(x=float(c[0]), y=float(c[1])) for c in coords]
