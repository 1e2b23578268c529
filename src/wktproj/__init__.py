"""
wktproj: a Well-Known Text subset parser and serializer, with a protocol
adapter for handing points to an external reprojection engine.
"""
from wktproj.core import (
    Geometry,
    GeometryInvariantViolation,
    GeometryType,
    MalformedCoordinate,
    Point,
    ReprojectionFailed,
    UnsupportedFormat,
    WktprojError,
)
from wktproj.wkt import NumberFormat, WktBuilder, WktParser, build_wkt, parse_wkt
from wktproj.reprojection import (
    AxisOrder,
    Cs2csReprojector,
    ReprojectionConfig,
    ReprojectionGateway,
    Reprojector,
)
from wktproj.pipeline import ReprojectedStreamWrapper, reproject_wkt

__version__ = "0.1.0"
